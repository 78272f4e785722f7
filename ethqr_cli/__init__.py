"""
Command line tools for the EthQR SDK.
"""
