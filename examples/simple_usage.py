#!/usr/bin/env python3
"""
Simple example of using the EthQR SDK.
"""
import os

from ethqr_sdk import NetworkConfig, PaymentRequestValidationError, decode_uri, encode_uri


def main():
    """
    Demonstrate basic usage of the SDK.

    This example shows how to:
    1. Encode a plain value transfer as an ethereum: URI
    2. Encode an ERC-20 transfer as JSON
    3. Decode both back and handle an invalid request
    """
    # Read configuration from environment
    RECIPIENT = os.environ.get("RECIPIENT", "0x" + "a" * 40)
    TOKEN_CONTRACT = os.environ.get("TOKEN_CONTRACT", "0x" + "b" * 40)
    NETWORK = os.environ.get("NETWORK", "sepolia")

    chain_id = NetworkConfig.get_chain_id(NETWORK)

    # 1 ETH, expressed in wei
    transfer = {"to": RECIPIENT, "amount": "1000000000000000000", "chainId": chain_id}
    uri = encode_uri(transfer)
    print(f"Basic transfer URI: {uri}")
    print(f"Decoded: {decode_uri(uri)}")

    token_transfer = {
        "to": TOKEN_CONTRACT,
        "mode": "erc20__transfer",
        "chainId": chain_id,
        "argsDefaults": [
            {"name": "to", "amount": RECIPIENT},
            {"name": "amount", "amount": "250000000"},
        ],
    }
    encoded = encode_uri(token_transfer)
    print(f"ERC-20 transfer payload: {encoded}")
    print(f"Decoded: {decode_uri(encoded)}")

    try:
        encode_uri({"to": RECIPIENT, "amount": "0.5"})
    except PaymentRequestValidationError as e:
        print(f"Rejected: {e} (field={e.field})")


if __name__ == "__main__":
    main()
