"""
Exceptions for the EthQR SDK.
"""
from typing import Any, Optional


def _format_value(value: Any) -> str:
    try:
        return repr(value)
    except (ValueError, RecursionError):
        # integers past the str conversion limit, or structures nested too deep
        return f"<unprintable {type(value).__name__}>"


class EthQRError(Exception):
    """Base exception for all EthQR SDK errors."""
    pass


class PaymentRequestValidationError(EthQRError):
    """
    Raised when a payment request payload does not match its schema.

    Attributes:
        field: Dotted path of the offending field, in wire names
            (e.g. ``functionSignature.args.0.type``)
        value: The rejected value (``None`` when the field is missing)
        reason: Human-readable description of the violation
    """

    def __init__(self, field: str, value: Any, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f'Property "{field}" {reason}: {_format_value(value)}')


class UnsupportedModeError(PaymentRequestValidationError):
    """Raised when a payload names a mode outside the supported set."""

    def __init__(self, value: Any, reason: Optional[str] = None):
        super().__init__("mode", value, reason or "is not a supported payment request mode")


class NetworkConfigError(EthQRError, ValueError):
    """Raised when a network name is unknown or the network registry is unreadable."""
    pass
