"""
EthQR SDK - encode, decode and validate Ethereum payment requests.

Basic transfers are encoded as ``ethereum:`` URIs, requests with an explicit
mode (contract calls and ERC-20 operations) as JSON. Both forms are validated
against a strict per-mode schema before they are returned.
"""
from .version import __version__
from .models import (
    PaymentMode,
    PaymentRequest,
    BasicTransfer,
    ContractFunctionRequest,
    Erc20TransferRequest,
    Erc20ApproveRequest,
    Erc20TransferFromRequest,
    FunctionSignature,
    FunctionArgument,
    ArgumentDefault,
)
from .exceptions import EthQRError, PaymentRequestValidationError, UnsupportedModeError, NetworkConfigError
from .schema import parse_payment_request, validate_payload
from .encoder import encode_uri
from .decoder import decode_uri
from .config import NetworkConfig

__all__ = [
    "__version__",
    "PaymentMode",
    "PaymentRequest",
    "BasicTransfer",
    "ContractFunctionRequest",
    "Erc20TransferRequest",
    "Erc20ApproveRequest",
    "Erc20TransferFromRequest",
    "FunctionSignature",
    "FunctionArgument",
    "ArgumentDefault",
    "EthQRError",
    "PaymentRequestValidationError",
    "UnsupportedModeError",
    "NetworkConfigError",
    "parse_payment_request",
    "validate_payload",
    "encode_uri",
    "decode_uri",
    "NetworkConfig",
]
