"""
Payment request encoder.

Basic transfers become ``ethereum:<to>?from=..&amount=..&gas=..&chainId=..``
URIs; requests with an explicit mode become compact JSON of the whole payload.
"""
import json
import logging
from decimal import Decimal
from typing import Any, List, Mapping

from .exceptions import PaymentRequestValidationError
from .schema import parse_payment_request
from .validators import format_amount, is_valid_chain_id

logger = logging.getLogger(__name__)

URI_SCHEME = "ethereum:"

# Query parameters of a basic transfer URI, in emission order
BASIC_TRANSFER_PARAMS = ("from", "amount", "gas", "chainId")


def encode_uri(payload: Mapping[str, Any]) -> str:
    """
    Validate and encode a payment request

    Args:
        payload: Payment request in wire field names

    Returns:
        ``ethereum:`` URI for a basic transfer, JSON for any explicit mode

    Raises:
        PaymentRequestValidationError: If the payload is invalid
    """
    request = parse_payment_request(payload)

    if request.mode is None:
        uri = _encode_basic_transfer(payload)
        logger.debug(f"Encoded basic transfer to {payload['to']}")
        return uri

    logger.debug(f"Encoded {request.mode.value} request as JSON")
    try:
        return json.dumps(dict(payload), separators=(",", ":"), ensure_ascii=False, default=_json_default)
    except (TypeError, ValueError, RecursionError) as e:
        # every other field is already bounded, only argument default amounts are free-form
        raise PaymentRequestValidationError(
            "argsDefaults", payload.get("argsDefaults"), f"cannot be serialized as JSON ({e})"
        ) from e


def _encode_basic_transfer(payload: Mapping[str, Any]) -> str:
    params: List[str] = []
    for name in BASIC_TRANSFER_PARAMS:
        value = payload.get(name)
        if value is None:
            continue
        if name == "amount":
            value = format_amount(value)
        elif name == "chainId" and not is_valid_chain_id(value):
            continue
        params.append(f"{name}={value}")

    return f"{URI_SCHEME}{payload['to']}?{'&'.join(params)}"


def _json_default(value: Any) -> Any:
    # integral Decimals become JSON integers, anything else keeps its exact text
    if isinstance(value, Decimal):
        if value.is_finite() and value == value.to_integral_value():
            return int(value)
        return str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
