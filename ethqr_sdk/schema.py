"""
Schema validation for payment request payloads.

``parse_payment_request`` selects the model for the payload's mode and
translates the first pydantic violation into a PaymentRequestValidationError.
"""
import logging
from typing import Any, Dict, Mapping, Optional, Type

from pydantic import ValidationError

from .exceptions import PaymentRequestValidationError, UnsupportedModeError
from .models import (
    BasicTransfer,
    ContractFunctionRequest,
    Erc20ApproveRequest,
    Erc20TransferFromRequest,
    Erc20TransferRequest,
    PaymentMode,
    PaymentRequest,
)

logger = logging.getLogger(__name__)

SCHEMAS: Dict[Optional[str], Type[PaymentRequest]] = {
    None: BasicTransfer,
    PaymentMode.CONTRACT_FUNCTION.value: ContractFunctionRequest,
    PaymentMode.ERC20_TRANSFER.value: Erc20TransferRequest,
    PaymentMode.ERC20_APPROVE.value: Erc20ApproveRequest,
    PaymentMode.ERC20_TRANSFER_FROM.value: Erc20TransferFromRequest,
}


def schema_for_mode(mode: Any) -> Type[PaymentRequest]:
    """
    Get the model class governing a mode

    Args:
        mode: None for a basic transfer, a PaymentMode or its string value

    Returns:
        The pydantic model class for the mode

    Raises:
        UnsupportedModeError: If the mode is not recognised
    """
    if isinstance(mode, PaymentMode):
        mode = mode.value
    if mode is not None and not isinstance(mode, str):
        raise UnsupportedModeError(mode)
    schema = SCHEMAS.get(mode)
    if schema is None:
        raise UnsupportedModeError(mode)
    return schema


def parse_payment_request(payload: Any) -> PaymentRequest:
    """
    Validate a payload and return its typed representation

    Args:
        payload: Candidate payment request (normally a dict)

    Returns:
        The validated model for the payload's mode

    Raises:
        PaymentRequestValidationError: On the first violation found
    """
    if not isinstance(payload, Mapping):
        raise PaymentRequestValidationError("to", None, "is required, payload is not an object")

    data = dict(payload)
    mode = data.get("mode")
    schema = schema_for_mode(mode)
    if isinstance(mode, PaymentMode):
        data["mode"] = mode.value

    logger.debug(f"Validating payload against {schema.__name__}")
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        raise _translate_error(schema, e) from None


def validate_payload(payload: Any) -> None:
    """
    Check a payload against the schema of its mode

    Raises:
        PaymentRequestValidationError: If the payload is invalid
    """
    parse_payment_request(payload)


def _translate_error(schema: Type[PaymentRequest], exc: ValidationError) -> PaymentRequestValidationError:
    errors = exc.errors(include_url=False)
    # Allow-list violations take precedence over format violations
    error = next((err for err in errors if err["type"] == "extra_forbidden"), errors[0])

    loc = error.get("loc", ())
    field = ".".join(str(part) for part in loc) or "payload"
    value = None if error["type"] == "missing" else error.get("input")

    if error["type"] == "extra_forbidden":
        if len(loc) == 1:
            allowed = ", ".join(schema.allowed_fields())
            reason = f"is not allowed for this mode (allowed properties: {allowed})"
        else:
            reason = "is not an allowed property"
    elif error["type"] == "missing":
        reason = "is required"
    elif error["type"] == "value_error":
        reason = str(error["ctx"]["error"])
    else:
        reason = error["msg"]

    return PaymentRequestValidationError(field, value, reason)
