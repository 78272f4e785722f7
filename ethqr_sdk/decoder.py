"""
Payment request decoder.

Decoding runs in two stages. ``read_candidate`` turns text into a candidate
payload (JSON first, then the legacy ``ethereum:`` URI form) and reports which
stage produced it. ``decode_uri`` then validates the candidate, so text that
neither stage recognises fails validation on the missing ``to`` address.
"""
import json
import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional

from .encoder import URI_SCHEME
from .schema import validate_payload
from .validators import MAX_AMOUNT_DIGITS, format_amount, is_valid_address, is_valid_amount

logger = logging.getLogger(__name__)

# ``ethereum:`` plus a 42 character address
ADDRESS_END = len(URI_SCHEME) + 42

_LEADING_INT = re.compile(r"\s*([+-]?([0-9]+))")
_SEGMENT_SEPARATOR = re.compile(r"[?&]")


class CandidateSource(str, Enum):
    """Decode stage that produced a candidate payload"""
    JSON = "json"
    LEGACY_URI = "legacy_uri"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class DecodedCandidate:
    """
    Unvalidated result of reading encoded text.

    Attributes:
        source: Which decode stage produced the payload
        payload: Parsed value; None when the text was not recognised
    """
    source: CandidateSource
    payload: Any = None


def _parse_int(text: str) -> Any:
    # leading-integer parse; unparseable or over-long text is kept so validation names it
    match = _LEADING_INT.match(text)
    if match is None or len(match.group(2)) > MAX_AMOUNT_DIGITS:
        return text
    return int(match.group(1))


def _parse_amount(text: str) -> Any:
    return format_amount(text) if is_valid_amount(text) else text


LEGACY_PARAMS: Dict[str, Callable[[str], Any]] = {
    "gas": _parse_int,
    "amount": _parse_amount,
    "from": lambda text: text,
    "chainId": _parse_int,
}


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def parse_legacy_uri(text: str) -> Optional[Dict[str, Any]]:
    """
    Parse the legacy basic-transfer URI form

    Args:
        text: Encoded string

    Returns:
        Candidate payload, or None if the text lacks the ``ethereum:`` scheme
    """
    if not text.startswith(URI_SCHEME):
        return None

    result: Dict[str, Any] = {}
    address = text[len(URI_SCHEME):ADDRESS_END]
    if len(text) >= ADDRESS_END and is_valid_address(address):
        result["to"] = address

    if len(text) > ADDRESS_END:
        segments = _SEGMENT_SEPARATOR.split(text[ADDRESS_END:])[1:]
        for segment in segments:
            key, _, value = segment.partition("=")
            convert = LEGACY_PARAMS.get(key)
            if convert is not None:
                result[key] = convert(value)

    return result


def read_candidate(text: Any) -> DecodedCandidate:
    """
    Read encoded text into an unvalidated candidate payload

    Args:
        text: Encoded payment request

    Returns:
        DecodedCandidate tagged with the stage that recognised the text
    """
    if not isinstance(text, str):
        return DecodedCandidate(CandidateSource.UNRECOGNIZED)

    try:
        payload = json.loads(text, parse_constant=_reject_constant)
        return DecodedCandidate(CandidateSource.JSON, payload)
    except (ValueError, RecursionError):
        logger.debug("Text is not JSON, trying legacy URI format")

    payload = parse_legacy_uri(text)
    if payload is None:
        return DecodedCandidate(CandidateSource.UNRECOGNIZED)
    return DecodedCandidate(CandidateSource.LEGACY_URI, payload)


def decode_uri(text: str) -> Dict[str, Any]:
    """
    Decode and validate an encoded payment request

    Args:
        text: ``ethereum:`` URI or JSON produced by ``encode_uri``

    Returns:
        The validated payload as a dictionary

    Raises:
        PaymentRequestValidationError: If the decoded payload is invalid or the
            text is not recognised
    """
    candidate = read_candidate(text)
    logger.debug(f"Decoded candidate from {candidate.source.value} stage")
    validate_payload(candidate.payload)
    return candidate.payload
