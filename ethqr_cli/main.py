"""
Command line interface for encoding, decoding and inspecting payment requests.
"""
import json
import logging
import os
import sys
from typing import Any, Dict, List, NoReturn, Optional

import typer
from web3 import Web3

from ethqr_sdk import (
    NetworkConfig,
    NetworkConfigError,
    PaymentRequestValidationError,
    __version__,
    decode_uri,
    encode_uri,
    parse_payment_request,
)
from ethqr_sdk.validators import format_amount

app = typer.Typer(help="Encode, decode and inspect Ethereum payment request URIs.", no_args_is_help=True)

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "ETHQR_LOG_LEVEL"


def should_use_color(no_color: bool = False) -> bool:
    """Colour only when stdout is a terminal and NO_COLOR is not set"""
    if no_color or os.environ.get("NO_COLOR"):
        return False
    return sys.stdout.isatty()


def _fail(message: str, no_color: bool = False) -> NoReturn:
    if should_use_color(no_color):
        typer.secho(message, fg=typer.colors.RED, err=True)
    else:
        typer.echo(message, err=True)
    raise typer.Exit(code=1)


def _read_text(value: str) -> str:
    if value == "-":
        return sys.stdin.read().strip()
    return value


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"ethqr {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool = typer.Option(False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"),
):
    """Encode, decode and inspect Ethereum payment request URIs."""
    level = "DEBUG" if verbose else os.environ.get(LOG_LEVEL_ENV)
    if level:
        logging.basicConfig(level=level.upper(), format="%(levelname)s %(name)s: %(message)s")


@app.command()
def encode(
    payload: str = typer.Argument("-", help="Payment request JSON object, or '-' to read stdin"),
    network: Optional[str] = typer.Option(None, "--network", "-n", help="Set chainId from a named network"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable coloured output"),
):
    """Encode a payment request given as a JSON object."""
    try:
        data = json.loads(_read_text(payload))
    except ValueError as e:
        _fail(f"Payload is not valid JSON: {e}", no_color)

    if not isinstance(data, dict):
        _fail("Payload must be a JSON object", no_color)

    if network:
        try:
            data["chainId"] = NetworkConfig.get_chain_id(network)
        except NetworkConfigError as e:
            _fail(str(e), no_color)
        logger.debug(f"Using chainId {data['chainId']} of network {network}")

    try:
        typer.echo(encode_uri(data))
    except PaymentRequestValidationError as e:
        _fail(f"Invalid payment request: {e}", no_color)


@app.command()
def decode(
    text: str = typer.Argument(..., help="Encoded payment request, or '-' to read stdin"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable coloured output"),
):
    """Decode a payment request and print it as JSON."""
    try:
        payload = decode_uri(_read_text(text))
    except PaymentRequestValidationError as e:
        _fail(f"Invalid payment request: {e}", no_color)
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@app.command()
def validate(
    text: str = typer.Argument(..., help="Encoded payment request, or '-' to read stdin"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable coloured output"),
):
    """Check that an encoded payment request is valid."""
    try:
        decode_uri(_read_text(text))
    except PaymentRequestValidationError as e:
        _fail(f"invalid: {e}", no_color)
    if should_use_color(no_color):
        typer.secho("valid", fg=typer.colors.GREEN)
    else:
        typer.echo("valid")


def describe_payload(payload: Dict[str, Any]) -> List[str]:
    """
    Build a human-readable summary of a validated payload

    Args:
        payload: Payload returned by ``decode_uri``

    Returns:
        Summary lines
    """
    request = parse_payment_request(payload)
    mode = request.mode.value if request.mode else "basic transfer"
    lines = [f"Mode:     {mode}", f"To:       {Web3.to_checksum_address(request.to)}"]

    if request.from_address is not None:
        lines.append(f"From:     {Web3.to_checksum_address(request.from_address)}")
    if request.amount is not None:
        wei = int(format_amount(request.amount))
        lines.append(f"Amount:   {wei} wei ({Web3.from_wei(wei, 'ether')} ether)")
    if request.gas is not None:
        lines.append(f"Gas:      {request.gas}")
    if request.chain_id is not None:
        name = NetworkConfig.find_network_name(request.chain_id)
        lines.append(f"Chain ID: {request.chain_id}" + (f" ({name})" if name else ""))

    signature = getattr(request, "function_signature", None)
    if signature is not None:
        args = ", ".join(f"{arg.type} {arg.name}" for arg in signature.args or ())
        payable = " payable" if signature.payable else ""
        lines.append(f"Function: {signature.name}({args}){payable}")

    for default in getattr(request, "args_defaults", None) or ():
        lines.append(f"Default:  {default.name} = {default.amount}")

    return lines


@app.command()
def describe(
    text: str = typer.Argument(..., help="Encoded payment request, or '-' to read stdin"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable coloured output"),
):
    """Print a human-readable summary of an encoded payment request."""
    try:
        payload = decode_uri(_read_text(text))
    except PaymentRequestValidationError as e:
        _fail(f"Invalid payment request: {e}", no_color)
    for line in describe_payload(payload):
        typer.echo(line)


@app.command()
def networks():
    """List the configured networks and their chain ids."""
    try:
        registry = NetworkConfig.load_networks()
    except NetworkConfigError as e:
        _fail(str(e))
    for name, config in sorted(registry.items()):
        typer.echo(f"{name:<20} {config.get('chainId')}")


if __name__ == "__main__":
    app()
