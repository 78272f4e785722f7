"""
Property-based tests for the EthQR SDK.

These tests verify that properties hold true across many random inputs.
"""
import pytest
from hypothesis import assume, given, settings, strategies as st

from ethqr_sdk import PaymentRequestValidationError, decode_uri, encode_uri, validate_payload

# Define reasonable strategies for our inputs
address_strategy = st.text(alphabet="0123456789abcdefABCDEF", min_size=40, max_size=40).map(lambda h: "0x" + h)
amount_strategy = st.one_of(
    st.integers(min_value=0, max_value=2 ** 256 - 1),
    st.integers(min_value=0, max_value=10 ** 60).map(str),
)
gas_strategy = st.integers(min_value=0, max_value=30_000_000)
chain_id_strategy = st.integers(min_value=1, max_value=2 ** 32)
identifier_strategy = st.from_regex(r"[A-Za-z0-9_-]{1,20}", fullmatch=True)


@st.composite
def basic_payloads(draw):
    payload = {"to": draw(address_strategy), "amount": draw(amount_strategy)}
    if draw(st.booleans()):
        payload["from"] = draw(address_strategy)
    if draw(st.booleans()):
        payload["gas"] = draw(gas_strategy)
    if draw(st.booleans()):
        payload["chainId"] = draw(chain_id_strategy)
    return payload


@st.composite
def erc20_payloads(draw):
    mode, names = draw(st.sampled_from([
        ("erc20__transfer", ["to", "amount"]),
        ("erc20__approve", ["spender", "amount"]),
        ("erc20__transferFrom", ["from", "to", "amount"]),
    ]))
    payload = {"to": draw(address_strategy), "mode": mode}
    if draw(st.booleans()):
        payload["chainId"] = draw(chain_id_strategy)
    chosen = draw(st.lists(st.sampled_from(names), min_size=1, unique=True))
    payload["argsDefaults"] = [
        {"name": name, "amount": draw(amount_strategy if name == "amount" else address_strategy)}
        for name in chosen
    ]
    return payload


@settings(max_examples=100)
@given(payload=basic_payloads())
def test_basic_round_trip(payload):
    """to and amount survive encode/decode exactly, as decimal strings"""
    decoded = decode_uri(encode_uri(payload))
    assert decoded["to"] == payload["to"]
    assert decoded["amount"] == str(payload["amount"])
    for key in ("from", "gas", "chainId"):
        assert decoded.get(key) == payload.get(key)


@settings(max_examples=100)
@given(payload=erc20_payloads())
def test_explicit_mode_round_trip(payload):
    assert decode_uri(encode_uri(payload)) == payload


@settings(max_examples=50)
@given(
    name=identifier_strategy,
    payable=st.booleans(),
    arg_names=st.lists(identifier_strategy, min_size=1, max_size=5, unique=True),
)
def test_contract_function_round_trip(name, payable, arg_names):
    payload = {
        "to": "0x" + "c" * 40,
        "mode": "contract_function",
        "functionSignature": {
            "name": name,
            "payable": payable,
            "args": [{"name": arg, "type": "uint256"} for arg in arg_names],
        },
        "argsDefaults": [{"name": arg_names[0], "amount": 1}],
    }
    assert decode_uri(encode_uri(payload)) == payload


@settings(max_examples=100)
@given(digits=st.text(alphabet="0123456789", min_size=16, max_size=80))
def test_amount_precision(digits):
    """Amounts beyond float precision are never truncated or rendered in exponent form"""
    amount = str(int(digits))
    uri = encode_uri({"to": "0x" + "d" * 40, "amount": amount})
    assert uri.endswith(f"?amount={amount}")
    assert decode_uri(uri)["amount"] == amount


@settings(max_examples=100)
@given(key=st.from_regex(r"[a-z][A-Za-z_]{0,15}", fullmatch=True))
def test_unknown_keys_rejected(key):
    assume(key not in {"to", "from", "amount", "gas", "chainId"})
    with pytest.raises(PaymentRequestValidationError) as exc_info:
        validate_payload({"to": "0x" + "e" * 40, key: 1})
    assert exc_info.value.field == key
