"""
Pytest fixtures for the EthQR SDK tests.
"""
import pytest

from ethqr_sdk.config import NetworkConfig

# Constants for testing
TEST_TO = "0x" + "a" * 40
TEST_FROM = "0x" + "b" * 40
TEST_SPENDER = "0x1234567890123456789012345678901234567890"
BIG_AMOUNT = "123456789012345678901234567890"


@pytest.fixture(autouse=True)
def _reset_network_cache():
    """Every test starts with an empty network registry cache."""
    NetworkConfig._networks_cache = None
    yield
    NetworkConfig._networks_cache = None


@pytest.fixture
def basic_payload():
    """A basic transfer carrying every optional field"""
    return {
        "to": TEST_TO,
        "from": TEST_FROM,
        "amount": "1000000000000000000",
        "gas": 21000,
        "chainId": 1,
    }


@pytest.fixture
def contract_payload():
    """A contract_function request with arguments and defaults"""
    return {
        "to": TEST_TO,
        "mode": "contract_function",
        "functionSignature": {
            "name": "myFunc",
            "payable": False,
            "args": [
                {"name": "recipient", "type": "address"},
                {"name": "value", "type": "uint256"},
            ],
        },
        "argsDefaults": [
            {"name": "recipient", "amount": TEST_SPENDER},
            {"name": "value", "amount": 100},
        ],
        "gas": 100000,
        "chainId": 11155111,
    }


@pytest.fixture
def erc20_transfer_payload():
    """An erc20__transfer request with defaults for both built-in arguments"""
    return {
        "to": TEST_TO,
        "mode": "erc20__transfer",
        "argsDefaults": [
            {"name": "to", "amount": TEST_FROM},
            {"name": "amount", "amount": BIG_AMOUNT},
        ],
    }
