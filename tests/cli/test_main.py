"""
Tests for the ethqr command line interface.
"""
import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner
from web3 import Web3

from ethqr_cli.main import app, describe_payload, should_use_color
from conftest import BIG_AMOUNT, TEST_FROM, TEST_TO

runner = CliRunner()


def test_encode_basic(basic_payload):
    result = runner.invoke(app, ["encode", json.dumps(basic_payload)])
    assert result.exit_code == 0
    assert result.stdout.strip() == (
        f"ethereum:{TEST_TO}?from={TEST_FROM}&amount=1000000000000000000&gas=21000&chainId=1"
    )


def test_encode_from_stdin(erc20_transfer_payload):
    result = runner.invoke(app, ["encode", "-"], input=json.dumps(erc20_transfer_payload))
    assert result.exit_code == 0
    assert json.loads(result.stdout) == erc20_transfer_payload


def test_encode_with_network():
    result = runner.invoke(app, ["encode", json.dumps({"to": TEST_TO}), "--network", "sepolia"])
    assert result.exit_code == 0
    assert result.stdout.strip() == f"ethereum:{TEST_TO}?chainId=11155111"


def test_encode_unknown_network():
    result = runner.invoke(app, ["encode", json.dumps({"to": TEST_TO}), "--network", "nowhere", "--no-color"])
    assert result.exit_code == 1
    assert "nowhere" in result.output


def test_encode_invalid_payload():
    result = runner.invoke(app, ["encode", json.dumps({"to": TEST_TO, "extra": 1}), "--no-color"])
    assert result.exit_code == 1
    assert "extra" in result.output


@pytest.mark.parametrize("payload", ["{not json", "[1, 2]"])
def test_encode_rejects_non_objects(payload):
    result = runner.invoke(app, ["encode", payload, "--no-color"])
    assert result.exit_code == 1


def test_decode_legacy_uri():
    result = runner.invoke(app, ["decode", f"ethereum:{TEST_TO}?gas=21000"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"to": TEST_TO, "gas": 21000}


def test_decode_failure():
    result = runner.invoke(app, ["decode", "not-a-uri", "--no-color"])
    assert result.exit_code == 1
    assert "to" in result.output


def test_decode_oversized_gas():
    result = runner.invoke(app, ["decode", f"ethereum:{TEST_TO}?gas=" + "1" * 5000, "--no-color"])
    assert result.exit_code == 1
    assert 'Property "gas"' in result.output


def test_validate():
    assert runner.invoke(app, ["validate", f"ethereum:{TEST_TO}", "--no-color"]).stdout.strip() == "valid"

    result = runner.invoke(app, ["validate", '{"to":"%s","mode":"unknown_mode"}' % TEST_TO, "--no-color"])
    assert result.exit_code == 1
    assert "unknown_mode" in result.output


def test_describe_basic():
    result = runner.invoke(app, ["describe", f"ethereum:{TEST_TO}?amount=1500000000000000000&chainId=1"])
    assert result.exit_code == 0
    assert "basic transfer" in result.stdout
    assert Web3.to_checksum_address(TEST_TO) in result.stdout
    assert "1.5 ether" in result.stdout
    assert "(ethereum)" in result.stdout


def test_describe_payload_contract(contract_payload):
    lines = describe_payload(contract_payload)
    assert lines[0] == "Mode:     contract_function"
    assert "Function: myFunc(address recipient, uint256 value)" in lines
    assert "Chain ID: 11155111 (sepolia)" in lines
    assert any(line.startswith("Default:  value = 100") for line in lines)


def test_describe_payload_big_amount():
    lines = describe_payload({"to": TEST_TO, "from": TEST_FROM, "amount": BIG_AMOUNT})
    assert f"Amount:   {BIG_AMOUNT} wei" in "\n".join(lines)
    assert f"From:     {Web3.to_checksum_address(TEST_FROM)}" in lines


def test_networks():
    result = runner.invoke(app, ["networks"])
    assert result.exit_code == 0
    assert "sepolia" in result.stdout
    assert "11155111" in result.stdout


def test_version_option():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.stdout.startswith("ethqr ")


@patch('sys.stdout.isatty')
def test_should_use_color(mock_isatty, monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    mock_isatty.return_value = True
    assert should_use_color() is True
    assert should_use_color(no_color=True) is False

    mock_isatty.return_value = False
    assert should_use_color() is False


def test_no_color_env(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    assert should_use_color() is False


@patch('logging.basicConfig')
def test_verbose_configures_logging(mock_basic_config):
    result = runner.invoke(app, ["--verbose", "networks"])
    assert result.exit_code == 0
    assert mock_basic_config.call_args.kwargs["level"] == "DEBUG"


@patch('logging.basicConfig')
def test_logging_left_alone_by_default(mock_basic_config, monkeypatch):
    monkeypatch.delenv("ETHQR_LOG_LEVEL", raising=False)
    runner.invoke(app, ["networks"])
    mock_basic_config.assert_not_called()
