import httpx
import pytest

from abi_fetcher import config
from abi_fetcher import main as cli
from abi_fetcher.event_selector import EventSelector
from abi_fetcher.providers.etherscan_api_client import EtherscanAPIClient

from conftest import FACTORY_ABI, FACTORY_ADDRESS, notok_envelope

PAIR_CREATED_TOPIC = "0x0d3648bd0f6ba80134a33ba9275ac585d9d315f0ad8355cddefde31afa28d0e9"


@pytest.fixture
def explorer(monkeypatch):
    """Routes the CLI's client to a mock explorer returning the given JSON body."""
    body = {"json": FACTORY_ABI}

    def _build_abi_client():
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json=body["json"]))
        return EtherscanAPIClient(
            base_url="https://api.etherscan.io/api",
            api_key="k",
            client=httpx.AsyncClient(transport=transport),
        )

    monkeypatch.setattr(config, "ETHERSCAN_API_KEY", "k")
    monkeypatch.setattr(cli, "build_abi_client", _build_abi_client)
    return body


@pytest.mark.asyncio
async def test_run_prints_selected_event_topic(explorer, capsys):
    selector = EventSelector(input_func=lambda prompt: "1", output_func=print)

    await cli.run(cli.parse_args([FACTORY_ADDRESS]), selector=selector)

    out = capsys.readouterr().out
    assert "1: PairCreated" in out
    assert f"Selected Event: PairCreated, Topic 0: {PAIR_CREATED_TOPIC}" in out


@pytest.mark.asyncio
async def test_run_list_prints_signatures(explorer, capsys):
    await cli.run(cli.parse_args([FACTORY_ADDRESS, "--list"]))

    out = capsys.readouterr().out.splitlines()
    assert "function createPair(address,address)" in out


def test_main_without_api_key_fails(monkeypatch, capsys):
    monkeypatch.setattr(config, "ETHERSCAN_API_KEY", "")

    assert cli.main([FACTORY_ADDRESS]) == 1
    assert "API key not set" in capsys.readouterr().err


def test_main_reports_explorer_error(explorer, capsys):
    explorer["json"] = notok_envelope("Contract source code not verified")

    assert cli.main([FACTORY_ADDRESS]) == 1
    assert "not verified" in capsys.readouterr().err


def test_main_rejects_malformed_address(explorer, capsys):
    assert cli.main(["invalid_address"]) == 1
    assert "Malformed contract address" in capsys.readouterr().err


def test_main_success(explorer, monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt: "1")

    assert cli.main([FACTORY_ADDRESS]) == 0
    out = capsys.readouterr().out
    assert PAIR_CREATED_TOPIC in out
    assert "Execution completed successfully." in out


@pytest.mark.asyncio
async def test_run_prints_topic_of_anonymous_event(explorer, capsys):
    explorer["json"] = [{
        "type": "event",
        "name": "Transfer",
        "anonymous": True,
        "inputs": [
            {"indexed": True, "name": "from", "type": "address"},
            {"indexed": True, "name": "to", "type": "address"},
            {"indexed": False, "name": "value", "type": "uint256"},
        ],
    }]
    selector = EventSelector(input_func=lambda prompt: "1", output_func=print)

    await cli.run(cli.parse_args([FACTORY_ADDRESS]), selector=selector)

    out = capsys.readouterr().out
    assert "Topic 0: 0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef" in out
    assert "None" not in out


def test_main_reports_closed_stdin(explorer, monkeypatch, capsys):
    def _closed_stdin(prompt):
        raise EOFError

    monkeypatch.setattr("builtins.input", _closed_stdin)

    assert cli.main([FACTORY_ADDRESS]) == 1
    assert "Invalid input" in capsys.readouterr().err


def test_main_leaves_dotenv_loading_to_config():
    assert not hasattr(cli, "load_dotenv")
