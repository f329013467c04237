import json
from typing import Any, Callable, Dict, List

import httpx
import pytest

from abi_fetcher.providers.etherscan_api_client import EtherscanAPIClient

BASE_URL = "https://api.etherscan.io/api"
FACTORY_ADDRESS = "0x5c69bee701ef814a2b6a3edd4b1652cb9cc5aa6f"

FACTORY_ABI: List[Dict[str, Any]] = [
    {
        "inputs": [{"internalType": "address", "name": "_feeToSetter", "type": "address"}],
        "payable": False,
        "stateMutability": "nonpayable",
        "type": "constructor",
    },
    {
        "anonymous": False,
        "inputs": [
            {"indexed": True, "internalType": "address", "name": "token0", "type": "address"},
            {"indexed": True, "internalType": "address", "name": "token1", "type": "address"},
            {"indexed": False, "internalType": "address", "name": "pair", "type": "address"},
            {"indexed": False, "internalType": "uint256", "name": "", "type": "uint256"},
        ],
        "name": "PairCreated",
        "type": "event",
    },
    {
        "constant": True,
        "inputs": [],
        "name": "allPairsLength",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "payable": False,
        "stateMutability": "view",
        "type": "function",
    },
    {
        "constant": False,
        "inputs": [
            {"internalType": "address", "name": "tokenA", "type": "address"},
            {"internalType": "address", "name": "tokenB", "type": "address"},
        ],
        "name": "createPair",
        "outputs": [{"internalType": "address", "name": "pair", "type": "address"}],
        "payable": False,
        "stateMutability": "nonpayable",
        "type": "function",
    },
]


def ok_envelope(abi: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {"status": "1", "message": "OK", "result": json.dumps(abi)}


def notok_envelope(result: str) -> Dict[str, Any]:
    return {"status": "0", "message": "NOTOK", "result": result}


@pytest.fixture
def requests_log() -> List[httpx.Request]:
    return []


@pytest.fixture
def make_client(requests_log):
    """Builds a client whose transport answers with the given handler."""

    def _make(handler: Callable[[httpx.Request], Any], api_key: str = "k") -> EtherscanAPIClient:
        async def _logged(request: httpx.Request) -> httpx.Response:
            requests_log.append(request)
            result = handler(request)
            if hasattr(result, "__await__"):
                result = await result
            return result

        transport = httpx.MockTransport(_logged)
        return EtherscanAPIClient(
            base_url=BASE_URL,
            api_key=api_key,
            client=httpx.AsyncClient(transport=transport),
        )

    return _make
