from typing import Optional

import httpx

from . import config
from .providers.etherscan_api_client import EtherscanAPIClient
from .providers.retry import RetryStrategy

"""
Factory for the shared services.
Clients are created explicitly by the caller instead of living as
module-level instances, so credentials never become hidden globals.
"""

def build_abi_client(api_key: Optional[str] = None,
                     client: Optional[httpx.AsyncClient] = None,
                     retry_strategy: Optional[RetryStrategy] = None) -> EtherscanAPIClient:
    # --- Explorer API client ---
    return EtherscanAPIClient(
        base_url=config.ETHERSCAN_API_URL,
        api_key=config.ETHERSCAN_API_KEY if api_key is None else api_key,
        timeout=config.ETHERSCAN_API_TIMEOUT,
        proxy_url=config.ETHERSCAN_API_PROXY_URL,
        client=client,
        retry_strategy=retry_strategy
    )
