import logging
import httpx
import json
from typing import Dict, Any, Optional

from .. import config
from ..models.abi import AbiDocument, AbiFormatError
from ..utils.address import validate_address
from .api_client_interface import AbstractABIClient
from .exceptions import (
    ContractNotFoundError,
    ExplorerAPIError,
    InvalidAddressError,
    InvalidApiKeyError,
    RateLimitError,
    ResponseFormatError,
    TransportError,
)
from .retry import NoRetry, RetryStrategy

logger = logging.getLogger(__name__)

class EtherscanAPIClient(AbstractABIClient):
    """
    Клиент Etherscan-совместимого API для получения ABI контрактов.

    Все аргументы необязательны: недостающие значения берутся из config
    (переменные окружения / .env). Клиент не хранит изменяемого состояния,
    кроме пула соединений httpx, поэтому один экземпляр можно использовать
    из нескольких корутин одновременно.
    """
    def __init__(self,
                 base_url: Optional[str] = None,
                 api_key: Optional[str] = None,
                 timeout: Optional[int] = None,
                 proxy_url: Optional[str] = None,
                 client: Optional[httpx.AsyncClient] = None,
                 retry_strategy: Optional[RetryStrategy] = None):

        self._base_url = base_url or config.ETHERSCAN_API_URL
        self._api_key = config.ETHERSCAN_API_KEY if api_key is None else api_key
        self._timeout = timeout or config.ETHERSCAN_API_TIMEOUT
        self._retry = retry_strategy or NoRetry()

        if client is not None:
            self._client = client
            self._owns_client = False
        else:
            proxy = proxy_url or config.ETHERSCAN_API_PROXY_URL
            self._client = httpx.AsyncClient(timeout=self._timeout, proxy=proxy)
            self._owns_client = True

        if not self._api_key:
            logger.warning("EtherscanAPIClient initialized without an API key.")
        logger.info(f"EtherscanAPIClient initialized for {self._base_url}.")

    async def _request(self, params: Dict[str, Any]) -> Any:
        """
        Один GET запрос к API. Возвращает разобранный JSON.
        """
        params = {**params, 'apikey': self._api_key}

        try:
            response = await self._client.get(self._base_url, params=params)
            response.raise_for_status()
            return response.json()

        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error for {self._base_url}: {e.response.status_code} - {e.response.text[:200]}")
            if e.response.status_code == 429:
                raise RateLimitError(f"HTTP {e.response.status_code}", e.response.text) from e
            raise TransportError(f"HTTP error: {e.response.status_code}") from e
        except httpx.RequestError as e:
            logger.error(f"Network error for {self._base_url}: {e!r}")
            raise TransportError(f"Network error: {e!r}") from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Failed to decode JSON response: {e}")
            raise ResponseFormatError(f"JSON decode error: {e}") from e

    async def get_abi(self, contract_address: str) -> AbiDocument:
        checksum_address = validate_address(contract_address)
        params = {
            "module": "contract",
            "action": "getabi",
            "address": checksum_address,
            "format": "raw"
        }
        data = await self._retry.run(lambda: self._request(params))
        abi = self._parse_abi_response(data, checksum_address)
        logger.info(f"Fetched ABI for {checksum_address}: {len(abi.functions)} functions, {len(abi.events)} events.")
        return abi

    def _parse_abi_response(self, data: Any, contract_address: str) -> AbiDocument:
        """
        С format=raw успешный ответ - это сам массив ABI.
        Ошибки (и ответы без format=raw) приходят в конверте
        {"status", "message", "result"}, где result - ABI в виде JSON-строки.
        """
        if isinstance(data, dict):
            if data.get('status') == '0':
                self._raise_api_error(data, contract_address)
            if 'result' not in data:
                error_message = f"Invalid API response: 'result' not in data. Response: {data}"
                logger.error(error_message)
                raise ResponseFormatError(error_message)
            data = data['result']

        try:
            abi = AbiDocument.from_json(data)
        except AbiFormatError as e:
            logger.error(f"Invalid ABI for {contract_address}: {e}")
            raise ResponseFormatError(str(e)) from e

        if not len(abi):
            logger.warning(f"Explorer returned an empty ABI for {contract_address}")
            raise ContractNotFoundError("Empty ABI", data)
        return abi

    @staticmethod
    def _raise_api_error(data: Dict[str, Any], contract_address: str) -> None:
        message = data.get('message')
        result = data.get('result')
        logger.warning(f"Explorer API Error for {contract_address}: {message} - {result}")

        text = f"{message} {result}".lower()
        if 'rate limit' in text:
            raise RateLimitError(message, result)
        if 'api key' in text or 'apikey' in text:
            raise InvalidApiKeyError(message, result)
        if 'invalid address' in text:
            raise InvalidAddressError(contract_address, f"Explorer rejected address ({result})")
        if 'not verified' in text or 'not found' in text:
            raise ContractNotFoundError(message, result)
        raise ExplorerAPIError(message, result)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
