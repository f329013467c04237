from typing import Any, Optional


class AbiClientError(Exception):
    """Базовое исключение для всех ошибок клиента ABI."""
    pass


class InvalidAddressError(AbiClientError):
    """Адрес пустой или не соответствует формату 0x + 40 hex."""

    def __init__(self, address: str, reason: str = "Invalid contract address"):
        super().__init__(f"{reason}: {address!r}")
        self.address = address


class ExplorerAPIError(AbiClientError):
    """Сервис ответил status == "0" (ошибка на уровне приложения)."""

    def __init__(self, message: Optional[str], result: Any = None):
        super().__init__(f"Explorer API Error: {message} - {result}")
        self.message = message
        self.result = result


class ContractNotFoundError(ExplorerAPIError):
    """Адрес не соответствует верифицированному контракту."""


class RateLimitError(ExplorerAPIError):
    """Превышен лимит запросов к API."""


class InvalidApiKeyError(ExplorerAPIError):
    """API ключ отсутствует или недействителен."""


class TransportError(AbiClientError):
    """Сетевая ошибка или HTTP статус, отличный от 2xx."""


class ResponseFormatError(AbiClientError):
    """Тело ответа не является JSON или не содержит массива ABI."""
