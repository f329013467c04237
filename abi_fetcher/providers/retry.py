from abc import ABC, abstractmethod
from typing import Awaitable, Callable, TypeVar

T = TypeVar("T")

class RetryStrategy(ABC):
    """
    Точка расширения для политики повторов запросов к API.
    Клиент передаёт сюда фабрику корутины, выполняющей ровно один запрос;
    стратегия решает, сколько раз её вызвать и с какими паузами.
    """

    @abstractmethod
    async def run(self, send: Callable[[], Awaitable[T]]) -> T:
        pass


class NoRetry(RetryStrategy):
    """Стратегия по умолчанию: один запрос, ошибка пробрасывается вызывающему."""

    async def run(self, send: Callable[[], Awaitable[T]]) -> T:
        return await send()
