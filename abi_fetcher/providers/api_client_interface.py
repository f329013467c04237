from abc import ABC, abstractmethod
from typing import List

from ..models.abi import AbiDocument, AbiEntry

class AbstractABIClient(ABC):
    """
    Абстрактный базовый класс (интерфейс) для клиента, получающего ABI контрактов.
    Позволяет заменить Etherscan на другой совместимый обозреватель.
    """

    @abstractmethod
    async def get_abi(self, contract_address: str) -> AbiDocument:
        """
        Получить ABI контракта по его адресу.

        :raises AbiClientError: при любой ошибке (см. providers/exceptions.py).
        """
        pass

    async def get_events(self, contract_address: str) -> List[AbiEntry]:
        """Только события из ABI контракта, в порядке документа."""
        abi = await self.get_abi(contract_address)
        return abi.events

    async def aclose(self) -> None:
        pass

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()
