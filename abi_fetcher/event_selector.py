import logging
from typing import Callable, List, Optional, Sequence

from .models.abi import AbiEntry

logger = logging.getLogger(__name__)

class EventSelectionError(ValueError):
    pass

class EventSelector:
    """
    Интерактивный выбор одного события из списка.
    Функции ввода/вывода передаются снаружи, чтобы выбор можно было тестировать.
    """
    def __init__(self,
                 input_func: Optional[Callable[[str], str]] = None,
                 output_func: Optional[Callable[[str], None]] = None):
        self._input = input_func or input
        self._output = output_func or print

    def select_event(self, events: Sequence[AbiEntry]) -> AbiEntry:
        if not events:
            raise EventSelectionError("Contract ABI has no events")

        for i, event in enumerate(events, start=1):
            self._output(f"{i}: {event.name}")

        try:
            raw_choice = self._input("Select an event: ")
        except EOFError:
            logger.warning("No event choice: input stream is closed")
            raise EventSelectionError("Invalid input") from None

        try:
            choice = int(raw_choice.strip())
        except ValueError:
            logger.warning(f"Non-numeric event choice: {raw_choice!r}")
            raise EventSelectionError("Invalid input") from None

        if not 1 <= choice <= len(events):
            logger.warning(f"Event choice out of range: {choice} (1..{len(events)})")
            raise EventSelectionError("Event not found")

        return events[choice - 1]

def format_entries(entries: List[AbiEntry]) -> List[str]:
    """Строки вида 'event Transfer(address,address,uint256)' для вывода списком."""
    return [f"{e.type} {e.signature or ''}".rstrip() for e in entries]
