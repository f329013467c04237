# abi_fetcher/utils/abi_utils.py
import logging
import codecs
from typing import List, Sequence
from eth_utils import function_signature_to_4byte_selector, event_signature_to_log_topic

logger = logging.getLogger(__name__)

def canonical_type(abi_type: str, component_types: Sequence[str] = ()) -> str:
    """
    Приводит тип параметра ABI к каноническому виду для сигнатуры.
    Кортежи раскрываются в список типов компонентов:
    'tuple[]' с компонентами (address, uint256) -> '(address,uint256)[]'.
    """
    if abi_type.startswith("tuple"):
        suffix = abi_type[len("tuple"):]
        return f"({','.join(component_types)}){suffix}"
    return abi_type

def signature_of(name: str, input_types: List[str]) -> str:
    signature = f"{name}({','.join(input_types)})"
    logger.debug(f"Generated signature: {signature}")
    return signature

def function_selector(signature: str) -> str:
    """
    4-байтовый селектор функции, например 'transfer(address,uint256)' -> '0xa9059cbb'.
    """
    selector_bytes = function_signature_to_4byte_selector(signature)
    return "0x" + codecs.encode(selector_bytes, 'hex').decode('ascii')

def event_topic0(signature: str) -> str:
    """
    topic0 события: keccak256 канонической сигнатуры.
    """
    topic_bytes = event_signature_to_log_topic(signature)
    return "0x" + codecs.encode(topic_bytes, 'hex').decode('ascii')
