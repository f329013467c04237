# abi_fetcher/utils/address.py
import logging
from eth_utils import (
    is_0x_prefixed,
    is_address,
    is_checksum_address,
    is_checksum_formatted_address,
    to_checksum_address,
)

from ..providers.exceptions import InvalidAddressError

logger = logging.getLogger(__name__)

def validate_address(address: str) -> str:
    """
    Локальная проверка формата адреса перед запросом к API.
    Адрес должен начинаться с 0x; адрес в смешанном регистре
    должен проходить проверку EIP-55.

    :return: checksum-адрес.
    :raises InvalidAddressError: если адрес пустой или некорректный.
    """
    if not isinstance(address, str) or not address.strip():
        logger.warning(f"Empty contract address provided: {address!r}")
        raise InvalidAddressError(address, "Empty contract address")

    address = address.strip()
    if not is_0x_prefixed(address) or not is_address(address):
        logger.warning(f"Malformed contract address provided: {address}")
        raise InvalidAddressError(address, "Malformed contract address")

    # is_address не проверяет контрольную сумму
    if is_checksum_formatted_address(address) and not is_checksum_address(address):
        logger.warning(f"Contract address has an invalid EIP-55 checksum: {address}")
        raise InvalidAddressError(address, "Invalid address checksum")

    return to_checksum_address(address)
