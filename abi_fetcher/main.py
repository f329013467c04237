import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from abi_fetcher import config
from abi_fetcher.event_selector import EventSelector, EventSelectionError, format_entries
from abi_fetcher.providers.exceptions import AbiClientError
from abi_fetcher.services import build_abi_client
from abi_fetcher.utils.abi_utils import event_topic0

logger = logging.getLogger(__name__)

def setup_logging(app_env: str) -> None:
    if app_env == 'prod':
        log_level = logging.WARNING
        log_level_name = 'WARNING'
    else:
        # dev
        log_level = logging.INFO
        log_level_name = 'INFO'

    logging.basicConfig(level=log_level, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    logger.info(f"Logging level set to {log_level_name} based on APP_ENV='{app_env}'")

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="abi-fetcher",
        description="Fetch a contract ABI from an Etherscan-like explorer and print an event's topic0."
    )
    parser.add_argument("address", help="contract address (0x...)")
    parser.add_argument("--list", action="store_true",
                        help="print every ABI entry signature instead of selecting an event")
    return parser.parse_args(argv)

async def run(args: argparse.Namespace, selector: Optional[EventSelector] = None) -> None:
    if not config.ETHERSCAN_API_KEY:
        raise AbiClientError("API key not set in environment (ETHERSCAN_API_KEY)")

    async with build_abi_client() as client:
        if args.list:
            abi = await client.get_abi(args.address)
            for line in format_entries(list(abi)):
                print(line)
            return

        events = await client.get_events(args.address)

    event = (selector or EventSelector()).select_event(events)
    # хэш сигнатуры, в том числе для анонимных событий
    print(f"Selected Event: {event.name}, Topic 0: {event_topic0(event.signature)}")

def main(argv: Optional[List[str]] = None) -> int:
    setup_logging(config.APP_ENV)
    args = parse_args(argv)
    try:
        asyncio.run(run(args))
    except (AbiClientError, EventSelectionError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print("Execution completed successfully.")
    return 0

if __name__ == "__main__":
    sys.exit(main())
