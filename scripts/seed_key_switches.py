"""
Push generated sample KeySwitches to the configured store.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from mechdex.dependencies import get_key_switch_service
from mechdex.errors import PersistenceError
from mechdex.fake_data import fake_key_switch
from mechdex.service import InMemoryKeySwitchService

logger = logging.getLogger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed the KeySwitch catalog")
    parser.add_argument(
        "-n",
        "--num",
        type=int,
        default=5,
        help="How many sample KeySwitches to create",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the generated KeySwitches without saving",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List the stored KeySwitches after seeding",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(message)s")
    service = get_key_switch_service()
    if isinstance(service, InMemoryKeySwitchService):
        logger.warning("No FIREBASE_RTDB_BASE_URL configured, seeding in-memory store")

    try:
        for _ in range(args.num):
            key_switch = fake_key_switch()
            if args.dry_run:
                logger.info("Would create %s", key_switch.to_payload())
                continue
            service.create_key_switch(key_switch)
            logger.info("Created %s (%s)", key_switch.id, key_switch.switch_name)

        if args.list:
            for key_switch in service.get_all_key_switches():
                print(f"{key_switch.id}\t{key_switch.switch_name}\t{key_switch.company}")
    except PersistenceError as exc:
        logger.error("Seeding failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
