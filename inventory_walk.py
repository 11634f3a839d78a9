#!/usr/bin/env python3
"""
Inventory walk.
Lists every point of presence and the devices behind it.
"""

import argparse
import logging
from pathlib import Path

from bssreport.config import load_settings
from bssreport.exceptions import ReportError
from bssreport.rpc import RpcClient
from bssreport.walker import walk

LOG = logging.getLogger("bssreport.inventory_walk")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser("bss-inventory-walk")
    ap.add_argument("--vault-token", help="Bearer token (default: $VAULT_TOKEN)")
    ap.add_argument("--fiber-operator-id", help="Acting fiber operator (default: $FIBER_OPERATOR_ID)")
    ap.add_argument("--env-file", type=Path, help="Read settings from this .env file")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    try:
        settings = load_settings(args.vault_token, args.fiber_operator_id, args.env_file)
        with RpcClient(settings.inventory_url, settings.auth, settings.timeout) as client:
            walk(client)
    except ReportError as e:
        LOG.error("❌ Inventory walk aborted: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
