#!/usr/bin/env python3
"""
Work order report.
Fetches all work orders, joins subscription / access point / installation,
classifies each one and writes the spreadsheet.
"""

import argparse
import logging
from pathlib import Path

from bssreport import exporter
from bssreport.aggregator import Services, build_records
from bssreport.collectors.workorders import list_work_orders
from bssreport.config import OUTPUT_PATH, load_settings
from bssreport.exceptions import ReportError
from bssreport.rpc import RpcClient
from bssreport.timefmt import load_zone

LOG = logging.getLogger("bssreport.main")


def parse_args(argv=None) -> argparse.Namespace:
    ap = argparse.ArgumentParser("bss-workorder-report")
    ap.add_argument("--vault-token", help="Bearer token (default: $VAULT_TOKEN)")
    ap.add_argument("--fiber-operator-id", help="Acting fiber operator (default: $FIBER_OPERATOR_ID)")
    ap.add_argument("--env-file", type=Path, help="Read settings from this .env file")
    ap.add_argument("--output", type=Path, default=OUTPUT_PATH, help="Report file (.xlsx or .csv)")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap.parse_args(argv)


def run(args: argparse.Namespace) -> Path:
    settings = load_settings(args.vault_token, args.fiber_operator_id, args.env_file)
    load_zone()

    with RpcClient(settings.workorder_url, settings.auth, settings.timeout) as wo_client, \
            RpcClient(settings.subscription_url, settings.auth, settings.timeout) as sub_client, \
            RpcClient(settings.accesspoint_url, settings.auth, settings.timeout) as ap_client:
        work_orders = list_work_orders(wo_client)
        services = Services(
            subscriptions=sub_client,
            access_points=ap_client,
            installations=wo_client,
        )
        records = build_records(services, work_orders)

    return exporter.run(records, args.output)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    try:
        out_file = run(args)
    except ReportError as e:
        LOG.error("❌ Report aborted: %s", e)
        return 1

    print(f"Excel file created successfully: {out_file}")
    print("You can open it with Excel or any compatible spreadsheet software.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
