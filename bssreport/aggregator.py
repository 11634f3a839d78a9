# bssreport/aggregator.py
"""
Join each work order with its subscription, access point and installation
and turn it into one report row.

Runs strictly in order, one work order at a time. The first failed fetch
raises out of `build_records`, so callers never see a partial list.
"""
import logging
from dataclasses import dataclass
from typing import Iterable

from bssreport.collectors.accesspoints import get_access_point
from bssreport.collectors.installations import get_installation
from bssreport.collectors.subscriptions import get_subscription
from bssreport.models import OutputRecord, WorkOrder, WorkOrderStatus
from bssreport.rpc import RpcClient
from bssreport.status import classify
from bssreport.timefmt import format_local

LOG = logging.getLogger("bssreport.aggregator")

TERMINAL = {
    WorkOrderStatus.CANCELLED: "cancelled",
    WorkOrderStatus.ABORTED: "aborted",
}


@dataclass
class Services:
    """Clients for the services a work order is joined against."""
    subscriptions: RpcClient
    access_points: RpcClient
    installations: RpcClient


def build_record(services: Services, wo: WorkOrder) -> OutputRecord:
    LOG.info("Processing work order id=%s externalSubscriptionReference=%s installationId=%s",
             wo.id, wo.subscription_id, wo.installation_id)

    sub = get_subscription(services.subscriptions, wo.subscription_id)
    ap = get_access_point(services.access_points, sub.access_point_id)
    inst = get_installation(services.installations, wo.installation_id)

    result = classify(wo.status, inst.status, inst.modules)
    if wo.status in TERMINAL:
        LOG.info("Work order %s %s, skipping further processing", wo.id, TERMINAL[wo.status])

    return OutputRecord(
        service_provider_reference=sub.external_id,
        network_owner_reference=ap.external_id,
        status=result.status,
        subscription_created_at=format_local(sub.created_at),
        work_order_completed_at=format_local(wo.ended_at),
        ont_sent_at=format_local(result.ont_sent_at),
    )


def build_records(services: Services, work_orders: Iterable[WorkOrder]) -> list[OutputRecord]:
    records = []
    for wo in work_orders:
        records.append(build_record(services, wo))
    LOG.info("✅ Built %d report rows", len(records))
    return records
