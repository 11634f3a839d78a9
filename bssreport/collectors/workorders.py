# bssreport/collectors/workorders.py
import logging

from bssreport.models import WorkOrder
from bssreport.rpc import RpcClient

LOG = logging.getLogger("bssreport.collectors.workorders")

SERVICE = "netowner.workorder.WorkOrderService"


def list_work_orders(client: RpcClient) -> list[WorkOrder]:
    """All work orders, oldest first."""
    data = client.call(SERVICE, "Get", {
        "orderBy": "ORDER_BY_CREATED_AT",
        "orderByDescending": False,
    })
    work_orders = [WorkOrder.from_json(item) for item in data.get("workOrders", [])]
    LOG.info("workorders: fetched %d work orders", len(work_orders))
    return work_orders
