# bssreport/collectors/accesspoints.py
import logging

from bssreport.exceptions import NotFoundError
from bssreport.models import AccessPoint
from bssreport.rpc import RpcClient

LOG = logging.getLogger("bssreport.collectors.accesspoints")

SERVICE = "bss.accesspoint.AccessPointService"


def get_access_point(client: RpcClient, access_point_id: str) -> AccessPoint:
    data = client.call(SERVICE, "GetById", {"id": access_point_id})
    ap = data.get("accessPoint")
    if not ap:
        raise NotFoundError(
            f"access point {access_point_id} not found",
            service=SERVICE,
            method="GetById",
        )
    access_point = AccessPoint.from_json(ap)
    LOG.debug("access point %s: externalId=%s", access_point.id, access_point.external_id)
    return access_point
