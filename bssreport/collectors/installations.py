# bssreport/collectors/installations.py
import logging

from bssreport.exceptions import NotFoundError
from bssreport.models import Installation
from bssreport.rpc import RpcClient

LOG = logging.getLogger("bssreport.collectors.installations")

# served from the work order endpoint
SERVICE = "netowner.installation.InstallationService"


def get_installation(client: RpcClient, installation_id: str) -> Installation:
    data = client.call(SERVICE, "GetByID", {"id": installation_id})
    inst = data.get("installation")
    if not inst:
        raise NotFoundError(
            f"installation {installation_id} not found",
            service=SERVICE,
            method="GetByID",
        )
    installation = Installation.from_json(inst)
    LOG.debug("installation %s: status=%s modules=%d",
              installation.id, installation.status.value, len(installation.modules))
    return installation
