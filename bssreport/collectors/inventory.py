# bssreport/collectors/inventory.py
import logging

from bssreport.models import Device, Pop
from bssreport.rpc import RpcClient

LOG = logging.getLogger("bssreport.collectors.inventory")

SERVICE = "inventory.inventory.Service"


def get_pops(client: RpcClient) -> list[Pop]:
    data = client.call(SERVICE, "GetPops", {})
    pops = [Pop.from_json(item) for item in data.get("pops", [])]
    LOG.info("inventory: fetched %d points of presence", len(pops))
    return pops


def get_devices(client: RpcClient, pop_id: str) -> list[Device]:
    data = client.call(SERVICE, "GetDevices", {"popId": pop_id})
    return [Device.from_json(item) for item in data.get("devices", [])]
