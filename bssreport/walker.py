# bssreport/walker.py
"""
Inventory walk: every point of presence, then the devices behind it.
Nothing is aggregated or written; a failed fetch aborts the walk.
"""
import logging

from bssreport.collectors.inventory import get_devices, get_pops
from bssreport.rpc import RpcClient

LOG = logging.getLogger("bssreport.walker")


def walk(client: RpcClient) -> int:
    """Visit all devices once. Returns how many were seen."""
    seen = 0
    pops = get_pops(client)
    for pop in pops:
        devices = get_devices(client, pop.id)
        LOG.debug("pop %s (%s): %d devices", pop.id, pop.name, len(devices))
        for device in devices:
            # placeholder: devices are only traversed for now
            LOG.debug("  device %s %s", device.id, device.name)
            seen += 1
    LOG.info("✅ Walked %d devices across %d points of presence", seen, len(pops))
    return seen
