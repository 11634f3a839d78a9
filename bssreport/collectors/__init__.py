"""
Service collectors.
One module per external service; each exposes plain fetch functions that
take an `RpcClient` and return parsed records. Any failure raises and
aborts the run.
"""

from . import (
    workorders,
    subscriptions,
    accesspoints,
    installations,
    inventory,
)

__all__ = [
    "workorders",
    "subscriptions",
    "accesspoints",
    "installations",
    "inventory",
]
