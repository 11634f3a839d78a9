# bssreport/status.py
"""
Lifecycle status classification.

Maps a work order's status, its installation's status and the installation
modules to one lifecycle label, plus the instant the ONT was sent (if the
"ONT sending" module is complete).

Precedence, first match wins:
  1. work order cancelled            -> Cancelled
  2. work order aborted              -> Aborted
  3. installation completed          -> Activated, ONT discovered
  4. "ONT sending" module completed  -> Finished by IKB, ONT Sent
  5. work order completed            -> Finished by IKB, ONT not sent
  6. otherwise                       -> Provided to IKB

The module scan for rule 4 runs even when rule 3 already matched, so the
ONT sent timestamp is reported for activated installations too. Rules 1-2
skip the scan entirely.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional

from bssreport.models import (
    InstallationStatus,
    LifecycleStatus,
    Module,
    ModuleName,
    WorkOrderStatus,
)


@dataclass(frozen=True)
class Classification:
    status: LifecycleStatus
    ont_sent_at: Optional[datetime] = None


def ont_sent_at(modules: Iterable[Module]) -> tuple[bool, Optional[datetime]]:
    """Return (sent, completed_at) for the "ONT sending" module. Last completed one wins."""
    sent = False
    completed_at = None
    for module in modules:
        if module.name == ModuleName.ONT_SENDING and module.completed:
            sent = True
            completed_at = module.completed_at
    return sent, completed_at


def classify(
    work_order_status: WorkOrderStatus,
    installation_status: InstallationStatus,
    modules: Iterable[Module],
) -> Classification:
    if work_order_status == WorkOrderStatus.CANCELLED:
        return Classification(LifecycleStatus.CANCELLED)
    if work_order_status == WorkOrderStatus.ABORTED:
        return Classification(LifecycleStatus.ABORTED)

    status: Optional[LifecycleStatus] = None
    if installation_status == InstallationStatus.COMPLETED:
        status = LifecycleStatus.ACTIVATED

    sent, sent_at = ont_sent_at(modules)
    if sent and status is None:
        status = LifecycleStatus.FINISHED_ONT_SENT

    if work_order_status == WorkOrderStatus.COMPLETED and status is None:
        status = LifecycleStatus.FINISHED_ONT_NOT_SENT

    if status is None:
        status = LifecycleStatus.PROVIDED

    return Classification(status, sent_at)
