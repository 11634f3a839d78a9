# bssreport/models.py
"""
Records returned by the business-support services, plus the derived
report row.

Payloads follow the protobuf JSON mapping: camelCase keys, enums as their
string names, RFC 3339 timestamps, and default values left out entirely.
"""
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

_FRACTION = re.compile(r"\.(\d+)")


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """RFC 3339 string → aware UTC datetime. Nanoseconds are cut to micros."""
    if not value:
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    text = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
    dt = datetime.fromisoformat(text)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


class _WireEnum(str, Enum):
    @classmethod
    def from_wire(cls, value: Optional[str]):
        try:
            return cls(value)
        except ValueError:
            return cls.UNSPECIFIED


class WorkOrderStatus(_WireEnum):
    UNSPECIFIED = "STATUS_UNSPECIFIED"
    ACTIVE = "STATUS_ACTIVE"
    COMPLETED = "STATUS_COMPLETED"
    CANCELLED = "STATUS_CANCELLED"
    ABORTED = "STATUS_ABORTED"


class InstallationStatus(_WireEnum):
    UNSPECIFIED = "STATUS_UNSPECIFIED"
    PENDING = "STATUS_PENDING"
    IN_PROGRESS = "STATUS_IN_PROGRESS"
    COMPLETED = "STATUS_COMPLETED"


class ModuleName(_WireEnum):
    UNSPECIFIED = "MODULE_NAME_UNSPECIFIED"
    ONT_SENDING = "MODULE_NAME_ONT_SENDING"


class LifecycleStatus(str, Enum):
    CANCELLED = "Cancelled"
    ABORTED = "Aborted"
    PROVIDED = "Provided to IKB"
    FINISHED_ONT_NOT_SENT = "Finished by IKB, ONT not sent"
    FINISHED_ONT_SENT = "Finished by IKB, ONT Sent"
    ACTIVATED = "Activated, ONT discovered"


@dataclass
class WorkOrder:
    id: str
    subscription_id: str
    installation_id: str
    status: WorkOrderStatus
    ended_at: Optional[datetime] = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "WorkOrder":
        return cls(
            id=data.get("id", ""),
            subscription_id=data.get("externalSubscriptionReference", ""),
            installation_id=data.get("installationId", ""),
            status=WorkOrderStatus.from_wire(data.get("status")),
            ended_at=parse_timestamp(data.get("endedAt")),
        )


@dataclass
class Subscription:
    id: str
    external_id: str
    access_point_id: str
    created_at: Optional[datetime] = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Subscription":
        return cls(
            id=data.get("id", ""),
            external_id=data.get("externalId", ""),
            access_point_id=data.get("accesspointId", ""),
            created_at=parse_timestamp(data.get("createdAt")),
        )


@dataclass
class AccessPoint:
    id: str
    external_id: str

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "AccessPoint":
        return cls(id=data.get("id", ""), external_id=data.get("externalId", ""))


@dataclass
class Module:
    name: ModuleName
    completed: bool = False
    completed_at: Optional[datetime] = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Module":
        return cls(
            name=ModuleName.from_wire(data.get("name")),
            completed=bool(data.get("completed", False)),
            completed_at=parse_timestamp(data.get("completedAt")),
        )


@dataclass
class Installation:
    id: str
    status: InstallationStatus
    modules: list[Module] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Installation":
        return cls(
            id=data.get("id", ""),
            status=InstallationStatus.from_wire(data.get("status")),
            modules=[Module.from_json(m) for m in data.get("modules", [])],
        )


@dataclass
class Pop:
    id: str
    name: str = ""

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Pop":
        return cls(id=data.get("id", ""), name=data.get("name", ""))


@dataclass
class Device:
    id: str
    name: str = ""
    pop_id: str = ""

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Device":
        return cls(id=data.get("id", ""), name=data.get("name", ""), pop_id=data.get("popId", ""))


@dataclass(frozen=True)
class OutputRecord:
    """One report row. Field order is the column order of the sheet."""
    service_provider_reference: str
    network_owner_reference: str
    status: LifecycleStatus
    subscription_created_at: str
    work_order_completed_at: str
    ont_sent_at: str = "-"
