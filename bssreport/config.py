# bssreport/config.py
"""
Runtime configuration: credentials, actor identity and service endpoints.

Explicit values (CLI flags) win; otherwise the environment is used, after
loading a `.env` file if one is present.
"""
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from bssreport.exceptions import ConfigError

OUTPUT_PATH = Path("output.xlsx")
TIMEZONE = "Europe/Vienna"

DEFAULT_ENDPOINTS = {
    "WORKORDER_URL": "http://localhost:9999",
    "SUBSCRIPTION_URL": "http://localhost:9998",
    "ACCESSPOINT_URL": "http://localhost:9997",
    "INVENTORY_URL": "http://localhost:9999",
}
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class AuthContext:
    """Bearer credential plus the acting fiber operator, sent on every call."""
    token: str
    actor_id: str
    actor_type: str = "TYPE_FIBER_OPERATOR"

    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "X-Actor-Type": self.actor_type,
            "X-Actor-Id": self.actor_id,
        }


@dataclass(frozen=True)
class Settings:
    auth: AuthContext
    workorder_url: str
    subscription_url: str
    accesspoint_url: str
    inventory_url: str
    timeout: float = DEFAULT_TIMEOUT


def _resolve(explicit: str | None, env_name: str) -> str:
    value = (explicit or "").strip()
    if not value:
        value = os.getenv(env_name, "").strip()
    return value


def load_settings(
    vault_token: str | None = None,
    fiber_operator_id: str | None = None,
    env_file: str | Path | None = None,
) -> Settings:
    """Build `Settings`; raises `ConfigError` before any network activity."""
    load_dotenv(dotenv_path=env_file or find_dotenv(usecwd=True))

    token = _resolve(vault_token, "VAULT_TOKEN")
    if not token:
        raise ConfigError("vault token is not set (use --vault-token or VAULT_TOKEN)")

    actor_id = _resolve(fiber_operator_id, "FIBER_OPERATOR_ID")
    if not actor_id:
        raise ConfigError("fiber operator id is not set (use --fiber-operator-id or FIBER_OPERATOR_ID)")

    raw_timeout = os.getenv("RPC_TIMEOUT", "")
    try:
        timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
    except ValueError:
        raise ConfigError(f"RPC_TIMEOUT must be a number, got {raw_timeout!r}") from None

    endpoints = {name: os.getenv(name) or default for name, default in DEFAULT_ENDPOINTS.items()}
    return Settings(
        auth=AuthContext(token=token, actor_id=actor_id),
        workorder_url=endpoints["WORKORDER_URL"],
        subscription_url=endpoints["SUBSCRIPTION_URL"],
        accesspoint_url=endpoints["ACCESSPOINT_URL"],
        inventory_url=endpoints["INVENTORY_URL"],
        timeout=timeout,
    )
