import httpx
import pytest

from bssreport.collectors import inventory
from bssreport.exceptions import FetchError
from bssreport.walker import walk

DEVICES = {
    "pop-1": [{"id": "dev-1", "name": "olt-1", "popId": "pop-1"}, {"id": "dev-2", "name": "olt-2", "popId": "pop-1"}],
    "pop-2": [],
    "pop-3": [{"id": "dev-3", "name": "switch-1", "popId": "pop-3"}],
}


@pytest.fixture
def inv(fake):
    fake.on(inventory.SERVICE, "GetPops", {"pops": [{"id": p, "name": p.upper()} for p in DEVICES]})
    fake.on(inventory.SERVICE, "GetDevices", lambda payload: {"devices": DEVICES[payload["popId"]]})
    return fake


def test_walk_visits_every_pop_once(inv, auth):
    with inv.client(auth) as client:
        assert walk(client) == 3

    device_calls = [p["popId"] for path, p, _ in inv.calls if path.endswith("/GetDevices")]
    assert device_calls == ["pop-1", "pop-2", "pop-3"]


def test_walk_aborts_on_device_error(inv, auth):
    inv.on(inventory.SERVICE, "GetDevices", httpx.Response(500, json={"code": "internal", "message": "boom"}))
    with inv.client(auth) as client:
        with pytest.raises(FetchError):
            walk(client)
    assert len([c for c in inv.calls if c[0].endswith("/GetDevices")]) == 1


def test_no_pops(fake, auth):
    fake.on(inventory.SERVICE, "GetPops", {})
    with fake.client(auth) as client:
        assert walk(client) == 0
