"""Shared fixtures: an in-memory mod.io served through httpx.MockTransport."""

import httpx
import pytest

from modcheck.adapters.http_client import build_client
from modcheck.adapters.modio import ModioSource
from modcheck.core.config import AppSettings


def mod_payload(mod_id, name_id, *, visible=1, status=1, name=None):
    return {
        "id": mod_id,
        "game_id": 2475,
        "status": status,
        "visible": visible,
        "name": name or name_id.replace("-", " ").title(),
        "name_id": name_id,
        "profile_url": f"https://mod.io/g/drg/m/{name_id}",
        "submitted_by": {"id": 1, "username": "someone"},
    }


def _error(status, message):
    return httpx.Response(status, json={"error": {"code": status, "error_ref": 0, "message": message}})


class FakeModio:
    """Minimal mod.io: `/me`, `/games/{id}/mods/{mod_id}` and `?name_id=` filter."""

    def __init__(self, mods=(), *, auth_status=200, errors=None):
        self.mods = {mod["id"]: mod for mod in mods}
        self.auth_status = auth_status
        self.errors = dict(errors or {})
        self.requests = []

    @property
    def lookups(self):
        return [r for r in self.requests if not r.url.path.endswith("/me")]

    def __call__(self, request):
        self.requests.append(request)
        path = request.url.path

        if path.endswith("/me"):
            if self.auth_status != 200:
                return _error(self.auth_status, "Unauthorized.")
            return httpx.Response(200, json={"id": 42, "username": "tester"})

        parts = path.rstrip("/").split("/")
        if parts[-1] == "mods":
            name_id = request.url.params.get("name_id")
            data = [mod for mod in self.mods.values() if mod["name_id"] == name_id]
            return httpx.Response(200, json={"data": data, "result_count": len(data)})

        mod_id = int(parts[-1])
        if mod_id in self.errors:
            return _error(self.errors[mod_id], "Something went wrong.")
        if mod_id not in self.mods:
            return _error(404, "The requested mod could not be found.")
        return httpx.Response(200, json=self.mods[mod_id])


@pytest.fixture
def settings():
    return AppSettings()


@pytest.fixture
def fake_modio():
    return FakeModio(
        [
            mod_payload(123, "better-mining"),
            mod_payload(789, "hidden-gem", visible=0),
            mod_payload(555, "brand-new-name"),
        ]
    )


@pytest.fixture
def client(settings, fake_modio):
    with build_client(settings, user_id=42, token="secret", transport=httpx.MockTransport(fake_modio)) as c:
        yield c


@pytest.fixture
def source(client, settings):
    return ModioSource(client, settings)
