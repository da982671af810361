"""Unit tests for the FastAPI route-level location-update gate."""
from __future__ import annotations

from typing import Any

from fastapi import Depends, FastAPI, Header, HTTPException
from fastapi.testclient import TestClient

from roamease_realtime.adapters.fastapi import (
    location_update_dependency,
    register_rate_limit_handler,
)
from roamease_realtime.application.rate_limit import (
    LOCATION_UPDATE_MESSAGE,
    InMemoryRateLimitStore,
    location_update_limiter,
)
from roamease_realtime.testing.fakes import FakeClock


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


async def current_user_id(x_user_id: str = Header()) -> str:
    """Stand-in for bearer-token auth resolved through ``Depends``."""
    return x_user_id


def make_app(**gate_kwargs: Any) -> tuple[FastAPI, Any]:
    clock = FakeClock()
    limiter = location_update_limiter(InMemoryRateLimitStore(clock=clock), clock=clock)
    gate = location_update_dependency(limiter, current_user_id, **gate_kwargs)
    app = FastAPI()
    register_rate_limit_handler(app)

    @app.post("/api/shipments/{shipment_id}/location", dependencies=[Depends(gate)])
    async def update_location(shipment_id: str, user_id: str = Depends(current_user_id)) -> dict[str, Any]:
        if shipment_id == "invalid":
            raise HTTPException(status_code=400, detail="bad coordinates")
        if shipment_id == "explode":
            raise RuntimeError("database unavailable")
        return {"success": True, "shipmentId": shipment_id, "userId": user_id}

    return app, clock


def _post(client: TestClient, shipment: str = "S1", user: str = "U1") -> Any:
    return client.post(f"/api/shipments/{shipment}/location", headers={"X-User-Id": user}, json={"lat": 6.5, "lng": 3.4})


# ---------------------------------------------------------------------------
# location_update_dependency
# ---------------------------------------------------------------------------


class TestLocationUpdateDependency:
    def test_users_on_same_shipment_are_limited_independently(self) -> None:
        app, _ = make_app()
        client = TestClient(app)
        assert _post(client, user="U1").status_code == 200
        assert _post(client, user="U2").status_code == 200

    def test_second_update_by_same_user_is_rejected(self) -> None:
        app, clock = make_app()
        client = TestClient(app)
        assert _post(client).status_code == 200
        clock.advance(1)
        resp = _post(client)
        assert resp.status_code == 429
        assert resp.json() == {"success": False, "message": LOCATION_UPDATE_MESSAGE}
        assert resp.headers["retry-after"] == "4"
        assert resp.headers["ratelimit-remaining"] == "0"

    def test_update_after_window_passes(self) -> None:
        app, clock = make_app()
        client = TestClient(app)
        _post(client)
        clock.advance(5)
        assert _post(client).status_code == 200

    def test_allowed_response_carries_rate_headers(self) -> None:
        app, _ = make_app()
        resp = _post(TestClient(app))
        assert resp.json() == {"success": True, "shipmentId": "S1", "userId": "U1"}
        assert resp.headers["ratelimit-limit"] == "1"
        assert "retry-after" not in resp.headers

    def test_http_exception_releases_slot(self) -> None:
        app, _ = make_app()
        client = TestClient(app)
        assert _post(client, "invalid").status_code == 400
        assert _post(client, "invalid").status_code == 400

    def test_http_exception_counts_when_skip_disabled(self) -> None:
        app, _ = make_app(skip_failed_requests=False)
        client = TestClient(app)
        assert _post(client, "invalid").status_code == 400
        assert _post(client, "invalid").status_code == 429

    def test_unhandled_exception_releases_slot(self) -> None:
        app, _ = make_app()
        client = TestClient(app, raise_server_exceptions=False)
        assert _post(client, "explode").status_code == 500
        assert _post(client, "explode").status_code == 500

    def test_unauthenticated_request_is_rejected_before_the_gate(self) -> None:
        app, _ = make_app()
        client = TestClient(app)
        resp = client.post("/api/shipments/S1/location", json={"lat": 6.5, "lng": 3.4})
        assert resp.status_code == 422
        assert _post(client).status_code == 200

    def test_custom_message(self) -> None:
        app, _ = make_app(message="slow down")
        client = TestClient(app)
        _post(client)
        assert _post(client).json()["message"] == "slow down"
