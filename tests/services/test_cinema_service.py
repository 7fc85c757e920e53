"""Cinema Service — branching and error mapping against a fake gateway.

Tests cover:
    - Each operation's success outcome (status, message, data shape)
    - Decode and validation failures never reach the store
    - Existence pre-check 404 vs row-count 404 on update and delete
    - Store failures become 500 with a generic message
    - The snapshot returned by delete is the one read before deletion

Design Decisions:
    - AsyncMock gateway: every branch, including the check-then-mutate race,
      is reachable without a database
"""

import json
import logging
from unittest.mock import AsyncMock

import pytest

from bioskop_api.core.domain_types import CinemaDraft
from bioskop_api.core.errors import CinemaNotFoundError, StoreFailureError
from bioskop_api.schemas.cinema import CinemaRead
from bioskop_api.services.cinema_service import CinemaService


CGV = CinemaRead(id=5, name="CGV", location="Mall A", rating=4.5)


def _body(name="CGV", location="Mall A", rating=4.5) -> bytes:
    return json.dumps({"name": name, "location": location, "rating": rating}).encode()


def _make_gateway() -> AsyncMock:
    """Gateway where every call succeeds against a store holding CGV (id 5)."""
    gateway = AsyncMock()
    gateway.insert.return_value = 5
    gateway.list_all.return_value = [CGV]
    gateway.get_by_id.return_value = CGV
    gateway.exists_by_id.return_value = True
    gateway.update.return_value = 1
    gateway.delete_by_id.return_value = 1
    gateway.ping.return_value = True
    return gateway


@pytest.fixture
def gateway():
    return _make_gateway()


@pytest.fixture
def service(gateway):
    return CinemaService(gateway)


# ─── create ──────────────────────────────────────────────────────

async def test_create_returns_201_with_assigned_id(service, gateway):
    outcome = await service.create(_body())
    assert outcome.status_code == 201
    assert outcome.body["message"] == "cinema created"
    assert outcome.body["data"] == {
        "id": 5, "name": "CGV", "location": "Mall A", "rating": 4.5,
    }
    gateway.insert.assert_awaited_once_with(CinemaDraft("CGV", "Mall A", 4.5))


async def test_create_rejects_empty_name_without_store_call(service, gateway):
    outcome = await service.create(_body(name=""))
    assert outcome.status_code == 400
    assert outcome.body["error"] == "name and location required"
    assert outcome.body["code"] == "VALIDATION_FAILED"
    gateway.insert.assert_not_awaited()


async def test_create_rejects_out_of_range_rating(service, gateway):
    outcome = await service.create(_body(rating=5.5))
    assert outcome.status_code == 400
    assert outcome.body["error"] == "rating out of range"
    gateway.insert.assert_not_awaited()


async def test_create_malformed_body(service, gateway):
    outcome = await service.create(b"{oops")
    assert outcome.status_code == 400
    assert outcome.body["error"] == "invalid JSON format"
    assert "detail" in outcome.body
    gateway.insert.assert_not_awaited()


async def test_create_store_failure_is_500(service, gateway):
    gateway.insert.side_effect = StoreFailureError("insert")
    outcome = await service.create(_body())
    assert outcome.status_code == 500
    assert outcome.body["error"] == "failed to save data"


# ─── list ────────────────────────────────────────────────────────

async def test_list_returns_total_and_data(service):
    outcome = await service.list_all()
    assert outcome.status_code == 200
    assert outcome.body["total"] == 1
    assert outcome.body["data"] == [CGV.model_dump()]


async def test_list_empty_is_success_with_message(service, gateway):
    gateway.list_all.return_value = []
    outcome = await service.list_all()
    assert outcome.status_code == 200
    assert outcome.body == {"message": "no cinema data yet", "data": []}


async def test_list_store_failure_is_500(service, gateway):
    gateway.list_all.side_effect = StoreFailureError("list")
    outcome = await service.list_all()
    assert outcome.status_code == 500
    assert outcome.body["error"] == "failed to fetch data"


# ─── get ─────────────────────────────────────────────────────────

async def test_get_returns_record(service, gateway):
    outcome = await service.get("5")
    assert outcome.status_code == 200
    assert outcome.body["data"] == CGV.model_dump()
    gateway.get_by_id.assert_awaited_once_with(5)


async def test_get_non_numeric_id_is_400(service, gateway):
    outcome = await service.get("abc")
    assert outcome.status_code == 400
    assert outcome.body["error"] == "id must be numeric"
    gateway.get_by_id.assert_not_awaited()


async def test_get_missing_is_404(service, gateway):
    gateway.get_by_id.side_effect = CinemaNotFoundError(9)
    outcome = await service.get("9")
    assert outcome.status_code == 404
    assert outcome.body["code"] == "NOT_FOUND"


async def test_get_store_failure_is_500(service, gateway):
    gateway.get_by_id.side_effect = StoreFailureError("get")
    assert (await service.get("5")).status_code == 500


# ─── update ──────────────────────────────────────────────────────

async def test_update_echoes_input_with_path_id(service, gateway):
    outcome = await service.update("5", _body("XXI", "Plaza", 3))
    assert outcome.status_code == 200
    assert outcome.body["message"] == "cinema updated"
    assert outcome.body["data"] == {
        "id": 5, "name": "XXI", "location": "Plaza", "rating": 3.0,
    }
    gateway.update.assert_awaited_once_with(5, CinemaDraft("XXI", "Plaza", 3.0))


async def test_update_ignores_body_id(service):
    body = json.dumps({"id": 99, "name": "A", "location": "B", "rating": 1}).encode()
    outcome = await service.update("5", body)
    assert outcome.body["data"]["id"] == 5


async def test_update_parses_id_before_body(service, gateway):
    outcome = await service.update("x", b"{oops")
    assert outcome.body["error"] == "id must be numeric"


async def test_update_validation_failure_skips_store(service, gateway):
    outcome = await service.update("5", _body(location=""))
    assert outcome.status_code == 400
    gateway.exists_by_id.assert_not_awaited()
    gateway.update.assert_not_awaited()


async def test_update_missing_row_is_404_before_mutation(service, gateway):
    gateway.exists_by_id.return_value = False
    outcome = await service.update("999", _body())
    assert outcome.status_code == 404
    assert outcome.body["error"] == "cinema with that id was not found"
    gateway.update.assert_not_awaited()


async def test_update_zero_rows_after_existence_check_is_404(service, gateway):
    gateway.update.return_value = 0
    outcome = await service.update("5", _body())
    assert outcome.status_code == 404
    assert outcome.body["error"] == "nothing updated"
    gateway.exists_by_id.assert_awaited_once()


async def test_update_existence_check_failure_is_500(service, gateway):
    gateway.exists_by_id.side_effect = StoreFailureError("exists")
    outcome = await service.update("5", _body())
    assert outcome.status_code == 500
    assert outcome.body["error"] == "failed to check data"


async def test_update_store_failure_is_500(service, gateway):
    gateway.update.side_effect = StoreFailureError("update")
    outcome = await service.update("5", _body())
    assert outcome.status_code == 500
    assert outcome.body["error"] == "failed to update data"


# ─── delete ──────────────────────────────────────────────────────

async def test_delete_returns_pre_delete_snapshot(service, gateway):
    outcome = await service.delete("5")
    assert outcome.status_code == 200
    assert outcome.body["message"] == "cinema deleted"
    assert outcome.body["data"] == CGV.model_dump()
    gateway.delete_by_id.assert_awaited_once_with(5)


async def test_delete_reads_snapshot_before_deleting(service, gateway):
    calls = []
    gateway.get_by_id.side_effect = lambda cid: calls.append("get") or CGV
    gateway.delete_by_id.side_effect = lambda cid: calls.append("delete") or 1
    await service.delete("5")
    assert calls == ["get", "delete"]


async def test_delete_missing_is_404_without_delete(service, gateway):
    gateway.get_by_id.side_effect = CinemaNotFoundError(5)
    outcome = await service.delete("5")
    assert outcome.status_code == 404
    gateway.delete_by_id.assert_not_awaited()


async def test_delete_zero_rows_after_snapshot_is_404(service, gateway):
    gateway.delete_by_id.return_value = 0
    outcome = await service.delete("5")
    assert outcome.status_code == 404
    assert outcome.body["error"] == "nothing deleted"


async def test_delete_non_numeric_id_is_400(service, gateway):
    outcome = await service.delete("five")
    assert outcome.status_code == 400
    gateway.get_by_id.assert_not_awaited()


async def test_delete_store_failure_is_500(service, gateway):
    gateway.delete_by_id.side_effect = StoreFailureError("delete")
    outcome = await service.delete("5")
    assert outcome.status_code == 500
    assert outcome.body["error"] == "failed to delete data"


# ─── ready ───────────────────────────────────────────────────────

async def test_ready_delegates_to_gateway(service, gateway):
    gateway.ping.return_value = False
    assert await service.ready() is False


# ─── logging ─────────────────────────────────────────────────────

async def test_failures_logged_at_severity_level(service, gateway, caplog):
    caplog.set_level(logging.INFO, logger="bioskop_api.services.cinema_service")
    gateway.get_by_id.side_effect = CinemaNotFoundError(9)
    await service.get("9")
    gateway.list_all.side_effect = StoreFailureError("list")
    await service.list_all()
    levels = [(r.levelno, r.operation) for r in caplog.records]
    assert levels == [(logging.INFO, "get"), (logging.ERROR, "list")]
