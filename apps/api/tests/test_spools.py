"""
Tests for spool endpoints, including production progress.
"""

import pytest
from httpx import AsyncClient


async def create_spool(client: AsyncClient, headers: dict, payload: dict) -> dict:
    response = await client.post("/api/spools", json=payload, headers=headers)
    assert response.status_code == 201
    return response.json()["data"]


@pytest.mark.asyncio
async def test_create_defaults_completed_quantity(
    client: AsyncClient,
    manager_headers: dict,
    payloads,
):
    spool = await create_spool(client, manager_headers, payloads.spool())

    assert spool["completedQuantity"] == 0
    assert spool["quantity"] == 10


@pytest.mark.asyncio
async def test_create_rejects_zero_quantity(client: AsyncClient, manager_headers: dict, payloads):
    response = await client.post(
        "/api/spools",
        json=payloads.spool(quantity=0, completedQuantity=-1),
        headers=manager_headers,
    )

    assert response.status_code == 400
    assert response.json()["error"] == {
        "quantity": ["Adet zorunlu ve en az 1 olmalı."],
        "completedQuantity": ["Tamamlanan miktar 0 veya daha fazla olmalı."],
    }


@pytest.mark.asyncio
async def test_progress_sets_status(client: AsyncClient, manager_headers: dict, payloads):
    spool = await create_spool(client, manager_headers, payloads.spool(quantity=10))
    url = f"/api/spools/{spool['id']}/progress"

    response = await client.put(url, json={"completedQuantity": 4}, headers=manager_headers)
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["completedQuantity"] == 4
    assert data["status"] == "active"

    response = await client.put(url, json={"completedQuantity": 10}, headers=manager_headers)
    assert response.json()["data"]["status"] == "completed"


@pytest.mark.asyncio
async def test_progress_validation_and_policy(
    client: AsyncClient,
    manager_headers: dict,
    user_headers: dict,
    payloads,
):
    spool = await create_spool(client, manager_headers, payloads.spool())
    url = f"/api/spools/{spool['id']}/progress"

    response = await client.put(url, json={"completedQuantity": 3}, headers=user_headers)
    assert response.status_code == 403

    response = await client.put(url, json={"completedQuantity": -3}, headers=manager_headers)
    assert response.status_code == 400
    assert response.json()["error"] == {
        "completedQuantity": ["Tamamlanan miktar 0 veya daha fazla olmalı."]
    }

    response = await client.put(
        "/api/spools/nope/progress",
        json={"completedQuantity": 1},
        headers=manager_headers,
    )
    assert response.status_code == 404
    assert response.json()["error"] == "Ürün alt kalemi bulunamadı."


@pytest.mark.asyncio
async def test_manager_can_delete_spool(client: AsyncClient, manager_headers: dict, payloads):
    spool = await create_spool(client, manager_headers, payloads.spool())

    response = await client.delete(f"/api/spools/{spool['id']}", headers=manager_headers)

    assert response.status_code == 200
    assert response.json() == {"success": True}


@pytest.mark.asyncio
async def test_user_cannot_delete_spool(
    client: AsyncClient,
    manager_headers: dict,
    user_headers: dict,
    payloads,
):
    spool = await create_spool(client, manager_headers, payloads.spool())

    response = await client.delete(f"/api/spools/{spool['id']}", headers=user_headers)

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_list_filters(client: AsyncClient, manager_headers: dict, payloads):
    await create_spool(client, manager_headers, payloads.spool(name="A", projectId="p1"))
    await create_spool(
        client, manager_headers, payloads.spool(name="B", projectId="p2", status="active")
    )

    response = await client.get("/api/spools", params={"projectId": "p1"})
    assert [s["name"] for s in response.json()["data"]] == ["A"]

    response = await client.get("/api/spools", params={"status": "active"})
    assert [s["name"] for s in response.json()["data"]] == ["B"]
