"""
Tests for inventory endpoints.
"""

import json

import pytest
from httpx import AsyncClient


async def create_item(client: AsyncClient, headers: dict, payload: dict) -> dict:
    response = await client.post("/api/inventory", json=payload, headers=headers)
    assert response.status_code == 201
    return response.json()["data"]


@pytest.mark.asyncio
async def test_manager_negative_quantity(client: AsyncClient, manager_headers: dict, payloads):
    response = await client.post(
        "/api/inventory",
        json=payloads.inventory_item(quantity=-5),
        headers=manager_headers,
    )

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert "Miktar 0 veya daha fazla olmalıdır" in body["error"]["quantity"]


@pytest.mark.asyncio
@pytest.mark.parametrize("literal", ["Infinity", "NaN", "1e999"])
async def test_non_finite_quantity_is_a_field_error(
    client: AsyncClient,
    manager_headers: dict,
    payloads,
    literal: str,
):
    body = json.dumps(payloads.inventory_item()).replace('"quantity": 40', f'"quantity": {literal}')

    response = await client.post(
        "/api/inventory",
        content=body,
        headers={**manager_headers, "Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "error": {"quantity": ["Miktar 0 veya daha fazla olmalıdır"]},
    }


@pytest.mark.asyncio
async def test_create_defaults(client: AsyncClient, manager_headers: dict, payloads):
    item = await create_item(client, manager_headers, payloads.inventory_item())

    assert item["status"] == "active"
    assert item["lastUpdated"]
    assert item["minStock"] == 10


@pytest.mark.asyncio
async def test_list_requires_session(client: AsyncClient):
    response = await client.get("/api/inventory")

    assert response.status_code == 401
    assert response.json() == {"success": False, "error": "Yetkisiz."}


@pytest.mark.asyncio
async def test_low_stock_wins_over_category(client: AsyncClient, manager_headers: dict, payloads):
    await create_item(
        client,
        manager_headers,
        payloads.inventory_item(name="Dirsek", code="D1", category="X", quantity=50, minStock=5),
    )
    await create_item(
        client,
        manager_headers,
        payloads.inventory_item(name="Vana", code="V1", category="Y", quantity=3, minStock=5),
    )
    await create_item(
        client,
        manager_headers,
        payloads.inventory_item(name="Conta", code="C1", category="Y", quantity=5, minStock=5),
    )

    response = await client.get(
        "/api/inventory",
        params={"lowStock": "true", "category": "X"},
        headers=manager_headers,
    )

    assert response.status_code == 200
    # at or below minimum, ordered by quantity
    assert [i["name"] for i in response.json()["data"]] == ["Vana", "Conta"]


@pytest.mark.asyncio
async def test_stock_update_moves_item_into_low_stock(client: AsyncClient, manager_headers: dict, payloads):
    item = await create_item(
        client,
        manager_headers,
        payloads.inventory_item(quantity=40, minStock=10),
    )

    response = await client.get("/api/inventory", params={"lowStock": "true"}, headers=manager_headers)
    assert response.json()["data"] == []

    await client.put(f"/api/inventory/{item['id']}/stock", json={"quantity": 10}, headers=manager_headers)

    response = await client.get("/api/inventory", params={"lowStock": "true"}, headers=manager_headers)
    assert [i["id"] for i in response.json()["data"]] == [item["id"]]


@pytest.mark.asyncio
async def test_category_and_search(client: AsyncClient, user_headers: dict, manager_headers: dict, payloads):
    await create_item(
        client,
        manager_headers,
        payloads.inventory_item(name="Vana", code="V-1", category="Armatür"),
    )
    await create_item(
        client,
        manager_headers,
        payloads.inventory_item(name="Boru", code="B-1", category="Boru"),
    )
    await create_item(
        client,
        manager_headers,
        payloads.inventory_item(name="Akış Ölçer", code="AO-1", category="Armatür"),
    )

    response = await client.get("/api/inventory", params={"category": "Armatür"}, headers=user_headers)
    assert [i["name"] for i in response.json()["data"]] == ["Akış Ölçer", "Vana"]

    response = await client.get("/api/inventory", params={"search": "b-1"}, headers=user_headers)
    assert [i["name"] for i in response.json()["data"]] == ["Boru"]

    # category wins over search
    response = await client.get(
        "/api/inventory",
        params={"category": "Boru", "search": "Vana"},
        headers=user_headers,
    )
    assert [i["name"] for i in response.json()["data"]] == ["Boru"]

    # lowStock other than "true" is ignored
    response = await client.get("/api/inventory", params={"lowStock": "1"}, headers=user_headers)
    assert len(response.json()["data"]) == 3


@pytest.mark.asyncio
async def test_update_stock(client: AsyncClient, manager_headers: dict, payloads):
    item = await create_item(client, manager_headers, payloads.inventory_item())

    response = await client.put(
        f"/api/inventory/{item['id']}/stock",
        json={"quantity": 7},
        headers=manager_headers,
    )

    assert response.status_code == 200
    assert response.json()["data"]["quantity"] == 7

    response = await client.put(
        f"/api/inventory/{item['id']}/stock",
        json={"quantity": "7"},
        headers=manager_headers,
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_update_and_delete(client: AsyncClient, admin_headers: dict, payloads):
    item = await create_item(client, admin_headers, payloads.inventory_item())

    response = await client.put(
        f"/api/inventory/{item['id']}",
        json={"location": "Depo 2", "status": "inactive"},
        headers=admin_headers,
    )
    assert response.status_code == 200
    assert response.json()["data"]["location"] == "Depo 2"
    assert response.json()["data"]["status"] == "inactive"

    response = await client.delete(f"/api/inventory/{item['id']}", headers=admin_headers)
    assert response.status_code == 200

    response = await client.get(f"/api/inventory/{item['id']}", headers=admin_headers)
    assert response.status_code == 404
    assert response.json()["error"] == "Envanter öğesi bulunamadı."
