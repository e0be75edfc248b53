import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_create_contact_accepts_either_spelling(client: AsyncClient) -> None:
    camel = await client.post(
        "/api/v1/contacts/", json={"customerId": "c1", "firstName": "Ann", "email": "ann@x.io"}
    )
    snake = await client.post(
        "/api/v1/contacts/", json={"customer_id": "c1", "first_name": "Bob"}
    )

    assert camel.status_code == snake.status_code == 201
    assert camel.json()["firstName"] == "Ann"
    assert camel.json()["status"] == "active"
    assert snake.json()["customerId"] == "c1"
    assert snake.json()["email"] is None


@pytest.mark.asyncio
async def test_create_contact_requires_first_name(client: AsyncClient) -> None:
    response = await client.post("/api/v1/contacts/", json={"customerId": "c1"})

    assert response.status_code == 400
    assert "firstName" in response.json()["errors"]


@pytest.mark.asyncio
async def test_create_contact_rejects_invalid_email(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/contacts/", json={"firstName": "Ann", "email": "ann@nowhere"}
    )

    assert response.status_code == 400
    assert response.json()["errors"] == {"email": "Please enter a valid email address"}


@pytest.mark.asyncio
async def test_list_contacts_by_customer(demo_client: AsyncClient) -> None:
    everyone = await demo_client.get("/api/v1/contacts/")
    acme = await demo_client.get("/api/v1/contacts/", params={"customer_id": "1"})

    assert len(everyone.json()) == 3
    assert [c["id"] for c in acme.json()] == ["1", "2"]


@pytest.mark.asyncio
async def test_update_contact(demo_client: AsyncClient) -> None:
    response = await demo_client.patch("/api/v1/contacts/3", json={"title": "COO"})

    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "COO"
    assert data["firstName"] == "Mike"
    assert data["createdAt"] == "2024-01-20"
    assert data["updatedAt"] == "2026-01-05"


@pytest.mark.asyncio
async def test_contact_not_found(client: AsyncClient) -> None:
    get = await client.get("/api/v1/contacts/missing")
    update = await client.put("/api/v1/contacts/missing", json={"title": "CEO"})
    delete = await client.delete("/api/v1/contacts/missing")

    assert get.status_code == update.status_code == delete.status_code == 404
    assert get.json()["detail"] == "Contact not found"
    assert delete.json()["error_code"] == "not_found"


@pytest.mark.asyncio
async def test_delete_contact(demo_client: AsyncClient) -> None:
    response = await demo_client.delete("/api/v1/contacts/2")

    assert response.json() == {"success": True}
    remaining = await demo_client.get("/api/v1/contacts/")
    assert [c["id"] for c in remaining.json()] == ["1", "3"]
