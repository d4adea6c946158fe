# backend/tests/test_api_clients.py
import pytest
import pytest_asyncio
from sqlalchemy import select, func

from inquiry_desk.api.clients import router
from inquiry_desk.models.booking import Booking
from inquiry_desk.models.client import Client


def test_router_exists():
    assert router is not None
    assert router.prefix == "/clients"
    assert "clients" in router.tags


@pytest_asyncio.fixture
async def jane(session_factory) -> int:
    async with session_factory() as db:
        client = Client(name="Jane Doe", email="jane@example.com", phone="+15550001234")
        db.add(client)
        await db.flush()
        db.add(Booking(client_id=client.id, event_name="Doe Wedding"))
        await db.commit()
        return client.id


@pytest.mark.asyncio
async def test_clients_require_session(api_client, jane):
    assert (await api_client.get("/clients")).status_code == 401
    assert (await api_client.get(f"/clients/{jane}")).status_code == 401
    assert (await api_client.put(f"/clients/{jane}", json={"name": "X"})).status_code == 401
    assert (await api_client.delete(f"/clients/{jane}")).status_code == 401


@pytest.mark.asyncio
async def test_list_and_get_client(staff_client, jane):
    listed = await staff_client.get("/clients")
    assert listed.status_code == 200
    assert [c["id"] for c in listed.json()] == [jane]

    response = await staff_client.get(f"/clients/{jane}")
    assert response.status_code == 200
    assert response.json()["email"] == "jane@example.com"


@pytest.mark.asyncio
async def test_get_unknown_client_is_404(staff_client):
    response = await staff_client.get("/clients/999")

    assert response.status_code == 404
    assert response.json() == {"detail": "Client not found"}


@pytest.mark.asyncio
async def test_update_client_changes_only_given_fields(staff_client, jane):
    response = await staff_client.put(f"/clients/{jane}", json={"phone": "+15550007777"})

    assert response.status_code == 200
    assert response.json()["phone"] == "+15550007777"
    assert response.json()["name"] == "Jane Doe"


@pytest.mark.asyncio
async def test_delete_client_removes_booking(staff_client, jane, session_factory):
    response = await staff_client.delete(f"/clients/{jane}")

    assert response.status_code == 204
    async with session_factory() as db:
        assert (await db.execute(select(func.count()).select_from(Client))).scalar_one() == 0
        assert (await db.execute(select(func.count()).select_from(Booking))).scalar_one() == 0


@pytest.mark.asyncio
async def test_update_client_rejects_null_for_required_field(staff_client, jane):
    response = await staff_client.put(f"/clients/{jane}", json={"name": None})

    assert response.status_code == 422
    assert (await staff_client.get(f"/clients/{jane}")).json()["name"] == "Jane Doe"
