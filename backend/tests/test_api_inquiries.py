# backend/tests/test_api_inquiries.py
import pytest

from inquiry_desk.api.inquiries import router

JANE = {
    "firstNameAndLastName": "Jane Doe",
    "phoneNumber": "+15550001234",
    "emailAddress": "jane@example.com",
    "eventDate": "2025-06-01",
    "eventTime": "14:00",
    "eventType": "wedding",
    "eventName": "Doe Wedding",
    "clientsHairAndMakeup": True,
    "clientsHairOnly": False,
    "clientsMakeupOnly": False,
    "locationAddress": "1 Main St",
    "additionalNotes": "",
}


def test_router_exists():
    assert router is not None
    assert "inquiries" in router.tags


@pytest.mark.asyncio
async def test_submit_is_public_and_creates_records(api_client, staff_account, mock_notifier):
    response = await api_client.post("/submit", json=JANE)

    assert response.status_code == 201
    assert response.json()["message"] == "Data inserted successfully"
    booking_id = response.json()["bookingId"]

    mock_notifier.send_sms.assert_called_once()
    mock_notifier.send_email.assert_awaited_once()

    # Staff can see the new pair
    await api_client.post("/login", json={"email": "staff@example.com", "password": "correct-horse-battery"})
    clients = (await api_client.get("/clients")).json()
    bookings = (await api_client.get("/bookings")).json()
    assert len(clients) == 1
    assert clients[0]["name"] == "Jane Doe"
    assert len(bookings) == 1
    assert bookings[0]["id"] == booking_id
    assert bookings[0]["client_id"] == clients[0]["id"]
    assert bookings[0]["status"] == "pending"
    assert bookings[0]["event_time"] == "14:00:00"


@pytest.mark.asyncio
async def test_submit_rejects_missing_required_fields(api_client):
    response = await api_client.post("/submit", json={"firstNameAndLastName": "Jane Doe"})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_inquiry_status_requires_session(api_client):
    response = await api_client.post("/inquiry-status", json={"clientId": 1, "status": "approved"})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_inquiry_status_approves_booking(staff_client):
    await staff_client.post("/submit", json=JANE)
    client_id = (await staff_client.get("/clients")).json()[0]["id"]

    response = await staff_client.post("/inquiry-status", json={"clientId": client_id, "status": "approved"})

    assert response.status_code == 200
    assert response.json()["status"] == "approved"
    assert response.json()["event_name"] == "Doe Wedding"
    booking = (await staff_client.get(f"/bookings?client_id={client_id}")).json()[0]
    assert booking["status"] == "approved"


@pytest.mark.asyncio
async def test_inquiry_status_unknown_client_is_404(staff_client):
    response = await staff_client.post("/inquiry-status", json={"clientId": 999, "status": "declined"})

    assert response.status_code == 404
    assert response.json() == {"detail": "Client not found"}


@pytest.mark.asyncio
async def test_inquiry_status_rejects_unknown_status(staff_client):
    response = await staff_client.post("/inquiry-status", json={"clientId": 1, "status": "maybe"})

    assert response.status_code == 422
