"""
Integration tests for the scheduling HTTP API.

Runs the FastAPI app in-process through httpx's ASGI transport against a
seeded SQLite database.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from clinic_booking.core.app_factory import create_app

API = "/api/v1/scheduling"


def _patient(patient_id: int) -> dict[str, str]:
    return {"X-Actor-Role": "patient", "X-Actor-Id": str(patient_id)}


def _doctor(doctor_id: int) -> dict[str, str]:
    return {"X-Actor-Role": "doctor", "X-Actor-Id": str(doctor_id)}


ADMIN = {"X-Actor-Role": "admin", "X-Actor-Id": "1"}


@pytest_asyncio.fixture
async def client(test_settings, database, seed_data):
    app = create_app(test_settings, database=database)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


async def _book(client, seed_data, start_time="09:00", doctor_id=None, patient_id=None, **extra):
    payload = {
        "doctor_id": doctor_id or seed_data.doctor_id,
        "appointment_date": "2025-03-10",
        "start_time": start_time,
        "reason": "Annual check-up",
        **extra,
    }
    return await client.post(
        f"{API}/appointments",
        json=payload,
        headers=_patient(patient_id or seed_data.patient_id),
    )


class TestHealth:
    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestAvailabilityEndpoints:
    """GET slots and availability."""

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_monday_slots(self, client, seed_data):
        response = await client.get(f"{API}/doctors/{seed_data.doctor_id}/slots", params={"date": "2025-03-10"})

        assert response.status_code == 200
        data = response.json()
        assert data["appointment_date"] == "2025-03-10"
        assert [s["start_time"] for s in data["slots"]] == ["09:00", "09:30", "10:00", "10:30", "11:00", "11:30"]

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_break_is_excluded(self, client, seed_data):
        response = await client.get(
            f"{API}/doctors/{seed_data.doctor_with_break_id}/slots", params={"date": "2025-03-10"}
        )

        starts = [s["start_time"] for s in response.json()["slots"]]
        assert "10:00" not in starts
        assert len(starts) == 5

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_day_off_is_empty(self, client, seed_data):
        response = await client.get(f"{API}/doctors/{seed_data.doctor_id}/slots", params={"date": "2025-03-11"})
        assert response.status_code == 200
        assert response.json()["slots"] == []

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_booked_slot_disappears(self, client, seed_data):
        assert (await _book(client, seed_data, "09:00")).status_code == 201

        response = await client.get(f"{API}/doctors/{seed_data.doctor_id}/slots", params={"date": "2025-03-10"})

        assert "09:00" not in [s["start_time"] for s in response.json()["slots"]]

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_invalid_date(self, client, seed_data):
        response = await client.get(f"{API}/doctors/{seed_data.doctor_id}/slots", params={"date": "tomorrow"})

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_INPUT"

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_range(self, client, seed_data):
        response = await client.get(
            f"{API}/doctors/{seed_data.doctor_id}/availability",
            params={"start_date": "2025-03-09", "end_date": "2025-03-17"},
        )

        assert response.status_code == 200
        assert sorted(response.json()["days"]) == ["2025-03-10", "2025-03-17"]


class TestBookingEndpoint:
    """POST /appointments."""

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_book(self, client, seed_data):
        response = await _book(client, seed_data, "09:00", type="virtual")

        assert response.status_code == 201
        data = response.json()
        assert data["patient_id"] == seed_data.patient_id
        assert data["start_time"] == "09:00"
        assert data["end_time"] == "09:30"
        assert data["status"] == "scheduled"
        assert data["type"] == "virtual"

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_overlap_conflicts(self, client, seed_data):
        await _book(client, seed_data, "09:00")

        response = await _book(client, seed_data, "09:15", patient_id=seed_data.other_patient_id)

        assert response.status_code == 409
        assert response.json()["code"] == "SLOT_UNAVAILABLE"

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_back_to_back(self, client, seed_data):
        await _book(client, seed_data, "09:00")
        response = await _book(client, seed_data, "09:30", patient_id=seed_data.other_patient_id)
        assert response.status_code == 201

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_cancelled_slot_can_be_rebooked(self, client, seed_data):
        booked = (await _book(client, seed_data, "09:00")).json()
        await client.put(
            f"{API}/appointments/{booked['id']}/status",
            json={"status": "cancelled"},
            headers=_patient(seed_data.patient_id),
        )

        response = await _book(client, seed_data, "09:00", patient_id=seed_data.other_patient_id)

        assert response.status_code == 201

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_unapproved_doctor(self, client, seed_data):
        response = await _book(client, seed_data, doctor_id=seed_data.unapproved_doctor_id)
        assert response.status_code == 400
        assert response.json()["code"] == "NOT_APPROVED"

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_unknown_doctor(self, client, seed_data):
        response = await _book(client, seed_data, doctor_id=9999)
        assert response.status_code == 404
        assert response.json()["code"] == "NOT_FOUND"

    @pytest.mark.integration
    @pytest.mark.asyncio
    @pytest.mark.parametrize("start_time", ["25:00", "23:45"])
    async def test_invalid_time(self, client, seed_data, start_time):
        response = await _book(client, seed_data, start_time)
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_INPUT"

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_short_reason_fails_schema_validation(self, client, seed_data):
        response = await _book(client, seed_data, reason="Hi")
        assert response.status_code == 422

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_only_patients_book(self, client, seed_data):
        response = await client.post(
            f"{API}/appointments",
            json={
                "doctor_id": seed_data.doctor_id,
                "appointment_date": "2025-03-10",
                "start_time": "09:00",
                "reason": "Annual check-up",
            },
            headers=_doctor(seed_data.doctor_id),
        )
        assert response.status_code == 403


class TestAppointmentEndpoints:
    """Reading and updating appointments."""

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_patient_cannot_complete(self, client, seed_data):
        booked = (await _book(client, seed_data)).json()

        response = await client.put(
            f"{API}/appointments/{booked['id']}/status",
            json={"status": "completed"},
            headers=_patient(seed_data.patient_id),
        )

        assert response.status_code == 403
        assert response.json()["code"] == "PERMISSION_DENIED"

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_doctor_completes_with_notes(self, client, seed_data):
        booked = (await _book(client, seed_data)).json()

        response = await client.put(
            f"{API}/appointments/{booked['id']}/status",
            json={"status": "completed", "notes": "Blood pressure normal"},
            headers=_doctor(seed_data.doctor_id),
        )

        assert response.status_code == 200
        assert response.json()["status"] == "completed"
        assert response.json()["notes"] == "Blood pressure normal"

        fetched = await client.get(f"{API}/appointments/{booked['id']}", headers=ADMIN)
        assert fetched.json()["notes"] == "Blood pressure normal"

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_unknown_status(self, client, seed_data):
        booked = (await _book(client, seed_data)).json()

        response = await client.put(
            f"{API}/appointments/{booked['id']}/status",
            json={"status": "no_show"},
            headers=ADMIN,
        )

        assert response.status_code == 400

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_missing_appointment(self, client, seed_data):
        response = await client.put(f"{API}/appointments/9999/status", json={"status": "cancelled"}, headers=ADMIN)
        assert response.status_code == 404

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_visibility(self, client, seed_data):
        booked = (await _book(client, seed_data)).json()
        await _book(client, seed_data, "10:00", patient_id=seed_data.other_patient_id)

        own = await client.get(f"{API}/appointments", headers=_patient(seed_data.patient_id))
        everyone = await client.get(f"{API}/appointments", headers=ADMIN)
        stranger = await client.get(
            f"{API}/appointments/{booked['id']}", headers=_patient(seed_data.other_patient_id)
        )
        unknown_role = await client.get(f"{API}/appointments", headers={"X-Actor-Role": "nurse", "X-Actor-Id": "1"})

        assert own.json()["count"] == 1
        assert everyone.json()["count"] == 2
        assert stranger.status_code == 403
        assert unknown_role.status_code == 403

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_list_filters(self, client, seed_data):
        booked = (await _book(client, seed_data)).json()
        await _book(client, seed_data, "10:00")
        await client.put(
            f"{API}/appointments/{booked['id']}/status",
            json={"status": "cancelled"},
            headers=_patient(seed_data.patient_id),
        )

        response = await client.get(
            f"{API}/appointments",
            params={"status": "scheduled", "date": "2025-03-10"},
            headers=_doctor(seed_data.doctor_id),
        )

        assert response.status_code == 200
        assert [a["start_time"] for a in response.json()["appointments"]] == ["10:00"]
