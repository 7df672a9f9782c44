import json

import respx
from httpx import Response

DB_URL = "https://db.staybook.test"
API_URL = "https://api.staybook.test"
CONTRACTOR_URL = f"{DB_URL}/rest/v1/contractor"
LANDLORD_URL = f"{DB_URL}/rest/v1/landlord"
SUBMIT_URL = f"{API_URL}/api/booking-requests"


def _draft(**overrides) -> dict:
    data = {
        "requester_name": "Jane Doe",
        "company_name": "Acme Builders",
        "email": "test@test.com",
        "phone": "07700 900000",
        "password": "Abcd123!",
        "password_confirmation": "Abcd123!",
        "city": "London",
        "postcode": "SW1A 1AA",
        "team_size": "4",
        "booking_date_ranges": [
            {"id": "r1", "start_date": "2025-06-01", "end_date": "2025-06-08"}
        ],
        "terms_accepted": True,
    }
    data.update(overrides)
    return data


def _mock_identities(contractors=None, landlords=None):
    respx.get(CONTRACTOR_URL).mock(return_value=Response(200, json=contractors or []))
    respx.get(LANDLORD_URL).mock(return_value=Response(200, json=landlords or []))


@respx.mock
async def test_submit_booking_request(client):
    _mock_identities()
    post = respx.post(SUBMIT_URL).mock(
        return_value=Response(201, json={"success": True, "bookingRequest": {"id": "br-7"}})
    )

    resp = await client.post("/booking-requests", json=_draft())

    assert resp.status_code == 201
    data = resp.json()
    assert data["success"] is True
    assert data["booking_request_id"] == "br-7"
    body = json.loads(post.calls.last.request.content)
    assert body["email"] == "test@test.com"
    assert body["bookings"] == [{"startDate": "2025-06-01", "endDate": "2025-06-08"}]


@respx.mock
async def test_submit_missing_fields(client):
    post = respx.post(SUBMIT_URL).mock(return_value=Response(201, json={}))

    resp = await client.post("/booking-requests", json=_draft(city="", team_size=""))

    assert resp.status_code == 422
    data = resp.json()
    assert data["error"] == "FieldValidationError"
    assert set(data["field_errors"]) == {"city", "team_size"}
    assert not post.called


async def test_submit_terms_not_accepted(client):
    resp = await client.post("/booking-requests", json=_draft(terms_accepted=False))

    assert resp.status_code == 422
    assert resp.json()["detail"] == "You must agree to the client terms and conditions"


@respx.mock
async def test_submit_duplicate_email(client):
    _mock_identities(landlords=[{"id": "l1", "email": "test@test.com"}])

    resp = await client.post("/booking-requests", json=_draft(email="Test@Test.com"))

    assert resp.status_code == 409
    assert resp.json()["detail"] == "This email is already in use, Try a different email."


@respx.mock
async def test_submit_lookup_down_fails_closed(client):
    respx.get(CONTRACTOR_URL).mock(return_value=Response(500, text="down"))
    respx.get(LANDLORD_URL).mock(return_value=Response(200, json=[]))

    resp = await client.post("/booking-requests", json=_draft())

    assert resp.status_code == 409


@respx.mock
async def test_submit_weak_password(client):
    _mock_identities()

    resp = await client.post(
        "/booking-requests", json=_draft(password="short", password_confirmation="short")
    )

    assert resp.status_code == 422
    assert "a special character" in resp.json()["password_requirements"]


@respx.mock
async def test_submit_backend_rejection_verbatim(client):
    _mock_identities()
    respx.post(SUBMIT_URL).mock(
        return_value=Response(500, json={"error": "Failed to create booking request: timeout"})
    )

    resp = await client.post("/booking-requests", json=_draft())

    assert resp.status_code == 400
    assert resp.json()["detail"] == "Failed to create booking request: timeout"


@respx.mock
async def test_submit_backend_unreachable(client):
    _mock_identities()
    respx.post(SUBMIT_URL).mock(return_value=Response(503, text="Service Unavailable"))

    resp = await client.post("/booking-requests", json=_draft())

    assert resp.status_code == 502
    assert resp.json()["detail"] == "This email is already in use, Try a different email."


async def test_validate_never_calls_network(client):
    with respx.mock(assert_all_called=False) as router:
        resp = await client.post(
            "/booking-requests/validate",
            json=_draft(password="short", password_confirmation="other"),
        )
        assert not router.calls

    assert resp.status_code == 200
    data = resp.json()
    assert data["valid"] is False
    assert data["password_mismatch"] is True
    assert "an uppercase letter" in data["password_requirements"]


@respx.mock
async def test_email_check(client):
    _mock_identities(contractors=[{"id": "c1", "email": "Foo@Bar.com"}])

    resp = await client.post("/booking-requests/email-check", json={"email": " foo@bar.com "})

    assert resp.status_code == 200
    assert resp.json() == {"email": "foo@bar.com", "status": "already_exists"}


@respx.mock
async def test_email_check_blank_email(client):
    contractors = respx.get(CONTRACTOR_URL).mock(return_value=Response(200, json=[]))
    landlords = respx.get(LANDLORD_URL).mock(return_value=Response(200, json=[]))

    resp = await client.post("/booking-requests/email-check", json={"email": "   "})

    assert resp.status_code == 422
    data = resp.json()
    assert data["error"] == "InvalidEmailError"
    assert data["field_errors"] == {"email": "Please enter a valid email address."}
    assert not contractors.called
    assert not landlords.called


async def test_validate_accepts_blank_budget(client):
    resp = await client.post("/booking-requests/validate", json=_draft(budget_per_night=""))

    assert resp.status_code == 200
    assert resp.json()["valid"] is True
