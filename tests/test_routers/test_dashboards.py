import respx
from httpx import Response

DB_URL = "https://db.staybook.test"

BOOKINGS = [
    {
        "id": "b1", "start_date": "2025-06-01T23:00:00", "end_date": "2025-06-08",
        "status": "confirmed",
        "property": {"title": "Thames View", "address": "1 Thames St, London SE1"},
    },
    {
        "id": "b2", "start_date": "2025-06-02", "end_date": "2025-06-09",
        "status": "pending",
        "property": {"title": "Harbour Flat", "address": "3 Quay Rd, Bristol BS1"},
    },
    {
        "id": "b3", "start_date": "2025-06-01", "end_date": "2025-06-05",
        "status": "paid",
        "property": {"title": "Mill House", "address": "2 Cross St, London SW1A"},
    },
]

PROPERTIES = [
    {"id": "p1", "property_name": "Thames View", "house_address": "1 Thames St",
     "postcode": "SE1 9AA", "property_type": "Flat", "parking_type": "Street",
     "activity": "active"},
    {"id": "p2", "property_name": "Garden House", "house_address": "5 Park Rd, London",
     "postcode": "N1 2AB", "property_type": "House", "parking_type": "Driveway",
     "activity": "inactive"},
]


def _ids(resp):
    return [r["id"] for r in resp.json()["results"]]


async def test_filter_client_bookings(client):
    resp = await client.post("/dashboards/client/bookings/filter", json={
        "records": BOOKINGS,
        "selection": {
            "active_keys": ["search", "startDate"],
            "values": {"search": "london", "startDate": "2025-06-01"},
        },
    })

    assert resp.status_code == 200
    assert _ids(resp) == ["b1", "b3"]
    assert resp.json()["total"] == 3


async def test_filter_client_bookings_tab(client):
    resp = await client.post(
        "/dashboards/client/bookings/filter?tab=pending",
        json={"records": BOOKINGS},
    )
    assert _ids(resp) == ["b2"]
    assert resp.json()["total"] == 1


async def test_filter_ignores_values_of_inactive_keys(client):
    resp = await client.post("/dashboards/client/bookings/filter", json={
        "records": BOOKINGS,
        "selection": {"active_keys": ["search"], "values": {"postcode": "SW1A"}},
    })
    assert _ids(resp) == ["b1", "b2", "b3"]


async def test_filter_partner_properties(client):
    resp = await client.post("/dashboards/partner/properties/filter", json={
        "records": PROPERTIES,
        "selection": {
            "active_keys": ["search", "property_type"],
            "values": {"search": "london", "property_type": "House"},
        },
    })
    assert _ids(resp) == ["p2"]


@respx.mock
async def test_list_client_bookings_with_query_filters(client):
    respx.get(f"{DB_URL}/rest/v1/bookings").mock(return_value=Response(200, json=BOOKINGS))

    resp = await client.get(
        "/dashboards/client/c-1/bookings",
        params={"filters": ["postcode"], "postcode": "sw1a", "search": "bristol"},
    )

    assert resp.status_code == 200
    assert _ids(resp) == ["b3"]


@respx.mock
async def test_list_client_bookings_active_tab(client):
    respx.get(f"{DB_URL}/rest/v1/bookings").mock(return_value=Response(200, json=BOOKINGS))

    resp = await client.get("/dashboards/client/c-1/bookings", params={"tab": "active"})

    assert _ids(resp) == ["b1", "b3"]


@respx.mock
async def test_list_partner_properties(client):
    respx.get(f"{DB_URL}/rest/v1/properties").mock(return_value=Response(200, json=PROPERTIES))

    resp = await client.get(
        "/dashboards/partner/l-1/properties",
        params={"filters": ["search", "parking_type"], "search": "thames", "parking_type": "Street"},
    )

    assert _ids(resp) == ["p1"]


@respx.mock
async def test_list_partner_properties_backend_error(client):
    respx.get(f"{DB_URL}/rest/v1/properties").mock(return_value=Response(500, text="oops"))

    resp = await client.get("/dashboards/partner/l-1/properties")

    assert resp.status_code == 502


async def test_filter_partner_properties_delisted_tab(client):
    resp = await client.post(
        "/dashboards/partner/properties/filter?tab=delisted",
        json={"records": PROPERTIES},
    )
    assert _ids(resp) == ["p2"]
    assert resp.json()["total"] == 1


@respx.mock
async def test_list_partner_properties_listed_tab(client):
    respx.get(f"{DB_URL}/rest/v1/properties").mock(return_value=Response(200, json=PROPERTIES))

    resp = await client.get(
        "/dashboards/partner/l-1/properties",
        params={"tab": "listed", "filters": ["search"], "search": "thames"},
    )

    assert _ids(resp) == ["p1"]
    assert resp.json()["total"] == 1


async def test_partner_tab_rejects_unknown_value(client):
    resp = await client.post(
        "/dashboards/partner/properties/filter?tab=archived",
        json={"records": PROPERTIES},
    )
    assert resp.status_code == 422


@respx.mock
async def test_list_client_bookings_malformed_body(client):
    respx.get(f"{DB_URL}/rest/v1/bookings").mock(
        return_value=Response(200, json={"message": "x"})
    )

    resp = await client.get("/dashboards/client/c-1/bookings")

    assert resp.status_code == 502
