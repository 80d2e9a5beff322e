import pytest


@pytest.fixture
def payload(catalogue):
    return {
        "client_name": "John Doe",
        "client_email": "john@example.com",
        "client_phone": "555-0123",
        "event_date": "2024-12-15",
        "event_type": "Corporate Event",
        "venue_address": "123 Business Park, Mumbai",
        "guest_count": 50,
        "items": [
            {
                "food_item_id": catalogue["naan"].id,
                "vendor_id": catalogue["vendor_a"].id,
                "quantity": 10,
            }
        ],
        "discount": 10,
        "gst": 5,
        "miscellaneous_expenses": {"transport": {"quantity": 1, "price": 30}},
    }


def _create(client, payload, **overrides):
    resp = client.post("/api/quotes", json={**payload, **overrides})
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


def test_create_applies_defaults(client, payload):
    del payload["gst"], payload["discount"]
    quote = _create(client, payload)
    assert quote["status"] == "draft"
    assert quote["gst"] == "5"
    assert quote["discount"] == "0"
    assert quote["approved_at"] is None


def test_create_validation_error(client, payload):
    resp = client.post("/api/quotes", json={**payload, "items": []})
    assert resp.status_code == 400
    body = resp.json()
    assert body["ok"] is False
    assert body["error"]["code"] == "NO_ITEMS"

    resp = client.post("/api/quotes", json={**payload, "client_name": ""})
    assert resp.json()["error"]["code"] == "MISSING_CLIENT_FIELD"


def test_create_rejects_out_of_range_percentages(client, payload):
    assert client.post("/api/quotes", json={**payload, "gst": 120}).status_code == 422
    resp = client.post(
        "/api/quotes",
        json={**payload, "miscellaneous_expenses": {"fireworks": {"quantity": 1, "price": 9}}},
    )
    assert resp.status_code == 422


def test_totals_by_role(client, payload):
    quote = _create(client, payload)
    url = f"/api/quotes/{quote['id']}/totals"

    admin = client.get(url).json()["data"]
    assert admin["role"] == "admin"
    totals = admin["totals"]
    assert totals["final_total"]["display"] == "₹219.00"
    assert totals["gst_amount"]["amount"] == "9.00"
    assert totals["total_cost"]["amount"] == "120.00"
    assert totals["profit_margin"]["amount"] == "80.00"

    staff = client.get(url, headers={"X-User-Role": "staff"}).json()["data"]["totals"]
    assert "profit_margin" not in staff
    assert staff["final_total"]["amount"] == "219.00"

    catering = client.get(url, headers={"X-User-Role": "catering"}).json()["data"]
    assert catering["totals"] == {}


def test_totals_skip_deleted_vendor(client, payload, catalogue):
    quote = _create(client, payload)
    client.delete(f"/api/vendors/{catalogue['vendor_a'].id}")
    totals = client.get(f"/api/quotes/{quote['id']}/totals").json()["data"]["totals"]
    assert totals["total_retail"]["amount"] == "0.00"
    assert totals["final_total"]["display"] == "₹30.00"


def test_menu_and_print_share_grouping(client, payload, catalogue):
    payload["items"].append(
        {"food_item_id": catalogue["roti"].id, "vendor_id": catalogue["vendor_b"].id, "quantity": 40}
    )
    quote = _create(client, payload)
    menu = client.get(f"/api/quotes/{quote['id']}/menu").json()["data"]
    printed = client.get(f"/api/quotes/{quote['id']}/print").json()["data"]

    assert printed["groups"] == menu
    (group,) = menu
    assert group["category"]["name"] == "Breads & Basics"
    assert [(e["food_item"]["name"], e["vendor_name"]) for e in group["entries"]] == [
        ("Plain Naan", "Vendor A"),
        ("Roti", "Vendor B"),
    ]
    assert printed["misc_expenses"][0]["label"] == "Transport"
    assert printed["currency_symbol"] == "₹"
    assert printed["quote"]["id"] == quote["id"]


def test_lifecycle_routes(client, payload):
    quote = _create(client, payload)
    qid = quote["id"]

    assert client.post(f"/api/quotes/{qid}/submit").json()["data"]["status"] == "pending"
    approved = client.post(f"/api/quotes/{qid}/approve", json={"approved_by": "Priya"})
    assert approved.json()["data"]["approved_by"] == "Priya"
    assert approved.json()["data"]["approved_at"]

    resp = client.patch(f"/api/quotes/{qid}", json={"notes": "late change"})
    assert resp.status_code == 409
    assert resp.json()["error"]["code"] == "NOT_EDITABLE"

    assert client.post(f"/api/quotes/{qid}/start").json()["data"]["status"] == "in-progress"
    assert client.post(f"/api/quotes/{qid}/complete").json()["data"]["status"] == "completed"

    resp = client.post(f"/api/quotes/{qid}/reject")
    assert resp.status_code == 409
    assert resp.json()["error"]["code"] == "INVALID_TRANSITION"


def test_approve_without_body_uses_default_approver(client, payload):
    quote = _create(client, payload, status="pending")
    resp = client.post(f"/api/quotes/{quote['id']}/approve")
    assert resp.json()["data"]["approved_by"] == "Admin"


def test_unknown_quote(client):
    assert client.get("/api/quotes/missing").status_code == 404
    resp = client.post("/api/quotes/missing/submit")
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "QUOTE_NOT_FOUND"


def test_edit_and_set_line(client, payload, catalogue):
    quote = _create(client, payload)
    qid = quote["id"]
    naan = catalogue["naan"].id

    edited = client.patch(f"/api/quotes/{qid}", json={"guest_count": 75}).json()["data"]
    assert edited["guest_count"] == 75
    assert edited["status"] == "draft"

    resp = client.put(
        f"/api/quotes/{qid}/items/{naan}",
        json={"vendor_id": catalogue["vendor_b"].id, "quantity": 20},
    )
    assert resp.json()["data"]["items"] == [
        {"food_item_id": naan, "vendor_id": catalogue["vendor_b"].id, "quantity": 20}
    ]
    totals = client.get(f"/api/quotes/{qid}/totals").json()["data"]["totals"]
    assert totals["total_retail"]["amount"] == "360.00"

    resp = client.put(
        f"/api/quotes/{qid}/items/{naan}",
        json={"vendor_id": catalogue["vendor_b"].id, "quantity": 0},
    )
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "NO_ITEMS"


def test_list_filter_and_delete(client, payload):
    first = _create(client, payload)
    _create(client, payload, client_name="Jane Smith", event_type="Wedding", status="pending")

    pending = client.get("/api/quotes", params={"status": "pending"}).json()["data"]
    assert [q["client_name"] for q in pending] == ["Jane Smith"]
    found = client.get("/api/quotes", params={"search": "corporate"}).json()["data"]
    assert [q["id"] for q in found] == [first["id"]]

    assert client.delete(f"/api/quotes/{first['id']}").status_code == 200
    assert client.delete(f"/api/quotes/{first['id']}").status_code == 404
    assert len(client.get("/api/quotes").json()["data"]) == 1


def test_prefill_and_customer_match(client, payload):
    customer = client.post(
        "/api/customers",
        json={
            "name": "John Doe",
            "email": "john@example.com",
            "phone": "555-0123",
            "address": "123 Business Park, Mumbai",
        },
    ).json()["data"]

    prefill = client.post(f"/api/quotes/prefill/{customer['id']}").json()["data"]
    assert prefill["client_name"] == "John Doe"
    assert prefill["venue_address"] == "123 Business Park, Mumbai"
    assert client.post("/api/quotes/prefill/missing").status_code == 404

    quote = _create(client, payload)
    matched = client.get(f"/api/quotes/{quote['id']}/customer").json()["data"]
    assert matched["id"] == customer["id"]
