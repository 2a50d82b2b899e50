import pytest


@pytest.fixture
def bill_payload():
    return {
        "tripId": 12,
        "driverEmail": "ravi@example.com",
        "customerName": "Meena",
        "phone": "9000000001",
        "pickupLocation": "Chennai Central",
        "dropLocation": "Pondicherry",
        "pickupDate": "2026-10-20",
        "pickupTime": "06:30",
        "tripType": "one-way",
        "startMeter": 1200,
        "endMeter": 1355,
        "totalKm": 155,
        "finalKm": 155,
        "kmPrice": 14,
        "totalKmPrice": 2170,
        "tollCharge": 85,
        "bettaCharge": 400,
        "totalEnteredCharges": 485,
        "finalBill": 2655,
    }


def test_create_bill(client, bill_payload):
    response = client.post("/api/bills", json=bill_payload)
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Bill saved successfully"
    assert body["tripId"] == 12
    assert isinstance(body["billId"], int)


def test_create_bill_defaults(client):
    response = client.post("/api/bills", json={
        "driverEmail": "ravi@example.com",
        "customerName": "Meena",
        "finalBill": 900,
    })
    assert response.status_code == 201
    assert response.json()["tripId"] is None

    bill = client.get("/api/bills/get/ravi@example.com").json()[0]
    assert bill["finalBill"] == 900
    assert bill["startMeter"] == 0
    assert bill["luggageCharge"] == 0
    assert bill["stateCharge"] == 0
    assert bill["pickupLocation"] is None
    assert bill["createdAt"] is not None


@pytest.mark.parametrize("missing", ["driverEmail", "customerName", "finalBill"])
def test_create_bill_missing_required(client, bill_payload, missing):
    del bill_payload[missing]
    response = client.post("/api/bills", json=bill_payload)
    assert response.status_code == 400
    assert response.json() == {"message": "Required fields are missing"}
    assert client.get("/api/all-bills").json() == []


def test_driver_bills_newest_first(client, bill_payload):
    for created_at, final_bill in (
        ("2026-10-01T09:00:00", 1000),
        ("2026-10-03T09:00:00", 3000),
        ("2026-10-02T09:00:00", 2000),
    ):
        client.post("/api/bills", json=dict(bill_payload, createdAt=created_at, finalBill=final_bill))
    client.post("/api/bills", json=dict(bill_payload, driverEmail="selvi@example.com"))

    bills = client.get("/api/bills/get/ravi@example.com").json()
    assert [b["finalBill"] for b in bills] == [3000, 2000, 1000]
    assert all(b["driverEmail"] == "ravi@example.com" for b in bills)


def test_driver_without_bills(client):
    assert client.get("/api/bills/get/nobody@example.com").json() == []


def test_all_bills_by_pickup_date(client, bill_payload):
    client.post("/api/bills", json=dict(bill_payload, pickupDate="2026-09-01"))
    client.post("/api/bills", json=dict(bill_payload, pickupDate="2026-10-01"))

    bills = client.get("/api/all-bills").json()
    assert [b["pickupDate"] for b in bills] == ["2026-10-01", "2026-09-01"]
