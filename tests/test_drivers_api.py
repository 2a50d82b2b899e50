from datetime import datetime, timedelta, timezone

import jwt

from dispatch import crud
from dispatch.core.config import settings


def register(client, payload):
    return client.post("/api/drivers/register", json=payload)


def test_register_and_login(client, driver_payload):
    response = register(client, driver_payload)
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Driver registered successfully"
    driver_id = body["driverId"]

    response = client.post("/login", json={"email": "ravi@example.com", "password": "s3cret-pass"})
    assert response.status_code == 200
    body = response.json()
    assert body["user"]["id"] == driver_id
    assert body["user"]["email"] == "ravi@example.com"
    assert "password" not in body["user"]

    claims = jwt.decode(body["token"], settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    assert claims["id"] == driver_id
    assert claims["email"] == "ravi@example.com"
    expires = datetime.fromtimestamp(claims["exp"], tz=timezone.utc)
    assert expires > datetime.now(timezone.utc) + timedelta(days=6)


def test_password_is_stored_hashed(client, db_session, driver_payload):
    register(client, driver_payload)
    driver = crud.driver.get_by_email(db_session, email="ravi@example.com")
    assert driver.password != "s3cret-pass"


def test_login_with_wrong_password(client, driver_payload):
    register(client, driver_payload)
    response = client.post("/login", json={"email": "ravi@example.com", "password": "nope"})
    assert response.status_code == 401
    assert response.json() == {"message": "Invalid email or password"}


def test_login_unknown_email(client):
    response = client.post("/login", json={"email": "ghost@example.com", "password": "x"})
    assert response.status_code == 401


def test_register_missing_required_fields(client, driver_payload):
    for field in ("name", "email", "phoneNumber", "password"):
        payload = dict(driver_payload)
        del payload[field]
        response = register(client, payload)
        assert response.status_code == 400, field
        assert response.json()["message"] == "Required fields are missing"


def test_register_invalid_email(client, driver_payload):
    response = register(client, dict(driver_payload, email="not-an-email"))
    assert response.status_code == 400
    assert "message" in response.json()


def test_register_duplicate_email_is_a_data_access_failure(client, driver_payload):
    assert register(client, driver_payload).status_code == 201
    response = register(client, dict(driver_payload, phoneNumber="9000000009"))
    assert response.status_code == 500
    assert response.json() == {"message": "Driver registration failed"}


def test_check_exists_reports_each_field(client, driver_payload):
    register(client, driver_payload)
    response = client.post("/api/drivers/check-exists", json={
        "email": "ravi@example.com",
        "phoneNumber": "9111111111",
        "rcNumber": "TN01AB1234",
        "insuranceNumber": "INS-0000",
    })
    assert response.status_code == 200
    assert response.json() == {
        "email": True,
        "phoneNumber": False,
        "rcNumber": True,
        "insuranceNumber": False,
    }


def test_check_exists_on_empty_directory(client):
    response = client.post("/api/drivers/check-exists", json={"email": "a@x.com"})
    assert response.json() == {
        "email": False,
        "phoneNumber": False,
        "rcNumber": False,
        "insuranceNumber": False,
    }


def test_get_driver(client, driver_payload):
    driver_id = register(client, driver_payload).json()["driverId"]

    response = client.get(f"/api/drivers/{driver_id}")
    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Ravi Kumar"
    assert body["phone"] == "9876543210"
    assert body["rcNumber"] == "TN01AB1234"
    assert body["fcExpiry"] == "2026-03-31"
    assert "password" not in body

    assert client.get("/api/drivers/999").status_code == 404


def test_status_query_and_update(client, driver_payload):
    driver_id = register(client, driver_payload).json()["driverId"]

    response = client.get("/api/drivers/status/ravi@example.com")
    assert response.json() == {"status": "available"}

    response = client.put(f"/api/drivers/{driver_id}", json={"status": "on_trip"})
    assert response.status_code == 200
    assert response.json() == {"message": "Driver updated successfully"}

    assert client.get("/api/drivers/status/ravi@example.com").json() == {"status": "on_trip"}


def test_status_unknown_driver(client):
    response = client.get("/api/drivers/status/ghost@example.com")
    assert response.status_code == 404
    assert response.json() == {"message": "Driver not found"}


def test_update_password_is_hashed(client, driver_payload):
    driver_id = register(client, driver_payload).json()["driverId"]
    client.put(f"/api/drivers/{driver_id}", json={"password": "n3w-pass"})

    assert client.post("/login", json={"email": "ravi@example.com", "password": "n3w-pass"}).status_code == 200
    assert client.post("/login", json={"email": "ravi@example.com", "password": "s3cret-pass"}).status_code == 401


def test_update_rejects_unknown_columns(client, driver_payload):
    driver_id = register(client, driver_payload).json()["driverId"]
    response = client.put(f"/api/drivers/{driver_id}", json={"favouriteColour": "blue"})
    assert response.status_code == 400


def test_update_rejects_null_required_fields(client, driver_payload):
    driver_id = register(client, driver_payload).json()["driverId"]
    for field in ("name", "email", "phone", "password"):
        response = client.put(f"/api/drivers/{driver_id}", json={field: None})
        assert response.status_code == 400
        assert response.json() == {"message": "Required fields cannot be null"}

    assert client.get(f"/api/drivers/{driver_id}").json()["email"] == "ravi@example.com"
    assert client.post("/login", json={"email": "ravi@example.com", "password": "s3cret-pass"}).status_code == 200


def test_invalid_registration_does_not_echo_input(client, driver_payload):
    response = register(client, {**driver_payload, "email": "not-an-email"})
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid request"
    assert "s3cret-pass" not in response.text
    assert "not-an-email" not in response.text


def test_update_unknown_driver(client):
    response = client.put("/api/drivers/999", json={"status": "off"})
    assert response.status_code == 404


def test_driver_listings(client, driver_payload):
    register(client, driver_payload)
    register(client, dict(
        driver_payload,
        name="Selvi",
        email="selvi@example.com",
        phoneNumber="9876500000",
    ))

    contacts = client.get("/api/drivers").json()
    assert contacts == [
        {"email": "ravi@example.com", "name": "Ravi Kumar"},
        {"email": "selvi@example.com", "name": "Selvi"},
    ]

    everyone = client.get("/api/all-drivers").json()
    assert [d["email"] for d in everyone] == ["ravi@example.com", "selvi@example.com"]
    assert all("password" not in d for d in everyone)
