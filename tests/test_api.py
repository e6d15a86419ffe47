from __future__ import annotations

import io

import pytest
from openpyxl import load_workbook

ID_IMAGE = "data:image/png;base64,iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="

EMPLOYEE = {
    "firstName": "Alex",
    "lastName": "Moreno",
    "email": "alex@example.com",
    "phone": "555-0101",
    "nationalId": "ID-1001",
    "nationalIdImage": ID_IMAGE,
}


def _present_employee(client) -> str:
    employee_id = client.post("/api/employees", json=EMPLOYEE).get_json()["id"]
    assert client.post("/api/attendance", json={"employeeId": employee_id, "isPresent": True}).status_code == 201
    return employee_id


def _customer_payload(employee_id: str) -> dict:
    return {
        "firstName": "Jordan",
        "lastName": "Lee",
        "email": "jordan@example.com",
        "phone": "555-0199",
        "vehicleMake": "Toyota",
        "vehicleModel": "Corolla",
        "vehicleYear": 2019,
        "licensePlate": "abc-123",
        "services": ["Basic Wash"],
        "assignedEmployeeId": employee_id,
    }


def _customer(client, employee_id: str) -> dict:
    resp = client.post("/api/customers", json=_customer_payload(employee_id))
    assert resp.status_code == 201
    return resp.get_json()


def test_health(client):
    assert client.get("/api/health").get_json() == {"status": "ok"}


def test_validation_errors_are_400_with_fields(client):
    resp = client.post("/api/employees", json={"firstName": "Alex"})

    assert resp.status_code == 400
    body = resp.get_json()
    assert body["success"] is False
    assert "email" in body["errors"]


def test_non_object_body_is_rejected(client):
    assert client.post("/api/employees", json=["x"]).status_code == 400


def test_unknown_ids_are_404(client):
    assert client.get("/api/customers/nope").status_code == 404
    assert client.post("/api/employees/nope/toggle-active").status_code == 404
    assert client.post("/api/carpets/nope/status", json={"status": "drying"}).status_code == 404
    assert client.post("/api/assignments/nope/complete").status_code == 404


def test_customer_registration_flow(client):
    employee_id = _present_employee(client)
    customer = _customer(client, employee_id)

    assert customer["vehicle"]["licensePlate"] == "ABC-123"
    assert [e["id"] for e in client.get("/api/attendance/present").get_json()] == [employee_id]

    [assignment] = client.get(f"/api/assignments?employeeId={employee_id}").get_json()
    assert assignment["status"] == "in-progress"

    done = client.post(f"/api/assignments/{assignment['id']}/complete").get_json()
    assert done["status"] == "completed"
    assert done["endTime"] is not None

    dashboard = client.get("/api/dashboard").get_json()
    assert dashboard["totalCustomers"] == 1
    assert dashboard["presentToday"] == 1
    assert dashboard["activeAssignments"] == 0


def test_customer_rejected_when_employee_absent(client):
    employee_id = client.post("/api/employees", json=EMPLOYEE).get_json()["id"]
    resp = client.post("/api/customers", json=_customer_payload(employee_id))
    assert resp.status_code == 400
    assert "assignedEmployeeId" in resp.get_json()["errors"]


def test_carpet_job_lifecycle(client):
    employee_id = _present_employee(client)
    customer = _customer(client, employee_id)

    resp = client.post(
        "/api/carpets",
        json={
            "customerId": customer["id"],
            "employeeId": employee_id,
            "carpetType": "oriental",
            "length": 12,
            "width": 10,
            "unit": "feet",
            "material": "Wool",
            "color": "Red",
            "condition": "good",
            "cleaningService": "deep",
            "dryingService": "dehumidifier",
            "protectionService": "stain-guard",
            "deposit": 20,
        },
    )
    assert resp.status_code == 201
    carpet = resp.get_json()
    assert carpet["status"] == "pending"
    assert carpet["pricing"]["totalPrice"] == 127.5
    assert carpet["pricing"]["balance"] == 107.5

    tracking = client.get(f"/api/carpets/tracking?employeeId={employee_id}").get_json()
    assert tracking[0]["customerName"] == "Jordan Lee"

    client.post(f"/api/carpets/{carpet['id']}/status", json={"status": "completed"})
    delivered = client.post(f"/api/carpets/{carpet['id']}/status", json={"status": "delivered"}).get_json()
    assert delivered["timeline"]["actualCompletion"] is not None
    assert delivered["timeline"]["pickup"] is not None

    stats = client.get("/api/carpets/stats").get_json()
    assert stats["deliveredCarpets"] == 1
    assert stats["totalRevenue"] == 127.5

    assert client.get("/api/carpets?q=wool").get_json()[0]["id"] == carpet["id"]
    assert client.get("/api/carpets?status=pending").get_json() == []


def test_invalid_carpet_status_is_400(client):
    assert client.post("/api/carpets/x/status", json={"status": "lost"}).status_code == 400


def test_quote_preview_does_not_store(client):
    resp = client.post(
        "/api/carpets/quote",
        json={"length": 10, "width": 6, "cleaningService": "basic", "protectionService": "anti-microbial"},
    )

    assert resp.status_code == 200
    assert resp.get_json()["totalPrice"] == pytest.approx(54.0)
    assert client.get("/api/carpets").get_json() == []


def test_customer_csv_export(client):
    employee_id = _present_employee(client)
    _customer(client, employee_id)

    resp = client.get("/api/customers/export.csv")

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    text = resp.data.decode("utf-8-sig")
    assert text.startswith('"First Name","Last Name"')
    assert '"Alex Moreno"' in text


def test_performance_report_and_excel(client):
    employee_id = _present_employee(client)
    _customer(client, employee_id)

    body = client.get("/api/performance").get_json()
    assert body["report"][0]["employeeName"] == "Alex Moreno"
    assert body["report"][0]["totalAssignments"] == 1
    assert body["summary"]["activeEmployeesCount"] == 1

    resp = client.get("/api/performance/export.xlsx")
    sheet = load_workbook(io.BytesIO(resp.data)).active
    assert sheet["A2"].value == "Alex Moreno"


def test_bad_date_argument_is_400(client):
    assert client.get("/api/attendance?date=31-01-2026").status_code == 400


def test_form_catalogs(client):
    assert "Basic Wash" in client.get("/api/customers/services").get_json()

    options = client.get("/api/carpets/options").get_json()
    deep = next(o for o in options["cleaning"] if o["value"] == "deep")
    assert deep == {"value": "deep", "label": "Deep Cleaning", "price": 45.0}
    assert "Coffee" in options["stains"]


def test_quote_rejects_nan_size(client):
    resp = client.post("/api/carpets/quote", json={"length": "nan", "width": "10"})

    assert resp.status_code == 400
    assert "length" in resp.get_json()["errors"]
