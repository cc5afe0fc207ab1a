from __future__ import annotations

from fastapi.testclient import TestClient

from sleepscreen.api.main import app

client = TestClient(app)


def build_payload(answers, contact, **extra):
    payload = {"answers": answers, "contact": contact}
    payload.update(extra)
    return payload


def test_root_and_health():
    assert client.get("/").json()["health"] == "/health"
    response = client.get("/health/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_submit_scores_survey(all_no, contact):
    answers = dict(all_no, snoring="yes", tired="yes", observed="yes")
    response = client.post("/api/survey/submit", json=build_payload(answers, contact, email_results=True))
    assert response.status_code == 200
    data = response.json()
    assert data["score"] == 3
    assert data["max_score"] == 8
    assert data["risk_tier"] == "Intermediate Risk"
    assert data["respondent_name"] == "Jane Doe"
    assert data["guidance"]["assessment_title"] == "Intermediate Risk Assessment"
    assert data["email_report_requested"] is True


def test_submit_recomputes_derived_answers_from_measurements(all_no, contact):
    payload = build_payload(
        all_no,
        contact,
        body_metrics={"height": 65, "height_unit": "in", "weight": 250, "weight_unit": "lbs"},
        neck={"size": 17, "unit": "inches"},
        age=62,
    )
    data = client.post("/api/survey/submit", json=payload).json()
    assert data["score"] == 3
    assert data["risk_tier"] == "Intermediate Risk"


def test_submit_incomplete_survey_returns_422(all_no, contact):
    answers = dict(all_no)
    answers.pop("gender_male")
    response = client.post("/api/survey/submit", json=build_payload(answers, contact))
    assert response.status_code == 422
    body = response.json()
    assert body["missing_questions"] == ["gender_male"]
    assert body["detail"].startswith("Please answer all questions")


def test_submit_with_empty_contact_returns_422(all_no, contact):
    response = client.post("/api/survey/submit", json=build_payload(all_no, dict(contact, phone="")))
    assert response.status_code == 422
    assert response.json()["missing_contact"] == ["phone"]


def test_submit_with_invalid_measurement_returns_422(all_no, contact):
    payload = build_payload(all_no, contact, neck={"size": 0, "unit": "cm"})
    response = client.post("/api/survey/submit", json=payload)
    assert response.status_code == 422
    assert response.json()["field"] == "neck_size"


def test_submit_with_unknown_risk_factor_returns_422(all_no, contact):
    payload = build_payload(all_no, contact, additional_risk_factors=["astrology"])
    response = client.post("/api/survey/submit", json=payload)
    assert response.status_code == 422


def test_questions_in_stop_bang_order():
    items = client.get("/api/survey/questions").json()
    assert [item["id"] for item in items] == [
        "snoring",
        "tired",
        "observed",
        "pressure",
        "bmi_over_35",
        "age_over_50",
        "neck_over_16",
        "gender_male",
    ]
    assert [item["id"] for item in items if item["derived"]] == ["bmi_over_35", "age_over_50", "neck_over_16"]


def test_bmi_calculator():
    response = client.post(
        "/api/calculators/bmi",
        json={"height": 170, "height_unit": "cm", "weight": 70, "weight_unit": "kg"},
    )
    assert response.json() == {"bmi": 24.2, "bmi_over_35": False}


def test_bmi_calculator_rejects_zero_height():
    response = client.post("/api/calculators/bmi", json={"height": 0, "weight": 70})
    assert response.status_code == 422
    assert response.json()["field"] == "height"


def test_bmi_calculator_rejects_unusable_bmi():
    tiny = client.post("/api/calculators/bmi", json={"height": 1e-200, "weight": 70})
    assert tiny.status_code == 422
    assert tiny.json()["field"] == "bmi"
    huge = client.post("/api/calculators/bmi", json={"height": 170, "weight": 1e308})
    assert huge.status_code == 422


def test_age_calculator_rejects_age_above_120():
    response = client.post("/api/calculators/age", json={"age": 500})
    assert response.status_code == 422
    assert response.json()["field"] == "age"


def test_neck_and_age_calculators():
    neck = client.post("/api/calculators/neck", json={"neck_size": 40, "neck_unit": "cm"}).json()
    assert neck == {"neck_inches": 15.75, "neck_over_16": False}
    age = client.post("/api/calculators/age", json={"age": 51}).json()
    assert age == {"age_over_50": True}


def test_validate_field_endpoint():
    ok = client.post("/api/validate/email", json={"value": "jane@example.com"}).json()
    assert ok == {"field": "email", "valid": True, "code": None, "message": None}
    bad = client.post("/api/validate/full_name", json={"value": "J"}).json()
    assert bad["valid"] is False
    assert bad["code"] == "TooShort"
    missing = client.post("/api/validate/address", json={"value": "x"})
    assert missing.status_code == 404


def test_practice_info():
    data = client.get("/api/practice").json()
    assert data["phone"] == "(713) 797-0840"
    assert [item["label"] for item in data["breadcrumb"]] == ["Home", "Patients", "Sleep Apnea Survey"]
    assert data["breadcrumb"][-1]["current"] is True
