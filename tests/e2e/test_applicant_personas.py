"""
E2E tests for applicant personas scored through the HTTP API.

Personas:
- commercial: large diversified farm, every factor maxed, Low Risk
- established: mid-size farm with clean history, Medium Risk
- web_form: the finance page's checkbox payload, Moderate Risk
- defaulter: poor repayment record, High Risk
- newcomer: smallholder with nothing but the mandatory fields, High Risk
"""

import pytest
from fastapi.testclient import TestClient

CREDIT_SCORE_URL = "/api/finance/credit-score"


def _assess(client: TestClient, payload: dict) -> dict:
    response = client.post(CREDIT_SCORE_URL, json=payload)
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    return body["data"]


def test_commercial_farmer_low_risk(client: TestClient, commercial_payload):
    """
    commercial: every sub-score at 100
    Expected: top score, largest ceiling, best rate
    """
    data = _assess(client, commercial_payload)

    assert data["creditScore"] == 100
    assert data["riskCategory"] == "Low Risk"
    assert data["riskColor"] == "green"
    assert data["eligibility"] == {
        "approved": True,
        "maxLoanAmount": 5000000,
        "interestRateAdjustment": -2,
    }
    assert data["recommendations"][0] == "Excellent credit profile"


def test_established_farmer_medium_risk(client: TestClient):
    """
    established: 12 + 12 + 25 + 8 + 9.75 + 5 + 3.5 = 75.25
    Expected: Medium Risk, R2m ceiling, -1pp
    """
    data = _assess(
        client,
        {
            "farmSize": 20,
            "experience": 8,
            "previousLoans": [{"status": "repaid"}, {"status": "repaid"}],
            "bankStatements": True,
            "taxReturns": True,
            "crops": ["maize", "beans", "potatoes"],
            "marketContracts": True,
            "cooperativeMembership": True,
            "irrigationSystem": True,
            "modernEquipment": True,
            "cropInsurance": True,
            "equipmentInsurance": True,
        },
    )

    assert data["creditScore"] == 75
    assert data["riskCategory"] == "Medium Risk"
    assert data["eligibility"]["maxLoanAmount"] == 2000000
    assert data["eligibility"]["interestRateAdjustment"] == -1


def test_web_form_payload_moderate_risk(client: TestClient):
    """
    web_form: string numbers and previousLoans sent as a checkbox boolean
    Expected: loan history ignored (base 50 + 10), 53.5 -> 54
    """
    data = _assess(
        client,
        {
            "farmSize": "50",
            "experience": "5",
            "previousLoans": True,
            "bankStatements": True,
            "marketContracts": True,
            "irrigationSystem": True,
            "cropInsurance": True,
        },
    )

    assert data["factorScores"]["financialHistory"] == 60
    assert data["creditScore"] == 54
    assert data["riskCategory"] == "Moderate Risk"
    assert data["eligibility"]["approved"] is True


def test_defaulter_high_risk(client: TestClient):
    """
    defaulter: 8 + 4.5 + 6.25 + 4 + 4.5 + 2 + 0 = 29.25
    Expected: declined
    """
    data = _assess(
        client,
        {
            "farmSize": 10,
            "experience": 3,
            "previousLoans": [
                {"status": "repaid"},
                {"status": "defaulted"},
                {"status": "defaulted"},
                {"status": "defaulted"},
            ],
            "crops": ["maize"],
        },
    )

    assert data["creditScore"] == 29
    assert data["riskCategory"] == "High Risk"
    assert data["riskColor"] == "red"
    assert data["eligibility"] == {
        "approved": False,
        "maxLoanAmount": 0,
        "interestRateAdjustment": 2,
    }


@pytest.mark.parametrize("experience, expected_score", [(0, 23), (2, 26), (10, 38)])
def test_newcomer_floor_scores(client: TestClient, experience, expected_score):
    """
    newcomer: only mandatory fields, farm under 5 ha
    Expected: baseline sub-scores, score grows with experience only
    """
    data = _assess(client, {"farmSize": 2, "experience": experience})

    assert data["creditScore"] == expected_score
    assert data["riskCategory"] == "High Risk"
    assert data["eligibility"]["approved"] is False


def test_repeat_assessment_identical(client: TestClient, example_payload):
    """Same payload, same result"""
    assert _assess(client, example_payload) == _assess(client, example_payload)
