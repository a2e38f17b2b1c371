"""Pytest fixtures for testing"""

import pytest
from typing import Any, Dict
from fastapi.testclient import TestClient
from arimma_credit.api.main import create_app
from arimma_credit.domain.models import ApplicantProfile, PreviousLoan


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    app = create_app()
    return TestClient(app)


@pytest.fixture
def example_payload() -> Dict[str, Any]:
    """
    Mid-sized farm with one repaid loan.

    Sub-scores: 80, 50, 100, 20, 50, 35, 40 -> weighted 63.5 -> 64
    """
    return {
        "farmSize": 50,
        "experience": 5,
        "previousLoans": [{"status": "repaid"}],
        "bankStatements": True,
        "marketContracts": True,
        "irrigationSystem": True,
        "cropInsurance": True,
    }


@pytest.fixture
def example_profile() -> ApplicantProfile:
    """Domain equivalent of example_payload"""
    return ApplicantProfile(
        farm_size=50,
        experience=5,
        previous_loans=(PreviousLoan(status="repaid"),),
        bank_statements=True,
        market_contracts=True,
        irrigation_system=True,
        crop_insurance=True,
    )


@pytest.fixture
def commercial_payload() -> Dict[str, Any]:
    """Large, diversified, fully insured farm - every factor at 100"""
    return {
        "farmSize": "250",
        "experience": "15",
        "previousLoans": [{"status": "repaid"}, {"status": "repaid"}],
        "bankStatements": True,
        "financialStatements": True,
        "taxReturns": True,
        "crops": ["maize", "wheat", "soybeans", "sunflower", "sorghum"],
        "marketContracts": True,
        "exportLicense": True,
        "cooperativeMembership": True,
        "directMarketAccess": True,
        "irrigationSystem": True,
        "modernEquipment": True,
        "precisionFarming": True,
        "digitalTools": True,
        "sustainablePractices": True,
        "cropInsurance": True,
        "equipmentInsurance": True,
        "liabilityInsurance": True,
    }
