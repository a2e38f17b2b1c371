"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


@dataclass(frozen=True)
class PreviousLoan:
    """Loan from the applicant's repayment history"""

    status: str = ""  # "repaid", "defaulted", ...

    @property
    def repaid(self) -> bool:
        return self.status == "repaid"


@dataclass(frozen=True)
class ApplicantProfile:
    """
    Farmer applying for agricultural financing.

    farm_size and experience are mandatory; every other attribute defaults
    to "not present".
    """

    farm_size: float  # hectares
    experience: float  # years of farming

    previous_loans: Tuple[PreviousLoan, ...] = ()

    # Financial documentation
    bank_statements: bool = False
    financial_statements: bool = False
    tax_returns: bool = False

    crops: Tuple[str, ...] = ()

    # Market access
    market_contracts: bool = False
    export_license: bool = False
    cooperative_membership: bool = False
    direct_market_access: bool = False

    # Technology adoption
    irrigation_system: bool = False
    modern_equipment: bool = False
    precision_farming: bool = False
    digital_tools: bool = False
    sustainable_practices: bool = False

    # Insurance coverage
    crop_insurance: bool = False
    equipment_insurance: bool = False
    liability_insurance: bool = False


class RiskCategory(str, Enum):
    """Risk tier, valued by its display name"""

    LOW_RISK = "Low Risk"
    MEDIUM_RISK = "Medium Risk"
    MODERATE_RISK = "Moderate Risk"
    HIGH_RISK = "High Risk"


@dataclass(frozen=True)
class FactorScores:
    """Per-factor sub-scores, each on a 0-100 scale"""

    farm_size: float
    experience: float
    financial_history: float
    crop_diversification: float
    market_access: float
    technology_adoption: float
    insurance_coverage: float

    def as_dict(self) -> dict:
        return {
            "farmSize": self.farm_size,
            "experience": self.experience,
            "financialHistory": self.financial_history,
            "cropDiversification": self.crop_diversification,
            "marketAccess": self.market_access,
            "technologyAdoption": self.technology_adoption,
            "insuranceCoverage": self.insurance_coverage,
        }


@dataclass(frozen=True)
class Eligibility:
    """Loan decision derived from the risk tier"""

    approved: bool
    max_loan_amount: int
    interest_rate_adjustment: int  # percentage points


@dataclass(frozen=True)
class Tier:
    """Static decision attributes of a risk tier"""

    category: RiskCategory
    min_score: int
    color: str
    eligibility: Eligibility
    recommendations: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ScoreResult:
    """Output of a credit assessment"""

    credit_score: int
    risk_category: RiskCategory
    risk_color: str
    factor_scores: FactorScores
    recommendations: Tuple[str, ...]
    eligibility: Eligibility
    max_possible_score: int = 100
