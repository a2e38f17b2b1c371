"""Pydantic schemas for API responses"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from arimma_credit.domain.models import ScoreResult


class CamelModel(BaseModel):
    """Serializes field names in camelCase"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EligibilitySchema(CamelModel):
    """Loan decision for the resolved risk tier"""

    approved: bool
    max_loan_amount: int
    interest_rate_adjustment: int


class ScoreResultSchema(CamelModel):
    """Credit assessment payload"""

    credit_score: int
    risk_category: str
    risk_color: str
    factor_scores: Dict[str, float]
    recommendations: List[str]
    max_possible_score: int
    eligibility: EligibilitySchema

    @classmethod
    def from_result(cls, result: ScoreResult) -> "ScoreResultSchema":
        return cls(
            credit_score=result.credit_score,
            risk_category=result.risk_category.value,
            risk_color=result.risk_color,
            factor_scores=result.factor_scores.as_dict(),
            recommendations=list(result.recommendations),
            max_possible_score=result.max_possible_score,
            eligibility=EligibilitySchema(
                approved=result.eligibility.approved,
                max_loan_amount=result.eligibility.max_loan_amount,
                interest_rate_adjustment=result.eligibility.interest_rate_adjustment,
            ),
        )


class CreditScoreResponse(CamelModel):
    """Response for POST /api/finance/credit-score"""

    success: bool = True
    data: ScoreResultSchema


class ErrorResponse(CamelModel):
    """Failure envelope"""

    success: bool = False
    error: str


class MissingFieldsResponse(ErrorResponse):
    """400 response echoing the payload that was rejected"""

    received_data: Any = None
