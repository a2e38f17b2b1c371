"""Credit scoring engine - core business logic for agricultural loan decisions"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Tuple

from arimma_credit.domain.models import (
    ApplicantProfile,
    Eligibility,
    FactorScores,
    RiskCategory,
    ScoreResult,
    Tier,
)

MAX_FACTOR_SCORE = Decimal(100)

# Keyed by the wire name of each factor
FACTOR_WEIGHTS: Dict[str, Decimal] = {
    "farmSize": Decimal("0.20"),
    "experience": Decimal("0.15"),
    "financialHistory": Decimal("0.25"),
    "cropDiversification": Decimal("0.10"),
    "marketAccess": Decimal("0.15"),
    "technologyAdoption": Decimal("0.10"),
    "insuranceCoverage": Decimal("0.05"),
}

if sum(FACTOR_WEIGHTS.values()) != Decimal(1):
    raise RuntimeError("Factor weights must sum to 1.0")

MAX_POSSIBLE_SCORE = sum((MAX_FACTOR_SCORE * weight for weight in FACTOR_WEIGHTS.values()), Decimal(0))

RECOMMENDATIONS: Dict[RiskCategory, Tuple[str, ...]] = {
    RiskCategory.LOW_RISK: (
        "Excellent credit profile",
        "Eligible for best interest rates",
        "Consider larger loan amounts",
        "May qualify for premium products",
    ),
    RiskCategory.MEDIUM_RISK: (
        "Good credit profile with room for improvement",
        "Consider improving crop diversification",
        "Strengthen market access channels",
        "Maintain consistent repayment history",
    ),
    RiskCategory.MODERATE_RISK: (
        "Credit profile needs improvement",
        "Consider smaller loan amounts initially",
        "Focus on building repayment history",
        "Improve financial documentation",
    ),
    RiskCategory.HIGH_RISK: (
        "Significant credit profile improvements needed",
        "Consider alternative financing options",
        "Focus on building farming experience",
        "Work on financial stability first",
    ),
}

# Evaluated top-down, first match wins
TIERS: Tuple[Tier, ...] = (
    Tier(
        category=RiskCategory.LOW_RISK,
        min_score=80,
        color="green",
        eligibility=Eligibility(approved=True, max_loan_amount=5_000_000, interest_rate_adjustment=-2),
        recommendations=RECOMMENDATIONS[RiskCategory.LOW_RISK],
    ),
    Tier(
        category=RiskCategory.MEDIUM_RISK,
        min_score=65,
        color="yellow",
        eligibility=Eligibility(approved=True, max_loan_amount=2_000_000, interest_rate_adjustment=-1),
        recommendations=RECOMMENDATIONS[RiskCategory.MEDIUM_RISK],
    ),
    Tier(
        category=RiskCategory.MODERATE_RISK,
        min_score=50,
        color="orange",
        eligibility=Eligibility(approved=True, max_loan_amount=500_000, interest_rate_adjustment=0),
        recommendations=RECOMMENDATIONS[RiskCategory.MODERATE_RISK],
    ),
    Tier(
        category=RiskCategory.HIGH_RISK,
        min_score=0,
        color="red",
        eligibility=Eligibility(approved=False, max_loan_amount=0, interest_rate_adjustment=2),
        recommendations=RECOMMENDATIONS[RiskCategory.HIGH_RISK],
    ),
)

TIERS_BY_CATEGORY: Dict[RiskCategory, Tier] = {tier.category: tier for tier in TIERS}


def _clamp(value: float) -> float:
    """Clamp a sub-score to 0-100 (NaN counts as 0)"""
    if value != value:
        return 0.0
    return float(max(0.0, min(100.0, value)))


def score_farm_size(farm_size: float) -> float:
    """Step function over hectares"""
    if farm_size >= 100:
        return 100.0
    elif farm_size >= 50:
        return 80.0
    elif farm_size >= 20:
        return 60.0
    elif farm_size >= 10:
        return 40.0
    elif farm_size >= 5:
        return 20.0
    return 10.0


def score_experience(experience: float) -> float:
    """10 points per year of farming, capped at 100"""
    return _clamp(experience * 10)


def score_financial_history(profile: ApplicantProfile) -> float:
    """
    Repayment ratio plus documentation bonus.

    - Base 50 when there is no loan history
    - Otherwise 100 * repaid / total
    - +10 each for bank statements, financial statements, tax returns
    """
    score = 50.0
    if profile.previous_loans:
        repaid = sum(1 for loan in profile.previous_loans if loan.repaid)
        score = repaid / len(profile.previous_loans) * 100

    documents = (profile.bank_statements, profile.financial_statements, profile.tax_returns)
    score += 10 * sum(1 for present in documents if present)

    return _clamp(score)


def score_crop_diversification(crop_count: int) -> float:
    if crop_count >= 5:
        return 100.0
    elif crop_count >= 3:
        return 80.0
    elif crop_count >= 2:
        return 60.0
    elif crop_count >= 1:
        return 40.0
    return 20.0


def score_market_access(profile: ApplicantProfile) -> float:
    score = 30
    if profile.market_contracts:
        score += 20
    if profile.export_license:
        score += 15
    if profile.cooperative_membership:
        score += 15
    if profile.direct_market_access:
        score += 20
    return _clamp(score)


def score_technology_adoption(profile: ApplicantProfile) -> float:
    score = 20
    for adopted in (
        profile.irrigation_system,
        profile.modern_equipment,
        profile.precision_farming,
        profile.digital_tools,
    ):
        if adopted:
            score += 15
    if profile.sustainable_practices:
        score += 20
    return _clamp(score)


def score_insurance_coverage(profile: ApplicantProfile) -> float:
    score = 0
    if profile.crop_insurance:
        score += 40
    if profile.equipment_insurance:
        score += 30
    if profile.liability_insurance:
        score += 30
    return _clamp(score)


def calculate_factor_scores(profile: ApplicantProfile) -> FactorScores:
    """Evaluate every factor independently on a 0-100 scale"""
    return FactorScores(
        farm_size=score_farm_size(profile.farm_size),
        experience=score_experience(profile.experience),
        financial_history=score_financial_history(profile),
        crop_diversification=score_crop_diversification(len(set(profile.crops))),
        market_access=score_market_access(profile),
        technology_adoption=score_technology_adoption(profile),
        insurance_coverage=score_insurance_coverage(profile),
    )


def weighted_score(factor_scores: FactorScores) -> int:
    """
    Fold factor scores against the weight table into a 0-100 credit score.

    The sum is taken in Decimal so weights add up to exactly 1.0, and rounding
    (half-up) happens once on the final value:
        63.5 -> 64, 64.4999 -> 64
    """
    scores = factor_scores.as_dict()
    total = sum(
        (Decimal(str(scores[name])) * weight for name, weight in FACTOR_WEIGHTS.items()),
        Decimal(0),
    )
    normalized = total * 100 / MAX_POSSIBLE_SCORE
    return int(normalized.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def determine_tier(credit_score: int) -> Tier:
    """
    Map credit score to a risk tier.

    Score bands:
    - 80+:   Low Risk (R5,000,000 ceiling, -2pp rate)
    - 65-79: Medium Risk (R2,000,000 ceiling, -1pp rate)
    - 50-64: Moderate Risk (R500,000 ceiling, no adjustment)
    - <50:   High Risk (declined, +2pp rate)
    """
    for tier in TIERS:
        if credit_score >= tier.min_score:
            return tier
    return TIERS_BY_CATEGORY[RiskCategory.HIGH_RISK]


def score(profile: ApplicantProfile) -> ScoreResult:
    """
    Main entry point: evaluate an applicant and derive the loan decision.

    Pure and deterministic; never raises for a well-typed profile.
    """
    factor_scores = calculate_factor_scores(profile)
    credit_score = weighted_score(factor_scores)
    tier = determine_tier(credit_score)

    return ScoreResult(
        credit_score=credit_score,
        risk_category=tier.category,
        risk_color=tier.color,
        factor_scores=factor_scores,
        recommendations=tier.recommendations,
        eligibility=tier.eligibility,
        max_possible_score=int(MAX_POSSIBLE_SCORE),
    )
