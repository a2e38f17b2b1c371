"""Dependency injection for FastAPI endpoints"""

from typing import Callable

from fastapi import Request

from arimma_credit.domain.models import ApplicantProfile, ScoreResult
from arimma_credit.domain.scoring import score

ScoringEngine = Callable[[ApplicantProfile], ScoreResult]


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_scoring_engine() -> ScoringEngine:
    """Provide the credit scoring function"""
    return score
