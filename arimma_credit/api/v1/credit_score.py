"""POST /api/finance/credit-score - Agricultural credit assessment endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from arimma_credit.api.v1.schemas import (
    CreditScoreResponse,
    ErrorResponse,
    MissingFieldsResponse,
    ScoreResultSchema,
)
from arimma_credit.api.dependencies import ScoringEngine, get_request_id, get_scoring_engine
from arimma_credit.domain.applicant import build_profile
from arimma_credit.domain.exceptions import InvalidApplicantError, MissingFieldsError
from arimma_credit.infrastructure.observability.metrics import record_assessment, invalid_request_counter
from arimma_credit.infrastructure.observability.logging import log_assessment

router = APIRouter()


@router.post(
    "/credit-score",
    response_model=CreditScoreResponse,
    responses={
        400: {"model": MissingFieldsResponse},
        500: {"model": ErrorResponse},
    },
)
async def calculate_credit_score(
    request: Request,
    engine: ScoringEngine = Depends(get_scoring_engine),
):
    """
    Score a farmer's loan application.

    Flow:
    1. Read the applicant JSON payload
    2. Reject payloads missing farmSize or experience (400)
    3. Coerce the remaining fields into an ApplicantProfile
    4. Run the scoring engine
    5. Return score, risk tier, recommendations and eligibility
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        payload = await request.json()
    except ValueError as e:
        invalid_request_counter.labels(reason="invalid_body").inc()
        logging.warning(f"Malformed JSON body: {e}", extra={"request_id": request_id})
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(error="Request body must be valid JSON").model_dump(by_alias=True),
        )

    try:
        profile = build_profile(payload)
        result = engine(profile)

        duration_ms = (time.time() - start_time) * 1000
        record_assessment(
            result.credit_score,
            result.risk_category.value,
            result.eligibility.approved,
            result.eligibility.max_loan_amount,
        )
        log_assessment(
            request_id,
            result.credit_score,
            result.risk_category.value,
            result.eligibility.approved,
            duration_ms,
        )

        return CreditScoreResponse(data=ScoreResultSchema.from_result(result))

    except MissingFieldsError as e:
        invalid_request_counter.labels(reason="missing_fields").inc()
        logging.warning(
            f"Missing fields: {', '.join(e.missing_fields)}",
            extra={"request_id": request_id},
        )
        return JSONResponse(
            status_code=400,
            content=MissingFieldsResponse(error=str(e), received_data=payload).model_dump(by_alias=True),
        )

    except InvalidApplicantError as e:
        invalid_request_counter.labels(reason="invalid_body").inc()
        logging.warning(f"Invalid applicant payload: {e}", extra={"request_id": request_id})
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(error=str(e)).model_dump(by_alias=True),
        )

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error="Failed to calculate credit score").model_dump(by_alias=True),
        )
