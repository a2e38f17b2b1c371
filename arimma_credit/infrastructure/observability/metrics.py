"""Prometheus metrics for monitoring score distribution, approvals and request latency"""

from prometheus_client import Counter, Histogram

# Assessment metrics
assessment_counter = Counter(
    "arimma_credit_assessment_total",
    "Total credit assessments made",
    ["risk_category", "outcome"],  # outcome: approved | declined
)

credit_score_histogram = Histogram(
    "arimma_credit_score",
    "Distribution of credit scores",
    buckets=[10, 20, 30, 40, 50, 65, 80, 90, 100],
)

loan_ceiling_bucket_counter = Counter(
    "arimma_loan_ceiling_bucket",
    "Loan ceilings issued by bucket",
    ["bucket"],  # R0, R500k, R2m, R5m
)

invalid_request_counter = Counter(
    "arimma_invalid_request_total",
    "Credit score requests rejected before scoring",
    ["reason"],  # missing_fields | invalid_body
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_assessment(credit_score: int, risk_category: str, approved: bool, max_loan_amount: int) -> None:
    """Record assessment metrics for monitoring approval rates and loan ceiling distribution"""
    outcome = "approved" if approved else "declined"
    assessment_counter.labels(risk_category=risk_category, outcome=outcome).inc()
    credit_score_histogram.observe(credit_score)

    if max_loan_amount == 0:
        bucket = "R0"
    elif max_loan_amount <= 500_000:
        bucket = "R500k"
    elif max_loan_amount <= 2_000_000:
        bucket = "R2m"
    else:
        bucket = "R5m"

    loan_ceiling_bucket_counter.labels(bucket=bucket).inc()
