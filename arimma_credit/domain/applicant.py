"""Build applicant profiles from raw request payloads"""

from collections.abc import Mapping
from typing import Any, Dict, List, Tuple

from arimma_credit.domain.exceptions import InvalidApplicantError, MissingFieldsError
from arimma_credit.domain.models import ApplicantProfile, PreviousLoan
from arimma_credit.utils.coercion import is_sequence, parse_crops, parse_flag, parse_loan_status, parse_real

REQUIRED_FIELDS = ("farmSize", "experience")

# Wire name -> ApplicantProfile attribute
FLAG_FIELDS: Dict[str, str] = {
    "bankStatements": "bank_statements",
    "financialStatements": "financial_statements",
    "taxReturns": "tax_returns",
    "marketContracts": "market_contracts",
    "exportLicense": "export_license",
    "cooperativeMembership": "cooperative_membership",
    "directMarketAccess": "direct_market_access",
    "irrigationSystem": "irrigation_system",
    "modernEquipment": "modern_equipment",
    "precisionFarming": "precision_farming",
    "digitalTools": "digital_tools",
    "sustainablePractices": "sustainable_practices",
    "cropInsurance": "crop_insurance",
    "equipmentInsurance": "equipment_insurance",
    "liabilityInsurance": "liability_insurance",
}


def find_missing_fields(payload: Mapping) -> List[str]:
    """Required fields that are absent, null or empty strings"""
    missing = []
    for name in REQUIRED_FIELDS:
        value = payload.get(name)
        if value is None or value == "":
            missing.append(name)
    return missing


def parse_previous_loans(value: Any) -> Tuple[PreviousLoan, ...]:
    """
    Loan history entries.

    Anything other than a JSON array (e.g. the bare `true` a checkbox sends)
    means no history. Entries without a status still count toward the total.
    """
    if not is_sequence(value):
        return ()
    return tuple(PreviousLoan(status=parse_loan_status(item)) for item in value)


def build_profile(payload: Any) -> ApplicantProfile:
    """
    Validate mandatory fields and coerce the rest of the payload.

    Raises:
        InvalidApplicantError: payload is not a JSON object
        MissingFieldsError: farmSize or experience is missing
    """
    if not isinstance(payload, Mapping):
        raise InvalidApplicantError("Request body must be a JSON object")

    missing = find_missing_fields(payload)
    if missing:
        raise MissingFieldsError(missing)

    flags = {attr: parse_flag(payload.get(name)) for name, attr in FLAG_FIELDS.items()}

    return ApplicantProfile(
        farm_size=parse_real(payload.get("farmSize")),
        experience=parse_real(payload.get("experience")),
        previous_loans=parse_previous_loans(payload.get("previousLoans")),
        crops=parse_crops(payload.get("crops")),
        **flags,
    )
