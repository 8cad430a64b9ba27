"""
Request parameter dependencies for FastAPI.

Required query parameters are checked here, before any handler touches the
database, so a bad request never costs a query.
"""

from datetime import date
from typing import Dict, Optional, Union

from fastapi import Query

from accounting_api.app.core.config import settings
from accounting_api.app.core.exceptions import ValidationError
from accounting_api.app.schemas.reports import CashFlowParams, BankReconciliationParams


def _require(params: Dict[str, Optional[str]]) -> None:
    """Raise ValidationError naming every missing or empty parameter."""
    missing = [name for name, value in params.items() if not value]
    if missing:
        raise ValidationError(
            f"Missing required query parameters: {', '.join(missing)}",
            fields=missing
        )


def _company_id(value: str) -> Union[int, str]:
    """Coerce companyid to the configured column type."""
    if settings.ledger_company_id_type != "integer":
        return value
    try:
        return int(value)
    except ValueError:
        raise ValidationError(
            "Invalid value for query parameter companyid: expected an integer",
            fields=["companyid"]
        )


def _parse_date(name: str, value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ValidationError(
            f"Invalid date for query parameter {name}: expected YYYY-MM-DD",
            fields=[name]
        )


async def cash_flow_params(
    companyid: Optional[str] = Query(None, description="Company identifier"),
    from_date: Optional[str] = Query(None, alias="fromDate", description="Start date (inclusive)"),
    to_date: Optional[str] = Query(None, alias="toDate", description="End date (inclusive)"),
) -> CashFlowParams:
    """Validate the cash-flow query string."""
    _require({"companyid": companyid, "fromDate": from_date, "toDate": to_date})
    return CashFlowParams(
        company_id=_company_id(companyid),
        from_date=_parse_date("fromDate", from_date),
        to_date=_parse_date("toDate", to_date),
    )


async def bank_reconciliation_params(
    companyid: Optional[str] = Query(None, description="Company identifier"),
    bankaccount: Optional[str] = Query(None, description="Bank account name"),
) -> BankReconciliationParams:
    """Validate the bank-reconciliation query string."""
    _require({"companyid": companyid, "bankaccount": bankaccount})
    return BankReconciliationParams(company_id=_company_id(companyid), bank_account=bankaccount)


def get_reference_descriptions() -> Dict[str, str]:
    """
    Reference code -> explanation table used to annotate reconciling items.

    Override this dependency to supply a different table.
    """
    return settings.reconciliation_descriptions
