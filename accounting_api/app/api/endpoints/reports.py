"""
Financial report API endpoints.

Read-only cash-flow and bank-reconciliation reports.
"""

from typing import Dict

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from accounting_api.app.db.session import get_db
from accounting_api.app.core.dependencies import (
    cash_flow_params,
    bank_reconciliation_params,
    get_reference_descriptions,
)
from accounting_api.app.schemas.reports import (
    CashFlowParams, CashFlowReport,
    BankReconciliationParams, BankReconciliationReport,
)
from accounting_api.app.services.cash_flow import CashFlowService
from accounting_api.app.services.bank_reconciliation import BankReconciliationService

router = APIRouter(tags=["Reports"])


@router.get("/cash-flow", response_model=CashFlowReport)
async def get_cash_flow(
    params: CashFlowParams = Depends(cash_flow_params),
    db: AsyncSession = Depends(get_db)
):
    """
    Cash-flow statement for a company between fromDate and toDate (inclusive).

    Returns 400 if a parameter is missing and 500 if the ledger cannot be read.
    """
    return await CashFlowService.get_cash_flow_report(
        db, params.company_id, params.from_date, params.to_date
    )


@router.get("/bank-reconciliation", response_model=BankReconciliationReport)
async def get_bank_reconciliation(
    params: BankReconciliationParams = Depends(bank_reconciliation_params),
    descriptions: Dict[str, str] = Depends(get_reference_descriptions),
    db: AsyncSession = Depends(get_db)
):
    """Unreconciled entries of a bank account with ledger and bank balances."""
    return await BankReconciliationService.get_reconciliation_report(
        db, params.company_id, params.bank_account, descriptions
    )
