"""
Cash Flow Service.

Classifies reconciled ledger entries into cash-flow categories and
aggregates them into a statement. READ-ONLY.
"""

import logging
from datetime import date

from sqlalchemy import select, func, case, and_, or_
from sqlalchemy.ext.asyncio import AsyncSession

from accounting_api.app.core.exceptions import DataAccessError
from accounting_api.app.db.session import DATABASE_ERRORS
from accounting_api.app.models.ledger_entry import LedgerEntry
from accounting_api.app.models.cashflow_enums import (
    CashFlowCategory,
    CASH_ACCOUNT,
    INVESTOR_PARTY,
    OPERATING_ACCOUNTS,
    CASH_EXPENSE_ACCOUNTS,
    LOAN_DEPOSIT_NOTE,
    INVENTORY_PURCHASE_NOTE,
)
from accounting_api.app.schemas.reports import CashFlowReport, CashFlowTotals
from accounting_api.app.services.opening_balance import OpeningBalanceService

logger = logging.getLogger("accounting_api")


def cash_flow_category():
    """CASE expression mapping an entry to its category (first match wins)."""
    return case(
        (
            and_(
                LedgerEntry.account == CASH_ACCOUNT,
                or_(
                    LedgerEntry.party == INVESTOR_PARTY,
                    LedgerEntry.note.ilike(f"%{LOAN_DEPOSIT_NOTE}%"),
                ),
            ),
            CashFlowCategory.FINANCING.value,
        ),
        (LedgerEntry.account.in_(OPERATING_ACCOUNTS), CashFlowCategory.OPERATING.value),
        (LedgerEntry.note.ilike(f"%{INVENTORY_PURCHASE_NOTE}%"), CashFlowCategory.INVESTING.value),
        else_=CashFlowCategory.OPERATING.value,
    )


def cash_movement_filter(company_id: str, from_date: date, to_date: date):
    """Reconciled cash receipts and cash-paid expenses inside the period."""
    return and_(
        LedgerEntry.reconciled.is_(True),
        LedgerEntry.company_id == company_id,
        LedgerEntry.entry_date.between(from_date, to_date),
        or_(
            and_(LedgerEntry.account == CASH_ACCOUNT, LedgerEntry.debit > 0),
            and_(LedgerEntry.credit > 0, LedgerEntry.account.in_(CASH_EXPENSE_ACCOUNTS)),
        ),
    )


class CashFlowService:

    @staticmethod
    async def get_category_totals(db: AsyncSession, company_id: str, from_date: date, to_date: date):
        """Rows of (category, total_inflow, total_outflow) ordered by category."""
        # Classify in a subquery so GROUP BY sees a plain column
        classified = (
            select(
                cash_flow_category().label("cashflow_category"),
                LedgerEntry.debit,
                LedgerEntry.credit,
            )
            .where(cash_movement_filter(company_id, from_date, to_date))
            .subquery()
        )
        stmt = (
            select(
                classified.c.cashflow_category,
                func.sum(classified.c.debit).label("total_inflow"),
                func.sum(classified.c.credit).label("total_outflow"),
            )
            .group_by(classified.c.cashflow_category)
            .order_by(classified.c.cashflow_category)
        )
        return (await db.execute(stmt)).all()

    @staticmethod
    async def get_cash_flow_report(
        db: AsyncSession, company_id: str, from_date: date, to_date: date
    ) -> CashFlowReport:
        """
        Build the cash-flow statement for ``[from_date, to_date]``.

        Flow:
        1. Aggregate reconciled cash movements per category
        2. Split categories into inflow and outflow sections
        3. Add the opening balance at ``from_date`` for the closing balance
        """
        try:
            rows = await CashFlowService.get_category_totals(db, company_id, from_date, to_date)
        except DATABASE_ERRORS as exc:
            logger.exception("Cash flow query failed for company %s", company_id)
            raise DataAccessError() from exc

        cash_inflows = {}
        cash_outflows = {}
        total_inflows = 0.0
        total_outflows = 0.0

        for row in rows:
            inflow = float(row.total_inflow or 0)
            outflow = float(row.total_outflow or 0)

            if inflow > 0:
                cash_inflows[row.cashflow_category] = CashFlowTotals(inflows=round(inflow, 2), outflows=0)
            if outflow > 0:
                cash_outflows[row.cashflow_category] = CashFlowTotals(inflows=0, outflows=round(outflow, 2))
            total_inflows += inflow
            total_outflows += outflow

        net_change = total_inflows - total_outflows
        opening_balance = await OpeningBalanceService.get_opening_balance(db, company_id, from_date)

        return CashFlowReport(
            cash_inflows=cash_inflows,
            cash_outflows=cash_outflows,
            net_change_in_cash=round(net_change, 2),
            closing_cash_balance=round(opening_balance + net_change, 2),
        )
