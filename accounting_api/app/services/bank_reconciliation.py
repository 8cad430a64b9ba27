"""
Bank Reconciliation Service.

Compares a bank account's ledger balance with what the bank has matched
and lists the entries that explain the difference. READ-ONLY.
"""

import logging
from typing import Dict, List, Mapping

from sqlalchemy import select, or_
from sqlalchemy.ext.asyncio import AsyncSession

from accounting_api.app.core.exceptions import DataAccessError
from accounting_api.app.db.session import DATABASE_ERRORS
from accounting_api.app.models.ledger_entry import LedgerEntry
from accounting_api.app.schemas.reports import BankReconciliationReport, ReconcilingItem
from accounting_api.app.services.opening_balance import sum_net_amount

logger = logging.getLogger("accounting_api")


def describe_item(entry: LedgerEntry, descriptions: Mapping[str, str]) -> ReconcilingItem:
    """Copy a ledger entry into a reconciling item with its explanation."""
    return ReconcilingItem(
        id=entry.id,
        company_id=entry.company_id,
        entry_date=entry.entry_date,
        account=entry.account,
        party=entry.party,
        note=entry.note,
        debit=entry.debit,
        credit=entry.credit,
        reconciled=entry.reconciled,
        bank_account=entry.bank_account,
        reference=entry.reference,
        description=descriptions.get(entry.reference, "") if entry.reference else "",
    )


class BankReconciliationService:

    @staticmethod
    async def get_unreconciled_entries(db: AsyncSession, company_id: str, bank_account: str) -> List[LedgerEntry]:
        """Entries not matched to the bank statement (reconciled false or unknown)."""
        stmt = (
            select(LedgerEntry)
            .where(
                or_(LedgerEntry.reconciled.is_(False), LedgerEntry.reconciled.is_(None)),
                LedgerEntry.company_id == company_id,
                LedgerEntry.bank_account == bank_account,
            )
            .order_by(LedgerEntry.entry_date, LedgerEntry.id)
        )
        return list((await db.execute(stmt)).scalars().all())

    @staticmethod
    async def get_reconciliation_report(
        db: AsyncSession,
        company_id: str,
        bank_account: str,
        descriptions: Dict[str, str],
    ) -> BankReconciliationReport:
        """
        Build the reconciliation report for one bank account.

        - ledger balance: every entry booked against the account
        - bank statement balance: the entries the bank has matched
        - adjusted balance: ledger balance less the reconciling items,
          which agrees with the bank when the books are complete
        """
        try:
            entries = await BankReconciliationService.get_unreconciled_entries(db, company_id, bank_account)
            ledger_balance = await sum_net_amount(
                db,
                LedgerEntry.company_id == company_id,
                LedgerEntry.bank_account == bank_account,
            )
            bank_statement_balance = await sum_net_amount(
                db,
                LedgerEntry.company_id == company_id,
                LedgerEntry.bank_account == bank_account,
                LedgerEntry.reconciled.is_(True),
            )
        except DATABASE_ERRORS as exc:
            logger.exception(
                "Bank reconciliation query failed for company %s account %s", company_id, bank_account
            )
            raise DataAccessError() from exc

        items = [describe_item(entry, descriptions) for entry in entries]
        unreconciled_net = sum((entry.debit or 0) - (entry.credit or 0) for entry in entries)

        return BankReconciliationReport(
            ledger_balance=round(ledger_balance, 2),
            bank_statement_balance=round(bank_statement_balance, 2),
            reconciling_items=items,
            adjusted_balance_after_reconciliation=round(ledger_balance - unreconciled_net, 2),
        )
