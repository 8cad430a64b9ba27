"""
Opening Balance Service.

Net ledger position of a company before a cutoff date.
"""

import logging
import math
from datetime import date

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from accounting_api.app.core.exceptions import DataAccessError
from accounting_api.app.db.session import DATABASE_ERRORS
from accounting_api.app.models.ledger_entry import LedgerEntry, net_amount

logger = logging.getLogger("accounting_api")


async def sum_net_amount(db: AsyncSession, *criteria) -> float:
    """SUM(debit - credit) over the entries matching ``criteria``; 0 when empty or non-finite."""
    stmt = select(func.sum(net_amount())).where(*criteria)
    raw = (await db.execute(stmt)).scalar()
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return 0.0
    return value if math.isfinite(value) else 0.0


class OpeningBalanceService:

    @staticmethod
    async def get_opening_balance(db: AsyncSession, company_id: str, cutoff: date) -> float:
        """
        Balance of every entry dated strictly before ``cutoff``.

        Reconciliation state is ignored: the opening position includes
        entries the bank has not matched yet.
        """
        try:
            return await sum_net_amount(
                db,
                LedgerEntry.company_id == company_id,
                LedgerEntry.entry_date < cutoff,
            )
        except DATABASE_ERRORS as exc:
            logger.exception("Opening balance query failed for company %s", company_id)
            raise DataAccessError() from exc
