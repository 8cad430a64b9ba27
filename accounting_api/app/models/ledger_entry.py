"""
Accounting ledger entry database model.

Read-only from the API's point of view: rows are created and
reconciled by external bookkeeping tools.
"""

from sqlalchemy import Column, Integer, Float, Date, String, Boolean, func
from accounting_api.app.core.config import settings
from accounting_api.app.db.session import Base

COMPANY_ID_TYPES = {"text": String(64), "integer": Integer()}


class LedgerEntry(Base):
    """
    Ledger Entry model.

    One recorded accounting transaction line. Column names are lower-case
    because the table is created unquoted in PostgreSQL.

    The table belongs to the bookkeeping system, so the SQL type of
    ``companyid`` follows the LEDGER_COMPANY_ID_TYPE setting: "text"
    (VARCHAR, the default) or "integer". Query parameters are bound with
    the same type, which PostgreSQL needs to compare them.
    """
    __tablename__ = "accountingledgerentry"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    # Scoping
    company_id = Column("companyid", COMPANY_ID_TYPES[settings.ledger_company_id_type], nullable=False, index=True)
    entry_date = Column("date", Date, nullable=False, index=True)

    # Classification
    account = Column(String(255), nullable=True)
    party = Column(String(255), nullable=True)
    note = Column(String(1024), nullable=True)

    # Financials
    debit = Column(Float, nullable=True)
    credit = Column(Float, nullable=True)

    # Bank matching (NULL means unknown)
    reconciled = Column(Boolean, nullable=True)
    bank_account = Column("bankaccount", String(255), nullable=True, index=True)
    reference = Column(String(64), nullable=True)

    def __repr__(self):
        return (
            f"<LedgerEntry(id={self.id}, company='{self.company_id}', account='{self.account}', "
            f"debit={self.debit}, credit={self.credit})>"
        )


def net_amount():
    """SQL expression for debit minus credit with NULLs counted as zero."""
    return func.coalesce(LedgerEntry.debit, 0) - func.coalesce(LedgerEntry.credit, 0)
