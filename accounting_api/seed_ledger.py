"""
Database seeding script for a demo ledger.

Creates the ledger table if it does not exist and books a small set of
entries for company 1 so both reports have something to show.
Run this script against a development database only.
"""

import asyncio
import sys
from datetime import date
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import select

from accounting_api.app.db.session import AsyncSessionLocal, Base, engine, dispose_engine
from accounting_api.app.models.ledger_entry import LedgerEntry

COMPANY_ID = "1"
BANK_ACCOUNT = "Main Checking"

DEMO_ENTRIES = [
    # Opening capital, before the demo period
    dict(entry_date=date(2024, 1, 2), account="Cash", party="Investor", note="Seed capital",
         debit=20000, credit=0, reconciled=True, bank_account=BANK_ACCOUNT, reference="DEP001"),
    # Cash sales
    dict(entry_date=date(2024, 2, 5), account="Cash", party="Customer A", note="Cash sales",
         debit=6000, credit=0, reconciled=True, bank_account=BANK_ACCOUNT, reference="DEP002"),
    dict(entry_date=date(2024, 2, 9), account="Cash", party="Bank", note="Loan deposit from bank",
         debit=3000, credit=0, reconciled=True, bank_account=BANK_ACCOUNT, reference="DEP003"),
    # Expenses paid from the bank account
    dict(entry_date=date(2024, 2, 12), account="Office Rent", party="Landlord", note="February rent",
         debit=0, credit=1500, reconciled=True, bank_account=BANK_ACCOUNT, reference="CHQ101"),
    dict(entry_date=date(2024, 2, 20), account="Utilities Expense", party="Power Co", note="Electricity",
         debit=0, credit=500, reconciled=True, bank_account=BANK_ACCOUNT, reference="DD0220"),
    # Not yet on the bank statement
    dict(entry_date=date(2024, 2, 26), account="Office Rent", party="Landlord", note="March rent in advance",
         debit=0, credit=3000, reconciled=False, bank_account=BANK_ACCOUNT, reference="CHQ102"),
    dict(entry_date=date(2024, 2, 28), account="Bank Charges", party="Bank", note="Monthly fees",
         debit=0, credit=500, reconciled=None, bank_account=BANK_ACCOUNT, reference="CHQ104"),
]


async def seed_ledger():
    """Create the table if needed and insert the demo entries once."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with AsyncSessionLocal() as db:
        print("🌱 Starting ledger seeding...")

        result = await db.execute(
            select(LedgerEntry.id).where(LedgerEntry.company_id == COMPANY_ID).limit(1)
        )
        if result.scalar_one_or_none() is not None:
            print(f"ℹ️  Company {COMPANY_ID} already has ledger entries, skipping seeding")
            return

        for fields in DEMO_ENTRIES:
            db.add(LedgerEntry(company_id=COMPANY_ID, **fields))
        await db.commit()

        print(f"✅ Created {len(DEMO_ENTRIES)} ledger entries for company {COMPANY_ID}")
        print("\nTry:")
        print(f"  GET /api/cash-flow?companyid={COMPANY_ID}&fromDate=2024-02-01&toDate=2024-02-29")
        print(f"  GET /api/bank-reconciliation?companyid={COMPANY_ID}&bankaccount={BANK_ACCOUNT}")


async def main():
    try:
        await seed_ledger()
    finally:
        await dispose_engine()


if __name__ == "__main__":
    asyncio.run(main())
