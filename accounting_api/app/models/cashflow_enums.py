"""
Cash-flow enumerations and account classification constants.
"""

import enum


class CashFlowCategory(str, enum.Enum):
    """Cash-flow statement section an entry is reported under."""
    OPERATING = "Operating"
    INVESTING = "Investing"
    FINANCING = "Financing"


CASH_ACCOUNT = "Cash"
INVESTOR_PARTY = "Investor"

# Accounts always reported as operating activity
OPERATING_ACCOUNTS = ("Sales", "Office Rent", "Utilities Expense", "Bank Charges")

# Expense accounts whose credits count as cash paid out
CASH_EXPENSE_ACCOUNTS = ("Office Rent", "Utilities Expense", "Bank Charges")

LOAN_DEPOSIT_NOTE = "Loan deposit"
INVENTORY_PURCHASE_NOTE = "Purchase inventory"
