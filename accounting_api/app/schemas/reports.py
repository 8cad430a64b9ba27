"""
Report schemas for the cash-flow and bank-reconciliation endpoints.
"""

from pydantic import BaseModel, Field
from datetime import date
from typing import Dict, List, Optional, Union


class CashFlowParams(BaseModel):
    """Validated cash-flow query parameters."""
    company_id: Union[int, str]
    from_date: date
    to_date: date


class BankReconciliationParams(BaseModel):
    """Validated bank-reconciliation query parameters."""
    company_id: Union[int, str]
    bank_account: str


class CashFlowTotals(BaseModel):
    """One category's contribution; only one side is ever non-zero."""
    inflows: float = 0.0
    outflows: float = 0.0


class CashFlowReport(BaseModel):
    """Cash-flow statement for a company and period."""
    cash_inflows: Dict[str, CashFlowTotals] = Field(default_factory=dict, alias="cashInflows")
    cash_outflows: Dict[str, CashFlowTotals] = Field(default_factory=dict, alias="cashOutflows")
    net_change_in_cash: float = Field(0.0, alias="netChangeInCash")
    closing_cash_balance: float = Field(0.0, alias="closingCashBalance")

    class Config:
        populate_by_name = True


class ReconcilingItem(BaseModel):
    """A ledger entry not yet matched against the bank statement."""
    id: int
    company_id: Union[int, str] = Field(..., alias="companyid")
    entry_date: date = Field(..., alias="date")
    account: Optional[str] = None
    party: Optional[str] = None
    note: Optional[str] = None
    debit: Optional[float] = None
    credit: Optional[float] = None
    reconciled: Optional[bool] = None
    bank_account: Optional[str] = Field(None, alias="bankaccount")
    reference: Optional[str] = None
    description: str = ""

    class Config:
        populate_by_name = True


class BankReconciliationReport(BaseModel):
    """Ledger vs bank statement position for one bank account."""
    ledger_balance: float
    bank_statement_balance: float
    reconciling_items: List[ReconcilingItem]
    adjusted_balance_after_reconciliation: float
