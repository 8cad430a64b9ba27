"""
Integration tests for the cash-flow report.

Covers classification, the reconciled/account row filter, aggregation
into inflow and outflow sections and the closing balance.
"""

from datetime import date

import pytest

from accounting_api.app.services.opening_balance import OpeningBalanceService

PERIOD = {"companyid": "1", "fromDate": "2024-03-01", "toDate": "2024-03-31"}


async def get_report(client, **overrides):
    params = dict(PERIOD, **overrides)
    response = await client.get("/api/cash-flow", params=params)
    assert response.status_code == 200, response.text
    return response.json()


# TEST 1: Empty ledger
@pytest.mark.asyncio
async def test_empty_ledger_returns_zero_report(client):
    """No entries gives empty sections and zero balances."""
    data = await get_report(client)

    assert data == {
        "cashInflows": {},
        "cashOutflows": {},
        "netChangeInCash": 0,
        "closingCashBalance": 0,
    }


# TEST 2: Operating inflow and outflow
@pytest.mark.asyncio
async def test_cash_receipt_and_rent_payment(client, add_entries):
    """Cash debit 100 and rent credit 40 net to 60."""
    await add_entries(
        {"account": "Cash", "debit": 100, "reconciled": True},
        {"account": "Office Rent", "credit": 40, "reconciled": True},
    )

    data = await get_report(client)

    assert data["cashInflows"]["Operating"] == {"inflows": 100, "outflows": 0}
    assert data["cashOutflows"]["Operating"] == {"inflows": 0, "outflows": 40}
    assert data["netChangeInCash"] == 60
    assert data["closingCashBalance"] == 60


# TEST 3: Financing classification
@pytest.mark.asyncio
async def test_investor_cash_is_financing(client, add_entries):
    """Cash from an investor is reported as Financing, not Operating."""
    await add_entries({"account": "Cash", "party": "Investor", "debit": 500, "reconciled": True})

    data = await get_report(client)

    assert data["cashInflows"] == {"Financing": {"inflows": 500, "outflows": 0}}
    assert "Operating" not in data["cashInflows"]


@pytest.mark.asyncio
async def test_loan_deposit_note_is_financing_case_insensitive(client, add_entries):
    """The loan-deposit memo match ignores case."""
    await add_entries({"account": "Cash", "note": "LOAN DEPOSIT from bank", "debit": 250, "reconciled": True})

    data = await get_report(client)

    assert data["cashInflows"]["Financing"]["inflows"] == 250


@pytest.mark.asyncio
async def test_cash_with_inventory_note_is_investing(client, add_entries):
    """Cash not from an investor but noted as an inventory purchase is Investing."""
    await add_entries({"account": "Cash", "note": "refund - purchase inventory", "debit": 75, "reconciled": True})

    data = await get_report(client)

    assert data["cashInflows"] == {"Investing": {"inflows": 75, "outflows": 0}}


# TEST 4: Row filter
@pytest.mark.asyncio
async def test_unreconciled_entries_are_excluded(client, add_entries):
    """reconciled false or NULL never reaches the statement."""
    await add_entries(
        {"account": "Cash", "debit": 100, "reconciled": False},
        {"account": "Cash", "debit": 200, "reconciled": None},
        {"account": "Office Rent", "credit": 40, "reconciled": False},
    )

    data = await get_report(client)

    assert data["cashInflows"] == {}
    assert data["cashOutflows"] == {}
    assert data["netChangeInCash"] == 0


@pytest.mark.asyncio
async def test_only_cash_debits_and_expense_credits_count(client, add_entries):
    """Sales credits and other expense accounts are filtered out."""
    await add_entries(
        {"account": "Sales", "credit": 900, "reconciled": True},
        {"account": "Travel Expense", "credit": 80, "reconciled": True},
        {"account": "Cash", "credit": 60, "reconciled": True},
        {"account": "Bank Charges", "credit": 15, "reconciled": True},
        {"account": "Utilities Expense", "credit": 35, "reconciled": True},
    )

    data = await get_report(client)

    assert data["cashInflows"] == {}
    assert data["cashOutflows"] == {"Operating": {"inflows": 0, "outflows": 50}}
    assert data["netChangeInCash"] == -50


@pytest.mark.asyncio
async def test_period_bounds_are_inclusive_and_company_scoped(client, add_entries):
    """Entries on both boundary dates count; other companies and dates do not."""
    await add_entries(
        {"account": "Cash", "debit": 10, "reconciled": True, "entry_date": date(2024, 3, 1)},
        {"account": "Cash", "debit": 20, "reconciled": True, "entry_date": date(2024, 3, 31)},
        {"account": "Cash", "debit": 40, "reconciled": True, "entry_date": date(2024, 4, 1)},
        {"account": "Cash", "debit": 80, "reconciled": True, "company_id": "2"},
    )

    data = await get_report(client)

    assert data["cashInflows"]["Operating"]["inflows"] == 30


# TEST 5: Opening and closing balance
@pytest.mark.asyncio
async def test_closing_balance_adds_opening_balance(client, add_entries):
    """Everything before fromDate, reconciled or not, forms the opening balance."""
    await add_entries(
        {"account": "Cash", "debit": 1000, "reconciled": True, "entry_date": date(2024, 1, 10)},
        {"account": "Office Rent", "credit": 300, "reconciled": False, "entry_date": date(2024, 2, 1)},
        {"account": "Cash", "debit": 100, "reconciled": True},
        {"account": "Office Rent", "credit": 40, "reconciled": True},
    )

    data = await get_report(client)

    assert data["netChangeInCash"] == 60
    assert data["closingCashBalance"] == 760


@pytest.mark.asyncio
async def test_opening_balance_without_prior_entries_is_zero(db_session, add_entries):
    """Entries on or after the cutoff do not count."""
    await add_entries({"account": "Cash", "debit": 100, "reconciled": True, "entry_date": date(2024, 3, 1)})

    balance = await OpeningBalanceService.get_opening_balance(db_session, "1", date(2024, 3, 1))

    assert balance == 0


@pytest.mark.asyncio
async def test_opening_balance_treats_null_amounts_as_zero(db_session, add_entries):
    """A NULL credit does not null out the whole sum."""
    await add_entries(
        {"account": "Cash", "debit": 100, "credit": None, "entry_date": date(2024, 2, 1)},
        {"account": "Office Rent", "debit": None, "credit": 30, "entry_date": date(2024, 2, 2)},
    )

    balance = await OpeningBalanceService.get_opening_balance(db_session, "1", date(2024, 3, 1))

    assert balance == 70


# TEST 6: Idempotence
@pytest.mark.asyncio
async def test_repeated_requests_are_byte_identical(client, add_entries):
    """Same data, same bytes."""
    await add_entries(
        {"account": "Cash", "party": "Investor", "debit": 500, "reconciled": True},
        {"account": "Cash", "debit": 120.5, "reconciled": True},
        {"account": "Bank Charges", "credit": 12.25, "reconciled": True},
    )

    first = await client.get("/api/cash-flow", params=PERIOD)
    second = await client.get("/api/cash-flow", params=PERIOD)

    assert first.status_code == 200
    assert first.content == second.content
