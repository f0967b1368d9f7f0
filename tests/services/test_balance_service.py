"""
Tests for the BalanceService.

Balances are derived from the entry log on every call, so
these tests post journals and read them back.
"""

import pytest
from sqlalchemy import text

from bookkeeping.exceptions import NotFoundError, StorageError
from bookkeeping.models.enums import AccountType
from bookkeeping.schemas.account import AccountCreate
from bookkeeping.schemas.ledger import EntryCreate, JournalCreate
from bookkeeping.services.account_service import AccountService
from bookkeeping.services.balance_service import BalanceService
from bookkeeping.services.ledger_service import LedgerService

CASH = 100


def make_account(db_session, name, account_type, account_id=None):
    return AccountService(db_session).create_account(AccountCreate(
        id=account_id, name=name, account_type=account_type,
    ))


def post(db_session, *pairs):
    return LedgerService(db_session).post_journal(JournalCreate(
        entries=[EntryCreate(account_id=a, amount=amt) for a, amt in pairs],
    ))


class TestListAccounts:

    def test_account_without_entries_has_zero_balance(self, db_session):
        accounts = BalanceService(db_session).list_accounts()

        assert len(accounts) == 1
        assert accounts[0].account_id == CASH
        assert accounts[0].account_name == "Cash"
        assert accounts[0].account_type == AccountType.CASH
        assert accounts[0].balance == 0

    def test_balances_are_signed_sums(self, db_session):
        sales = make_account(db_session, "Sales", AccountType.REVENUE)
        rent = make_account(db_session, "Rent", AccountType.INDIRECT_EXPENSE)
        post(db_session, (CASH, 1000), (sales, -1000))
        post(db_session, (rent, 300), (CASH, -300))

        by_id = {a.account_id: a.balance for a in BalanceService(db_session).list_accounts()}
        assert by_id == {CASH: 700, sales: -1000, rent: 300}

    def test_accounts_without_entries_still_listed(self, db_session):
        sales = make_account(db_session, "Sales", AccountType.REVENUE)
        equity = make_account(db_session, "Capital", AccountType.EQUITY)
        post(db_session, (CASH, 10), (sales, -10))

        by_id = {a.account_id: a.balance for a in BalanceService(db_session).list_accounts()}
        assert by_id[equity] == 0

    def test_ordered_by_account_id(self, db_session):
        make_account(db_session, "Sales", AccountType.REVENUE)
        make_account(db_session, "Capital", AccountType.EQUITY)
        make_account(db_session, "Bank", AccountType.CASH, 5)

        ids = [a.account_id for a in BalanceService(db_session).list_accounts()]
        assert ids == sorted(ids)

    def test_timestamp_shared_by_all_rows(self, db_session):
        make_account(db_session, "Sales", AccountType.REVENUE)
        make_account(db_session, "Capital", AccountType.EQUITY)

        accounts = BalanceService(db_session).list_accounts()
        assert len({a.timestamp for a in accounts}) == 1

    def test_reads_are_repeatable(self, db_session):
        sales = make_account(db_session, "Sales", AccountType.REVENUE)
        post(db_session, (CASH, 250), (sales, -250))
        service = BalanceService(db_session)

        first = [(a.account_id, a.balance) for a in service.list_accounts()]
        second = [(a.account_id, a.balance) for a in service.list_accounts()]
        assert first == second

    def test_unknown_stored_type_raises_storage_error(self, db_session):
        db_session.execute(text(
            "INSERT INTO accounts (id, name, type) VALUES (7, 'Odd', 'Nonsense')"
        ))
        db_session.commit()

        with pytest.raises(StorageError):
            BalanceService(db_session).list_accounts()


class TestAccountDetail:

    def test_debit_side(self, db_session):
        other = make_account(db_session, "Loan", AccountType.CURRENT_LIABILITY)
        post(db_session, (CASH, 500), (other, -500))

        detail = BalanceService(db_session).account_detail(CASH)
        assert detail.total_debits == 500
        assert detail.total_credits == 0
        assert detail.balance == 500

    def test_credit_side(self, db_session):
        other = make_account(db_session, "Loan", AccountType.CURRENT_LIABILITY)
        post(db_session, (CASH, 500), (other, -500))

        detail = BalanceService(db_session).account_detail(other)
        assert detail.total_debits == 0
        assert detail.total_credits == 500
        assert detail.balance == -500
        assert detail.account_name == "Loan"
        assert detail.account_type == AccountType.CURRENT_LIABILITY

    def test_totals_accumulate_both_sides(self, db_session):
        sales = make_account(db_session, "Sales", AccountType.REVENUE)
        post(db_session, (CASH, 800), (sales, -800))
        post(db_session, (sales, 120), (CASH, -120))
        post(db_session, (CASH, 40), (sales, -40))

        detail = BalanceService(db_session).account_detail(CASH)
        assert detail.total_debits == 840
        assert detail.total_credits == 120
        assert detail.balance == 720

    def test_account_without_entries(self, db_session):
        detail = BalanceService(db_session).account_detail(CASH)
        assert (detail.total_debits, detail.total_credits, detail.balance) == (0, 0, 0)
        assert detail.timestamp is not None

    def test_nonexistent_account_raises_error(self, db_session):
        with pytest.raises(NotFoundError, match="not found"):
            BalanceService(db_session).account_detail(999)


class TestEntriesByAccount:

    def test_newest_first(self, db_session):
        sales = make_account(db_session, "Sales", AccountType.REVENUE)
        post(db_session, (CASH, 1), (sales, -1))
        post(db_session, (CASH, 2), (sales, -2))

        entries = BalanceService(db_session).get_entries_by_account(CASH)
        assert [e.amount for e in entries] == [2, 1]

    def test_nonexistent_account_raises_error(self, db_session):
        with pytest.raises(NotFoundError):
            BalanceService(db_session).get_entries_by_account(999)

    def test_unknown_stored_type_raises_storage_error(self, db_session):
        db_session.execute(text(
            "INSERT INTO accounts (id, name, type) VALUES (7, 'Odd', 'Nonsense')"
        ))
        db_session.commit()

        with pytest.raises(StorageError):
            BalanceService(db_session).get_entries_by_account(7)


class TestIntegrityCheck:

    def test_empty_ledger_is_balanced(self, db_session):
        result = BalanceService(db_session).check_integrity()
        assert result["is_balanced"] is True
        assert result["difference"] == 0

    def test_ledger_with_entries_is_balanced(self, db_session):
        sales = make_account(db_session, "Sales", AccountType.REVENUE)
        for amount in [1000, 500, 250]:
            post(db_session, (CASH, amount), (sales, -amount))

        result = BalanceService(db_session).check_integrity()
        assert result["is_balanced"] is True
        assert result["total_debits"] == 1750
        assert result["total_credits"] == 1750

