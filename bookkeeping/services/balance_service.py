"""
Balance service: balances derived from the entry log.

Balances are never stored. Every call aggregates the entries
table in a single query, so the timestamp returned with the
rows is the moment those exact balances were computed.

Sign convention: a positive balance is a net debit, a negative
balance is a net credit.
"""

from sqlalchemy import case, func, select
from sqlalchemy.orm import Session

from bookkeeping.exceptions import NotFoundError
from bookkeeping.models.account import Account
from bookkeeping.models.base import storage_errors
from bookkeeping.models.entry import Entry
from bookkeeping.schemas.account import AccountDetail, AccountSummary


class BalanceService:

    def __init__(self, db: Session):
        self.db = db

    def _fetch(self, statement):
        """Execute a read and return all rows."""
        with storage_errors():
            return self.db.execute(statement).all()

    def list_accounts(self) -> list[AccountSummary]:
        """
        Return every account with its balance, ordered by account id.

        The outer join keeps accounts that have no entries; they
        report a balance of zero.
        """
        rows = self._fetch(
            select(
                Account.id,
                Account.name,
                Account.account_type,
                func.coalesce(func.sum(Entry.amount), 0),
                func.current_timestamp(),
            )
            .outerjoin(Entry, Entry.account_id == Account.id)
            .group_by(Account.id, Account.name, Account.account_type)
            .order_by(Account.id)
        )

        return [
            AccountSummary(
                account_id=account_id,
                account_name=name,
                account_type=account_type,
                balance=balance,
                timestamp=timestamp,
            )
            for account_id, name, account_type, balance, timestamp in rows
        ]

    def account_detail(self, account_id: int) -> AccountDetail:
        """
        Return debit and credit totals for one account.

        Grouping by the account row means a missing account yields
        no row at all, which is reported as NotFoundError rather
        than as a zero-valued record.
        """
        debits = case((Entry.amount > 0, Entry.amount), else_=0)
        credits = case((Entry.amount < 0, Entry.amount), else_=0)

        rows = self._fetch(
            select(
                Account.name,
                Account.account_type,
                func.coalesce(func.sum(debits), 0),
                func.coalesce(func.sum(credits), 0),
                func.current_timestamp(),
            )
            .outerjoin(Entry, Entry.account_id == Account.id)
            .where(Account.id == account_id)
            .group_by(Account.id, Account.name, Account.account_type)
        )
        if not rows:
            raise NotFoundError(f"Account {account_id} not found")

        name, account_type, total_debits, negative_total, timestamp = rows[0]
        total_credits = -negative_total

        return AccountDetail(
            account_id=account_id,
            account_name=name,
            account_type=account_type,
            total_debits=total_debits,
            total_credits=total_credits,
            balance=total_debits - total_credits,
            timestamp=timestamp,
        )

    def get_entries_by_account(self, account_id: int) -> list[Entry]:
        """Return all entries for an account, newest first."""
        with storage_errors():
            account = self.db.get(Account, account_id)
        if account is None:
            raise NotFoundError(f"Account {account_id} not found")

        with storage_errors():
            entries = self.db.execute(
                select(Entry)
                .where(Entry.account_id == account_id)
                .order_by(Entry.id.desc())
            ).scalars().all()
        return list(entries)

    def check_integrity(self) -> dict:
        """
        Check that the whole entry log sums to zero.

        Every journal balances on its own, so the total of all
        debits must always equal the total of all credits.
        """
        rows = self._fetch(
            select(
                func.coalesce(
                    func.sum(case((Entry.amount > 0, Entry.amount), else_=0)), 0
                ),
                func.coalesce(
                    func.sum(case((Entry.amount < 0, -Entry.amount), else_=0)), 0
                ),
            )
        )
        total_debits, total_credits = rows[0]

        return {
            "total_debits": total_debits,
            "total_credits": total_credits,
            "difference": total_debits - total_credits,
            "is_balanced": total_debits == total_credits,
        }
