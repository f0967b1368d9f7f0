"""
Account service: the chart of accounts.

Creating an account either uses the id chosen by the caller or
draws the next id from the account type's sequence setting. The
sequence increment and the account insert share one transaction,
so two concurrent allocations for the same type never receive
the same id.
"""

import logging

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from bookkeeping.exceptions import NotFoundError, ValidationError
from bookkeeping.models.account import (
    Account,
    MAX_ACCOUNT_ID,
    MAX_ACCOUNT_NAME_LENGTH,
    MIN_ACCOUNT_ID,
)
from bookkeeping.models.base import atomic, storage_errors
from bookkeeping.models.enums import AccountType
from bookkeeping.models.setting import Setting
from bookkeeping.schemas.account import AccountCreate

logger = logging.getLogger(__name__)


class AccountService:

    def __init__(self, db: Session):
        self.db = db

    def _validate(self, request: AccountCreate) -> AccountType:
        """Check everything that can be checked without the database."""
        account_type = AccountType.parse(request.account_type)

        if len(request.name) > MAX_ACCOUNT_NAME_LENGTH:
            raise ValidationError("account name too long")

        if request.id is not None and not (
            MIN_ACCOUNT_ID <= request.id <= MAX_ACCOUNT_ID
        ):
            raise ValidationError("account id out of range")

        return account_type

    def _allocate_account_id(self, account_type: AccountType) -> int:
        """
        Take the next id from the type's sequence and advance it.

        The increment is a single UPDATE issued before the read, so
        the counter row is write-locked for the rest of the
        transaction and a concurrent allocation waits for commit.
        """
        setting_name = account_type.sequence_setting

        result = self.db.execute(
            update(Setting)
            .where(
                Setting.name == setting_name,
                Setting.int_value.is_not(None),
            )
            .values(int_value=Setting.int_value + 1)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            raise NotFoundError(f"Setting '{setting_name}' not found")

        next_value = self.db.execute(
            select(Setting.int_value).where(Setting.name == setting_name)
        ).scalar_one()
        return next_value - 1

    def create_account(self, request: AccountCreate) -> int:
        """
        Create a new account and return its id.

        Raises ValidationError for an unknown type, a name over
        140 characters or a supplied id outside 1-999. A supplied
        id that is already taken fails on the primary key and is
        raised as StorageError.
        """
        account_type = self._validate(request)

        with atomic(self.db):
            if request.id is None:
                account_id = self._allocate_account_id(account_type)
            else:
                account_id = request.id

            self.db.add(Account(
                id=account_id,
                name=request.name,
                account_type=account_type,
            ))
            self.db.flush()

        logger.info(
            "account_created",
            extra={"account_id": account_id, "account_type": account_type.value},
        )
        # Sequences have no ceiling; ids past the manual range are allowed.
        if account_id > MAX_ACCOUNT_ID:
            logger.warning(
                "account_id_above_manual_range",
                extra={"account_id": account_id, "account_type": account_type.value},
            )
        return account_id

    def get_account(self, account_id: int) -> Account:
        """Get an account by ID."""
        with storage_errors():
            account = self.db.get(Account, account_id)
        if not account:
            raise NotFoundError(f"Account {account_id} not found")
        return account
