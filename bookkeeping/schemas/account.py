"""
Pydantic schemas for account operations.

Length and range limits are not declared as Field constraints:
AccountService checks them and raises ValidationError, so the
same rules apply to API callers and to direct service callers.
"""

from datetime import datetime

from pydantic import BaseModel

from bookkeeping.models.enums import AccountType


# --- Request Schemas ---

class AccountCreate(BaseModel):
    """
    Request to create an account.

    Leave id empty to draw the next id from the account type's
    sequence.
    """
    id: int | None = None
    name: str
    account_type: AccountType | str


# --- Response Schemas ---

class AccountCreateResponse(BaseModel):
    account_id: int
    account_name: str
    account_type: AccountType


class AccountSummary(BaseModel):
    """One row of the account list. Balance > 0 is a net debit."""
    account_id: int
    account_name: str
    account_type: AccountType
    balance: int
    timestamp: datetime

    model_config = {"from_attributes": True}


class AccountListResponse(BaseModel):
    accounts: list[AccountSummary]
    timestamp: datetime | None


class AccountDetail(BaseModel):
    """Debit and credit totals for a single account."""
    account_id: int
    account_name: str
    account_type: AccountType
    total_debits: int
    total_credits: int
    balance: int
    timestamp: datetime
