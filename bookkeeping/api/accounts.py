"""
Account API endpoints.

The API layer is thin. It maps engine errors to status codes
and delegates all business logic to the services.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from bookkeeping.exceptions import NotFoundError, StorageError
from bookkeeping.models.base import get_db
from bookkeeping.models.enums import AccountType
from bookkeeping.services.account_service import AccountService
from bookkeeping.services.balance_service import BalanceService
from bookkeeping.schemas.account import (
    AccountCreate,
    AccountCreateResponse,
    AccountDetail,
    AccountListResponse,
)
from bookkeeping.schemas.ledger import EntryResponse

router = APIRouter(prefix="/api/v1/account", tags=["Accounts"])


@router.get("/list", response_model=AccountListResponse)
def list_accounts(db: Session = Depends(get_db)):
    """List every account with its balance, ordered by id."""
    accounts = BalanceService(db).list_accounts()
    return AccountListResponse(
        accounts=accounts,
        timestamp=accounts[0].timestamp if accounts else None,
    )


@router.post("/new", response_model=AccountCreateResponse, status_code=201)
def create_account(
    request: AccountCreate,
    db: Session = Depends(get_db),
):
    """
    Create a new account.

    Omit the id to draw the next one from the account type's
    sequence.
    """
    service = AccountService(db)
    try:
        account_id = service.create_account(request)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=409, detail=str(e))

    return AccountCreateResponse(
        account_id=account_id,
        account_name=request.name,
        account_type=AccountType.parse(request.account_type),
    )


@router.get("/{account_id}", response_model=AccountDetail)
def account_detail(
    account_id: int,
    db: Session = Depends(get_db),
):
    """Get debit and credit totals and the balance for one account."""
    try:
        return BalanceService(db).account_detail(account_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{account_id}/entries", response_model=list[EntryResponse])
def account_entries(
    account_id: int,
    db: Session = Depends(get_db),
):
    """Get all entries posted to an account, newest first."""
    try:
        return BalanceService(db).get_entries_by_account(account_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
