"""
Ledger API endpoints.

These endpoints expose journal posting to HTTP clients. The
LedgerService validates and commits; this layer only turns
engine errors into status codes.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from bookkeeping.exceptions import NotFoundError, StorageError
from bookkeeping.models.base import get_db
from bookkeeping.services.ledger_service import LedgerService
from bookkeeping.schemas.ledger import (
    BatchCreate,
    BatchCreateResponse,
    JournalCreate,
    JournalCreateResponse,
)

router = APIRouter(prefix="/api/v1", tags=["Ledger"])


@router.post("/journal/new", response_model=JournalCreateResponse, status_code=201)
def post_journal(
    request: JournalCreate,
    db: Session = Depends(get_db),
):
    """
    Post a single journal in its own batch.

    Amounts are signed minor units and must sum to zero.
    """
    service = LedgerService(db)
    try:
        journal_id = service.post_journal(request)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=409, detail=str(e))

    return JournalCreateResponse(journal_id=journal_id)


@router.post("/batch/new", response_model=BatchCreateResponse, status_code=201)
def post_batch(
    request: BatchCreate,
    db: Session = Depends(get_db),
):
    """
    Post several journals atomically.

    If any journal is invalid, nothing is written.
    """
    service = LedgerService(db)
    try:
        batch_id, journal_ids = service.post_batch(request.journals)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=409, detail=str(e))

    return BatchCreateResponse(batch_id=batch_id, journal_ids=journal_ids)
