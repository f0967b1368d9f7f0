"""
Report API endpoints.

Reports are returned as structured JSON. Rendering them to HTML
or PDF is left to the client.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from bookkeeping.exceptions import NotFoundError
from bookkeeping.models.base import get_db
from bookkeeping.schemas.ledger import IntegrityResponse
from bookkeeping.schemas.report import BalanceSheetReport
from bookkeeping.services.balance_service import BalanceService
from bookkeeping.services.report_service import ReportService

router = APIRouter(prefix="/api/v1/report", tags=["Reports"])


@router.get("/balance", response_model=BalanceSheetReport)
def balance_sheet(db: Session = Depends(get_db)):
    """Balance sheet for the current state of the books."""
    try:
        return ReportService(db).balance_sheet()
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/integrity", response_model=IntegrityResponse)
def integrity(db: Session = Depends(get_db)):
    """Check that total debits equal total credits across the ledger."""
    return BalanceService(db).check_integrity()
