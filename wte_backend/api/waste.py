from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from ..infrastructure.database import get_db
from ..domain.models import MAX_ID, StatusUpdateRequest, WasteReportCreate, WasteReportResponse
from ..domain.services.waste_service import waste_service
from .deps import AuthContext, get_auth_context

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("", response_model=WasteReportResponse, status_code=status.HTTP_201_CREATED)
def submit_report(
    report: WasteReportCreate,
    db: Session = Depends(get_db)
):
    """
    Submit a waste report (workers, no authentication).

    The report starts in status REPORTED.
    """
    return waste_service.create_report(report, db)


@router.get("", response_model=List[WasteReportResponse])
def list_reports(
    status: Optional[str] = Query(None, description="Only reports in this status (REPORTED, EN_ROUTE, COLLECTED)"),
    auth: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db)
):
    """
    List waste reports (admin only).

    Pending statuses come first (REPORTED, EN_ROUTE, COLLECTED),
    newest first within each status. An unknown status is a 400.
    """
    # An empty ?status= means no filter
    return waste_service.list_reports(db, status=status or None)


@router.get("/{report_id}", response_model=WasteReportResponse)
def get_report(
    report_id: int = Path(..., ge=1, le=MAX_ID),
    auth: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db)
):
    """
    Get a single waste report by ID (admin only).
    """
    return waste_service.get_report(report_id, db)


@router.patch("/{report_id}/status", response_model=WasteReportResponse)
def update_status(
    update: StatusUpdateRequest,
    report_id: int = Path(..., ge=1, le=MAX_ID),
    auth: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db)
):
    """
    Advance a report along the workflow (admin only).

    Only REPORTED → EN_ROUTE and EN_ROUTE → COLLECTED are accepted.
    """
    logger.info(f"Admin {auth.user_id} requested status {update.status} for report {report_id}")
    return waste_service.set_status(report_id, update.status, db)
