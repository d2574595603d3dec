"""
Waste report storage operations.

Every report returned here carries its Site (joined eagerly), and every
status change is validated by the status workflow before it is written.
"""
import logging
from typing import List, Optional, Union

from sqlalchemy import case
from sqlalchemy.orm import Session

from wte_backend.infrastructure.models import Site, WasteReport
from wte_backend.domain.errors import ConflictError, NotFoundError, ValidationError
from wte_backend.domain.models import WasteReportCreate, WasteStatus
from .status_workflow import INITIAL_STATUS, STATUS_ORDER, parse_status, validate_transition

logger = logging.getLogger(__name__)


def _status_rank():
    """SQL expression ranking status by workflow position (REPORTED first)."""
    return case(
        *[(WasteReport.status == status, rank) for status, rank in STATUS_ORDER.items()],
        else_=len(STATUS_ORDER),
    )


class WasteService:
    """Create, read and advance waste reports."""

    def list_sites(self, db: Session) -> List[Site]:
        return db.query(Site).order_by(Site.id).all()

    def create_report(self, data: WasteReportCreate, db: Session) -> WasteReport:
        """
        Store a worker submission with the initial status.

        Raises:
            ValidationError: If the referenced site does not exist
        """
        site = db.get(Site, data.site_id)
        if site is None:
            raise ValidationError(f"Site {data.site_id} does not exist")

        report = WasteReport(
            site_id=site.id,
            waste_type=data.waste_type,
            quantity=data.quantity,
            unit=data.unit,
            notes=data.notes,
            contact_name=data.contact_name,
            contact_phone=data.contact_phone,
            status=INITIAL_STATUS,
        )
        db.add(report)
        db.commit()
        db.refresh(report)

        logger.info(f"Waste report {report.id} submitted for site {site.id}")
        return report

    def list_reports(
        self,
        db: Session,
        status: Optional[Union[str, WasteStatus]] = None,
    ) -> List[WasteReport]:
        """
        List reports, optionally filtered by status.

        Ordered by workflow position, then newest first.
        """
        query = db.query(WasteReport)
        if status is not None:
            query = query.filter(WasteReport.status == parse_status(status))

        return query.order_by(
            _status_rank(),
            WasteReport.created_at.desc(),
            WasteReport.id.desc(),
        ).all()

    def get_report(self, report_id: int, db: Session) -> WasteReport:
        """
        Raises:
            NotFoundError: If no report has this id
        """
        report = db.get(WasteReport, report_id)
        if report is None:
            raise NotFoundError("Waste report not found")
        return report

    def set_status(
        self,
        report_id: int,
        new_status: Union[str, WasteStatus],
        db: Session,
    ) -> WasteReport:
        """
        Advance a report one step along the workflow.

        The write is conditional on the status that was validated, so a
        concurrent change to the same report cannot be overwritten.

        Raises:
            NotFoundError: Unknown report id
            ValidationError: Unknown literal or illegal transition
            ConflictError: The report changed status while this request ran
        """
        report = self.get_report(report_id, db)
        current = report.status
        requested = validate_transition(current, new_status)

        updated = (
            db.query(WasteReport)
            .filter(WasteReport.id == report_id, WasteReport.status == current)
            .update({WasteReport.status: requested}, synchronize_session=False)
        )
        if updated == 0:
            db.rollback()
            raise ConflictError("Waste report status was changed by another request; reload and retry")

        db.commit()
        db.refresh(report)

        logger.info(f"Waste report {report_id} status {current.value} -> {requested.value}")
        return report


# Singleton instance
waste_service = WasteService()
