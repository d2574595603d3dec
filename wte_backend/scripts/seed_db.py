"""
Simple DB seeder for development.
Creates tables, sample sites, an optional admin, and sample waste reports.

Usage:
    python -m wte_backend.scripts.seed_db

The admin is only created when SEED_ADMIN_EMAIL and SEED_ADMIN_PASSWORD are set.
"""
import logging

from sqlalchemy.orm import Session

from wte_backend.core.config import settings
from wte_backend.infrastructure.database import engine, SessionLocal
from wte_backend.infrastructure.models import Base, Site, WasteReport
from wte_backend.domain.errors import ConflictError
from wte_backend.domain.models import WasteReportCreate, WasteStatus
from wte_backend.domain.services.auth_service import auth_service
from wte_backend.domain.services.status_workflow import next_status
from wte_backend.domain.services.waste_service import waste_service

logger = logging.getLogger(__name__)

SITE_NAMES = ["Cassava Processing Site", "Livestock Farm Site"]

SAMPLE_REPORTS = [
    {
        "site": "Cassava Processing Site",
        "waste_type": "Cassava Peels",
        "quantity": 50.5,
        "unit": "kg",
        "notes": "Fresh peels from morning processing",
        "contact_name": "John Doe",
        "contact_phone": "+1234567890",
        "status": WasteStatus.REPORTED,
    },
    {
        "site": "Livestock Farm Site",
        "waste_type": "Animal Waste",
        "quantity": 25.0,
        "unit": "kg",
        "notes": "Daily collection from pens",
        "contact_name": "Jane Smith",
        "contact_phone": "+0987654321",
        "status": WasteStatus.EN_ROUTE,
    },
]


def seed_sites(db: Session) -> dict:
    """Create missing sites; returns name -> Site."""
    sites = {}
    for name in SITE_NAMES:
        site = db.query(Site).filter(Site.name == name).first()
        if site is None:
            site = Site(name=name)
            db.add(site)
            db.commit()
            db.refresh(site)
            logger.info(f"Created site: {name}")
        sites[name] = site
    return sites


def seed_admin(db: Session) -> None:
    email, password = settings.SEED_ADMIN_EMAIL, settings.SEED_ADMIN_PASSWORD
    if not email or not password:
        logger.info("SEED_ADMIN_EMAIL/SEED_ADMIN_PASSWORD not set, skipping admin user")
        return
    try:
        auth_service.register_admin(email=email, password=password, db=db)
        logger.info(f"Created admin user: {email}")
    except ConflictError:
        logger.info(f"Admin user already exists: {email}")


def seed_reports(db: Session, sites: dict) -> int:
    """Insert sample reports into an empty table. Statuses are reached through the workflow."""
    if db.query(WasteReport).count() > 0:
        logger.info("Waste reports already present, skipping sample reports")
        return 0

    created = 0
    for sample in SAMPLE_REPORTS:
        data = WasteReportCreate(
            site_id=sites[sample["site"]].id,
            waste_type=sample["waste_type"],
            quantity=sample["quantity"],
            unit=sample["unit"],
            notes=sample["notes"],
            contact_name=sample["contact_name"],
            contact_phone=sample["contact_phone"],
        )
        report = waste_service.create_report(data, db)
        while report.status != sample["status"]:
            report = waste_service.set_status(report.id, next_status(report.status), db)
        created += 1
    logger.info(f"Created {created} sample waste reports")
    return created


def seed():
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        sites = seed_sites(db)
        seed_admin(db)
        seed_reports(db, sites)
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    seed()
