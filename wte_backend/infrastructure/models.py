from sqlalchemy import Column, String, Float, DateTime, ForeignKey, Integer, Text, Enum, Index
from sqlalchemy.orm import relationship
from .database import Base
from ..domain.models import WasteStatus
from datetime import datetime

class AdminUser(Base):
    __tablename__ = "admin_users"
    id = Column(Integer, primary_key=True, autoincrement=True)
    # Stored exactly as registered; uniqueness is case-sensitive
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

class Site(Base):
    __tablename__ = "sites"
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), unique=True, nullable=False)

    waste_reports = relationship("WasteReport", back_populates="site")

class WasteReport(Base):
    __tablename__ = "waste_reports"
    id = Column(Integer, primary_key=True, autoincrement=True)
    site_id = Column(Integer, ForeignKey("sites.id"), nullable=False, index=True)
    waste_type = Column(String(255), nullable=False)
    quantity = Column(Float, nullable=False)
    unit = Column(String(50), nullable=False)
    notes = Column(Text, nullable=True)
    contact_name = Column(String(255), nullable=False)
    contact_phone = Column(String(50), nullable=False)
    status = Column(
        Enum(WasteStatus, name="waste_status", native_enum=False, validate_strings=True),
        default=WasteStatus.REPORTED,
        nullable=False,
    )
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    site = relationship("Site", back_populates="waste_reports", lazy="joined")

    __table_args__ = (
        Index("ix_waste_reports_status_created_at", "status", "created_at"),
    )
