from pydantic import BaseModel, Field, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime
from enum import Enum

# Largest id a 32-bit INTEGER primary key can hold
MAX_ID = 2**31 - 1


class WasteStatus(str, Enum):
    """Collection lifecycle of a waste report, in workflow order."""
    REPORTED = "REPORTED"
    EN_ROUTE = "EN_ROUTE"
    COLLECTED = "COLLECTED"


# Wire format is camelCase (siteId, wasteType, ...); attributes stay snake_case
_camel_config = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    from_attributes=True,
)


# ============================================================================
# CREATE MODELS (request bodies)
# ============================================================================

class WasteReportCreate(BaseModel):
    """Worker submission. Blank strings count as missing."""
    site_id: int = Field(..., gt=0, le=MAX_ID)
    waste_type: str = Field(..., min_length=1, max_length=255)
    quantity: float = Field(..., gt=0, allow_inf_nan=False)
    unit: str = Field(..., min_length=1, max_length=50)
    notes: Optional[str] = None
    contact_name: str = Field(..., min_length=1, max_length=255)
    contact_phone: str = Field(..., min_length=1, max_length=50)

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    @field_validator("site_id", "quantity", mode="before")
    @classmethod
    def reject_booleans(cls, v):
        # Lax mode would coerce true/false to 1/0
        if isinstance(v, bool):
            raise ValueError("must be a number, not a boolean")
        return v


class StatusUpdateRequest(BaseModel):
    # Plain string so unknown literals reach the workflow and get a domain error
    status: str


# ============================================================================
# RESPONSE MODELS
# ============================================================================

class SiteResponse(BaseModel):
    id: int
    name: str

    model_config = _camel_config


class WasteReportResponse(BaseModel):
    id: int
    site_id: int
    waste_type: str
    quantity: float
    unit: str
    notes: Optional[str] = None
    contact_name: str
    contact_phone: str
    status: WasteStatus
    created_at: datetime
    site: SiteResponse

    model_config = _camel_config
