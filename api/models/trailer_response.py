"""
Response models: the table row, the paginated list and the profile view.
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from models.trailer import Trailer


class TrailerResponse(BaseModel):
    """One row of the trailers table."""

    id: str = Field(..., description="Unit number", example="TR1001")
    trailer_type: str = Field(..., description="Display name of the trailer type", example="Dry Van")
    year: Optional[int] = None
    vin: Optional[str] = None
    status: str = Field(..., description="Display name of the status", example="Available")
    length_capacity_display: str = Field(..., example="53 ft / 45,000 lbs")
    axle_count: Optional[int] = None
    attached_truck: str = Field(..., example="None")
    current_location: str = Field(..., example="Detroit Yard")

    @classmethod
    def from_domain(cls, trailer: Trailer) -> "TrailerResponse":
        specs = trailer.specifications
        return cls(
            id=trailer.trailer_id,
            trailer_type=trailer.trailer_type.display_name,
            year=trailer.year or None,
            vin=trailer.vin.value if trailer.vin else None,
            status=trailer.status.display_name,
            length_capacity_display=specs.length_capacity_display(),
            axle_count=specs.axle_count or None,
            attached_truck=trailer.attached_truck_id or "None",
            current_location=trailer.current_location or "N/A",
        )


class TrailerListResponse(BaseModel):
    trailers: List[TrailerResponse]
    total: int
    page: int
    limit: int


class BasicInformation(BaseModel):
    vin: str = ""
    color: str = ""
    year: int = 0
    axle_count_type: str = Field(..., example="2 Axles")


class SpecificationsSection(BaseModel):
    length: float = 0
    height: float = 0
    width: float = 0
    capacity: float = 0


class OwnershipFinancials(BaseModel):
    ownership_type: str
    lease_start_date: Optional[date] = None
    lease_end_date: Optional[date] = None
    lease_cost: Optional[float] = None


class RegistrationCompliance(BaseModel):
    license_plate: str = ""
    registration_expiry: Optional[date] = None
    insurance_policy: str = ""
    insurance_expiry: Optional[date] = None
    pti_due_date: str = "N/A"


class TrailerProfile(BaseModel):
    """Detail view shown when a trailer is opened from the table."""

    id: str
    unit_number: str
    type: str = Field(..., description="Canonical trailer type", example="dry_van")
    status: str = Field(..., description="Canonical status", example="available")
    current_location: Optional[str] = None
    basic_information: BasicInformation
    specifications: SpecificationsSection
    ownership_financials: OwnershipFinancials
    registration_compliance: RegistrationCompliance
    assigned_yard: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, trailer: Trailer) -> "TrailerProfile":
        specs = trailer.specifications
        return cls(
            id=trailer.id,
            unit_number=trailer.trailer_id,
            type=trailer.trailer_type.value,
            status=trailer.status.value,
            current_location=trailer.current_location or None,
            basic_information=BasicInformation(
                vin=trailer.vin.value if trailer.vin else "",
                color=trailer.color or "",
                year=trailer.year or 0,
                axle_count_type=f"{specs.axle_count or 0} Axles",
            ),
            specifications=SpecificationsSection(
                length=specs.length or 0,
                height=specs.height or 0,
                width=specs.width or 0,
                capacity=specs.capacity or 0,
            ),
            ownership_financials=OwnershipFinancials(
                ownership_type=trailer.ownership_type.value,
                lease_start_date=trailer.purchase_date,
                lease_end_date=trailer.lease_end_date,
                lease_cost=trailer.purchase_price,
            ),
            registration_compliance=RegistrationCompliance(
                license_plate=trailer.license_plate or "",
                registration_expiry=trailer.registration_exp,
                insurance_policy=trailer.insurance_policy or "",
                insurance_expiry=trailer.insurance_exp,
            ),
            assigned_yard=trailer.assigned_yard or None,
            created_at=trailer.created_at,
            updated_at=trailer.updated_at,
        )
