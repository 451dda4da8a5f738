"""
Pydantic models for trailer creation requests.
"""

from datetime import date, datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class CreateTrailerRequest(BaseModel):
    """Fields of the "Add New Trailer" form.

    Enum fields are free-form strings; the service parses them leniently.
    Numeric bounds are enforced here, before the request reaches the domain.
    """

    # Identification & Basic Details
    trailer_id: Optional[str] = Field(None, description="Unit number; generated (TR + 4 digits) when omitted", example="TR1001")
    trailer_type: str = Field("dry_van", description="Trailer category", example="reefer")
    year: Optional[int] = Field(None, ge=1900, description="Model year", example=2022)
    vin: Optional[str] = Field(None, description="17 character VIN", example="1HGCM82633A123456")
    color: Optional[str] = Field(None, example="White")

    # Specifications
    length: Optional[float] = Field(None, gt=0, le=100, description="Length in feet", example=53)
    width: Optional[float] = Field(None, gt=0, le=200, description="Width in inches", example=102)
    height: Optional[float] = Field(None, gt=0, le=300, description="Height in inches", example=162)
    capacity: Optional[float] = Field(None, gt=0, le=200000, description="Capacity in pounds", example=45000)
    axle_count: Optional[int] = Field(None, ge=1, le=10, description="Number of axles", example=2)

    # Ownership & Financials
    ownership_type: str = Field("owned", description="owned, leased or rented", example="leased")
    purchase_date: Optional[date] = Field(None, description="Purchase or lease start date")
    lease_end_date: Optional[date] = Field(None, description="Required for leased trailers; must be in the future")
    purchase_price: Optional[float] = Field(None, ge=0, description="Purchase price or lease cost")

    # Registration & Compliance
    license_plate: Optional[str] = None
    issuing_state: Optional[str] = None
    registration_exp: Optional[date] = None
    insurance_policy: Optional[str] = None
    insurance_exp: Optional[date] = None
    jurisdiction: Optional[str] = Field(None, description="Defaults to IFTA")
    gvwr: Optional[float] = Field(None, gt=0, le=200000, description="Gross Vehicle Weight Rating in pounds")

    # Status & Location
    initial_status: Optional[str] = Field(None, description="Defaults to available", example="available")
    assigned_yard: Optional[str] = Field(None, description="Yard reference, e.g. loc1", example="loc1")
    default_truck_id: Optional[str] = Field(None, description="Truck the trailer is attached to")

    @field_validator("year")
    @classmethod
    def validate_year(cls, v: Optional[int]) -> Optional[int]:
        """Reject model years more than one year ahead."""
        if v is not None and v > datetime.now(timezone.utc).year + 1:
            raise ValueError("Invalid year")
        return v

    class Config:
        json_schema_extra = {
            "example": {
                "trailer_type": "reefer",
                "ownership_type": "leased",
                "vin": "1HGCM82633A123456",
                "year": 2023,
                "color": "Silver",
                "length": 48,
                "capacity": 42000,
                "axle_count": 2,
                "lease_end_date": "2030-12-31",
                "initial_status": "assigned",
                "assigned_yard": "loc2"
            }
        }
