"""
Trailer aggregate root.

A trailer owns its specifications and optional VIN, and references an
assigned yard and attached truck by id. New trailers are built with
``Trailer.create``; stored ones are rebuilt with ``Trailer.from_database``.
Instances are immutable once built.
"""

import random
import uuid
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Callable, Dict, Optional, Union

from models.errors import BusinessRuleViolation
from models.ownership_type import OwnershipType
from models.trailer_specifications import Number, TrailerSpecifications
from models.trailer_status import TrailerStatus
from models.trailer_type import TrailerType
from models.vin import VIN
from services.yard_directory import YardDirectory

UNIT_NUMBER_PREFIX = "TR"
DEFAULT_JURISDICTION = "IFTA"
DEFAULT_LOCATION = "Yard"

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def generate_unit_number(rng: random.Random) -> str:
    """Random unit number such as ``TR4821``. Uniqueness is left to the store."""
    return f"{UNIT_NUMBER_PREFIX}{rng.randint(1000, 9999)}"


def generate_entity_id() -> str:
    return uuid.uuid4().hex


def _to_day(value: date, now: datetime) -> date:
    """Truncate a date or datetime to a calendar day in the clock's zone."""
    if isinstance(value, datetime):
        if value.tzinfo is not None and now.tzinfo is not None:
            value = value.astimezone(now.tzinfo)
        return value.date()
    return value


def _parse_date(value: Any) -> Optional[date]:
    if value is None or isinstance(value, date):
        return value
    if hasattr(value, "to_native"):
        return value.to_native()
    return date.fromisoformat(str(value)[:10])


def _parse_datetime(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    if hasattr(value, "to_native"):
        return value.to_native()
    return datetime.fromisoformat(str(value))


@dataclass(frozen=True)
class Trailer:
    id: str
    trailer_id: str
    trailer_type: TrailerType
    status: TrailerStatus
    specifications: TrailerSpecifications
    ownership_type: OwnershipType
    vin: Optional[VIN] = None
    year: Optional[int] = None
    color: Optional[str] = None
    purchase_date: Optional[date] = None
    lease_end_date: Optional[date] = None
    purchase_price: Optional[float] = None
    license_plate: Optional[str] = None
    issuing_state: Optional[str] = None
    registration_exp: Optional[date] = None
    insurance_policy: Optional[str] = None
    insurance_exp: Optional[date] = None
    jurisdiction: Optional[str] = None
    gvwr: Optional[float] = None
    assigned_yard: Optional[str] = None
    current_location: Optional[str] = None
    attached_truck_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        trailer_type: Union[TrailerType, str],
        ownership_type: Union[OwnershipType, str],
        *,
        trailer_id: Optional[str] = None,
        year: Optional[int] = None,
        vin: Optional[str] = None,
        color: Optional[str] = None,
        length: Optional[Number] = None,
        width: Optional[Number] = None,
        height: Optional[Number] = None,
        capacity: Optional[Number] = None,
        axle_count: Optional[int] = None,
        purchase_date: Optional[date] = None,
        lease_end_date: Optional[date] = None,
        purchase_price: Optional[float] = None,
        license_plate: Optional[str] = None,
        issuing_state: Optional[str] = None,
        registration_exp: Optional[date] = None,
        insurance_policy: Optional[str] = None,
        insurance_exp: Optional[date] = None,
        jurisdiction: Optional[str] = None,
        gvwr: Optional[float] = None,
        initial_status: Optional[Union[TrailerStatus, str]] = None,
        assigned_yard: Optional[str] = None,
        attached_truck_id: Optional[str] = None,
        clock: Optional[Clock] = None,
        rng: Optional[random.Random] = None,
        id_factory: Optional[Callable[[], str]] = None,
        yard_directory: Optional[YardDirectory] = None,
    ) -> "Trailer":
        """Build a new trailer from submitted fields.

        Steps run in a fixed order so a request with several problems always
        reports the same one first: unit number, VIN, specifications, status,
        lease rules, location, entity id.

        Args:
            clock: Returns the current aware datetime. Defaults to UTC now.
            rng: Entropy for the generated unit number.
            id_factory: Returns a new opaque entity id.
            yard_directory: Resolves ``assigned_yard`` to a display name.

        Raises:
            InvalidVinError: If a VIN was supplied and is malformed.
            BusinessRuleViolation: If a leased trailer has no lease end date,
                or a lease end date is not after today.
        """
        clock = clock or utc_now
        rng = rng or random.Random()
        id_factory = id_factory or generate_entity_id
        yard_directory = yard_directory or YardDirectory()

        trailer_type = TrailerType.parse(trailer_type)
        ownership_type = OwnershipType.parse(ownership_type)

        unit_number = trailer_id or generate_unit_number(rng)

        parsed_vin = VIN.create(vin) if vin else None

        specifications = TrailerSpecifications.create_with_defaults(
            length, width, height, capacity, axle_count
        )

        status = TrailerStatus.parse(initial_status) if initial_status else TrailerStatus.AVAILABLE

        now = clock()
        if ownership_type.requires_lease_end_date and not lease_end_date:
            raise BusinessRuleViolation("Lease end date is required for leased trailers")
        if lease_end_date and _to_day(lease_end_date, now) <= now.date():
            raise BusinessRuleViolation("Lease end date must be in the future")

        if assigned_yard:
            current_location = yard_directory.resolve_name(assigned_yard)
        else:
            current_location = DEFAULT_LOCATION

        entity_id = id_factory()

        return cls(
            id=entity_id,
            trailer_id=unit_number,
            trailer_type=trailer_type,
            status=status,
            specifications=specifications,
            ownership_type=ownership_type,
            vin=parsed_vin,
            year=year,
            color=color,
            purchase_date=purchase_date,
            lease_end_date=lease_end_date,
            purchase_price=purchase_price,
            license_plate=license_plate,
            issuing_state=issuing_state,
            registration_exp=registration_exp,
            insurance_policy=insurance_policy,
            insurance_exp=insurance_exp,
            jurisdiction=jurisdiction or DEFAULT_JURISDICTION,
            gvwr=gvwr,
            assigned_yard=assigned_yard,
            current_location=current_location,
            attached_truck_id=attached_truck_id,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def from_database(cls, record: Dict[str, Any]) -> "Trailer":
        """Rebuild a stored trailer. The VIN is trusted, not revalidated."""
        vin = VIN.from_database(record["vin"]) if record.get("vin") else None
        specifications = TrailerSpecifications.create(
            record.get("length"),
            record.get("width"),
            record.get("height"),
            record.get("capacity"),
            record.get("axle_count"),
        )

        return cls(
            id=record["id"],
            trailer_id=record["trailer_id"],
            trailer_type=TrailerType.parse(record.get("trailer_type")),
            status=TrailerStatus.parse(record.get("status")),
            specifications=specifications,
            ownership_type=OwnershipType.parse(record.get("ownership_type")),
            vin=vin,
            year=record.get("year"),
            color=record.get("color"),
            purchase_date=_parse_date(record.get("purchase_date")),
            lease_end_date=_parse_date(record.get("lease_end_date")),
            purchase_price=record.get("purchase_price"),
            license_plate=record.get("license_plate"),
            issuing_state=record.get("issuing_state"),
            registration_exp=_parse_date(record.get("registration_exp")),
            insurance_policy=record.get("insurance_policy"),
            insurance_exp=_parse_date(record.get("insurance_exp")),
            jurisdiction=record.get("jurisdiction"),
            gvwr=record.get("gvwr"),
            assigned_yard=record.get("assigned_yard"),
            current_location=record.get("current_location"),
            attached_truck_id=record.get("attached_truck_id"),
            created_at=_parse_datetime(record.get("created_at")),
            updated_at=_parse_datetime(record.get("updated_at")),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Flat plain-field projection used for persistence."""
        return {
            "id": self.id,
            "trailer_id": self.trailer_id,
            "trailer_type": self.trailer_type.value,
            "status": self.status.value,
            "year": self.year,
            "vin": self.vin.value if self.vin else None,
            "color": self.color,
            **self.specifications.to_dict(),
            "ownership_type": self.ownership_type.value,
            "purchase_date": self.purchase_date,
            "lease_end_date": self.lease_end_date,
            "purchase_price": self.purchase_price,
            "license_plate": self.license_plate,
            "issuing_state": self.issuing_state,
            "registration_exp": self.registration_exp,
            "insurance_policy": self.insurance_policy,
            "insurance_exp": self.insurance_exp,
            "jurisdiction": self.jurisdiction,
            "gvwr": self.gvwr,
            "assigned_yard": self.assigned_yard,
            "current_location": self.current_location,
            "attached_truck_id": self.attached_truck_id,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
