"""
Trailer use cases: create, list and fetch.

Uniqueness of unit number and VIN is checked here before the aggregate is
built; the store's unique constraints settle any remaining race.
"""

import logging
import random
import re
from typing import Optional

from neo4j.exceptions import ConstraintError

from config import settings
from models.errors import (
    InvalidPaginationError,
    TrailerAlreadyExistsError,
    TrailerNotFoundError,
)
from models.ownership_type import OwnershipType
from models.trailer import Clock, Trailer
from models.trailer_request import CreateTrailerRequest
from models.trailer_response import TrailerListResponse, TrailerProfile, TrailerResponse
from models.trailer_status import TrailerStatus
from models.trailer_type import TrailerType
from repositories.trailer_repository import TrailerRepository
from services.yard_directory import YardDirectory, get_yard_directory

logger = logging.getLogger(__name__)


class TrailerService:
    """Coordinates the trailer repository and the Trailer aggregate."""

    def __init__(
        self,
        repository: Optional[TrailerRepository] = None,
        yard_directory: Optional[YardDirectory] = None,
        clock: Optional[Clock] = None,
        rng: Optional[random.Random] = None,
    ):
        self.repository = repository or TrailerRepository()
        self.yard_directory = yard_directory or get_yard_directory()
        self.clock = clock
        self.rng = rng

    def create_trailer(self, request: CreateTrailerRequest) -> TrailerResponse:
        """
        Create and store a new trailer.

        Args:
            request: Validated creation form

        Returns:
            TrailerResponse for the stored trailer

        Raises:
            TrailerAlreadyExistsError: If the unit number or VIN is taken
            TrailerValidationError: If the VIN is malformed
            BusinessRuleViolation: If the lease dates are missing or in the past
        """
        if request.trailer_id and self.repository.exists_by_trailer_id(request.trailer_id):
            logger.warning(f"Rejected duplicate trailer ID {request.trailer_id}")
            raise TrailerAlreadyExistsError("trailer_id", request.trailer_id)

        if request.vin and self.repository.exists_by_vin(request.vin.strip().upper()):
            logger.warning(f"Rejected duplicate VIN {request.vin}")
            raise TrailerAlreadyExistsError("vin", request.vin)

        trailer_type = TrailerType.parse(request.trailer_type)
        ownership_type = OwnershipType.parse(request.ownership_type)
        initial_status = TrailerStatus.parse(request.initial_status) if request.initial_status else None

        trailer = Trailer.create(
            trailer_type,
            ownership_type,
            trailer_id=request.trailer_id,
            year=request.year,
            vin=request.vin,
            color=request.color,
            length=request.length,
            width=request.width,
            height=request.height,
            capacity=request.capacity,
            axle_count=request.axle_count,
            purchase_date=request.purchase_date,
            lease_end_date=request.lease_end_date,
            purchase_price=request.purchase_price,
            license_plate=request.license_plate,
            issuing_state=request.issuing_state,
            registration_exp=request.registration_exp,
            insurance_policy=request.insurance_policy,
            insurance_exp=request.insurance_exp,
            jurisdiction=request.jurisdiction,
            gvwr=request.gvwr,
            initial_status=initial_status,
            assigned_yard=request.assigned_yard,
            attached_truck_id=request.default_truck_id,
            clock=self.clock,
            rng=self.rng,
            yard_directory=self.yard_directory,
        )

        try:
            saved = self.repository.save(trailer)
        except ConstraintError as e:
            # Lost a race with a concurrent create, or drew a taken unit number
            logger.warning(f"Store rejected trailer {trailer.trailer_id}: {e}")
            if trailer.vin and re.search(r"\bvin\b", str(e)):
                raise TrailerAlreadyExistsError("vin", trailer.vin.value) from e
            raise TrailerAlreadyExistsError("trailer_id", trailer.trailer_id) from e
        if saved is None:
            raise RuntimeError(f"Failed to store trailer {trailer.trailer_id}")

        logger.info(f"Created trailer {saved.trailer_id} (id={saved.id})")
        return TrailerResponse.from_domain(saved)

    def list_trailers(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        status: Optional[str] = None,
        trailer_type: Optional[str] = None,
    ) -> TrailerListResponse:
        """Return one page of trailers for the table view."""
        page = page or 1
        limit = limit or settings.default_page_size

        if page < 1:
            raise InvalidPaginationError("Page number must be greater than 0")
        if limit < 1 or limit > settings.max_page_size:
            raise InvalidPaginationError(f"Limit must be between 1 and {settings.max_page_size}")

        # Unknown filter values are passed through untouched and match nothing
        if status:
            parsed_status = TrailerStatus.lookup(status)
            status = parsed_status.value if parsed_status else status
        if trailer_type:
            parsed_type = TrailerType.lookup(trailer_type)
            trailer_type = parsed_type.value if parsed_type else trailer_type

        trailers, total = self.repository.get_all(
            page=page, limit=limit, status=status, trailer_type=trailer_type
        )

        return TrailerListResponse(
            trailers=[TrailerResponse.from_domain(t) for t in trailers],
            total=total,
            page=page,
            limit=limit,
        )

    def get_trailer(self, identifier: str) -> TrailerProfile:
        """Return the profile of a trailer by entity id or unit number."""
        trailer = self.repository.get_by_id(identifier)
        if trailer is None:
            raise TrailerNotFoundError(identifier)
        return TrailerProfile.from_domain(trailer)
