import logging
from datetime import date
from typing import Dict, List, Optional, Tuple

from database import BaseRepository
from models.errors import TrailerValidationError
from models.trailer import Trailer

logger = logging.getLogger(__name__)

_DATE_FIELDS = (
    "purchase_date",
    "lease_end_date",
    "registration_exp",
    "insurance_exp",
    "created_at",
    "updated_at",
)


class TrailerRepository(BaseRepository):
    """Repository for Trailer entity operations"""

    constraints = (
        ("trailer_id_unique", "Trailer", "id"),
        ("trailer_unit_number_unique", "Trailer", "trailer_id"),
        ("trailer_vin_unique", "Trailer", "vin"),
    )

    def save(self, trailer: Trailer) -> Optional[Trailer]:
        """Create a new trailer node and return it as stored"""
        query = """
        CREATE (t:Trailer {
            id: $id,
            trailer_id: $trailer_id,
            trailer_type: $trailer_type,
            status: $status,
            year: $year,
            vin: $vin,
            color: $color,
            length: $length,
            width: $width,
            height: $height,
            capacity: $capacity,
            axle_count: $axle_count,
            ownership_type: $ownership_type,
            purchase_date: $purchase_date,
            lease_end_date: $lease_end_date,
            purchase_price: $purchase_price,
            license_plate: $license_plate,
            issuing_state: $issuing_state,
            registration_exp: $registration_exp,
            insurance_policy: $insurance_policy,
            insurance_exp: $insurance_exp,
            jurisdiction: $jurisdiction,
            gvwr: $gvwr,
            assigned_yard: $assigned_yard,
            current_location: $current_location,
            attached_truck_id: $attached_truck_id,
            created_at: $created_at,
            updated_at: $updated_at
        })
        RETURN t
        """

        # Convert dates to strings for Neo4j
        params = trailer.to_dict()
        for field in _DATE_FIELDS:
            value = params.get(field)
            if isinstance(value, date):
                params[field] = value.isoformat()

        result = self.execute_query(query, params)
        return self._to_trailer(result[0]['t']) if result else None

    def get_by_id(self, identifier: str) -> Optional[Trailer]:
        """Get a trailer by entity id, falling back to its unit number"""
        trailer = self._find_one("MATCH (t:Trailer {id: $value}) RETURN t", identifier)
        if trailer is None:
            trailer = self.get_by_trailer_id(identifier)
        return trailer

    def get_by_trailer_id(self, trailer_id: str) -> Optional[Trailer]:
        """Get a trailer by unit number"""
        return self._find_one(
            "MATCH (t:Trailer {trailer_id: $value}) RETURN t LIMIT 1", trailer_id
        )

    def get_by_vin(self, vin: str) -> Optional[Trailer]:
        """Get a trailer by VIN"""
        return self._find_one("MATCH (t:Trailer {vin: $value}) RETURN t LIMIT 1", vin)

    def get_all(
        self,
        page: int = 1,
        limit: int = 10,
        status: Optional[str] = None,
        trailer_type: Optional[str] = None,
    ) -> Tuple[List[Trailer], int]:
        """Get one page of trailers, newest first, plus the filtered total"""
        where_clauses = []
        params: Dict = {"skip": (page - 1) * limit, "limit": limit}

        if status:
            where_clauses.append("t.status = $status")
            params['status'] = status

        if trailer_type:
            where_clauses.append("t.trailer_type = $trailer_type")
            params['trailer_type'] = trailer_type

        where_clause = f"WHERE {' AND '.join(where_clauses)}" if where_clauses else ""

        query = f"""
        MATCH (t:Trailer)
        {where_clause}
        RETURN t
        ORDER BY t.created_at DESC
        SKIP $skip
        LIMIT $limit
        """
        count_query = f"""
        MATCH (t:Trailer)
        {where_clause}
        RETURN count(t) as total
        """

        records = self.execute_query(query, params)
        counted = self.execute_query(count_query, params)
        total = counted[0]['total'] if counted else 0

        return [self._to_trailer(record['t']) for record in records], total

    def exists_by_trailer_id(self, trailer_id: str) -> bool:
        """Check if a unit number is already taken"""
        return self._exists("MATCH (t:Trailer {trailer_id: $value}) RETURN count(t) > 0 as exists", trailer_id)

    def exists_by_vin(self, vin: str) -> bool:
        """Check if a VIN is already registered"""
        return self._exists("MATCH (t:Trailer {vin: $value}) RETURN count(t) > 0 as exists", vin)

    def delete(self, identifier: str) -> bool:
        """Delete a trailer by entity id or unit number"""
        query = """
        MATCH (t:Trailer)
        WHERE t.id = $value OR t.trailer_id = $value
        DETACH DELETE t
        RETURN count(t) as deleted
        """
        result = self.execute_query(query, {"value": identifier})
        return result[0]['deleted'] > 0 if result else False

    def delete_all(self) -> int:
        """Remove every trailer node. Used by the test database bootstrap."""
        summary = self.execute_write("MATCH (t:Trailer) DETACH DELETE t")
        return summary["nodes_deleted"]

    def _find_one(self, query: str, value: str) -> Optional[Trailer]:
        result = self.execute_query(query, {"value": value})
        return self._to_trailer(result[0]['t']) if result else None

    def _exists(self, query: str, value: str) -> bool:
        result = self.execute_query(query, {"value": value})
        return result[0]['exists'] if result else False

    def _to_trailer(self, node: Dict) -> Trailer:
        try:
            return Trailer.from_database(node)
        except TrailerValidationError as e:
            logger.error(
                f"Stored trailer {node.get('trailer_id')} (id={node.get('id')}) "
                f"has invalid {e.field}: {e}"
            )
            raise
