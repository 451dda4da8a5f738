import logging
from contextlib import contextmanager
from typing import Generator, Iterable

from neo4j import GraphDatabase, Session
from neo4j.exceptions import DriverError, Neo4jError
from config import settings

logger = logging.getLogger(__name__)


class Neo4jConnection:
    """Driver pool for the trailer store, sized from settings."""

    def __init__(self):
        if not settings.neo4j_password:
            raise ValueError("NEO4J_PASSWORD is required in settings")

        self.uri = settings.neo4j_uri
        self.driver = GraphDatabase.driver(
            self.uri,
            auth=(settings.neo4j_user, settings.neo4j_password),
            max_connection_pool_size=settings.neo4j_max_pool_size,
            connection_acquisition_timeout=settings.neo4j_connection_timeout,
            max_transaction_retry_time=settings.neo4j_connection_timeout
        )

    def close(self):
        self.driver.close()

    @contextmanager
    def get_session(self) -> Generator[Session, None, None]:
        """Yield a session that is closed on exit"""
        with self.driver.session() as session:
            yield session

    def verify_connectivity(self) -> bool:
        """Return True when the server at ``settings.neo4j_uri`` answers."""
        try:
            self.driver.verify_connectivity()
            return True
        except (DriverError, Neo4jError) as e:
            logger.error(f"Cannot reach Neo4j at {self.uri}: {e}")
            return False


# Singleton instance
db = Neo4jConnection()


class BaseRepository:
    """Base repository with common Neo4j operations.

    Subclasses list their uniqueness constraints in ``constraints`` as
    ``(name, label, property)`` tuples; ``ensure_constraints`` applies them.
    """

    constraints: Iterable[tuple] = ()

    def __init__(self):
        self.db = db

    def execute_query(self, query: str, parameters: dict = None) -> list:
        """Execute a read query and return results.

        Args:
            query: Cypher query string
            parameters: Optional query parameters

        Returns:
            list: Query results as list of dictionaries
        """
        with self.db.get_session() as session:
            result = session.run(query, parameters or {})
            return [record.data() for record in result]

    def execute_write(self, query: str, parameters: dict = None) -> dict:
        """Execute a write query and return summary.

        Args:
            query: Cypher query string
            parameters: Optional query parameters

        Returns:
            dict: Summary of changes made to the database
        """
        with self.db.get_session() as session:
            result = session.run(query, parameters or {})
            summary = result.consume()
            return {
                "nodes_created": summary.counters.nodes_created,
                "nodes_deleted": summary.counters.nodes_deleted,
                "properties_set": summary.counters.properties_set,
                "constraints_added": summary.counters.constraints_added,
            }

    def ensure_constraints(self) -> int:
        """Create the repository's unique constraints if they are missing.

        Returns:
            int: Number of constraints newly added
        """
        added = 0
        for name, label, prop in self.constraints:
            summary = self.execute_write(
                f"CREATE CONSTRAINT {name} IF NOT EXISTS "
                f"FOR (n:{label}) REQUIRE n.{prop} IS UNIQUE"
            )
            added += summary["constraints_added"]
        return added
