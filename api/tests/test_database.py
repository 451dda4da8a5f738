"""
Unit tests for the Neo4j connection and the shared repository helpers.
"""

import pytest
from unittest.mock import MagicMock, Mock, patch
from neo4j.exceptions import ServiceUnavailable
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from config import settings
from database import BaseRepository, Neo4jConnection


class TestNeo4jConnection:

    @pytest.fixture
    def driver(self):
        return Mock()

    @pytest.fixture
    def connection(self, driver):
        with patch('database.GraphDatabase.driver', return_value=driver) as factory:
            conn = Neo4jConnection()
        conn.factory = factory
        return conn

    def test_driver_pool_uses_settings(self, connection):
        args, kwargs = connection.factory.call_args
        assert args[0] == settings.neo4j_uri
        assert kwargs["auth"] == (settings.neo4j_user, settings.neo4j_password)
        assert kwargs["max_connection_pool_size"] == settings.neo4j_max_pool_size
        assert kwargs["connection_acquisition_timeout"] == settings.neo4j_connection_timeout

    def test_verify_connectivity(self, connection, driver):
        assert connection.verify_connectivity() is True
        driver.verify_connectivity.assert_called_once()

    def test_verify_connectivity_unreachable(self, connection, driver):
        driver.verify_connectivity.side_effect = ServiceUnavailable("Connection refused")
        assert connection.verify_connectivity() is False

    def test_get_session_closes_session(self, connection, driver):
        session = MagicMock()
        driver.session.return_value = session

        with connection.get_session() as s:
            assert s is session.__enter__.return_value

        session.__exit__.assert_called_once()

    def test_close(self, connection, driver):
        connection.close()
        driver.close.assert_called_once()


class TestBaseRepository:

    def test_execute_write_reports_counters(self):
        repo = BaseRepository()
        session = MagicMock()
        counters = session.run.return_value.consume.return_value.counters
        counters.nodes_created = 1
        counters.nodes_deleted = 0
        counters.properties_set = 5
        counters.constraints_added = 0

        with patch.object(repo.db, 'get_session') as get_session:
            get_session.return_value.__enter__.return_value = session
            summary = repo.execute_write("CREATE (t:Trailer {id: $id})", {"id": "x"})

        assert summary == {
            "nodes_created": 1,
            "nodes_deleted": 0,
            "properties_set": 5,
            "constraints_added": 0,
        }
        session.run.assert_called_once_with("CREATE (t:Trailer {id: $id})", {"id": "x"})
