#!/usr/bin/env python3
"""
Prepare the test database: remove every Trailer node and apply the
trailer uniqueness constraints.

Reads connection settings from .env.test when it exists, otherwise from the
regular environment / .env.
"""

import sys
from pathlib import Path

from dotenv import load_dotenv

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

test_env_path = Path(__file__).parent.parent / ".env.test"
if test_env_path.exists():
    load_dotenv(test_env_path, override=True)

from config import settings  # noqa: E402
from database import db  # noqa: E402
from repositories.trailer_repository import TrailerRepository  # noqa: E402


def setup_test_database() -> bool:
    """Wipe trailer data and apply constraints. Returns True on success."""
    print("=" * 60)
    print("SETTING UP TEST DATABASE")
    print("=" * 60)
    print(f"   Database: {settings.neo4j_uri}")

    if not db.verify_connectivity():
        print("   ❌ Cannot connect to Neo4j")
        return False
    print("   ✅ Connected to Neo4j")

    repo = TrailerRepository()

    deleted = repo.delete_all()
    print(f"   ✅ Removed {deleted} existing trailer(s)")

    added = repo.ensure_constraints()
    print(f"   ✅ Constraints ready ({added} newly created)")

    return True


if __name__ == "__main__":
    try:
        ok = setup_test_database()
    except Exception as e:
        print(f"\n❌ Setup failed: {e}")
        ok = False
    finally:
        db.close()

    print("\n" + "=" * 60)
    print("TEST DATABASE READY" if ok else "SETUP FAILED")
    sys.exit(0 if ok else 1)
