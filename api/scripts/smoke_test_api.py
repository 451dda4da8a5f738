#!/usr/bin/env python3
"""
Black-box smoke test against a running Trailers Service.

Creates a few trailers, lists them, opens one profile and checks that a
duplicate unit number is rejected. Run scripts/setup_test_db.py first for a
clean database.

Usage:
    python scripts/smoke_test_api.py [base_url]
"""

import os
import sys
from datetime import date, timedelta

import requests

BASE_URL = sys.argv[1] if len(sys.argv) > 1 else os.getenv("TRAILERS_API_URL", "http://localhost:8000")
HEADERS = {"X-API-Key": os.getenv("API_KEY", "test-api-key")}

lease_end = (date.today() + timedelta(days=365)).isoformat()

SAMPLE_TRAILERS = [
    {
        "trailer_id": "TR9001",
        "trailer_type": "dry_van",
        "ownership_type": "owned",
        "vin": "1HGCM82633A123456",
        "year": 2022,
        "color": "White",
        "length": 53,
        "capacity": 45000,
        "axle_count": 2,
        "purchase_date": "2022-01-15",
        "purchase_price": 35000,
        "license_plate": "TRL-001",
        "issuing_state": "MI",
        "initial_status": "available",
        "assigned_yard": "loc1",
    },
    {
        "trailer_id": "TR9002",
        "trailer_type": "Reefer",
        "ownership_type": "LEASED",
        "vin": "2T1BURHE0JC012345",
        "year": 2023,
        "length": 48,
        "capacity": 42000,
        "lease_end_date": lease_end,
        "initial_status": "assigned",
        "assigned_yard": "loc2",
        "default_truck_id": "TRK-17",
    },
    {
        "trailer_id": "TR9003",
        "trailer_type": "step deck",
        "ownership_type": "rented",
        "initial_status": "out of service",
    },
]


def check(condition: bool, message: str) -> bool:
    print(f"   {'✅' if condition else '❌'} {message}")
    return condition


def run_smoke_test() -> bool:
    ok = True

    print("\n1. Creating trailers")
    for payload in SAMPLE_TRAILERS:
        response = requests.post(f"{BASE_URL}/trailers/", json=payload, headers=HEADERS, timeout=30)
        ok &= check(response.status_code == 201, f"POST {payload['trailer_id']} -> {response.status_code}")
        if response.status_code == 201:
            body = response.json()
            print(f"      {body['id']} | {body['trailer_type']} | {body['status']} | {body['length_capacity_display']}")

    print("\n2. Listing trailers")
    response = requests.get(f"{BASE_URL}/trailers/", params={"limit": 50}, headers=HEADERS, timeout=30)
    ok &= check(response.status_code == 200, f"GET /trailers/ -> {response.status_code}")
    if response.status_code == 200:
        body = response.json()
        ids = {t["id"] for t in body["trailers"]}
        ok &= check({"TR9001", "TR9002", "TR9003"} <= ids, f"{body['total']} trailer(s) listed")

    print("\n3. Fetching a profile")
    response = requests.get(f"{BASE_URL}/trailers/TR9002", headers=HEADERS, timeout=30)
    ok &= check(response.status_code == 200, f"GET /trailers/TR9002 -> {response.status_code}")
    if response.status_code == 200:
        body = response.json()
        ok &= check(body["current_location"] == "Chicago Terminal", f"location {body['current_location']}")

    print("\n4. Rejecting a duplicate")
    response = requests.post(f"{BASE_URL}/trailers/", json=SAMPLE_TRAILERS[0], headers=HEADERS, timeout=30)
    ok &= check(response.status_code == 409, f"duplicate POST -> {response.status_code}")

    return bool(ok)


if __name__ == "__main__":
    print("=" * 60)
    print(f"TRAILERS SERVICE SMOKE TEST ({BASE_URL})")
    print("=" * 60)
    try:
        passed = run_smoke_test()
    except requests.exceptions.ConnectionError:
        print(f"\n❌ Could not reach {BASE_URL}. Is the server running?")
        passed = False

    print("\n" + "=" * 60)
    print("ALL CHECKS PASSED" if passed else "SOME CHECKS FAILED")
    sys.exit(0 if passed else 1)
