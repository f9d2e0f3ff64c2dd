#!/usr/bin/env python
"""
Seed a running profiles API with sample friends and family members.

Usage:
    python scripts/seed_people.py --base-url http://localhost:8080
"""

from __future__ import annotations

import argparse
import logging

import httpx

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("profiles.seed_people")

PEOPLE = [
    {
        "kind": "friend",
        "name": "Ann",
        "surname": "Lee",
        "birth_date": "1990-01-01",
        "gender": "female",
        "relation": "colleague",
    },
    {
        "kind": "friend",
        "name": "Bo",
        "surname": "Kim",
        "birth_date": "12 March 1988",
        "gender": "male",
    },
    {
        "kind": "family_member",
        "name": "Tom",
        "surname": "Lee",
        "birth_date": "1960-05-05",
        "gender": "male",
        "profession": "teacher",
    },
    {
        "kind": "family_member",
        "name": "Sam",
        "surname": "Lee",
        "birth_date": "2001",
        "gender": "other",
    },
]


def seed(base_url: str) -> None:
    with httpx.Client(base_url=base_url, timeout=10.0) as client:
        for person in PEOPLE:
            response = client.post("/api/people", json=person)
            response.raise_for_status()
            logger.info("Added %s %s %s", person["kind"], person["name"], person["surname"])

        summary = client.get("/api/people/summary")
        summary.raise_for_status()
        logger.info("Summary: %s", summary.json())


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--base-url", default="http://localhost:8080")
    args = parser.parse_args()
    seed(args.base_url)


if __name__ == "__main__":
    main()
