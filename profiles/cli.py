"""Command line entry for the profiles service."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

import uvicorn

from profiles.core.config import settings
from profiles.core.exceptions import RelationNotDefinedError
from profiles.models import FamilyMember, Friend
from profiles.registry import PersonRegistry

logger = logging.getLogger("profiles.cli")


def run_server(host: str, port: int) -> None:
    uvicorn.run("profiles.api.main:app", host=host, port=port, log_level=settings.LOG_LEVEL.lower())


def run_demo() -> None:
    """Walk a fresh registry through adding, checking and clearing people."""

    people = PersonRegistry()
    ann = Friend(name="Ann", surname="Lee", birth_date="1990-01-01", gender="female")
    people.add_person(ann)
    print(f"Friends: {people.get_friend_names()!r}")
    try:
        ann.check_relation()
    except RelationNotDefinedError as exc:
        print(f"check_relation failed: {exc}")

    colleague = Friend(name="Ann", surname="Lee", birth_date="1990-01-01", gender="female", relation="colleague")
    print(f"check_relation returned: {colleague.check_relation()!r}")

    people.add_person(FamilyMember(name="Tom", surname="Lee", birth_date="1960-05-05", gender="male"))
    people.clear()
    people.add_person(FamilyMember(name="Eva", surname="Lee", birth_date="1962-07-07", gender="female"))
    print(f"Friends after clear: {people.get_friend_names()!r}")
    print(f"Family after clear: {people.get_family_member_names()!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="profiles", description="Profiles service")
    subcommands = parser.add_subparsers(dest="command", required=True)

    serve = subcommands.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default=settings.HOST)
    serve.add_argument("--port", type=int, default=settings.PORT)

    subcommands.add_parser("demo", help="Run the registry walkthrough in-process")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=settings.LOG_LEVEL)

    if args.command == "serve":
        logger.info("Starting API on %s:%s", args.host, args.port)
        run_server(args.host, args.port)
    else:
        run_demo()


if __name__ == "__main__":
    main()
