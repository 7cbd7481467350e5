#!/usr/bin/env python3
"""Promote a principal to global admin by identity provider id.

The principal must have logged in at least once. Use this to recover a
site whose admins have all lost access; in-app promotion goes through
SetGlobalAdminUseCase instead.

Usage:
    python scripts/promote_admin.py <provider-user-id>
"""

import argparse
import asyncio
import sys

import logfire

from forum.config import Settings
from forum.domain.error import NotFoundError
from forum.domain.service import MembershipService, PrincipalService
from forum.domain.value import LedgerOutcome
from forum.util.di.container import create_container
from forum.util.logging import setup_logging
from forum.util.observability import configure_logfire


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("external_id", help="Identity provider user id")
    return parser.parse_args(argv)


async def promote(external_id: str) -> LedgerOutcome:
    """Set the global admin rank inside one unit of work.

    Raises:
        NotFoundError: If no principal has this external id
    """
    container = create_container()
    try:
        async with container() as request:
            principals = await request.get(PrincipalService)
            memberships = await request.get(MembershipService)
            principal = await principals.get_by_external_id(external_id)
            if principal is None:
                raise NotFoundError("Principal", external_id)
            return await memberships.set_global_admin(principal.id)
    finally:
        await container.close()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    settings = Settings()

    configure_logfire(settings)
    setup_logging(settings)

    with logfire.span("admin.promote", external_id=args.external_id):
        try:
            outcome = asyncio.run(promote(args.external_id))
        except NotFoundError as e:
            logfire.error("Promotion failed", error=str(e))
            return 1

    logfire.info("Principal promoted", external_id=args.external_id, outcome=outcome.value)
    return 0


if __name__ == "__main__":
    sys.exit(main())
