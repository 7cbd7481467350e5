"""Production container.

Entry point for anything that drives the use cases: an HTTP layer opens a
request scope per incoming request, and operator scripts such as
``scripts/promote_admin.py`` open one per run.
"""

from dishka import AsyncContainer, make_async_container

from forum.util.di import build_providers


def create_container() -> AsyncContainer:
    """Container wired to PostgreSQL and settings from the environment.

    Open one request scope per unit of work; its session commits when the
    scope closes cleanly. Close the container on shutdown to dispose the
    engine.
    """
    return make_async_container(*build_providers())
