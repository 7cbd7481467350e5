"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container

from forum.util.di import Component, build_providers, swappable_components


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container with every swappable component mocked.

    Args:
        unmock: Components to run against their production implementation,
            e.g. ``{"persistence"}`` for a real PostgreSQL

    Raises:
        ValueError: If an unknown component is named
    """
    unmock = set(unmock or ())
    available = swappable_components()

    unknown = unmock - available
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    return make_async_container(*build_providers(mocked=available - unmock))
