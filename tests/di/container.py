"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from ident.util.di import PROVIDERS, Component, get_provider


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where every mockable component is mocked by default.

    Args:
        unmock: Components that should use their production implementation

    Returns:
        Container ready to serve direct lookups or HTTP requests

    Raises:
        ValueError: If ``unmock`` names an unknown component

    Examples:
        build_test_container()                         # unit tests
        build_test_container(unmock={"persistence"})   # SQL on in-memory SQLite
    """
    unmock = unmock or set()

    known = {entry.__mock_component__ for entry in PROVIDERS if entry.__subclasses__()}
    unknown = unmock - known
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    providers = []
    for entry in PROVIDERS:
        use_mock = bool(entry.__subclasses__()) and entry.__mock_component__ not in unmock
        providers.append(get_provider(entry, use_mock=use_mock)())

    return make_async_container(*providers, FastapiProvider())
