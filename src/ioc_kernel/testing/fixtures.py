"""
──────────────────────────────────────────────────────────────────────────────
ioc_kernel.testing.fixtures
──────────────────────────────────────────────────────────────────────────────
Purpose:
    Provide reusable pytest fixtures for container-based applications.

Exports:
    - container           → a fresh Container per test, cleared afterwards
    - override_instance() → temporarily replace a registered instance

Usage in your conftest.py:
    pytest_plugins = ["ioc_kernel.testing.fixtures"]

    def test_report(container):
        with override_instance(container, IClock, FrozenClock()):
            assert container.resolve(ReportService).clock.now() == ...
──────────────────────────────────────────────────────────────────────────────
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, Optional

import pytest

from ioc_kernel.config.base_settings import KernelSettings
from ioc_kernel.di.container import Container
from ioc_kernel.di.metadata import InjectionMetadataCache


# ──────────────────────────────────────────────────────────────
# Container Fixture (per test)
# ──────────────────────────────────────────────────────────────
@pytest.fixture()
def container() -> Iterator[Container]:
    """
    Provide a clean Container for each test.
    Settings ignore the environment and .env so tests are reproducible,
    and the metadata cache is private to the test.
    """
    settings = KernelSettings(_env_file=None, inject_on_register=True, share_metadata_cache=False, warn_unresolved=False)
    c = Container(settings=settings, metadata_cache=InjectionMetadataCache())
    yield c
    c.clear()


# ──────────────────────────────────────────────────────────────
# Helper to swap an instance registration during a test
# ──────────────────────────────────────────────────────────────
@contextmanager
def override_instance(
    container: Container,
    base_type: Any,
    instance: Any,
    name: Optional[str] = None,
    inject_now: bool = False,
) -> Iterator[Any]:
    """Register 'instance' for (base_type, name) and restore the previous state on exit."""
    had_previous = (base_type, name) in container.instances
    previous = container.instances[base_type, name]
    container.register_instance(base_type, instance, name, inject_now=inject_now)
    try:
        yield instance
    finally:
        if had_previous:
            container.instances[base_type, name] = previous
        else:
            del container.instances[base_type, name]
