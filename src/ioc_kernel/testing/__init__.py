"""
Testing utilities for ioc_kernel users.
──────────────────────────────────────────────────────────────
Provides a pytest fixture for an isolated container and a helper
to swap a registered instance for the duration of a test.
──────────────────────────────────────────────────────────────
"""
from .fixtures import container, override_instance

__all__ = ["container", "override_instance"]
