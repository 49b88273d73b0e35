# ioc_kernel/errors.py
from __future__ import annotations

from typing import Any, Optional


class KernelError(Exception):
    """Base class for errors raised by ioc_kernel itself."""


class ConstructionError(KernelError):
    """A relation resolved to an object that is not an instance of the requested base type."""

    def __init__(self, message: str, *, base_type: Optional[Any] = None, context_type: Optional[Any] = None):
        super().__init__(message)
        self.base_type = base_type
        self.context_type = context_type
