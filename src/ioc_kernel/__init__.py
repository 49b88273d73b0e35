# ioc_kernel/__init__.py
"""
ioc_kernel
──────────────────────────────────────────────────────────────
A small runtime object registry and factory.
Provides:
    - Type mappings, named registrations and singleton instances
    - Context-sensitive relations (for-type / base-type → concrete)
    - Greedy constructor injection
    - Marker-driven property and field injection
    - Optional FastAPI integration (ioc_kernel.fastapi)
──────────────────────────────────────────────────────────────
"""

__version__ = "0.1.0"

from ioc_kernel.config.base_settings import KernelSettings
from ioc_kernel.di.container import Container
from ioc_kernel.di.markers import Inject, constructor
from ioc_kernel.errors import ConstructionError, KernelError

__all__ = [
    "Container",
    "Inject",
    "constructor",
    "KernelSettings",
    "ConstructionError",
    "KernelError",
]
