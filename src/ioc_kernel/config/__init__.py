from .base_settings import KernelSettings

__all__ = ["KernelSettings"]
