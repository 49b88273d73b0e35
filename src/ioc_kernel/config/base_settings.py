# src/ioc_kernel/config/base_settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class KernelSettings(BaseSettings):
    """
    Container-wide switches, read from IOC_* environment variables or .env.
    Apps can subclass and extend it.
    """

    inject_on_register: bool = True
    share_metadata_cache: bool = False
    warn_unresolved: bool = False

    model_config = SettingsConfigDict(
        env_prefix="IOC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
