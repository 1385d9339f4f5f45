"""Runtime configuration, read from ``QUALIPURE_*`` environment variables.

Every setting has a default, so the storefront runs with no environment
at all. ``DEBUG`` (unprefixed) forces the log level to DEBUG.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_ADDRESSES = (
    "San Agustin 4230 Purok Sinko 0218",
    "Matala 3846 Purok 2 Ibaba 1134",
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="QUALIPURE_",
        env_ignore_empty=True,
        populate_by_name=True,
        validate_default=True,
        frozen=True,
    )

    # Declared before log_level so the log_level validator can see it.
    debug: bool = Field(default=False, validation_alias="DEBUG")
    log_level: str = "WARNING"
    currency: str = "PHP"
    # Semicolon-separated in the environment: "Addr1;Addr2"
    delivery_addresses: Annotated[tuple[str, ...], NoDecode] = Field(
        default=DEFAULT_ADDRESSES, validation_alias="QUALIPURE_ADDRESSES"
    )
    customer_username: str = "Zyrus Jake"
    customer_password: str = "password"
    admin_username: str = "admin"
    admin_password: str = "adminpass"

    @field_validator("log_level")
    @classmethod
    def _debug_forces_log_level(cls, value: str, info: ValidationInfo) -> str:
        if info.data.get("debug"):
            return "DEBUG"
        return value.upper()

    @field_validator("currency")
    @classmethod
    def _upper_currency(cls, value: str) -> str:
        return value.upper()

    @field_validator("delivery_addresses", mode="before")
    @classmethod
    def _split_addresses(cls, value: object) -> object:
        if isinstance(value, str):
            return tuple(a.strip() for a in value.split(";") if a.strip())
        return value
