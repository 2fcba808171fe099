# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class SecurityConfig(BaseSettings):
    # CORS
    allowed_origins: Annotated[list[str], NoDecode] = Field(["*"], alias="ALLOWED_ORIGINS")

    # HSTS
    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_by_name=True,
    )

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("enable_hsts", mode="before")
    @classmethod
    def _parse_bool(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    secret_key: str = Field("dev", alias="SECRET_KEY")
    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(3000, alias="PORT", ge=1, le=65535)
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")

    security: SecurityConfig = Field(default_factory=_security_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_by_name=True,
        validate_assignment=True,
    )

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self

        if self.secret_key in ("dev", "development", "test", "secretkey", ""):
            print(
                "\n❌ CRITICAL SECURITY ERROR: Insecure SECRET_KEY detected in production!\n"
                "   SECRET_KEY signs every session token and must be a strong random value.\n"
                "   Generate one with: python -c \"import secrets; print(secrets.token_urlsafe(32))\"\n",
                file=sys.stderr,
            )
            sys.exit(1)

        warnings = []
        if "*" in self.security.allowed_origins:
            warnings.append("⚠️  CORS allows wildcard (*) origins")
        if not self.security.enable_hsts:
            warnings.append("⚠️  HSTS is DISABLED (recommended for HTTPS)")

        if warnings:
            print("\n⚠️  PRODUCTION SECURITY WARNINGS:", file=sys.stderr)
            for warning in warnings:
                print(f"   {warning}", file=sys.stderr)
            print(
                "   Consider enabling these security features in production.\n",
                file=sys.stderr,
            )

        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = ["AppConfig", "SecurityConfig", "load_config"]
