"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Any, Literal

from pydantic_settings import BaseSettings


class NachaConfig(BaseSettings):
    """Defaults applied to file settings and batch options the caller omits."""

    model_config = {"env_prefix": "ACHFILE_NACHA_"}

    file_id_modifier: str = "A"
    standard_entry_class_code: str = "CCD"
    company_entry_description: str = "PAYMENT"
    originator_status_code: str = "1"
    service_class_code: str = "200"  # mixed debits and credits
    transaction_code: str = "22"  # checking credit

    def file_defaults(self) -> dict[str, Any]:
        return {
            "file_id_modifier": self.file_id_modifier,
            "standard_entry_class_code": self.standard_entry_class_code,
            "company_entry_description": self.company_entry_description,
            "originator_status_code": self.originator_status_code,
        }


class StorageConfig(BaseSettings):
    """Where generated files are persisted."""

    model_config = {"env_prefix": "ACHFILE_STORAGE_"}

    backend: Literal["local", "s3"] = "local"
    root_dir: str = "."
    bucket: str = "achfile-outbound"
    region: str = "us-east-1"
    key_prefix: str = "outbound/"
    endpoint_url: str | None = None  # LocalStack override


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "ACHFILE_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"

    nacha: NachaConfig = NachaConfig()
    storage: StorageConfig = StorageConfig()
