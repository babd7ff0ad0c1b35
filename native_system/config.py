"""Configuration for native system detection.

Every field is optional; an empty config detects the real host.
"""

import os
from pathlib import Path
from typing import Annotated

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

CPUINFO_PATH = Path("/proc/cpuinfo")

# Environment variables read by load_config_from_env()
ENV_OS_NAME = "NATIVE_SYSTEM_OS_NAME"
ENV_ARCH = "NATIVE_SYSTEM_ARCH"
ENV_CPUINFO = "NATIVE_SYSTEM_CPUINFO"


class NativeSystemConfig(BaseModel):
    """Overrides for the host values the detectors read."""

    os_name: Annotated[
        str | None,
        Field(description="Raw OS name to classify instead of the host's (e.g. 'Linux', 'Mac OS X')"),
    ] = None

    arch: Annotated[
        str | None,
        Field(description="Raw architecture name to classify instead of the host's (e.g. 'amd64', 'arm')"),
    ] = None

    cpuinfo_path: Annotated[
        Path,
        Field(description="File scanned for 'ARMv7' on Linux ARM hosts (default: /proc/cpuinfo)"),
    ] = CPUINFO_PATH

    model_config = {"extra": "forbid"}

    @field_validator("os_name", "arch")
    @classmethod
    def validate_override(cls, v: str | None) -> str | None:
        """Reject blank overrides; use None to read the host value."""
        if v is not None and not v.strip():
            raise ValueError("Override cannot be empty")
        return v


def load_config_from_env() -> NativeSystemConfig:
    """Build a config from NATIVE_SYSTEM_* environment variables (and a .env file, if present)."""
    load_dotenv()

    config_dict: dict[str, object] = {
        "os_name": os.environ.get(ENV_OS_NAME),
        "arch": os.environ.get(ENV_ARCH),
    }
    cpuinfo = os.environ.get(ENV_CPUINFO)
    if cpuinfo:
        config_dict["cpuinfo_path"] = Path(cpuinfo)

    return NativeSystemConfig(**config_dict)
