"""Shared fixtures for native_system tests."""

import os
from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest
from loguru import logger

_ENV_VARS = (
    "NATIVE_SYSTEM_DEBUG",
    "NATIVE_SYSTEM_OS_NAME",
    "NATIVE_SYSTEM_ARCH",
    "NATIVE_SYSTEM_CPUINFO",
)


@pytest.fixture(autouse=True)
def clean_env() -> Generator[None, None, None]:
    """Run each test without NATIVE_SYSTEM_* variables and restore the environment afterwards."""
    with patch.dict(os.environ):
        for name in _ENV_VARS:
            os.environ.pop(name, None)
        yield


@pytest.fixture
def debug_env() -> None:
    """Enable debug logging for a test."""
    os.environ["NATIVE_SYSTEM_DEBUG"] = "true"


@pytest.fixture
def log_messages() -> Generator[list[str], None, None]:
    """Capture messages written through loguru."""
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    try:
        yield messages
    finally:
        logger.remove(handler_id)


@pytest.fixture
def armv7_cpuinfo(tmp_path: Path) -> Path:
    """Create a cpuinfo file describing an ARMv7 processor."""
    path = tmp_path / "cpuinfo"
    path.write_text(
        "Processor\t: ARMv7 Processor rev 2 (v7l)\n"
        "BogoMIPS\t: 38.40\n"
        "Features\t: swp half thumb fastmult vfp edsp neon vfpv3 tls\n"
        "Hardware\t: BCM2709\n"
    )
    return path


@pytest.fixture
def armv6_cpuinfo(tmp_path: Path) -> Path:
    """Create a cpuinfo file describing an ARMv6 processor."""
    path = tmp_path / "cpuinfo"
    path.write_text(
        "processor\t: 0\n"
        "model name\t: ARMv6-compatible processor rev 7 (v6l)\n"
        "Features\t: half thumb fastmult vfp edsp java tls\n"
        "Hardware\t: BCM2708\n"
    )
    return path
