"""Tests for native_system.config module."""

import os
from pathlib import Path

import pytest
from pydantic import ValidationError

from native_system.config import CPUINFO_PATH, NativeSystemConfig, load_config_from_env


class TestNativeSystemConfig:
    """Tests for NativeSystemConfig model."""

    def test_defaults(self):
        """Test that an empty config reads the host."""
        config = NativeSystemConfig()
        assert config.os_name is None
        assert config.arch is None
        assert config.cpuinfo_path == CPUINFO_PATH == Path("/proc/cpuinfo")

    def test_overrides(self):
        """Test that overrides are stored as given."""
        config = NativeSystemConfig(os_name="SunOS", arch="sparc64", cpuinfo_path="/tmp/cpuinfo")
        assert config.os_name == "SunOS"
        assert config.arch == "sparc64"
        assert config.cpuinfo_path == Path("/tmp/cpuinfo")

    def test_blank_os_name_rejected(self):
        """Test that a blank OS name override is rejected."""
        with pytest.raises(ValidationError, match="Override cannot be empty"):
            NativeSystemConfig(os_name="  ")

    def test_blank_arch_rejected(self):
        """Test that a blank architecture override is rejected."""
        with pytest.raises(ValidationError, match="Override cannot be empty"):
            NativeSystemConfig(arch="")

    def test_extra_fields_forbidden(self):
        """Test that unknown fields are rejected."""
        with pytest.raises(ValidationError):
            NativeSystemConfig(platform="linux")


class TestLoadConfigFromEnv:
    """Tests for load_config_from_env function."""

    def test_no_variables(self):
        """Test that an empty environment yields the defaults."""
        assert load_config_from_env() == NativeSystemConfig()

    def test_reads_variables(self, tmp_path: Path):
        """Test that NATIVE_SYSTEM_* variables populate the config."""
        os.environ["NATIVE_SYSTEM_OS_NAME"] = "Linux"
        os.environ["NATIVE_SYSTEM_ARCH"] = "arm"
        os.environ["NATIVE_SYSTEM_CPUINFO"] = str(tmp_path / "cpuinfo")

        config = load_config_from_env()

        assert config.os_name == "Linux"
        assert config.arch == "arm"
        assert config.cpuinfo_path == tmp_path / "cpuinfo"

    def test_blank_variable_rejected(self):
        """Test that a blank override variable is a configuration error."""
        os.environ["NATIVE_SYSTEM_ARCH"] = ""
        with pytest.raises(ValidationError):
            load_config_from_env()
