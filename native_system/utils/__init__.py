"""Utility modules for native system detection."""

from .debug import log_for_debugging
from .platform import host_arch_name, host_os_name

__all__ = ["log_for_debugging", "host_arch_name", "host_os_name"]
