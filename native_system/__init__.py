"""Native system detection.

Identifies the host operating system family and CPU architecture so the
native binary built for that combination can be selected.
"""

from .config import CPUINFO_PATH, NativeSystemConfig, load_config_from_env
from .detector import (
    Arch,
    Family,
    NativeSystem,
    detect,
    detect_arch,
    detect_family,
    is_armv7_cpu,
    platform_key,
)

__version__ = "0.1.0"

__all__ = [
    # Detection
    "detect",
    "detect_family",
    "detect_arch",
    "is_armv7_cpu",
    "platform_key",
    # Types
    "Family",
    "Arch",
    "NativeSystem",
    # Configuration
    "NativeSystemConfig",
    "load_config_from_env",
    "CPUINFO_PATH",
    # Version
    "__version__",
]
