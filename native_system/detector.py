"""Operating system family and architecture detection.

Classifies the host into a small closed set of identifiers used to pick the
native binary built for it. Unknown input never raises: it is reported as
``UNSUPPORTED``.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .config import CPUINFO_PATH, NativeSystemConfig
from .utils.debug import log_for_debugging
from .utils.platform import host_arch_name, host_os_name


class Family(Enum):
    """Operating system family."""

    FREEBSD = "freebsd"
    OPENBSD = "openbsd"
    DARWIN = "darwin"
    SOLARIS = "solaris"
    LINUX = "linux"
    WINDOWS = "windows"
    UNSUPPORTED = "unsupported"


class Arch(Enum):
    """System architecture."""

    ARM6 = "arm6"
    ARM7 = "arm7"
    SPARC = "sparc"
    SPARC64 = "sparc64"
    PPC = "ppc"
    PPC64 = "ppc64"
    X86 = "x86"
    X86_64 = "x86_64"
    UNSUPPORTED = "unsupported"


_FAMILY_NAMES: dict[str, Family] = {
    "freebsd": Family.FREEBSD,
    "openbsd": Family.OPENBSD,
    "mac os x": Family.DARWIN,
    "solaris": Family.SOLARIS,
    "sunos": Family.SOLARIS,
    "linux": Family.LINUX,
}

_ARCH_NAMES: dict[str, Arch] = {
    "sparc": Arch.SPARC,
    "sparc64": Arch.SPARC64,
    "ppc": Arch.PPC,
    "powerpc": Arch.PPC,
    "ppc64": Arch.PPC64,
    "powerpc64": Arch.PPC64,
    "x86": Arch.X86,
    "i386": Arch.X86,
    "i486": Arch.X86,
    "i586": Arch.X86,
    "i686": Arch.X86,
    "x86_64": Arch.X86_64,
    "amd64": Arch.X86_64,
    "k8": Arch.X86_64,
}


@dataclass(frozen=True)
class NativeSystem:
    """Detected family and architecture of a host."""

    family: Family
    arch: Arch

    @property
    def key(self) -> str:
        return platform_key(self.family, self.arch)


def platform_key(family: Family, arch: Arch) -> str:
    """Return the '{family}-{arch}' key native artifacts are named by, e.g. 'linux-x86_64'."""
    return f"{family.value}-{arch.value}"


def detect_family(os_name: str | None = None) -> Family:
    """
    Determine the operating system family.

    Args:
        os_name: Raw OS name (e.g. 'Linux', 'Mac OS X', 'Windows 10').
            Read from the host when None.

    Returns:
        The matching Family, or Family.UNSUPPORTED for anything unrecognized
    """
    if os_name is None:
        os_name = host_os_name()

    name = os_name.lower()
    family = _FAMILY_NAMES.get(name)
    if family is None:
        family = Family.WINDOWS if name.startswith("windows") else Family.UNSUPPORTED

    log_for_debugging(f"OS name {os_name!r} detected as family {family.value}")
    return family


def is_armv7_cpu(path: Path = CPUINFO_PATH) -> bool:
    """
    Check a cpuinfo file for an ARMv7 processor.

    Any failure to open or read the file counts as no evidence of ARMv7.

    Args:
        path: The cpuinfo file to scan

    Returns:
        True if any line mentions 'ARMv7' (case-insensitive)
    """
    try:
        with open(path, encoding="utf-8") as cpuinfo:
            for line in cpuinfo:
                if "armv7" in line.lower():
                    return True
    except (OSError, UnicodeDecodeError) as e:
        log_for_debugging(f"Could not read {path}, assuming ARMv6: {e}", level="warn")
    return False


def detect_arch(
    os_arch: str | None = None,
    *,
    family: Family | None = None,
    cpuinfo_path: Path = CPUINFO_PATH,
) -> Arch:
    """
    Determine the system architecture.

    The host reports 32-bit ARM simply as 'arm'. On Linux the cpuinfo file is
    consulted to tell ARMv7 apart from ARMv6; everywhere else, and whenever
    the file cannot be read, 'arm' is ARMv6.

    Args:
        os_arch: Raw architecture name (e.g. 'amd64', 'i686', 'arm').
            Read from the host when None.
        family: Family used to decide whether the cpuinfo probe applies.
            Detected from the host when None and the architecture is 'arm'.
        cpuinfo_path: The cpuinfo file consulted for ARM hosts on Linux

    Returns:
        The matching Arch, or Arch.UNSUPPORTED for anything unrecognized
    """
    if os_arch is None:
        os_arch = host_arch_name()

    name = os_arch.lower()
    if name == "arm":
        arch = Arch.ARM6
        if family is None:
            family = detect_family()
        if family == Family.LINUX and is_armv7_cpu(cpuinfo_path):
            arch = Arch.ARM7
    else:
        arch = _ARCH_NAMES.get(name, Arch.UNSUPPORTED)

    log_for_debugging(f"Architecture {os_arch!r} detected as {arch.value}")
    return arch


def detect(config: NativeSystemConfig | None = None) -> NativeSystem:
    """
    Detect the family and architecture of the host.

    Args:
        config: Overrides for the raw OS name, architecture and cpuinfo file.
            The real host is detected when None.

    Returns:
        The detected NativeSystem
    """
    if config is None:
        config = NativeSystemConfig()

    family = detect_family(config.os_name)
    arch = detect_arch(config.arch, family=family, cpuinfo_path=config.cpuinfo_path)
    return NativeSystem(family=family, arch=arch)
