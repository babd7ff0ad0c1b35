"""Host platform strings.

The detectors classify OS and architecture names in the vocabulary the JVM
reports through ``os.name`` and ``os.arch``. These helpers read the host
values from :mod:`platform` and translate the few spellings where Python
and that vocabulary disagree.
"""

import platform


def host_os_name() -> str:
    """
    Read the host operating system name.

    Returns:
        e.g. 'Linux', 'Mac OS X', 'Windows', 'FreeBSD', 'SunOS' or 'unknown'
    """
    system = platform.system()
    if system == "Darwin":
        return "Mac OS X"
    return system or "unknown"


# 64-bit machine names as seen by a 32-bit interpreter
_NARROW_32BIT = {
    "x86_64": "x86",
    "amd64": "x86",
    "ppc64": "ppc",
    "sparc64": "sparc",
    "aarch64": "arm",
    "arm64": "arm",
}


def _is_32bit_interpreter() -> bool:
    return platform.architecture()[0] == "32bit"


def _solaris_arch_name() -> str:
    """
    Map a SunOS host to an architecture name.

    platform.machine() gives the platform group ('i86pc', 'sun4u', 'sun4v'),
    so the instruction set comes from platform.processor() instead.
    """
    processor = platform.processor().lower()
    if processor == "i386":
        return "i386" if _is_32bit_interpreter() else "amd64"
    if processor.startswith("sparc"):
        return "sparc" if _is_32bit_interpreter() else "sparc64"
    return platform.machine()


def host_arch_name() -> str:
    """
    Read the architecture of the running interpreter.

    32-bit ARM hosts ('armv6l', 'armv7l', 'armhf', ...) are reported as 'arm'
    regardless of the sub-version the kernel advertises; ARMv6 and ARMv7 are
    told apart by the cpuinfo probe in the detector. A 32-bit interpreter on a
    64-bit kernel is reported with the 32-bit name ('x86', 'ppc', 'sparc',
    'arm').

    Returns:
        e.g. 'x86_64', 'AMD64', 'i686', 'arm', 'ppc64' or 'unknown'
    """
    if platform.system() == "SunOS":
        machine = _solaris_arch_name()
    else:
        machine = platform.machine()

    lowered = machine.lower()
    if _is_32bit_interpreter() and lowered in _NARROW_32BIT:
        return _NARROW_32BIT[lowered]
    if lowered.startswith("arm") and lowered != "arm64":
        return "arm"
    return machine or "unknown"
