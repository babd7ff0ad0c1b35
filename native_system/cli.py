#!/usr/bin/env python3
"""CLI entrypoint for native system detection."""

import json
import os
import sys
from pathlib import Path

import click
from loguru import logger

from .config import NativeSystemConfig, load_config_from_env
from .detector import NativeSystem, detect
from .utils.debug import log_for_debugging


def _apply_overrides(
    base: NativeSystemConfig,
    os_name: str | None,
    arch: str | None,
    cpuinfo: str | None,
) -> NativeSystemConfig:
    """Layer command line options over the environment config."""
    config_dict = base.model_dump()
    if os_name is not None:
        config_dict["os_name"] = os_name
    if arch is not None:
        config_dict["arch"] = arch
    if cpuinfo is not None:
        config_dict["cpuinfo_path"] = Path(cpuinfo)
    return NativeSystemConfig(**config_dict)


def _format_result(result: NativeSystem, as_json: bool) -> str:
    """Render a detection result for stdout."""
    fields = {
        "family": result.family.value,
        "arch": result.arch.value,
        "key": result.key,
    }
    if as_json:
        return json.dumps(fields, indent=2)
    return "\n".join(f"{name}: {value}" for name, value in fields.items())


@click.command()
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.option("-d", "--debug", is_flag=True, help="Enable debug logging")
@click.option("--os-name", type=str, help="Classify this OS name instead of the host's")
@click.option("--arch", type=str, help="Classify this architecture instead of the host's")
@click.option(
    "--cpuinfo",
    type=click.Path(exists=False),
    help="cpuinfo file used to tell ARMv6 from ARMv7 (default: /proc/cpuinfo)",
)
@click.option("--log-file", type=click.Path(exists=False), help="Write debug logs to this file (implies --debug)")
@click.version_option(package_name="native-system")
def main(
    as_json: bool,
    debug: bool,
    os_name: str | None,
    arch: str | None,
    cpuinfo: str | None,
    log_file: str | None,
) -> None:
    """
    Detect the operating system family and CPU architecture of this host.

    Prints the family, the architecture and the '{family}-{arch}' key used to
    name native artifacts.
    """
    try:
        if debug or log_file:
            os.environ["NATIVE_SYSTEM_DEBUG"] = "true"

        if log_file:
            logger.add(
                log_file,
                rotation="10 MB",
                retention="7 days",
                format="{time:YYYY-MM-DD HH:mm:ss} | {level:<8} | {message}",
            )

        config = _apply_overrides(load_config_from_env(), os_name, arch, cpuinfo)
        log_for_debugging(f"Detecting with config: {config.model_dump_json()}")

        result = detect(config)
        click.echo(_format_result(result, as_json))

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
