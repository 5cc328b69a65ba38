"""Host serial number lookup through the platform management interface."""

from __future__ import annotations

import re
import subprocess
import sys
from pathlib import Path
from typing import Callable, Optional

import structlog

from .errors import HostQueryError
from .models import SerialLookup

LOGGER = structlog.get_logger(__name__)

DMI_SERIAL_PATH = Path("/sys/class/dmi/id/product_serial")
WINDOWS_COMMAND = [
    "powershell",
    "-NoProfile",
    "-NonInteractive",
    "-Command",
    "(Get-CimInstance -ClassName Win32_BIOS).SerialNumber",
]
MACOS_COMMAND = ["ioreg", "-c", "IOPlatformExpertDevice", "-d", "2"]
MACOS_SERIAL_PATTERN = re.compile(r'"IOPlatformSerialNumber"\s*=\s*"([^"]*)"')


def _run(cmd: list[str], timeout: float) -> str:
    """Run a query command and return its stdout, raising on failure."""
    try:
        completed = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=True,
        )
    except FileNotFoundError as exc:
        raise HostQueryError(f"'{cmd[0]}' is not available on this host") from exc
    except subprocess.TimeoutExpired as exc:
        raise HostQueryError(f"'{cmd[0]}' timed out after {timeout:g}s") from exc
    except subprocess.CalledProcessError as exc:
        detail = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
        raise HostQueryError(f"'{cmd[0]}' failed: {detail}") from exc
    return completed.stdout


def _read_linux(path: Optional[Path] = None) -> str:
    path = path or DMI_SERIAL_PATH
    try:
        return path.read_text(encoding="utf-8")
    except PermissionError as exc:
        raise HostQueryError(f"permission denied reading {path}; try running as root") from exc
    except OSError as exc:
        raise HostQueryError(f"cannot read {path}: {exc.strerror or exc}") from exc


def _read_macos(timeout: float) -> str:
    output = _run(MACOS_COMMAND, timeout)
    match = MACOS_SERIAL_PATTERN.search(output)
    if not match:
        raise HostQueryError("IOPlatformSerialNumber not present in ioreg output")
    return match.group(1)


def read_host_serial(timeout: float = 10, platform: Optional[str] = None) -> str:
    """Query the firmware inventory for the host serial number.

    Raises ``HostQueryError`` for unsupported platforms, permission problems,
    missing tools, timeouts and empty answers.
    """
    platform = platform or sys.platform
    if platform.startswith("linux"):
        raw = _read_linux()
    elif platform == "win32":
        raw = _run(WINDOWS_COMMAND, timeout)
    elif platform == "darwin":
        raw = _read_macos(timeout)
    else:
        raise HostQueryError(f"serial number lookup is not supported on {platform}")

    serial = raw.strip()
    if not serial:
        raise HostQueryError("management interface returned an empty serial number")
    return serial


def get_host_serial_number(
    reader: Callable[[], str] = read_host_serial,
) -> SerialLookup:
    """Return the host serial number, or the reason it could not be read.

    The lookup is attempted once and never raises.
    """
    try:
        serial = reader()
    except Exception as exc:  # noqa: BLE001
        LOGGER.warning("serial.query_failed", error=str(exc), error_type=type(exc).__name__)
        return SerialLookup(error=f"Unable to read host serial number: {exc}")

    LOGGER.info("serial.query_success")
    return SerialLookup(serial=serial)
