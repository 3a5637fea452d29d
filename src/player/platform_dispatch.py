# player/platform_dispatch.py
from __future__ import annotations

import logging
import os
import platform
import subprocess
from enum import Enum
from typing import Callable, Optional, Sequence

from core.config import AppConfig
from core.errors import UnsupportedPlatformError
from core.utils import escape_applescript

logger = logging.getLogger(__name__)

MPRIS_PATH = "/org/mpris/MediaPlayer2"
MPRIS_PLAYER_IFACE = "org.mpris.MediaPlayer2.Player"


class Platform(Enum):
    MACOS = "macos"
    LINUX = "linux"
    WINDOWS = "windows"
    OTHER = "other"


_SYSTEM_NAMES = {
    "darwin": Platform.MACOS,
    "linux": Platform.LINUX,
    "windows": Platform.WINDOWS,
}


def detect_platform(system: Optional[str] = None) -> Platform:
    name = (platform.system() if system is None else system).lower()
    return _SYSTEM_NAMES.get(name, Platform.OTHER)


# Launched helpers, polled on every spawn so finished ones get reaped.
_children: list[subprocess.Popen] = []

WAIT_TIMEOUT_S = 5.0


def _reap_children() -> None:
    _children[:] = [p for p in _children if p.poll() is None]


def _spawn(args: Sequence[str], wait: bool = False) -> None:
    """
    Launch a helper with output discarded; the exit status is never read.
    wait=True blocks until it exits (bounded by WAIT_TIMEOUT_S), for calls
    that must land before the next one is sent.
    """
    creationflags = 0
    if os.name == "nt":
        creationflags = getattr(subprocess, "CREATE_NO_WINDOW", 0)
    _reap_children()
    if wait:
        subprocess.run(
            list(args),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            creationflags=creationflags,
            timeout=WAIT_TIMEOUT_S,
        )
        return
    _children.append(subprocess.Popen(
        list(args),
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        creationflags=creationflags,
    ))


def _open_with_default_handler(href: str) -> None:
    startfile = getattr(os, "startfile", None)
    if startfile is None:
        raise OSError("os.startfile is not available on this interpreter")
    startfile(href)


def _log_notice(message: str, notify_type: str = "info") -> None:
    logger.warning("%s", message)


class PlatformDispatcher:
    """
    Turns "play this href" into whatever the running OS understands.

    The platform is looked up on every call. Each Platform member has one
    handler in `_handlers`; OTHER (and anything missing from the table) falls
    back to a notice, so play_href never raises for an unknown platform.
    Launcher failures (missing osascript/dbus-send, no startfile) are logged
    and reported as "warn" notices instead of propagating.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        notify: Optional[Callable[[str, str], None]] = None,
        runner: Optional[Callable[..., None]] = None,
        opener: Optional[Callable[[str], None]] = None,
        system: Optional[Callable[[], str]] = None,
    ):
        self.config = config or AppConfig()
        self._notify = notify or _log_notice
        self._run = runner or _spawn
        self._open = opener or _open_with_default_handler
        self._system = system or platform.system

        self._handlers: dict[Platform, Callable[[str], None]] = {
            Platform.MACOS: self._play_macos,
            Platform.LINUX: self._play_linux,
            Platform.WINDOWS: self._play_windows,
        }

    def play_href(self, href: Optional[str]) -> None:
        href = href or ""
        system_name = self._system()
        current = detect_platform(system_name)
        handler = self._handlers.get(current)
        if handler is None:
            self._notify(str(UnsupportedPlatformError(system_name)), "warn")
            return

        logger.info("Playing %r via %s", href, current.value)
        try:
            handler(href)
        except (OSError, subprocess.SubprocessError) as e:
            logger.warning("Playback command failed on %s: %s", current.value, e)
            self._notify(f"Could not start playback: {e}", "warn")

    # ----------------------------
    # Platform handlers
    # ----------------------------

    def _play_macos(self, href: str) -> None:
        app = escape_applescript(self.config.media_app)
        script = f'tell application "{app}" to play track "{escape_applescript(href)}"'
        self._run(["osascript", "-e", script])

    def _dbus_call(self, method: str, *args: str, wait: bool = False) -> None:
        argv = [
            "dbus-send",
            "--session",
            "--type=method_call",
            f"--dest={self.config.mpris_bus_name}",
            MPRIS_PATH,
            f"{MPRIS_PLAYER_IFACE}.{method}",
            *args,
        ]
        try:
            self._run(argv, wait=wait)
        except (OSError, subprocess.SubprocessError) as e:
            logger.warning("dbus %s call failed: %s", method, e)
            self._notify(f"Media player did not take {method}: {e}", "warn")

    def _play_linux(self, href: str) -> None:
        # OpenUri while already playing can mis-trigger; Pause must finish first.
        # Each call is best-effort on its own.
        self._dbus_call("Pause", wait=True)
        self._dbus_call("OpenUri", f"string:{href}")

    def _play_windows(self, href: str) -> None:
        self._open(href)
