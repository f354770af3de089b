"""Stopping and starting the Steam client around a synchronization."""

from __future__ import annotations

import signal
import subprocess
import sys
import time
from contextlib import suppress
from pathlib import Path
from typing import Iterator

import psutil

from .steam_paths import SteamPathError, get_steam_path
from .steam_settings import SteamSettings


def steam_process_name() -> str:
    """The executable name of the Steam client on this platform."""
    return "steam.exe" if sys.platform == "win32" else "steam"


def _steam_processes(name: str) -> Iterator[psutil.Process]:
    for process in psutil.process_iter(["name"]):
        process_name = process.info.get("name") or ""
        if name in process_name:
            yield process


def _kill(process: psutil.Process) -> None:
    quit_signal = getattr(signal, "SIGQUIT", None)
    with suppress(psutil.Error):
        if quit_signal is not None:
            process.send_signal(quit_signal)
    with suppress(psutil.Error):
        process.kill()


def _is_alive(process: psutil.Process) -> bool:
    try:
        return process.is_running()
    except psutil.Error:
        return False


def ensure_steam_stopped() -> int:
    """Kill every Steam process and wait until it is gone; return how many."""
    processes = list(_steam_processes(steam_process_name()))
    for process in processes:
        _kill(process)
        while _is_alive(process):
            print("Waiting for steam to stop")
            time.sleep(0.5)
            _kill(process)
    return len(processes)


def ensure_steam_started(settings: SteamSettings) -> bool:
    """Launch Steam if it is not running; return True if it was launched."""
    name = steam_process_name()
    if next(_steam_processes(name), None) is not None:
        return False
    print("Starting steam")
    if sys.platform == "win32":
        try:
            command = str(Path(get_steam_path(settings)) / name)
        except SteamPathError:
            return False
    else:
        command = name
    try:
        subprocess.Popen([command])
    except OSError as error:
        print(f"Failed to start steam: {error!r}")
        return False
    return True