"""Package a DenoCEF project: local module cache and launch scripts."""

import shutil
from pathlib import Path
from typing import List

from electric.config import MODULES_DIR_NAME, get_module_cache_dir
from electric.dirs import EnvironmentConfig
from electric.errors import PackagingError
from electric.platforms import Platform

ENTRY_POINT = "app.js"

LINUX_RUN_SCRIPT = f"""#!/bin/bash
export DENO_DIR=./{MODULES_DIR_NAME}
./deno run -A {ENTRY_POINT}
"""

WINDOWS_ENV_SCRIPT = f"""@echo off
set DENO_DIR=./{MODULES_DIR_NAME}
deno.exe run -A {ENTRY_POINT}
"""

# Runs env.bat without a console window
WINDOWS_RUN_SCRIPT = """Set WshShell = CreateObject("WScript.Shell")
WshShell.Run "env.bat", 0
Set WshShell = Nothing
"""


def cache_deno_modules_locally(environment: EnvironmentConfig, cwd: Path) -> Path:
    """Copy the Deno module cache into ``<cwd>/deno_modules``.

    Files already in the target are overwritten; extra files are kept.

    Args:
        environment: Host OS and environment used to locate the module cache.
        cwd: Project directory.

    Returns:
        Path to the local module folder.

    Raises:
        PackagingError: If the module cache does not exist.
    """
    source = get_module_cache_dir(environment)
    if not source.is_dir():
        raise PackagingError(f"Deno module cache not found at {source}")

    target = Path(cwd) / MODULES_DIR_NAME
    shutil.copytree(source, target, dirs_exist_ok=True)
    return target


def _write_script(path: Path, content: str, newline: str = "\n") -> Path:
    with open(path, "w", encoding="utf-8", newline=newline) as f:
        f.write(content)
    return path


def update_run_command(environment: EnvironmentConfig, cwd: Path) -> List[Path]:
    """Write the launch script(s) for the host OS.

    - windows: ``env.bat`` sets DENO_DIR and starts deno; ``run.vbs`` runs it hidden
    - linux: executable ``run`` shell script
    - darwin: nothing yet

    Returns:
        Paths of the written scripts.
    """
    cwd = Path(cwd)

    if environment.host == Platform.WINDOWS:
        return [
            _write_script(cwd / "env.bat", WINDOWS_ENV_SCRIPT, newline="\r\n"),
            _write_script(cwd / "run.vbs", WINDOWS_RUN_SCRIPT, newline="\r\n"),
        ]

    if environment.host == Platform.LINUX:
        script = _write_script(cwd / "run", LINUX_RUN_SCRIPT)
        script.chmod(0o755)
        return [script]

    # TODO: macOS launcher once DenoCEF ships darwin binaries
    return []
