"""Per-OS standard directories (data, config, cache, log, temp).

All lookups go through an EnvironmentConfig so resolution never touches the
real process environment unless the caller snapshots it with
``EnvironmentConfig.from_process()``.
"""

import os
import sys
import tempfile
from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from electric.errors import EnvironmentLookupError
from electric.platforms import Platform, detect_host_platform


class EnvironmentConfig(BaseModel):
    """Host OS and environment used for directory resolution."""

    model_config = ConfigDict(frozen=True)

    host: Platform = Field(..., description="Host operating system")
    env: Dict[str, str] = Field(default_factory=dict, description="Environment variables")
    home: Optional[Path] = Field(None, description="User home directory")
    tmp: Optional[Path] = Field(None, description="OS temp directory")

    @classmethod
    def from_process(cls) -> "EnvironmentConfig":
        """Snapshot the running process."""
        try:
            home = Path.home()
        except RuntimeError:
            home = None
        # Before 3.12 an unresolvable home comes back unexpanded
        if home is not None and str(home).startswith("~"):
            home = None
        try:
            tmp = Path(tempfile.gettempdir())
        except FileNotFoundError:
            tmp = None
        return cls(
            host=detect_host_platform(sys.platform),
            env=dict(os.environ),
            home=home,
            tmp=tmp,
        )

    def getenv(self, key: str) -> Optional[str]:
        """Return an environment variable, treating empty values as unset."""
        value = self.env.get(key)
        return value or None

    def require_home(self) -> Path:
        if self.home is None:
            raise EnvironmentLookupError("Can't extract the home directory.")
        return self.home

    def require_tmp(self) -> Path:
        if self.tmp is None:
            raise EnvironmentLookupError("Can't extract the tmp directory.")
        return self.tmp


class DirectorySet(BaseModel):
    """Standard directories for one application name."""

    model_config = ConfigDict(frozen=True)

    data: Path
    config: Path
    cache: Path
    log: Path
    temp: Path


def _macos(name: str, environment: EnvironmentConfig) -> DirectorySet:
    home = environment.require_home()
    tmp = environment.require_tmp()
    library = home / "Library"
    return DirectorySet(
        data=library / "Application Support" / name,
        config=library / "Preferences" / name,
        cache=library / "Caches" / name,
        log=library / "Logs" / name,
        temp=tmp / name,
    )


def _windows(name: str, environment: EnvironmentConfig) -> DirectorySet:
    tmp = environment.require_tmp()

    app_data = environment.getenv("APPDATA")
    roaming = Path(app_data) if app_data else environment.require_home() / "AppData" / "Roaming"
    local_app_data = environment.getenv("LOCALAPPDATA")
    local = Path(local_app_data) if local_app_data else environment.require_home() / "AppData" / "Local"

    return DirectorySet(
        data=local / name / "Data",
        config=roaming / name / "Config",
        cache=local / name / "Cache",
        log=local / name / "Log",
        temp=tmp / name,
    )


def _xdg(environment: EnvironmentConfig, key: str, *default: str) -> Path:
    value = environment.getenv(key)
    if value:
        return Path(value)
    return environment.require_home().joinpath(*default)


def _linux(name: str, environment: EnvironmentConfig) -> DirectorySet:
    home = environment.require_home()
    tmp = environment.require_tmp()
    return DirectorySet(
        data=_xdg(environment, "XDG_DATA_HOME", ".local", "share") / name,
        config=_xdg(environment, "XDG_CONFIG_HOME", ".config") / name,
        cache=_xdg(environment, "XDG_CACHE_HOME", ".cache") / name,
        log=_xdg(environment, "XDG_STATE_HOME", ".local", "state") / name,
        temp=tmp / home.name / name,
    )


_RESOLVERS = {
    Platform.WINDOWS: _windows,
    Platform.DARWIN: _macos,
    Platform.LINUX: _linux,
}


def resolve_dirs(
    name: str,
    environment: EnvironmentConfig,
    suffix: Optional[str] = "deno",
) -> DirectorySet:
    """Resolve the standard directories for an application name.

    Args:
        name: Application name.
        environment: Host OS and environment to resolve against.
        suffix: Appended as ``<name>-<suffix>`` to avoid clashing with native
            apps of the same name. Empty or None disables it.

    Returns:
        DirectorySet for the host OS.

    Raises:
        TypeError: If name is not a string.
        EnvironmentLookupError: If the home or temp directory is needed but unknown.
    """
    if not isinstance(name, str):
        raise TypeError(f"Expected str, got {type(name).__name__}")

    if suffix:
        name = f"{name}-{suffix}"

    return _RESOLVERS[environment.host](name, environment)
