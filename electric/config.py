"""Configuration constants and path helpers."""

from pathlib import Path

from electric.dirs import EnvironmentConfig, resolve_dirs
from electric.platforms import Platform

RELEASE_REPO = "denjucks/deno-cef"
RELEASE_TAG = "0.0.1"
ASSET_URL_TEMPLATE = "https://github.com/{repo}/releases/download/{tag}/{platform}-denocef.zip.xz"

# Directory-set names; both resolve without the "-deno" suffix
CACHE_APP_NAME = "denocef"
DENO_APP_NAME = "deno"

PROJECT_DIR_NAME = "DenoCefProject"
MODULES_DIR_NAME = "deno_modules"
TRACE_FILE_NAME = "events.jsonl"

CACHE_DIR_ENV = "ELECTRIC_CACHE_DIR"


def asset_url(platform: Platform) -> str:
    """Return the release asset URL for a platform."""
    return ASSET_URL_TEMPLATE.format(repo=RELEASE_REPO, tag=RELEASE_TAG, platform=platform.value)


def get_cache_dir(environment: EnvironmentConfig) -> Path:
    """Get the artifact cache root.

    ``ELECTRIC_CACHE_DIR`` wins when set; otherwise the ``denocef`` cache
    directory for the host OS (e.g. ``~/.cache/denocef`` on Linux).

    Args:
        environment: Host OS and environment.

    Returns:
        Path to the cache root. Not created here.
    """
    override = environment.getenv(CACHE_DIR_ENV)
    if override:
        return Path(override)
    return resolve_dirs(CACHE_APP_NAME, environment, suffix="").cache


def get_trace_path(environment: EnvironmentConfig) -> Path:
    """Get the trace journal path (inside the ``denocef`` log directory)."""
    return resolve_dirs(CACHE_APP_NAME, environment, suffix="").log / TRACE_FILE_NAME


def get_module_cache_dir(environment: EnvironmentConfig) -> Path:
    """Get the Deno module cache, honoring ``DENO_DIR`` like Deno itself does."""
    deno_dir = environment.getenv("DENO_DIR")
    if deno_dir:
        return Path(deno_dir)
    return resolve_dirs(DENO_APP_NAME, environment, suffix="").cache
