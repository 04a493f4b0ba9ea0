"""Pytest configuration and fixtures for electric tests."""

import io
import zipfile
from pathlib import Path
from typing import Dict, List

import lz4.block
import pytest

from electric.dirs import EnvironmentConfig
from electric.errors import FetchError
from electric.platforms import Platform
from electric.release.cache import ArtifactCache

# Files inside the fake DenoCEF release archive
ARTIFACT_FILES = {
    "deno": b"#!/bin/sh\necho deno\n",
    "app.js": b"console.log('hello from DenoCEF');\n",
    "cef/libcef.so": b"\x7fELF fake shared object",
    "cef/locales/en-US.pak": b"pak",
}


def build_artifact(files: Dict[str, bytes]) -> bytes:
    """Zip files and compress the archive the way release assets are."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", zipfile.ZIP_DEFLATED) as zf:
        for name, data in files.items():
            zf.writestr(name, data)
    return lz4.block.compress(buf.getvalue())


class FakeReleaseClient:
    """Asset client serving in-memory artifacts."""

    def __init__(self, payload: bytes = b"", error: Exception = None):
        self.payload = payload
        self.error = error
        self.urls: List[str] = []

    def download(self, url: str) -> bytes:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.payload

    def close(self):
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


@pytest.fixture
def artifact_bytes() -> bytes:
    """A valid compressed release asset."""
    return build_artifact(ARTIFACT_FILES)


@pytest.fixture
def fake_client(artifact_bytes) -> FakeReleaseClient:
    return FakeReleaseClient(artifact_bytes)


@pytest.fixture
def failing_client() -> FakeReleaseClient:
    return FakeReleaseClient(error=FetchError("Failed to download: 404 Not Found"))


@pytest.fixture
def home_dir(tmp_path: Path) -> Path:
    home = tmp_path / "home" / "alice"
    home.mkdir(parents=True)
    return home


@pytest.fixture
def linux_env(tmp_path: Path, home_dir: Path) -> EnvironmentConfig:
    """Linux environment rooted in tmp_path with no XDG overrides."""
    tmp = tmp_path / "tmp"
    tmp.mkdir()
    return EnvironmentConfig(host=Platform.LINUX, env={}, home=home_dir, tmp=tmp)


@pytest.fixture
def windows_env(tmp_path: Path, home_dir: Path) -> EnvironmentConfig:
    tmp = tmp_path / "tmp"
    tmp.mkdir()
    return EnvironmentConfig(
        host=Platform.WINDOWS,
        env={
            "APPDATA": str(tmp_path / "Roaming"),
            "LOCALAPPDATA": str(tmp_path / "Local"),
        },
        home=home_dir,
        tmp=tmp,
    )


@pytest.fixture
def darwin_env(tmp_path: Path, home_dir: Path) -> EnvironmentConfig:
    tmp = tmp_path / "tmp"
    tmp.mkdir()
    return EnvironmentConfig(host=Platform.DARWIN, env={}, home=home_dir, tmp=tmp)


@pytest.fixture
def cache(tmp_path: Path) -> ArtifactCache:
    return ArtifactCache(tmp_path / "cache" / "denocef")
