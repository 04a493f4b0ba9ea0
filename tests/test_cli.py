"""Tests for electric.cli module."""

from unittest.mock import patch

import pytest

from electric.cli import MACOS_NOTICE, create_parser, main
from electric.config import PROJECT_DIR_NAME, get_cache_dir
from electric.dirs import EnvironmentConfig
from electric.platforms import Platform
from electric.release.cache import ArtifactCache

from conftest import FakeReleaseClient


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    path = tmp_path / "work"
    path.mkdir()
    monkeypatch.chdir(path)
    return path


def run_cli(argv, environment, client=None):
    client = client or FakeReleaseClient()
    with patch.object(EnvironmentConfig, "from_process", return_value=environment), \
            patch("electric.cli.ReleaseClient", return_value=client):
        return main(argv)


class TestCreateParser:
    def test_parser_has_version(self):
        parser = create_parser()
        with pytest.raises(SystemExit) as exc_info:
            parser.parse_args(["--version"])
        assert exc_info.value.code == 0

    def test_platform_is_optional(self):
        parser = create_parser()
        assert parser.parse_args(["create"]).platform is None
        assert parser.parse_args(["create", "windows"]).platform == "windows"
        assert parser.parse_args(["refresh", "mac"]).platform == "mac"
        assert parser.parse_args(["package"]).command == "package"


class TestUsage:
    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "Electric - A CLI for DenoCEF" in capsys.readouterr().out

    def test_unknown_command_prints_help(self, capsys):
        assert main(["explode"]) == 0
        out = capsys.readouterr().out
        assert "create" in out
        assert "refresh" in out

    def test_macos_host_does_nothing(self, darwin_env, workdir, capsys):
        client = FakeReleaseClient()
        assert run_cli(["create"], darwin_env, client) == 0
        assert MACOS_NOTICE in capsys.readouterr().out
        assert client.urls == []
        assert list(workdir.iterdir()) == []


class TestCreateCommand:
    def test_create_fetches_and_copies(self, linux_env, workdir, fake_client):
        assert run_cli(["create", "linux"], linux_env, fake_client) == 0
        project = workdir / PROJECT_DIR_NAME
        assert project.is_dir()
        assert any(project.iterdir())
        assert len(fake_client.urls) == 1

    def test_create_defaults_to_host(self, windows_env, workdir, fake_client):
        assert run_cli(["create"], windows_env, fake_client) == 0
        assert fake_client.urls[0].endswith("/windows-denocef.zip.xz")
        assert ArtifactCache(get_cache_dir(windows_env)).exists(Platform.WINDOWS)

    def test_create_uses_cache(self, linux_env, workdir, fake_client, tmp_path, monkeypatch):
        assert run_cli(["create", "linux"], linux_env, fake_client) == 0
        other = tmp_path / "other"
        other.mkdir()
        monkeypatch.chdir(other)
        assert run_cli(["create", "linux"], linux_env, fake_client) == 0
        assert len(fake_client.urls) == 1
        assert (other / PROJECT_DIR_NAME).is_dir()

    def test_mac_alias(self, linux_env, workdir, fake_client):
        assert run_cli(["create", "mac"], linux_env, fake_client) == 0
        assert fake_client.urls[0].endswith("/darwin-denocef.zip.xz")
        assert ArtifactCache(get_cache_dir(linux_env)).exists(Platform.DARWIN)

    def test_invalid_platform(self, linux_env, workdir, capsys):
        assert run_cli(["create", "amiga"], linux_env) == 1
        assert "Unknown platform 'amiga'" in capsys.readouterr().err

    def test_fetch_failure(self, linux_env, workdir, failing_client, capsys):
        assert run_cli(["create", "linux"], linux_env, failing_client) == 1
        err = capsys.readouterr().err
        assert "✗ Error: Failed to download" in err
        assert "Traceback" in err
        assert not (workdir / PROJECT_DIR_NAME).exists()
        assert not ArtifactCache(get_cache_dir(linux_env)).exists(Platform.LINUX)


class TestRefreshCommand:
    def test_refresh_refetches(self, linux_env, workdir, fake_client):
        cache = ArtifactCache(get_cache_dir(linux_env))
        stale = cache.ensure(Platform.LINUX)
        (stale / "stale.bin").write_bytes(b"old")

        assert run_cli(["refresh", "linux"], linux_env, fake_client) == 0

        assert cache.exists(Platform.LINUX)
        assert not (stale / "stale.bin").exists()
        assert (cache.entry_path(Platform.LINUX) / "app.js").exists()
        assert not (workdir / PROJECT_DIR_NAME).exists()

    def test_refresh_empty_cache(self, linux_env, workdir, fake_client):
        assert run_cli(["refresh"], linux_env, fake_client) == 0
        assert ArtifactCache(get_cache_dir(linux_env)).exists(Platform.LINUX)

    def test_refresh_failure_leaves_cache_empty(self, linux_env, workdir, failing_client):
        cache = ArtifactCache(get_cache_dir(linux_env))
        cache.ensure(Platform.LINUX)
        assert run_cli(["refresh", "linux"], linux_env, failing_client) == 1
        assert not cache.exists(Platform.LINUX)


class TestPackageCommand:
    def test_package(self, linux_env, home_dir, workdir, capsys):
        deno_cache = home_dir / ".cache" / "deno"
        deno_cache.mkdir(parents=True)
        (deno_cache / "dep.ts").write_text("export {};")

        assert run_cli(["package"], linux_env) == 0

        assert (workdir / "deno_modules" / "dep.ts").exists()
        assert (workdir / "run").exists()
        assert "✓ Wrote" in capsys.readouterr().out

    def test_package_without_module_cache(self, linux_env, workdir, capsys):
        assert run_cli(["package"], linux_env) == 1
        err = capsys.readouterr().err
        assert "✗ Error: Deno module cache not found" in err
        assert "Traceback" in err
