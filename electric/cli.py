import argparse
import sys
import traceback
from pathlib import Path
from typing import List, Optional

from electric import __version__
from electric.config import get_cache_dir, get_trace_path
from electric.dirs import EnvironmentConfig
from electric.errors import ElectricError, UnsupportedPlatformError
from electric.package import cache_deno_modules_locally, update_run_command
from electric.platforms import Platform, parse_platform
from electric.project import create_project
from electric.release.cache import ArtifactCache
from electric.release.client import ReleaseClient
from electric.release.fetch import download_to_cache, fetch_artifact
from electric.trace.schema import EventType, new_event
from electric.trace.store_jsonl import JsonlTraceStore

COMMANDS = ("create", "refresh", "package")

MACOS_NOTICE = (
    "DenoCEF currently does not support MacOS, but is planned in the future. "
    "For the time being, please develop your application on either Windows or "
    "Linux until full support is added."
)

DESCRIPTION = "Electric - A CLI for DenoCEF"

EPILOG = """\
Requirements:
    Before running Electric commands, it is recommended you have approximately
    4 GB of available RAM and 5 GB of disk space (at minimum 2.5 GB of RAM and
    3 GB of disk space). These requirements are only for downloading the
    binaries; less RAM is needed to actually run DenoCEF programs.

If no platform is given, the platform you are running on is used.
"""


def cmd_create(args, environment: EnvironmentConfig) -> int:
    try:
        platform = parse_platform(args.platform, environment.host)
    except UnsupportedPlatformError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1

    cache = ArtifactCache(get_cache_dir(environment))

    with JsonlTraceStore(get_trace_path(environment)) as trace_store:
        try:
            with ReleaseClient() as client:
                download_to_cache(platform, cache, client, trace_store)

            project_dir = create_project(platform, cache, Path.cwd(), trace_store)
        except Exception as e:
            print(f"✗ Error: {e}", file=sys.stderr)
            traceback.print_exc()
            return 1

    if project_dir is not None:
        print(f"✓ Created {project_dir}")
    return 0


def cmd_refresh(args, environment: EnvironmentConfig) -> int:
    try:
        platform = parse_platform(args.platform, environment.host)
    except UnsupportedPlatformError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1

    cache = ArtifactCache(get_cache_dir(environment))

    with JsonlTraceStore(get_trace_path(environment)) as trace_store:
        try:
            removed = cache.clear(platform)
            trace_store.append(
                new_event(EventType.CACHE_CLEAR, {"platform": platform.value, "removed": removed})
            )
            with ReleaseClient() as client:
                entry = fetch_artifact(platform, cache, client, trace_store)
        except Exception as e:
            print(f"✗ Error: {e}", file=sys.stderr)
            traceback.print_exc()
            return 1

    print()
    print(f"✓ Refreshed {platform.value} binaries in {entry}")
    return 0


def cmd_package(args, environment: EnvironmentConfig) -> int:
    cwd = Path.cwd()

    with JsonlTraceStore(get_trace_path(environment)) as trace_store:
        try:
            modules_dir = cache_deno_modules_locally(environment, cwd)
            scripts = update_run_command(environment, cwd)
        except (ElectricError, OSError) as e:
            print(f"✗ Error: {e}", file=sys.stderr)
            traceback.print_exc()
            return 1

        trace_store.append(
            new_event(
                EventType.PACKAGE,
                {"modules": str(modules_dir), "scripts": [str(s) for s in scripts]},
            )
        )

    print(f"✓ Copied Deno modules to {modules_dir}")
    for script in scripts:
        print(f"✓ Wrote {script}")
    if not scripts:
        print("  No launch script for this platform yet.")
    return 0


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="electric",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    create_parser_ = subparsers.add_parser(
        "create",
        help="Create a new DenoCEF project in the current directory",
        description=(
            "Creates a new DenoCEF project in the current directory. If no binaries "
            "are cached for the target platform, they are fetched and cached first."
        ),
    )
    create_parser_.add_argument("platform", nargs="?", help="windows, linux, darwin or mac")

    refresh_parser = subparsers.add_parser(
        "refresh",
        help="Clear and re-fetch the cached binaries for a platform",
    )
    refresh_parser.add_argument("platform", nargs="?", help="windows, linux, darwin or mac")

    subparsers.add_parser(
        "package",
        help="Copy the Deno module cache into the project and write a launch script",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    parser = create_parser()

    # Unknown or missing subcommands print help instead of an argparse error
    if not argv or (argv[0] not in COMMANDS and argv[0] not in ("--version", "-h", "--help")):
        parser.print_help()
        return 0

    args = parser.parse_args(argv)

    try:
        environment = EnvironmentConfig.from_process()
    except UnsupportedPlatformError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1

    if environment.host == Platform.DARWIN:
        print(MACOS_NOTICE)
        return 0

    if args.command == "create":
        return cmd_create(args, environment)
    elif args.command == "refresh":
        return cmd_refresh(args, environment)
    elif args.command == "package":
        return cmd_package(args, environment)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
