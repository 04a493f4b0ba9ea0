"""Fetch, decompress and unarchive DenoCEF binaries into the artifact cache."""

import os
import zipfile
from pathlib import Path
from typing import Any, Dict, Optional

import lz4.block

from electric.config import asset_url
from electric.core.interfaces import AssetClient, TraceStore
from electric.errors import ArtifactError
from electric.platforms import Platform
from electric.trace.schema import EventType, new_event
from electric.util import print_step

from electric.release.cache import ArtifactCache

TOTAL_STEPS = 5
ARCHIVE_NAME = "denocef.zip"


def compressed_name(platform: Platform) -> str:
    return f"{Platform(platform).value}-denocef.zip.xz"


def _emit(trace_store: Optional[TraceStore], event_type: EventType, payload: Dict[str, Any]):
    if trace_store is not None:
        trace_store.append(new_event(event_type, payload))


def decompress_artifact(source: Path, target: Path):
    """Decompress a downloaded artifact.

    Release assets carry an ``.xz`` extension but are LZ4 blocks with a
    4-byte little-endian uncompressed-size prefix.

    Args:
        source: Compressed file.
        target: Where to write the zip archive.

    Raises:
        ArtifactError: If the data is not a valid LZ4 block.
    """
    try:
        data = lz4.block.decompress(source.read_bytes())
    except (lz4.block.LZ4BlockError, ValueError) as e:
        raise ArtifactError(f"Failed to decompress {source.name}: {e}") from e
    target.write_bytes(data)


def extract_archive(archive: Path, dest: Path):
    """Extract a zip archive in place, keeping each member's Unix mode.

    ``ZipFile.extractall`` drops the permission bits stored in
    ``external_attr``, which leaves the bundled ``deno`` binary non-executable.

    Raises:
        ArtifactError: If the archive is corrupt.
    """
    try:
        with zipfile.ZipFile(archive, "r") as zf:
            zf.extractall(dest)
            for info in zf.infolist():
                mode = (info.external_attr >> 16) & 0o777
                if mode:
                    os.chmod(dest / info.filename, mode)
    except (zipfile.BadZipFile, zipfile.LargeZipFile) as e:
        raise ArtifactError(f"Failed to extract {archive.name}: {e}") from e


def fetch_artifact(
    platform: Platform,
    cache: ArtifactCache,
    client: AssetClient,
    trace_store: Optional[TraceStore] = None,
) -> Path:
    """Fetch, decompress and unarchive the DenoCEF binaries for a platform.

    Everything is built in the platform's staging directory and renamed into
    the cache entry only after all stages succeed. On failure the staging
    directory is removed and the error re-raised, so the cache never holds a
    half-populated entry.

    Args:
        platform: Target platform.
        cache: Artifact cache.
        client: Asset client used for the download.
        trace_store: Optional trace store for stage events.

    Returns:
        Path to the materialized cache entry.

    Raises:
        FetchError: If the download fails.
        ArtifactError: If decompression or extraction fails.
        CacheError: If the cache entry appeared in the meantime.
    """
    platform = Platform(platform)
    url = asset_url(platform)

    print_step(
        1,
        TOTAL_STEPS,
        f"Fetching the DenoCEF binaries for {platform.value}. Please wait, as this "
        "process will take a while due to the large size of the binaries.",
    )
    _emit(trace_store, EventType.FETCH, {"platform": platform.value, "url": url})

    try:
        data = client.download(url)
        staging = cache.staging(platform)

        print_step(2, TOTAL_STEPS, f"Writing the binaries to {staging}")
        compressed = staging / compressed_name(platform)
        compressed.write_bytes(data)
        _emit(trace_store, EventType.WRITE, {
            "platform": platform.value,
            "path": str(compressed),
            "bytes": len(data),
        })
        del data

        print_step(3, TOTAL_STEPS, "Decompressing the binaries. Please wait as this process will take a while.")
        archive = staging / ARCHIVE_NAME
        decompress_artifact(compressed, archive)
        compressed.unlink()
        _emit(trace_store, EventType.DECOMPRESS, {
            "platform": platform.value,
            "bytes": archive.stat().st_size,
        })

        print_step(4, TOTAL_STEPS, "Unarchiving the binaries. Please wait as this process will take a while.")
        extract_archive(archive, staging)
        archive.unlink()
        _emit(trace_store, EventType.EXTRACT, {
            "platform": platform.value,
            "entries": sum(1 for _ in staging.rglob("*")),
        })

        entry = cache.commit(platform, staging)
    except Exception as e:
        cache.discard(platform)
        _emit(trace_store, EventType.ERROR, {
            "platform": platform.value,
            "stage": "fetch_artifact",
            "error": str(e),
        })
        raise

    _emit(trace_store, EventType.COMMIT, {"platform": platform.value, "path": str(entry)})
    return entry


def download_to_cache(
    platform: Platform,
    cache: ArtifactCache,
    client: AssetClient,
    trace_store: Optional[TraceStore] = None,
) -> Path:
    """Populate the cache for a platform unless it is already materialized.

    Returns:
        Path to the cache entry.
    """
    platform = Platform(platform)
    if cache.exists(platform):
        _emit(trace_store, EventType.CACHE_HIT, {
            "platform": platform.value,
            "path": str(cache.entry_path(platform)),
        })
        return cache.entry_path(platform)
    return fetch_artifact(platform, cache, client, trace_store)
