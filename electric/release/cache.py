"""File-based cache of extracted DenoCEF binaries, one directory per platform."""

import shutil
from pathlib import Path

from electric.errors import CacheError
from electric.platforms import Platform
from electric.util import ensure_dir


class ArtifactCache:
    """Per-platform artifact cache.

    ``<root>/<platform>`` existing means the artifact is fully materialized:
    the pipeline builds into ``<root>/.<platform>.staging`` and only renames
    it into place once every stage succeeded.
    """

    def __init__(self, root: Path):
        """Initialize artifact cache.

        Args:
            root: Cache root. Created lazily on first write.
        """
        self.root = Path(root)

    def entry_path(self, platform: Platform) -> Path:
        """Return the cache entry directory for a platform."""
        return self.root / Platform(platform).value

    def staging_path(self, platform: Platform) -> Path:
        """Return the staging directory for a platform."""
        return self.root / f".{Platform(platform).value}.staging"

    def exists(self, platform: Platform) -> bool:
        """Check whether a platform's artifact is materialized."""
        return self.entry_path(platform).is_dir()

    def ensure(self, platform: Platform) -> Path:
        """Create the cache entry directory if absent.

        An existing directory is fine; anything else that stops creation
        (permission denied, a file at that path) raises OSError.

        Returns:
            Path to the entry directory.
        """
        return ensure_dir(self.entry_path(platform))

    def clear(self, platform: Platform) -> bool:
        """Delete a platform's cache entry and any leftover staging directory.

        Returns:
            True if a cache entry was deleted, False if there was none.
        """
        staging = self.staging_path(platform)
        if staging.exists():
            shutil.rmtree(staging)

        entry = self.entry_path(platform)
        if not entry.exists():
            return False
        shutil.rmtree(entry)
        return True

    def staging(self, platform: Platform) -> Path:
        """Return a fresh, empty staging directory for a platform."""
        staging = self.staging_path(platform)
        if staging.exists():
            shutil.rmtree(staging)
        ensure_dir(self.root)
        staging.mkdir()
        return staging

    def discard(self, platform: Platform):
        """Remove a platform's staging directory if present."""
        staging = self.staging_path(platform)
        if staging.exists():
            shutil.rmtree(staging)

    def commit(self, platform: Platform, staging: Path) -> Path:
        """Move a completed staging directory into the cache entry path.

        Args:
            platform: Platform the staging directory was built for.
            staging: Fully populated staging directory.

        Returns:
            Path to the cache entry.

        Raises:
            CacheError: If the entry already exists.
        """
        entry = self.entry_path(platform)
        if entry.exists():
            raise CacheError(f"Cache entry already exists: {entry}")
        staging.rename(entry)
        return entry
