"""Release asset download and the per-platform artifact cache."""

from electric.release.cache import ArtifactCache
from electric.release.client import ReleaseClient
from electric.release.fetch import download_to_cache, fetch_artifact

__all__ = ["ArtifactCache", "ReleaseClient", "download_to_cache", "fetch_artifact"]
