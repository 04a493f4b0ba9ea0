"""GitHub release asset client."""

import os
from typing import Optional

import requests

from electric import __version__
from electric.errors import FetchError


class ReleaseClient:
    """Minimal client for downloading GitHub release assets."""

    def __init__(self, token: Optional[str] = None, timeout: Optional[float] = None):
        """Initialize release client.

        Args:
            token: GitHub personal access token. If None, reads from GITHUB_TOKEN env var.
            timeout: Request timeout in seconds. None waits indefinitely.
        """
        self.token = token or os.getenv("GITHUB_TOKEN")
        self.timeout = timeout
        self.session = requests.Session()
        if self.token:
            self.session.headers.update({"Authorization": f"token {self.token}"})
        self.session.headers.update({
            "Accept": "application/octet-stream",
            "User-Agent": f"electric/{__version__}",
        })

    def download(self, url: str) -> bytes:
        """Download a release asset into memory.

        The whole body is buffered; assets are a few hundred MB at most and
        are fetched once per platform.

        Args:
            url: Asset URL.

        Returns:
            Response body.

        Raises:
            FetchError: On connection failure or a non-2xx response.
        """
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise FetchError(f"Failed to download {url}: {e}") from e
        return response.content

    def close(self):
        """Close the underlying HTTP session."""
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
