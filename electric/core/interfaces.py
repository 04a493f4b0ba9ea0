"""
Protocol-based interfaces for the release pipeline.
"""

from typing import Iterator, Protocol

from electric.trace.schema import Event


class TraceStore(Protocol):
    """
    Protocol for event storage.

    ``JsonlTraceStore`` is the default implementation.
    """

    def append(self, event: Event) -> None:
        """Append an event to the store."""
        ...

    def iter_events(self) -> Iterator[Event]:
        """Iterate over all events in the store."""
        ...

    def close(self) -> None:
        """Close the store and release resources."""
        ...


class AssetClient(Protocol):
    """
    Protocol for downloading release assets.

    ``ReleaseClient`` is the default implementation.
    """

    def download(self, url: str) -> bytes:
        """
        Download a release asset.

        Args:
            url: Asset URL.

        Returns:
            The full response body.

        Raises:
            FetchError: If the download fails.
        """
        ...
