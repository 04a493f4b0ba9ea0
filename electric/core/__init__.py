"""
Protocol-based interfaces used by the release pipeline.

Tests and embedding tools can pass their own trace store or asset client
instead of the JSONL store and the requests-based release client.
"""

from electric.core.interfaces import AssetClient, TraceStore

__all__ = ["AssetClient", "TraceStore"]
