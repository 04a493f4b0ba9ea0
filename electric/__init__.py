"""
electric - a CLI for bootstrapping DenoCEF projects.

This package provides tools to:
- Resolve per-OS data, config, cache, log and temp directories
- Fetch, decompress and unarchive DenoCEF binaries into a per-platform cache
- Create new projects from the cached binaries
- Package a project with a local Deno module cache and a launch script
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
