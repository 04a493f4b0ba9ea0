"""Create DenoCEF projects from the artifact cache."""

import shutil
from pathlib import Path
from typing import Optional

from electric.config import PROJECT_DIR_NAME
from electric.core.interfaces import TraceStore
from electric.errors import CacheError
from electric.platforms import Platform
from electric.release.cache import ArtifactCache
from electric.trace.schema import EventType, new_event
from electric.util import print_step, render_progress_bar

TOTAL_STEPS = 5


def create_project(
    platform: Platform,
    cache: ArtifactCache,
    cwd: Path,
    trace_store: Optional[TraceStore] = None,
) -> Optional[Path]:
    """Copy a platform's cached binaries into a new project folder.

    An existing project folder is left untouched.

    Args:
        platform: Platform whose cache entry is copied.
        cache: Artifact cache holding the entry.
        cwd: Directory the project folder is created in.
        trace_store: Optional trace store for the copy event.

    Returns:
        Path to the new project, or None if one already existed.

    Raises:
        CacheError: If the platform has no cache entry.
    """
    platform = Platform(platform)
    project_dir = Path(cwd) / PROJECT_DIR_NAME

    if project_dir.exists():
        print("Project already exists in this directory. No new project created.")
        return None

    if not cache.exists(platform):
        raise CacheError(f"No cached binaries for {platform.value} at {cache.entry_path(platform)}")

    print_step(5, TOTAL_STEPS, f"Copying {platform.value} cache into new project folder")
    shutil.copytree(cache.entry_path(platform), project_dir)

    if trace_store is not None:
        trace_store.append(
            new_event(
                EventType.COPY,
                {
                    "platform": platform.value,
                    "source": str(cache.entry_path(platform)),
                    "project": str(project_dir),
                },
            )
        )

    print()
    print(" Finished creating the new DenoCEF project")
    print(render_progress_bar(TOTAL_STEPS, TOTAL_STEPS))
    return project_dir
