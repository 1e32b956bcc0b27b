"""Removal of a previously generated clientlib.

Deleting the old folder and JSON descriptor before regeneration is what
makes repeated runs produce a clean copy instead of a merge.
"""

import shutil
from pathlib import Path
from typing import Optional, Union

from clientlib_common import MaterializationError, get_logger

from clientlib_generator.events import EventKind, GenerationEvent, GenerationObserver, LoggingObserver
from clientlib_generator.layout import LibraryLayout, resolve_layout
from clientlib_generator.models import LibraryItem, coerce_item
from clientlib_generator.probe import file_exists

logger = get_logger(__name__)


def _remove_path(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()


def remove_layout(layout: LibraryLayout, observer: Optional[GenerationObserver] = None) -> list[Path]:
    """Delete the JSON descriptor and library folder of ``layout`` if present.

    Returns:
        Paths that were deleted, in deletion order

    Raises:
        MaterializationError: If a deletion fails
    """
    observer = observer or LoggingObserver()
    removed = []
    for target in (layout.json_descriptor, layout.folder):
        if not file_exists(target):
            continue
        try:
            _remove_path(target)
        except OSError as e:
            logger.error("clientlib_removal_failed", library=layout.name, path=str(target), error=str(e))
            raise MaterializationError(
                f"Failed to remove '{target}' for clientlib '{layout.name}': {e}",
                library=layout.name,
            ) from e
        removed.append(target)
        observer.notify(GenerationEvent(kind=EventKind.LIBRARY_REMOVED, library=layout.name, path=target))
    return removed


def remove_clientlib(
    item: Union[LibraryItem, dict],
    *,
    base_dir: Optional[Union[str, Path]] = None,
    clientlib_root: Optional[Union[str, Path]] = None,
    observer: Optional[GenerationObserver] = None,
) -> list[Path]:
    """Remove the clientlib folder and JSON descriptor generated for ``item``.

    A no-op when neither exists.

    Args:
        item: Library item (or plain dict)
        base_dir: Base directory for relative paths (default: current directory)
        clientlib_root: Output root used when ``item.path`` is unset
        observer: Receives a LIBRARY_REMOVED event per deleted path

    Returns:
        Paths that were deleted

    Raises:
        ConfigurationError: If no output root can be determined
        MaterializationError: If a deletion fails
    """
    layout = resolve_layout(coerce_item(item), base_dir, clientlib_root)
    return remove_layout(layout, observer)
