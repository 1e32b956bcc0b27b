"""Clientlib manifest files (``js.txt`` / ``css.txt``).

The platform reads these to decide bundle composition and order, so
lines follow the declared file order exactly.
"""

import os
from pathlib import Path
from typing import Optional, Union

from clientlib_common import get_logger

from clientlib_generator.models import AssetRecord

logger = get_logger(__name__)

MANIFEST_TYPES = ("js", "css")


def has_manifest(record: AssetRecord) -> bool:
    """True if ``record`` gets a manifest file."""
    return record.type in MANIFEST_TYPES and isinstance(record.files, list)


def render_asset_manifest(clientlib_folder: Union[str, Path], record: AssetRecord) -> str:
    """Build manifest text: ``#base=<base>``, a blank line, one path per file.

    Paths are relative to ``<clientlib_folder>/<base>`` and use forward
    slashes regardless of platform.
    """
    base_path = os.path.join(os.fspath(clientlib_folder), record.base)
    lines = [
        os.path.relpath(file.dest, base_path).replace(os.sep, "/")
        for file in record.files or []
    ]
    return f"#base={record.base}\n\n" + "\n".join(lines)


def write_asset_manifest(clientlib_folder: Union[str, Path], record: AssetRecord) -> Optional[Path]:
    """Write ``<clientlib_folder>/<type>.txt`` for js/css records.

    Overwrites an existing manifest. Records of other types, or without
    a file list, are skipped.

    Returns:
        Path of the written manifest, or None if skipped
    """
    if not has_manifest(record):
        return None

    output = Path(clientlib_folder) / f"{record.type}.txt"
    output.write_text(render_asset_manifest(clientlib_folder, record), encoding="utf-8")

    logger.debug("manifest_rendered", path=str(output), entries=len(record.files))
    return output
