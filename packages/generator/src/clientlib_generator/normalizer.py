"""Asset normalization: raw asset specs to an ordered copy plan.

Accepted shapes:

- Mapping, short form::

      {"js": ["src/a.js", "src/b.js"], "css": ["src/a.css"]}

- Mapping, long form (``type`` is always the key)::

      {"resources": {"base": "img", "files": ["src/img/logo.png"]}}

- Array form (each group names its ``type``)::

      [{"type": "js", "base": "js", "files": ["src/a.js"]}]

File entries are either a bare source path or ``{"src": ..., "dest": ...}``.
Records keep declaration order; nothing is sorted or deduplicated.
"""

import os
from pathlib import Path, PurePath
from typing import Any, Union

from pydantic import TypeAdapter, ValidationError

from clientlib_common import AssetSpecError, get_logger

from clientlib_generator.models import (
    AssetFile,
    AssetGroup,
    AssetRecord,
    FileEntry,
    FileMapping,
    RawAssets,
    TypedAssetGroup,
)

logger = get_logger(__name__)

_raw_assets_adapter: TypeAdapter[RawAssets] = TypeAdapter(RawAssets)


def coerce_assets(assets: Any) -> RawAssets:
    """Validate plain data (dicts/lists/strings) into the raw asset shapes.

    Raises:
        AssetSpecError: If ``assets`` matches none of the accepted shapes
    """
    try:
        return _raw_assets_adapter.validate_python(assets)
    except ValidationError as e:
        raise AssetSpecError(f"Invalid asset specification: {e}") from e


def to_typed_groups(assets: RawAssets) -> list[TypedAssetGroup]:
    """Flatten either raw shape into typed groups, in declaration order."""
    if isinstance(assets, list):
        return list(assets)

    groups = []
    for key, value in assets.items():
        if isinstance(value, AssetGroup):
            groups.append(TypedAssetGroup(type=key, base=value.base, files=value.files))
        else:
            # Short form: the key doubles as the base folder
            groups.append(TypedAssetGroup(type=key, base=key, files=value))
    return groups


def normalize_file_entry(clientlib_folder: Union[str, Path], base: str, entry: FileEntry) -> AssetFile:
    """Turn one file entry into a resolved ``AssetFile``.

    ``dest`` defaults to the basename of ``src`` and always lands below
    ``<clientlib_folder>/<base>``.
    """
    mapping = FileMapping(src=entry) if isinstance(entry, str) else entry
    dest = mapping.dest or PurePath(mapping.src).name
    # A leading separator must not escape the base folder
    dest = dest.lstrip("/\\")
    full = os.path.normpath(os.path.join(os.fspath(clientlib_folder), base, dest))
    return AssetFile(src=mapping.src, dest=Path(full))


def normalize_assets(clientlib_folder: Union[str, Path], assets: Any) -> list[AssetRecord]:
    """Normalize an asset specification into ordered ``AssetRecord``s.

    Args:
        clientlib_folder: Target folder of the clientlib (``<root>/<name>``)
        assets: Raw spec, either already validated or plain data

    Returns:
        One record per asset group; ``files`` is None for groups that
        declared no file list

    Raises:
        AssetSpecError: If ``assets`` matches none of the accepted shapes
    """
    assets = coerce_assets(assets)

    records = []
    for group in to_typed_groups(assets):
        files = None
        if group.files is not None:
            files = [normalize_file_entry(clientlib_folder, group.base, entry) for entry in group.files]
        records.append(AssetRecord(type=group.type, base=group.base, files=files))

    logger.debug(
        "assets_normalized",
        folder=str(clientlib_folder),
        records=len(records),
        files=sum(len(r.files or []) for r in records),
    )
    return records

