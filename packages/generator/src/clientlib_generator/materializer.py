"""Generation of a single clientlib.

Steps, strictly in order:

1. Resolve the output layout (``item.path`` or the default root)
2. Remove the previous generation (folder and JSON descriptor)
3. Create the library folder
4. Write the descriptor (JSON beside the folder, XML inside it)
5. Normalize assets into an ordered copy plan
6. Per asset: write the js/css manifest, then copy each file in order

A failure aborts the item immediately. Nothing already written is
rolled back.
"""

import shutil
from pathlib import Path
from typing import Optional

from clientlib_common import AssetSpecError, MaterializationError, get_logger

from clientlib_generator.descriptor import write_descriptor
from clientlib_generator.eraser import remove_layout
from clientlib_generator.events import EventKind, GenerationEvent, GenerationObserver, LoggingObserver
from clientlib_generator.layout import LibraryLayout, resolve_base_dir, resolve_layout
from clientlib_generator.manifest import write_asset_manifest
from clientlib_generator.models import AssetFile, AssetRecord, GeneratorOptions, LibraryItem
from clientlib_generator.normalizer import normalize_assets

logger = get_logger(__name__)


def resolve_source(src: str, base_dir: Path) -> Path:
    """Resolve an asset source path against ``base_dir``."""
    return base_dir / Path(src).expanduser()


def copy_asset_file(file: AssetFile, base_dir: Path) -> EventKind:
    """Copy one plan entry.

    Directories are created as a bare node at ``dest`` (their contents are
    not copied); files are copied with missing parent folders created and
    an existing destination overwritten. Permission bits and timestamps
    are kept.

    Returns:
        DIRECTORY_CREATED or FILE_COPIED

    Raises:
        OSError: If the source is missing or the copy fails
    """
    source = resolve_source(file.src, base_dir)
    if source.is_dir():
        file.dest.mkdir(parents=True, exist_ok=True)
        return EventKind.DIRECTORY_CREATED

    if not source.exists():
        raise FileNotFoundError(f"No such asset source: '{source}'")
    file.dest.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy2(source, file.dest)
    return EventKind.FILE_COPIED


def materialize_record(
    layout: LibraryLayout,
    record: AssetRecord,
    base_dir: Path,
    observer: GenerationObserver,
) -> None:
    """Write the manifest for ``record`` and copy its files in order.

    Raises:
        AssetSpecError: If the record has no file list
        OSError: On filesystem failures
    """
    manifest_path = write_asset_manifest(layout.folder, record)
    if manifest_path is not None:
        observer.notify(
            GenerationEvent(
                kind=EventKind.MANIFEST_WRITTEN,
                library=layout.name,
                path=manifest_path,
                detail={"type": record.type, "entries": len(record.files)},
            )
        )

    if record.files is None:
        raise AssetSpecError(
            f"Asset '{record.type}' of clientlib '{layout.name}' has no 'files' list"
        )

    for file in record.files:
        kind = copy_asset_file(file, base_dir)
        observer.notify(GenerationEvent(kind=kind, library=layout.name, path=file.dest, src=file.src))


def process_item(
    item: LibraryItem,
    options: Optional[GeneratorOptions] = None,
    observer: Optional[GenerationObserver] = None,
) -> LibraryLayout:
    """Generate one clientlib from scratch.

    Args:
        item: Library item
        options: Shared options (base directory, default root, XML compat)
        observer: Progress observer (default: LoggingObserver)

    Returns:
        Layout of the generated clientlib

    Raises:
        ConfigurationError: If no output root can be determined
        AssetSpecError: If the asset spec is invalid or a group lacks files
        MaterializationError: On filesystem failures
    """
    options = options or GeneratorOptions()
    observer = observer or LoggingObserver()
    base_dir = resolve_base_dir(options.cwd)
    layout = resolve_layout(item, base_dir, options.client_lib_root)

    observer.notify(
        GenerationEvent(kind=EventKind.LIBRARY_STARTED, library=item.name, path=layout.folder)
    )

    remove_layout(layout, observer)

    try:
        layout.folder.mkdir(parents=True, exist_ok=True)

        descriptor_path = write_descriptor(item, layout, options.xml_legacy_dependencies)
        observer.notify(
            GenerationEvent(
                kind=EventKind.DESCRIPTOR_WRITTEN,
                library=item.name,
                path=descriptor_path,
                detail={"format": layout.descriptor_format.value},
            )
        )

        records = normalize_assets(layout.folder, item.assets)
        for record in records:
            materialize_record(layout, record, base_dir, observer)

    except OSError as e:
        logger.error("clientlib_generation_failed", library=item.name, error=str(e))
        raise MaterializationError(
            f"Failed to generate clientlib '{item.name}': {e}", library=item.name
        ) from e

    observer.notify(
        GenerationEvent(
            kind=EventKind.LIBRARY_COMPLETED,
            library=item.name,
            path=layout.folder,
            detail={"assets": len(records)},
        )
    )
    return layout
