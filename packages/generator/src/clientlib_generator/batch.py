"""Batch generation of clientlibs.

Usage:
    from clientlib_generator import generate

    generate(
        [
            {
                "name": "site.publish",
                "embed": ["site.base"],
                "mode": "json",
                "assets": {
                    "js": ["src/main.js", "src/nav.js"],
                    "css": ["dist/main.css"],
                },
            },
        ],
        {"cwd": "frontend", "clientLibRoot": "ui.apps/jcr_root/etc/clientlibs"},
    )

Items run one after another. The first failing item stops the batch;
libraries generated before it stay on disk.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence, Union

from clientlib_common import BatchError, ClientlibError, get_logger

from clientlib_generator.events import GenerationObserver, LoggingObserver
from clientlib_generator.layout import LibraryLayout, resolve_base_dir, resolve_layout
from clientlib_generator.materializer import process_item
from clientlib_generator.models import (
    AssetRecord,
    GeneratorOptions,
    LibraryItem,
    coerce_item,
    coerce_options,
)
from clientlib_generator.normalizer import normalize_assets

logger = get_logger(__name__)

ItemInput = Union[LibraryItem, dict]
ItemsInput = Union[ItemInput, Sequence[ItemInput]]
OptionsInput = Union[GeneratorOptions, dict, None]


@dataclass
class BatchReport:
    """Outcome of a successful batch."""

    libraries: list[LibraryLayout] = field(default_factory=list)

    @property
    def names(self) -> list[str]:
        return [layout.name for layout in self.libraries]


@dataclass
class LibraryPlan:
    """Copy plan of one library, computed without touching the filesystem."""

    layout: LibraryLayout
    records: list[AssetRecord]


def coerce_items(items: ItemsInput) -> list[LibraryItem]:
    """Accept a single item or a sequence of items."""
    if isinstance(items, (LibraryItem, dict)):
        return [coerce_item(items)]
    return [coerce_item(item) for item in items]


def generate(
    items: ItemsInput,
    options: OptionsInput = None,
    *,
    observer: Optional[GenerationObserver] = None,
) -> BatchReport:
    """Generate every clientlib in ``items``, in order.

    Args:
        items: One library item or a sequence of them (models or dicts)
        options: Shared options; unset fields default from Settings
        observer: Progress observer (default: LoggingObserver)

    Returns:
        BatchReport listing the generated libraries

    Raises:
        ConfigurationError: If items or options are invalid
        BatchError: If a library fails; chained to the underlying error
    """
    library_items = coerce_items(items)
    resolved = coerce_options(options)
    observer = observer or LoggingObserver()

    logger.info(
        "batch_started",
        libraries=len(library_items),
        cwd=str(resolve_base_dir(resolved.cwd)),
    )

    report = BatchReport()
    for item in library_items:
        try:
            layout = process_item(item, resolved, observer)
        except ClientlibError as e:
            logger.error(
                "batch_aborted",
                library=item.name,
                completed=report.names,
                error=str(e),
            )
            raise BatchError(
                f"Clientlib '{item.name}' failed: {e}",
                library=item.name,
                completed=report.names,
            ) from e
        report.libraries.append(layout)

    logger.info("batch_completed", libraries=report.names)
    return report


def build_plan(items: ItemsInput, options: OptionsInput = None) -> list[LibraryPlan]:
    """Normalize every item's assets without writing anything.

    Raises:
        ConfigurationError: If items or options are invalid
        AssetSpecError: If an asset spec is invalid
    """
    resolved = coerce_options(options)
    base_dir: Path = resolve_base_dir(resolved.cwd)

    plans = []
    for item in coerce_items(items):
        layout = resolve_layout(item, base_dir, resolved.client_lib_root)
        plans.append(LibraryPlan(layout=layout, records=normalize_assets(layout.folder, item.assets)))
    return plans
