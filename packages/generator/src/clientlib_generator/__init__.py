"""Clientlib Generator - AEM clientlib folders from declarative library lists.

Version: 1.0.0

This package provides:
- Asset normalization (short/long mapping form and array form to one copy plan)
- Manifest writing (js.txt / css.txt in declared order)
- Descriptor writing (JSON beside the folder, .content.xml inside it)
- Idempotent regeneration (old output removed before each run)
- Sequential batch generation with first-failure abort
- JSON/YAML config file loading
"""

from clientlib_generator.batch import (
    BatchReport,
    LibraryPlan,
    build_plan,
    generate,
)
from clientlib_generator.descriptor import (
    render_json_descriptor,
    render_xml_descriptor,
    write_descriptor,
)
from clientlib_generator.eraser import remove_clientlib
from clientlib_generator.events import (
    EventKind,
    GenerationEvent,
    GenerationObserver,
    LoggingObserver,
    RecordingObserver,
)
from clientlib_generator.layout import LibraryLayout, resolve_layout
from clientlib_generator.loader import load_config
from clientlib_generator.manifest import render_asset_manifest, write_asset_manifest
from clientlib_generator.materializer import process_item
from clientlib_generator.models import (
    AssetFile,
    AssetGroup,
    AssetRecord,
    DescriptorFormat,
    FileMapping,
    GeneratorConfig,
    GeneratorOptions,
    LibraryItem,
    TypedAssetGroup,
)
from clientlib_generator.normalizer import normalize_assets
from clientlib_generator.probe import file_exists

__version__ = "1.0.0"

__all__ = [
    # Batch
    "generate",
    "build_plan",
    "BatchReport",
    "LibraryPlan",
    # Pipeline steps
    "process_item",
    "remove_clientlib",
    "file_exists",
    "normalize_assets",
    "render_asset_manifest",
    "write_asset_manifest",
    "render_json_descriptor",
    "render_xml_descriptor",
    "write_descriptor",
    "resolve_layout",
    "LibraryLayout",
    "load_config",
    # Events
    "EventKind",
    "GenerationEvent",
    "GenerationObserver",
    "LoggingObserver",
    "RecordingObserver",
    # Models
    "AssetFile",
    "AssetGroup",
    "AssetRecord",
    "DescriptorFormat",
    "FileMapping",
    "GeneratorConfig",
    "GeneratorOptions",
    "LibraryItem",
    "TypedAssetGroup",
]
