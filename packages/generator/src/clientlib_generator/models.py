"""Pydantic models for clientlib generation.

Raw input shapes (what callers and config files write):

- ``FileEntry``: a bare source path, or ``FileMapping{src, dest?}``
- ``AssetGroup``: long form ``{base, files}`` used as a mapping value
- ``TypedAssetGroup``: ``AssetGroup`` plus ``type``, used in the array form
- ``RawAssets``: either ``{type: [FileEntry] | AssetGroup}`` or
  ``[TypedAssetGroup]``

Normalized shapes (what the materializer consumes):

- ``AssetFile{src, dest}`` with ``dest`` fully resolved
- ``AssetRecord{type, base, files}``
"""

from enum import Enum
from pathlib import Path
from typing import Optional, Union

from clientlib_common import ConfigurationError, get_settings
from pydantic import BaseModel, ConfigDict, Field, ValidationError


class DescriptorFormat(str, Enum):
    """On-disk format of the clientlib config descriptor."""

    JSON = "json"
    XML = "xml"


class FileMapping(BaseModel):
    """Explicit source/destination pair inside an asset group."""

    src: str = Field(description="Source file or directory")
    dest: Optional[str] = Field(
        default=None,
        description="Path below the asset base folder (default: basename of src)",
    )


FileEntry = Union[str, FileMapping]


class AssetGroup(BaseModel):
    """Long-form asset group: files copied below ``base``."""

    base: str = Field(description="Subfolder of the clientlib the files are copied to")
    files: Optional[list[FileEntry]] = Field(default=None, description="Ordered file entries")


class TypedAssetGroup(AssetGroup):
    """Asset group carrying its own resource type (array form)."""

    type: str = Field(description="Resource type: js, css, or any other key")


RawAssets = Union[list[TypedAssetGroup], dict[str, Union[list[FileEntry], AssetGroup]]]


class AssetFile(BaseModel):
    """One entry of the copy plan."""

    src: str
    dest: Path


class AssetRecord(BaseModel):
    """Normalized asset group with fully resolved destinations.

    ``files`` is None when the raw group declared no file list.
    """

    type: str
    base: str
    files: Optional[list[AssetFile]] = None


class LibraryItem(BaseModel):
    """One clientlib to generate."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(min_length=1, description="Library name, folder name and category")
    path: Optional[str] = Field(default=None, description="Output root folder")
    embed: Optional[list[str]] = Field(default=None, description="Embedded library categories")
    dependencies: Optional[list[str]] = Field(default=None, description="Dependent library categories")
    mode: Optional[str] = Field(default=None, description="'json' for a JSON descriptor, else XML")
    assets: RawAssets = Field(default_factory=dict, description="Unnormalized asset specification")

    @property
    def descriptor_format(self) -> DescriptorFormat:
        return DescriptorFormat.JSON if self.mode == "json" else DescriptorFormat.XML


class GeneratorOptions(BaseModel):
    """Options shared by every item of a batch.

    ``cwd`` is the base directory relative paths resolve against. It is
    threaded through every operation; the process working directory is
    never changed.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    cwd: Optional[Path] = Field(default=None, description="Base directory for relative paths")
    client_lib_root: Optional[str] = Field(
        default=None,
        alias="clientLibRoot",
        description="Default output root for items without 'path'",
    )
    xml_legacy_dependencies: bool = Field(
        default=False,
        description="Write dependencies under a second 'embed' XML attribute",
    )


class GeneratorConfig(BaseModel):
    """Contents of a generator config file."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    libs: list[LibraryItem] = Field(default_factory=list)
    options: GeneratorOptions = Field(default_factory=GeneratorOptions)
    source: Optional[Path] = Field(default=None, description="File the config was loaded from")


def coerce_item(item: Union[LibraryItem, dict]) -> LibraryItem:
    """Validate a plain dict into a ``LibraryItem``.

    Raises:
        ConfigurationError: If ``item`` is not a valid library item
    """
    if isinstance(item, LibraryItem):
        return item
    try:
        return LibraryItem.model_validate(item)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid clientlib item: {e}") from e


def coerce_options(options: Union[GeneratorOptions, dict, None]) -> GeneratorOptions:
    """Validate generator options, filling unset fields from ``Settings``.

    Raises:
        ConfigurationError: If ``options`` is invalid
    """
    settings = get_settings()
    defaults = {
        "cwd": settings.clientlib_cwd,
        "client_lib_root": settings.clientlib_root,
        "xml_legacy_dependencies": settings.xml_legacy_dependencies,
    }
    try:
        if not isinstance(options, GeneratorOptions):
            options = GeneratorOptions.model_validate(options or {})
        return GeneratorOptions.model_validate({**defaults, **options.model_dump(exclude_unset=True)})
    except ValidationError as e:
        raise ConfigurationError(f"Invalid generator options: {e}") from e
