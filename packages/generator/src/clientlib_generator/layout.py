"""Output path derivation for one library item."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from clientlib_common import ConfigurationError

from clientlib_generator.models import DescriptorFormat, LibraryItem


@dataclass(frozen=True)
class LibraryLayout:
    """Resolved on-disk locations of one clientlib.

    The JSON descriptor sits beside the library folder, the XML
    descriptor (``.content.xml``) inside it.
    """

    name: str
    root: Path
    folder: Path
    json_descriptor: Path
    xml_descriptor: Path
    descriptor_format: DescriptorFormat

    @property
    def descriptor(self) -> Path:
        if self.descriptor_format is DescriptorFormat.JSON:
            return self.json_descriptor
        return self.xml_descriptor


def resolve_base_dir(base_dir: Optional[Union[str, Path]]) -> Path:
    """Return ``base_dir`` as an absolute path (default: current directory)."""
    if base_dir is None:
        return Path.cwd()
    return Path(base_dir).expanduser().absolute()


def resolve_layout(
    item: LibraryItem,
    base_dir: Optional[Union[str, Path]] = None,
    clientlib_root: Optional[Union[str, Path]] = None,
) -> LibraryLayout:
    """Compute where ``item`` is generated.

    ``item.path`` wins over ``clientlib_root``; relative roots resolve
    against ``base_dir``. The item itself is not modified.

    Raises:
        ConfigurationError: If neither ``item.path`` nor ``clientlib_root`` is set
    """
    raw_root = item.path if item.path else clientlib_root
    if not raw_root:
        raise ConfigurationError(
            f"No output path for clientlib '{item.name}': set 'path' or 'clientLibRoot'"
        )

    root = resolve_base_dir(base_dir) / Path(raw_root).expanduser()
    folder = root / item.name
    return LibraryLayout(
        name=item.name,
        root=root,
        folder=folder,
        json_descriptor=root / f"{item.name}.json",
        xml_descriptor=folder / ".content.xml",
        descriptor_format=item.descriptor_format,
    )
