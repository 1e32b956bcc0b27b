"""Clientlib config descriptors.

JSON: ``<root>/<name>.json``, beside the library folder.
XML: ``<root>/<name>/.content.xml``, inside the library folder.

Both are rewritten in full on every run.

The XML dependency list is written as a ``dependencies`` attribute by
default. Older generator releases emitted it as a second ``embed``
attribute, which made the document malformed and hid the embed list;
pass ``legacy_dependencies=True`` (or set ``XML_LEGACY_DEPENDENCIES``)
to reproduce that output.
"""

import json
from pathlib import Path
from xml.sax.saxutils import quoteattr

from clientlib_generator.layout import LibraryLayout
from clientlib_generator.models import DescriptorFormat, LibraryItem

PRIMARY_TYPE = "cq:ClientLibraryFolder"

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
XML_NAMESPACES = 'xmlns:cq="http://www.day.com/jcr/cq/1.0" xmlns:jcr="http://www.jcp.org/jcr/1.0"'


def descriptor_content(item: LibraryItem) -> dict:
    """Descriptor fields in output order. Absent lists are left out."""
    content: dict = {
        "jcr:primaryType": PRIMARY_TYPE,
        "categories": [item.name],
    }
    if item.embed is not None:
        content["embed"] = list(item.embed)
    if item.dependencies is not None:
        content["dependencies"] = list(item.dependencies)
    return content


def render_json_descriptor(item: LibraryItem) -> str:
    """Pretty-printed (2-space) JSON descriptor with trailing newline."""
    return json.dumps(descriptor_content(item), indent=2, ensure_ascii=False) + "\n"


def _xml_list(values: list[str]) -> str:
    return "[" + ",".join(values) + "]"


def render_xml_descriptor(item: LibraryItem, legacy_dependencies: bool = False) -> str:
    """Single-line ``.content.xml`` with descriptor fields as attributes.

    Args:
        item: Library item
        legacy_dependencies: Write the dependency list under a second
            ``embed`` attribute, matching older generator releases

    Returns:
        XML document text
    """
    attributes = [
        ("jcr:primaryType", PRIMARY_TYPE),
        ("categories", _xml_list([item.name])),
    ]
    if item.embed is not None:
        attributes.append(("embed", _xml_list(item.embed)))
    if item.dependencies is not None:
        key = "embed" if legacy_dependencies else "dependencies"
        attributes.append((key, _xml_list(item.dependencies)))

    rendered = " ".join(f"{key}={quoteattr(value)}" for key, value in attributes)
    return f"{XML_DECLARATION}<jcr:root {XML_NAMESPACES} {rendered}/>"


def write_descriptor(
    item: LibraryItem,
    layout: LibraryLayout,
    legacy_dependencies: bool = False,
) -> Path:
    """Write the descriptor selected by ``item.mode``.

    The library folder must already exist for the XML variant.

    Returns:
        Path of the written descriptor
    """
    if layout.descriptor_format is DescriptorFormat.JSON:
        content = render_json_descriptor(item)
    else:
        content = render_xml_descriptor(item, legacy_dependencies)

    layout.descriptor.write_text(content, encoding="utf-8")
    return layout.descriptor
