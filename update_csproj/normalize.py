"""
Core patching logic for a single project descriptor.

Responsibilities:
- encoding detection + decoding
- minimal shape validation (Project root, Sdk attribute, PropertyGroup)
- TargetFramework / DebugType / LangVersion normalization
- indented, declaration-free write-back in place
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from charset_normalizer import from_bytes
from lxml import etree

from .exceptions import DescriptorDecodeError, DescriptorParseError
from .logging import get_logger, log_event
from .models import ProjectFileError
from .rules import (
    DEBUG_TYPE,
    LANG_VERSION,
    LEGACY_FRAMEWORK_MARKER,
    TARGET_ENCODING,
    TARGET_FRAMEWORK,
)

logger = get_logger("normalize")


def decode_descriptor(raw: bytes, path: Path) -> str:
    """
    Decode descriptor bytes to text.

    Rules:
    - UTF-8 (with or without BOM) is tried first; it's what project files
      are written in almost always, and a short file is easy to misdetect.
    - Otherwise detect the encoding best-effort via charset-normalizer.
    - If nothing decodes, raise DescriptorDecodeError.
    """
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        pass

    detected = None
    match = from_bytes(raw).best()
    if match is not None:
        detected = match.encoding

    if detected is None:
        raise DescriptorDecodeError(path, "no detected encoding")

    try:
        return raw.decode(detected)
    except (UnicodeDecodeError, LookupError):
        raise DescriptorDecodeError(path, detected) from None


def parse_descriptor(text: str, path: Path) -> etree._ElementTree:
    """
    Parse decoded text into a whole document.

    Comments and processing instructions on both sides of the root are kept,
    and so are namespace prefixes. Blank text is dropped so the tree can be
    re-indented on the way out. The text is handed to libxml2 as UTF-8, which
    overrides whatever encoding the declaration claims.
    """
    parser = etree.XMLParser(encoding="utf-8", remove_blank_text=True, resolve_entities=False)
    try:
        root = etree.fromstring(text.encode("utf-8"), parser=parser)
    except etree.XMLSyntaxError as exc:
        raise DescriptorParseError(path, str(exc)) from exc
    return root.getroottree()


def load_descriptor(path: Path) -> etree._ElementTree:
    with open(path, "rb") as handle:
        raw = handle.read()
    return parse_descriptor(decode_descriptor(raw, path), path)


def validate_descriptor(tree: etree._ElementTree) -> tuple[ProjectFileError, Optional[etree._Element]]:
    """Return the validation outcome and, when valid, the PropertyGroup to patch."""
    root = tree.getroot()

    if etree.QName(root).localname != "Project":
        return ProjectFileError.NO_PROJECT_ROOT, None

    if "Sdk" not in root.attrib:
        return ProjectFileError.NO_SDK_ATTRIBUTE, None

    group = root.find(".//PropertyGroup")
    if group is None:
        return ProjectFileError.NO_PROPERTY_GROUP, None

    return ProjectFileError.NONE, group


def _field_value(element: etree._Element) -> str:
    return "".join(element.itertext())


def _set_field_value(element: etree._Element, value: str) -> None:
    for child in list(element):
        element.remove(child)
    element.text = value


def _ensure_field(group: etree._Element, name: str, value: str) -> None:
    element = group.find(name)
    if element is None:
        etree.SubElement(group, name).text = value
    else:
        _set_field_value(element, value)


def normalize_property_group(group: etree._Element) -> None:
    """
    Apply the three field edits to ``group``.

    Order matters for newly created fields: TargetFramework, DebugType,
    LangVersion.
    """
    framework = group.find("TargetFramework")
    if framework is None:
        etree.SubElement(group, "TargetFramework").text = TARGET_FRAMEWORK
    elif LEGACY_FRAMEWORK_MARKER in _field_value(framework).lower():
        # net5+ stays as-is
        _set_field_value(framework, TARGET_FRAMEWORK)

    _ensure_field(group, "DebugType", DEBUG_TYPE)
    _ensure_field(group, "LangVersion", LANG_VERSION)


def serialize_descriptor(tree: etree._ElementTree) -> bytes:
    """Indented markup with no XML declaration, encoded as UTF-8 with BOM."""
    text = etree.tostring(tree, encoding="unicode", pretty_print=True)
    return text.encode(TARGET_ENCODING)


def update_csproj_file(path: Path) -> ProjectFileError:
    """
    Load, validate and normalize one descriptor, rewriting it in place.

    The four validation outcomes are returned. Decode, parse and I/O failures
    raise and are meant to end the run.
    """
    path = Path(path)
    tree = load_descriptor(path)

    outcome, group = validate_descriptor(tree)
    if group is None:
        log_event(logger, "patch.skipped", {"path": str(path), "outcome": outcome.value})
        return outcome

    normalize_property_group(group)
    data = serialize_descriptor(tree)

    with open(path, "wb") as handle:
        handle.write(data)

    log_event(logger, "patch.updated", {"path": str(path), "bytes": len(data)})
    return ProjectFileError.NONE
