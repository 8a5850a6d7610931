"""
Panel Records - Immutable searchable representation of authored panels.

Built once when the content is initialised. Each panel pairs its raw
entry values with the shared property descriptors by index and caches
the case-folded searchable corpus (keywords plus the plain text of every
searchable entry). Only `visible` and `background_alternate` change
afterwards, and only the filter controller changes them.
"""

from dataclasses import dataclass, field
from typing import Optional

from loguru import logger

from infowall.utils.helpers import html_to_text

# Query words never contain a newline, so joining with one keeps an exact
# match from spanning two entries.
CORPUS_SEPARATOR = "\n"


@dataclass(frozen=True)
class Styling:
    """Label styling declared by a property."""
    bold: bool = False
    italic: bool = False


@dataclass(frozen=True)
class PropertyDescriptor:
    """One column of the schema, shared by reference across all panels."""
    label: Optional[str] = None
    searchable: bool = False
    styling: Styling = field(default_factory=Styling)
    show_label: bool = False

    @classmethod
    def from_params(cls, params) -> "PropertyDescriptor":
        """Build a descriptor from one authored property dict."""
        if not isinstance(params, dict):
            logger.warning(f"Skipping malformed property definition: {params!r}")
            return cls()

        styling = params.get("styling") or {}
        if not isinstance(styling, dict):
            styling = {}

        label = params.get("label")
        return cls(
            label=label if isinstance(label, str) else None,
            searchable=bool(params.get("search_in_property", False)),
            styling=Styling(
                bold=bool(styling.get("bold", False)),
                italic=bool(styling.get("italic", False)),
            ),
            show_label=bool(params.get("show_label", False)),
        )


@dataclass(frozen=True)
class Entry:
    """One text cell inside a panel."""
    text: str = ""
    label: Optional[str] = None
    searchable: bool = False
    styling: Styling = field(default_factory=Styling)
    plain_text: str = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # Entry text with markup stripped and entities decoded
        object.__setattr__(self, "plain_text", html_to_text(self.text))

    @classmethod
    def from_descriptor(cls, descriptor: PropertyDescriptor, text: str) -> "Entry":
        return cls(
            text=text,
            label=descriptor.label if descriptor.show_label else None,
            searchable=descriptor.searchable,
            styling=descriptor.styling,
        )

    @property
    def is_empty(self) -> bool:
        return self.plain_text.strip() == ""


@dataclass(frozen=True)
class ImageRef:
    """Image shown beside a panel's entries."""
    path: str
    alt: str = ""
    title: str = ""


@dataclass(eq=False)
class PanelRecord:
    """
    The unit of display and filtering.

    Attributes:
        entries: Entries in property order (empty ones included)
        keywords: Free-text tags that are searched but never displayed
        image: Optional image reference
        visible: Current visibility, owned by the filter controller
        background_alternate: Alternating background flag for visible panels
    """
    entries: tuple[Entry, ...] = ()
    keywords: Optional[str] = None
    image: Optional[ImageRef] = None
    visible: bool = True
    background_alternate: bool = False
    corpus: str = field(init=False, repr=False)

    def __post_init__(self):
        parts = []
        if self.keywords:
            parts.append(self.keywords)
        parts.extend(entry.plain_text for entry in self.entries if entry.searchable)
        self.corpus = CORPUS_SEPARATOR.join(parts).casefold()

    @property
    def displayed_entries(self) -> list[Entry]:
        """Entries with visible text, in property order."""
        return [entry for entry in self.entries if not entry.is_empty]

    def a11y_summary(self, image_label: str = "Image") -> str:
        """
        Plain-text summary read out by assistive technology.

        Example:
            "Name: Ada Lovelace. Born: 1815. Image: Portrait."
        """
        segments = []
        for entry in self.displayed_entries:
            if entry.label:
                label = html_to_text(entry.label).replace("\n", "")
                segments.append(f"{label}:")
            text = entry.plain_text.replace("\n", "")
            segments.append(f"{text}.")

        if self.image and self.image.alt:
            segments.append(f"{image_label}: {self.image.alt}.")

        return " ".join(segments)


def _image_from_params(params) -> Optional[ImageRef]:
    """Convert an authored image dict to an ImageRef, None if no file is set."""
    if not isinstance(params, dict) or not params.get("path"):
        return None
    return ImageRef(
        path=str(params["path"]),
        alt=str(params.get("alt") or ""),
        title=str(params.get("title") or ""),
    )


def _raw_values(panel_params) -> list[str]:
    """Read a panel's raw entry values, normalising anything unexpected to text."""
    values = panel_params.get("entries") if isinstance(panel_params, dict) else None
    if not isinstance(values, list):
        return []
    return [value if isinstance(value, str) else "" for value in values]


def build_panels(
    properties: list,
    panels: list,
    fallback_image: Optional[dict] = None,
) -> list[PanelRecord]:
    """
    Build panel records from authoring parameters.

    Entries are paired with property descriptors by index. Missing values
    become empty entries, values without a descriptor are ignored, and
    panels without any non-empty entry are dropped entirely.

    Args:
        properties: Authored property definitions (the schema)
        panels: Authored panels, each with "entries", "keywords" and "image"
        fallback_image: Image used by panels that have none of their own

    Returns:
        Panel records in authoring order
    """
    descriptors = [PropertyDescriptor.from_params(p) for p in properties or []]
    fallback = _image_from_params(fallback_image)

    records = []
    for index, panel_params in enumerate(panels or []):
        values = _raw_values(panel_params)
        if len(values) > len(descriptors):
            logger.warning(
                f"Panel {index} has {len(values)} values for {len(descriptors)} properties, "
                "ignoring the extra values"
            )

        entries = tuple(
            Entry.from_descriptor(descriptor, values[i] if i < len(values) else "")
            for i, descriptor in enumerate(descriptors)
        )
        if all(entry.is_empty for entry in entries):
            logger.debug(f"Dropping panel {index}: no entries")
            continue

        params = panel_params if isinstance(panel_params, dict) else {}
        keywords = params.get("keywords")
        records.append(PanelRecord(
            entries=entries,
            keywords=keywords if isinstance(keywords, str) and keywords.strip() else None,
            image=_image_from_params(params.get("image")) or fallback,
        ))

    return records
