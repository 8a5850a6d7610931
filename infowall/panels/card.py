"""
Panel Card - Widget for one panel record.

Layout: entries grid (label column + text column) beside a fixed-size
image box. Unlabelled entries span both columns.
"""

from ignis import widgets
from gi.repository import Gtk

from infowall.search.records import Entry, PanelRecord
from infowall.utils.helpers import aspect_fit, html_to_text, read_image_size


def _entry_label(entry: Entry):
    css_classes = ["entry-label"]
    if entry.styling.bold:
        css_classes.append("bold")
    if entry.styling.italic:
        css_classes.append("italic")
    return widgets.Label(
        label=html_to_text(entry.label),
        css_classes=css_classes,
        halign="start",
        valign="start",
        xalign=0,
    )


def _entry_text(entry: Entry):
    return widgets.Label(
        label=entry.plain_text,
        css_classes=["entry-text"],
        halign="start",
        xalign=0,
        wrap=True,
    )


def _build_entries(record: PanelRecord) -> Gtk.Grid:
    grid = Gtk.Grid(column_spacing=12, row_spacing=4, hexpand=True)
    grid.add_css_class("panel-entries")

    for row, entry in enumerate(record.displayed_entries):
        if entry.label:
            grid.attach(_entry_label(entry), 0, row, 1, 1)
            grid.attach(_entry_text(entry), 1, row, 1, 1)
        else:
            grid.attach(_entry_text(entry), 0, row, 2, 1)

    return grid


def _build_image(record: PanelRecord, image_size: tuple[int, int]):
    """Fixed-size image box, kept even without an image for a uniform layout."""
    box_width, box_height = image_size
    wrapper = widgets.Box(
        css_classes=["panel-image-wrapper"],
        width_request=box_width,
        height_request=box_height,
        halign="center",
        valign="center",
    )

    if record.image is None:
        return wrapper

    natural = read_image_size(record.image.path)
    if natural is None:
        return wrapper

    width, height = aspect_fit(natural[0], natural[1], box_width, box_height)
    picture = widgets.Picture(
        image=record.image.path,
        width=width,
        height=height,
        css_classes=["panel-image"],
        tooltip_text=record.image.title or None,
    )
    if record.image.alt:
        picture.set_alternative_text(record.image.alt)
    wrapper.append(picture)
    return wrapper


def build_card(record: PanelRecord, image_size: tuple[int, int], image_label: str = "Image"):
    """
    Create the card widget for a panel.

    Args:
        record: Panel record to display
        image_size: (width, height) of the image box in pixels
        image_label: Localised word used in the accessible summary

    Returns:
        widgets.Box with the entries and image
    """
    card = widgets.Box(
        spacing=16,
        css_classes=["wall-panel"],
        child=[
            _build_entries(record),
            _build_image(record, image_size),
        ],
    )
    card.update_property([Gtk.AccessibleProperty.DESCRIPTION], [record.a11y_summary(image_label)])
    return card
