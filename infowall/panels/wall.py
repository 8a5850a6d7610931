"""
Wall Panel - Window showing the titlebar, panel cards and messages.

Features:
- Header text and optional filter entry in the titlebar
- One card per panel, hidden/shown by the filter controller
- Alternating background over visible cards
- "No matches" / "no entries" message
- Live region label that receives visibility announcements
- Escape clears the filter, a second Escape closes the window
"""

from ignis import widgets
from gi.repository import Gdk, Gtk

from infowall.panels.card import build_card
from infowall.services.content import InfoWallContent

BACKGROUND_CLASS = "wall-background"


class WallPanel:
    """
    Rendering adapter for an InfoWallContent.

    Implements the PanelRenderer interface used by the filter controller.
    """

    def __init__(self, content: InfoWallContent):
        self.content = content

        # Widgets (created in create_window)
        self.search_entry = None
        self.message_label = None
        self.live_region = None
        self.cards = []

    def create_window(self):
        """
        Create the wall window.

        Returns:
            widgets.Window anchored to all edges
        """
        self.message_label = widgets.Label(
            css_classes=["wall-message"],
            wrap=True,
            visible=False,
        )

        # Accessible role is construct-only, so build the Gtk.Label directly
        self.live_region = Gtk.Label(label="", accessible_role=Gtk.AccessibleRole.STATUS)
        self.live_region.add_css_class("wall-live-region")

        self.cards = [
            build_card(record, self.content.image_size, self.content.image_label)
            for record in self.content.panels
        ]

        cards_box = widgets.Box(
            vertical=True,
            spacing=8,
            css_classes=["wall-panels"],
            child=self.cards,
        )

        window = widgets.Window(
            namespace="infowall",
            anchor=["top", "bottom", "left", "right"],
            exclusivity="normal",
            kb_mode="on_demand",
            layer="top",
            child=widgets.Box(
                vertical=True,
                css_classes=["wall"],
                child=[
                    self._create_titlebar(),
                    self.message_label,
                    widgets.Scroll(
                        vexpand=True,
                        hexpand=True,
                        child=cards_box,
                    ),
                    self.live_region,
                ],
            ),
        )

        key_controller = Gtk.EventControllerKey()
        key_controller.connect("key-pressed", self._on_key_press)
        window.add_controller(key_controller)
        window.connect("close-request", self._on_close_request)

        if self.content.message:
            self._show_message(self.content.message)

        self.content.bind(self, self._set_live_text)
        return window

    def _create_titlebar(self):
        """Header label plus the filter entry when it is offered."""
        children = []
        if self.content.header:
            children.append(widgets.Label(
                label=self.content.header,
                css_classes=["wall-header"],
                halign="start",
                hexpand=True,
            ))

        if self.content.offer_filter_field:
            self.search_entry = widgets.Entry(
                placeholder_text=self.content.search_hint,
                css_classes=["wall-search-entry"],
                on_change=lambda x: self.content.on_query_changed(self.search_entry.text),
            )
            self.search_entry.update_property(
                [Gtk.AccessibleProperty.LABEL], [self.content.search_hint]
            )
            children.append(widgets.Icon(image="system-search-symbolic", pixel_size=16))
            children.append(self.search_entry)

        return widgets.Box(spacing=8, css_classes=["wall-titlebar"], child=children)

    # PanelRenderer

    def set_visible(self, index: int, visible: bool) -> None:
        self.cards[index].set_visible(visible)

    def set_background_alternate(self, index: int, state: bool) -> None:
        if state:
            self.cards[index].add_css_class(BACKGROUND_CLASS)
        else:
            self.cards[index].remove_css_class(BACKGROUND_CLASS)

    def set_no_matches_message(self, active: bool, query_text: str) -> None:
        if active:
            self._show_message(self.content.no_matches_message(query_text))
        else:
            self.message_label.set_visible(False)

    def _show_message(self, text: str) -> None:
        self.message_label.set_label(text)
        self.message_label.set_visible(True)

    def _set_live_text(self, text: str) -> None:
        self.live_region.set_label(text)
        if text and hasattr(self.live_region, "announce"):
            # GTK >= 4.14
            self.live_region.announce(text, Gtk.AccessibleAnnouncementPriority.MEDIUM)

    def _on_key_press(self, controller, keyval, keycode, state):
        """Escape clears a non-empty filter first, then closes the window."""
        if keyval != Gdk.KEY_Escape:
            return False

        if self.search_entry is not None and self.search_entry.text:
            self.search_entry.set_text("")
            return True

        controller.get_widget().close()
        return True

    def _on_close_request(self, window):
        self.content.teardown()
        return False
