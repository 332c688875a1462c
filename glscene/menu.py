"""A game menu: a ring of selectable, coloured items."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from glscene.circularlist import CircularDoubleLinkedList, CircularNode
from glscene.color import Color

DEFAULT_MENU_ITEM_WIDTH = 0.7
DEFAULT_MENU_ITEM_HEIGHT = 0.15

UNSELECTED_RGB = (255, 255, 255)
SELECTED_RGB = (37, 134, 255)


@dataclass
class MenuItem:
    """One labelled menu entry with a colour for each selection state."""

    label: str
    x: float = 0.0
    y: float = 0.0
    vao_id: int = 0
    selected: bool = False
    unselected_color: Color = field(default_factory=lambda: Color.from_rgb(*UNSELECTED_RGB))
    selected_color: Color = field(default_factory=lambda: Color.from_rgb(*SELECTED_RGB))

    @property
    def location(self) -> tuple[float, float]:
        return (self.x, self.y)

    def set_color(self, selected: bool, red: int, green: int, blue: int) -> None:
        """Set the 0..255 colour used when the item is (un)selected."""
        if selected:
            self.selected_color.set_color_rgb(red, green, blue)
        else:
            self.unselected_color.set_color_rgb(red, green, blue)

    def color(self) -> Color:
        """Return the colour matching the current selection state."""
        return self.selected_color if self.selected else self.unselected_color


class GameMenu:
    """Menu items kept in a circular list so selection wraps around."""

    def __init__(self) -> None:
        self.active = False
        self.initialized = False
        self.item_width = DEFAULT_MENU_ITEM_WIDTH
        self.item_height = DEFAULT_MENU_ITEM_HEIGHT
        self.shader_program_id = 0
        self.texture_object_id = 0
        self._items = CircularDoubleLinkedList()

    def add_menu_item(self, label: str, x: float, y: float, vao_id: int) -> MenuItem:
        """Append an item; the first item added starts out selected."""
        item = MenuItem(label, x, y, vao_id)
        if self._items.is_empty():
            item.selected = True
        self._items.append(item)
        self.initialized = True
        return item

    def _selected_node(self) -> tuple[int, CircularNode | None]:
        nodes = list(self._items.nodes())
        if len(nodes) == 1:
            # A single item counts as selected whatever its flag says.
            return 1, nodes[0]
        for number, node in enumerate(nodes, start=1):
            if node.data is not None and node.data.selected:
                return number, node
        return -1, None

    def selected_item_number(self) -> int:
        """Return the 1-based position of the selected item, or -1."""
        return self._selected_node()[0]

    def selected_item(self) -> MenuItem | None:
        """Return the selected item, or None if nothing is selected."""
        node = self._selected_node()[1]
        return None if node is None else node.data

    def select_menu_item(self, next_item: bool) -> None:
        """Move the selection to the next or previous item, wrapping around."""
        node = self._selected_node()[1]
        if node is None:
            return
        node.data.selected = False
        target = node.next if next_item else node.prev
        if target.data is not None:
            target.data.selected = True

    def items(self) -> Iterator[MenuItem]:
        """Yield the items in the order they were added."""
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)