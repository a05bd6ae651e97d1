from __future__ import annotations

from collections.abc import Iterable

from .data import CATEGORY_LABELS, MENU_ENTRIES, MOOD_LABELS
from .models import Category, FilterOption, MenuEntry, MenuMetadata, Mood

ALL_CATEGORIES = "all"


class MenuCatalog:
    """Read-only, order-preserving view over the menu entries.

    Every query returns a new list in definition order; lookups that miss
    return ``None`` or an empty list rather than raising.
    """

    def __init__(self, entries: Iterable[MenuEntry]) -> None:
        self._entries: tuple[MenuEntry, ...] = tuple(entries)
        self._by_id: dict[str, MenuEntry] = {}
        for entry in self._entries:
            if entry.id in self._by_id:
                raise ValueError(f"Duplicate menu entry id: {entry.id}")
            self._by_id[entry.id] = entry

    def __len__(self) -> int:
        return len(self._entries)

    def get_all(self) -> list[MenuEntry]:
        return list(self._entries)

    def get_by_id(self, entry_id: str) -> MenuEntry | None:
        return self._by_id.get(entry_id)

    def get_by_category(self, category: Category | str) -> list[MenuEntry]:
        if category == ALL_CATEGORIES:
            return self.get_all()
        return [e for e in self._entries if e.category == category]

    def get_by_mood(self, mood: Mood | str) -> list[MenuEntry]:
        return [e for e in self._entries if mood in e.moods]

    def get_featured(self) -> list[MenuEntry]:
        return [e for e in self._entries if e.featured]

    def price_range(self) -> tuple[int, int]:
        """Return ``(lowest, highest)`` price, or ``(0, 0)`` for an empty catalog."""
        if not self._entries:
            return 0, 0
        prices = [e.price for e in self._entries]
        return min(prices), max(prices)


def get_menu_metadata() -> MenuMetadata:
    return MenuMetadata(
        categories=[FilterOption(id=i, name=n) for i, n in CATEGORY_LABELS],
        moods=[FilterOption(id=i, name=n) for i, n in MOOD_LABELS],
    )


_catalog: MenuCatalog | None = None


def get_catalog() -> MenuCatalog:
    """Return the process-wide menu catalog, building it on first call."""
    global _catalog
    if _catalog is None:
        _catalog = MenuCatalog(MenuEntry(**raw) for raw in MENU_ENTRIES)
    return _catalog
