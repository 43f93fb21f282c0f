"""Menu catalog."""
from typing import Dict, Iterator, Optional, Tuple
from order_assistant.services.menu.base import MenuCategory, MenuItem, MenuProvider


class MenuCatalog:
    """Read-only catalog of orderable items.

    Categories are loaded once from the provider and never mutated, so a
    single instance is shared by every request without locking.
    """

    def __init__(self, provider: MenuProvider):
        self.provider = provider
        self._categories: Tuple[MenuCategory, ...] = tuple(provider.load_categories())
        self._items_by_id: Dict[str, MenuItem] = {}
        for category in self._categories:
            for item in category.items:
                if item.id in self._items_by_id:
                    raise ValueError(f"Duplicate menu item id '{item.id}'")
                self._items_by_id[item.id] = item
        self._prompt_text = self._render()

    def list_categories(self) -> Tuple[MenuCategory, ...]:
        """Get the full ordered catalog."""
        return self._categories

    def iter_items(self) -> Iterator[MenuItem]:
        """Iterate over every item in catalog order."""
        for category in self._categories:
            yield from category.items

    def find_by_id(self, item_id: str) -> Optional[MenuItem]:
        """Get a menu item by identifier."""
        return self._items_by_id.get(item_id)

    def render_for_prompt(self) -> str:
        """Get the catalog as formatted text for LLM grounding."""
        return self._prompt_text

    def _render(self) -> str:
        blocks = []
        for category in self._categories:
            lines = [f"{category.title}:"]
            for item in category.items:
                size_str = f" | Size: {item.size.value}" if item.size else ""
                tags_str = f" | Tags: {', '.join(item.tags)}" if item.tags else ""
                lines.append(
                    f"- {item.name} (id: {item.id}){size_str} - ${item.price:.2f}: "
                    f"{item.description}{tags_str}"
                )
            blocks.append("\n".join(lines))
        return "\n\n".join(blocks)
