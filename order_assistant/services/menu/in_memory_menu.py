"""In-memory menu provider."""
import logging
import yaml
from pathlib import Path
from typing import List, Optional
from order_assistant.services.menu.base import MenuCategory, MenuProvider

logger = logging.getLogger(__name__)


class InMemoryMenuProvider(MenuProvider):
    """In-memory menu provider using YAML configuration."""

    def __init__(self, menu_file: Optional[str] = None):
        """Initialize with optional menu file path."""
        if menu_file is None:
            menu_file = Path(__file__).parent / "data" / "menu.yaml"
        self.menu_file = Path(menu_file)

    def load_categories(self) -> List[MenuCategory]:
        """Load categories from the YAML file."""
        with open(self.menu_file, "r") as f:
            data = yaml.safe_load(f) or {}

        categories = [
            MenuCategory(**category) for category in data.get("categories", [])
        ]
        logger.info(
            f"[MENU] Loaded {len(categories)} categories, "
            f"{sum(len(c.items) for c in categories)} items from {self.menu_file}"
        )
        return categories
