"""Menu models and provider interface."""
from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field


class PizzaSize(str, Enum):
    """Size classifier for pies and slices."""

    SLICE = "slice"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    TAVERN = "tavern"

    def __str__(self) -> str:
        return self.value


class MenuItem(BaseModel):
    """Orderable menu item."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    description: str
    price: float = Field(ge=0)
    size: Optional[PizzaSize] = None
    tags: Tuple[str, ...] = ()


class MenuCategory(BaseModel):
    """Titled group of menu items."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    title: str
    items: Tuple[MenuItem, ...] = ()


class MenuProvider(ABC):
    """Abstract base class for menu providers."""

    @abstractmethod
    def load_categories(self) -> List[MenuCategory]:
        """Load the full ordered list of categories."""
        pass
