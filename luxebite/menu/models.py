from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    appetizers = "appetizers"
    mains = "mains"
    desserts = "desserts"
    chefs_selection = "chefs-selection"


class Mood(str, Enum):
    romantic = "romantic"
    indulgent = "indulgent"
    light = "light"
    adventurous = "adventurous"


class MenuEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    description: str
    price: int = Field(..., ge=0)
    category: Category
    moods: tuple[Mood, ...] = Field(..., min_length=1)
    image: str | None = None
    pairing: str | None = None
    dietary: tuple[str, ...] = ()
    featured: bool = False

    @property
    def primary_mood(self) -> Mood:
        return self.moods[0]


class FilterOption(BaseModel):
    id: str
    name: str


class MenuMetadata(BaseModel):
    categories: list[FilterOption]
    moods: list[FilterOption]
