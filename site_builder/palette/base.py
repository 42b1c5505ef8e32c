"""PaletteItem — entrée du catalogue : type de bloc + props par défaut."""
from typing import Any, Dict, Literal

from pydantic import BaseModel, Field

Category = Literal[
    "navigation", "hero", "layout", "content", "media",
    "business", "interactive", "ecommerce", "widgets",
]


class PaletteItem(BaseModel):
    type: str
    label: str
    category: Category
    description: str = ""
    default_props: Dict[str, Any] = Field(default_factory=dict)
