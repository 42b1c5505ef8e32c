"""
Schémas Pydantic du site builder.
Structure : Site → SitePage → Block (→ children pour les conteneurs)

Format fil (stockage, pipeline de publication) en camelCase :
    {"id": "b1", "type": "button", "props": {...}, "order": 0}
Les clés inconnues sont conservées telles quelles au round-trip.
"""
import re
import unicodedata
import uuid
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base commune : alias camelCase + clés supplémentaires conservées."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


# ── Thème ───────────────────────────────────────────────────────────────────

class SiteTheme(BaseModel):
    """Tokens visuels du site. Immuable : un changement = remplacement complet."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    primary_color: str = "#3b82f6"
    secondary_color: str = "#64748b"
    accent_color: str = "#f59e0b"
    text_color: str = "#1e293b"
    background_color: str = "#ffffff"
    heading_font: str = "Inter, sans-serif"
    body_font: str = "Inter, sans-serif"
    border_radius: int = Field(default=8, ge=0)
    direction: Literal["ltr", "rtl"] = "ltr"


# ── Action ──────────────────────────────────────────────────────────────────

ACTION_TYPES = ("none", "page", "url", "section", "email", "phone", "download", "custom")


class ComponentAction(WireModel):
    """
    Descripteur d'action d'un bloc (bouton, lien, CTA…).
    Seuls les champs du `type` courant sont lus ; les autres (restes d'une
    sélection précédente) sont conservés mais ignorés.
    """
    type: str = "none"
    page_id: Optional[str] = None
    url: Optional[str] = None
    open_in_new_tab: bool = False
    section_id: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    file_url: Optional[str] = None
    custom_handler: Optional[str] = None


# ── Blocs / pages / site ────────────────────────────────────────────────────

def _new_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:10]}"


_NOT_SLUG = re.compile(r"[^a-z0-9]+")


def slugify(value: Any) -> str:
    """
    Segment d'URL publiable : [a-z0-9-] uniquement.
    "Nos Cafés" → "nos-cafes", "../../etc" → "etc", "" → "".
    """
    text = unicodedata.normalize("NFKD", str(value or "")).encode("ascii", "ignore").decode("ascii")
    return _NOT_SLUG.sub("-", text.lower()).strip("-")


class Block(WireModel):
    """Unité de contenu typée. `props` est un sac ouvert dont la forme dépend du type."""
    id: str = Field(default_factory=lambda: _new_id("blk"))
    type: str
    props: Dict[str, Any] = Field(default_factory=dict)
    order: int = 0
    label: Optional[str] = None
    children: List["Block"] = Field(default_factory=list)
    hidden: Dict[str, bool] = Field(default_factory=dict)

    def ordered_children(self) -> List["Block"]:
        return sorted(self.children, key=lambda b: b.order)

    def walk(self):
        """Parcours profondeur d'abord (bloc puis descendants)."""
        yield self
        for child in self.ordered_children():
            yield from child.walk()


class SitePage(WireModel):
    """Page = séquence ordonnée de blocs."""
    id: str = Field(default_factory=lambda: _new_id("page"))
    title: str = ""
    slug: str = ""
    is_home_page: bool = False
    order: int = 0
    blocks: List[Block] = Field(default_factory=list)

    def path_segment(self) -> str:
        """Segment de route de la page : slug normalisé, sinon id normalisé."""
        return slugify(self.slug) or slugify(self.id) or "page"

    def ordered_blocks(self) -> List[Block]:
        # sorted() est stable : à order égal, l'ordre de la liste est conservé
        return sorted(self.blocks, key=lambda b: b.order)

    def walk_blocks(self):
        for block in self.ordered_blocks():
            yield from block.walk()

    def find_block(self, block_id: str) -> Optional[Block]:
        for block in self.walk_blocks():
            if block.id == block_id:
                return block
        return None

    def anchors(self) -> set:
        """Ancres de la page : ids de blocs + props `anchorId` explicites."""
        found = set()
        for block in self.walk_blocks():
            found.add(block.id)
            anchor = block.props.get("anchorId")
            if isinstance(anchor, str) and anchor:
                found.add(anchor)
        return found


class Site(WireModel):
    """Collection de pages + thème."""
    id: str = Field(default_factory=lambda: _new_id("site"))
    name: str = ""
    theme: SiteTheme = Field(default_factory=SiteTheme)
    pages: List[SitePage] = Field(default_factory=list)

    def ordered_pages(self) -> List[SitePage]:
        return sorted(self.pages, key=lambda p: p.order)

    def page(self, page_id: str) -> Optional[SitePage]:
        for page in self.pages:
            if page.id == page_id:
                return page
        return None

    def home_page(self) -> Optional[SitePage]:
        """
        Page d'accueil déterministe : la première page marquée `is_home_page`
        dans l'ordre de collection ; à défaut la première page.
        """
        pages = self.ordered_pages()
        for page in pages:
            if page.is_home_page:
                return page
        return pages[0] if pages else None

    def route_for(self, page: SitePage) -> str:
        home = self.home_page()
        if home is not None and page.id == home.id:
            return "/"
        return f"/{page.path_segment()}/"


Block.model_rebuild()
