"""
Application des PatchEvent au modèle de page (côté appelant).

Le moteur n'écrit jamais dans le modèle : il émet des patchs, l'éditeur les
applique ici dans l'ordre de commit (le dernier commit gagne).
"""
import copy
import logging
from typing import Iterable

from ..core.schemas import Site, SitePage
from .session import PatchEvent

log = logging.getLogger(__name__)


def apply_patch(page: SitePage, patch: PatchEvent) -> bool:
    """Écrit props[prop_key] = new_value sur le bloc ciblé. False si bloc introuvable."""
    block = page.find_block(patch.block_id)
    if block is None:
        log.warning("Patch ignoré : bloc %r absent de la page %r", patch.block_id, page.id)
        return False
    block.props[patch.prop_key] = copy.deepcopy(patch.new_value)
    return True


def apply_patches(page: SitePage, patches: Iterable[PatchEvent]) -> int:
    """Applique une suite de patchs dans l'ordre ; retourne le nombre appliqué."""
    return sum(1 for patch in patches if apply_patch(page, patch))


def apply_site_patch(site: Site, patch: PatchEvent) -> bool:
    """Variante site : cherche le bloc dans toutes les pages."""
    for page in site.pages:
        if page.find_block(patch.block_id) is not None:
            return apply_patch(page, patch)
    log.warning("Patch ignoré : bloc %r absent du site %r", patch.block_id, site.id)
    return False
