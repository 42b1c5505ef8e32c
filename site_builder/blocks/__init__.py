"""
Renderers de blocs — l'import de ce package enregistre tous les types
dans la table du dispatcher (site_builder.renderer.registry).
"""
from . import business, commerce, content, hero, interactive, layout, media, navigation, widgets  # noqa: F401
