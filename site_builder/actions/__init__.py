"""Actions — résolution des descripteurs d'action + handlers custom de l'hôte."""
from .resolver import (
    INERT,
    ActionEffect,
    NavigationContext,
    action_from_link,
    resolve,
    resolve_props,
)
from .handlers import HandlerRegistry

__all__ = [
    "INERT",
    "ActionEffect",
    "NavigationContext",
    "action_from_link",
    "resolve",
    "resolve_props",
    "HandlerRegistry",
]
