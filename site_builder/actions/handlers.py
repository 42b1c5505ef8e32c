"""
Registry des handlers custom fournis par l'hôte (éditeur, site publié).

Le resolver émet seulement `invoke` + nom ; c'est l'hôte qui dispatche ici.
Handler absent → no-op (l'effet est traité comme inert).
"""
import logging
from typing import Any, Callable, Dict, List

from .resolver import ActionEffect

log = logging.getLogger(__name__)

CustomHandler = Callable[..., Any]


class HandlerRegistry:
    """
    Map nom → callable, propriété de l'environnement hôte.

    Usage:
        >>> handlers = HandlerRegistry()
        >>> handlers.register("openChat", lambda **kw: ...)
        >>> handlers.dispatch(resolve(action, ctx), block_id="b1")
    """

    def __init__(self):
        self._handlers: Dict[str, CustomHandler] = {}

    def register(self, name: str, handler: CustomHandler) -> None:
        self._handlers[name] = handler

    def unregister(self, name: str) -> None:
        self._handlers.pop(name, None)

    def names(self) -> List[str]:
        return sorted(self._handlers)

    def __contains__(self, name: str) -> bool:
        return name in self._handlers

    def dispatch(self, effect: ActionEffect, **payload: Any) -> bool:
        """
        Exécute le handler d'un effet `invoke` (fire-and-forget).

        Returns:
            True si un handler a été appelé, False sinon (effet inert)
        """
        if effect.kind != "invoke":
            return False
        handler = self._handlers.get(effect.target)
        if handler is None:
            log.info("Handler custom %r non enregistré — action ignorée", effect.target)
            return False
        try:
            handler(**payload)
        except Exception:
            log.exception("Handler custom %r en échec", effect.target)
            return False
        return True
