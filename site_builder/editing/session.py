"""
Edit-session binder — édition en place dans le canvas.

Cycle de vie d'un champ : idle → focused → (committed | abandoned) → idle.
Un commit avec valeur modifiée émet exactement un PatchEvent
{block_id, prop_key, new_value} ; valeur inchangée → rien.
Abandon (navigation sans commit) → valeur en attente perdue, bloc intact.
Pas d'autosave à la frappe : `input()` ne fait que mémoriser la valeur.

Les collections (lignes de timeline, de tableau, items FAQ…) émettent un
remplacement complet de la prop à chaque opération de ligne.
"""
import copy
import logging
from typing import Any, Callable, Dict, List, Literal, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict

log = logging.getLogger(__name__)

FieldState = Literal["idle", "focused", "committed", "abandoned"]

_UNSET = object()


class EditSessionError(ValueError):
    """Transition invalide d'une session d'édition (commit sans focus, etc.)."""


class PatchEvent(BaseModel):
    """Intention de mutation émise par le moteur ; l'appelant l'applique au modèle."""
    model_config = ConfigDict(frozen=True)

    block_id: str
    prop_key: str
    new_value: Any = None


# ── Bindings ────────────────────────────────────────────────────────────────

class FieldBinding:
    """Champ éditable simple : props[prop_key] d'un bloc."""

    def __init__(self, binder: "EditSessionBinder", block_id: str, prop_key: str, value: Any):
        self._binder = binder
        self.block_id = block_id
        self.prop_key = prop_key
        self.value = value

    @property
    def binder(self) -> "EditSessionBinder":
        return self._binder

    @property
    def path(self) -> str:
        return self.prop_key

    def focus(self) -> "EditSession":
        return self._binder.focus(self)

    def on_commit(self, new_value: Any) -> Optional[PatchEvent]:
        """Focus + commit immédiat (équivalent d'un blur après saisie)."""
        return self.focus().commit(new_value)

    def _commit_patch(self, new_value: Any) -> Optional[PatchEvent]:
        if new_value == self.value:
            return None
        self.value = new_value
        return PatchEvent(block_id=self.block_id, prop_key=self.prop_key, new_value=new_value)

    def __repr__(self) -> str:
        return f"<FieldBinding {self.block_id}.{self.path}>"


class CollectionBinding:
    """
    Prop liste d'un bloc (items, rows, links…).
    Chaque opération émet le remplacement complet de la liste.
    """

    def __init__(self, binder: "EditSessionBinder", block_id: str, prop_key: str, rows: Sequence[Any]):
        self._binder = binder
        self.block_id = block_id
        self.prop_key = prop_key
        self.rows: List[Any] = copy.deepcopy(list(rows or []))

    @property
    def binder(self) -> "EditSessionBinder":
        return self._binder

    @property
    def path(self) -> str:
        return self.prop_key

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.rows):
            raise EditSessionError(f"Ligne {index} hors limites pour {self.block_id}.{self.prop_key}")

    def _replace(self, rows: List[Any]) -> PatchEvent:
        self.rows = rows
        patch = PatchEvent(block_id=self.block_id, prop_key=self.prop_key, new_value=copy.deepcopy(rows))
        self._binder.emit(patch)
        return patch

    def add_row(self, row: Any, index: Optional[int] = None) -> PatchEvent:
        rows = copy.deepcopy(self.rows)
        rows.insert(len(rows) if index is None else index, copy.deepcopy(row))
        return self._replace(rows)

    def remove_row(self, index: int) -> PatchEvent:
        self._check_index(index)
        rows = copy.deepcopy(self.rows)
        del rows[index]
        return self._replace(rows)

    def move_row(self, index: int, new_index: int) -> PatchEvent:
        self._check_index(index)
        rows = copy.deepcopy(self.rows)
        row = rows.pop(index)
        rows.insert(max(0, min(new_index, len(rows))), row)
        return self._replace(rows)

    def edit_row(self, index: int, field: Optional[str], value: Any) -> Optional[PatchEvent]:
        """Modifie un champ d'une ligne (ou la ligne entière si field=None)."""
        self._check_index(index)
        current = self.rows[index] if field is None else _row_get(self.rows[index], field)
        if current == value:
            return None
        rows = copy.deepcopy(self.rows)
        if field is None:
            rows[index] = value
        else:
            if not isinstance(rows[index], dict):
                rows[index] = {}
            rows[index][field] = value
        return self._replace(rows)

    def row_field(self, index: int, field: Optional[str]) -> "RowFieldBinding":
        return RowFieldBinding(self, index, field)


def _row_get(row: Any, field: str) -> Any:
    return row.get(field) if isinstance(row, dict) else None


class RowFieldBinding(FieldBinding):
    """Texte éditable en place dans une ligne de collection."""

    def __init__(self, collection: CollectionBinding, index: int, field: Optional[str]):
        row = collection.rows[index]
        value = row if field is None else _row_get(row, field)
        super().__init__(collection._binder, collection.block_id, collection.prop_key, value)
        self.collection = collection
        self.index = index
        self.field = field

    @property
    def path(self) -> str:
        suffix = f".{self.field}" if self.field else ""
        return f"{self.prop_key}[{self.index}]{suffix}"

    def _commit_patch(self, new_value: Any) -> Optional[PatchEvent]:
        if new_value == self.value:
            return None
        self.value = new_value
        rows = copy.deepcopy(self.collection.rows)
        if self.field is None:
            rows[self.index] = new_value
        else:
            if not isinstance(rows[self.index], dict):
                rows[self.index] = {}
            rows[self.index][self.field] = new_value
        self.collection.rows = rows
        return PatchEvent(block_id=self.block_id, prop_key=self.prop_key, new_value=copy.deepcopy(rows))


# ── Session ─────────────────────────────────────────────────────────────────

class EditSession:
    """Édition en cours d'un champ : valeur en attente jusqu'au commit ou à l'abandon."""

    def __init__(self, binder: "EditSessionBinder", binding: FieldBinding):
        self._binder = binder
        self.binding = binding
        self.pending: Any = binding.value
        self.state: FieldState = "focused"
        # Issue de la dernière session close : "committed" ou "abandoned"
        self.outcome: Optional[FieldState] = None

    @property
    def key(self) -> Tuple[str, str]:
        return (self.binding.block_id, self.binding.path)

    def _require_focused(self, operation: str) -> None:
        if self.state != "focused":
            raise EditSessionError(f"{operation} impossible : session {self.key} à l'état {self.state}")

    def _finish(self, outcome: FieldState) -> None:
        self._binder._close(self)
        self.outcome = outcome
        self.state = "idle"

    def input(self, value: Any) -> None:
        """Saisie intermédiaire — aucune émission."""
        self._require_focused("input")
        self.pending = value

    def commit(self, value: Any = _UNSET) -> Optional[PatchEvent]:
        """Blur / sauvegarde explicite : émet un patch si la valeur a changé."""
        self._require_focused("commit")
        if value is not _UNSET:
            self.pending = value
        self._finish("committed")
        patch = self.binding._commit_patch(self.pending)
        if patch is not None:
            self._binder.emit(patch)
        return patch

    def abandon(self) -> None:
        """Abandon sans commit : la valeur en attente est perdue."""
        self._require_focused("abandon")
        self._finish("abandoned")
        log.debug("Édition abandonnée %s", self.key)


# ── Binder ──────────────────────────────────────────────────────────────────

class EditSessionBinder:
    """
    Point de contact entre le canvas et l'éditeur (appelant).

    Usage:
        >>> binder = EditSessionBinder(on_patch=lambda p: apply_patch(page, p))
        >>> node = render_page(page, theme, "editing", binder=binder)
        >>> find_binding(node, "b1", "heading").on_commit("Nouveau titre")
    """

    def __init__(self, on_patch: Optional[Callable[[PatchEvent], None]] = None):
        self._on_patch = on_patch
        self._sessions: Dict[Tuple[str, str], EditSession] = {}
        self.history: List[PatchEvent] = []

    def field(self, block_id: str, prop_key: str, value: Any) -> FieldBinding:
        return FieldBinding(self, block_id, prop_key, value)

    def collection(self, block_id: str, prop_key: str, rows: Sequence[Any]) -> CollectionBinding:
        return CollectionBinding(self, block_id, prop_key, rows)

    def focus(self, binding: FieldBinding) -> EditSession:
        key = (binding.block_id, binding.path)
        session = self._sessions.get(key)
        if session is None:
            session = EditSession(self, binding)
            self._sessions[key] = session
        return session

    def state_of(self, block_id: str, path: str) -> FieldState:
        return "focused" if (block_id, path) in self._sessions else "idle"

    @property
    def active_sessions(self) -> List[EditSession]:
        return list(self._sessions.values())

    def discard_all(self) -> int:
        """Navigation hors de la page : toutes les éditions en cours sont abandonnées."""
        sessions = list(self._sessions.values())
        for session in sessions:
            session.abandon()
        return len(sessions)

    def emit(self, patch: PatchEvent) -> None:
        self.history.append(patch)
        if self._on_patch is not None:
            self._on_patch(patch)

    def drain(self) -> List[PatchEvent]:
        """Retourne et vide l'historique des patchs (ordre de commit)."""
        patches, self.history = self.history, []
        return patches

    def _close(self, session: EditSession) -> None:
        self._sessions.pop(session.key, None)
