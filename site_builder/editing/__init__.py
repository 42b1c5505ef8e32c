"""Édition en place — sessions, bindings, patchs."""
from .session import (
    CollectionBinding,
    EditSession,
    EditSessionBinder,
    EditSessionError,
    FieldBinding,
    FieldState,
    PatchEvent,
    RowFieldBinding,
)
from .patches import apply_patch, apply_patches, apply_site_patch

__all__ = [
    "CollectionBinding",
    "EditSession",
    "EditSessionBinder",
    "EditSessionError",
    "FieldBinding",
    "FieldState",
    "PatchEvent",
    "RowFieldBinding",
    "apply_patch",
    "apply_patches",
    "apply_site_patch",
]
