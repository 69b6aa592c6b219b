"""Request and result models for dispatcher operations."""

from vsm.schemas.operations import (
    Action,
    ActionRequest,
    ActionResult,
    ListResult,
    OpenResult,
    RemoveResult,
    VariantResult,
)

__all__ = [
    'Action',
    'ActionRequest',
    'ActionResult',
    'ListResult',
    'OpenResult',
    'RemoveResult',
    'VariantResult',
]
