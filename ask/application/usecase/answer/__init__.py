"""Answer use cases."""

from .toggle_acceptance import (
    ToggleAcceptanceRequest,
    ToggleAcceptanceResponse,
    ToggleAcceptanceUseCase,
)

__all__ = [
    "ToggleAcceptanceRequest",
    "ToggleAcceptanceResponse",
    "ToggleAcceptanceUseCase",
]
