"""Reaction use cases."""

from .set_reaction import SetReactionRequest, SetReactionResponse, SetReactionUseCase

__all__ = ["SetReactionRequest", "SetReactionResponse", "SetReactionUseCase"]
