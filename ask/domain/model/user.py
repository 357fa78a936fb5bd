"""User aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from ask.domain.model.common import DomainModel
from ask.domain.value import UserId
from ask.domain.value.types import Handle


class User(DomainModel):
    """User aggregate root.

    Authentication happens elsewhere; the API only knows the user by id.
    """

    id: UserId
    handle: Handle
    name: Optional[str] = Field(default=None, max_length=255)
    bio: Optional[str] = Field(default=None, max_length=500)
    avatar_url: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
