"""Annotation entity module for the Hypothesis API.

This module defines the Annotation model used to represent annotation
records returned by the Hypothesis API, together with the response
envelopes wrapping them.
"""

from datetime import datetime
from typing import Any, NewType
import logging
from pydantic import BaseModel
from .base_entity import BaseEntity
from .document import Target

logger = logging.getLogger(__name__)

UserAccountID = NewType('UserAccountID', str)
"""User account ID in the format ``acct:<username>@<authority>``. The format is not validated."""

DEFAULT_AUTHORITY = 'hypothes.is'


def user_account_id(username: str, authority: str = DEFAULT_AUTHORITY) -> UserAccountID:
    return UserAccountID(f'acct:{username}@{authority}')


class Permissions(BaseModel):
    read: list[str]
    delete: list[str]
    admin: list[str]
    update: list[str]


class UserInfo(BaseModel):
    display_name: str | None = ''


class Annotation(BaseEntity):
    """Pydantic Model representing a Hypothesis annotation.

    Annotations are never modified client-side: create, update and fetch
    all return a complete new instance.

    Attributes:
        id: Annotation ID.
        created: Date of creation.
        updated: Date of last update.
        user: User account ID of the author.
        uri: URL of the document this annotation is attached to.
        text: The text content of the annotation body (NOT the selected text in the document).
        tags: Tags attached to the annotation.
        group: The unique identifier for the annotation's group.
        permissions: Principals allowed to read, delete, administrate and update the annotation.
        target: Which part of the document the annotation targets.
        links: Hypermedia links for this annotation, by name.
        hidden: Whether this annotation is hidden from public view.
        flagged: Whether this annotation has one or more flags for moderation.
        references: IDs of the annotations this one replies to. Empty for top-level annotations.
        user_info: The author's display name, when the server provides it.
    """

    id: str
    created: datetime
    updated: datetime
    user: UserAccountID
    uri: str
    text: str
    tags: list[str]
    group: str
    permissions: Permissions
    target: list[Target]
    links: dict[str, str]
    hidden: bool
    flagged: bool
    references: list[str] = []
    user_info: UserInfo | None = None

    def model_post_init(self, __context: Any) -> None:
        super().model_post_init(__context)
        if self.updated < self.created:
            logger.warning(f"Annotation {self.id} was updated ({self.updated}) before it was created ({self.created}).")


class SearchResult(BaseModel):
    """Envelope returned by the ``/search`` endpoint."""
    rows: list[Annotation]
    total: int


class DeletionResult(BaseModel):
    """Envelope returned when deleting an annotation."""
    id: str
    deleted: bool
