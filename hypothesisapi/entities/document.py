"""Document metadata and annotation targets.

These models are written to the API (inside an ``InputAnnotation``) and read
back (``Annotation.target``). Every field has a default, and defaults are
left out when the models are encoded with ``exclude_defaults``.
"""

from pydantic import BaseModel, ConfigDict, Field
from .selector import Selector


class Dc(BaseModel):
    """Dublin Core metadata."""
    identifier: list[str] = []


class HighWire(BaseModel):
    doi: list[str] = []
    pdf_url: list[str] = []


class Link(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    href: str
    link_type: str = Field(default='', alias='type')


class Document(BaseModel):
    """Further metadata about the annotated document.

    Attributes:
        title: Document titles.
        dc: Dublin Core metadata.
        highwire: HighWire metadata (DOIs, PDF urls).
        link: Alternative links to the document.
    """
    title: list[str] = []
    dc: Dc | None = None
    highwire: HighWire | None = None
    link: list[Link] = []


class Target(BaseModel):
    """Which part of a document an annotation points at.

    Attributes:
        source: The target URI. Leave empty when creating an annotation, it refers to the current document.
        selector: Selectors that refine the target. Empty means the whole document.
    """
    source: str = ''
    selector: list[Selector] = []
