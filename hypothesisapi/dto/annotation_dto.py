"""
Data Transfer Objects (DTOs) for writing annotations to the Hypothesis API.

Classes:
    InputAnnotation: Payload for creating or updating an annotation.
    InputAnnotationBuilder: Fluent builder for :class:`InputAnnotation`.
    DocumentBuilder: Fluent builder for :class:`~hypothesisapi.entities.Document`.
    TargetBuilder: Fluent builder for :class:`~hypothesisapi.entities.Target`.

Example:
    A simple annotation::

        annotation = InputAnnotationBuilder().uri("https://www.example.com").text("My new annotation").build()

    A more complex one::

        annotation = (InputAnnotationBuilder()
                      .uri("https://www.example.com")
                      .text("this is a comment")
                      .target(TargetBuilder().source("https://www.example.com")
                              .selector([new_quote_selector("exact text in website to highlight",
                                                            "prefix of text",
                                                            "suffix of text")]).build())
                      .tags(["tag1", "tag2"])
                      .build())
"""

from typing import Any
from pydantic import BaseModel, ConfigDict
from hypothesisapi.entities.document import Dc, Document, HighWire, Link, Target
from hypothesisapi.entities.selector import Selector
from .builder import BaseBuilder


class InputAnnotation(BaseModel):
    """Payload to create and update annotations.

    For creating a new annotation, every field except ``uri`` may be left as default.
    For updating an existing annotation, every field is optional: fields left as
    default are not sent, so the server keeps their current value.

    Attributes:
        uri: URI the annotation is attached to. A URL or a URN (DOI, PDF fingerprint...).
        text: Annotation text / comment given by the user. This is NOT the selected text on the page.
        tags: Tags attached to the annotation. ``None`` leaves them out of the payload, ``[]`` clears them.
        document: Further metadata about the target document.
        group: The unique identifier of the annotation's group.
            Ignored by the server for replies, which belong to the group of their parent.
        target: Which part of the document the annotation targets. Defaults to the whole page.
        references: IDs of the annotations this annotation references (e.g. is a reply to).
    """
    model_config = ConfigDict(frozen=True)

    uri: str = ''
    text: str = ''
    tags: list[str] | None = None
    document: Document | None = None
    group: str = ''
    target: Target = Target()
    references: list[str] = []

    def to_dict(self) -> dict[str, Any]:
        """JSON body for the API, without the fields left at their default."""
        return self.model_dump(mode='json', by_alias=True, exclude_defaults=True)


class InputAnnotationBuilder(BaseBuilder[InputAnnotation]):
    model_class = InputAnnotation

    def uri(self, uri: str):
        return self._set('uri', uri)

    def text(self, text: str):
        return self._set('text', text)

    def tags(self, tags: list[str]):
        return self._set('tags', tags)

    def document(self, document: Document):
        return self._set('document', document)

    def group(self, group: str):
        return self._set('group', group)

    def target(self, target: Target):
        return self._set('target', target)

    def references(self, references: list[str]):
        return self._set('references', references)


class DocumentBuilder(BaseBuilder[Document]):
    model_class = Document

    def title(self, title: list[str]):
        return self._set('title', title)

    def dc(self, dc: Dc):
        return self._set('dc', dc)

    def highwire(self, highwire: HighWire):
        return self._set('highwire', highwire)

    def link(self, link: list[Link]):
        return self._set('link', link)


class TargetBuilder(BaseBuilder[Target]):
    model_class = Target

    def source(self, source: str):
        return self._set('source', source)

    def selector(self, selector: list[Selector]):
        return self._set('selector', selector)
