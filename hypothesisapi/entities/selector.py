"""Selector models for the Hypothesis API.

A selector describes which part of a document an annotation targets.
The API accepts arbitrary selectors, but the Hypothesis client only produces
``TextQuoteSelector``, ``TextPositionSelector`` and ``RangeSelector``.
On the wire each selector carries its variant name in the ``type`` key
(`Web Annotation Data Model - Selectors <https://www.w3.org/TR/annotation-model/#selectors>`_).
"""

from typing import Annotated, Any, Literal, Union
from pydantic import (BaseModel, ConfigDict, Field, NonNegativeInt, SerializerFunctionWrapHandler,
                      TypeAdapter, model_serializer)


class _SelectorBase(BaseModel):
    type: str

    @model_serializer(mode='wrap')
    def _always_dump_type(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        # ``type`` equals its default, so ``exclude_defaults`` would drop the discriminant.
        data = handler(self)
        return {'type': self.type, **data}


class TextQuoteSelector(_SelectorBase):
    """Selects text by copying it, plus the text right before and after it.

    If the document were "abcdefghijklmnopqrstuvwxyz", one could select "efg"
    with a prefix of "abcd", the match "efg" and a suffix of "hijk".

    Attributes:
        exact: A copy of the selected text, after normalization.
        prefix: A snippet of text that occurs immediately before the selection.
        suffix: A snippet of text that occurs immediately after the selection.
    """
    type: Literal['TextQuoteSelector'] = 'TextQuoteSelector'
    exact: str
    prefix: str
    suffix: str


class TextPositionSelector(_SelectorBase):
    """Selects text by its start and end positions in the document text.

    ``start`` is included in the selection and ``end`` is not. A selector
    with ``start > end`` is accepted as-is; the server decides what it means.
    """
    type: Literal['TextPositionSelector'] = 'TextPositionSelector'
    start: NonNegativeInt
    end: NonNegativeInt


class RangeSelector(_SelectorBase):
    """Opaque range selector.

    The Hypothesis API does not follow the W3C shape for range selectors,
    so every key besides ``type`` is kept untouched (see :attr:`bag`).
    """
    model_config = ConfigDict(extra='allow')

    type: Literal['RangeSelector'] = 'RangeSelector'

    @classmethod
    def from_bag(cls, bag: dict[str, Any]) -> 'RangeSelector':
        return cls.model_validate({**bag, 'type': 'RangeSelector'})

    @property
    def bag(self) -> dict[str, Any]:
        return dict(self.model_extra or {})


Selector = Annotated[Union[TextQuoteSelector, RangeSelector, TextPositionSelector],
                     Field(discriminator='type')]

SelectorAdapter: TypeAdapter[Selector] = TypeAdapter(Selector)


def parse_selector(data: dict[str, Any] | str | bytes) -> Selector:
    """Decode a selector, dispatching on its ``type`` key.

    Raises:
        pydantic.ValidationError: If ``type`` is unknown or a required field of the variant is missing.
    """
    if isinstance(data, (str, bytes)):
        return SelectorAdapter.validate_json(data)
    return SelectorAdapter.validate_python(data)


def new_quote_selector(exact: str, prefix: str = '', suffix: str = '') -> TextQuoteSelector:
    return TextQuoteSelector(exact=exact, prefix=prefix, suffix=suffix)
