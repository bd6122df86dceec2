"""
Search query for the ``/search`` endpoint.

See `the Hypothesis API docs <https://h.readthedocs.io/en/latest/api-reference/v1/#tag/annotations/paths/~1search/get>`_
for more details on using these fields.
"""

from enum import Enum
import logging
import httpx
from pydantic import BaseModel, ConfigDict, Field, field_validator
from hypothesisapi.entities.annotation import UserAccountID
from .builder import BaseBuilder

_LOGGER = logging.getLogger(__name__)

MAX_RECOMMENDED_OFFSET = 9800


class Sort(str, Enum):
    CREATED = 'created'
    UPDATED = 'updated'
    ID = 'id'
    GROUP = 'group'
    USER = 'user'


class Order(str, Enum):
    ASC = 'asc'
    DESC = 'desc'


class SearchQuery(BaseModel):
    """Filters and paging for an annotation search.

    Every field left at its default is omitted from the query string,
    so the server applies its own default.

    Attributes:
        uri: Limit the results to annotations matching the specific URI or equivalent URIs.
        uri_parts: Limit the results to annotations containing the given keyword (tokenized chunk) in the URI.
        wildcard_uri: Limit the results to annotations whose URIs match the wildcard pattern.
        user: Limit the results to annotations made by the specified user (``acct:<username>@<authority>``).
        group: Limit the results to annotations made in the specified group (by group ID).
        tag: Limit the results to annotations tagged with the specified value.
        tags: Similar to ``tag`` but allows a list of multiple tags.
        any: Limit the results to annotations containing the keyword in quote, tags, text or url.
        quote: Limit the results to annotations that contain this text inside the annotated text.
        references: Returns annotations that are replies to this parent annotation ID.
        text: Limit the results to annotations that contain this text in their textual body.
        limit: The maximum number of annotations to return. Range: [0, 200].
        sort: The field by which annotations should be sorted.
        search_after: Start point for a page of results, e.g. "2019-01-03T19:46:09.334Z".
            More efficient than ``offset``. Use it together with ``order=Order.ASC``.
        offset: The number of initial annotations to skip. Should stay below 9800.
        order: The order in which the results should be sorted.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    uri: str = ''
    uri_parts: str = Field(default='', alias='uri.parts')
    wildcard_uri: str = ''
    user: UserAccountID = UserAccountID('')
    group: str = ''
    tag: str = ''
    tags: list[str] = []
    any: str = ''
    quote: str = ''
    references: str = ''
    text: str = ''
    limit: int = Field(default=20, ge=0, le=200)
    sort: Sort = Sort.UPDATED
    search_after: str = ''
    offset: int = Field(default=0, ge=0)
    order: Order = Order.DESC

    @field_validator('offset')
    @classmethod
    def _warn_deep_offset(cls, value: int) -> int:
        if value > MAX_RECOMMENDED_OFFSET:
            _LOGGER.warning(f"offset={value} is above {MAX_RECOMMENDED_OFFSET}. Consider using search_after instead.")
        return value

    def to_params(self) -> list[tuple[str, str]]:
        """Query parameters for the fields that differ from their default.

        ``tags`` repeats its key once per tag.
        """
        params = []
        for key, value in self.model_dump(mode='json', by_alias=True, exclude_defaults=True).items():
            if isinstance(value, list):
                params.extend((key, str(item)) for item in value)
            else:
                params.append((key, str(value)))
        return params

    def to_query_string(self) -> str:
        return str(httpx.QueryParams(self.to_params()))


class SearchQueryBuilder(BaseBuilder[SearchQuery]):
    model_class = SearchQuery

    def uri(self, uri: str):
        return self._set('uri', uri)

    def uri_parts(self, uri_parts: str):
        return self._set('uri_parts', uri_parts)

    def wildcard_uri(self, wildcard_uri: str):
        return self._set('wildcard_uri', wildcard_uri)

    def user(self, user: UserAccountID | str):
        return self._set('user', user)

    def group(self, group: str):
        return self._set('group', group)

    def tag(self, tag: str):
        return self._set('tag', tag)

    def tags(self, tags: list[str]):
        return self._set('tags', tags)

    def any(self, any: str):
        return self._set('any', any)

    def quote(self, quote: str):
        return self._set('quote', quote)

    def references(self, references: str):
        return self._set('references', references)

    def text(self, text: str):
        return self._set('text', text)

    def limit(self, limit: int):
        return self._set('limit', limit)

    def sort(self, sort: Sort | str):
        return self._set('sort', sort)

    def search_after(self, search_after: str):
        return self._set('search_after', search_after)

    def offset(self, offset: int):
        return self._set('offset', offset)

    def order(self, order: Order | str):
        return self._set('order', order)
