from collections.abc import Sequence
from urllib.parse import quote
import logging
import aiohttp
import httpx
from ..base_api import ApiConfig, ApiRequest, BaseApi
from ..response_classifier import (ID_SUGGESTION, INPUT_SUGGESTION, QUERY_SUGGESTION, classify_response,
                                   raise_for_api_error)
from hypothesisapi.dto.annotation_dto import InputAnnotation
from hypothesisapi.dto.search_dto import SearchQuery
from hypothesisapi.entities.annotation import Annotation, DeletionResult, SearchResult

_LOGGER = logging.getLogger(__name__)


class AnnotationsApi(BaseApi):
    """API handler for annotation-related endpoints.

    Every operation comes in a blocking form and an ``_async`` form.
    Errors are reported as exceptions:

    - :class:`~hypothesisapi.exceptions.APIFailure` when the server answers with an error body.
    - :class:`~hypothesisapi.exceptions.DecodeFailure` when the body cannot be understood.
    - ``httpx.RequestError`` / ``aiohttp.ClientError`` when the request itself fails.
    """
    ENDPOINT_BASE = 'annotations'
    SEARCH_ENDPOINT = 'search'

    def __init__(self, config: ApiConfig, client: httpx.Client | None = None) -> None:
        """Initialize the annotations API handler.

        Args:
            config: API configuration containing base URL, API key, etc.
            client: Optional HTTP client instance. If None, a new one will be created.
        """
        super().__init__(config, client)

    @classmethod
    def _annotation_endpoint(cls, annotation_id: str, add_path: str = '') -> str:
        endpoint = f'/{cls.ENDPOINT_BASE}/{quote(annotation_id, safe="")}'
        if add_path:
            endpoint += f'/{add_path.strip("/")}'
        return endpoint

    # Request shaping

    @classmethod
    def create_request(cls, annotation: InputAnnotation) -> ApiRequest:
        return ApiRequest('POST', f'/{cls.ENDPOINT_BASE}', json=annotation.to_dict())

    @classmethod
    def update_request(cls, annotation_id: str, annotation: InputAnnotation) -> ApiRequest:
        return ApiRequest('PATCH', cls._annotation_endpoint(annotation_id), json=annotation.to_dict())

    @classmethod
    def search_request(cls, query: SearchQuery) -> ApiRequest:
        return ApiRequest('GET', f'/{cls.SEARCH_ENDPOINT}', params=query.to_params())

    @classmethod
    def fetch_request(cls, annotation_id: str) -> ApiRequest:
        return ApiRequest('GET', cls._annotation_endpoint(annotation_id))

    @classmethod
    def delete_request(cls, annotation_id: str) -> ApiRequest:
        return ApiRequest('DELETE', cls._annotation_endpoint(annotation_id))

    @classmethod
    def flag_request(cls, annotation_id: str) -> ApiRequest:
        return ApiRequest('PUT', cls._annotation_endpoint(annotation_id, 'flag'))

    @classmethod
    def hide_request(cls, annotation_id: str) -> ApiRequest:
        return ApiRequest('PUT', cls._annotation_endpoint(annotation_id, 'hide'))

    @classmethod
    def show_request(cls, annotation_id: str) -> ApiRequest:
        return ApiRequest('DELETE', cls._annotation_endpoint(annotation_id, 'hide'))

    # Blocking operations

    def create(self, annotation: InputAnnotation) -> Annotation:
        """Create a new annotation.

        ``annotation.uri`` should be set; see :class:`~hypothesisapi.dto.InputAnnotation`
        for what else can be added to an annotation.

        Args:
            annotation: The annotation to post.

        Returns:
            The created annotation, as stored by the server.

        Example:
            >>> annotation = api.annotations.create(InputAnnotationBuilder()
            ...                                     .text("string")
            ...                                     .uri("http://example.com")
            ...                                     .group("__world__")
            ...                                     .build())
            >>> annotation.text
            'string'
        """
        text = self._send(self.create_request(annotation))
        return classify_response(text, Annotation, INPUT_SUGGESTION)

    def update(self, annotation_id: str, annotation: InputAnnotation) -> Annotation:
        """Update an existing annotation.

        Fields of ``annotation`` left as default are not modified.

        Args:
            annotation_id: ID of the annotation to change.
            annotation: The fields to change.

        Returns:
            The modified annotation.
        """
        text = self._send(self.update_request(annotation_id, annotation))
        return classify_response(text, Annotation, INPUT_SUGGESTION)

    def search(self, query: SearchQuery | None = None) -> Sequence[Annotation]:
        """Search for annotations.

        Args:
            query: Filters and paging. If None, the server defaults are used.

        Returns:
            The annotations matching the query (one page of results).
        """
        text = self._send(self.search_request(query or SearchQuery()))
        return classify_response(text, SearchResult, QUERY_SUGGESTION).rows

    def fetch(self, annotation_id: str) -> Annotation:
        """Fetch an annotation by its ID."""
        text = self._send(self.fetch_request(annotation_id))
        return classify_response(text, Annotation, ID_SUGGESTION)

    def delete(self, annotation_id: str) -> bool:
        """Delete an annotation by its ID.

        Returns:
            Whether the server reports the annotation as deleted.
        """
        text = self._send(self.delete_request(annotation_id))
        return classify_response(text, DeletionResult, ID_SUGGESTION).deleted

    def flag(self, annotation_id: str) -> None:
        """Flag an annotation for review (moderation).

        The moderator of the group containing the annotation will be notified and can decide
        whether or not to hide it. Flags persist and cannot be removed once they are set.
        """
        raise_for_api_error(self._send(self.flag_request(annotation_id)), ID_SUGGESTION)

    def hide(self, annotation_id: str) -> None:
        """Hide an annotation.

        Requires the moderate permission for the group that contains the annotation,
        which is granted to the user who created the group.
        """
        raise_for_api_error(self._send(self.hide_request(annotation_id)), ID_SUGGESTION)

    def show(self, annotation_id: str) -> None:
        """Show ("un-hide") an annotation. Requires the same permission as :meth:`hide`."""
        raise_for_api_error(self._send(self.show_request(annotation_id)), ID_SUGGESTION)

    # Asynchronous operations

    async def create_async(self, annotation: InputAnnotation,
                           session: aiohttp.ClientSession | None = None) -> Annotation:
        text = await self._send_async(self.create_request(annotation), session=session)
        return classify_response(text, Annotation, INPUT_SUGGESTION)

    async def update_async(self, annotation_id: str, annotation: InputAnnotation,
                           session: aiohttp.ClientSession | None = None) -> Annotation:
        text = await self._send_async(self.update_request(annotation_id, annotation), session=session)
        return classify_response(text, Annotation, INPUT_SUGGESTION)

    async def search_async(self, query: SearchQuery | None = None,
                           session: aiohttp.ClientSession | None = None) -> Sequence[Annotation]:
        text = await self._send_async(self.search_request(query or SearchQuery()), session=session)
        return classify_response(text, SearchResult, QUERY_SUGGESTION).rows

    async def fetch_async(self, annotation_id: str,
                          session: aiohttp.ClientSession | None = None) -> Annotation:
        text = await self._send_async(self.fetch_request(annotation_id), session=session)
        return classify_response(text, Annotation, ID_SUGGESTION)

    async def delete_async(self, annotation_id: str,
                           session: aiohttp.ClientSession | None = None) -> bool:
        text = await self._send_async(self.delete_request(annotation_id), session=session)
        return classify_response(text, DeletionResult, ID_SUGGESTION).deleted

    async def flag_async(self, annotation_id: str,
                         session: aiohttp.ClientSession | None = None) -> None:
        text = await self._send_async(self.flag_request(annotation_id), session=session)
        raise_for_api_error(text, ID_SUGGESTION)

    async def hide_async(self, annotation_id: str,
                         session: aiohttp.ClientSession | None = None) -> None:
        text = await self._send_async(self.hide_request(annotation_id), session=session)
        raise_for_api_error(text, ID_SUGGESTION)

    async def show_async(self, annotation_id: str,
                         session: aiohttp.ClientSession | None = None) -> None:
        text = await self._send_async(self.show_request(annotation_id), session=session)
        raise_for_api_error(text, ID_SUGGESTION)
