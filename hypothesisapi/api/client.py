from typing import Optional
from .base_api import ApiConfig
from .endpoints import AnnotationsApi
import hypothesisapi.configs
from hypothesisapi.dto.search_dto import SearchQuery
from hypothesisapi.entities.annotation import DEFAULT_AUTHORITY, UserAccountID, user_account_id
from hypothesisapi.exceptions import HypothesisException


class Api:
    """Main API client that provides access to all endpoint handlers.

    Example:
        >>> api = Api(username='alice', api_key='6879-...')
        >>> own_annotations = api.annotations.search(SearchQueryBuilder().user(api.user).build())
    """
    DEFAULT_SERVER_URL = 'https://hypothes.is/api'
    HYPOTHESIS_API_VENV_NAME = hypothesisapi.configs.API_KEY.env_var

    def __init__(self,
                 server_url: str | None = None,
                 api_key: Optional[str] = None,
                 username: str | None = None,
                 authority: str = DEFAULT_AUTHORITY,
                 timeout: float = 30.0,
                 check_connection: bool = True) -> None:
        """Initialize the API client.

        Args:
            server_url: Base URL for the API
            api_key: Developer key, from https://hypothes.is/account/developer
            username: Hypothesis username, used to build :attr:`user`
            authority: Authority part of the user account ID
            timeout: Request timeout in seconds
            check_connection: Run a one-row search to validate the settings
        """
        if server_url is None:
            server_url = hypothesisapi.configs.get_value(hypothesisapi.configs.API_URL)
            if server_url is None:
                server_url = Api.DEFAULT_SERVER_URL
        server_url = server_url.rstrip('/')
        if api_key is None:
            api_key = hypothesisapi.configs.get_value(hypothesisapi.configs.API_KEY)
            if api_key is None:
                msg = f"API key not provided! Use the environment variable " + \
                    f"{Api.HYPOTHESIS_API_VENV_NAME} or pass it as an argument."
                raise HypothesisException(msg)
        if username is None:
            username = hypothesisapi.configs.get_value(hypothesisapi.configs.USERNAME)

        self.config = ApiConfig(
            server_url=server_url,
            api_key=api_key,
            timeout=timeout
        )
        self.username = username
        self.authority = authority
        self._client = None
        self._annotations = None

        if check_connection:
            self.check_connection()

    @property
    def user(self) -> UserAccountID | None:
        """Account ID of the authenticated user, ``acct:<username>@<authority>``."""
        if self.username is None:
            return None
        return user_account_id(self.username, self.authority)

    def check_connection(self):
        try:
            self.annotations.search(SearchQuery(limit=1))
        except Exception as e:
            raise HypothesisException("Error connecting to the Hypothesis API." +
                                      f" Please check your api_key and/or other configurations. {e}") from e

    @property
    def annotations(self) -> AnnotationsApi:
        """Access to annotation-related endpoints."""
        if self._annotations is None:
            self._annotations = AnnotationsApi(self.config, self._client)
        return self._annotations
