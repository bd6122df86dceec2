import logging
from typing import Any
import httpx
from dataclasses import dataclass
import aiohttp
import json

logger = logging.getLogger(__name__)


@dataclass
class ApiConfig:
    """Configuration for API client.

    Attributes:
        server_url: Base URL for the API.
        api_key: Optional developer key for authentication.
        timeout: Request timeout in seconds.
    """
    server_url: str
    api_key: str | None = None
    timeout: float = 30.0


@dataclass(frozen=True)
class ApiRequest:
    """Transport-independent description of one API call.

    Attributes:
        method: HTTP method (GET, POST, PATCH, PUT, DELETE).
        endpoint: Path relative to the server URL.
        json: JSON body, if any.
        params: Query parameters, if any. Keys may repeat.
    """
    method: str
    endpoint: str
    json: dict[str, Any] | None = None
    params: list[tuple[str, str]] | None = None

    def request_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {}
        if self.json is not None:
            kwargs['json'] = self.json
        if self.params:
            kwargs['params'] = self.params
        return kwargs


class BaseApi:
    """Base class for all API endpoint handlers."""

    def __init__(self,
                 config: ApiConfig,
                 client: httpx.Client | None = None) -> None:
        """Initialize the base API handler.

        Args:
            config: API configuration containing base URL, API key, etc.
            client: Optional HTTP client instance. If None, a new one will be created.
        """
        self.config = config
        self.client = client or self._create_client()

    def _auth_headers(self) -> dict[str, str]:
        if self.config.api_key:
            return {"Authorization": f"Bearer {self.config.api_key}"}
        return {}

    def _create_client(self) -> httpx.Client:
        """Create and configure HTTP client with authentication and timeouts."""
        return httpx.Client(
            base_url=self.config.server_url,
            headers=self._auth_headers(),
            timeout=self.config.timeout
        )

    def _make_request(self, method: str, endpoint: str, **kwargs) -> httpx.Response:
        """Make HTTP request with error handling.

        Error statuses are logged but not raised: the Hypothesis API describes
        failures in the response body, which the caller classifies.

        Args:
            method: HTTP method (GET, POST, PATCH, PUT, DELETE)
            endpoint: API endpoint path
            **kwargs: Additional arguments for the request

        Returns:
            HTTP response object

        Raises:
            httpx.RequestError: If the request could not be sent or answered.
        """
        url = endpoint.lstrip('/')  # Remove leading slash for httpx

        try:
            curl_command = self._generate_curl_command({"method": method,
                                                        "url": url,
                                                        "headers": self.client.headers,
                                                        **kwargs})
            logger.debug(f'Equivalent curl command: "{curl_command}"')
            response = self.client.request(method, url, **kwargs)
        except httpx.RequestError as e:
            logger.error(f"Request error for {method} {endpoint}: {e}")
            raise
        self._log_error_status(response.status_code, method, endpoint, response.text)
        return response

    def _send(self, request: ApiRequest) -> bytes:
        return self._make_request(request.method, request.endpoint, **request.request_kwargs()).content

    async def _send_async(self, request: ApiRequest,
                          session: aiohttp.ClientSession | None = None) -> bytes:
        return await self._make_request_async(request.method, request.endpoint,
                                              session=session,
                                              **request.request_kwargs())

    @staticmethod
    def _log_error_status(status_code: int, method: str, endpoint: str, text: str) -> None:
        if status_code >= 500:
            logger.error(f"HTTP error {status_code} for {method} {endpoint}: {text}")
        elif status_code >= 400:
            logger.info(f"HTTP error {status_code} for {method} {endpoint}: {text}")

    def _generate_curl_command(self, request_args: dict) -> str:
        """
        Generate a curl command for debugging purposes.

        Args:
            request_args (dict): Request arguments dictionary containing method, url, headers, etc.

        Returns:
            str: Equivalent curl command
        """
        method = request_args.get('method', 'GET').upper()
        url = request_args['url']
        headers = request_args.get('headers', {})
        data = request_args.get('json') or request_args.get('data')
        params = request_args.get('params')

        curl_command = ['curl']

        # Add method if not GET
        if method != 'GET':
            curl_command.extend(['-X', method])

        # Add headers
        for key, value in headers.items():
            if key.lower() == 'authorization':
                value = 'Bearer <YOUR-DEVELOPER-KEY>'  # Mask API key for security
            curl_command.extend(['-H', f"'{key}: {value}'"])

        # Add query parameters
        if params:
            items = params.items() if isinstance(params, dict) else params
            url = f"{url}?{httpx.QueryParams(list(items))}"
        # Add URL
        curl_command.append(f"'{url}'")

        # Add data
        if data:
            if isinstance(data, dict):
                curl_command.extend(['-d', f"'{json.dumps(data)}'"])
            else:
                curl_command.extend(['-d', f"'{data}'"])

        return ' '.join(curl_command)

    async def _make_request_async(self,
                                  method: str,
                                  endpoint: str,
                                  session: aiohttp.ClientSession | None = None,
                                  **kwargs) -> bytes:
        """Make asynchronous HTTP request with error handling.

        Args:
            method: HTTP method (GET, POST, PATCH, PUT, DELETE)
            endpoint: API endpoint path
            session: Optional aiohttp session. If None, a new one will be created.
            **kwargs: Additional arguments for the request

        Returns:
            The response body, undecoded.

        Raises:
            aiohttp.ClientError: If the request fails
        """
        url = f"{self.config.server_url.rstrip('/')}/{endpoint.lstrip('/')}"

        # Prepare headers
        headers = kwargs.pop('headers', {})
        headers.update(self._auth_headers())

        # Set timeout
        timeout = aiohttp.ClientTimeout(total=self.config.timeout)

        async def make_request(client_session: aiohttp.ClientSession) -> bytes:
            try:
                logger.debug(f"Running request to {url}")
                curl_command = self._generate_curl_command({"method": method,
                                                            "url": url,
                                                            "headers": headers,
                                                            **kwargs})
                logger.debug(f'Equivalent curl command: "{curl_command}"')
                async with client_session.request(
                    method=method,
                    url=url,
                    headers=headers,
                    timeout=timeout,
                    **kwargs
                ) as response:
                    body = await response.read()
                    self._log_error_status(response.status, method, endpoint,
                                           body.decode('utf-8', errors='replace'))
                    return body

            except aiohttp.ClientError as e:
                logger.error(f"Request error for {method} {endpoint}: {e}")
                raise

        if session is not None:
            return await make_request(session)
        else:
            async with aiohttp.ClientSession() as temp_session:
                return await make_request(temp_session)
