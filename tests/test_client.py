import httpx
import pytest
import respx
from unittest.mock import patch
from hypothesisapi.api.client import Api
from hypothesisapi.exceptions import HypothesisException

_TEST_URL = 'https://test_url.com'


class TestApi:
    @patch('hypothesisapi.configs.get_value')
    def test_api_init_from_configs(self, mock_get_value):
        values = {'api_key': 'configured_key', 'username': 'bob', 'api_url': f'{_TEST_URL}/'}
        mock_get_value.side_effect = lambda setting: values.get(setting.key)
        api = Api(check_connection=False)
        assert api.config.api_key == 'configured_key'
        assert api.config.server_url == _TEST_URL
        assert api.user == 'acct:bob@hypothes.is'

    @patch('hypothesisapi.configs.get_value')
    def test_api_init_without_key(self, mock_get_value):
        mock_get_value.return_value = None
        with pytest.raises(HypothesisException):
            Api(check_connection=False)

    @patch('hypothesisapi.configs.get_value')
    def test_default_server_url(self, mock_get_value):
        mock_get_value.return_value = None
        api = Api(api_key='key', check_connection=False)
        assert api.config.server_url == Api.DEFAULT_SERVER_URL
        assert api.user is None

    def test_user_with_authority(self):
        api = Api(_TEST_URL, 'key', username='alice', authority='example.org', check_connection=False)
        assert api.user == 'acct:alice@example.org'

    @respx.mock
    def test_check_connection(self):
        route = respx.get(f"{_TEST_URL}/search").mock(
            return_value=httpx.Response(200, json={'rows': [], 'total': 0})
        )
        Api(_TEST_URL, 'key', username='alice')
        assert route.calls.last.request.url.params['limit'] == '1'

    @respx.mock
    def test_check_connection_failure(self):
        respx.get(f"{_TEST_URL}/search").mock(
            return_value=httpx.Response(401, json={'status': 'failure', 'reason': 'Invalid developer key'})
        )
        with pytest.raises(HypothesisException) as excinfo:
            Api(_TEST_URL, 'wrong_key')
        assert 'Invalid developer key' in str(excinfo.value)
