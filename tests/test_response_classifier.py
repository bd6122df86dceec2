import json
import logging
import pydantic
import pytest
from hypothesisapi.api.response_classifier import (ID_SUGGESTION, INPUT_SUGGESTION, _type_adapter,
                                                   classify_response, raise_for_api_error)
from hypothesisapi.entities import APIError, Annotation, RangeSelector, TextPositionSelector, TextQuoteSelector
from hypothesisapi.entities.annotation import DeletionResult, SearchResult
from hypothesisapi.exceptions import APIFailure, DecodeFailure


class TestClassifyResponse:
    def test_success(self, annotation_sample: dict):
        body = json.dumps(annotation_sample).encode()
        annotation = classify_response(body, Annotation, INPUT_SUGGESTION)
        assert isinstance(annotation, Annotation)
        assert annotation.id == annotation_sample['id']
        assert annotation.user == 'acct:alice@hypothes.is'
        assert annotation.user_info.display_name == 'Alice'
        assert annotation.created.tzinfo is not None
        selectors = annotation.target[0].selector
        assert [type(s) for s in selectors] == [RangeSelector, TextPositionSelector, TextQuoteSelector]
        assert selectors[0].bag['startContainer'] == '/div[1]/h1[1]'

    def test_optional_fields_default(self, annotation_sample: dict):
        del annotation_sample['references']
        del annotation_sample['user_info']
        annotation = classify_response(json.dumps(annotation_sample), Annotation, INPUT_SUGGESTION)
        assert annotation.references == []
        assert annotation.user_info is None

    def test_api_error(self, api_error_sample: dict):
        body = json.dumps(api_error_sample)
        with pytest.raises(APIFailure) as excinfo:
            classify_response(body, Annotation, ID_SUGGESTION)
        failure = excinfo.value
        assert failure.status == api_error_sample['status']
        assert failure.reason == api_error_sample['reason']
        assert failure.suggestion == ID_SUGGESTION
        assert failure.raw_text == body
        assert failure.api_error == APIError(**api_error_sample)
        assert ID_SUGGESTION in str(failure)

    @pytest.mark.parametrize('body', [b'<html>502 Bad Gateway</html>', b'', b'\xff\xfe\x00', b'{"status": "x"}'])
    def test_decode_failure(self, body: bytes):
        with pytest.raises(DecodeFailure) as excinfo:
            classify_response(body, Annotation, INPUT_SUGGESTION)
        failure = excinfo.value
        assert failure.raw_body == body
        assert failure.raw_text == body.decode('utf-8', errors='replace')
        assert isinstance(failure.error, pydantic.ValidationError)
        assert failure.__cause__ is failure.error

    def test_str_body_decode_failure(self):
        with pytest.raises(DecodeFailure) as excinfo:
            classify_response('<p>Caf\u00e9</p>', Annotation, INPUT_SUGGESTION)
        assert excinfo.value.raw_body == '<p>Caf\u00e9</p>'.encode('utf-8')

    def test_updated_before_created_is_accepted(self, annotation_sample: dict, caplog):
        annotation_sample['created'] = '2024-01-16T08:00:00+00:00'
        with caplog.at_level(logging.WARNING, logger='hypothesisapi.entities.annotation'):
            annotation = classify_response(json.dumps(annotation_sample), Annotation, INPUT_SUGGESTION)
        assert annotation.updated < annotation.created
        assert 'before it was created' in caplog.text

    def test_type_adapter_is_reused(self):
        assert _type_adapter(Annotation) is _type_adapter(Annotation)
        assert _type_adapter(SearchResult) is not _type_adapter(Annotation)

    def test_envelopes(self, annotation_sample: dict):
        result = classify_response(json.dumps({'rows': [annotation_sample], 'total': 1}), SearchResult, '')
        assert result.total == 1
        assert result.rows[0].id == annotation_sample['id']

        deleted = classify_response('{"id": "abc", "deleted": true}', DeletionResult, ID_SUGGESTION)
        assert deleted == DeletionResult(id='abc', deleted=True)

    def test_envelope_missing_field_is_decode_failure(self):
        with pytest.raises(DecodeFailure):
            classify_response('{"rows": []}', SearchResult, '')


class TestRaiseForApiError:
    @pytest.mark.parametrize('body', ['', '{}', '{"id": "abc"}', 'not json'])
    def test_no_error(self, body: str):
        assert raise_for_api_error(body, ID_SUGGESTION) is None

    def test_error(self, api_error_sample: dict):
        with pytest.raises(APIFailure) as excinfo:
            raise_for_api_error(json.dumps(api_error_sample).encode(), ID_SUGGESTION)
        assert excinfo.value.status == 'failure'
