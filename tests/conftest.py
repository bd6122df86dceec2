import pytest
from copy import deepcopy

_ANNOTATION_SAMPLE = {
    'id': 'Ad6sb0-wEe6M4-8N0yC2Nw',
    'created': '2024-01-15T10:31:40.447413+00:00',
    'updated': '2024-01-15T10:31:40.447413+00:00',
    'user': 'acct:alice@hypothes.is',
    'uri': 'http://example.com',
    'text': 'string',
    'tags': [],
    'group': '__world__',
    'permissions': {'read': ['group:__world__'],
                    'admin': ['acct:alice@hypothes.is'],
                    'update': ['acct:alice@hypothes.is'],
                    'delete': ['acct:alice@hypothes.is']},
    'target': [{'source': 'http://example.com',
                'selector': [{'type': 'RangeSelector',
                              'endOffset': 14,
                              'startOffset': 0,
                              'endContainer': '/div[1]/h1[1]',
                              'startContainer': '/div[1]/h1[1]'},
                             {'end': 14, 'type': 'TextPositionSelector', 'start': 0},
                             {'type': 'TextQuoteSelector',
                              'exact': 'Example Domain',
                              'prefix': '',
                              'suffix': 'This domain is for use'}]}],
    'links': {'html': 'https://hypothes.is/a/Ad6sb0-wEe6M4-8N0yC2Nw',
              'incontext': 'https://hyp.is/Ad6sb0-wEe6M4-8N0yC2Nw/example.com/',
              'json': 'https://hypothes.is/api/annotations/Ad6sb0-wEe6M4-8N0yC2Nw'},
    'hidden': False,
    'flagged': False,
    'references': [],
    'user_info': {'display_name': 'Alice'},
}


@pytest.fixture
def annotation_sample() -> dict:
    return deepcopy(_ANNOTATION_SAMPLE)


@pytest.fixture
def api_error_sample() -> dict:
    return {'status': 'failure', 'reason': "Either the annotation 'Ad6sb0-wEe6M4-8N0yC2Nw' does not exist "
                                          "or you are not authorized to access it."}
