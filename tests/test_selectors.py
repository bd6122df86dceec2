import pytest
import pydantic
from hypothesisapi.entities import (RangeSelector, SelectorAdapter, Target, TextPositionSelector,
                                    TextQuoteSelector, new_quote_selector, parse_selector)


class TestSelectors:
    @pytest.fixture
    def range_bag(self) -> dict:
        return {'startContainer': '/div[1]/p[2]',
                'startOffset': 3,
                'endContainer': '/div[1]/p[3]',
                'endOffset': 10,
                'nested': {'any': ['json', 1, None]}}

    def test_quote_selector_round_trip(self):
        selector = new_quote_selector('efg', 'abcd', 'hijk')
        data = SelectorAdapter.dump_python(selector, mode='json')
        assert data == {'type': 'TextQuoteSelector', 'exact': 'efg', 'prefix': 'abcd', 'suffix': 'hijk'}
        assert parse_selector(data) == selector

    def test_position_selector_round_trip(self):
        selector = TextPositionSelector(start=4, end=7)
        data = SelectorAdapter.dump_python(selector, mode='json')
        assert data == {'type': 'TextPositionSelector', 'start': 4, 'end': 7}
        decoded = parse_selector(data)
        assert isinstance(decoded, TextPositionSelector)
        assert decoded == selector

    def test_position_selector_start_after_end_is_accepted(self):
        selector = TextPositionSelector(start=9, end=2)
        assert parse_selector(SelectorAdapter.dump_json(selector)) == selector

    def test_position_selector_rejects_negative_offsets(self):
        with pytest.raises(pydantic.ValidationError):
            TextPositionSelector(start=-1, end=2)

    def test_range_selector_keeps_bag(self, range_bag: dict):
        selector = RangeSelector.from_bag(range_bag)
        assert selector.bag == range_bag

        data = SelectorAdapter.dump_python(selector, mode='json')
        assert data == {'type': 'RangeSelector', **range_bag}

        decoded = parse_selector(data)
        assert isinstance(decoded, RangeSelector)
        assert decoded.bag == range_bag

    def test_dispatch_on_type(self):
        decoded = parse_selector('{"type": "TextQuoteSelector", "exact": "a", "prefix": "b", "suffix": "c"}')
        assert isinstance(decoded, TextQuoteSelector)
        assert decoded.exact == 'a'

    def test_unknown_type_fails(self):
        with pytest.raises(pydantic.ValidationError):
            parse_selector({'type': 'FragmentSelector', 'value': 'page=1'})

    def test_missing_type_fails(self):
        with pytest.raises(pydantic.ValidationError):
            parse_selector({'exact': 'a', 'prefix': 'b', 'suffix': 'c'})

    def test_missing_variant_field_fails(self):
        with pytest.raises(pydantic.ValidationError):
            parse_selector({'type': 'TextQuoteSelector', 'exact': 'a'})
        with pytest.raises(pydantic.ValidationError):
            parse_selector({'type': 'TextPositionSelector', 'start': 1})

    def test_discriminant_kept_when_defaults_are_excluded(self):
        target = Target(source='http://example.com',
                        selector=[new_quote_selector('exact'), TextPositionSelector(start=0, end=0)])
        data = target.model_dump(mode='json', exclude_defaults=True)
        assert data == {'source': 'http://example.com',
                        'selector': [{'type': 'TextQuoteSelector', 'exact': 'exact', 'prefix': '', 'suffix': ''},
                                     {'type': 'TextPositionSelector', 'start': 0, 'end': 0}]}
