"""Hypothesis entities package."""

from .annotation import (Annotation, DeletionResult, Permissions, SearchResult, UserAccountID, UserInfo,
                         user_account_id)
from .api_error import APIError
from .base_entity import BaseEntity
from .document import Dc, Document, HighWire, Link, Target
from .selector import (RangeSelector, Selector, SelectorAdapter, TextPositionSelector, TextQuoteSelector,
                       new_quote_selector, parse_selector)

__all__ = [
    'APIError',
    'Annotation',
    'BaseEntity',
    'Dc',
    'DeletionResult',
    'Document',
    'HighWire',
    'Link',
    'Permissions',
    'RangeSelector',
    'SearchResult',
    'Selector',
    'SelectorAdapter',
    'Target',
    'TextPositionSelector',
    'TextQuoteSelector',
    'UserAccountID',
    'UserInfo',
    'new_quote_selector',
    'parse_selector',
    'user_account_id',
]
