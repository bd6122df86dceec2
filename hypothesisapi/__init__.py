"""
Hypothesis API client.
"""

import importlib.metadata
from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from .api.client import Api
    from .dto import (DocumentBuilder, InputAnnotation, InputAnnotationBuilder, Order, SearchQuery,
                      SearchQueryBuilder, Sort, TargetBuilder)
    from .entities import (Annotation, RangeSelector, Target, TextPositionSelector, TextQuoteSelector,
                           UserAccountID)
    from .exceptions import APIFailure, BuilderError, DecodeFailure, HypothesisException

else:
    import lazy_loader as lazy

    __getattr__, __dir__, __all__ = lazy.attach(
        __name__,
        submodules=['configs', 'dto', 'entities', 'exceptions'],
        submod_attrs={
            "api.client": ["Api"],
            "dto": ["DocumentBuilder", "InputAnnotation", "InputAnnotationBuilder", "Order",
                    "SearchQuery", "SearchQueryBuilder", "Sort", "TargetBuilder"],
            "entities": ["Annotation", "RangeSelector", "Target", "TextPositionSelector",
                         "TextQuoteSelector", "UserAccountID"],
            "exceptions": ["APIFailure", "BuilderError", "DecodeFailure", "HypothesisException"],
        },
    )

__version__ = importlib.metadata.version("hypothesis-python-api")
