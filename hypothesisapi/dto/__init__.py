"""Request payloads and their builders."""

from .annotation_dto import DocumentBuilder, InputAnnotation, InputAnnotationBuilder, TargetBuilder
from .builder import BaseBuilder
from .search_dto import Order, SearchQuery, SearchQueryBuilder, Sort

__all__ = [
    'BaseBuilder',
    'DocumentBuilder',
    'InputAnnotation',
    'InputAnnotationBuilder',
    'Order',
    'SearchQuery',
    'SearchQueryBuilder',
    'Sort',
    'TargetBuilder',
]
