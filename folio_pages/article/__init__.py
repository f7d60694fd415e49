"""Utilities for preparing markdown articles for publishing."""

from .extension import ArticleTextExtension
from .models import PreparedArticle
from .processor import ArticleProcessor, prepare_article

__all__ = [
    "ArticleProcessor",
    "ArticleTextExtension",
    "PreparedArticle",
    "prepare_article",
]
