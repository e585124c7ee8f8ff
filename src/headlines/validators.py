"""Article structure validation."""

from collections.abc import Mapping

from headlines.client import HeadlinesError

REQUIRED_ARTICLE_FIELDS = ('title', 'description', 'url')


class MissingFieldError(HeadlinesError):
    """Raised when a required article field is absent or empty."""

    def __init__(self, field: str):
        super().__init__(f"Field {field} is empty or missing.")
        self.field = field


def validate_article_structure(article) -> bool:
    """Check that an article has non-empty string title, description and url.

    Fields are checked in that order and the first failing one is reported.
    Returns True when the article is complete.
    """
    if not isinstance(article, Mapping):
        article = {}

    for field in REQUIRED_ARTICLE_FIELDS:
        value = article.get(field)
        if not isinstance(value, str) or not value:
            raise MissingFieldError(field)
    return True
