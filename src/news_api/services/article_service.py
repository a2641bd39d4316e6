"""Article query service."""

import logging
import re
from typing import Any
from urllib.parse import unquote

from common.text import format_slug_name, singular_plural_variants
from news_api.services.matching import (
    category_field_matches,
    matches_category,
    matches_category_or_subcategory,
    matches_tag,
    subcategory_field_matches,
    tags_contain,
)
from news_api.store import ArticleStore

logger = logging.getLogger(__name__)

DEFAULT_FEATURED_LIMIT = 5
RELATED_LIMIT = 3


def parse_limit(value: str | int | None, default: int = DEFAULT_FEATURED_LIMIT) -> int:
    """Parse a result-count limit leniently.

    Leading digits are used ("7abc" -> 7); missing, non-numeric, zero or
    negative values give `default`.
    """
    if isinstance(value, int):
        return value if value > 0 else default
    if not value:
        return default
    match = re.match(r"\s*([+-]?\d+)", value)
    if not match:
        return default
    limit = int(match.group(1))
    return limit if limit > 0 else default


class ArticleService:
    """Read queries over the article store.

    Every list comes back newest first, in the order the store returns them.
    """

    def __init__(self, store: ArticleStore):
        self.store = store

    def list_articles(self) -> list[dict[str, Any]]:
        return self.store.list_articles()

    def list_featured(self, limit: str | int | None = None) -> list[dict[str, Any]]:
        """Most recent `limit` articles.

        This does not filter on `is_featured`; the featured strip on the site
        is simply the latest articles.
        """
        return self.store.list_articles()[: parse_limit(limit)]

    def list_by_category(self, category_slug: str) -> list[dict[str, Any]]:
        """Articles whose category or tags match the category slug.

        The slug is formatted to a display name and matched together with its
        singular and plural forms.
        """
        variants = singular_plural_variants(format_slug_name(category_slug))
        return [a for a in self.store.list_articles() if matches_category(a, variants)]

    def list_by_category_and_subcategory(
        self, category_slug: str, subcategory_slug: str
    ) -> list[dict[str, Any]]:
        """Articles in the category whose subcategory field or tags match the subcategory."""
        variants = singular_plural_variants(format_slug_name(category_slug))
        subcategory = format_slug_name(subcategory_slug)

        return [
            a
            for a in self.store.list_articles()
            if category_field_matches(a, variants)
            and (subcategory_field_matches(a, subcategory) or tags_contain(a, [subcategory]))
        ]

    def list_related(self, category: str, exclude_slug: str | None = None) -> list[dict[str, Any]]:
        """Up to three other articles from the same category."""
        related = [
            a
            for a in self.store.list_articles()
            if category_field_matches(a, [category])
            and (exclude_slug is None or a.get("slug") != exclude_slug)
        ]
        return related[:RELATED_LIMIT]

    def list_by_tag(self, tag_name: str) -> list[dict[str, Any]]:
        """Articles tagged with `tag_name`.

        Only when no article carries the tag do category and subcategory get
        searched instead.
        """
        tag = unquote(tag_name)
        articles = self.store.list_articles()

        tagged = [a for a in articles if matches_tag(a, tag)]
        if tagged:
            return tagged

        logger.debug("No articles tagged %r, falling back to category/subcategory", tag)
        return [a for a in articles if matches_category_or_subcategory(a, tag)]

    def get_by_slug(self, slug: str) -> dict[str, Any] | None:
        """Get a single article by slug.

        Returns:
            Article dict or None if no single article has this slug
        """
        matches = self.store.find_by_slug(slug)
        if len(matches) != 1:
            return None
        return matches[0]
