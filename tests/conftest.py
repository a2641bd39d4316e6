from datetime import datetime, timedelta, timezone

import pytest


def make_article(index, **overrides):
    published = datetime(2024, 1, 1, tzinfo=timezone.utc) + timedelta(days=index)
    article = {
        "id": index,
        "title": f"Article {index}",
        "slug": f"article-{index}",
        "author": "Unknown",
        "published_date": published.isoformat(),
        "content": "",
        "excerpt": "",
        "category": "Uncategorized",
        "subcategory": None,
        "tags": [],
        "is_featured": False,
    }
    article.update(overrides)
    return article


@pytest.fixture
def sample_articles():
    """Articles newest-first once loaded into a store (higher index is newer)."""
    return [
        make_article(1, category="Criminal Law", subcategory="Bail", tags=["Bail"]),
        make_article(2, category="family law", subcategory="Child Custody", tags=["Custody"]),
        make_article(3, category="Family Laws", subcategory="Divorce", tags=[]),
        make_article(4, category="Technology", tags=["Privacy", "family law"]),
        make_article(5, category="Corporate", subcategory="Mergers", tags=["Criminal Law"]),
        make_article(6, category="Property", subcategory="Family Settlement", tags=[]),
    ]
