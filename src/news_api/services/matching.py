"""Predicates deciding whether an article belongs to a category, subcategory or tag.

Taxonomy fields are free text, inconsistently cased and pluralized, so every
test here is a case-insensitive substring test rather than an exact match.
"""

from typing import Any, Iterable

from common.text import contains_ci


def _tags(article: dict[str, Any]) -> list:
    tags = article.get("tags")
    return tags if isinstance(tags, list) else []


def tags_contain(article: dict[str, Any], needles: Iterable[str]) -> bool:
    """True if any tag entry contains any of `needles`."""
    needles = list(needles)
    return any(contains_ci(tag, needle) for tag in _tags(article) for needle in needles)


def category_field_matches(article: dict[str, Any], variants: Iterable[str]) -> bool:
    category = article.get("category")
    return any(contains_ci(category, variant) for variant in variants)


def matches_category(article: dict[str, Any], variants: Iterable[str]) -> bool:
    """Category field or any tag contains one of the name variants."""
    variants = list(variants)
    return category_field_matches(article, variants) or tags_contain(article, variants)


def subcategory_field_matches(article: dict[str, Any], name: str) -> bool:
    return contains_ci(article.get("subcategory"), name)


def matches_tag(article: dict[str, Any], tag: str) -> bool:
    return tags_contain(article, [tag])


def matches_category_or_subcategory(article: dict[str, Any], text: str) -> bool:
    return contains_ci(article.get("category"), text) or contains_ci(
        article.get("subcategory"), text
    )

