"""Text helpers for slugs, excerpts and taxonomy names."""

import random
import re
import time

EXCERPT_LENGTH = 150


def create_slug(title: str) -> str:
    """Create a URL slug from a title.

    Trims and lowercases, strips anything that is not a word character, whitespace or
    hyphen, then collapses whitespace runs into single hyphens.
    """
    slug = title.strip().lower()
    slug = re.sub(r"[^\w\s-]", "", slug)
    return re.sub(r"\s+", "-", slug)


def fallback_slug(source_id: str | None = None) -> str:
    """Slug for records with neither a slug nor a usable title.

    Derived from the source id when there is one, so re-runs land on the
    same slug. Otherwise a time-based slug is generated.
    """
    if source_id:
        return f"article-{source_id}"
    return f"article-{int(time.time() * 1000)}-{random.randint(0, 999)}"


def create_excerpt(content: str, length: int = EXCERPT_LENGTH) -> str:
    """First `length` characters of content followed by an ellipsis."""
    if not content:
        return ""
    return content[:length] + "..."


def format_slug_name(slug: str) -> str:
    """Turn a URL slug into a display name.

    >>> format_slug_name("criminal-law")
    'Criminal Law'
    """
    return " ".join(word[:1].upper() + word[1:] for word in slug.split("-"))


def singular_plural_variants(name: str) -> tuple[str, str, str]:
    """Return (name, singular, plural) for a taxonomy name.

    Category text is inconsistently pluralized, so both forms are matched.
    Only a single trailing "s" is considered.
    """
    singular = name[:-1] if name.endswith("s") else name
    plural = name if name.endswith("s") else name + "s"
    return name, singular, plural


def contains_ci(value, needle: str) -> bool:
    """Case-insensitive substring test; non-string values never match."""
    if not isinstance(value, str):
        return False
    return needle.lower() in value.lower()
