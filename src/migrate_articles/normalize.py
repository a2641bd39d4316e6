"""Convert loosely-typed source documents into destination rows.

Source documents come from a schemaless store: any field may be missing, null
or of the wrong type. Every field here falls back to its default instead of
propagating such values.
"""

from typing import Any

from common.datetime import parse_datetime
from common.text import create_excerpt, create_slug, fallback_slug

# destination field -> source field names, first non-empty wins
OPTIONAL_TEXT_FIELDS = {
    "source": ("source",),
    "image": ("image",),
    "image_caption": ("imageCaption", "image_caption"),
    "image_alt": ("imageAlt", "image_alt"),
    "image_credit": ("imageCredit", "image_credit"),
    "pdf_url": ("pdfUrl", "pdf_url"),
    "author_bio": ("authorBio", "author_bio"),
}


def _text(value: Any, default: str | None) -> str | None:
    if isinstance(value, str) and value:
        return value
    return default


def _first_text(doc: dict, names: tuple[str, ...]) -> str | None:
    for name in names:
        value = _text(doc.get(name), None)
        if value is not None:
            return value
    return None


def _tags(value: Any) -> list[str]:
    if not isinstance(value, (list, tuple)):
        return []
    return [tag for tag in value if isinstance(tag, str)]


def _mongo_id(doc: dict) -> str | None:
    doc_id = doc.get("_id")
    return str(doc_id) if doc_id is not None else None


def normalize_article(doc: dict[str, Any]) -> dict[str, Any]:
    """Build a fully-defaulted `articles` row from a source document."""
    title = _text(doc.get("title"), "")
    content = _text(doc.get("content"), "")

    mongo_id = _mongo_id(doc)
    slug = _text(doc.get("slug"), None) or create_slug(title) or fallback_slug(mongo_id)

    is_featured = doc.get("is_featured", doc.get("isFeatured"))

    row = {
        "title": title,
        "slug": slug,
        "author": _text(doc.get("author"), "Unknown"),
        "published_date": parse_datetime(doc.get("published_date")),
        "content": content,
        "excerpt": _text(doc.get("excerpt"), None) or create_excerpt(content),
        "category": _text(doc.get("category"), "Uncategorized"),
        "subcategory": _text(doc.get("subcategory"), None),
        "tags": _tags(doc.get("tags")),
        "is_featured": is_featured if isinstance(is_featured, bool) else False,
        "mongo_id": mongo_id,
    }
    for field, names in OPTIONAL_TEXT_FIELDS.items():
        row[field] = _first_text(doc, names)

    return row


def normalize_subscriber(doc: dict[str, Any]) -> dict[str, Any]:
    """Build a `subscribers` row from a source document.

    `email` has no default; callers drop rows where it is None.
    """
    email = _text(doc.get("email"), None)
    subscribed_at = doc.get("subscribed_at") or doc.get("created_at")

    return {
        "email": email,
        "subscribed_at": parse_datetime(subscribed_at),
        "status": _text(doc.get("status"), "active"),
        "mongo_id": _mongo_id(doc),
    }
