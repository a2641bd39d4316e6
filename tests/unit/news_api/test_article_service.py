"""Tests for news_api.services.article_service module."""

import pytest

from common.errors import StoreError
from news_api.io.jsonl import InMemoryArticleStore
from news_api.services.article_service import ArticleService, parse_limit


def _slugs(articles):
    return [a["slug"] for a in articles]


@pytest.fixture
def service(sample_articles):
    return ArticleService(InMemoryArticleStore(sample_articles))


class TestParseLimit:
    @pytest.mark.parametrize(
        "value, expected",
        [(None, 5), ("", 5), ("abc", 5), ("0", 5), ("-3", 5), ("3", 3), ("7abc", 7), (" 12", 12), (4, 4)],
    )
    def test_values(self, value, expected) -> None:
        assert parse_limit(value) == expected


class TestListArticles:
    def test_newest_first(self, service) -> None:
        assert _slugs(service.list_articles()) == [
            "article-6", "article-5", "article-4", "article-3", "article-2", "article-1",
        ]


class TestListFeatured:
    def test_default_limit_is_five(self, service) -> None:
        assert len(service.list_featured()) == 5

    def test_prefix_of_full_ordering(self, service) -> None:
        full = service.list_articles()
        for n in range(1, 8):
            assert service.list_featured(str(n)) == full[: min(n, len(full))]

    def test_not_filtered_on_is_featured(self, sample_articles) -> None:
        sample_articles[0]["is_featured"] = True
        service = ArticleService(InMemoryArticleStore(sample_articles))
        assert _slugs(service.list_featured("1")) == ["article-6"]


class TestListByCategory:
    def test_singular_plural_and_tags(self, service) -> None:
        assert _slugs(service.list_by_category("family-laws")) == [
            "article-4", "article-3", "article-2",
        ]

    def test_tag_match_included_without_duplicates(self, service) -> None:
        result = service.list_by_category("criminal-law")
        assert _slugs(result) == ["article-5", "article-1"]
        assert len({a["id"] for a in result}) == len(result)

    def test_article_matching_both_tests_appears_once(self, sample_articles) -> None:
        sample_articles[0]["tags"] = ["Criminal Law"]
        service = ArticleService(InMemoryArticleStore(sample_articles))
        assert _slugs(service.list_by_category("criminal-law")).count("article-1") == 1

    def test_no_match(self, service) -> None:
        assert service.list_by_category("maritime-law") == []


class TestListByCategoryAndSubcategory:
    def test_subcategory_field_match(self, service) -> None:
        assert _slugs(service.list_by_category_and_subcategory("family-law", "child-custody")) == [
            "article-2"
        ]

    def test_subcategory_and_tag_match_appears_once(self, service) -> None:
        assert _slugs(service.list_by_category_and_subcategory("family-law", "custody")) == [
            "article-2"
        ]

    def test_subcategory_via_tags(self, sample_articles) -> None:
        sample_articles[2]["tags"] = ["Alimony"]
        service = ArticleService(InMemoryArticleStore(sample_articles))
        assert _slugs(service.list_by_category_and_subcategory("family-laws", "alimony")) == [
            "article-3"
        ]

    def test_category_must_also_match(self, service) -> None:
        # article-6 has subcategory "Family Settlement" but category "Property"
        assert service.list_by_category_and_subcategory("criminal-law", "settlement") == []


class TestListRelated:
    def test_excludes_current_slug(self, service) -> None:
        assert _slugs(service.list_related("law", "article-2")) == ["article-3", "article-1"]

    def test_at_most_three(self, service) -> None:
        assert _slugs(service.list_related("a")) == ["article-5", "article-3", "article-2"]

    def test_no_exclusion_when_slug_missing(self, service) -> None:
        assert _slugs(service.list_related("law")) == ["article-3", "article-2", "article-1"]


class TestListByTag:
    def test_direct_tag_match(self, service) -> None:
        assert _slugs(service.list_by_tag("Privacy")) == ["article-4"]

    def test_case_insensitive(self, service) -> None:
        assert _slugs(service.list_by_tag("custody")) == ["article-2"]

    def test_percent_encoded(self, service) -> None:
        assert _slugs(service.list_by_tag("family%20law")) == ["article-4"]

    def test_fallback_not_consulted_when_tags_match(self, service) -> None:
        # article-2 and article-3 have "family law" in category but only tags count here
        assert "article-2" not in _slugs(service.list_by_tag("family law"))

    def test_fallback_to_subcategory(self, service) -> None:
        assert _slugs(service.list_by_tag("Mergers")) == ["article-5"]

    def test_fallback_to_category(self, service) -> None:
        assert _slugs(service.list_by_tag("property")) == ["article-6"]

    def test_nothing_anywhere(self, service) -> None:
        assert service.list_by_tag("maritime") == []


class TestGetBySlug:
    def test_found(self, service) -> None:
        assert service.get_by_slug("article-3")["id"] == 3

    def test_not_found(self, service) -> None:
        assert service.get_by_slug("missing") is None

    def test_ambiguous_slug_is_not_found(self, sample_articles) -> None:
        sample_articles[1]["slug"] = "article-1"
        service = ArticleService(InMemoryArticleStore(sample_articles))
        assert service.get_by_slug("article-1") is None


class TestStoreErrors:
    def test_store_error_propagates(self) -> None:
        class BrokenStore:
            def list_articles(self):
                raise StoreError("connection refused")

        with pytest.raises(StoreError, match="connection refused"):
            ArticleService(BrokenStore()).list_by_category("tax")
