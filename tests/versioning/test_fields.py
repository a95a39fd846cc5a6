"""Tests for field classification."""

from __future__ import annotations

from pydantic import BaseModel

from doc_history.versioning.fields import (
    UNDECLARED,
    FieldClassifier,
    FieldDescriptor,
    ModelFieldClassifier,
    StaticFieldClassifier,
    classifier_for,
    versioning_field,
)


class Page(BaseModel):
    slug: str = ""
    title: dict[str, str] = versioning_field(default_factory=dict, localized=True)
    hits: int = versioning_field(0, versioned=False)
    body: str = versioning_field("")


class TestModelFieldClassifier:
    """Test classification from pydantic field declarations."""

    def test_plain_field_is_versioned(self) -> None:
        """Verify fields without flags default to versioned, not localized."""
        assert ModelFieldClassifier(Page).classify("slug") == FieldDescriptor()

    def test_localized_field(self) -> None:
        descriptor = ModelFieldClassifier(Page).classify("title")
        assert descriptor.localized is True
        assert descriptor.versioned is True

    def test_non_versioned_field(self) -> None:
        assert ModelFieldClassifier(Page).classify("hits").versioned is False

    def test_explicit_default_flags(self) -> None:
        assert ModelFieldClassifier(Page).classify("body") == FieldDescriptor()

    def test_unknown_field_is_versioned(self) -> None:
        """Verify undeclared names are included, never rejected."""
        assert ModelFieldClassifier(Page).classify("anything") is UNDECLARED
        assert UNDECLARED.versioned is True
        assert UNDECLARED.localized is False

    def test_versioning_field_keeps_default(self) -> None:
        """Verify declared defaults still apply to model instances."""
        page = Page()
        assert page.hits == 0
        assert page.title == {}

    def test_classifier_for_is_cached(self) -> None:
        assert classifier_for(Page) is classifier_for(Page)


class TestStaticFieldClassifier:
    """Test mapping-backed classification."""

    def test_lookup_and_default(self) -> None:
        classifier = StaticFieldClassifier({"title": FieldDescriptor(localized=True)})
        assert classifier.classify("title").localized is True
        assert classifier.classify("other") is UNDECLARED

    def test_satisfies_protocol(self) -> None:
        assert isinstance(StaticFieldClassifier(), FieldClassifier)
        assert isinstance(ModelFieldClassifier(Page), FieldClassifier)
