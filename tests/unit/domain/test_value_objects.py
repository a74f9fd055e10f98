"""Unit tests for tags, domains and visits."""

from datetime import datetime, timezone

from shortkit.domain.value_objects import Domain, Tag, Visit, VisitType


def test_tag_identity_is_its_name():
    """A stored tag and a freshly wrapped one with the same name are equal."""
    assert Tag("foo", id=3) == Tag("foo")
    assert len({Tag("foo", id=3), Tag("foo"), Tag("bar")}) == 2
    assert str(Tag("foo")) == "foo"


def test_domain_identity_is_its_authority():
    """Domains compare by authority only."""
    assert Domain("s.example.com", id=1) == Domain("s.example.com", id=2)
    assert Domain("a.example.com") != Domain("b.example.com")
    assert str(Domain("s.example.com")) == "s.example.com"


def test_visit_defaults():
    """A visit is normal and not a bot unless said otherwise."""
    visit = Visit(date=datetime(2025, 1, 1, tzinfo=timezone.utc))
    assert visit.type is VisitType.NORMAL
    assert visit.potential_bot is False
    assert visit.id is None
