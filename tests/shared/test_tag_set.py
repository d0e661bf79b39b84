"""Tests for the TagSet value object."""

from tagsort.shared.tag_set import TagField, TagSet


def test_default_tag_set_is_empty() -> None:
    tags = TagSet()
    assert tags == TagSet(artist="", album_artist="", album="", title="", track_number="")


def test_equality_covers_every_field() -> None:
    base = TagSet(artist="A", album="B", title="C", track_number="1")
    assert base == TagSet(artist="A", album="B", title="C", track_number="1")
    assert base != TagSet(artist="A", album="B", title="C", track_number="2")
    assert base != TagSet(artist="A", album_artist="X", album="B", title="C", track_number="1")


def test_with_track_number_returns_copy() -> None:
    tags = TagSet(artist="A", album="B", title="C", track_number="07")
    updated = tags.with_track_number("7")
    assert updated.track_number == "7"
    assert tags.track_number == "07"
    assert updated.artist == "A"


def test_str_lists_all_fields() -> None:
    rendered = str(TagSet(artist="A", title="C", track_number="3"))
    assert "artist='A'" in rendered
    assert "album=''" in rendered
    assert "track='3'" in rendered


def test_tag_field_values_are_easy_keys() -> None:
    assert [field.value for field in TagField] == [
        "artist",
        "albumartist",
        "album",
        "title",
        "tracknumber",
    ]
