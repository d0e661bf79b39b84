"""Tests for the MusicFile track record."""

from __future__ import annotations

from pathlib import Path

import pytest

from tagsort.features.tags import MusicFile
from tagsort.shared.errors import TagReadError, TagWriteError
from tagsort.shared.tag_set import TagSet
from fakes import FakeTagCodec, read_track, write_track


def _open(library: Path, relative: str, codec: FakeTagCodec) -> MusicFile:
    music_file = MusicFile.open(library, Path(relative), codec)
    assert music_file is not None
    return music_file


class TestOpen:
    def test_returns_none_for_untagged_file(self, library: Path, codec: FakeTagCodec) -> None:
        _ = (library / "cover.jpg").write_bytes(b"\xff\xd8\xff")
        assert MusicFile.open(library, Path("cover.jpg"), codec) is None

    def test_returns_none_without_extension(self, library: Path, codec: FakeTagCodec) -> None:
        _ = write_track(library / "A" / "B" / "C", artist="A")
        assert MusicFile.open(library, Path("A/B/C"), codec) is None

    def test_builds_record_for_tagged_file(self, library: Path, codec: FakeTagCodec) -> None:
        _ = write_track(library / "A" / "B" / "C.flac", artist="A")
        music_file = _open(library, "A/B/C.flac", codec)
        assert music_file.full_path == library / "A" / "B" / "C.flac"
        assert music_file.extension == ".flac"


class TestTags:
    def test_absent_fields_read_as_empty(self, library: Path, codec: FakeTagCodec) -> None:
        _ = write_track(library / "x.mp3", title="Only")
        assert _open(library, "x.mp3", codec).tags() == TagSet(title="Only")

    def test_read_values_are_sanitized(self, library: Path, codec: FakeTagCodec) -> None:
        _ = write_track(library / "x.mp3", artist="AC/DC", album="Why?", title="T", tracknumber="3/12")
        assert _open(library, "x.mp3", codec).tags() == TagSet(
            artist="AC-DC", album="Why", title="T", track_number="3"
        )

    @pytest.mark.parametrize(
        ("stored", "expected"),
        [("3/12", "3"), ("12 - Song", "12"), ("007", "007"), ("Side B", "")],
    )
    def test_track_number_reads_as_leading_digits(
        self, library: Path, codec: FakeTagCodec, stored: str, expected: str
    ) -> None:
        _ = write_track(library / "x.mp3", tracknumber=stored)
        track_number = _open(library, "x.mp3", codec).tags().track_number
        assert track_number == expected
        assert "/" not in track_number

    def test_read_failure_after_open_propagates(self, library: Path, codec: FakeTagCodec) -> None:
        path = write_track(library / "x.mp3", title="T")
        music_file = _open(library, "x.mp3", codec)
        path.unlink()
        with pytest.raises(TagReadError):
            _ = music_file.tags()


class TestConsistency:
    def test_paths_match_for_canonical_file(self, library: Path, codec: FakeTagCodec) -> None:
        _ = write_track(library / "A" / "B" / "C.mp3", artist="A", album="B", title="C")
        assert _open(library, "A/B/C.mp3", codec).paths_match()

    def test_paths_do_not_match_for_misplaced_file(self, library: Path, codec: FakeTagCodec) -> None:
        _ = write_track(library / "Unknown" / "Unknown" / "track1.flac", artist="A", album="B", title="C")
        assert not _open(library, "Unknown/Unknown/track1.flac", codec).paths_match()

    def test_tags_match_for_canonical_file(self, library: Path, codec: FakeTagCodec) -> None:
        _ = write_track(library / "A" / "B" / "C.mp3", artist="A", album="B", title="C", tracknumber="7")
        assert _open(library, "A/B/C.mp3", codec).tags_match()

    def test_tags_mismatch_with_album_artist(self, library: Path, codec: FakeTagCodec) -> None:
        _ = write_track(library / "A" / "B" / "C.mp3", artist="A", albumartist="V", album="B", title="C")
        assert not _open(library, "A/B/C.mp3", codec).tags_match()

    def test_compose_target_tags_carries_normalized_track(self, library: Path, codec: FakeTagCodec) -> None:
        _ = write_track(library / "A" / "B" / "C.mp3", artist="X", title="Y", tracknumber="12 - Song")
        target = _open(library, "A/B/C.mp3", codec).compose_target_tags()
        assert target == TagSet(artist="A", album="B", title="C", track_number="12")


class TestSetTags:
    def test_writes_fields_and_removes_album_artist(self, library: Path, codec: FakeTagCodec) -> None:
        path = write_track(library / "A" / "B" / "C.mp3", albumartist="V", artist="X", tracknumber="2")
        warnings = _open(library, "A/B/C.mp3", codec).set_tags(
            TagSet(artist="A", album="B", title="C", track_number="2")
        )
        assert warnings == []
        assert read_track(path) == {"artist": "A", "album": "B", "title": "C", "tracknumber": "2"}

    def test_unparsable_track_number_is_skipped_with_warning(
        self, library: Path, codec: FakeTagCodec
    ) -> None:
        path = write_track(library / "A" / "B" / "C.mp3", tracknumber="Side B")
        warnings = _open(library, "A/B/C.mp3", codec).set_tags(
            TagSet(artist="A", album="B", title="C", track_number="")
        )
        assert len(warnings) == 1
        stored = read_track(path)
        assert stored["title"] == "C"
        assert stored["tracknumber"] == "Side B"

    def test_track_number_above_limit_is_rejected(self, library: Path, codec: FakeTagCodec) -> None:
        path = write_track(library / "x.mp3")
        warnings = _open(library, "x.mp3", codec).set_tags(TagSet(title="x", track_number="70000"))
        assert warnings
        assert "tracknumber" not in read_track(path)

    def test_leading_zeros_are_dropped_on_write(self, library: Path, codec: FakeTagCodec) -> None:
        path = write_track(library / "x.mp3")
        _ = _open(library, "x.mp3", codec).set_tags(TagSet(title="x", track_number="007"))
        assert read_track(path)["tracknumber"] == "7"

    def test_persist_failure_raises(self, library: Path, codec: FakeTagCodec) -> None:
        path = write_track(library / "x.mp3")
        codec.read_only.add(path)
        with pytest.raises(TagWriteError):
            _ = _open(library, "x.mp3", codec).set_tags(TagSet(title="x"))


def test_remove_tags_clears_managed_fields(library: Path, codec: FakeTagCodec) -> None:
    path = write_track(library / "x.mp3", artist="A", albumartist="V", album="B", title="C", tracknumber="1", genre="Rock")
    _open(library, "x.mp3", codec).remove_tags()
    assert read_track(path) == {"genre": "Rock"}
