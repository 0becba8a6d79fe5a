"""Tests for remark tag normalization and the comma-joined storage format."""

from src.services.remarks import (
    REMARK_LABELS,
    RemarkTag,
    decode_remarks,
    encode_remarks,
    is_remark_tag,
    normalize_remarks,
)


class TestRemarkTags:
    def test_closed_set(self):
        assert {tag.value for tag in RemarkTag} == {
            "pose_issue", "hands_visibility", "quality_issue", "nsfw",
        }

    def test_every_tag_has_a_label(self):
        assert list(REMARK_LABELS) == [tag.value for tag in RemarkTag]
        assert REMARK_LABELS["nsfw"] == "NSFW"

    def test_is_remark_tag(self):
        assert is_remark_tag("pose_issue")
        assert is_remark_tag(RemarkTag.NSFW)
        assert not is_remark_tag("blurry")
        assert not is_remark_tag(None)


class TestNormalize:
    def test_keeps_first_seen_order(self):
        assert normalize_remarks(["nsfw", "quality_issue"]) == ("nsfw", "quality_issue")

    def test_drops_duplicates(self):
        assert normalize_remarks(["nsfw", "nsfw", "pose_issue", "nsfw"]) == ("nsfw", "pose_issue")

    def test_ignores_unknown_tags(self, caplog):
        assert normalize_remarks(["blurry", "hands_visibility"]) == ("hands_visibility",)
        assert "blurry" in caplog.text

    def test_accepts_enum_members(self):
        assert normalize_remarks([RemarkTag.POSE_ISSUE]) == ("pose_issue",)

    def test_empty_and_none(self):
        assert normalize_remarks([]) == ()
        assert normalize_remarks(None) == ()


class TestEncoding:
    def test_encode_joins_with_commas(self):
        assert encode_remarks(["nsfw", "quality_issue"]) == "nsfw,quality_issue"

    def test_empty_set_encodes_to_none(self):
        assert encode_remarks([]) is None
        assert encode_remarks(None) is None

    def test_only_unknown_tags_encode_to_none(self):
        assert encode_remarks(["blurry"]) is None

    def test_decode(self):
        assert decode_remarks("nsfw,quality_issue") == ("nsfw", "quality_issue")

    def test_decode_empty_values(self):
        assert decode_remarks(None) == ()
        assert decode_remarks("") == ()

    def test_decode_skips_blank_segments(self):
        assert decode_remarks("pose_issue,, nsfw ,") == ("pose_issue", "nsfw")
