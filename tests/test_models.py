"""Tests for message models, default filling and attachment loading."""

from pathlib import Path

import pytest

from pushover import OPTIONAL_FIELDS, Attachment, Message, fill_defaults, load_attachment


class TestFillDefaults:
    """Tests for fill_defaults."""

    def test_adds_missing_optional_fields(self):
        """Test that every optional field is present afterwards."""
        filled = fill_defaults({"message": "hello"})
        assert filled["message"] == "hello"
        for name in OPTIONAL_FIELDS:
            assert filled[name] == ""

    def test_keeps_present_values(self):
        """Test that set values are left alone."""
        filled = fill_defaults({"message": "hi", "title": "Backup", "priority": 1})
        assert filled["title"] == "Backup"
        assert filled["priority"] == 1

    def test_falsy_values_become_empty(self):
        """Test that None and 0 are normalized to empty strings."""
        filled = fill_defaults({"message": "hi", "device": None, "priority": 0})
        assert filled["device"] == ""
        assert filled["priority"] == ""

    def test_does_not_mutate_input(self):
        """Test that the caller's record is untouched."""
        record = {"message": "hi"}
        filled = fill_defaults(record)
        assert record == {"message": "hi"}
        assert filled is not record

    def test_passes_through_other_fields(self):
        """Test that fields outside the optional set are kept."""
        filled = fill_defaults({"message": "hi", "html": 1, "ttl": 60})
        assert filled["html"] == 1
        assert filled["ttl"] == 60


class TestLoadAttachment:
    """Tests for load_attachment."""

    def test_load_from_path_string(self, png_file):
        """Test loading an attachment from a path string."""
        attachment = load_attachment(str(png_file))
        assert attachment.name == "photo.png"
        assert attachment.content == b"\x89P"
        assert attachment.type is None

    def test_load_from_path_object(self, png_file):
        """Test loading an attachment from a Path."""
        attachment = load_attachment(png_file)
        assert attachment.name == "photo.png"
        assert attachment.content == b"\x89P"

    def test_attachment_passes_through(self):
        """Test that a prepared attachment is returned unchanged."""
        prepared = Attachment(name="a.jpg", content=b"\xff\xd8", type="image/jpeg")
        assert load_attachment(prepared) is prepared

    def test_mapping_with_data_key(self):
        """Test that a mapping using the data key is accepted."""
        attachment = load_attachment({"name": "a.gif", "data": b"GIF8"})
        assert attachment.name == "a.gif"
        assert attachment.content == b"GIF8"

    def test_missing_file_raises(self, tmp_path):
        """Test that an unreadable path raises an OSError."""
        with pytest.raises(OSError):
            load_attachment(tmp_path / "missing.png")


class TestMessage:
    """Tests for the Message model."""

    def test_message_required(self):
        """Test that message is required."""
        with pytest.raises(ValueError):
            Message.model_validate({"title": "no body"})

    def test_extra_fields_allowed(self):
        """Test that unknown fields are kept."""
        msg = Message.model_validate({"message": "hi", "callback": "https://example.com"})
        assert msg.model_dump(exclude_none=True)["callback"] == "https://example.com"

    def test_file_accepts_attachment_mapping(self):
        """Test that file can be given as an attachment mapping."""
        msg = Message.model_validate(
            {"message": "hi", "file": {"name": "x.png", "content": b"\x00\x01", "type": "image/png"}}
        )
        assert isinstance(msg.file, Attachment)
        assert msg.file.type == "image/png"

    def test_file_keeps_path(self):
        """Test that a Path file stays a Path."""
        msg = Message(message="hi", file=Path("/tmp/x.png"))
        assert isinstance(msg.file, Path)
