"""Tests for the image list models."""

import json
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from imagefn.models.images import ImageList, ImageRecord, normalize_nullable


def make_record(**overrides):
    values = {
        "id": "img-01",
        "imagename": "sunset",
        "detail": "taken from the pier",
        "image_url": "https://objectstorage.example.com/n/ns/b/images/o/img-01.png",
        "owner": "alice",
        "created_date": datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc),
        "deleted": 0,
    }
    values.update(overrides)
    return ImageRecord(**values)


class TestNormalizeNullable:
    """Tests for NULL text normalization."""

    def test_none_becomes_empty_string(self):
        assert normalize_nullable(None) == ""

    def test_value_passes_through(self):
        assert normalize_nullable("sunset") == "sunset"

    def test_empty_string_passes_through(self):
        assert normalize_nullable("") == ""

    def test_number_becomes_text(self):
        assert normalize_nullable(42) == "42"


class TestImageRecord:
    """Tests for the image record model."""

    def test_object_tag(self):
        """Test every record is tagged as an Image."""
        assert make_record().object == "Image"

    def test_naive_timestamp_treated_as_utc(self):
        """Test naive timestamps get a UTC offset."""
        record = make_record(created_date=datetime(2024, 1, 1, 12, 0, 0))
        assert record.created_date.tzinfo is not None
        assert record.created_date.utcoffset() == timedelta(0)

    def test_timestamp_serialized_rfc3339(self):
        """Test created_date is written with an offset."""
        data = json.loads(make_record().model_dump_json())
        assert data["created_date"] == "2024-01-01T12:00:00Z"

    def test_aware_timestamp_keeps_offset(self):
        """Test non-UTC offsets are preserved."""
        tokyo = timezone(timedelta(hours=9))
        record = make_record(created_date=datetime(2024, 1, 1, 21, 0, 0, tzinfo=tokyo))
        data = json.loads(record.model_dump_json())
        assert data["created_date"] == "2024-01-01T21:00:00+09:00"

    def test_deleted_is_integer(self):
        """Test the deletion flag is written as an integer, not a boolean."""
        data = json.loads(make_record(deleted=1).model_dump_json())
        assert data["deleted"] == 1
        assert data["deleted"] is not True

    def test_missing_deleted_rejected(self):
        """Test a NULL deletion flag is not accepted."""
        with pytest.raises(ValidationError):
            make_record(deleted=None)

    def test_field_names(self):
        """Test the serialized record uses the published field names."""
        data = json.loads(make_record().model_dump_json())
        assert set(data) == {
            "id", "object", "imagename", "detail", "image_url", "owner", "created_date", "deleted",
        }


class TestImageList:
    """Tests for the result envelope."""

    def test_empty_envelope(self):
        """Test an empty envelope has total 0 and an empty list, never null."""
        data = json.loads(ImageList().model_dump_json())
        assert data == {"object": "list", "type": "image", "total": 0, "data": []}

    @pytest.mark.parametrize("count", [0, 1, 10])
    def test_total_tracks_appends(self, count):
        """Test total equals the number of appended records."""
        image_list = ImageList()
        for i in range(count):
            image_list.append(make_record(id=f"img-{i}"))

        assert image_list.total == count
        assert len(image_list.data) == count

    def test_mismatched_total_rejected(self):
        """Test an envelope whose total disagrees with data is invalid."""
        with pytest.raises(ValidationError):
            ImageList(total=2, data=[make_record()])

    def test_json_round_trip(self):
        """Test serializing and parsing keeps total and record count."""
        image_list = ImageList()
        image_list.append(make_record(id="img-1"))
        image_list.append(make_record(id="img-2", detail=""))

        parsed = ImageList.model_validate_json(image_list.model_dump_json())

        assert parsed.total == image_list.total == 2
        assert len(parsed.data) == 2
        assert [r.id for r in parsed.data] == ["img-1", "img-2"]
