"""Pydantic models for the image list response."""

from datetime import datetime, timezone
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


def normalize_nullable(value: Optional[Any]) -> str:
    """Map a nullable column to text: NULL becomes ``""``, numbers their string form."""
    if value is None:
        return ""
    return str(value)


class ImageRecord(BaseModel):
    """Metadata for one stored image."""

    id: str = Field(..., description="Image identifier")
    object: Literal["Image"] = Field(default="Image", description="Record kind")
    imagename: str = Field(default="", description="Display name")
    detail: str = Field(default="", description="Image description")
    image_url: str = Field(default="", description="Object storage URL")
    owner: str = Field(default="", description="Owning user name")
    created_date: datetime = Field(..., description="Creation timestamp (RFC 3339)")
    deleted: int = Field(..., description="Deletion flag, 0 or 1")

    @field_validator("created_date")
    @classmethod
    def ensure_timezone(cls, v: datetime) -> datetime:
        """Treat naive timestamps from the database as UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class ImageList(BaseModel):
    """Envelope wrapping the returned image records."""

    object: Literal["list"] = Field(default="list", description="Envelope kind")
    type: Literal["image"] = Field(default="image", description="Collection type")
    total: int = Field(default=0, description="Number of records in data")
    data: List[ImageRecord] = Field(default_factory=list, description="Image records")

    @model_validator(mode="after")
    def check_total(self) -> "ImageList":
        """Reject envelopes whose total disagrees with the record count."""
        if self.total != len(self.data):
            raise ValueError(f"total ({self.total}) does not match number of records ({len(self.data)})")
        return self

    def append(self, record: ImageRecord) -> None:
        """Add a record, keeping total in step."""
        self.data.append(record)
        self.total += 1
