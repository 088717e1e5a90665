"""SQLAlchemy models for the Oracle image metadata table."""

from sqlalchemy import Column, String, DateTime, Integer, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class Image(Base):
    """Image metadata row written by the upload pipeline."""

    __tablename__ = "images"

    id = Column(String(255), primary_key=True)
    imagename = Column(String(255), nullable=True)
    detail = Column(Text, nullable=True)
    imageurl = Column(Text, nullable=True)
    username = Column(String(255), nullable=True)  # owner
    create_date = Column(DateTime, nullable=False)
    deleted = Column(Integer, default=0)  # 0 or 1, not filtered on read
