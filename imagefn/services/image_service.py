"""Service for reading recent image metadata."""

import logging

from pydantic import ValidationError
from sqlalchemy import Select, select
from sqlalchemy.engine import Row
from sqlalchemy.exc import SQLAlchemyError

from imagefn.core.errors import DatabaseConnectionError, QueryError, ScanError
from imagefn.database.connection import ConnectionFactory
from imagefn.database.models import Image
from imagefn.models.images import ImageList, ImageRecord, normalize_nullable

IMAGE_LIST_LIMIT = 10


def latest_images_query(limit: int = IMAGE_LIST_LIMIT) -> Select:
    """Select the most recently created images, newest first."""
    return (
        select(
            Image.id,
            Image.imagename,
            Image.detail,
            Image.imageurl,
            Image.username,
            Image.create_date,
            Image.deleted,
        )
        .order_by(Image.create_date.desc())
        .limit(limit)
    )


def row_to_record(row: Row) -> ImageRecord:
    """
    Map a result row to an image record.

    Args:
        row: Row produced by latest_images_query()

    Returns:
        ImageRecord with NULL text columns mapped to empty strings

    Raises:
        ScanError: If the timestamp or deletion flag cannot be converted
    """
    try:
        return ImageRecord(
            id=normalize_nullable(row.id),
            imagename=normalize_nullable(row.imagename),
            detail=normalize_nullable(row.detail),
            image_url=normalize_nullable(row.imageurl),
            owner=normalize_nullable(row.username),
            created_date=row.create_date,
            deleted=row.deleted,
        )
    except (ValidationError, TypeError, ValueError) as e:
        raise ScanError(f"Could not scan image row {row.id!r}: {e}") from e


class MetadataFetcher:
    """Reads the latest image records over a single connection."""

    def __init__(self, connection_factory: ConnectionFactory, logger: logging.Logger):
        """
        Initialize the fetcher.

        Args:
            connection_factory: Builds an engine from a connection descriptor
            logger: Invocation logger
        """
        self.connection_factory = connection_factory
        self.logger = logger

    def fetch(self, descriptor: str) -> ImageList:
        """
        Fetch the ten most recently created images.

        The connection is opened once and, together with the result cursor,
        released on every exit path.

        Args:
            descriptor: Connection descriptor (``username/password@service``)

        Returns:
            ImageList ordered by creation time, newest first

        Raises:
            DatabaseConnectionError: If the connection cannot be opened
            QueryError: If the query fails
            ScanError: If a row cannot be converted
        """
        try:
            engine = self.connection_factory(descriptor)
        except Exception as e:
            self.logger.error(f"Error creating database engine: {e}", exc_info=True)
            raise DatabaseConnectionError(f"Could not create database engine: {e}") from e

        try:
            try:
                connection = engine.connect()
            except Exception as e:
                self.logger.error(f"Error opening database connection: {e}", exc_info=True)
                raise DatabaseConnectionError(f"Could not open database connection: {e}") from e

            with connection:
                return self._select_images(connection)
        finally:
            engine.dispose()

    def _select_images(self, connection) -> ImageList:
        image_list = ImageList()

        try:
            result = connection.execute(latest_images_query())
        except SQLAlchemyError as e:
            self.logger.error(f"Error executing image query: {e}", exc_info=True)
            raise QueryError(f"Image query failed: {e}") from e

        try:
            for row in result:
                try:
                    record = row_to_record(row)
                except ScanError:
                    self.logger.error(f"Error scanning image row: {row.id!r}", exc_info=True)
                    raise
                self.logger.debug(
                    f"id:{record.id}, imagename:{record.imagename}, detail:{record.detail}, "
                    f"imageurl:{record.image_url}, userName:{record.owner}, "
                    f"createDate:{record.created_date.isoformat()} deleted:{record.deleted}"
                )
                image_list.append(record)
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching image rows: {e}", exc_info=True)
            raise QueryError(f"Fetching image rows failed: {e}") from e
        except (TypeError, ValueError) as e:
            # Raised by the dialect's result processors, e.g. an unparseable DATE
            self.logger.error(f"Error decoding image row: {e}", exc_info=True)
            raise ScanError(f"Could not decode image row: {e}") from e
        finally:
            result.close()

        self.logger.info("Successful. Select Metadata")
        return image_list
