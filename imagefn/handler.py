"""Function entry point: load credentials, fetch images, write JSON."""

import logging
import sys
from typing import Optional, TextIO

from imagefn.config import Settings, load_settings
from imagefn.core.credentials import load_credentials
from imagefn.core.errors import ImageFunctionError
from imagefn.database.connection import ConnectionFactory, oracle_connection_factory
from imagefn.models.images import ImageList
from imagefn.services.image_service import MetadataFetcher
from imagefn.utils.logging import invocation_logger, setup_logging


def get_image_list(
    connection_factory: ConnectionFactory,
    logger: logging.Logger,
    settings: Optional[Settings] = None,
) -> ImageList:
    """
    Load credentials from the environment and fetch the latest images.

    Raises:
        ImageFunctionError: On missing configuration or any database failure
    """
    settings = settings or load_settings()
    credentials = load_credentials(settings, logger)
    fetcher = MetadataFetcher(connection_factory, logger)
    return fetcher.fetch(credentials.descriptor)


def emit_image_list(image_list: ImageList, out: TextIO) -> None:
    """Write the envelope to ``out`` as a single JSON object."""
    out.write(image_list.model_dump_json())
    out.write("\n")
    out.flush()


def fn_main(
    in_stream: Optional[TextIO],
    out_stream: TextIO,
    connection_factory: Optional[ConnectionFactory] = None,
    settings: Optional[Settings] = None,
) -> bool:
    """
    Handle one invocation.

    Args:
        in_stream: Request body stream (not read)
        out_stream: Stream receiving the JSON envelope
        connection_factory: Engine factory, Oracle by default
        settings: Settings to use instead of reading the environment

    Returns:
        True if the envelope was written, False if the invocation failed.
        Nothing is written to ``out_stream`` on failure.
    """
    setup_logging(settings)

    with invocation_logger(__name__) as logger:
        try:
            image_list = get_image_list(
                connection_factory or oracle_connection_factory,
                logger,
                settings,
            )
        except ImageFunctionError as e:
            logger.error(f"Invocation failed: {e}")
            return False

        emit_image_list(image_list, out_stream)
        logger.info(f"Wrote {image_list.total} image records")
        return True


def main() -> None:
    """Local development harness: stdin in, stdout out."""
    ok = fn_main(sys.stdin, sys.stdout)
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
