"""API endpoint for image metadata retrieval."""

from fastapi import APIRouter, Depends, HTTPException, status

from imagefn.core.errors import ImageFunctionError
from imagefn.database.connection import ConnectionFactory, oracle_connection_factory
from imagefn.handler import get_image_list
from imagefn.models.images import ImageList
from imagefn.utils.logging import invocation_logger

router = APIRouter(prefix="/images", tags=["images"])


def get_connection_factory() -> ConnectionFactory:
    """Connection factory dependency, overridden in tests."""
    return oracle_connection_factory


@router.get(
    "",
    response_model=ImageList,
    summary="List Recent Images",
    description="Return metadata for the ten most recently created images, newest first.",
)
def list_images(connection_factory: ConnectionFactory = Depends(get_connection_factory)):
    """
    Retrieve the latest image records.

    Runs in the threadpool since the database driver blocks.

    Raises:
        HTTPException: If configuration is missing or the database call fails
    """
    with invocation_logger(__name__) as request_logger:
        try:
            return get_image_list(connection_factory, request_logger)
        except ImageFunctionError as e:
            request_logger.error(f"Error retrieving images: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="An error occurred while retrieving images.",
            )
