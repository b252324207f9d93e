# server/api/portfolio.py

import logging
from pydantic import AnyUrl, BaseModel, TypeAdapter, ValidationError
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.errors import BadRequest, NotFound, ServerError
from core.repository import ImageRepository, group_by_category
from core.security import Identity
from core.state import with_category_lock, with_all_category_locks
from api.auth import get_current_user
from database import get_db
from models.image import CATEGORIES, URL_MAX_LENGTH, TITLE_MAX_LENGTH


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/portfolio", tags=["portfolio"])

_url_adapter = TypeAdapter(AnyUrl)

# Largest id a signed 64-bit INTEGER column can hold.
MAX_IMAGE_ID = 2**63 - 1


class AddImageRequest(BaseModel):
    """
    Request body for adding an image. Every field is optional at the schema level
    so that missing values are reported by the handler, in a fixed order.
    """
    category: str | None = None
    url: str | None = None
    title: str | None = None


async def read_add_image_request(
    request: Request,
    current_user: Identity = Depends(get_current_user),
) -> AddImageRequest:
    """
    Parses the add-image body only after the caller is authenticated,
    so a bad token is reported ahead of a malformed body.
    """
    body = await request.body()
    if not body.strip():
        return AddImageRequest()
    try:
        return AddImageRequest.model_validate_json(body)
    except ValidationError:
        raise BadRequest("Invalid request")


def is_absolute_url(value: str) -> bool:
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        return False
    return True


def validate_new_image(req: AddImageRequest) -> tuple[str, str, str]:
    """
    Checks an add-image request and returns (category, url, title).
    Presence is checked before the category, the category before the URL.
    """
    if not req.category or not req.url:
        raise BadRequest("Category and URL are required")

    if req.category not in CATEGORIES:
        raise BadRequest("Invalid category")

    if not is_absolute_url(req.url):
        raise BadRequest("Invalid URL format")

    if len(req.url) > URL_MAX_LENGTH:
        raise BadRequest(f"URL must be at most {URL_MAX_LENGTH} characters")

    title = req.title or ""
    if len(title) > TITLE_MAX_LENGTH:
        raise BadRequest(f"Title must be at most {TITLE_MAX_LENGTH} characters")

    return req.category, req.url, title


# -------------------------------
# Public Endpoints
# -------------------------------

@router.get("")
def get_portfolio(db: Session = Depends(get_db)):
    """
    Returns every category mapped to its images, newest first.
    All six categories are always present.
    """
    try:
        images = ImageRepository(db).list_newest_first()
    except SQLAlchemyError:
        logger.exception("Error fetching portfolio")
        raise ServerError("Failed to fetch portfolio data")
    return group_by_category(images)


@router.get("/counts")
def get_counts(db: Session = Depends(get_db)):
    try:
        return ImageRepository(db).count_by_category()
    except SQLAlchemyError:
        logger.exception("Error fetching counts")
        raise ServerError("Failed to fetch counts")


# -------------------------------
# Admin Endpoints
# -------------------------------

@router.post("/images", status_code=status.HTTP_201_CREATED)
def add_image(
    req: AddImageRequest = Depends(read_add_image_request),
    current_user: Identity = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    category, url, title = validate_new_image(req)

    try:
        with with_category_lock(category):
            image = ImageRepository(db).add(category, url, title)
    except SQLAlchemyError:
        logger.exception("Error adding image")
        raise ServerError("Failed to add image")

    logger.info("User '%s' added image %s to %s", current_user.username, image.id, category)
    return {
        "id": image.id,
        "category": image.category,
        "url": image.url,
        "title": image.title,
        "created_at": image.created_at,
        "updated_at": image.updated_at,
    }


@router.delete("/images/{image_id}")
def delete_image(
    image_id: int,
    current_user: Identity = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    if not 0 < image_id <= MAX_IMAGE_ID:
        raise NotFound("Image not found")

    try:
        deleted = ImageRepository(db).delete(image_id)
    except SQLAlchemyError:
        logger.exception("Error deleting image %s", image_id)
        raise ServerError("Failed to delete image")

    if not deleted:
        raise NotFound("Image not found")

    logger.info("User '%s' deleted image %s", current_user.username, image_id)
    return {"message": "Image deleted successfully"}


@router.delete("/images")
def clear_images(
    current_user: Identity = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        with with_all_category_locks():
            deleted = ImageRepository(db).delete_all()
    except SQLAlchemyError:
        logger.exception("Error clearing images")
        raise ServerError("Failed to clear images")

    logger.info("User '%s' cleared %d images", current_user.username, deleted)
    return {"message": "All images cleared successfully"}
