# server/core/repository.py

from sqlalchemy import func
from sqlalchemy.orm import Session

from models.image import Image, CATEGORIES


class ImageRepository:
    """
    Store access for image records, bound to one request's session.
    Every read goes to the database; nothing is cached between calls.
    """

    def __init__(self, db: Session):
        self.db = db

    def add(self, category: str, url: str, title: str = "") -> Image:
        if category not in CATEGORIES:
            raise ValueError(f"Invalid category: {category!r}")

        image = Image(category=category, url=url, title=title or "")
        self.db.add(image)
        self.db.commit()
        self.db.refresh(image)
        return image

    def list_newest_first(self) -> list[Image]:
        return (
            self.db.query(Image)
            .order_by(Image.created_at.desc(), Image.id.desc())
            .all()
        )

    def delete(self, image_id: int) -> bool:
        deleted = self.db.query(Image).filter(Image.id == image_id).delete(synchronize_session=False)
        self.db.commit()
        return deleted > 0

    def delete_all(self) -> int:
        deleted = self.db.query(Image).delete(synchronize_session=False)
        self.db.commit()
        return deleted

    def count(self) -> int:
        return self.db.query(func.count(Image.id)).scalar()

    def count_by_category(self) -> dict[str, int]:
        counts = {category: 0 for category in CATEGORIES}
        rows = (
            self.db.query(Image.category, func.count(Image.id))
            .group_by(Image.category)
            .all()
        )
        for category, count in rows:
            counts[category] = count
        return counts


def group_by_category(images: list[Image]) -> dict[str, list[dict]]:
    """
    Buckets images under every known category, keeping the input order.
    Categories without images map to an empty list.
    """
    portfolio = {category: [] for category in CATEGORIES}
    for img in images:
        if img.category in portfolio:
            portfolio[img.category].append({
                "id": img.id,
                "url": img.url,
                "title": img.title,
                "created_at": img.created_at,
            })
    return portfolio
