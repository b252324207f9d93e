# server/cli.py

import argparse
import logging

from api.portfolio import AddImageRequest, validate_new_image
from core import config
from core.credentials import create_admin
from core.errors import BadRequest
from core.repository import ImageRepository
from database import SessionLocal, init_db
from models.image import CATEGORIES


logger = logging.getLogger(__name__)


SAMPLE_IMAGES = [
    ("shortfilms", "https://via.placeholder.com/300x200?text=Short+Film+1", "Short Film 1"),
    ("shortfilms", "https://via.placeholder.com/300x200?text=Short+Film+2", "Short Film 2"),
    ("shortfilms", "https://via.placeholder.com/300x200?text=Short+Film+3", "Short Film 3"),
    ("photography", "https://via.placeholder.com/300x200?text=Photo+1", "Portrait Session"),
    ("photography", "https://via.placeholder.com/300x200?text=Photo+2", "Landscape Beauty"),
    ("photography", "https://via.placeholder.com/300x200?text=Photo+3", "Urban Exploration"),
    ("photography", "https://via.placeholder.com/300x200?text=Photo+4", "Studio Work"),
    ("behind", "https://via.placeholder.com/300x200?text=BTS+1", "Film Set"),
    ("behind", "https://via.placeholder.com/300x200?text=BTS+2", "Production Day"),
    ("commercials", "https://via.placeholder.com/300x200?text=Commercial+1", "Brand Campaign"),
    ("commercials", "https://via.placeholder.com/300x200?text=Commercial+2", "Product Launch"),
    ("documentaries", "https://via.placeholder.com/300x200?text=Doc+1", "Documentary Project"),
    ("music", "https://via.placeholder.com/300x200?text=Music+1", "Music Video"),
    ("music", "https://via.placeholder.com/300x200?text=Music+2", "Live Performance"),
]


# -------------------------------
# Commands
# -------------------------------

def cmd_init_db(args, session_factory=SessionLocal) -> int:
    """
    Creates the schema and provisions the admin account from the environment.
    Safe to run repeatedly; an existing admin is left untouched.
    """
    init_db(bind=session_factory.kw.get("bind"))

    db = session_factory()
    try:
        user = create_admin(db, config.ADMIN_USERNAME, config.ADMIN_PASSWORD, config.ADMIN_EMAIL)
    finally:
        db.close()

    if user is not None:
        logger.warning("Admin '%s' uses the configured bootstrap password; change it after first login", user.username)
    return 0


def cmd_seed(args, session_factory=SessionLocal) -> int:
    db = session_factory()
    try:
        repo = ImageRepository(db)
        existing = repo.count()
        if existing > 0:
            if not args.reset:
                logger.error("Database already contains %d images; rerun with --reset to replace them", existing)
                return 1
            repo.delete_all()
            logger.info("Cleared %d existing images", existing)

        for category, url, title in SAMPLE_IMAGES:
            repo.add(category, url, title)
    finally:
        db.close()

    logger.info("Inserted %d sample images", len(SAMPLE_IMAGES))
    return 0


def cmd_add(args, session_factory=SessionLocal) -> int:
    """
    Adds one image by URL, with the same checks as the HTTP endpoint.
    """
    try:
        category, url, title = validate_new_image(
            AddImageRequest(category=args.category, url=args.url, title=args.title)
        )
    except BadRequest as e:
        logger.error("Image not added: %s", e.message)
        return 1

    db = session_factory()
    try:
        image = ImageRepository(db).add(category, url, title)
    finally:
        db.close()

    logger.info("Added image %s to %s", image.id, category)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="portfolio-admin", description="Portfolio database administration")
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init-db", help="create tables and the admin account")
    init_parser.set_defaults(func=cmd_init_db)

    seed_parser = subparsers.add_parser("seed", help="insert sample images")
    seed_parser.add_argument("--reset", action="store_true", help="delete existing images first")
    seed_parser.set_defaults(func=cmd_seed)

    add_parser = subparsers.add_parser("add", help="add a single image by URL")
    add_parser.add_argument("category", help="one of: " + ", ".join(CATEGORIES))
    add_parser.add_argument("url")
    add_parser.add_argument("title", nargs="?", default="")
    add_parser.set_defaults(func=cmd_add)

    return parser


def main(argv=None) -> int:
    config.configure_logging()
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
