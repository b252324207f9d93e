import pytest

import cli
from core import config
from core.credentials import authenticate_user
from models.image import CATEGORIES, Image
from models.user import User


@pytest.fixture
def admin_env(monkeypatch):
    monkeypatch.setattr(config, "ADMIN_USERNAME", "owner")
    monkeypatch.setattr(config, "ADMIN_PASSWORD", "bootstrap-pass")
    monkeypatch.setattr(config, "ADMIN_EMAIL", "owner@example.com")


def _args(*argv):
    return cli.build_parser().parse_args(list(argv))


def test_init_db_creates_admin_once(session_factory, db, admin_env):
    assert cli.cmd_init_db(_args("init-db"), session_factory) == 0
    assert cli.cmd_init_db(_args("init-db"), session_factory) == 0

    assert db.query(User).count() == 1
    user = authenticate_user(db, "owner", "bootstrap-pass")
    assert user is not None
    assert user.email == "owner@example.com"


def test_seed_inserts_sample_images(session_factory, db):
    assert cli.cmd_seed(_args("seed"), session_factory) == 0

    assert db.query(Image).count() == len(cli.SAMPLE_IMAGES)
    assert {img.category for img in db.query(Image)} == set(CATEGORIES)


def test_seed_refuses_non_empty_table_without_reset(session_factory, db):
    cli.cmd_seed(_args("seed"), session_factory)

    assert cli.cmd_seed(_args("seed"), session_factory) == 1
    assert db.query(Image).count() == len(cli.SAMPLE_IMAGES)


def test_seed_reset_replaces_existing_images(session_factory, db):
    cli.cmd_seed(_args("seed"), session_factory)
    first_max_id = max(img.id for img in db.query(Image))

    assert cli.cmd_seed(_args("seed", "--reset"), session_factory) == 0
    ids = [img.id for img in db.query(Image)]
    assert len(ids) == len(cli.SAMPLE_IMAGES)
    assert min(ids) > first_max_id


def test_parser_requires_a_command():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args([])


def test_add_inserts_single_image(session_factory, db):
    assert cli.cmd_add(_args("add", "music", "https://example.com/a.jpg", "Live"), session_factory) == 0

    image = db.query(Image).one()
    assert (image.category, image.url, image.title) == ("music", "https://example.com/a.jpg", "Live")


def test_add_title_is_optional(session_factory, db):
    assert cli.cmd_add(_args("add", "behind", "https://example.com/b.jpg"), session_factory) == 0
    assert db.query(Image).one().title == ""


@pytest.mark.parametrize(
    "argv",
    [
        ("add", "landscapes", "https://example.com/a.jpg"),
        ("add", "music", "not a url"),
    ],
)
def test_add_rejects_invalid_image(session_factory, db, argv):
    assert cli.cmd_add(_args(*argv), session_factory) == 1
    assert db.query(Image).count() == 0
