import threading

from core.state import with_all_category_locks, with_category_lock
from models.image import CATEGORIES


def test_clear_lock_blocks_every_category():
    with with_all_category_locks():
        for category in CATEGORIES:
            assert with_category_lock(category).locked()

    for category in CATEGORIES:
        assert not with_category_lock(category).locked()


def test_category_locks_are_independent():
    with with_category_lock("music"):
        assert not with_category_lock("photography").locked()
        assert with_category_lock("music").locked()


def _in_background(fn):
    result = {}

    def target():
        result["response"] = fn()

    thread = threading.Thread(target=target)
    thread.start()
    return thread, result


def test_add_waits_for_running_clear(client, auth_headers):
    with with_all_category_locks():
        thread, result = _in_background(lambda: client.post(
            "/api/portfolio/images",
            json={"category": "music", "url": "https://example.com/a.jpg"},
            headers=auth_headers,
        ))
        thread.join(timeout=0.5)
        assert thread.is_alive()

    thread.join(timeout=10)
    assert not thread.is_alive()
    assert result["response"].status_code == 201
    assert client.get("/api/portfolio/counts").json()["music"] == 1


def test_clear_waits_for_running_add(client, auth_headers):
    with with_category_lock("photography"):
        thread, result = _in_background(
            lambda: client.delete("/api/portfolio/images", headers=auth_headers)
        )
        thread.join(timeout=0.5)
        assert thread.is_alive()

    thread.join(timeout=10)
    assert not thread.is_alive()
    assert result["response"].status_code == 200
