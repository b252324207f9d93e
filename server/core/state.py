# server/core/state.py

from contextlib import ExitStack, contextmanager
from threading import Lock

from models.image import CATEGORIES


# One write lock per category. Adds hold their category's lock;
# clearing the portfolio holds all of them, always acquired in CATEGORIES order.
_category_locks = {category: Lock() for category in CATEGORIES}


def with_category_lock(category: str):
    return _category_locks[category]


@contextmanager
def with_all_category_locks():
    with ExitStack() as stack:
        for category in CATEGORIES:
            stack.enter_context(_category_locks[category])
        yield
