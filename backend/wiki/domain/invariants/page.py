from wiki.domain.paths import is_valid_title
from .exceptions import InvariantViolation

MAX_TITLE_LENGTH = 200

def assert_page(page):
    if not is_valid_title(page.title):
        raise InvariantViolation(
            f"Page title must be one or more ASCII letters or digits: {page.title!r}"
        )

    if len(page.title) > MAX_TITLE_LENGTH:
        raise InvariantViolation(
            f"Page title is longer than {MAX_TITLE_LENGTH} characters."
        )

    if not isinstance(page.content, bytes):
        raise InvariantViolation(
            f"Page content must be bytes, got {type(page.content).__name__}."
        )
