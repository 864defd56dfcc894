import string
from enum import Enum
from typing import NamedTuple

from wiki.exceptions import InvalidPath


class Action(str, Enum):
    VIEW = "view"
    EDIT = "edit"
    SAVE = "save"


TITLE_CHARACTERS = frozenset(string.ascii_letters + string.digits)


class Route(NamedTuple):
    action: Action
    title: str


def is_valid_title(title: str) -> bool:
    """One or more ASCII letters or digits, nothing else."""
    return bool(title) and all(char in TITLE_CHARACTERS for char in title)


def validate_path(path: str) -> Route:
    """
    Split `/<action>/<title>` into its action and title.

    Raises InvalidPath for anything else: unknown action, empty or
    malformed title, extra segments, or a missing leading slash.
    """
    if not path.startswith("/"):
        raise InvalidPath(path)

    segments = path[1:].split("/")
    if len(segments) != 2:
        raise InvalidPath(path)

    keyword, title = segments
    try:
        action = Action(keyword)
    except ValueError:
        raise InvalidPath(path) from None

    if not is_valid_title(title):
        raise InvalidPath(path)

    return Route(action=action, title=title)


def build_path(action: Action | str, title: str) -> str:
    return f"/{Action(action).value}/{title}"
