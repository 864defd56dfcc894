from dataclasses import dataclass
from typing import Optional, Union

from .page import Page


# load outcomes

@dataclass(frozen=True)
class Found:
    page: Page


@dataclass(frozen=True)
class NotFound:
    title: str


LoadOutcome = Union[Found, NotFound]


# save decisions

@dataclass(frozen=True)
class Insert:
    page: Page


@dataclass(frozen=True)
class Update:
    identity: int
    page: Page


SaveAction = Union[Insert, Update]


def plan_save(page: Page, existing_identity: Optional[int] = None) -> SaveAction:
    """
    Decide between inserting and updating.

    `existing_identity` is the identity of the stored row carrying
    `page.title`, if any. A page that already has an identity always
    updates that identity; otherwise the title's row is updated when it
    exists and a new row is inserted when it does not.
    """
    if page.identity is not None:
        return Update(identity=page.identity, page=page)
    if existing_identity is not None:
        return Update(identity=existing_identity, page=page)
    return Insert(page=page)
