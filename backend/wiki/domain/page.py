from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class Page:
    """
    A wiki page as handlers and stores exchange it.

    `identity` is None until a store has persisted the page; stores never
    use a zero value to mean "unsaved".
    """

    title: str
    content: bytes = b""
    identity: Optional[int] = None

    @property
    def is_persisted(self) -> bool:
        return self.identity is not None

    def with_identity(self, identity: int) -> "Page":
        return replace(self, identity=identity)

    @classmethod
    def blank(cls, title: str) -> "Page":
        """An unsaved, empty page; the starting point for a new page."""
        return cls(title=title)
