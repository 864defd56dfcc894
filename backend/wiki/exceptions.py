class WikiError(Exception):
    """Base class for every error raised by the wiki core."""


class InvalidPath(WikiError):
    """The request path is not /<action>/<title> with a well-formed title."""

    def __init__(self, path: str):
        super().__init__(f"invalid wiki path: {path!r}")
        self.path = path


class StoreError(WikiError):
    """Connectivity or constraint failure inside a page store."""


class TitleConflict(StoreError):
    """A save would give a title to a record other than the one owning it."""


class RenderError(WikiError):
    """The page renderer could not produce output."""
