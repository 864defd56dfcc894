import pytest

from wiki import create_app
from wiki.extensions import db
from wiki.stores import MemoryPageStore


class RecordingStore(MemoryPageStore):
    """Memory store that remembers every call made to it."""

    def __init__(self):
        super().__init__()
        self.calls = []

    def load(self, title):
        self.calls.append(("load", title))
        return super().load(title)

    def save(self, page):
        self.calls.append(("save", page))
        return super().save(page)


class RecordingRenderer:
    def __init__(self):
        self.calls = []

    def render(self, mode, page):
        self.calls.append((mode, page))
        return f"{mode}:{page.title}:{page.content.decode()}".encode()


@pytest.fixture
def sql_app():
    """Application on the SQL store, with a fresh in-memory schema."""
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def sql_client(sql_app):
    return sql_app.test_client()


@pytest.fixture
def store():
    return RecordingStore()


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def app(store):
    """Application on a recording memory store and the real templates."""
    app = create_app("testing", store=store)
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()
