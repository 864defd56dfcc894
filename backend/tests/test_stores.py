import pytest
from sqlalchemy import func, select

from wiki.domain.invariants.exceptions import InvariantViolation
from wiki.domain.page import Page
from wiki.domain.upsert import Found, Insert, NotFound
from wiki.exceptions import StoreError, TitleConflict
from wiki.extensions import db
from wiki.models.page import PageRecord
from wiki.stores import MemoryPageStore, SqlPageStore


@pytest.fixture(params=["memory", "sql"])
def page_store(request):
    if request.param == "memory":
        return MemoryPageStore()
    request.getfixturevalue("sql_app")
    return SqlPageStore()


def test_load_missing_title_is_not_found(page_store):
    assert page_store.load("Welcome") == NotFound("Welcome")


def test_save_new_page_assigns_identity(page_store):
    saved = page_store.save(Page(title="Welcome", content=b"Hello World"))

    assert saved.identity is not None
    assert saved.title == "Welcome"
    assert saved.content == b"Hello World"

    outcome = page_store.load("Welcome")
    assert isinstance(outcome, Found)
    assert outcome.page == saved


def test_identities_are_issued_in_increasing_order(page_store):
    first = page_store.save(Page(title="One"))
    second = page_store.save(Page(title="Two"))
    assert second.identity > first.identity


def test_save_with_identity_updates_in_place(page_store):
    saved = page_store.save(Page(title="Welcome", content=b"Hello World"))

    updated = page_store.save(Page(title="Welcome", content=b"Updated", identity=saved.identity))

    assert updated.identity == saved.identity
    assert page_store.load("Welcome") == Found(updated)


def test_unsaved_page_with_existing_title_updates_that_row(page_store):
    saved = page_store.save(Page(title="Welcome", content=b"Hello World"))

    again = page_store.save(Page(title="Welcome", content=b"Updated"))

    assert again.identity == saved.identity
    assert page_store.load("Welcome").page.content == b"Updated"


def test_saving_same_content_twice_is_stable(page_store):
    first = page_store.save(Page(title="Welcome", content=b"same"))
    second = page_store.save(Page(title="Welcome", content=b"same"))

    assert first == second
    assert page_store.load("Welcome").page == first


def test_load_is_case_sensitive(page_store):
    page_store.save(Page(title="Welcome", content=b"x"))
    assert page_store.load("welcome") == NotFound("welcome")


def test_save_refuses_to_retitle_a_page(page_store):
    saved = page_store.save(Page(title="Welcome", content=b"x"))

    with pytest.raises(TitleConflict):
        page_store.save(Page(title="Other", content=b"y", identity=saved.identity))

    assert page_store.load("Welcome").page == saved
    assert page_store.load("Other") == NotFound("Other")


def test_save_refuses_title_owned_by_another_page(page_store):
    welcome = page_store.save(Page(title="Welcome", content=b"x"))
    other = page_store.save(Page(title="Other", content=b"y"))

    with pytest.raises(TitleConflict):
        page_store.save(Page(title="Other", content=b"z", identity=welcome.identity))

    assert page_store.load("Other").page == other


def test_save_with_unknown_identity_fails(page_store):
    with pytest.raises(StoreError):
        page_store.save(Page(title="Welcome", content=b"x", identity=999))

    assert page_store.load("Welcome") == NotFound("Welcome")


def test_save_rejects_invalid_pages(page_store):
    with pytest.raises(InvariantViolation):
        page_store.save(Page(title="bad title", content=b"x"))
    with pytest.raises(InvariantViolation):
        page_store.save(Page(title="A" * 201, content=b"x"))
    with pytest.raises(InvariantViolation):
        page_store.save(Page(title="Welcome", content="not bytes"))


def test_sql_store_keeps_one_row_per_title(sql_app):
    store = SqlPageStore()
    store.save(Page(title="Welcome", content=b"Hello World"))
    store.save(Page(title="Welcome", content=b"Updated"))

    count = db.session.execute(
        select(func.count()).select_from(PageRecord).where(PageRecord.title == "Welcome")
    ).scalar_one()
    assert count == 1


def test_sql_store_maps_unique_violation_to_title_conflict(sql_app, monkeypatch):
    store = SqlPageStore()
    store.save(Page(title="Welcome", content=b"x"))

    # Two first-time saves racing on one title both decide to insert
    monkeypatch.setattr("wiki.stores.sql.plan_save", lambda page, existing: Insert(page))

    with pytest.raises(TitleConflict):
        store.save(Page(title="Welcome", content=b"y"))

    assert store.load("Welcome").page.content == b"x"


def test_sql_store_wraps_backend_failures(sql_app):
    db.drop_all()
    store = SqlPageStore()

    with pytest.raises(StoreError):
        store.load("Welcome")
    db.session.rollback()

    with pytest.raises(StoreError):
        store.save(Page(title="Welcome", content=b"x"))


def test_memory_store_counts_pages():
    store = MemoryPageStore()
    store.save(Page(title="Welcome"))
    store.save(Page(title="Welcome", content=b"again"))
    store.save(Page(title="Other"))
    assert len(store) == 2
