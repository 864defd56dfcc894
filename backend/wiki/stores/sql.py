"""
SQLAlchemy-backed page store.
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from wiki.domain.invariants.page import assert_page
from wiki.domain.page import Page
from wiki.domain.upsert import Found, Insert, LoadOutcome, NotFound, plan_save
from wiki.exceptions import StoreError, TitleConflict
from wiki.extensions import db
from wiki.models.page import PageRecord
from wiki.utils.transaction import transactional

from .base import PageStore

logger = logging.getLogger(__name__)


class SqlPageStore(PageStore):
    """
    Page store over the application's Flask-SQLAlchemy session.

    Must be used inside an application context; the session is scoped to
    that context, so concurrent requests never share one.
    """

    def load(self, title: str) -> LoadOutcome:
        try:
            record = db.session.execute(
                select(PageRecord).where(PageRecord.title == title)
            ).scalar_one_or_none()
        except SQLAlchemyError as exc:
            logger.error("Failed to load page title=%s: %s", title, exc)
            raise StoreError(f"could not load page {title!r}: {exc}") from exc

        if record is None:
            return NotFound(title)
        return Found(record.to_entity())

    def save(self, page: Page) -> Page:
        assert_page(page)

        try:
            with transactional() as session:
                existing = None
                if page.identity is None:
                    existing = session.execute(
                        select(PageRecord.id)
                        .where(PageRecord.title == page.title)
                        .with_for_update()
                    ).scalar_one_or_none()

                action = plan_save(page, existing)
                if isinstance(action, Insert):
                    record = PageRecord()
                    record.title = page.title
                    record.body = page.content
                    session.add(record)
                else:
                    record = session.get(PageRecord, action.identity, with_for_update=True)
                    if record is None:
                        raise StoreError(f"no page with identity {action.identity}")
                    if record.title != page.title:
                        raise TitleConflict(
                            f"page {action.identity} is titled {record.title!r}, "
                            f"refusing to retitle it {page.title!r}"
                        )
                    record.body = page.content

                session.flush()  # ensures record.id exists
                saved = record.to_entity()
        except IntegrityError as exc:
            logger.error("Title constraint violated for title=%s: %s", page.title, exc.orig)
            raise TitleConflict(f"a page titled {page.title!r} already exists") from exc
        except SQLAlchemyError as exc:
            logger.error("Failed to save page title=%s: %s", page.title, exc)
            raise StoreError(f"could not save page {page.title!r}: {exc}") from exc

        logger.info(
            "%s page title=%s identity=%s",
            "Inserted" if isinstance(action, Insert) else "Updated",
            saved.title,
            saved.identity,
        )
        return saved

    def create_schema(self) -> None:
        """
        Create the pages table if it does not exist yet.
        """
        logger.info("Creating schema on %s", db.engine.url.render_as_string(hide_password=True))
        db.create_all()
