from wiki.extensions import db
from wiki.domain.page import Page
from wiki.domain.invariants.page import MAX_TITLE_LENGTH
from .base import BaseModel

# MySQL compares strings case-insensitively unless told otherwise
TitleType = db.String(MAX_TITLE_LENGTH).with_variant(
    db.String(MAX_TITLE_LENGTH, collation="utf8mb4_bin"), "mysql", "mariadb"
)

class PageRecord(BaseModel):
    __tablename__ = 'pages'

    title = db.Column(TitleType, nullable=False)
    body = db.Column(db.LargeBinary(length=16 * 1024 * 1024), nullable=False, default=b"")

    __table_args__ = (
        db.UniqueConstraint("title", name="uq_page_title"),
    )

    def to_entity(self) -> Page:
        return Page(title=self.title, content=bytes(self.body or b""), identity=self.id)

    def __repr__(self):
        return f"<PageRecord id={self.id} title={self.title!r}>"
