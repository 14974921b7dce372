from sqlalchemy import String, Text, UniqueConstraint, Index
from sqlalchemy.orm import Mapped, mapped_column
from translatable_field.database import Base


class Translation(Base):
    """Shared translation row, keyed by (object class, foreign key, field, locale)."""

    __tablename__ = "ext_translations"
    __table_args__ = (
        UniqueConstraint(
            "locale", "object_class", "field", "foreign_key",
            name="uq_translation_lookup"
        ),
        Index("ix_translation_object", "object_class", "foreign_key"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    locale: Mapped[str] = mapped_column(String(8))
    object_class: Mapped[str] = mapped_column(String(191))
    field: Mapped[str] = mapped_column(String(32))
    foreign_key: Mapped[str] = mapped_column(String(64))
    content: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Translation {self.object_class}:{self.foreign_key}.{self.field} [{self.locale}]>"


class AbstractPersonalTranslation:
    """Columns shared by every per-type translation entity.

    Concrete subclasses add the ``object_id`` foreign key and the ``object``
    relationship back to the record they translate.
    """

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    locale: Mapped[str] = mapped_column(String(8))
    field: Mapped[str] = mapped_column(String(32))
    content: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __init__(self, locale: str, field: str, content: str | None):
        self.locale = locale
        self.field = field
        self.content = content

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.field} [{self.locale}]>"
