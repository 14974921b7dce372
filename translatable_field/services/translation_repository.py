from sqlalchemy import delete, inspect as sa_inspect, select
from sqlalchemy.orm import Session
from sqlalchemy.sql.dml import Delete
from translatable_field.models.translation import Translation
from translatable_field.services.default_locale_accessor import get_identifier


def object_class_name(record_type: type) -> str:
    # Rows are keyed by the root of a mapped hierarchy so subclasses share them
    root = sa_inspect(record_type).base_mapper.class_
    return f"{root.__module__}.{root.__qualname__}"


class TranslationRepository:
    """Shared translation store backed by the ``ext_translations`` table."""

    def __init__(self, db: Session):
        self.db = db

    def find_translations(self, record) -> dict[str, dict[str, str | None]]:
        object_id = get_identifier(record)
        if object_id is None:
            return {}

        query = (
            select(Translation)
            .where(
                Translation.object_class == object_class_name(type(record)),
                Translation.foreign_key == str(object_id),
            )
            .order_by(Translation.locale, Translation.id)
        )
        result: dict[str, dict[str, str | None]] = {}
        for translation in self.db.execute(query).scalars():
            result.setdefault(translation.locale, {})[translation.field] = translation.content
        return result

    def find_translation(self, record, field: str, locale: str) -> Translation | None:
        query = select(Translation).where(
            Translation.object_class == object_class_name(type(record)),
            Translation.foreign_key == str(get_identifier(record)),
            Translation.field == field,
            Translation.locale == locale,
        )
        return self.db.execute(query).scalar_one_or_none()

    def translate(self, record, field: str, locale: str, value: str | None) -> None:
        if get_identifier(record) is None:
            # Rows reference the record by id, so it must be inserted first
            self.db.add(record)

        # The lookup must see rows still pending in this unit of work
        self.db.flush()
        existing = self.find_translation(record, field, locale)
        if existing:
            existing.content = value
        else:
            self.db.add(
                Translation(
                    object_class=object_class_name(type(record)),
                    foreign_key=str(get_identifier(record)),
                    field=field,
                    locale=locale,
                    content=value,
                )
            )

    def delete_query(self, record_type: type, object_id, field: str, locale: str) -> Delete:
        return (
            delete(Translation)
            .where(
                Translation.object_class == object_class_name(record_type),
                Translation.field == field,
                Translation.foreign_key == str(object_id),
                Translation.locale == locale,
            )
            .execution_options(synchronize_session="fetch")
        )
