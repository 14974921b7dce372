from sqlalchemy import inspect as sa_inspect, select, update
from sqlalchemy.orm import Session
from translatable_field.exceptions import UnsupportedIdentifierError

LOCALE_OPTION = "translatable_locale"


def get_identifier_attribute(record_type: type) -> str:
    """Name of the mapped attribute holding the record's single-column id."""
    mapper = sa_inspect(record_type)
    if len(mapper.primary_key) != 1:
        raise UnsupportedIdentifierError(
            record_type, [column.name for column in mapper.primary_key]
        )
    return mapper.get_property_by_column(mapper.primary_key[0]).key


def get_identifier(record):
    return getattr(record, get_identifier_attribute(type(record)))


class DefaultLocaleAccessor:
    """Reads and writes the inline default-locale value on the record's own row."""

    def __init__(self, db: Session, default_locale: str):
        self.db = db
        self.default_locale = default_locale

    def read_default(self, record, field: str):
        record_type = type(record)
        id_attribute = get_identifier_attribute(record_type)

        # Column projection: never served from the identity map or a translated instance
        query = (
            select(getattr(record_type, field))
            .where(getattr(record_type, id_attribute) == getattr(record, id_attribute))
            .limit(1)
            .execution_options(**{LOCALE_OPTION: self.default_locale})
        )
        with self.db.no_autoflush:
            row = self.db.execute(query).first()
        return row[0] if row is not None else None

    def write_default(self, record, field: str, value) -> None:
        record_type = type(record)
        id_attribute = get_identifier_attribute(record_type)

        self.db.execute(
            update(record_type)
            .where(getattr(record_type, id_attribute) == getattr(record, id_attribute))
            .values({field: value})
            .execution_options(synchronize_session=False, **{LOCALE_OPTION: self.default_locale})
        )
