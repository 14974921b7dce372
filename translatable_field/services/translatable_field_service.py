from typing import Iterable, Mapping
from sqlalchemy.orm import Session
from translatable_field.config import get_settings
from translatable_field.schemas.translation import TranslatedFieldResponse, TranslatedFieldUpdate
from translatable_field.services import translatable_listener  # noqa: F401  registers load hook
from translatable_field.services.translation_reader import TranslationReader
from translatable_field.services.translation_writer import TranslationWriter


class TranslatableFieldService:
    def __init__(self, db: Session):
        self.db = db
        self.settings = get_settings()
        self.reader = TranslationReader(db, self.settings.default_locale)
        self.writer = TranslationWriter(db, self.settings.default_locale)

    @property
    def default_locale(self) -> str:
        return self.settings.default_locale

    def get_translated_fields(self, record, field_name: str) -> dict[str, str | None]:
        return self.reader.get_translated_fields(record, field_name)

    def persist_translations(
        self,
        record,
        field_name: str,
        submitted_values: Mapping[str, str | None],
        locales: Iterable[str] | None = None,
        atomic: bool | None = None,
    ) -> None:
        if locales is None:
            locales = self.settings.locales
        self.writer.persist_translations(record, field_name, submitted_values, locales, atomic=atomic)

    def get_field(self, record, field_name: str) -> TranslatedFieldResponse:
        values = self.get_translated_fields(record, field_name)
        return TranslatedFieldResponse(
            field_name=field_name,
            default_locale=self.default_locale,
            values={locale: values.get(locale) for locale in self.settings.locales},
        )

    def apply_edit(self, record, edit: TranslatedFieldUpdate) -> None:
        self.persist_translations(record, edit.field_name, edit.values)
