from sqlalchemy.orm import Session
from translatable_field.services.default_locale_accessor import DefaultLocaleAccessor
from translatable_field.services.strategy_detector import StrategyDetector, TranslationStrategy
from translatable_field.services.translation_repository import TranslationRepository


class TranslationReader:
    def __init__(self, db: Session, default_locale: str):
        self.db = db
        self.default_locale = default_locale
        self.detector = StrategyDetector()
        self.default_accessor = DefaultLocaleAccessor(db, default_locale)
        self.repository = TranslationRepository(db)

    def get_translated_fields(self, record, field_name: str) -> dict[str, str | None]:
        """Merge out-of-line translations with the inline default-locale value.

        Locales without a stored value are absent from the result.
        """
        if self.detector.detect(record) is TranslationStrategy.personal:
            translations = self._personal_translations(record, field_name)
        else:
            translations = {
                locale: fields.get(field_name)
                for locale, fields in self.repository.find_translations(record).items()
            }

        translations[self.default_locale] = self.default_accessor.read_default(record, field_name)
        return translations

    def _personal_translations(self, record, field_name: str) -> dict[str, str | None]:
        translations = {}
        # Entries are not deduplicated by the store: the last one wins
        for translation in record.get_translations():
            if translation.field == field_name:
                translations[translation.locale] = translation.content
        return translations
