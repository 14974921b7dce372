from typing import Callable, Iterable
from translatable_field.exceptions import TranslationRegistrationError
from translatable_field.models.translation import AbstractPersonalTranslation

# record type -> personal translation entity, filled by @translation_entity at import time
TRANSLATION_ENTITIES: dict[type, type[AbstractPersonalTranslation]] = {}


class Translatable:
    """Record whose ``__translatable_fields__`` have values per locale."""

    __translatable_fields__ = ()


class PersonalTranslatable(Translatable):
    """Record that owns its translation entries in a dedicated table.

    Subclasses map a ``translations`` relationship to their entry type and
    register that type with :func:`translation_entity`.
    """

    def get_translations(self) -> Iterable[AbstractPersonalTranslation]:
        return self.translations

    def add_translation(self, translation: AbstractPersonalTranslation) -> None:
        self.translations.append(translation)

    def has_translation(self, locale: str, field: str) -> bool:
        return any(
            t.locale == locale and t.field == field
            for t in self.get_translations()
        )


def translation_entity(entry_type: type) -> Callable[[type], type]:
    """Declare the personal translation entity of a record type."""

    def register(record_type: type) -> type:
        if not issubclass(record_type, PersonalTranslatable):
            raise TranslationRegistrationError(
                f"{record_type.__name__} must derive from PersonalTranslatable"
            )
        if not issubclass(entry_type, AbstractPersonalTranslation):
            raise TranslationRegistrationError(
                f"{entry_type.__name__} must derive from AbstractPersonalTranslation"
            )
        TRANSLATION_ENTITIES[record_type] = entry_type
        return record_type

    return register
