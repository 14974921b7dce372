from translatable_field.models.translation import Translation, AbstractPersonalTranslation
from translatable_field.models.translatable import (
    Translatable, PersonalTranslatable, translation_entity, TRANSLATION_ENTITIES
)

__all__ = [
    "Translation", "AbstractPersonalTranslation",
    "Translatable", "PersonalTranslatable", "translation_entity", "TRANSLATION_ENTITIES",
]
