from translatable_field.exceptions import MetadataResolutionError
from translatable_field.models.translatable import TRANSLATION_ENTITIES
from translatable_field.models.translation import AbstractPersonalTranslation


class PersonalTranslationTypeResolver:
    def __init__(self, registry: dict[type, type[AbstractPersonalTranslation]] | None = None):
        self.registry = TRANSLATION_ENTITIES if registry is None else registry

    def resolve(self, record_type: type) -> type[AbstractPersonalTranslation]:
        """Return the translation entity registered for the closest ancestor."""
        for klass in record_type.__mro__:
            entry_type = self.registry.get(klass)
            if entry_type is not None:
                return entry_type
        raise MetadataResolutionError(record_type)
