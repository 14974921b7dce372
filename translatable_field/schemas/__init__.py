from translatable_field.schemas.translation import TranslatedFieldUpdate, TranslatedFieldResponse

__all__ = ["TranslatedFieldUpdate", "TranslatedFieldResponse"]
