from translatable_field.services.translatable_field_service import TranslatableFieldService

__all__ = ["TranslatableFieldService"]
