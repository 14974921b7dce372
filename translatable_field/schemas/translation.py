from pydantic import BaseModel, Field, field_validator


class TranslatedFieldUpdate(BaseModel):
    field_name: str = Field(..., max_length=32)
    values: dict[str, str | None]

    @field_validator("values")
    @classmethod
    def blank_to_none(cls, values: dict[str, str | None]) -> dict[str, str | None]:
        # An emptied input deletes the translation
        return {
            locale: (value if value is None or value.strip() else None)
            for locale, value in values.items()
        }


class TranslatedFieldResponse(BaseModel):
    field_name: str
    default_locale: str
    values: dict[str, str | None]
