from pydantic import model_validator
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    app_name: str = "TranslatableField"
    debug: bool = False
    database_url: str = "sqlite:///./translatable_field.db"
    default_locale: str = "en"
    locales: list[str] = ["en"]
    atomic_translation_writes: bool = False

    class Config:
        env_file = ".env"

    @model_validator(mode="after")
    def include_default_locale(self) -> "Settings":
        # The default locale always has an input, even when not listed
        if self.default_locale not in self.locales:
            self.locales = [self.default_locale, *self.locales]
        return self


@lru_cache()
def get_settings() -> Settings:
    return Settings()
