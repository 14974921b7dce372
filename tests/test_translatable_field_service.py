import pytest

from translatable_field.config import Settings, get_settings
from translatable_field.schemas import TranslatedFieldResponse, TranslatedFieldUpdate
from translatable_field.services.translatable_field_service import TranslatableFieldService


@pytest.fixture
def service(db):
    return TranslatableFieldService(db)


class TestSettings:
    def test_configured_locales(self, settings):
        assert settings.default_locale == "en"
        assert settings.locales == ["en", "fr", "de"]

    def test_default_locale_is_always_a_locale(self):
        assert Settings(default_locale="en", locales=["fr"]).locales == ["en", "fr"]


class TestTranslatedFieldUpdate:
    def test_blank_values_become_none(self):
        edit = TranslatedFieldUpdate(field_name="name", values={"fr": "  ", "de": "Hallo", "en": None})
        assert edit.values == {"fr": None, "de": "Hallo", "en": None}


class TestTranslatableFieldService:
    def test_persist_uses_configured_locales(self, service, db, category):
        service.persist_translations(category, "name", {"en": "Hi", "fr": None, "de": "Hallo"})
        db.commit()

        assert service.get_translated_fields(category, "name") == {"de": "Hallo", "en": "Hi"}

    def test_get_field_lists_every_locale(self, service, category):
        response = service.get_field(category, "name")

        assert response == TranslatedFieldResponse(
            field_name="name",
            default_locale="en",
            values={"en": "Hello", "fr": "Bonjour", "de": None},
        )

    def test_apply_edit(self, service, db, article):
        service.apply_edit(
            article, TranslatedFieldUpdate(field_name="title", values={"fr": "", "de": "Hallo"})
        )
        db.commit()

        assert service.get_translated_fields(article, "title") == {"de": "Hallo", "en": "Hello"}

    def test_atomic_setting(self, monkeypatch, db, category, fail_on_delete):
        monkeypatch.setenv("ATOMIC_TRANSLATION_WRITES", "true")
        get_settings.cache_clear()
        service = TranslatableFieldService(db)
        fail_on_delete("fr")

        with pytest.raises(RuntimeError):
            service.persist_translations(category, "name", {"en": "Hi", "fr": None})

        assert service.get_translated_fields(category, "name")["en"] == "Hello"
