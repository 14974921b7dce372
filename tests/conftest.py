"""Shared pytest fixtures: in-memory database, session and sample records."""

import pytest
from sqlalchemy import event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from translatable_field.config import get_settings
from translatable_field.database import Base, create_db_engine
from translatable_field.models import Translation
from tests.models import Article, ArticleTranslation, Category

DEFAULT_LOCALE = "en"
LOCALES = ["en", "fr", "de"]


@pytest.fixture(autouse=True)
def settings(monkeypatch):
    """Configured locales en/fr/de with en as default."""
    monkeypatch.setenv("DEFAULT_LOCALE", DEFAULT_LOCALE)
    monkeypatch.setenv("LOCALES", '["en", "fr", "de"]')
    monkeypatch.delenv("ATOMIC_TRANSLATION_WRITES", raising=False)
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


@pytest.fixture
def engine():
    """In-memory SQLite engine with all tables created."""
    eng = create_db_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(bind=engine, autoflush=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def fail_on_delete(engine):
    """Make any DELETE carrying the given locale parameter fail."""

    def install(locale: str):
        @event.listens_for(engine, "before_cursor_execute")
        def _fail(conn, cursor, statement, parameters, context, executemany):
            if statement.lstrip().upper().startswith("DELETE") and locale in tuple(parameters):
                raise RuntimeError(f"forced failure deleting {locale}")

    return install


@pytest.fixture
def article(db):
    """Personal-strategy record 42: en="Hello", fr="Bonjour", no de."""
    record = Article(id=42, title="Hello", body="Body")
    record.add_translation(ArticleTranslation("fr", "title", "Bonjour"))
    db.add(record)
    db.commit()
    return record


@pytest.fixture
def category(db):
    """Shared-strategy record 42: en="Hello", fr="Bonjour", no de."""
    record = Category(id=42, name="Hello")
    db.add(record)
    db.flush()
    db.add(
        Translation(
            object_class=f"{Category.__module__}.{Category.__qualname__}",
            foreign_key="42",
            field="name",
            locale="fr",
            content="Bonjour",
        )
    )
    db.commit()
    return record
