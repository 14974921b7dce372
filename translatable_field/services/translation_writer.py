import logging
from contextlib import contextmanager
from typing import Iterable, Mapping
from sqlalchemy import delete
from sqlalchemy.orm import Session
from sqlalchemy.sql.dml import Delete
from translatable_field.config import get_settings
from translatable_field.services.default_locale_accessor import DefaultLocaleAccessor, get_identifier
from translatable_field.services.personal_translation_resolver import PersonalTranslationTypeResolver
from translatable_field.services.strategy_detector import StrategyDetector, TranslationStrategy
from translatable_field.services.translation_repository import TranslationRepository

logger = logging.getLogger(__name__)


class TranslationWriter:
    def __init__(self, db: Session, default_locale: str):
        self.db = db
        self.default_locale = default_locale
        self.detector = StrategyDetector()
        self.resolver = PersonalTranslationTypeResolver()
        self.default_accessor = DefaultLocaleAccessor(db, default_locale)
        self.repository = TranslationRepository(db)

    @contextmanager
    def _transaction(self):
        # Join an open transaction through a SAVEPOINT, otherwise start and commit one
        if self.db.in_transaction():
            with self.db.begin_nested():
                yield
        else:
            with self.db.begin():
                yield

    def persist_translations(
        self,
        record,
        field_name: str,
        submitted_values: Mapping[str, str | None],
        locales: Iterable[str],
        atomic: bool | None = None,
    ) -> None:
        """Apply per-locale creates, updates and deletes for one field.

        Locales missing from ``submitted_values`` are left untouched. Queued
        deletes run in a single transaction; with ``atomic`` the whole call does.
        ``atomic`` defaults to the ``atomic_translation_writes`` setting.
        """
        if atomic is None:
            atomic = get_settings().atomic_translation_writes
        if atomic:
            with self._transaction():
                self._persist(record, field_name, submitted_values, locales)
        else:
            self._persist(record, field_name, submitted_values, locales)

    def _persist(self, record, field_name, submitted_values, locales) -> None:
        strategy = self.detector.detect(record)
        delete_queries: list[Delete] = []

        for locale in locales:
            if locale not in submitted_values:
                continue
            value = submitted_values[locale]

            if locale == self.default_locale:
                self.default_accessor.write_default(record, field_name, value)
            elif value is None:
                query = self._delete_query(record, field_name, locale, strategy)
                if query is not None:
                    delete_queries.append(query)
            elif strategy is TranslationStrategy.personal:
                entry_type = self.resolver.resolve(type(record))
                record.add_translation(entry_type(locale, field_name, value))
            else:
                self.repository.translate(record, field_name, locale, value)

        if delete_queries:
            self._run_deletes(record, delete_queries, strategy)

        self.db.add(record)

    def _delete_query(self, record, field_name, locale, strategy) -> Delete | None:
        object_id = get_identifier(record)
        if object_id is None:
            logger.warning(
                "Skipping delete of %s.%s [%s]: record has no identifier yet",
                type(record).__name__, field_name, locale,
            )
            return None

        if strategy is TranslationStrategy.shared:
            logger.debug("Queued delete of shared %s.%s [%s]", type(record).__name__, field_name, locale)
            return self.repository.delete_query(type(record), object_id, field_name, locale)

        if not record.has_translation(locale, field_name):
            return None

        entry_type = self.resolver.resolve(type(record))
        logger.debug("Queued delete of %s %s [%s]", entry_type.__name__, field_name, locale)
        return (
            delete(entry_type)
            .where(
                entry_type.locale == locale,
                entry_type.object_id == object_id,
                entry_type.field == field_name,
            )
            .execution_options(synchronize_session="fetch")
        )

    def _run_deletes(self, record, delete_queries: list[Delete], strategy) -> None:
        with self._transaction():
            self.db.flush()
            for query in delete_queries:
                self.db.execute(query)
        logger.info(
            "Ran %d translation delete statement(s) for %s", len(delete_queries), type(record).__name__
        )

        if strategy is TranslationStrategy.personal and record in self.db:
            self.db.expire(record, ["translations"])
