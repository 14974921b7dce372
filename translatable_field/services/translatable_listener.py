"""Overlay translated values on records loaded in a non-default locale.

A session's locale is kept in ``session.info``; a single query may override it
with the ``translatable_locale`` execution option. Values are applied as
committed state so the instance is not marked dirty.
"""
import logging
from sqlalchemy import event, inspect as sa_inspect, select
from sqlalchemy.orm import Session
from sqlalchemy.orm.attributes import set_committed_value
from translatable_field.config import get_settings
from translatable_field.models.translatable import Translatable, PersonalTranslatable
from translatable_field.models.translation import Translation
from translatable_field.services.default_locale_accessor import LOCALE_OPTION
from translatable_field.services.personal_translation_resolver import PersonalTranslationTypeResolver
from translatable_field.services.translation_repository import object_class_name

logger = logging.getLogger(__name__)


def use_locale(session: Session, locale: str | None) -> None:
    session.info[LOCALE_OPTION] = locale


def current_locale(session: Session) -> str:
    return session.info.get(LOCALE_OPTION) or get_settings().default_locale


def _effective_locale(context) -> str:
    options = dict(context.execution_options)
    statement = getattr(context, "query", None)
    if statement is not None:
        options = {**statement.get_execution_options(), **options}
    return options.get(LOCALE_OPTION) or current_locale(context.session)


@event.listens_for(Translatable, "load", propagate=True)
def _translate_on_load(target, context):
    locale = _effective_locale(context)
    if locale == get_settings().default_locale or not target.__translatable_fields__:
        return

    object_id = sa_inspect(target).identity[0]
    if isinstance(target, PersonalTranslatable):
        entry_type = PersonalTranslationTypeResolver().resolve(type(target))
        query = (
            select(entry_type.field, entry_type.content)
            .where(entry_type.object_id == object_id, entry_type.locale == locale)
            .order_by(entry_type.id)
        )
    else:
        query = (
            select(Translation.field, Translation.content)
            .where(
                Translation.object_class == object_class_name(type(target)),
                Translation.foreign_key == str(object_id),
                Translation.locale == locale,
            )
            .order_by(Translation.id)
        )

    # Core execution on the session's connection stays clear of the identity map
    for field, content in context.session.connection().execute(query):
        if field in target.__translatable_fields__ and content is not None:
            set_committed_value(target, field, content)
    logger.debug("Loaded %s #%s in locale %s", type(target).__name__, object_id, locale)
