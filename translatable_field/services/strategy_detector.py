import logging
from enum import Enum
from translatable_field.models.translatable import PersonalTranslatable

logger = logging.getLogger(__name__)


class TranslationStrategy(str, Enum):
    personal = "personal"
    shared = "shared"


class StrategyDetector:
    def detect(self, record) -> TranslationStrategy:
        if isinstance(record, PersonalTranslatable):
            strategy = TranslationStrategy.personal
        else:
            strategy = TranslationStrategy.shared
        logger.debug("%s uses %s translations", type(record).__name__, strategy.value)
        return strategy
