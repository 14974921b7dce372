class TranslatableFieldError(Exception):
    """Base class for errors raised by the translatable field engine."""


class UnsupportedIdentifierError(TranslatableFieldError, ValueError):
    """The record type is not identified by a single column."""

    def __init__(self, record_type: type, columns: list[str]):
        self.record_type = record_type
        self.columns = columns
        super().__init__(
            f"{record_type.__name__} has a composite identifier ({', '.join(columns)}); "
            "only single-column identifiers are supported"
        )


class MetadataResolutionError(TranslatableFieldError, LookupError):
    """No personal translation entity is registered for the record type."""

    def __init__(self, record_type: type):
        self.record_type = record_type
        super().__init__(
            f"No translation entity registered for {record_type.__name__} or its ancestors"
        )


class TranslationRegistrationError(TranslatableFieldError, TypeError):
    pass
