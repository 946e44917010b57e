"""Custom exceptions for the i18n system.

Translation resolution itself never raises; these cover misuse of the
request-scoped translation context.
"""


class I18nError(Exception):
    """Base exception for all i18n-related errors.

    Example:
        try:
            t = use_translation()
        except I18nError as e:
            logger.error("i18n_error", error=str(e))
    """

    pass


class TranslationContextError(I18nError):
    """Raised when translation context is accessed outside a bound request.

    Example:
        >>> use_translation()
        Traceback (most recent call last):
        ...
        TranslationContextError: No i18n context is bound to the current request
    """

    pass
