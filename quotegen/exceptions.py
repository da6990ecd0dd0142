# quotegen/exceptions.py
"""Exception hierarchy for quote generation."""


class QuoteGenError(Exception):
    """Base exception for all quote generation errors."""


class TemplateUnavailableError(QuoteGenError):
    """Raised when the template asset cannot be fetched or parsed."""


class TemplatePageMissingError(TemplateUnavailableError):
    """Raised when the template does not have the requested page."""


class FontEmbeddingError(QuoteGenError):
    """Raised when a configured font file exists but cannot be registered."""


class QuoteDataError(QuoteGenError):
    """Raised when quote data violates a precondition (empty items, bad payload)."""
