class SalesAnalysisError(ValueError):
    """Base class for errors raised by the sales analyzer."""


class InvalidInputError(SalesAnalysisError):
    """sellers / products / purchase_records missing, empty or malformed."""


class InvalidStrategyError(SalesAnalysisError):
    """Strategies object missing, of the wrong kind, or lacking a callable."""
