"""Custom domain exceptions for the evaluator."""


class EvaluatorError(Exception):
    """Base exception for credit card evaluation errors."""

    pass


class ConfigurationError(EvaluatorError, ValueError):
    """Raised when the evaluator is built without a required collaborator."""

    pass


class FrequentFlyerValidationError(EvaluatorError):
    """Raised by validator implementations when a lookup cannot be completed."""

    pass
