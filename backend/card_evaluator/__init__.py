"""Credit card application evaluation."""

from card_evaluator.core.enums import CreditCardApplicationDecision, ValidationMode
from card_evaluator.core.exceptions import (
    ConfigurationError,
    EvaluatorError,
    FrequentFlyerValidationError,
)
from card_evaluator.models.domain.application import CreditCardApplication
from card_evaluator.services.evaluation import (
    CreditCardApplicationEvaluator,
    FraudLookup,
    FrequentFlyerNumberValidator,
    LicenseData,
    ServiceInformation,
    ValidityCheck,
)

__all__ = [
    "ConfigurationError",
    "CreditCardApplication",
    "CreditCardApplicationDecision",
    "CreditCardApplicationEvaluator",
    "EvaluatorError",
    "FraudLookup",
    "FrequentFlyerNumberValidator",
    "FrequentFlyerValidationError",
    "LicenseData",
    "ServiceInformation",
    "ValidationMode",
    "ValidityCheck",
]
