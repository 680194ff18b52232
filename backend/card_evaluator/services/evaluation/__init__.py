"""Credit card evaluation and the collaborators it consults."""

from .collaborators import (
    FraudLookup,
    FrequentFlyerNumberValidator,
    LicenseData,
    ServiceInformation,
    ValidityCheck,
)
from .evaluator import CreditCardApplicationEvaluator

__all__ = [
    "CreditCardApplicationEvaluator",
    "FraudLookup",
    "FrequentFlyerNumberValidator",
    "LicenseData",
    "ServiceInformation",
    "ValidityCheck",
]
