"""Interfaces for the external services consulted during evaluation."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, List, Optional

from card_evaluator.core.enums import ValidationMode
from card_evaluator.models.domain.application import CreditCardApplication

logger = logging.getLogger(__name__)

LookupListener = Callable[[], None]


@dataclass(frozen=True)
class LicenseData:
    """License held by the validator's backing service."""

    license_key: str


@dataclass
class ServiceInformation:
    """Descriptor of the validator's backing service."""

    license: LicenseData


@dataclass(frozen=True)
class ValidityCheck:
    """
    Result of a non-throwing frequent flyer number validation.

    Attributes:
        is_valid: Whether the number was accepted
        error: Description of the failure when the lookup raised
    """

    is_valid: bool
    error: Optional[str] = None


class FrequentFlyerNumberValidator(ABC):
    """
    Abstract base class for frequent flyer number validation services.

    Subclasses implement _lookup() and the service_information property.
    Every completed call to is_valid() notifies the registered lookup
    listeners exactly once, synchronously, before returning. A lookup
    that raises does not notify.
    """

    def __init__(self):
        """Initialize with quick validation and no listeners."""
        self._validation_mode = ValidationMode.QUICK
        self._lookup_listeners: List[LookupListener] = []

    @property
    @abstractmethod
    def service_information(self) -> ServiceInformation:
        """Information about the backing service, including its license."""
        pass

    @property
    def validation_mode(self) -> ValidationMode:
        return self._validation_mode

    @validation_mode.setter
    def validation_mode(self, mode: ValidationMode) -> None:
        self._validation_mode = mode

    @abstractmethod
    def _lookup(self, frequent_flyer_number: Optional[str]) -> bool:
        """
        Look the number up in the backing service.

        Args:
            frequent_flyer_number: Identifier to validate (may be None or empty)

        Returns:
            True if the number is valid

        Raises:
            FrequentFlyerValidationError: If the lookup cannot be completed
        """
        pass

    def is_valid(self, frequent_flyer_number: Optional[str]) -> bool:
        """
        Validate a frequent flyer number and notify lookup listeners.

        Raises:
            Any error raised by the lookup, in which case no listener is notified
        """
        result = self._lookup(frequent_flyer_number)
        self._notify_lookup_performed()
        return result

    def validate(self, frequent_flyer_number: Optional[str]) -> ValidityCheck:
        """Validate a frequent flyer number without raising."""
        try:
            return ValidityCheck(is_valid=self.is_valid(frequent_flyer_number))
        except Exception as e:
            logger.warning(f"Frequent flyer lookup failed: {e}")
            return ValidityCheck(is_valid=False, error=str(e))

    def add_lookup_listener(self, listener: LookupListener) -> None:
        """
        Register a callback invoked after each completed lookup.

        Args:
            listener: Zero-argument callable
        """
        self._lookup_listeners.append(listener)

    def _notify_lookup_performed(self) -> None:
        for listener in self._lookup_listeners:
            listener()


class FraudLookup:
    """
    Fraud risk lookup consulted before any other rule.

    Override check_application() to plug in a real fraud service; the
    base implementation reports every application as safe.
    """

    def is_fraud_risk(self, application: CreditCardApplication) -> bool:
        """
        Check whether the application is a fraud risk.

        Args:
            application: The application being evaluated

        Returns:
            True if the application should be referred for fraud review
        """
        return self.check_application(application)

    def check_application(self, application: CreditCardApplication) -> bool:
        return False
