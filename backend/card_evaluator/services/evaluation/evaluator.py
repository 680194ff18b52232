"""Credit card application evaluator."""

import logging
from typing import Optional

from card_evaluator.core.enums import CreditCardApplicationDecision, ValidationMode
from card_evaluator.core.exceptions import ConfigurationError
from card_evaluator.models.domain.application import CreditCardApplication
from card_evaluator.services.evaluation.collaborators import (
    FraudLookup,
    FrequentFlyerNumberValidator,
)

logger = logging.getLogger(__name__)


class CreditCardApplicationEvaluator:
    """
    Evaluator deciding credit card applications.

    This class:
    - Refers fraud risks before anything else (when a fraud lookup is given)
    - Auto-accepts high earners without consulting the validator
    - Refers applications while the validator's license is expired
    - Validates the frequent flyer number, referring on failure
    - Applies the age and income thresholds

    It counts the validator lookups it has observed. Instances hold
    mutable state and must not be shared between threads without
    external locking.
    """

    AUTO_REFERRAL_MAX_AGE = 20
    DETAILED_LOOKUP_MIN_AGE = 30
    HIGH_INCOME_THRESHOLD = 100_000
    LOW_INCOME_THRESHOLD = 20_000
    EXPIRED_LICENSE_KEY = "EXPIRED"

    def __init__(
        self,
        validator: FrequentFlyerNumberValidator,
        fraud_lookup: Optional[FraudLookup] = None,
    ):
        """
        Initialize the evaluator and subscribe to validator lookups.

        Args:
            validator: Frequent flyer number validation service
            fraud_lookup: Optional fraud risk lookup; None disables fraud checks

        Raises:
            ConfigurationError: If no validator is supplied
        """
        if validator is None:
            raise ConfigurationError("A frequent flyer number validator is required")

        self._validator = validator
        self._fraud_lookup = fraud_lookup
        self._validator_lookup_count = 0
        self._validator.add_lookup_listener(self._on_validator_lookup_performed)

    @property
    def validator_lookup_count(self) -> int:
        """Number of validator lookups observed by this evaluator."""
        return self._validator_lookup_count

    def _on_validator_lookup_performed(self) -> None:
        self._validator_lookup_count += 1

    def evaluate(
        self, application: CreditCardApplication
    ) -> CreditCardApplicationDecision:
        """
        Evaluate an application.

        Rules are applied in order and the first match wins. Validator
        failures are logged and result in a referral; nothing is raised.

        Args:
            application: The application to evaluate

        Returns:
            The decision for the application
        """
        if self._fraud_lookup is not None and self._fraud_lookup.is_fraud_risk(
            application
        ):
            return self._decide(
                CreditCardApplicationDecision.REFERRED_TO_HUMAN_FRAUD_RISK,
                "fraud risk",
            )

        if application.gross_annual_income >= self.HIGH_INCOME_THRESHOLD:
            return self._decide(
                CreditCardApplicationDecision.AUTO_ACCEPTED, "high income"
            )

        license_key = self._validator.service_information.license.license_key
        if license_key == self.EXPIRED_LICENSE_KEY:
            return self._decide(
                CreditCardApplicationDecision.REFERRED_TO_HUMAN,
                "validator license expired",
            )

        self._validator.validation_mode = (
            ValidationMode.DETAILED
            if application.age >= self.DETAILED_LOOKUP_MIN_AGE
            else ValidationMode.QUICK
        )

        try:
            is_valid_frequent_flyer_number = self._validator.is_valid(
                application.frequent_flyer_number
            )
        except Exception as e:
            logger.warning(f"Frequent flyer validation failed, referring: {e}")
            return self._decide(
                CreditCardApplicationDecision.REFERRED_TO_HUMAN,
                "frequent flyer validation error",
            )

        return self._evaluate_profile(application, is_valid_frequent_flyer_number)

    def evaluate_using_out(
        self, application: CreditCardApplication
    ) -> CreditCardApplicationDecision:
        """
        Evaluate an application through the validator's non-throwing call.

        Secondary variant of evaluate(): skips the fraud, license and
        validation mode steps.

        Args:
            application: The application to evaluate

        Returns:
            The decision for the application
        """
        if application.gross_annual_income >= self.HIGH_INCOME_THRESHOLD:
            return self._decide(
                CreditCardApplicationDecision.AUTO_ACCEPTED, "high income"
            )

        check = self._validator.validate(application.frequent_flyer_number)
        return self._evaluate_profile(application, check.is_valid)

    def _evaluate_profile(
        self,
        application: CreditCardApplication,
        is_valid_frequent_flyer_number: bool,
    ) -> CreditCardApplicationDecision:
        if not is_valid_frequent_flyer_number:
            return self._decide(
                CreditCardApplicationDecision.REFERRED_TO_HUMAN,
                "invalid frequent flyer number",
            )

        if application.age <= self.AUTO_REFERRAL_MAX_AGE:
            return self._decide(
                CreditCardApplicationDecision.REFERRED_TO_HUMAN, "young applicant"
            )

        if application.gross_annual_income < self.LOW_INCOME_THRESHOLD:
            return self._decide(
                CreditCardApplicationDecision.AUTO_DECLINED, "low income"
            )

        return self._decide(
            CreditCardApplicationDecision.REFERRED_TO_HUMAN, "no automatic rule"
        )

    @staticmethod
    def _decide(
        decision: CreditCardApplicationDecision, reason: str
    ) -> CreditCardApplicationDecision:
        logger.debug(f"Application {decision.value}: {reason}")
        return decision
