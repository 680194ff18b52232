"""Core enums for type safety across the application."""

from enum import Enum


class CreditCardApplicationDecision(str, Enum):
    """Outcome of evaluating a credit card application."""

    AUTO_ACCEPTED = "Auto Accepted"
    AUTO_DECLINED = "Auto Declined"
    REFERRED_TO_HUMAN = "Referred To Human"
    REFERRED_TO_HUMAN_FRAUD_RISK = "Referred To Human (Fraud Risk)"


class ValidationMode(str, Enum):
    """Lookup depth requested from the frequent flyer number validator."""

    QUICK = "Quick"
    DETAILED = "Detailed"
