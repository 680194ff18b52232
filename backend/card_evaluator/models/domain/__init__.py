"""Domain models for the application."""

from card_evaluator.models.domain.application import CreditCardApplication

__all__ = ["CreditCardApplication"]
