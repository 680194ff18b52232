"""Service layer for business logic."""

from card_evaluator.services.evaluation import CreditCardApplicationEvaluator

__all__ = ["CreditCardApplicationEvaluator"]
