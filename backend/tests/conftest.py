from typing import Iterable, List, Optional
from unittest.mock import MagicMock

import pytest

from card_evaluator.core.exceptions import FrequentFlyerValidationError
from card_evaluator.models.domain.application import CreditCardApplication
from card_evaluator.services.evaluation import (
    FraudLookup,
    FrequentFlyerNumberValidator,
    LicenseData,
    ServiceInformation,
)


class StubValidator(FrequentFlyerNumberValidator):
    """In-memory validator returning scripted results."""

    def __init__(
        self,
        results: Iterable[bool] = (),
        default: bool = True,
        license_key: str = "OK",
        error: Optional[Exception] = None,
    ):
        super().__init__()
        self._results = list(results)
        self._default = default
        self._error = error
        self._service_information = ServiceInformation(
            license=LicenseData(license_key=license_key)
        )
        self.looked_up: List[Optional[str]] = []

    @property
    def service_information(self) -> ServiceInformation:
        return self._service_information

    def _lookup(self, frequent_flyer_number: Optional[str]) -> bool:
        self.looked_up.append(frequent_flyer_number)
        if self._error is not None:
            raise self._error
        if self._results:
            return self._results.pop(0)
        return self._default


class StubFraudLookup(FraudLookup):
    def __init__(self, is_risk: bool):
        self.is_risk = is_risk
        self.checked: List[CreditCardApplication] = []

    def check_application(self, application: CreditCardApplication) -> bool:
        self.checked.append(application)
        return self.is_risk


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def validator() -> StubValidator:
    """Validator accepting every number with a valid license."""
    return StubValidator()


@pytest.fixture
def mock_validator() -> MagicMock:
    """Mock validator accepting every number with license key "OK"."""
    mock = MagicMock(spec=FrequentFlyerNumberValidator)
    mock.service_information.license.license_key = "OK"
    mock.is_valid.return_value = True
    return mock


@pytest.fixture
def failing_validator() -> StubValidator:
    return StubValidator(error=FrequentFlyerValidationError("Custom message"))
