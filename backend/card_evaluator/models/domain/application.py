"""Credit card application domain model."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CreditCardApplication(BaseModel):
    """
    Credit card application submitted for evaluation.

    The application is owned by the caller and immutable once built.

    Attributes:
        gross_annual_income: Applicant's yearly income before tax
        age: Applicant's age in years
        frequent_flyer_number: Loyalty programme identifier, if any
    """

    gross_annual_income: Decimal = Field(default=Decimal("0"), ge=0)
    age: int = Field(default=0, ge=0)
    frequent_flyer_number: Optional[str] = None

    model_config = ConfigDict(frozen=True)
