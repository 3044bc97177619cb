"""
Payroll business helpers.

Stateless computations over PayrollData:
- building a standard six-component record
- summing gross / deduction totals (full month or prorated)
- validating required fields before submission

No I/O happens here.
"""

import math
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel

from payroll_client.core.logging import get_logger
from payroll_client.models.payroll import PayrollData, PayrollTotals, ValidationResult

logger = get_logger(__name__)

# Components counted towards gross pay
GROSS_ITEMS = ("basic_salary", "performance", "meal_allowance", "transport")

# Components subtracted from gross pay
DEDUCTION_ITEMS = ("tax", "social_insurance")

# Fields that must be present and strictly positive
REQUIRED_FIELDS = ("basic_salary",)

# Only these components are scaled when prorating
PRORATED_ITEMS = ("basic_salary",)

PayrollDataLike = Union[PayrollData, Mapping[str, Any]]


def _as_mapping(payroll_data: PayrollDataLike) -> Mapping[str, Any]:
    if isinstance(payroll_data, BaseModel):
        return payroll_data.model_dump()
    return payroll_data


def _amount(value: Any) -> float:
    """Numeric value of a component; missing or non-numeric counts as 0."""
    if value is None or isinstance(value, bool):
        return 0
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring non-numeric payroll component: {value!r}")
        return 0


class PayrollDataProcessor:
    @staticmethod
    def create_standard_payroll_data(
        basic_salary: float,
        performance: float = 0,
        allowances: Optional[Mapping[str, float]] = None,
        deductions: Optional[Mapping[str, float]] = None,
    ) -> PayrollData:
        """
        Map convenience parameters onto the six-component PayrollData.

        Args:
            basic_salary: Base monthly salary
            performance: Performance bonus
            allowances: Optional {"meal": ..., "transport": ...}
            deductions: Optional {"tax": ..., "socialInsurance": ...};
                "social_insurance" is accepted as well
        """
        allowances = allowances or {}
        deductions = deductions or {}

        return PayrollData(
            basic_salary=basic_salary,
            performance=performance or 0,
            meal_allowance=allowances.get("meal") or 0,
            transport=allowances.get("transport") or 0,
            tax=deductions.get("tax") or 0,
            social_insurance=(
                deductions.get("socialInsurance") or deductions.get("social_insurance") or 0
            ),
        )

    @staticmethod
    def calculate_totals(payroll_data: PayrollDataLike) -> PayrollTotals:
        data = _as_mapping(payroll_data)

        total_gross = sum(_amount(data.get(item)) for item in GROSS_ITEMS)
        total_deductions = sum(_amount(data.get(item)) for item in DEDUCTION_ITEMS)

        return PayrollTotals(
            total_gross=total_gross,
            total_deductions=total_deductions,
            total_net=total_gross - total_deductions,
        )

    @staticmethod
    def calculate_prorated_totals(
        payroll_data: PayrollDataLike,
        work_days: float,
        month_days: float,
    ) -> PayrollTotals:
        """
        Totals for a partial month.

        Only basic salary is scaled by work_days / month_days; other gross
        components and all deductions keep their full value.
        """
        if month_days <= 0:
            raise ValueError("month_days must be greater than 0")

        data = _as_mapping(payroll_data)
        ratio = work_days / month_days

        total_gross = 0.0
        for item in GROSS_ITEMS:
            amount = _amount(data.get(item))
            total_gross += amount * ratio if item in PRORATED_ITEMS else amount

        total_deductions = sum(_amount(data.get(item)) for item in DEDUCTION_ITEMS)

        return PayrollTotals(
            total_gross=total_gross,
            total_deductions=total_deductions,
            total_net=total_gross - total_deductions,
        )

    @staticmethod
    def validate_payroll_data(payroll_data: PayrollDataLike) -> ValidationResult:
        data = _as_mapping(payroll_data)
        errors: list[str] = []

        for field in REQUIRED_FIELDS:
            value = data.get(field)
            amount = _amount(value)
            missing = value is None or isinstance(value, bool)
            if missing or not math.isfinite(amount) or amount <= 0:
                errors.append(f"{field} is required and must be greater than 0")

        return ValidationResult(is_valid=not errors, errors=errors)
