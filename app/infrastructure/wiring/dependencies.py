"""Dependency injection factory functions."""

from typing import Any

from app.application.use_cases.build_milestones import BuildMilestones
from app.application.use_cases.calculate_onboarding_projection import (
    CalculateOnboardingProjection,
    DefaultAssumptions,
)
from app.application.use_cases.generate_comparison_data import GenerateComparisonData
from app.application.use_cases.generate_projections import GenerateProjections
from app.infrastructure.config.settings import settings
from app.infrastructure.logging.logger import (
    log_calculation,
    log_comparison_generated,
    log_input_rejected,
    log_milestones_built,
    log_projection_generated,
)

_EVENT_LOGGERS = {
    "projection": log_projection_generated,
    "comparison": log_comparison_generated,
    "milestones": log_milestones_built,
    "validation": log_input_rejected,
}


def _logger_func(plan_id: str, component: str, **kwargs: Any) -> None:
    """Route a use case log event to its structured logger."""
    event_logger = _EVENT_LOGGERS.get(component)
    if event_logger is None:
        log_calculation(plan_id, component, **kwargs)
    else:
        event_logger(plan_id, **kwargs)


def create_default_assumptions() -> DefaultAssumptions:
    """
    Factory function to create the product standard assumptions.

    Returns:
        DefaultAssumptions built from settings
    """
    return DefaultAssumptions(
        pct_salary_growth=settings.default_pct_salary_growth,
        pct_house_growth=settings.default_pct_house_growth,
        pct_expense_growth=settings.default_pct_expense_growth,
        pct_investment_return=settings.default_pct_investment_return,
        loan_interest_rate=settings.default_loan_interest_rate,
        loan_term_years=settings.default_loan_term_years,
    )


def create_generate_projections() -> GenerateProjections:
    """
    Factory function to create the projection engine.

    Returns:
        GenerateProjections instance
    """
    return GenerateProjections(
        extension_years=settings.projection_extension_years,
        logger=_logger_func,
    )


def create_generate_comparison_data() -> GenerateComparisonData:
    """
    Factory function to create the comparison engine.

    Returns:
        GenerateComparisonData instance
    """
    return GenerateComparisonData(logger=_logger_func)


def create_build_milestones() -> BuildMilestones:
    """
    Factory function to create the milestone engine.

    Returns:
        BuildMilestones instance
    """
    return BuildMilestones(logger=_logger_func)


def create_calculate_onboarding_projection() -> CalculateOnboardingProjection:
    """
    Factory function to create CalculateOnboardingProjection with dependencies.

    Returns:
        CalculateOnboardingProjection instance
    """
    return CalculateOnboardingProjection(
        create_generate_projections(),
        defaults=create_default_assumptions(),
        price_unit_multiplier=settings.price_unit_multiplier,
        logger=_logger_func,
    )
