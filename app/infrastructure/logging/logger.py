"""Structured logger for observability."""

import logging
from typing import Any, Optional

from app.infrastructure.config.settings import settings

# Configure engine logger with JSON-like structured format
_logger = logging.getLogger("home_affordability_engine")
_logger.setLevel(settings.log_level.upper())

# Create console handler if not exists
if not _logger.handlers:
    handler = logging.StreamHandler()
    handler.setLevel(settings.log_level.upper())
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    _logger.addHandler(handler)


def log_calculation(
    plan_id: str,
    component: str,
    request_id: Optional[str] = None,
    level: int = logging.INFO,
    **kwargs: Any,
) -> None:
    """
    Log structured event for one engine calculation.

    Args:
        plan_id: Plan identifier
        component: Component name (e.g., 'projection', 'comparison', 'milestones')
        request_id: Optional caller request identifier
        level: Log level (default: INFO)
        **kwargs: Additional structured fields to log
    """
    fields: dict[str, Any] = {"plan_id": plan_id, "component": component}
    if request_id is not None:
        fields["request_id"] = request_id
    fields.update(kwargs)

    # Format as key=value pairs for readability
    log_parts = [f"{k}={v!r}" for k, v in fields.items()]
    _logger.log(level, " | ".join(log_parts))


def log_projection_generated(
    plan_id: str,
    rows_count: int,
    target_year: int,
    earliest_affordable_year: Optional[int],
    **kwargs: Any,
) -> None:
    """
    Log projection run.

    Args:
        plan_id: Plan identifier
        rows_count: Number of simulated years
        target_year: Target purchase calendar year
        earliest_affordable_year: First affordable year, None if horizon exhausted
        **kwargs: Additional fields
    """
    log_calculation(
        plan_id,
        "projection",
        rows_count=rows_count,
        target_year=target_year,
        earliest_affordable_year=earliest_affordable_year,
        **kwargs,
    )


def log_comparison_generated(
    plan_id: str,
    earliest_year: int,
    target_year: int,
    **kwargs: Any,
) -> None:
    """
    Log comparison of earliest and target years.

    Args:
        plan_id: Plan identifier
        earliest_year: Earliest affordable year
        target_year: User-confirmed purchase year
        **kwargs: Additional fields
    """
    log_calculation(
        plan_id,
        "comparison",
        earliest_year=earliest_year,
        target_year=target_year,
        **kwargs,
    )


def log_milestones_built(
    plan_id: str,
    regime: str,
    milestones_count: int,
    **kwargs: Any,
) -> None:
    """
    Log roadmap construction.

    Args:
        plan_id: Plan identifier
        regime: Duration bucket name
        milestones_count: Number of milestones emitted
        **kwargs: Additional fields
    """
    log_calculation(
        plan_id,
        "milestones",
        regime=regime,
        milestones_count=milestones_count,
        **kwargs,
    )


def log_input_rejected(plan_id: str, rejected_field: str, **kwargs: Any) -> None:
    """
    Log input rejected at the validation boundary.

    Args:
        plan_id: Plan identifier
        rejected_field: Name of the invalid field
        **kwargs: Additional fields
    """
    log_calculation(
        plan_id,
        "validation",
        level=logging.WARNING,
        rejected_field=rejected_field,
        **kwargs,
    )


# Export logger instance for direct use
logger = _logger
