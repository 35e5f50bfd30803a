"""Loan summary DTOs."""

from app.application.dtos.base import DTO


class LoanSummary(DTO):
    """Mortgage metrics for the chosen purchase year."""

    loan_amount: float
    down_payment_amount: float
    down_payment_percentage: float
    monthly_payment: float
    total_payments: float
    payment_to_income_ratio: float
    buffer_amount: float
    buffer_percentage: float
