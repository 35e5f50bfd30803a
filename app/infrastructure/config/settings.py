"""Application settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine configuration settings."""

    log_level: str = "INFO"
    projection_extension_years: int = 10  # years searched past the target year
    price_unit_multiplier: float = 1000.0  # submitted prices are in billions, engine uses millions
    # Product standard assumptions
    default_pct_salary_growth: float = 7.0
    default_pct_house_growth: float = 10.0
    default_pct_expense_growth: float = 4.0
    default_pct_investment_return: float = 9.0
    default_loan_interest_rate: float = 11.0
    default_loan_term_years: int = 25

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
    )


settings = Settings()
