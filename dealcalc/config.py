from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    debug: bool = False
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    # Long-term assumption defaults for requests that omit them
    default_projection_years: int = 5
    default_rent_growth: Decimal = Decimal("3")
    default_appreciation: Decimal = Decimal("3")
    default_inflation_rate: Decimal = Decimal("2")
    default_vacancy_rate: Decimal = Decimal("5")
    default_selling_costs_pct: Decimal = Decimal("6")

    # Tenant turnover defaults (single-family)
    default_tenancy_years: Decimal = Decimal("2")
    default_turnover_prep_fee: Decimal = Decimal("500")
    default_commission_months: Decimal = Decimal("0.5")


settings = Settings()
