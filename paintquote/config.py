from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "PAINTQUOTE_"}

    # Redis (cart + draft snapshots)
    redis_url: str = "redis://localhost:6379/0"
    snapshot_prefix: str = "paintquote"

    # App
    debug: bool = False
    log_level: str = "INFO"

    # Rate table overrides (playbook defaults)
    labor_rate: Decimal = Decimal("50")  # $ per hour
    paint_rate: Decimal = Decimal("50")  # $ per gallon
    supplies_rate: Decimal = Decimal("2")  # $ per billed hour
    paint_coverage: Decimal = Decimal("400")  # sq ft per gallon
    travel_fee: Decimal = Decimal("50")

    # Cart totals policy
    discount_threshold: Decimal = Decimal("1000")
    discount_rate: Decimal = Decimal("0.15")
    long_job_hours: int = 10
    travel_share: Decimal = Decimal("0.5")  # fraction of other_fees treated as travel

    # Snapshot freshness windows
    cart_max_age_hours: int = 7 * 24  # booking flow
    draft_max_age_hours: int = 24  # single-service flow


settings = Settings()
