from loguru import logger
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from planrisk.estimation.constants import (
    BASE_PROBABILITY,
    DEVELOPERS_WEIGHT,
    DURATION_THRESHOLD_DAYS,
    DURATION_WEIGHT,
    HIGH_RISK_THRESHOLD,
    MEDIUM_RISK_THRESHOLD,
    MIN_DEVELOPERS,
    REQUIREMENTS_THRESHOLD,
    REQUIREMENTS_WEIGHT,
)
from planrisk.estimation.risk import RiskModel


class Settings(BaseSettings):
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: str | None = Field(default=None, validation_alias="LOG_FILE")
    log_json: bool = Field(default=False, validation_alias="LOG_JSON", description="Emit JSON log records")
    cors_allow_origins: str = Field(
        default="*",
        validation_alias="CORS_ALLOW_ORIGINS",
        description="Comma-separated list of allowed origins, or * for any origin",
    )
    server_host: str = Field(default="127.0.0.1", validation_alias="SERVER_HOST")
    server_port: int = Field(default=8000, validation_alias="SERVER_PORT")

    risk_base_probability: float = Field(
        default=BASE_PROBABILITY, ge=0.0, le=1.0, validation_alias="RISK_BASE_PROBABILITY"
    )
    risk_duration_threshold_days: int = Field(
        default=DURATION_THRESHOLD_DAYS, ge=0, validation_alias="RISK_DURATION_THRESHOLD_DAYS"
    )
    risk_duration_weight: float = Field(
        default=DURATION_WEIGHT, ge=0.0, le=1.0, validation_alias="RISK_DURATION_WEIGHT"
    )
    risk_requirements_threshold: int = Field(
        default=REQUIREMENTS_THRESHOLD, ge=0, validation_alias="RISK_REQUIREMENTS_THRESHOLD"
    )
    risk_requirements_weight: float = Field(
        default=REQUIREMENTS_WEIGHT, ge=0.0, le=1.0, validation_alias="RISK_REQUIREMENTS_WEIGHT"
    )
    risk_min_developers: int = Field(default=MIN_DEVELOPERS, ge=0, validation_alias="RISK_MIN_DEVELOPERS")
    risk_developers_weight: float = Field(
        default=DEVELOPERS_WEIGHT, ge=0.0, le=1.0, validation_alias="RISK_DEVELOPERS_WEIGHT"
    )
    risk_high_threshold: float = Field(
        default=HIGH_RISK_THRESHOLD, ge=0.0, le=1.0, validation_alias="RISK_HIGH_THRESHOLD"
    )
    risk_medium_threshold: float = Field(
        default=MEDIUM_RISK_THRESHOLD, ge=0.0, le=1.0, validation_alias="RISK_MEDIUM_THRESHOLD"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{value}'. Valid levels are: {', '.join(valid_levels)}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @model_validator(mode="after")
    def validate_risk_bands(self) -> "Settings":
        """Medium cut-off must not exceed the high cut-off."""
        if self.risk_medium_threshold > self.risk_high_threshold:
            raise ValueError(
                f"RISK_MEDIUM_THRESHOLD ({self.risk_medium_threshold}) must not exceed "
                f"RISK_HIGH_THRESHOLD ({self.risk_high_threshold})"
            )
        return self

    @property
    def cors_origins(self) -> list[str]:
        origins = [origin.strip() for origin in self.cors_allow_origins.split(",")]
        return [origin for origin in origins if origin]

    def risk_model(self) -> RiskModel:
        """Build the risk rule from the configured constants."""
        return RiskModel(
            base_probability=self.risk_base_probability,
            duration_threshold_days=self.risk_duration_threshold_days,
            duration_weight=self.risk_duration_weight,
            requirements_threshold=self.risk_requirements_threshold,
            requirements_weight=self.risk_requirements_weight,
            min_developers=self.risk_min_developers,
            developers_weight=self.risk_developers_weight,
            high_threshold=self.risk_high_threshold,
            medium_threshold=self.risk_medium_threshold,
        )


settings = Settings()
