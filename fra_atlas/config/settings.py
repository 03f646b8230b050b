"""Typed runtime settings with dotenv support and startup validation."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


_DEFAULT_CLAIM_SOURCES = [
    "Odisha=assets/data/sample-claims.geojson",
    "Madhya Pradesh=assets/data/mp-claims.geojson",
    "Tripura=assets/data/tripura-claims.geojson",
    "Telangana=assets/data/telangana-claims.geojson",
]


class AtlasSettings(BaseSettings):
    """Application settings for dashboard runtime and report configuration.

    Environment variable names map directly to field names in uppercase.
    Example: `report_export_directory` reads from `REPORT_EXPORT_DIRECTORY`.
    List-valued fields accept JSON arrays in the environment.

    Attributes:
        environment_name: Runtime environment label.
        application_host: Host interface for web server binding.
        application_port: Web server port.
        log_level: Root logging level name.
        claim_sources: Claim sources as `name=location` entries (file path or http(s) URL).
        source_request_timeout_seconds: HTTP timeout used for URL claim sources.
        report_export_directory: Directory receiving exported report files.
        report_export_delay_seconds: Progress delay applied before report export.
        alert_deforestation_min: Lower bound for placeholder deforestation alerts.
        alert_deforestation_max: Upper bound for placeholder deforestation alerts.
        alert_high_risk_min: Lower bound for placeholder high-risk areas.
        alert_high_risk_max: Upper bound for placeholder high-risk areas.
        alert_ndvi_violation_min: Lower bound for placeholder NDVI violations.
        alert_ndvi_violation_max: Upper bound for placeholder NDVI violations.
        report_regions_covered: Region names listed in the executive summary.
        report_monitoring_period: Monitoring period label for the executive summary.
        report_total_families_protected: Community-impact family total.
        report_forest_area_secured_hectares: Community-impact area total.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment_name: str = Field(default="development")
    application_host: str = Field(default="0.0.0.0")
    application_port: int = Field(default=8000, ge=1, le=65535)
    log_level: str = Field(default="INFO")
    claim_sources: list[str] = Field(default_factory=lambda: list(_DEFAULT_CLAIM_SOURCES))
    source_request_timeout_seconds: float = Field(default=30.0, gt=0)
    report_export_directory: str = Field(default="exports", min_length=1)
    report_export_delay_seconds: float = Field(default=2.0, ge=0)
    alert_deforestation_min: int = Field(default=3, ge=0)
    alert_deforestation_max: int = Field(default=10, ge=0)
    alert_high_risk_min: int = Field(default=2, ge=0)
    alert_high_risk_max: int = Field(default=6, ge=0)
    alert_ndvi_violation_min: int = Field(default=5, ge=0)
    alert_ndvi_violation_max: int = Field(default=16, ge=0)
    report_regions_covered: list[str] = Field(
        default_factory=lambda: ["Odisha", "Madhya Pradesh", "Tripura", "Telangana"]
    )
    report_monitoring_period: str = Field(default="January 2025 - September 2025", min_length=1)
    report_total_families_protected: int = Field(default=8542, ge=0)
    report_forest_area_secured_hectares: float = Field(default=24156, ge=0)

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"unsupported log level: {value}")
        return normalized_value

    @field_validator("claim_sources")
    @classmethod
    def _validate_claim_sources(cls, value: list[str]) -> list[str]:
        normalized_entries: list[str] = []
        for entry in value:
            name, separator, location = entry.partition("=")
            if not separator or not name.strip() or not location.strip():
                raise ValueError(f"claim source entry must look like `name=location`: {entry!r}")
            normalized_entries.append(f"{name.strip()}={location.strip()}")
        return normalized_entries

    @field_validator("alert_deforestation_max", "alert_high_risk_max", "alert_ndvi_violation_max")
    @classmethod
    def _validate_alert_bounds(cls, value: int, info) -> int:
        minimum_field_name = info.field_name.replace("_max", "_min")
        minimum_value = info.data.get(minimum_field_name)
        if minimum_value is not None and value < minimum_value:
            raise ValueError(f"{info.field_name} must be greater than or equal to {minimum_field_name}")
        return value

    def settings_claim_source_entries(self) -> list[tuple[str, str]]:
        """Split configured claim sources into `(name, location)` pairs.

        Returns:
            list[tuple[str, str]]: Ordered source names and locations.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        return [tuple(entry.split("=", 1)) for entry in self.claim_sources]


def config_load_settings() -> AtlasSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AtlasSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when required settings are missing or invalid.
    """

    try:
        return AtlasSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
