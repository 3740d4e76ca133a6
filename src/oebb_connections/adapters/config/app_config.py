"""12-factor configuration adapter using environment variables and TOML config."""

import logging
from pathlib import Path
from typing import Any

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # type: ignore[no-redef]  # Fallback for older Python

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from oebb_connections.adapters.oebb_api.constants import (
    DEFAULT_ADMISSIBLE_PRODUCTS,
    DEFAULT_RESULTS,
    OEBB_BASE_URL,
)
from oebb_connections.domain.constants import DEFAULT_BOILERPLATE_TOKENS
from oebb_connections.domain.models.admissibility_policy import AdmissibilityPolicy
from oebb_connections.domain.models.transport_product import TransportProduct

# Settings that may be overridden from the [api] section of the TOML file
_API_SECTION_KEYS = (
    "api_base_url",
    "api_results",
    "api_timeout_seconds",
    "send_product_filters",
    "fetch_max_attempts",
    "retry_delay_seconds",
)
# Settings that may be overridden from the [display] section of the TOML file
_DISPLAY_SECTION_KEYS = (
    "result_limit",
    "refresh_interval_seconds",
    "refresh_cooldown_seconds",
    "timezone",
    "default_route",
)


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    # Upstream API configuration
    api_base_url: str = Field(default=OEBB_BASE_URL, description="Base URL of the journey API")
    api_results: int = Field(
        default=DEFAULT_RESULTS, ge=1, description="Number of journeys requested per query"
    )
    api_timeout_seconds: float | None = Field(
        default=None,
        description="Per-request timeout in seconds (unset keeps the HTTP client default)",
    )
    send_product_filters: bool = Field(
        default=True,
        description="Send per-product query flags (disable if the API answers with ENUM errors)",
    )
    fetch_max_attempts: int = Field(
        default=3, ge=1, description="Total tries per journey query before giving up"
    )
    retry_delay_seconds: float = Field(
        default=2.0, ge=0, description="Fixed delay between journey query attempts"
    )

    # Filtering and normalization
    admissible_products: str = Field(
        default=",".join(DEFAULT_ADMISSIBLE_PRODUCTS),
        description="Comma-separated transport products allowed in results",
    )
    admissibility_policy: str = Field(
        default=AdmissibilityPolicy.ALL_LEGS.value,
        description="'all_legs' or 'strict_first_leg'",
    )
    boilerplate_tokens: str = Field(
        default=",".join(DEFAULT_BOILERPLATE_TOKENS),
        description="Comma-separated words removed from direction texts",
    )
    result_limit: int = Field(default=5, ge=1, description="Maximum connections displayed")

    # Refresh and cache
    refresh_interval_seconds: int = Field(
        default=180, ge=1, description="Interval between automatic refreshes in watch mode"
    )
    refresh_cooldown_seconds: float = Field(
        default=5, ge=0, description="Minimum gap between two refreshes"
    )
    cache_file: str | None = Field(
        default=None,
        description="JSON file for the last good result per route (unset keeps it in memory)",
    )
    cache_max_age_seconds: int = Field(
        default=300, ge=0, description="Cached connections older than this are not shown"
    )

    # Display configuration
    timezone: str = Field(
        default="Europe/Vienna",
        description="Timezone for displayed times (IANA timezone name)",
    )
    default_route: str = Field(default="f-m", description="Route shown when none is given")
    log_level: str = Field(default="INFO", description="Logging level")

    # TOML config file path; if unset, the built-in station catalog is used
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file for stations, routes and overrides",
    )

    @field_validator("admissible_products")
    @classmethod
    def validate_admissible_products(cls, v: str) -> str:
        """Validate every product tag is known."""
        products = _split_csv(v)
        if not products:
            raise ValueError("admissible_products must name at least one product")
        unknown = [p for p in products if TransportProduct.parse(p) is None]
        if unknown:
            known = ", ".join(p.value for p in TransportProduct)
            raise ValueError(f"Unknown transport product(s) {unknown}; known: {known}")
        return ",".join(products)

    @field_validator("admissibility_policy")
    @classmethod
    def validate_admissibility_policy(cls, v: str) -> str:
        """Validate policy is either 'all_legs' or 'strict_first_leg'."""
        if v.lower() not in {p.value for p in AdmissibilityPolicy}:
            raise ValueError("admissibility_policy must be either 'all_legs' or 'strict_first_leg'")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level

    @property
    def products(self) -> frozenset[TransportProduct]:
        """Admissible products as domain values."""
        return frozenset(TransportProduct(p) for p in _split_csv(self.admissible_products))

    @property
    def policy(self) -> AdmissibilityPolicy:
        return AdmissibilityPolicy(self.admissibility_policy)

    @property
    def boilerplate_token_list(self) -> list[str]:
        return _split_csv(self.boilerplate_tokens)

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse TOML file, updating API and display settings."""
        if not self.config_file:
            raise ValueError("config_file must be set to load the station catalog")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        api = toml_data.get("api", {})
        if isinstance(api, dict):
            for key in _API_SECTION_KEYS:
                if key in api:
                    setattr(self, key, api[key])
            if "admissible_products" in api:
                products = api["admissible_products"]
                if isinstance(products, list):
                    products = ",".join(str(p) for p in products)
                self.admissible_products = products
            if "admissibility_policy" in api:
                self.admissibility_policy = api["admissibility_policy"]

        display = toml_data.get("display", {})
        if isinstance(display, dict):
            for key in _DISPLAY_SECTION_KEYS:
                if key in display:
                    setattr(self, key, display[key])
            if "boilerplate_tokens" in display:
                tokens = display["boilerplate_tokens"]
                if isinstance(tokens, list):
                    tokens = ",".join(str(t) for t in tokens)
                self.boilerplate_tokens = tokens

        return toml_data

    def get_catalog_config(self) -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:
        """Parse and return ([[stations]], [[routes]]) from the TOML file.

        Either list may be empty, in which case the built-in catalog fills in.
        """
        toml_data = self._load_toml_data()

        stations = toml_data.get("stations", [])
        routes = toml_data.get("routes", [])
        if not isinstance(stations, list):
            raise ValueError("TOML config 'stations' must be a list")
        if not isinstance(routes, list):
            raise ValueError("TOML config 'routes' must be a list")

        return (
            [s for s in stations if isinstance(s, dict)],
            [r for r in routes if isinstance(r, dict)],
        )
