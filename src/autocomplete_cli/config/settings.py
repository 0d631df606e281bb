"""Application settings loaded from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration loaded from environment variables.

    All settings can be overridden via environment variables prefixed with AUTOCOMPLETE_.
    For example, AUTOCOMPLETE_LOG_LEVEL=DEBUG sets log_level="DEBUG".
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="AUTOCOMPLETE_",
        case_sensitive=False,
        extra="ignore",
    )

    # ─── Logging ─────────────────────────────────────────────────────
    log_level: str = "WARNING"

    # ─── Rate Limiting ───────────────────────────────────────────────
    # Minimum spacing between outbound calls when --delay is not given
    default_delay_ms: int = 100

    # ─── HTTP Client Settings ────────────────────────────────────────
    request_timeout: float = 30.0
    user_agent: str = "autocomplete-cli/1.0"

    # ─── SSL/TLS Settings ───────────────────────────────────────────
    # Path to corporate CA certificate bundle (PEM format)
    ssl_cert_dir: str | None = None
    # Path to a specific CA certificate file (alternative to ssl_cert_dir)
    ssl_ca_bundle: str | None = None
    # Disable SSL verification (NOT recommended)
    ssl_verify: bool = True

    # ─── Upstream Endpoints ──────────────────────────────────────────
    google_base_url: str = "https://suggestqueries.google.com/complete/search"
    bing_base_url: str = "https://api.bing.com/qsml.aspx"
    amazon_base_url: str = "https://completion.amazon.com/search/complete"
    duckduckgo_base_url: str = "https://duckduckgo.com/ac/"

    def get_ssl_context(self) -> bool | str:
        """
        Get SSL verification configuration for httpx.

        Returns:
            - False if ssl_verify is disabled
            - Path to CA bundle/cert dir if configured
            - True for default SSL verification

        Priority: ssl_verify=False > ssl_ca_bundle > ssl_cert_dir > True
        """
        if not self.ssl_verify:
            return False
        if self.ssl_ca_bundle:
            return self.ssl_ca_bundle
        if self.ssl_cert_dir:
            return self.ssl_cert_dir
        return True


# Global settings instance
settings = Settings()
