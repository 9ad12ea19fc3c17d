"""Runtime configuration for the form handler."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration loaded from environment variables (FORM_HANDLER_*)."""

    model_config = SettingsConfigDict(
        env_prefix="FORM_HANDLER_",
        env_file=".env",
        extra="ignore",
    )

    log_level: str = "INFO"
    site_name: str = ""

    honeypot_key: str = "my_information"
    nonce_key: str = "form_nonce"
    nonce_action: str = "form_submission"
    captcha_response_key: str = "g-recaptcha-response"
    field_key_prefix: str = ""

    default_completion_message: str = "Thank you for your submission."

    display_only_types: list[str] = ["html", "section-header"]
    storage_excluded_types: list[str] = ["recaptcha"]

    form_registry_path: Path = Path("form-registry")
    submissions_path: Path = Path("submissions")
    uploads_path: Path = Path("uploads")
    uploads_base_url: str = "/uploads"


def get_settings() -> Settings:
    """Return settings resolved from the current environment."""
    return Settings()
