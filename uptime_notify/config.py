from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Uptime Notify"
    debug: bool = False

    # Required by the test-notification endpoint (empty = endpoint disabled)
    admin_api_key: str = ""

    # Base URL of the monitoring UI, used to build deep links
    primary_base_url: str = ""

    # Outbound HTTP timeout (seconds)
    http_timeout: float = 15.0

    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()

# Application setting keys -> Settings attributes
_SETTING_KEYS = {
    "primaryBaseURL": "primary_base_url",
}


async def get_setting(key: str) -> Optional[str]:
    """Look up an application setting by key. Empty or unknown keys return None."""
    attr = _SETTING_KEYS.get(key)
    if attr is None:
        return None
    return getattr(settings, attr) or None
