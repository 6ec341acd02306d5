from __future__ import annotations

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="KCO_", extra="ignore")

    # Checkout API
    base_uri: str = "https://checkout.testdrive.klarna.com/checkout/orders"
    shared_secret: SecretStr = SecretStr("")

    # HTTP transport
    http_timeout: float = 10.0
    http_verify_ssl: bool = True  # set False behind corporate SSL-inspection proxies

    # Logging
    log_level: str = "INFO"


settings = Settings()
