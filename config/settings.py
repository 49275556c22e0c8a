from pydantic_settings import BaseSettings, SettingsConfigDict

from src.ps_common.enums import RoutingMode


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Redis (default matches a local redis-server)
    REDIS_URL: str = "redis://localhost:6379/0"

    # PocketSmith: no default for the key, MUST be set in .env
    POCKETSMITH_API_KEY: str
    POCKETSMITH_BASE_URL: str = "https://api.pocketsmith.com/v2"
    HTTP_TIMEOUT_SECONDS: float = 10.0

    # Inbound bearer key shared with the client app: MUST be set in .env
    CLIENT_AUTH_KEY: str

    # 86400 = 24 hours
    CACHE_TTL_SECONDS: int = 86400

    # account_name: "currency" param names an account, category required
    # currency: "currency" param is a currency code, category ignored
    ROUTING_MODE: RoutingMode = RoutingMode.ACCOUNT_NAME

    # App
    APP_NAME: str = "PocketSmith Proxy"
    DEBUG: bool = False


settings = Settings()
