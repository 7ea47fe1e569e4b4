from pydantic_settings import BaseSettings

DEFAULT_USER_AGENT = "Sendivent-Python/1.0"


class SendiventSettings(BaseSettings):
    api_key: str = ""

    # Seconds, applied to connect/read/write/pool
    timeout: float = 15.0

    user_agent: str = DEFAULT_USER_AGENT

    model_config = {"env_prefix": "SENDIVENT_", "env_file": ".env", "extra": "ignore"}
