"""Client configuration and env handling."""
from pydantic_settings import BaseSettings, SettingsConfigDict

OPENAI_BASE_URL = "https://api.openai.com"


class OpenAISettings(BaseSettings):
    """Credentials and endpoint for the OpenAI API.

    Read from ``OPENAI_*`` environment variables (or a ``.env`` file) and
    passed explicitly to each ``submit()``/``stream()`` call.
    """

    model_config = SettingsConfigDict(
        env_prefix="OPENAI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_key: str | None = None
    api_org: str | None = None
    base_url: str = OPENAI_BASE_URL
    timeout_seconds: float | None = None

    def url_for(self, endpoint: str) -> str:
        return f"{self.base_url.rstrip('/')}{endpoint}"
