"""Configuration loaded from the environment."""
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from .chatgpt.options import Model, PerExecutor, PerInvocation


ENV_FILE = Path.cwd() / ".env"


class Settings(BaseSettings):
    """OpenAI settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE),
        extra="ignore",
    )

    # LLM Configuration
    openai_model: str = "gpt-3.5-turbo"

    # LLM API Keys
    openai_api_key: str = ""

    def per_executor(self) -> PerExecutor:
        """Executor options carrying the configured API key."""
        return PerExecutor(api_key=self.openai_api_key or None)

    def per_invocation(self) -> PerInvocation:
        """Invocation options targeting the configured model."""
        return PerInvocation.new().with_model(Model.from_text(self.openai_model))


settings = Settings()
