"""Errors raised while turning ChatGPT options into a chat model."""


class LLMModuleError(Exception):
    """Base exception for chat model creation errors."""

    pass


class ConfigurationError(LLMModuleError):
    """Raised when no OpenAI API key is set on the executor or in the environment."""

    pass


class ModelCreationError(LLMModuleError):
    """Raised when the ChatOpenAI client rejects the resolved model or key."""

    pass
