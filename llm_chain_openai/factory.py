"""Chat model factory consuming ChatGPT options."""

import logging
from typing import Dict, Optional

from langchain_core.language_models import BaseChatModel
from langchain_openai import ChatOpenAI

from .chatgpt.options import Model, PerExecutor, PerInvocation
from .config import Settings, settings as default_settings
from .exceptions import ConfigurationError, ModelCreationError

logger = logging.getLogger(__name__)


class ChatModelFactory:
    """Factory for creating ChatGPT models from executor and invocation options.

    Executor options are fixed for the lifetime of the factory; invocation
    options are supplied per call. Anything the options leave unset is taken
    from ``Settings``.
    """

    def __init__(
        self,
        executor: Optional[PerExecutor] = None,
        settings: Optional[Settings] = None,
    ):
        """Initialize factory with executor options.

        Args:
            executor: Executor options (defaults to empty options)
            settings: Fallback settings (defaults to the environment settings)
        """
        # Snapshot; later changes to the caller's options do not apply
        self._executor = (
            executor.model_copy() if executor is not None else PerExecutor.new()
        )
        self._settings = settings if settings is not None else default_settings

    def resolve_model(self, invocation: Optional[PerInvocation] = None) -> Model:
        """Pick the model for an invocation.

        Args:
            invocation: Invocation options

        Returns:
            The invocation's model, or the configured default
        """
        if invocation is not None and invocation.model is not None:
            return invocation.model
        return Model.from_text(self._settings.openai_model)

    def resolve_api_key(self) -> str:
        """Pick the API key for this executor.

        Returns:
            The executor's API key, or the configured one

        Raises:
            ConfigurationError: If no API key is available
        """
        if self._executor.api_key is not None:
            return self._executor.api_key
        if self._settings.openai_api_key:
            return self._settings.openai_api_key
        raise ConfigurationError(
            "OpenAI API key not provided in executor options or OPENAI_API_KEY"
        )

    def create_model(
        self, invocation: Optional[PerInvocation] = None
    ) -> BaseChatModel:
        """Create a chat model for an invocation.

        Args:
            invocation: Invocation options

        Returns:
            Configured ChatOpenAI instance

        Raises:
            ConfigurationError: If no API key is available
            ModelCreationError: If model creation fails
        """
        model = self.resolve_model(invocation)
        api_key = self.resolve_api_key()

        try:
            chat_model = ChatOpenAI(model=model.to_text(), api_key=api_key)
        except Exception as e:
            logger.error(f"Failed to create model: {e}")
            raise ModelCreationError(f"Model creation failed: {e}") from e

        logger.info(f"Created openai model: {model}")
        return chat_model


class CachedChatModelFactory(ChatModelFactory):
    """Chat model factory with caching per resolved model.

    Executor options are fixed per factory, so the model name alone
    identifies a cached instance.
    """

    def __init__(
        self,
        executor: Optional[PerExecutor] = None,
        settings: Optional[Settings] = None,
    ):
        """Initialize cached factory.

        Args:
            executor: Executor options
            settings: Fallback settings
        """
        super().__init__(executor, settings)
        self._cache: Dict[str, BaseChatModel] = {}

    def create_model(
        self, invocation: Optional[PerInvocation] = None
    ) -> BaseChatModel:
        """Create or retrieve cached model.

        Args:
            invocation: Invocation options

        Returns:
            Cached or newly created BaseChatModel instance
        """
        cache_key = self.resolve_model(invocation).to_text()

        if cache_key not in self._cache:
            logger.debug(f"Cache miss for {cache_key}, creating new model")
            self._cache[cache_key] = super().create_model(invocation)
        else:
            logger.debug(f"Cache hit for {cache_key}, reusing model")

        return self._cache[cache_key]

    def clear_cache(self) -> None:
        """Clear the model cache."""
        logger.info(f"Clearing model cache ({len(self._cache)} entries)")
        self._cache.clear()

    def cache_size(self) -> int:
        """Get current cache size.

        Returns:
            Number of cached models
        """
        return len(self._cache)
