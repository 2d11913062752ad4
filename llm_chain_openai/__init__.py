"""OpenAI model selection and executor options.

This package describes which ChatGPT model an invocation targets and how a
ChatGPT executor is configured, and builds langchain chat models from those
options.

Key features:
- Well-known model names with a free-form fallback
- Per-invocation and per-executor option records
- Environment-backed defaults
- Optional model caching
"""

from .chatgpt import (
    CHATGPT_3_5_TURBO,
    GPT4,
    Model,
    ModelKind,
    PerExecutor,
    PerInvocation,
)
from .config import Settings
from .exceptions import ConfigurationError, LLMModuleError, ModelCreationError
from .factory import CachedChatModelFactory, ChatModelFactory
from .traits import Options, is_options

__all__ = [
    "CHATGPT_3_5_TURBO",
    "GPT4",
    "Model",
    "ModelKind",
    "PerExecutor",
    "PerInvocation",
    "Options",
    "is_options",
    "Settings",
    "ChatModelFactory",
    "CachedChatModelFactory",
    "LLMModuleError",
    "ConfigurationError",
    "ModelCreationError",
]
