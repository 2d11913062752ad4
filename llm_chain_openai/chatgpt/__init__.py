"""ChatGPT model selection and executor options."""

from .options import (
    CHATGPT_3_5_TURBO,
    GPT4,
    Model,
    ModelKind,
    PerExecutor,
    PerInvocation,
)

__all__ = [
    "CHATGPT_3_5_TURBO",
    "GPT4",
    "Model",
    "ModelKind",
    "PerExecutor",
    "PerInvocation",
]
