"""Model selection and option records for ChatGPT executors.

A ``Model`` names the backend model an invocation targets. Two models are
known by name; any other name is carried verbatim so new models can be used
before this module learns about them.

``PerInvocation`` holds options for a single call and ``PerExecutor`` holds
options for a long-lived executor. Neither resolves defaults: an absent model
or API key is left for the executor to interpret.
"""

import logging
from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_serializer, model_validator

from ..traits import Options

logger = logging.getLogger(__name__)


class ModelKind(str, Enum):
    """Serialized tag of a ``Model``."""

    CHATGPT_3_5_TURBO = "ChatGPT3_5Turbo"
    GPT4 = "GPT4"
    OTHER = "Other"


# Names sent to the OpenAI API for the well-known models
_CANONICAL_NAMES: Dict[ModelKind, str] = {
    ModelKind.CHATGPT_3_5_TURBO: "gpt-3.5-turbo",
    ModelKind.GPT4: "gpt-4",
}
_KINDS_BY_NAME: Dict[str, ModelKind] = {
    name: kind for kind, name in _CANONICAL_NAMES.items()
}


class Model(BaseModel):
    """A ChatGPT model available through the OpenAI API.

    Attributes:
        kind: Which model this is; ``OTHER`` for a free-form name
        name: The free-form model name (only set when kind is ``OTHER``)

    Example:
        >>> Model.from_text("gpt-4") == GPT4
        True
        >>> Model.other("your_custom_model_name").to_text()
        'your_custom_model_name'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: ModelKind
    name: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def unwrap_tag(cls, data: Any) -> Any:
        """Accept the externally tagged form produced by serialization."""
        if isinstance(data, str):
            return {"kind": data}
        if isinstance(data, dict) and list(data) == [ModelKind.OTHER.value]:
            return {"kind": ModelKind.OTHER, "name": data[ModelKind.OTHER.value]}
        return data

    @model_validator(mode="after")
    def check_name(self) -> "Model":
        """Only free-form models carry a name."""
        if self.kind is ModelKind.OTHER and self.name is None:
            raise ValueError("a free-form model requires a name")
        if self.kind is not ModelKind.OTHER and self.name is not None:
            raise ValueError(f"{self.kind.value} does not take a name")
        return self

    @model_serializer
    def serialize(self) -> Union[str, Dict[str, str]]:
        """Dump as the bare tag, or ``{"Other": name}`` for a free-form model."""
        if self.kind is ModelKind.OTHER:
            return {ModelKind.OTHER.value: self.name}
        return self.kind.value

    @classmethod
    def default(cls) -> "Model":
        """The model used when nothing else is asked for."""
        return CHATGPT_3_5_TURBO

    @classmethod
    def other(cls, name: str) -> "Model":
        """Wrap an arbitrary model name."""
        return cls(kind=ModelKind.OTHER, name=name)

    @classmethod
    def from_text(cls, text: str) -> "Model":
        """Parse a model name.

        Matching is exact: anything other than a canonical name becomes a
        free-form model carrying ``text`` unchanged.

        Args:
            text: Model name as used by the OpenAI API

        Returns:
            The matching well-known model, or a free-form one
        """
        kind = _KINDS_BY_NAME.get(text)
        if kind is None:
            logger.debug(f"Using free-form model name: {text!r}")
            return cls.other(text)
        return cls(kind=kind)

    def to_text(self) -> str:
        """Name to put in the model field of an API request."""
        if self.kind is ModelKind.OTHER:
            return self.name
        return _CANONICAL_NAMES[self.kind]

    @property
    def is_well_known(self) -> bool:
        """Whether this model has a canonical name."""
        return self.kind is not ModelKind.OTHER

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        if self.kind is ModelKind.OTHER:
            return f"Model.Other({self.name!r})"
        return f"Model.{self.kind.value}"


CHATGPT_3_5_TURBO = Model(kind=ModelKind.CHATGPT_3_5_TURBO)
GPT4 = Model(kind=ModelKind.GPT4)


class PerInvocation(Options):
    """Options for a single ChatGPT invocation.

    Attributes:
        model: Model to call; None leaves the choice to the executor
    """

    model_config = ConfigDict(frozen=True)

    model: Optional[Model] = None

    @classmethod
    def new(cls) -> "PerInvocation":
        """Options with nothing set."""
        return cls()

    def with_model(self, model: Union[Model, str]) -> "PerInvocation":
        """Return a copy of these options targeting ``model``.

        Args:
            model: A ``Model``, or a model name parsed with ``Model.from_text``

        Returns:
            New options; the receiver is left unchanged

        Raises:
            TypeError: If ``model`` is None; start from ``new()`` instead
            ValidationError: If ``model`` is not a model or its serialized form
        """
        if model is None:
            raise TypeError("with_model() requires a model; use new() to clear it")
        if isinstance(model, str):
            model = Model.from_text(model)
        else:
            model = Model.model_validate(model)
        return self.model_copy(update={"model": model})


class PerExecutor(Options):
    """Options for a ChatGPT executor.

    Attributes:
        api_key: OpenAI API key; None leaves the executor to find one
    """

    model_config = ConfigDict(validate_assignment=True)

    # Kept out of repr so executor options can be logged
    api_key: Optional[str] = Field(default=None, repr=False)

    @classmethod
    def new(cls) -> "PerExecutor":
        """Options with nothing set."""
        return cls()
