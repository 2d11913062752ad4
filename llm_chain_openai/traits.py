"""Generic option capability shared by executor configuration records."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class Options(BaseModel):
    """Base for option records handed to an executor.

    An executor accepts any subclass without inspecting it. Subclasses get
    copying (``model_copy``), structured (de)serialization (``model_dump`` /
    ``model_validate``) and a readable ``repr`` from pydantic, which is all
    the capability requires.
    """

    # Unknown fields are dropped so newer option records still load
    model_config = ConfigDict(extra="ignore")


def is_options(value: Any) -> bool:
    """Whether ``value`` can be passed to an executor as options."""
    return isinstance(value, Options)
