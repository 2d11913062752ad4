import json

import pytest
from pydantic import ValidationError

from llm_chain_openai.chatgpt import GPT4, Model, PerExecutor, PerInvocation
from llm_chain_openai.traits import Options, is_options


def test_new_invocation_has_no_model():
    assert PerInvocation.new().model is None
    assert PerInvocation.new() == PerInvocation()


def test_with_model_sets_model():
    assert PerInvocation.new().with_model(GPT4).model == GPT4


def test_with_model_leaves_receiver_unchanged():
    base = PerInvocation.new()
    chosen = base.with_model(GPT4)
    rechosen = chosen.with_model(Model.other("claude-3"))

    assert base.model is None
    assert chosen.model == GPT4
    assert rechosen.model == Model.other("claude-3")


def test_with_model_accepts_model_name():
    assert PerInvocation.new().with_model("gpt-4").model == GPT4
    assert PerInvocation.new().with_model("o1").model == Model.other("o1")


def test_with_model_refuses_to_clear_model():
    options = PerInvocation.new().with_model(GPT4)

    with pytest.raises(TypeError):
        options.with_model(None)

    assert options.model == GPT4


def test_with_model_validates_its_argument():
    options = PerInvocation.new().with_model({"Other": "x"})

    assert isinstance(options.model, Model)
    assert options.model == Model.other("x")
    assert options.model_dump() == {"model": {"Other": "x"}}

    with pytest.raises(ValidationError):
        PerInvocation.new().with_model({"kind": "Other"})
    with pytest.raises(ValidationError):
        PerInvocation.new().with_model(42)


def test_invocation_options_are_frozen():
    options = PerInvocation.new()

    with pytest.raises(ValidationError):
        options.model = GPT4


def test_invocation_serializes_model_tag():
    options = PerInvocation.new().with_model(GPT4)

    assert options.model_dump() == {"model": "GPT4"}
    assert PerInvocation.model_validate({"model": "GPT4"}) == options


@pytest.mark.parametrize(
    "options",
    [
        PerInvocation.new(),
        PerInvocation.new().with_model(GPT4),
        PerInvocation.new().with_model(Model.default()),
        PerInvocation.new().with_model(Model.other("claude-3")),
    ],
)
def test_invocation_json_round_trip(options):
    assert PerInvocation.model_validate_json(options.model_dump_json()) == options


def test_invocation_ignores_unknown_fields():
    options = PerInvocation.model_validate({"model": "GPT4", "temperature": 0.2})

    assert options == PerInvocation.new().with_model(GPT4)
    assert options.model_dump() == {"model": "GPT4"}
    assert PerExecutor.model_validate(
        {"api_key": "sk-test", "organization": "org-1"}
    ) == PerExecutor(api_key="sk-test")


def test_default_executor_has_no_api_key():
    assert PerExecutor.new().api_key is None
    assert PerExecutor().model_dump() == {"api_key": None}
    assert json.loads(PerExecutor().model_dump_json()) == {"api_key": None}


@pytest.mark.parametrize(
    "options",
    [PerExecutor(), PerExecutor(api_key="sk-test"), PerExecutor(api_key="")],
)
def test_executor_json_round_trip(options):
    assert PerExecutor.model_validate_json(options.model_dump_json()) == options


def test_executor_api_key_is_assignable():
    options = PerExecutor.new()
    options.api_key = "sk-test"

    assert options.api_key == "sk-test"
    assert options.model_dump() == {"api_key": "sk-test"}

    options.api_key = None
    assert options.api_key is None


def test_executor_api_key_must_be_a_string():
    options = PerExecutor.new()

    with pytest.raises(ValidationError):
        options.api_key = 123


def test_executor_repr_hides_api_key():
    options = PerExecutor(api_key="sk-secret")

    assert "sk-secret" not in repr(options)
    assert repr(options) == "PerExecutor()"


def test_invocation_repr():
    assert repr(PerInvocation.new()) == "PerInvocation(model=None)"
    assert repr(PerInvocation.new().with_model(GPT4)) == "PerInvocation(model=Model.GPT4)"


def test_options_capability():
    invocation = PerInvocation.new().with_model(GPT4)
    executor = PerExecutor(api_key="sk-test")

    assert is_options(invocation)
    assert is_options(executor)
    assert isinstance(invocation, Options)
    assert not is_options(GPT4)
    assert not is_options({"api_key": None})

    assert invocation.model_copy() == invocation
    executor_copy = executor.model_copy()
    executor_copy.api_key = "sk-other"
    assert executor.api_key == "sk-test"
