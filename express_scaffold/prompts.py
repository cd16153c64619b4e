"""Interactive question flow.

Asks, in order: whether the project needs authorization, whether it needs a
validation folder, how many models it has, and then the name of each model.
Invalid answers to the first three questions are rejected with a message and
asked again.  Model names are free text.

The validators are plain functions returning ``True`` or the rejection
message, so they can be tested without a terminal.
"""

from __future__ import annotations

from typing import Callable

from rich.prompt import Prompt

from .models import ProjectAnswers
from .utils import console, print_error

Ask = Callable[[str], str]
Validator = Callable[[str], "bool | str"]

AUTHORIZATION_QUESTION = "Will your project contain authorization? (y/n)"
VALIDATION_QUESTION = "Will your project contain validation folder? (y/n)"
MODEL_COUNT_QUESTION = "How many models do you have?"
MODEL_NAME_QUESTION = "Enter the name of model {index}:"

YES_NO_MESSAGE = "Please answer with yes or no."
MODEL_COUNT_MESSAGE = "Please enter a valid non-negative number."

_YES = {"y", "yes"}
_NO = {"n", "no"}


# ---------------------------------------------------------------------------
# Validators
# ---------------------------------------------------------------------------

def validate_yes_no(value: str) -> bool | str:
    """Accept ``y``/``yes``/``n``/``no`` in any case."""
    if value.lower() in _YES | _NO:
        return True
    return YES_NO_MESSAGE


def validate_model_count(value: str) -> bool | str:
    """Accept a plain run of ASCII digits, optionally padded with whitespace."""
    digits = value.strip()
    if digits.isascii() and digits.isdigit():
        return True
    return MODEL_COUNT_MESSAGE


def is_yes(value: str) -> bool:
    """Map an accepted yes/no answer to a boolean."""
    return value.lower() in _YES


# ---------------------------------------------------------------------------
# Prompt flow
# ---------------------------------------------------------------------------

class QuestionPrompt(Prompt):
    """Rich prompt that leaves the question text as written."""

    prompt_suffix = " "


def _rich_ask(message: str) -> str:
    return QuestionPrompt.ask(message, console=console)


def ask_until_valid(ask: Ask, message: str, validator: Validator) -> str:
    """Ask *message* until *validator* accepts the answer, then return it."""
    while True:
        answer = ask(message)
        verdict = validator(answer)
        if verdict is True:
            return answer
        print_error(str(verdict))


def collect_answers(ask: Ask | None = None) -> ProjectAnswers:
    """Run the full question flow and return the collected answers.

    Args:
        ask: Callable that shows a question and returns the raw reply.
            Defaults to a Rich prompt on the shared console.

    Raises:
        KeyboardInterrupt, EOFError: When the user cancels a prompt.
    """
    ask = ask or _rich_ask

    authorization = ask_until_valid(ask, AUTHORIZATION_QUESTION, validate_yes_no)
    validation = ask_until_valid(ask, VALIDATION_QUESTION, validate_yes_no)
    count = int(ask_until_valid(ask, MODEL_COUNT_QUESTION, validate_model_count).strip())

    names = [ask(MODEL_NAME_QUESTION.format(index=i)) for i in range(1, count + 1)]

    return ProjectAnswers(
        wants_authorization=is_yes(authorization),
        wants_validation=is_yes(validation),
        models=tuple(names),
    )
