"""
Validation Stage

Declarative, rule-based validation of commands. Rules are registered per
field with a predicate and a failure message:

    class UpdateTenantValidator(Validator[UpdateTenantCommand]):
        def __init__(self):
            super().__init__()
            self.rule_for("name", not_empty, "Name must not be empty.")

Predicates receive the field value and return a bool, or an awaitable bool
when they need the persistence gateway. Evaluation stops at the first failing
rule of a field; failures from all fields are collected.
"""

import inspect
import re
from typing import Any, Awaitable, Callable, Generic, List, TypeVar, Union

from email_validator import EmailNotValidError, validate_email

from .result import FieldError

C = TypeVar("C")

Predicate = Callable[[Any], Union[bool, Awaitable[bool]]]
Message = Union[str, Callable[[Any], str]]


class Rule:
    def __init__(self, field: str, predicate: Predicate, message: Message):
        self.field = field
        self.predicate = predicate
        self.message = message

    async def check(self, value: Any) -> bool:
        outcome = self.predicate(value)
        if inspect.isawaitable(outcome):
            outcome = await outcome
        return bool(outcome)

    def format_message(self, value: Any) -> str:
        if callable(self.message):
            return self.message(value)
        return self.message


class Validator(Generic[C]):
    """Base class for command validators"""

    def __init__(self):
        self.rules: List[Rule] = []

    def rule_for(
        self, field: str, predicate: Predicate, message: Message
    ) -> "Validator[C]":
        self.rules.append(Rule(field, predicate, message))
        return self

    async def validate(self, command: C) -> List[FieldError]:
        failures: List[FieldError] = []
        failed_fields = set()

        for rule in self.rules:
            if rule.field in failed_fields:
                continue
            value = getattr(command, rule.field)
            if not await rule.check(value):
                failed_fields.add(rule.field)
                failures.append(FieldError(rule.field, rule.format_message(value)))

        return failures


# ============================================================================
# Common predicates
# ============================================================================


def not_empty(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip() != ""
    return True


def max_length(limit: int) -> Predicate:
    def predicate(value: Any) -> bool:
        return value is None or len(value) <= limit

    return predicate


def length_between(minimum: int, maximum: int) -> Predicate:
    def predicate(value: Any) -> bool:
        return value is not None and minimum <= len(value) <= maximum

    return predicate


def matches(pattern: str) -> Predicate:
    compiled = re.compile(pattern)

    def predicate(value: Any) -> bool:
        return value is not None and compiled.fullmatch(value) is not None

    return predicate


def is_email(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def between(minimum: int, maximum: int) -> Predicate:
    def predicate(value: Any) -> bool:
        return value is not None and minimum <= value <= maximum

    return predicate
