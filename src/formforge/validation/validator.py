"""Validator: evaluates named rules against submitted values.

Rules are looked up in an explicit table, so the set of available names is
known up front and applications add their own with
:meth:`Validator.register_rule`.

Usage:
    validator = Validator()
    validator.validate("42", "integer")                       # True
    validator.validate_all("hello", ["string", ["maxLength", 3]])  # False
    rule_set = Validator.get_rule_set(RuleMode.ANY, "email", "url")
    validator.check("https://example.com", rule_set)          # True
"""

from collections.abc import Callable, Iterable, Sequence
from typing import Any

from formforge.core.errors import (
    InvalidReturnTypeError,
    UnableToValidateError,
    UnknownValidationFunctionError,
)
from formforge.fields.base import Field
from formforge.validation.rules import BUILTIN_RULES
from formforge.validation.types import RuleMode, RuleSet


class Validator:
    """Evaluates rule descriptors against values.

    A rule descriptor is one of:
    - a rule name: ``"email"``
    - a sequence of name and parameters: ``["maxLength", 10]``
    - a nested :class:`RuleSet`
    """

    def __init__(self, rules: dict[str, Callable[..., bool]] | None = None):
        self._rules: dict[str, Callable[..., bool]] = dict(
            BUILTIN_RULES if rules is None else rules
        )

    def register_rule(self, name: str, predicate: Callable[..., bool]) -> None:
        """Add or replace a rule.

        Args:
            name: Rule name used in descriptors
            predicate: ``predicate(value, *params) -> bool``
        """
        self._rules[name] = predicate

    def has_rule(self, name: str) -> bool:
        return name in self._rules

    def list_rules(self) -> list[str]:
        """List all rule names."""
        return sorted(self._rules)

    # -------------------------------------------------------------------------
    # Evaluation
    # -------------------------------------------------------------------------

    def validate(self, value: Any, rule: str, *params: Any) -> bool:
        """Evaluate one named rule.

        Raises:
            UnknownValidationFunctionError: No rule has that name
            InvalidReturnTypeError: The rule returned something other than a bool
            UnableToValidateError: The rule could not be applied to the arguments
        """
        predicate = self._rules.get(rule)
        if predicate is None:
            raise UnknownValidationFunctionError(f"Unknown validation function: {rule}")
        try:
            result = predicate(value, *params)
        except (TypeError, ValueError) as exc:
            raise UnableToValidateError(
                f"Unable to validate {value!r} with '{rule}'"
            ) from exc
        if not isinstance(result, bool):
            raise InvalidReturnTypeError(
                f"Rule '{rule}' returned {type(result).__name__}, expected bool"
            )
        return result

    def validate_all(self, value: Any, rules: Sequence[Any]) -> bool:
        """True when the value passes every rule.

        Raises:
            UnknownValidationFunctionError: ``rules`` is empty
        """
        if not rules:
            raise UnknownValidationFunctionError("Cannot validate all without rules")
        return all(self._evaluate(value, rule) for rule in rules)

    def validate_any(self, value: Any, rules: Sequence[Any]) -> bool:
        """True when the value passes at least one rule.

        Raises:
            UnknownValidationFunctionError: ``rules`` is empty
        """
        if not rules:
            raise UnknownValidationFunctionError("Cannot validate any without rules")
        return any(self._evaluate(value, rule) for rule in rules)

    def check(self, value: Any, rule_set: RuleSet) -> bool:
        """Evaluate a RuleSet according to its mode."""
        if rule_set.mode is RuleMode.ANY:
            return self.validate_any(value, rule_set.rules)
        return self.validate_all(value, rule_set.rules)

    def validate_field(self, field: Field) -> bool:
        """Evaluate a field's own ``validation`` list against its value.

        An empty value fails a required field and passes an optional one
        without running any rules.
        """
        if field.is_empty():
            return not field.required
        if not field.validation:
            return True
        return self.validate_all(field.value, field.validation)

    def _evaluate(self, value: Any, rule: Any) -> bool:
        if isinstance(rule, RuleSet):
            return self.check(value, rule)
        if isinstance(rule, str):
            return self.validate(value, rule)
        if isinstance(rule, (list, tuple)) and rule:
            name, *params = rule
            return self.validate(value, str(name), *params)
        raise UnknownValidationFunctionError(f"Unusable rule descriptor: {rule!r}")

    @staticmethod
    def get_rule_set(mode: RuleMode | str, *rules: Any) -> RuleSet:
        """Build a RuleSet; ``mode`` may be given by value (``"all"``/``"any"``)."""
        return RuleSet(RuleMode(mode), list(rules))


def validate_fields(fields: Iterable[Field], validator: Validator | None = None) -> list[str]:
    """Ids of the fields whose values fail their own validation rules."""
    validator = validator or Validator()
    return [field.id for field in fields if not validator.validate_field(field)]
