"""Rule registry: rule names used in config files mapped to rule factories.

A factory is any callable that takes keyword options and returns a rule
(usually just the rule class). Built-in names are reserved; plugins add
new names through :func:`register_rule` at startup.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from recordcheck.domain.errors import SchemaError
from recordcheck.domain.rules import (
    BooleanRule,
    ChoiceRule,
    EmailRule,
    IntegerRule,
    Rule,
    StringRule,
)

type RuleFactory = Callable[..., Rule[Any]]

BUILTIN_RULES: dict[str, RuleFactory] = {
    IntegerRule.name: IntegerRule,
    EmailRule.name: EmailRule,
    StringRule.name: StringRule,
    BooleanRule.name: BooleanRule,
    ChoiceRule.name: ChoiceRule,
}

RULE_REGISTRY: dict[str, RuleFactory] = dict(BUILTIN_RULES)


def get_rule_factory(name: str) -> RuleFactory:
    """Look up the factory registered under *name*.

    Raises:
        KeyError: If no rule is registered under that name.
    """
    try:
        return RULE_REGISTRY[name]
    except KeyError:
        known = ", ".join(sorted(RULE_REGISTRY))
        msg = f"Unknown rule {name!r} (known rules: {known})"
        raise KeyError(msg) from None


def build_rule(name: str, options: Mapping[str, Any] | None = None) -> Rule[Any]:
    """Instantiate the rule registered as *name* with *options*.

    Raises:
        SchemaError: If the rule is unknown, rejects the options, or the
            factory returns something without a ``validate`` method.
    """
    try:
        factory = get_rule_factory(name)
    except KeyError as exc:
        raise SchemaError(exc.args[0]) from None

    try:
        rule = factory(**dict(options or {}))
    except (TypeError, ValueError) as exc:
        msg = f"Invalid options for rule {name!r}: {exc}"
        raise SchemaError(msg) from exc

    if not callable(getattr(rule, "validate", None)):
        msg = f"Factory for rule {name!r} returned {type(rule).__name__}, which has no validate()"
        raise SchemaError(msg)
    return rule


def register_rule(name: str, factory: RuleFactory) -> None:
    """Register a custom rule factory.

    Re-registering the same factory under the same name is a no-op.

    Raises:
        ValueError: If the name is empty, reserved by a built-in rule, or
            already taken by a different factory.
        TypeError: If *factory* is not callable.
    """
    normalized = name.strip()
    if not normalized:
        msg = "Rule name must not be empty"
        raise ValueError(msg)
    if normalized in BUILTIN_RULES:
        msg = f"Rule name {normalized!r} is reserved by a built-in rule"
        raise ValueError(msg)
    if not callable(factory):
        msg = f"Rule factory for {normalized!r} must be callable"
        raise TypeError(msg)

    existing = RULE_REGISTRY.get(normalized)
    if existing is not None and existing is not factory:
        msg = f"Rule name {normalized!r} is already registered"
        raise ValueError(msg)
    RULE_REGISTRY[normalized] = factory


def unregister_rule(name: str) -> None:
    """Remove a custom rule. Built-in rules cannot be removed."""
    if name in BUILTIN_RULES:
        msg = f"Rule name {name!r} is reserved by a built-in rule"
        raise ValueError(msg)
    RULE_REGISTRY.pop(name, None)


def list_rules() -> list[str]:
    return sorted(RULE_REGISTRY)
