"""
Schema validation for assertion suites.

This module checks raw parsed YAML against the suite schema and reports
every problem at once, each with its location and, where possible, a hint.
"""

from __future__ import annotations

import difflib
from dataclasses import dataclass, field
from typing import Any

from .models import Combinator
from .operations import OPERATIONS


# ─────────────────────────────────────────────────────────────────────────────
# Validation Result Types
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class ValidationError:
    """Represents a single validation error with context."""
    path: str  # e.g., "checks[0].expect.all_of[1].op"
    message: str
    value: Any = None
    suggestion: str | None = None

    def __str__(self) -> str:
        parts = [f"❌ {self.path}: {self.message}"]
        if self.value is not None:
            parts.append(f"   Got: {repr(self.value)}")
        if self.suggestion:
            parts.append(f"   💡 {self.suggestion}")
        return "\n".join(parts)


@dataclass
class ValidationResult:
    """Result of schema validation."""
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def add_error(
        self,
        path: str,
        message: str,
        value: Any = None,
        suggestion: str | None = None
    ) -> None:
        self.errors.append(ValidationError(path, message, value, suggestion))

    def __str__(self) -> str:
        if self.is_valid:
            return "✅ Schema validation passed"
        lines = [f"Schema validation failed with {len(self.errors)} error(s):\n"]
        lines.extend(str(e) for e in self.errors)
        return "\n".join(lines)


def did_you_mean(value: Any, choices: set[str] | list[str]) -> str | None:
    """Suggest the closest valid choice for a misspelled name."""
    if not isinstance(value, str):
        return None
    close = difflib.get_close_matches(value, sorted(choices), n=1)
    return f"Did you mean '{close[0]}'?" if close else None


# ─────────────────────────────────────────────────────────────────────────────
# Suite Validator
# ─────────────────────────────────────────────────────────────────────────────

class SuiteValidator:
    """Validates raw parsed YAML against the suite schema."""

    REQUIRED_TOP_LEVEL = {"version", "name", "checks"}
    OPTIONAL_TOP_LEVEL = {"env", "settings"}
    CHECK_KEYS = {"id", "value", "value_file", "message", "skip", "expect"}
    SETTINGS_KEYS = {"stop_on_failure"}
    COMBINATORS = {c.value for c in Combinator}

    def __init__(self, data: dict[str, Any]):
        self.data = data
        self.result = ValidationResult()
        self.check_ids: set[str] = set()

    def validate(self) -> ValidationResult:
        """Run all validation checks and return result."""
        self._validate_top_level()
        if not self.result.is_valid:
            return self.result

        self._validate_version()
        self._validate_name()
        self._validate_env()
        self._validate_settings()
        self._validate_checks()

        return self.result

    def _validate_top_level(self) -> None:
        """Check required and unknown top-level keys."""
        keys = set(self.data.keys())
        missing = self.REQUIRED_TOP_LEVEL - keys
        unknown = keys - self.REQUIRED_TOP_LEVEL - self.OPTIONAL_TOP_LEVEL

        for key in sorted(missing):
            self.result.add_error(
                key,
                f"Required field '{key}' is missing",
                suggestion=f"Add '{key}:' to your suite file"
            )

        for key in sorted(unknown, key=str):
            self.result.add_error(
                str(key),
                f"Unknown top-level field '{key}'",
                suggestion=did_you_mean(key, self.REQUIRED_TOP_LEVEL | self.OPTIONAL_TOP_LEVEL)
                or f"Valid fields are: {', '.join(sorted(self.REQUIRED_TOP_LEVEL | self.OPTIONAL_TOP_LEVEL))}"
            )

    def _validate_version(self) -> None:
        version = self.data.get("version")
        if not isinstance(version, int) or isinstance(version, bool):
            self.result.add_error(
                "version",
                "Must be an integer",
                value=version,
                suggestion="Use 'version: 1'"
            )
        elif version < 1:
            self.result.add_error(
                "version",
                "Must be >= 1",
                value=version
            )

    def _validate_name(self) -> None:
        name = self.data.get("name")
        if not isinstance(name, str):
            self.result.add_error(
                "name",
                "Must be a string",
                value=name
            )
        elif not name.strip():
            self.result.add_error(
                "name",
                "Cannot be empty",
                suggestion="Provide a descriptive name for your suite"
            )

    def _validate_env(self) -> None:
        env = self.data.get("env")
        if env is None:
            return
        if not isinstance(env, dict):
            self.result.add_error(
                "env",
                "Must be an object (key-value pairs)",
                value=env
            )

    def _validate_settings(self) -> None:
        settings = self.data.get("settings")
        if settings is None:
            return
        if not isinstance(settings, dict):
            self.result.add_error(
                "settings",
                "Must be an object",
                value=settings
            )
            return

        for key in settings:
            if key not in self.SETTINGS_KEYS:
                self.result.add_error(
                    f"settings.{key}",
                    "Unknown setting",
                    suggestion=did_you_mean(key, self.SETTINGS_KEYS)
                )

        stop_on_failure = settings.get("stop_on_failure")
        if stop_on_failure is not None and not isinstance(stop_on_failure, bool):
            self.result.add_error(
                "settings.stop_on_failure",
                "Must be true or false",
                value=stop_on_failure
            )

    def _validate_checks(self) -> None:
        checks = self.data.get("checks")
        if not isinstance(checks, list):
            self.result.add_error(
                "checks",
                "Must be a list",
                value=checks
            )
            return

        if len(checks) == 0:
            self.result.add_error(
                "checks",
                "Must contain at least one check",
                suggestion="Add a check with an 'id', a 'value' and an 'expect' constraint"
            )
            return

        for i, check in enumerate(checks):
            self._validate_check(i, check)

    def _validate_check(self, index: int, check: Any) -> None:
        path = f"checks[{index}]"

        if not isinstance(check, dict):
            self.result.add_error(
                path,
                "Check must be an object",
                value=check
            )
            return

        for key in check:
            if key not in self.CHECK_KEYS:
                self.result.add_error(
                    f"{path}.{key}",
                    "Unknown check field",
                    suggestion=did_you_mean(key, self.CHECK_KEYS)
                    or f"Valid fields are: {', '.join(sorted(self.CHECK_KEYS))}"
                )

        check_id = check.get("id")
        if not check_id:
            self.result.add_error(
                f"{path}.id",
                "Check must have an 'id' field",
                suggestion="Add a unique identifier like 'id: my_check'"
            )
        elif not isinstance(check_id, str):
            self.result.add_error(
                f"{path}.id",
                "Check id must be a string",
                value=check_id
            )
        elif check_id in self.check_ids:
            self.result.add_error(
                f"{path}.id",
                "Duplicate check id",
                value=check_id,
                suggestion="Each check must have a unique id"
            )
        else:
            self.check_ids.add(check_id)

        has_value = "value" in check
        has_file = "value_file" in check
        if has_value == has_file:
            self.result.add_error(
                path,
                "Check needs exactly one of 'value' or 'value_file'",
            )
        elif has_file and not isinstance(check["value_file"], str):
            self.result.add_error(
                f"{path}.value_file",
                "Must be a string (file path)",
                value=check["value_file"]
            )

        for key in ("message", "skip"):
            if key in check and not isinstance(check[key], str):
                self.result.add_error(
                    f"{path}.{key}",
                    "Must be a string",
                    value=check[key]
                )

        if "expect" not in check:
            self.result.add_error(
                f"{path}.expect",
                "Check requires an 'expect' constraint"
            )
            return

        self._validate_node(f"{path}.expect", check["expect"])

    # ─────────────────────────────────────────────────────────────────────────
    # Constraint Nodes
    # ─────────────────────────────────────────────────────────────────────────

    def _validate_node(self, path: str, node: Any) -> None:
        if not isinstance(node, dict):
            self.result.add_error(
                path,
                "Constraint must be an object",
                value=node
            )
            return

        combinators = [key for key in node if key in self.COMBINATORS]
        if "op" in node:
            if combinators:
                self.result.add_error(
                    path,
                    f"Constraint cannot have both 'op' and '{combinators[0]}'"
                )
                return
            self._validate_leaf(path, node)
        elif len(combinators) == 1 and len(node) == 1:
            self._validate_combinator(path, combinators[0], node[combinators[0]])
        elif len(combinators) > 1:
            self.result.add_error(
                path,
                f"Constraint has several combinators: {', '.join(combinators)}",
                suggestion="Nest them, e.g. 'all_of: [{any_of: [...]}, ...]'"
            )
        else:
            self.result.add_error(
                path,
                "Constraint must have an 'op' or exactly one of "
                f"{', '.join(sorted(self.COMBINATORS))}",
                value=sorted(node, key=str)
            )

    def _validate_leaf(self, path: str, node: dict) -> None:
        op = node["op"]
        spec = OPERATIONS.get(op) if isinstance(op, str) else None
        if spec is None:
            self.result.add_error(
                f"{path}.op",
                "Unknown operation",
                value=op,
                suggestion=did_you_mean(op, OPERATIONS.keys())
                or "Run 'verity info' to list the available operations"
            )
            return

        for key in spec.required:
            if key not in node:
                self.result.add_error(
                    f"{path}.{key}",
                    f"Operation '{op}' requires a '{key}' field"
                )

        for key in node:
            if key not in spec.keys:
                self.result.add_error(
                    f"{path}.{key}",
                    f"Operation '{op}' does not take '{key}'",
                    suggestion=did_you_mean(key, spec.keys - {"op"})
                )

        if spec.nested:
            if ("expect" in node) == ("value" in node):
                self.result.add_error(
                    path,
                    f"Operation '{op}' needs exactly one of 'expect' or 'value'"
                )
            elif "expect" in node:
                self._validate_node(f"{path}.expect", node["expect"])

    def _validate_combinator(self, path: str, combinator: str, children: Any) -> None:
        child_path = f"{path}.{combinator}"

        if combinator == Combinator.NOT.value:
            self._validate_node(child_path, children)
            return

        if not isinstance(children, list):
            self.result.add_error(
                child_path,
                "Must be a list of constraints",
                value=children
            )
            return

        minimum = 2 if combinator == Combinator.ONE_OF.value else 1
        if len(children) < minimum:
            self.result.add_error(
                child_path,
                f"Must contain at least {minimum} constraint(s)",
                value=len(children)
            )

        for i, child in enumerate(children):
            self._validate_node(f"{child_path}[{i}]", child)
