"""
Suite parser.

This module converts validated YAML data into a typed Suite, building the
constraint tree of every check. Problems that only show when a constraint
is built (an invalid regular expression, an unknown type name, a malformed
expected document) are added to the ValidationResult instead of raised.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from ..constraints import Constraint, LogicalAnd, LogicalNot, LogicalOr, LogicalXor
from ..exceptions import ConfigurationError
from .models import Check, Combinator, Settings, Suite
from .operations import OPERATIONS
from .validation import ValidationResult

logger = logging.getLogger(__name__)

# {{env.KEY}}
ENV_PATTERN = re.compile(r"\{\{env\.(\w+)\}\}")

_OPERATORS = {
    Combinator.ALL_OF.value: LogicalAnd,
    Combinator.ANY_OF.value: LogicalOr,
    Combinator.ONE_OF.value: LogicalXor,
}


def interpolate(value: Any, env: dict[str, Any]) -> Any:
    """
    Replace {{env.KEY}} placeholders in strings, recursively.

    Unknown keys are left as written.
    """
    if isinstance(value, str):
        return ENV_PATTERN.sub(lambda m: str(env.get(m.group(1), m.group(0))), value)
    elif isinstance(value, dict):
        return {k: interpolate(v, env) for k, v in value.items()}
    elif isinstance(value, list):
        return [interpolate(v, env) for v in value]
    return value


class SuiteParser:
    """Parses and converts validated YAML to a typed Suite."""

    def __init__(self, data: dict[str, Any], result: ValidationResult | None = None):
        self.env = data.get("env") or {}
        self.data = interpolate(data, self.env)
        self.result = result if result is not None else ValidationResult()

    def parse(self, base_dir: str | None = None) -> Suite | None:
        """
        Convert validated data to a typed Suite.

        Returns:
            The Suite, or None if a constraint could not be built (the
            reasons are in self.result)
        """
        checks = [self._parse_check(i, check) for i, check in enumerate(self.data["checks"])]

        if not self.result.is_valid:
            return None

        return Suite(
            version=self.data["version"],
            name=self.data["name"],
            checks=checks,
            env=self.env,
            settings=self._parse_settings(),
            base_dir=base_dir,
        )

    def _parse_settings(self) -> Settings:
        settings = self.data.get("settings") or {}
        return Settings(stop_on_failure=settings.get("stop_on_failure", False))

    def _parse_check(self, index: int, check: dict) -> Check:
        return Check(
            id=check["id"],
            constraint=self.build_constraint(check["expect"], f"checks[{index}].expect"),
            expect=check["expect"],
            value=check.get("value"),
            value_file=check.get("value_file"),
            message=check.get("message", ""),
            skip=check.get("skip"),
        )

    def build_constraint(self, node: dict[str, Any], path: str = "expect") -> Constraint | None:
        """Build the constraint tree for a validated node."""
        if "op" in node:
            return self._build_leaf(node, path)

        combinator, children = next(iter(node.items()))
        if combinator == Combinator.NOT.value:
            child = self.build_constraint(children, f"{path}.not")
            return LogicalNot(child) if child is not None else None

        built = [
            self.build_constraint(child, f"{path}.{combinator}[{i}]")
            for i, child in enumerate(children)
        ]
        if any(c is None for c in built):
            return None
        return _OPERATORS[combinator].from_constraints(*built)

    def _build_leaf(self, node: dict[str, Any], path: str) -> Constraint | None:
        spec = OPERATIONS[node["op"]]
        params = {key: value for key, value in node.items() if key != "op"}

        if spec.nested and "expect" in params:
            child = self.build_constraint(params["expect"], f"{path}.expect")
            if child is None:
                return None
            params["expect"] = child

        try:
            return spec.build(params)
        except ConfigurationError as e:
            logger.debug(f"Cannot build {node['op']} at {path}: {e}")
            self.result.add_error(path, str(e), value=node["op"])
            return None
