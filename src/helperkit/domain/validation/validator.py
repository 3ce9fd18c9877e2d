"""Run constraints against single values or whole forms."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .constraints import Constraint, Violation

logger = logging.getLogger(__name__)


def validate(value: Any, constraints: Constraint | Iterable[Constraint]) -> list[Violation]:
    """Check ``value`` against every constraint and collect the violations."""
    if isinstance(constraints, Constraint):
        constraints = [constraints]
    violations: list[Violation] = []
    for constraint in constraints:
        violations.extend(constraint.validate(value))
    return violations


def validate_values(
    values: Mapping[str, Any], constraints: Mapping[str, Constraint | Iterable[Constraint]]
) -> list[Violation]:
    """Validate a form: each field of ``constraints`` is looked up in ``values``.

    Missing fields are validated as None. Violations carry the field name as
    their ``property_path``.
    """
    violations = []
    for property_path, field_constraints in constraints.items():
        for violation in validate(values.get(property_path), field_constraints):
            violations.append(dataclasses.replace(violation, property_path=property_path))
    if violations:
        logger.debug("%d violation(s) on %s", len(violations), sorted({v.property_path for v in violations}))
    return violations
