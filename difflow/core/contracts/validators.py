"""
JSON Schema Contract Validators

JSON form of difference values and the Draft 2020-12 schemas describing it.
Uses the jsonschema library to check incoming JSON before building values.

JSON form:
- integers   JSON integer within the type's [MIN, MAX]
- Present    null
- tuples     array of exactly len(COMPONENTS) items (prefixItems)
- sequences  array of element forms
"""

from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from difflow.core.codec.binary import resolve_layout
from difflow.core.difference.capabilities import Semigroup
from difflow.core.difference.integers import FixedWidthInt
from difflow.core.difference.present import Present
from difflow.core.difference.tuples import DiffTuple
from difflow.core.difference.vector import DiffVec

SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"


# =============================================================================
# SCHEMA BUILDER
# =============================================================================


class SchemaBuilder:
    """
    Builds JSON Schemas for difference types.

    Schemas are meta-validated once and cached per type.
    """

    def __init__(self):
        # Built schemas, keyed by difference type
        self._schemas: Dict[type, Dict[str, Any]] = {}

    def schema_for(self, layout: Any) -> Dict[str, Any]:
        """
        Top-level schema for a layout.

        Args:
            layout: Difference class, tuple of layouts or one-element list layout

        Returns:
            Schema dict with $schema and title

        Raises:
            ValueError: invalid layout, or the built schema fails meta-validation
        """
        diff_type = resolve_layout(layout)
        if diff_type in self._schemas:
            return self._schemas[diff_type]

        schema = {
            "$schema": SCHEMA_DIALECT,
            "title": diff_type.__name__,
            **self._fragment(diff_type),
        }

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema for {diff_type.__name__}: {e}")

        self._schemas[diff_type] = schema
        return schema

    def _fragment(self, diff_type: type) -> Dict[str, Any]:
        if issubclass(diff_type, FixedWidthInt):
            return {"type": "integer", "minimum": diff_type.MIN, "maximum": diff_type.MAX}
        if issubclass(diff_type, Present):
            return {"type": "null"}
        if issubclass(diff_type, DiffTuple):
            arity = len(diff_type.COMPONENTS)
            fragment: Dict[str, Any] = {"type": "array", "minItems": arity, "maxItems": arity}
            # prefixItems must be non-empty
            if arity:
                fragment["prefixItems"] = [self._fragment(c) for c in diff_type.COMPONENTS]
            return fragment
        if issubclass(diff_type, DiffVec):
            return {"type": "array", "items": self._fragment(diff_type.ELEMENT)}
        raise ValueError(f"no JSON form for {diff_type.__name__}")


# Module-wide builder
_SCHEMA_BUILDER = SchemaBuilder()


# =============================================================================
# CONTRACT VALIDATOR
# =============================================================================


class ContractValidator:
    """
    Validates JSON data against the schema of one difference type.
    """

    def __init__(self, layout: Any):
        """
        Args:
            layout: Difference class, tuple of layouts or one-element list layout
        """
        self.diff_type = resolve_layout(layout)
        self.schema = _SCHEMA_BUILDER.schema_for(self.diff_type)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Raises:
            ValidationError: data does not match the schema
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)

    def load(self, data: Any) -> Semigroup:
        """
        Validate data, then build the difference value.

        Raises:
            ValidationError: data does not match the schema
        """
        self.validate(data)
        return _build(self.diff_type, data)


def _build(diff_type: type, data: Any) -> Any:
    if issubclass(diff_type, FixedWidthInt):
        return diff_type(int(data))
    if issubclass(diff_type, Present):
        return Present()
    if issubclass(diff_type, DiffTuple):
        return diff_type(*(_build(c, item) for c, item in zip(diff_type.COMPONENTS, data)))
    if issubclass(diff_type, DiffVec):
        return diff_type(_build(diff_type.ELEMENT, item) for item in data)
    raise ValueError(f"no JSON form for {diff_type.__name__}")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def json_schema_for(layout: Any) -> Dict[str, Any]:
    """Draft 2020-12 schema describing the JSON form of a layout."""
    return _SCHEMA_BUILDER.schema_for(layout)


def to_json(value: Semigroup) -> Any:
    """
    JSON form of a difference value.

    Raises:
        TypeError: value (or a component) has no JSON form
    """
    if isinstance(value, FixedWidthInt):
        return value.value
    if isinstance(value, Present):
        return None
    if isinstance(value, (DiffTuple, DiffVec)):
        return [to_json(item) for item in value]
    raise TypeError(f"no JSON form for {type(value).__name__}")


def from_json(layout: Any, data: Any) -> Semigroup:
    """
    Validate JSON data against the layout's schema and build the value.

    Raises:
        ValidationError: data does not match the schema
    """
    return ContractValidator(layout).load(data)


def validate_difference(layout: Any, data: Any) -> None:
    """
    Raises:
        ValidationError: data does not match the layout's schema
    """
    ContractValidator(layout).validate(data)


def is_valid_json(layout: Any, data: Any) -> bool:
    return ContractValidator(layout).is_valid(data)
