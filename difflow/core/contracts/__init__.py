"""
Contract Validation Module

JSON form of difference values, validated with JSON Schema.
"""

from .validators import (
    SCHEMA_DIALECT,
    ContractValidator,
    SchemaBuilder,
    from_json,
    is_valid_json,
    json_schema_for,
    to_json,
    validate_difference,
)

__all__ = [
    # Constants
    "SCHEMA_DIALECT",
    # Classes
    "SchemaBuilder",
    "ContractValidator",
    # Functions
    "from_json",
    "is_valid_json",
    "json_schema_for",
    "to_json",
    "validate_difference",
]
