"""Services for core business logic."""

from .schema_setup import (
    split_statements,
    run_schema,
    is_already_exists,
    load_schema,
    SchemaRunResult,
)

__all__ = [
    'split_statements',
    'run_schema',
    'is_already_exists',
    'load_schema',
    'SchemaRunResult',
]
