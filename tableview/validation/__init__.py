from .errors import SchemaError, ValidationIssue
from .schema_validation import validate_records

__all__ = ["SchemaError", "ValidationIssue", "validate_records"]
