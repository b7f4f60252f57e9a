from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Dict, List

from tableview.validation.errors import SchemaError, ValidationIssue

# Max issues reported per SchemaError
MAX_RECORD_ISSUES = 10


def _is_record_sequence(records: Any) -> bool:
    if isinstance(records, (str, bytes, bytearray, Mapping)):
        return False
    return isinstance(records, Sequence)


def validate_records(records: Any) -> List[Dict[str, Any]]:
    """
    Validate raw input records and return the canonical dataset.

    Rules:
    - records must be a sequence (list, tuple, ...) of mappings
    - every record must have the same set of field names (order irrelevant)
    - an empty sequence is always valid

    Each record is copied into a plain dict so later changes to the caller's
    objects do not leak into the view.

    :param records: raw records supplied by the caller
    :return: list of dict copies, in input order
    :raises SchemaError: with every issue found
    """
    if not _is_record_sequence(records):
        raise SchemaError(
            [
                ValidationIssue(
                    "RECORDS_NOT_SEQUENCE",
                    f"Input data needs to be a sequence of mappings, got {type(records).__name__}.",
                )
            ]
        )

    issues: list[ValidationIssue] = []

    for idx, record in enumerate(records):
        if not isinstance(record, Mapping):
            issues.append(
                ValidationIssue(
                    "RECORD_NOT_MAPPING",
                    f"Record {idx} is {type(record).__name__}, expected a mapping.",
                )
            )
            if len(issues) >= MAX_RECORD_ISSUES:
                break

    if issues:
        raise SchemaError(issues)

    if len(records) > 1:
        expected = set(records[0].keys())
        for idx, record in enumerate(records[1:], start=1):
            keys = set(record.keys())
            if keys == expected:
                continue
            missing = sorted(map(str, expected - keys))
            extra = sorted(map(str, keys - expected))
            issues.append(
                ValidationIssue(
                    "RECORD_KEYS_MISMATCH",
                    f"Record {idx} does not have uniform keys "
                    f"(missing: {missing}, unexpected: {extra}).",
                )
            )
            if len(issues) >= MAX_RECORD_ISSUES:
                break

    if issues:
        raise SchemaError(issues)

    return [dict(record) for record in records]
