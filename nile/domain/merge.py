"""
Partial-update merge

Copies the fields a client actually sent in a PATCH payload onto an
existing entity and leaves everything else alone. "Sent" means the field is
in the pydantic model's ``model_fields_set``; with ``ignore_none`` (the
default) an explicit ``null`` is treated the same as an absent field.

Each entity declares the exact fields it merges (see the ``*_MERGE_FIELDS``
tuples in the domain modules), so nothing is discovered at runtime and the
identifier can never be reached by a payload.

Entities also declare which of those fields are NOT NULL; with
``ignore_none=False`` a null for one of them is rejected with
InvalidPayloadError instead of reaching the database.

Author: TM3
Date: 2026-10-18
"""
from dataclasses import dataclass
from typing import Any, Iterable, Tuple, TypeVar

from pydantic import BaseModel

from nile.core.exceptions import InvalidPayloadError

T = TypeVar("T")


@dataclass(frozen=True)
class MergeOptions:
    """
    Per-call merge configuration

    Fields:
        ignore_none: Treat an explicit null in the payload as absent
        protected: Attribute names that are never written, even if listed
    """
    ignore_none: bool = True
    protected: Tuple[str, ...] = ("id",)


DEFAULT_MERGE_OPTIONS = MergeOptions()


def present_fields(patch: BaseModel, fields: Iterable[str], options: MergeOptions = DEFAULT_MERGE_OPTIONS,
                   required: Iterable[str] = ()) -> dict:
    """
    Return {field: value} for the listed fields that are present in the patch

    Args:
        patch: Partial payload (a pydantic model)
        fields: Field names the entity allows to be merged
        options: Merge configuration for this call
        required: Fields the entity cannot store as null

    Returns:
        Dict of the fields that would be written by merge_partial

    Raises:
        InvalidPayloadError: If a required field is sent as null and nulls are not ignored
    """
    required = set(required)
    values = {}
    for name in fields:
        if name in options.protected or name not in patch.model_fields_set:
            continue
        value = getattr(patch, name)
        if value is None:
            if options.ignore_none:
                continue
            if name in required:
                raise InvalidPayloadError(f"{name} cannot be null")
        values[name] = value
    return values


def merge_partial(target: T, patch: BaseModel, fields: Iterable[str],
                  options: MergeOptions = DEFAULT_MERGE_OPTIONS, required: Iterable[str] = ()) -> T:
    """
    Overwrite target attributes with the fields present in patch

    Absent fields (and protected ones, id by default) keep the target's
    current value. The target is modified in place and returned.
    """
    for name, value in present_fields(patch, fields, options, required).items():
        setattr(target, name, value)
    return target


def is_present(patch: BaseModel, name: str, options: MergeOptions = DEFAULT_MERGE_OPTIONS) -> bool:
    """True when a single field was sent (and is not a null to be ignored)"""
    if name not in patch.model_fields_set:
        return False
    value: Any = getattr(patch, name)
    return not (value is None and options.ignore_none)


def required_value(patch: BaseModel, name: str) -> Any:
    """Value of a sent field that must not be null (e.g. a required reference id)"""
    value = getattr(patch, name)
    if value is None:
        raise InvalidPayloadError(f"{name} cannot be null")
    return value
