"""
Shared draft sections and coercion helpers.

Drafts are the developer-facing, loosely-typed input of the builders:
dates are plain strings, money is plain numbers. Every builder setter
accepts a draft dataclass, a mapping with the same snake_case keys,
or keyword arguments; ``to_draft`` normalizes all three into a private
copy owned by the builder. Omitted fields default to None; required
values are only checked by the builder's build()."""

import copy
from dataclasses import dataclass, fields, is_dataclass, replace
from typing import Any, Iterable, List, Mapping, Optional, Type, TypeVar

T = TypeVar("T")


def to_draft(draft_cls: Type[T], data: Any = None, **kwargs: Any) -> T:
    """
    Normalize setter input into a fresh draft instance.

    Args:
        draft_cls: Draft dataclass to produce
        data: Instance of draft_cls, a mapping of its fields, or None
        **kwargs: Field values (override values from data)

    Returns:
        New draft_cls instance that shares no mutable state with the input

    Raises:
        TypeError: If data has an unsupported type or unknown keys
    """
    if isinstance(data, draft_cls):
        return replace(copy.deepcopy(data), **kwargs)
    if data is None:
        return draft_cls(**copy.deepcopy(kwargs))
    if isinstance(data, Mapping):
        return draft_cls(**copy.deepcopy({**data, **kwargs}))
    raise TypeError(
        f"{draft_cls.__name__} expects a {draft_cls.__name__}, a mapping or keyword "
        f"arguments, got {type(data).__name__}"
    )


def to_drafts(draft_cls: Type[T], items: Iterable[Any]) -> List[T]:
    """Normalize a sequence of setter inputs (see to_draft)."""
    return [to_draft(draft_cls, item) for item in items]


def nested_draft(draft_cls: Type[T], value: Any) -> Optional[T]:
    """Coerce an optional nested section given as a mapping."""
    if value is None or isinstance(value, draft_cls):
        return value
    return to_draft(draft_cls, value)


def draft_to_dict(draft: Any) -> Any:
    """Convert a draft (or list of drafts) to plain dicts, for debugging."""
    if is_dataclass(draft):
        return {f.name: draft_to_dict(getattr(draft, f.name)) for f in fields(draft)}
    if isinstance(draft, list):
        return [draft_to_dict(item) for item in draft]
    return copy.deepcopy(draft)


@dataclass
class DocumentRefDraft:
    """Number and date of a referenced document (invoice header, contract)."""

    no: Optional[str] = None
    date: Optional[str] = None


@dataclass
class PartyDraft:
    """
    Organization party with optional branch.

    Used by acts and transport waybills; absent branch fields
    are sent as empty strings.
    """

    tin: Optional[str] = None
    name: Optional[str] = None
    branch_code: Optional[str] = None
    branch_name: Optional[str] = None


@dataclass
class PersonDraft:
    """Natural person identified by PINFL (driver, trustee, responsible person)."""

    pinfl: Optional[str] = None
    full_name: Optional[str] = None
