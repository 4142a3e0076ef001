"""
Base document builder.

Provides the raw-override store and the build-time validation helpers
shared by every concrete builder. Concrete builders keep their own
draft and project it into a wire payload in build(); the raw store is
then merged on top, either shallowly (top-level keys replaced) or
deeply (nested dicts merged key by key), depending on the builder.
"""

import copy
import logging
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence, Sized

from didox_sdk.domain.entities import DocumentType
from didox_sdk.shared.errors import (
    EmptyRequiredListError,
    MissingRequiredListItemFieldError,
    MissingRequiredSectionError,
)

logger = logging.getLogger(__name__)


def shallow_merge(base: Mapping[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Merge overrides into a copy of base, replacing top-level keys wholesale.

    Args:
        base: Generated payload
        overrides: Raw override data (wins per top-level key)

    Returns:
        New merged dict
    """
    result = dict(base)
    result.update(copy.deepcopy(dict(overrides)))
    return result


def deep_merge(base: Mapping[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Recursively merge overrides into a copy of base.

    Nested dicts present on both sides are merged key by key; any other
    override value (scalars, lists, None) replaces the base value.

    Args:
        base: Generated payload
        overrides: Raw override data (wins per leaf)

    Returns:
        New merged dict
    """
    result = dict(base)
    for key, value in overrides.items():
        if isinstance(value, Mapping) and isinstance(result.get(key), Mapping):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


class BaseDocumentBuilder:
    """
    Generic payload accumulator with a raw-merge escape hatch.

    Used directly by the reserved document types (hybrid invoice,
    pharmacy invoice, contract, verification act, acceptance transfer)
    and extended by every concrete builder.

    Example:
        >>> payload = builders.contract({"ContractDoc": {"ContractNo": "1"}}).build()
    """

    document_type: DocumentType
    deep_merge_raw: bool = False

    def __init__(self, initial: Optional[Mapping[str, Any]] = None):
        """
        Initialize builder.

        Args:
            initial: Optional partial wire payload seeding the raw store
        """
        self._payload: Dict[str, Any] = copy.deepcopy(dict(initial)) if initial else {}

    def raw(self, data: Mapping[str, Any]) -> "BaseDocumentBuilder":
        """
        Merge unchecked data into the raw store (top-level keys overwrite).

        The data is never validated: whatever is given reaches the
        outgoing payload verbatim.

        Args:
            data: Partial wire payload

        Returns:
            The builder itself, for chaining
        """
        self._payload.update(copy.deepcopy(dict(data)))
        return self

    def build(self) -> Dict[str, Any]:
        """
        Return a copy of the raw store.

        Returns:
            New payload dict sharing no containers with the builder
        """
        logger.debug(f"Building {self.document_type.value} payload from raw data only")
        return copy.deepcopy(self._payload)

    def _merge_raw(self, generated: Dict[str, Any]) -> Dict[str, Any]:
        """Apply the raw store on top of a generated payload."""
        if not self._payload:
            return generated
        if self.deep_merge_raw:
            return deep_merge(generated, self._payload)
        return shallow_merge(generated, self._payload)

    def _require(self, value: Any, section: str, message: str) -> None:
        """Raise MissingRequiredSectionError when value is falsy."""
        if not value:
            raise MissingRequiredSectionError(
                message, section=section, document_type=self.document_type.value
            )

    def _require_items(self, items: Optional[Sized], list_name: str, message: str) -> None:
        """Raise EmptyRequiredListError when items is None or empty."""
        if not items:
            raise EmptyRequiredListError(
                message, list_name=list_name, document_type=self.document_type.value
            )

    def _require_item_field(
        self, value: Any, list_name: str, index: int, item_field: str, message: str
    ) -> None:
        """Raise MissingRequiredListItemFieldError when an item field is falsy."""
        if not value:
            raise MissingRequiredListItemFieldError(
                message,
                list_name=list_name,
                index=index,
                item_field=item_field,
                document_type=self.document_type.value,
            )

    def _require_item_values(
        self, items: Sequence[Any], list_name: str, item_fields: Iterable[str]
    ) -> None:
        """
        Raise MissingRequiredListItemFieldError for the first None item value.

        Used for values the payload is computed from (counts, prices,
        shares), where 0 is valid but a missing value is not.
        """
        item_fields = tuple(item_fields)
        for index, item in enumerate(items):
            for item_field in item_fields:
                self._require_item_field(
                    getattr(item, item_field) is not None,
                    list_name,
                    index,
                    item_field,
                    f"{item_field} is required for every entry of {list_name}",
                )
