"""
core/domain/merge.py

Partial-update merge engine shared by the hotel and room registries.

A patch names only the fields the caller wants to change. It can be given as
a mapping (``{"price": Decimal("1800")}``) or as a value of the entity's own
dataclass whose untouched fields hold the ``UNSET`` sentinel. ``UNSET`` means
"absent, keep the stored value"; ``None`` means "clear this field" and is
then subject to the entity's validation rules like any other value.

Example:
    >>> merger = EntityMerger(validate_hotel)
    >>> merger.merge(stored_hotel, {"name": "Renamed"}).value.name
    'Renamed'
"""
import dataclasses
import logging
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, TypeVar, Union

from core.result import Result, invalid_data

logger = logging.getLogger(__name__)

E = TypeVar("E")


class _Unset:
    """Absence marker for patch fields."""
    _instance: Optional["_Unset"] = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Unset":
        return self

    def __deepcopy__(self, memo) -> "_Unset":
        return self


UNSET: Any = _Unset()

Patch = Union[Mapping[str, Any], Any]


def empty_patch(entity_type: type) -> Any:
    """Build a dataclass patch of ``entity_type`` with every field UNSET."""
    return entity_type(**{f.name: UNSET for f in dataclasses.fields(entity_type)})


class EntityMerger:
    """
    字段级合并器

    Args:
        validator: rule applied to the merged value, e.g. ``validate_room``
        identifier_fields: fields a patch may never overwrite
    """

    def __init__(self, validator: Callable[[Any], Result],
                 identifier_fields: Tuple[str, ...] = ("id",)):
        self._validator = validator
        self._identifier_fields = frozenset(identifier_fields)

    def present_fields(self, existing: Any, patch: Patch) -> Result:
        """Extract the present fields of ``patch`` as a dict.

        Fails with INVALID_DATA when the patch names a field the entity does
        not have.
        """
        known = {f.name for f in dataclasses.fields(existing)}

        if patch is None:
            return Result.ok({})
        if isinstance(patch, Mapping):
            items: Dict[str, Any] = {k: v for k, v in patch.items() if v is not UNSET}
        elif dataclasses.is_dataclass(patch) and not isinstance(patch, type):
            items = {
                f.name: getattr(patch, f.name)
                for f in dataclasses.fields(patch)
                if getattr(patch, f.name) is not UNSET
            }
        else:
            return invalid_data(f"Unsupported patch type: {type(patch).__name__}")

        unknown = sorted(set(items) - known)
        if unknown:
            return invalid_data(f"Unknown field(s): {', '.join(unknown)}")

        # 标识字段不允许被覆盖
        return Result.ok({k: v for k, v in items.items() if k not in self._identifier_fields})

    def merge(self, existing: E, patch: Patch) -> Result:
        """
        Merge ``patch`` onto a copy of ``existing`` and validate the result.

        ``existing`` is never mutated. An empty patch yields an equal copy.
        """
        fields_result = self.present_fields(existing, patch)
        if fields_result.failed:
            return fields_result

        changes = fields_result.value
        merged = dataclasses.replace(existing, **changes)
        logger.debug(f"Merged fields {sorted(changes)} onto {type(existing).__name__}")

        validated = self._validator(merged)
        if validated.failed:
            return validated
        return Result.ok(merged)
