"""
core/services/registry.py

Registry base - CRUD orchestration shared by the hotel and room registries.

Every operation returns a Result. Validation and reference checks happen on
a value copy before the store is touched, so a failed operation never writes.
Read-modify-write operations (update, partially_update, delete) hold a lock
keyed by (entity name, id) for their whole duration.
Writes that reference another entity also hold ``reference_guard`` from the
reference check through the save.
"""
import dataclasses
import logging
from contextlib import nullcontext
from typing import Any, Callable, ContextManager, Generic, Optional, TypeVar

from core.concurrency import KeyedLock
from core.domain.interfaces import EntityStore
from core.domain.merge import EntityMerger, Patch
from core.result import Result, not_found, unexpected

logger = logging.getLogger(__name__)

E = TypeVar("E")


class EntityRegistry(Generic[E]):
    """
    实体登记处基类

    Subclasses set ``entity_name`` and implement ``validate`` and
    ``not_found_message``; ``check_references`` is an optional hook for
    relationship checks.
    """

    entity_name = "Entity"

    def __init__(self, store: EntityStore[E], locks: Optional[KeyedLock] = None):
        self.store = store
        self._locks = locks or KeyedLock()
        self._merger = EntityMerger(self.validate)

    # ============== hooks ==============

    def validate(self, entity: E) -> Result:
        raise NotImplementedError

    def not_found_message(self, entity_id: Any) -> str:
        raise NotImplementedError

    def check_references(self, candidate: E, previous: Optional[E]) -> Result:
        """Relationship checks before a write; ``previous`` is None on add."""
        return Result.ok(candidate)

    def reference_guard(self, candidate: E) -> ContextManager:
        """Held around check_references and the save that follows it."""
        return nullcontext()

    def hold(self, entity_id: Any) -> ContextManager:
        """The per-id lock used by update, partially_update and delete."""
        return self._locks.hold((self.entity_name, entity_id))

    # ============== operations ==============

    def add(self, entity: E) -> Result:
        """新增；调用方给出的 id 会被忽略"""
        candidate = dataclasses.replace(entity, id=None)

        def _add() -> Result:
            validated = self.validate(candidate)
            if validated.failed:
                return validated
            with self.reference_guard(candidate):
                checked = self.check_references(candidate, None)
                if checked.failed:
                    return checked
                saved = self.store.save(candidate)
            logger.info(f"{self.entity_name} created with id {saved.id}")
            return Result.ok(saved)

        return self._guarded("add", _add)

    def find_all(self) -> Result:
        """获取全部"""
        return self._guarded("find_all", lambda: Result.ok(list(self.store.get_all())))

    def find_by_id(self, entity_id: int) -> Result:
        """按 id 获取"""
        return self._guarded("find_by_id", lambda: self._load(entity_id))

    def update(self, entity_id: int, new_value: E) -> Result:
        """整体替换：新值必须完整通过校验"""
        def _update() -> Result:
            loaded = self._load(entity_id)
            if loaded.failed:
                return loaded
            candidate = dataclasses.replace(new_value, id=entity_id)
            validated = self.validate(candidate)
            if validated.failed:
                return validated
            with self.reference_guard(candidate):
                checked = self.check_references(candidate, loaded.value)
                if checked.failed:
                    return checked
                saved = self.store.save(candidate)
            logger.info(f"{self.entity_name} {entity_id} replaced")
            return Result.ok(saved)

        return self._locked(entity_id, "update", _update)

    def partially_update(self, entity_id: int, patch: Patch) -> Result:
        """部分更新：合并后再校验"""
        def _patch() -> Result:
            loaded = self._load(entity_id)
            if loaded.failed:
                return loaded
            merged = self._merger.merge(loaded.value, patch)
            if merged.failed:
                return merged
            with self.reference_guard(merged.value):
                checked = self.check_references(merged.value, loaded.value)
                if checked.failed:
                    return checked
                saved = self.store.save(merged.value)
            logger.info(f"{self.entity_name} {entity_id} partially updated")
            return Result.ok(saved)

        return self._locked(entity_id, "partially_update", _patch)

    def delete(self, entity_id: int) -> Result:
        """删除；成功时返回被删除的实体"""
        def _delete() -> Result:
            loaded = self._load(entity_id)
            if loaded.failed:
                return loaded
            self.store.delete(loaded.value)
            logger.info(f"{self.entity_name} {entity_id} deleted")
            return Result.ok(loaded.value)

        return self._locked(entity_id, "delete", _delete)

    # ============== helpers ==============

    def _load(self, entity_id: int) -> Result:
        entity = self.store.get(entity_id)
        if entity is None:
            return not_found(self.not_found_message(entity_id))
        return Result.ok(entity)

    def _locked(self, entity_id: int, operation: str, func: Callable[[], Result]) -> Result:
        with self.hold(entity_id):
            return self._guarded(operation, func)

    def _guarded(self, operation: str, func: Callable[[], Result]) -> Result:
        try:
            return func()
        except Exception as e:
            logger.error(f"Error in {self.entity_name}.{operation}: {e}", exc_info=True)
            return unexpected(str(e))
