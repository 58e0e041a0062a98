"""
通用仓储的内存实现。
用于单元测试或不需要数据库的场景，行为与Django实现保持一致。
"""
import copy
from dataclasses import fields
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple, Type, TypeVar
import uuid

from core.domain.base import AuditEntity
from core.domain.queryable import Queryable, split_lookup
from core.domain.repositories import Repository

T = TypeVar('T', bound=AuditEntity)


class InMemoryStore:
    """
    内存存储。
    以"存储目标 -> {ID: 实体}"的形式保存已提交的实体。
    """

    def __init__(self):
        self._tables: Dict[Any, Dict[Any, AuditEntity]] = {}

    def table(self, target: Any) -> Dict[Any, AuditEntity]:
        """
        获取存储目标对应的表，不存在时创建。

        Args:
            target: 存储目标，通常为实体类型

        Returns:
            ID到实体的字典
        """
        return self._tables.setdefault(target, {})

    def snapshot(self) -> Dict[Any, Dict[Any, AuditEntity]]:
        """复制当前所有表，供事务内修改"""
        return copy.deepcopy(self._tables)

    def replace(self, tables: Dict[Any, Dict[Any, AuditEntity]]) -> None:
        """用事务内修改后的表替换当前数据"""
        self._tables = tables

    def clear(self) -> None:
        self._tables.clear()


def to_uuid(value: Any) -> Optional[uuid.UUID]:
    """
    按UUID字段的规则转换标识值，整数按int形式、其余按十六进制字符串解析。

    Args:
        value: 标识值

    Returns:
        UUID，无法转换时返回None
    """
    if isinstance(value, uuid.UUID):
        return value
    try:
        if isinstance(value, int):
            return uuid.UUID(int=value)
        return uuid.UUID(hex=value)
    except (ValueError, TypeError, AttributeError):
        return None


def _match(value: Any, lookup: str, expected: Any) -> bool:
    # UUID字段的条件值先转换为UUID，转换失败视为不匹配
    if isinstance(value, uuid.UUID):
        if lookup == 'in':
            expected = [to_uuid(item) for item in expected]
            if None in expected:
                return False
        elif lookup == 'exact' and expected is not None:
            expected = to_uuid(expected)
            if expected is None:
                return False
    if lookup == 'exact':
        return value == expected
    if lookup == 'icontains':
        return value is not None and str(expected).lower() in str(value).lower()
    if lookup == 'in':
        return value in expected
    if value is None:
        return False
    if lookup == 'gt':
        return value > expected
    if lookup == 'gte':
        return value >= expected
    if lookup == 'lt':
        return value < expected
    return value <= expected


def _sort_key(value: Any) -> Tuple[bool, Any]:
    # None排在最前
    return (value is not None, value if value is not None else 0)


class InMemoryQueryable(Queryable[T]):
    """基于内存数据的可组合查询，每次计数、切片或迭代时重新读取存储"""

    def __init__(
        self,
        source: Callable[[], Iterable[T]],
        entity_class: Type[T],
        conditions: Tuple[Tuple[str, str, Any], ...] = (),
        ordering: Tuple[str, ...] = ()
    ):
        self.source = source
        self.entity_class = entity_class
        self.conditions = conditions
        self.ordering = ordering
        self._field_names = {field.name for field in fields(entity_class)}

    def _check_field(self, field_name: str) -> None:
        if field_name not in self._field_names:
            raise ValueError(f"{self.entity_class.__name__} 没有字段 {field_name}")

    def filter(self, **lookups: Any) -> 'InMemoryQueryable[T]':
        conditions = list(self.conditions)
        for key, expected in lookups.items():
            field_name, lookup = split_lookup(key)
            self._check_field(field_name)
            conditions.append((field_name, lookup, expected))
        return InMemoryQueryable(self.source, self.entity_class, tuple(conditions), self.ordering)

    def order_by(self, *keys: str) -> 'InMemoryQueryable[T]':
        for key in keys:
            self._check_field(key.lstrip('-'))
        return InMemoryQueryable(self.source, self.entity_class, self.conditions, tuple(keys))

    def _evaluate(self) -> List[T]:
        items = [
            copy.deepcopy(entity)
            for entity in self.source()
            if all(_match(getattr(entity, name), lookup, expected)
                   for name, lookup, expected in self.conditions)
        ]
        # 稳定排序，从最后一个排序键开始依次排序
        for key in reversed(self.ordering):
            name = key.lstrip('-')
            items.sort(key=lambda entity: _sort_key(getattr(entity, name)), reverse=key.startswith('-'))
        return items

    def count(self) -> int:
        return len(self._evaluate())

    def slice(self, offset: int, length: int) -> List[T]:
        if length <= 0:
            return []
        return self._evaluate()[offset:offset + length]

    def __iter__(self) -> Iterator[T]:
        return iter(self._evaluate())


class InMemoryRepository(Repository[T]):
    """基于内存存储的通用仓储实现"""

    def __init__(self, unit_of_work, entity_class: Type[T]):
        """
        初始化仓储。

        Args:
            unit_of_work: 内存工作单元
            entity_class: 领域实体类型
        """
        super().__init__(unit_of_work)
        self.entity_class = entity_class

    @property
    def target(self) -> Type[T]:
        return self.entity_class

    def _table(self) -> Dict[Any, T]:
        return self.unit_of_work.store.table(self.entity_class)

    def find(self, id: Any) -> Optional[T]:
        key = to_uuid(id)
        if key is None:
            return None
        entity = self._table().get(key)
        return copy.deepcopy(entity) if entity is not None else None

    def queryable(self) -> InMemoryQueryable[T]:
        return InMemoryQueryable(lambda: list(self._table().values()), self.entity_class)
