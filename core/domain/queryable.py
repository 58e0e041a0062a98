"""
可组合查询模块。
定义与存储无关的惰性查询接口，调用方可以在其上继续过滤、排序、计数和切片。
"""
from abc import ABC, abstractmethod
from typing import Any, Generic, Iterator, List, Optional, TypeVar

T = TypeVar('T')

# 支持的查询条件后缀，写法与Django查询集保持一致，例如 name__icontains="手机"
SUPPORTED_LOOKUPS = ('exact', 'icontains', 'in', 'gt', 'gte', 'lt', 'lte')


class Queryable(Generic[T], ABC):
    """
    可组合查询接口。
    所有方法都返回新的查询对象或在调用时才访问存储，原查询不会被修改。
    """

    @abstractmethod
    def filter(self, **lookups: Any) -> 'Queryable[T]':
        """
        按条件过滤。

        Args:
            **lookups: 查询条件，键为"字段名"或"字段名__后缀"，后缀见SUPPORTED_LOOKUPS

        Returns:
            过滤后的新查询
        """
        pass

    @abstractmethod
    def order_by(self, *keys: str) -> 'Queryable[T]':
        """
        排序。

        Args:
            *keys: 排序字段，前缀"-"表示降序

        Returns:
            排序后的新查询
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """
        统计匹配的记录数。

        Returns:
            记录数
        """
        pass

    @abstractmethod
    def slice(self, offset: int, length: int) -> List[T]:
        """
        获取区间 [offset, offset+length) 内的实体，超出部分自动截断。

        Args:
            offset: 起始位置
            length: 最大数量

        Returns:
            实体列表
        """
        pass

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        pass

    def first(self) -> Optional[T]:
        """
        获取第一个匹配的实体。

        Returns:
            第一个实体，如果没有匹配则返回None
        """
        items = self.slice(0, 1)
        return items[0] if items else None

    def to_list(self) -> List[T]:
        """物化为列表"""
        return list(self)


def split_lookup(key: str) -> tuple:
    """
    拆分查询条件键。

    Args:
        key: 查询条件键，例如 "name__icontains"

    Returns:
        (字段名, 后缀) 元组，没有后缀时后缀为"exact"

    Raises:
        ValueError: 后缀不受支持时抛出
    """
    field_name, _, lookup = key.partition('__')
    lookup = lookup or 'exact'
    if lookup not in SUPPORTED_LOOKUPS:
        raise ValueError(f"不支持的查询条件: {key}")
    return field_name, lookup
