"""
分页模块。
包含分页结果PaginatedList和分页搜索请求SearchPaginationDTO。
"""
from dataclasses import dataclass, field
from math import ceil
from typing import Callable, Generic, List, Optional, TypeVar

from core.domain.queryable import Queryable

T = TypeVar('T')
U = TypeVar('U')
S = TypeVar('S')


@dataclass
class PaginatedList(Generic[T]):
    """
    分页结果。
    包含当前页的数据和总数、页码(从0开始)、每页大小等元数据。
    """
    items: List[T] = field(default_factory=list)
    total_count: int = 0
    page_index: int = 0
    page_size: int = 10

    @classmethod
    def create(cls, query: Queryable[T], page_index: int, page_size: int) -> 'PaginatedList[T]':
        """
        从查询创建分页结果。
        先统计总数，再截取 [page_index*page_size, page_index*page_size+page_size) 区间。
        不会对查询追加排序，顺序由调用方决定。

        Args:
            query: 惰性查询
            page_index: 页码，从0开始
            page_size: 每页大小

        Returns:
            分页结果
        """
        total_count = query.count()
        items = query.slice(page_index * page_size, page_size)
        return cls(items=items, total_count=total_count, page_index=page_index, page_size=page_size)

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return ceil(self.total_count / self.page_size)

    @property
    def has_previous_page(self) -> bool:
        return self.page_index > 0

    @property
    def has_next_page(self) -> bool:
        return (self.page_index + 1) * self.page_size < self.total_count

    def map(self, func: Callable[[T], U]) -> 'PaginatedList[U]':
        """
        转换每一项，保留分页元数据。

        Args:
            func: 转换函数

        Returns:
            新的分页结果
        """
        return PaginatedList(
            items=[func(item) for item in self.items],
            total_count=self.total_count,
            page_index=self.page_index,
            page_size=self.page_size,
        )


@dataclass
class SearchPaginationDTO(Generic[S]):
    """分页搜索请求"""
    search: Optional[S] = None
    page_index: int = 0
    page_size: Optional[int] = None  # 为空时使用配置的默认值
    order_by: Optional[str] = None  # 例如 "-price"，为空时不排序
