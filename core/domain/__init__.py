"""
领域模型包。
提供实体基类、领域异常、可组合查询、分页以及仓储和工作单元接口。
"""

# 基础类
from core.domain.base import Entity, AuditEntity, AuditContext

# 领域异常
from core.domain.exceptions import (
    DomainException,
    EntityNotFoundException,
    ValidationException,
    StorageException,
)

# 查询与分页
from core.domain.queryable import Queryable, SUPPORTED_LOOKUPS
from core.domain.pagination import PaginatedList, SearchPaginationDTO

# 仓储接口
from core.domain.repositories import (
    Repository,
    UnitOfWork,
    ChangeType,
    PendingChange,
)

__all__ = [
    # 基础类
    'Entity',
    'AuditEntity',
    'AuditContext',

    # 领域异常
    'DomainException',
    'EntityNotFoundException',
    'ValidationException',
    'StorageException',

    # 查询与分页
    'Queryable',
    'SUPPORTED_LOOKUPS',
    'PaginatedList',
    'SearchPaginationDTO',

    # 仓储接口
    'Repository',
    'UnitOfWork',
    'ChangeType',
    'PendingChange',
]
