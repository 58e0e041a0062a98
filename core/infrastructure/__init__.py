"""
基础设施层包。
提供工作单元、通用仓储和可组合查询的Django与内存实现。
"""

# 工作单元
from core.infrastructure.unit_of_work import (
    DjangoUnitOfWork,
    InMemoryUnitOfWork,
)

# 仓储
from core.infrastructure.django_repository import (
    DjangoQueryable,
    DjangoRepository,
    register_entity_model,
    get_model_for,
)
from core.infrastructure.memory_repository import (
    InMemoryQueryable,
    InMemoryRepository,
    InMemoryStore,
)

__all__ = [
    # 工作单元
    'DjangoUnitOfWork',
    'InMemoryUnitOfWork',

    # 仓储
    'DjangoQueryable',
    'DjangoRepository',
    'register_entity_model',
    'get_model_for',
    'InMemoryQueryable',
    'InMemoryRepository',
    'InMemoryStore',
]
