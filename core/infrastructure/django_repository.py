"""
通用仓储的Django实现。
实体与数据库模型按字段名一一对应，外键字段在实体中使用attname(例如category_id)。
"""
from dataclasses import fields
from typing import Any, Dict, Iterator, List, Optional, Type, TypeVar

from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import QuerySet
from loguru import logger

from core.domain.base import AuditEntity
from core.domain.queryable import Queryable, split_lookup
from core.domain.repositories import Repository

T = TypeVar('T', bound=AuditEntity)

# 实体类型到数据库模型的映射，由各应用在AppConfig.ready()中注册
_entity_models: Dict[type, Type[models.Model]] = {}


def register_entity_model(entity_class: type, model_class: Type[models.Model]) -> None:
    """
    注册实体类型对应的数据库模型。

    Args:
        entity_class: 领域实体类型
        model_class: Django模型类型
    """
    _entity_models[entity_class] = model_class
    logger.debug(f"注册实体模型映射: {entity_class.__name__} -> {model_class.__name__}")


def get_model_for(entity_class: type) -> Type[models.Model]:
    """
    获取实体类型对应的数据库模型。

    Args:
        entity_class: 领域实体类型

    Returns:
        Django模型类型

    Raises:
        LookupError: 实体类型未注册时抛出
    """
    try:
        return _entity_models[entity_class]
    except KeyError:
        raise LookupError(f"实体 {entity_class.__name__} 没有注册数据库模型")


def entity_to_fields(entity: AuditEntity, model_class: Type[models.Model]) -> Dict[str, Any]:
    """
    将领域实体转换为模型字段字典。

    Args:
        entity: 领域实体
        model_class: Django模型类型

    Returns:
        字段名到值的字典，只包含模型中存在的字段
    """
    column_names = {field.attname for field in model_class._meta.concrete_fields}
    return {
        field.name: getattr(entity, field.name)
        for field in fields(entity)
        if field.name in column_names
    }


def model_to_entity(instance: models.Model, entity_class: Type[T]) -> T:
    """
    将数据库模型转换为领域实体。

    Args:
        instance: Django模型实例
        entity_class: 领域实体类型

    Returns:
        领域实体
    """
    return entity_class(**{
        field.name: getattr(instance, field.name)
        for field in fields(entity_class)
        if field.init
    })


class DjangoQueryable(Queryable[T]):
    """基于Django查询集的可组合查询，迭代时才访问数据库"""

    def __init__(self, queryset: QuerySet, entity_class: Type[T]):
        self.queryset = queryset
        self.entity_class = entity_class

    def filter(self, **lookups: Any) -> 'DjangoQueryable[T]':
        for key in lookups:
            split_lookup(key)
        try:
            queryset = self.queryset.filter(**lookups)
        except (ValidationError, ValueError, TypeError) as e:
            # 条件值无法转换为字段类型(例如格式错误的UUID)时视为没有匹配
            logger.debug(f"查询条件值无效，返回空结果: {e}")
            queryset = self.queryset.none()
        return DjangoQueryable(queryset, self.entity_class)

    def order_by(self, *keys: str) -> 'DjangoQueryable[T]':
        return DjangoQueryable(self.queryset.order_by(*keys), self.entity_class)

    def count(self) -> int:
        return self.queryset.count()

    def slice(self, offset: int, length: int) -> List[T]:
        if length <= 0:
            return []
        return [
            model_to_entity(instance, self.entity_class)
            for instance in self.queryset[offset:offset + length]
        ]

    def __iter__(self) -> Iterator[T]:
        for instance in self.queryset:
            yield model_to_entity(instance, self.entity_class)


class DjangoRepository(Repository[T]):
    """
    基于Django ORM的通用仓储实现。
    读取直接访问数据库，写入登记到工作单元。
    """

    def __init__(self, unit_of_work, model_class: Type[models.Model], entity_class: Type[T]):
        """
        初始化仓储。

        Args:
            unit_of_work: Django工作单元
            model_class: Django模型类型
            entity_class: 领域实体类型
        """
        super().__init__(unit_of_work)
        self.model_class = model_class
        self.entity_class = entity_class

    @property
    def target(self) -> Type[models.Model]:
        return self.model_class

    def _queryset(self) -> QuerySet:
        return self.model_class._default_manager.using(self.unit_of_work.using)

    def find(self, id: Any) -> Optional[T]:
        """
        根据ID获取实体。

        Args:
            id: 实体ID

        Returns:
            找到的实体，如果不存在或ID格式无效则返回None
        """
        if id is None:
            return None
        try:
            instance = self._queryset().get(pk=id)
        except (self.model_class.DoesNotExist, ValidationError, ValueError, TypeError):
            return None
        return model_to_entity(instance, self.entity_class)

    def queryable(self) -> DjangoQueryable[T]:
        return DjangoQueryable(self._queryset().all(), self.entity_class)
