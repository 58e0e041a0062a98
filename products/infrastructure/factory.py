"""
商品基础设施层工厂。
负责注册实体与数据库模型的映射，并组装应用服务及其仓储和工作单元。
"""
from typing import Optional

from core.domain import AuditContext, UnitOfWork
from core.infrastructure import DjangoUnitOfWork, register_entity_model

from products.application import CategoryService, ProductService
from products.domain import entities
from products.infrastructure.models import product_models


def register_entity_models() -> None:
    """注册商品模块的实体模型映射，在ProductsConfig.ready()中调用"""
    register_entity_model(entities.Category, product_models.Category)
    register_entity_model(entities.Product, product_models.Product)
    register_entity_model(entities.Comment, product_models.Comment)
    register_entity_model(entities.CustomerWishList, product_models.CustomerWishList)


def create_product_service(
    unit_of_work: Optional[UnitOfWork] = None,
    actor: Optional[AuditContext] = None
) -> ProductService:
    """
    创建商品应用服务。
    分类仓储和商品仓储共享同一个工作单元。

    Args:
        unit_of_work: 工作单元，未提供时创建Django工作单元
        actor: 当前操作者，仅在创建新的工作单元时使用

    Returns:
        商品应用服务
    """
    unit_of_work = unit_of_work or DjangoUnitOfWork(actor=actor)
    return ProductService(
        category_repository=unit_of_work.repository(entities.Category),
        product_repository=unit_of_work.repository(entities.Product),
        unit_of_work=unit_of_work
    )


def create_category_service(
    unit_of_work: Optional[UnitOfWork] = None,
    actor: Optional[AuditContext] = None
) -> CategoryService:
    """
    创建分类应用服务。

    Args:
        unit_of_work: 工作单元，未提供时创建Django工作单元
        actor: 当前操作者，仅在创建新的工作单元时使用

    Returns:
        分类应用服务
    """
    unit_of_work = unit_of_work or DjangoUnitOfWork(actor=actor)
    return CategoryService(
        category_repository=unit_of_work.repository(entities.Category),
        unit_of_work=unit_of_work
    )
