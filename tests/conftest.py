"""
测试公共夹具。
服务层测试默认使用内存工作单元，数据库相关测试使用Django工作单元并标记django_db。
"""
from decimal import Decimal
import uuid

import pytest

from core.domain import AuditContext
from core.infrastructure import DjangoUnitOfWork, InMemoryStore, InMemoryUnitOfWork
from products.domain.entities import Category, Product
from products.infrastructure.factory import create_category_service, create_product_service


@pytest.fixture
def actor():
    return AuditContext(user_id=uuid.uuid4(), user_name="管理员")


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def unit_of_work(store, actor):
    return InMemoryUnitOfWork(store=store, actor=actor)


@pytest.fixture
def django_unit_of_work(db, actor):
    return DjangoUnitOfWork(actor=actor)


@pytest.fixture
def product_service(unit_of_work):
    return create_product_service(unit_of_work)


@pytest.fixture
def category_service(unit_of_work):
    return create_category_service(unit_of_work)


def seed_category(unit_of_work, name="手机", is_deleted=False):
    """新增并提交一个分类"""
    category = unit_of_work.repository(Category).add(Category(name=name, description=f"{name}分类"))
    unit_of_work.commit()
    if is_deleted:
        unit_of_work.repository(Category).remove(category)
        unit_of_work.commit()
    return category


def seed_product(unit_of_work, category, name="小米14", price=Decimal("3999.00"), **kwargs):
    """新增并提交一个商品"""
    product = unit_of_work.repository(Product).add(Product(
        name=name,
        description=f"{name}描述",
        category_id=category.id,
        price=price,
        **kwargs
    ))
    unit_of_work.commit()
    return product


@pytest.fixture
def category(unit_of_work):
    return seed_category(unit_of_work)
