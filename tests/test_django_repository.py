"""
Django工作单元和通用仓储测试，使用测试数据库。
"""
from datetime import datetime, timezone
from decimal import Decimal
import uuid

import pytest

from accounts.domain.entities import User, UserType
from contents.domain.entities import (
    Banner,
    Blog,
    Contact,
    File,
    InformationWebsite,
    PageContent,
    SocialMedia,
)
from core.application import StatusCode
from core.domain import SearchPaginationDTO, StorageException
from core.infrastructure import DjangoQueryable, DjangoUnitOfWork, get_model_for
from orders.domain.entities import Coupon, Customer, Order, OrderDetail
from products.application import CreateProductDTO, ProductSearchDTO
from products.domain.entities import Category, Comment, CustomerWishList, Product
from products.infrastructure.factory import create_product_service
from products.models import Product as ProductModel

pytestmark = pytest.mark.django_db


@pytest.fixture
def category(django_unit_of_work):
    category = django_unit_of_work.repository(Category).add(Category(name="手机"))
    django_unit_of_work.commit()
    return category


def add_product(uow, category, **kwargs):
    values = dict(name="小米14", description="描述", category_id=category.id, price=Decimal("3999.00"))
    values.update(kwargs)
    product = uow.repository(Product).add(Product(**values))
    uow.commit()
    return product


def test_repository_uses_registered_model(django_unit_of_work):
    assert get_model_for(Product) is ProductModel
    assert isinstance(django_unit_of_work.repository(Product).queryable(), DjangoQueryable)


def test_unregistered_entity_has_no_model():
    class Unknown:
        pass

    with pytest.raises(LookupError):
        get_model_for(Unknown)


def test_commit_inserts_rows_and_stamps_creator(django_unit_of_work, category, actor):
    product = django_unit_of_work.repository(Product).add(Product(
        name="小米14", description="描述", category_id=category.id, price=Decimal("3999.00")
    ))

    assert django_unit_of_work.commit() == 1

    row = ProductModel.objects.get(pk=product.id)
    assert row.category_id == category.id
    assert row.price == Decimal("3999.00")
    assert row.created_by == actor.user_id
    assert row.created_by_name == actor.user_name


def test_find_maps_row_to_entity(django_unit_of_work, category):
    product = add_product(django_unit_of_work, category, sale_count=5)

    found = django_unit_of_work.repository(Product).find(product.id)

    assert isinstance(found, Product)
    assert found == product
    assert found.category_id == category.id
    assert found.sale_count == 5
    assert found.price == Decimal("3999.00")


@pytest.mark.parametrize("bad_id", [None, "not-a-uuid", 42])
def test_find_returns_none_for_malformed_ids(django_unit_of_work, bad_id):
    assert django_unit_of_work.repository(Product).find(bad_id) is None


def test_find_returns_none_for_unknown_id(django_unit_of_work):
    assert django_unit_of_work.repository(Product).find(uuid.uuid4()) is None


def test_update_returns_matched_rows(django_unit_of_work, category):
    product = add_product(django_unit_of_work, category)
    product.name = "小米14 Ultra"

    django_unit_of_work.repository(Product).update(product)

    assert django_unit_of_work.commit() == 1
    row = ProductModel.objects.get(pk=product.id)
    assert row.name == "小米14 Ultra"
    assert row.update_by_date is not None
    assert row.create_by_date is not None


def test_remove_is_soft_delete(django_unit_of_work, category, actor):
    product = add_product(django_unit_of_work, category)

    django_unit_of_work.repository(Product).remove(product)
    django_unit_of_work.commit()

    row = ProductModel.objects.get(pk=product.id)
    assert row.is_deleted
    assert not row.is_active
    assert row.deleted_by == actor.user_id
    assert django_unit_of_work.repository(Product).find(product.id).is_deleted


def test_constraint_violation_raises_storage_error_and_rolls_back(django_unit_of_work, category):
    repository = django_unit_of_work.repository(Product)
    repository.add(Product(name="正常", category_id=category.id, price=Decimal("1")))
    repository.add(Product(name="负价格", category_id=category.id, price=Decimal("-1")))

    with pytest.raises(StorageException) as exc_info:
        django_unit_of_work.commit()

    assert exc_info.value.__cause__ is not None
    assert django_unit_of_work.pending_changes == []
    assert ProductModel.objects.count() == 0


def test_failed_commit_restores_stamped_fields(django_unit_of_work, category):
    product = add_product(django_unit_of_work, category)
    repository = django_unit_of_work.repository(Product)
    removed = repository.find(product.id)
    repository.remove(removed)
    rejected = repository.add(Product(name="负价格", category_id=category.id, price=Decimal("-1")))

    with pytest.raises(StorageException):
        django_unit_of_work.commit()

    assert not removed.is_deleted
    assert removed.is_active
    assert removed.deleted_by is None
    assert rejected.create_by_date is None
    assert not repository.find(product.id).is_deleted


def test_rollback_discards_pending_changes(django_unit_of_work, category):
    django_unit_of_work.repository(Product).add(Product(name="待回滚", category_id=category.id))

    django_unit_of_work.rollback()

    assert django_unit_of_work.commit() == 0
    assert ProductModel.objects.count() == 0


def test_queryable_composes_lazily(django_unit_of_work, category):
    for name, price in [("Redmi Note", "1299"), ("redmi K70", "2499"), ("小米14", "3999")]:
        add_product(django_unit_of_work, category, name=name, price=Decimal(price))
    query = django_unit_of_work.repository(Product).queryable()

    redmi = query.filter(name__icontains="REDMI")
    assert redmi.count() == 2
    assert [p.name for p in redmi.order_by('-price')] == ["redmi K70", "Redmi Note"]
    assert query.filter(price__gte=Decimal("2499")).count() == 2
    assert query.filter(name__in=["小米14"]).first().price == Decimal("3999.00")
    assert query.order_by('price').slice(1, 5)[0].name == "redmi K70"
    assert query.filter(name="不存在").first() is None
    assert len(query.to_list()) == 3


def test_queryable_rejects_unsupported_lookup(django_unit_of_work):
    with pytest.raises(ValueError):
        django_unit_of_work.repository(Product).queryable().filter(name__startswith="小")


# ==================== 服务与数据库集成 ====================

def test_product_service_pages_over_database(django_unit_of_work, category):
    for i in range(15):
        add_product(django_unit_of_work, category, name=f"商品{i:02d}")
    service = create_product_service(django_unit_of_work)

    page = service.search_pagination(SearchPaginationDTO(
        search=ProductSearchDTO(category_id=category.id),
        page_index=0,
        page_size=10,
        order_by="name",
    )).data

    assert len(page.items) == 10
    assert page.total_count == 15
    assert page.items[0].name == "商品00"
    assert page.items[0].category_name == "手机"


def test_product_service_create_over_database(django_unit_of_work, category):
    service = create_product_service(django_unit_of_work)

    result = service.create(CreateProductDTO(
        name="小米14", description="描述", category_id=category.id, price=Decimal("3999")
    ))

    assert not result.has_error
    assert ProductModel.objects.filter(pk=result.data.id, category_id=category.id).exists()


def test_product_service_create_surfaces_storage_error(django_unit_of_work, category):
    service = create_product_service(django_unit_of_work)

    with pytest.raises(StorageException):
        service.create(CreateProductDTO(
            name="小米14", description="描述", category_id=category.id, price=Decimal("-1")
        ))


def test_product_service_treats_malformed_ids_as_missing(django_unit_of_work, category):
    add_product(django_unit_of_work, category)
    service = create_product_service(django_unit_of_work)

    by_id = service.get_by_id("not-a-uuid")
    by_category = service.get_by_category("not-a-uuid")
    page = service.search_pagination(SearchPaginationDTO(search=ProductSearchDTO(category_id="not-a-uuid")))

    assert by_id.has_error
    assert by_id.code == StatusCode.ENTITY_NOT_FOUND
    assert not by_category.has_error
    assert by_category.data == []
    assert not page.has_error
    assert page.data.total_count == 0
    assert django_unit_of_work.repository(Product).queryable().filter(id="not-a-uuid").count() == 0


# ==================== 其他实体的通用仓储 ====================

def test_order_with_details_round_trip(django_unit_of_work, category):
    product = add_product(django_unit_of_work, category)
    customer = django_unit_of_work.repository(Customer).add(
        Customer(first_name="三", last_name="张", email="zhangsan@example.com", phone="13800000000")
    )
    order = django_unit_of_work.repository(Order).add(Order(
        code="SO-0001",
        customer_id=customer.id,
        full_name="张三",
        status="pending",
        total_amount=Decimal("7998.00"),
        total_item=2,
    ))
    detail = django_unit_of_work.repository(OrderDetail).add(OrderDetail(
        order_id=order.id,
        product_id=product.id,
        price=Decimal("3999.00"),
        quantity=2,
        total_amount=Decimal("7998.00"),
    ))

    assert django_unit_of_work.commit() == 3

    details = django_unit_of_work.repository(OrderDetail).queryable().filter(order_id=order.id).to_list()
    assert details == [detail]
    assert details[0].total_amount == Decimal("7998.00")
    assert django_unit_of_work.repository(Order).find(order.id).customer_id == customer.id


def test_wish_list_and_user_reference_customer(django_unit_of_work, category):
    product = add_product(django_unit_of_work, category)
    customer = django_unit_of_work.repository(Customer).add(
        Customer(first_name="四", last_name="李", email="lisi@example.com")
    )
    user = django_unit_of_work.repository(User).add(User(
        username="lisi", password="hashed", type=UserType.CUSTOMER, customer_id=customer.id
    ))
    django_unit_of_work.repository(CustomerWishList).add(
        CustomerWishList(customer_id=customer.id, product_id=product.id)
    )
    django_unit_of_work.commit()

    wishes = django_unit_of_work.repository(CustomerWishList).queryable().filter(customer_id=customer.id)
    assert wishes.count() == 1
    assert django_unit_of_work.repository(User).find(user.id).customer_id == customer.id


@pytest.mark.parametrize("entity", [
    Coupon(code="NEW10", name="新人券", value=Decimal("10"), has_percent=True,
           start_date=datetime(2024, 1, 1, tzinfo=timezone.utc)),
    Comment(content="不错", full_name="王五", rating=5, entity_id=uuid.uuid4(), entity_type="product"),
    Banner(title="双十一", image_url="/media/banner.png", display_order=1),
    Blog(title="选购指南", short_des="摘要", rating_score=Decimal("4.50")),
    File(name="logo", url="/media/logo.png", file_ext=".png", entity_id="1", entity_type="banner"),
    PageContent(title="关于我们", order=2),
    SocialMedia(title="微博", link="https://weibo.com", display_order=1),
    Contact(first_name="六", last_name="赵", email="zhao@example.com", message="咨询"),
    InformationWebsite(title="eshop", email="service@example.com"),
], ids=lambda entity: type(entity).__name__)
def test_generic_repository_for_every_entity(django_unit_of_work, entity):
    repository = django_unit_of_work.repository(type(entity))

    repository.add(entity)
    django_unit_of_work.commit()
    found = repository.find(entity.id)

    assert found == entity
    assert found.create_by_date is not None
    repository.remove(found)
    assert django_unit_of_work.commit() == 1
    assert repository.queryable().filter(is_deleted=False).count() == 0
