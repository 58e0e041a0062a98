"""
映射函数、服务结果和模块配置测试。
"""
from dataclasses import fields
from datetime import datetime, timezone
from decimal import Decimal
import uuid

from core.application import HTTP_STATUS_MAPPING, MessageConstants, ServiceResult, StatusCode, get_http_status
from core.domain import AuditContext, Entity, SearchPaginationDTO
from products.application.dtos import CreateProductDTO, ProductSearchDTO, UpdateProductDTO
from products.application.mappers import (
    apply_update_dto,
    create_dto_to_product,
    dto_to_product,
    product_to_dto,
    update_dto_to_product,
)
from products.domain import config
from products.domain.entities import Category, Product


def make_product():
    now = datetime(2024, 5, 1, 8, 30, tzinfo=timezone.utc)
    return Product(
        id=uuid.uuid4(),
        name="小米14",
        description="描述",
        content_html="<p>详情</p>",
        image_url="/media/mi14.png",
        category_id=uuid.uuid4(),
        price=Decimal("3999.00"),
        rating_score=Decimal("4.80"),
        sale_count=12,
        display_order=3,
        is_active=False,
        is_deleted=True,
        is_featured=True,
        has_display_home_page=True,
        created_by=uuid.uuid4(),
        created_by_name="创建人",
        create_by_date=now,
        updated_by=uuid.uuid4(),
        updated_by_name="更新人",
        update_by_date=now,
        deleted_by=uuid.uuid4(),
        deleted_by_name="删除人",
        delete_by_date=now,
    )


def test_entity_dto_round_trip_preserves_fields():
    product = make_product()

    restored = dto_to_product(product_to_dto(product, "手机"))

    for field in fields(Product):
        assert getattr(restored, field.name) == getattr(product, field.name), field.name


def test_create_dto_never_carries_identity():
    product = create_dto_to_product(CreateProductDTO(name="名称", description="描述"))

    assert product.id is None
    assert product.created_by is None
    assert product.is_active


def test_apply_update_dto_keeps_audit_and_sale_count():
    product = make_product()
    original_created_by = product.created_by

    apply_update_dto(UpdateProductDTO(id=product.id, name="新名称", description="新描述"), product)

    assert product.name == "新名称"
    assert product.sale_count == 12
    assert product.created_by == original_created_by
    assert product.is_deleted


def test_update_dto_to_product_is_transient():
    dto = UpdateProductDTO(id=uuid.uuid4(), name="名称", description="描述", sale_count=None)

    product = update_dto_to_product(dto)

    assert product.id == dto.id
    assert product.sale_count == 0
    assert product.create_by_date is None


def test_entity_equality_is_by_identity():
    shared_id = uuid.uuid4()

    assert Product(id=shared_id, name="a") == Product(id=shared_id, name="b")
    assert Product(id=shared_id) != Category(id=shared_id)
    assert Product(name="a") != Product(name="a")
    assert len({Product(id=shared_id), Product(id=shared_id)}) == 1
    assert isinstance(Product(), Entity)


def test_anonymous_actor():
    actor = AuditContext.anonymous()

    assert actor.user_id is None
    assert actor.user_name is None


def test_service_result_shapes():
    ok = ServiceResult.success([1])
    created = ServiceResult.success({"id": 1}, MessageConstants.CREATE_SUCCESS, StatusCode.CREATED)
    failed = ServiceResult.fail(MessageConstants.INVALID_STRING, StatusCode.VALIDATION_ERROR)

    assert (ok.has_error, ok.message, ok.data, ok.code) == (False, MessageConstants.LIST_SUCCESS, [1], StatusCode.SUCCESS)
    assert created.http_status == 201
    assert failed.has_error
    assert failed.data is None
    assert failed.http_status == 400
    assert ServiceResult.fail(code=StatusCode.ENTITY_NOT_FOUND).http_status == 404


def test_http_status_mapping_falls_back_to_server_error():
    assert get_http_status(StatusCode.DATABASE_ERROR) == 500
    assert get_http_status(99999) == 500
    assert HTTP_STATUS_MAPPING[StatusCode.SUCCESS] == 200


def test_page_size_settings(settings):
    settings.PRODUCT_SETTINGS = {'DEFAULT_PAGE_SIZE': 20, 'MAX_PAGE_SIZE': 50}

    assert config.default_page_size() == 20
    assert config.max_page_size() == 50


def test_page_size_defaults_when_not_configured(settings):
    del settings.PRODUCT_SETTINGS

    assert config.default_page_size() == 10
    assert config.max_page_size() == 100


def test_search_respects_configured_max_page_size(settings, product_service):
    settings.PRODUCT_SETTINGS = {'DEFAULT_PAGE_SIZE': 5, 'MAX_PAGE_SIZE': 20}

    result = product_service.search_pagination(
        SearchPaginationDTO(search=ProductSearchDTO(), page_size=21)
    )

    assert result.message == MessageConstants.INVALID_PAGINATION
