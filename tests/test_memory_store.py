"""
内存工作单元、仓储、可组合查询和分页测试。
"""
from decimal import Decimal
import uuid

import pytest

from core.domain import ChangeType, PaginatedList, StorageException
from core.infrastructure import InMemoryUnitOfWork
from products.domain.entities import Category, Product


@pytest.fixture
def products(unit_of_work):
    repository = unit_of_work.repository(Product)
    category_id = uuid.uuid4()
    for name, price in [("苹果", "8"), ("香蕉", "3"), ("橙子", "5"), ("榴莲", None)]:
        repository.add(Product(
            name=name,
            category_id=category_id,
            price=Decimal(price) if price else None,
        ))
    unit_of_work.commit()
    return repository


# ==================== 工作单元 ====================

def test_add_assigns_identity_and_commit_counts_rows(unit_of_work):
    repository = unit_of_work.repository(Category)
    first = repository.add(Category(name="a"))
    second = repository.add(Category(name="b"))

    assert isinstance(first.id, uuid.UUID)
    assert first.id != second.id
    assert [change.change_type for change in unit_of_work.pending_changes] == [ChangeType.NEW, ChangeType.NEW]
    assert repository.find(first.id) is None
    assert unit_of_work.commit() == 2
    assert repository.find(first.id).name == "a"


def test_commit_without_changes_returns_zero(unit_of_work):
    assert unit_of_work.commit() == 0


def test_rollback_discards_pending_changes(unit_of_work):
    repository = unit_of_work.repository(Category)
    category = repository.add(Category(name="a"))

    unit_of_work.rollback()

    assert unit_of_work.commit() == 0
    assert repository.find(category.id) is None


def test_duplicate_identity_fails_and_leaves_store_untouched(store, unit_of_work):
    repository = unit_of_work.repository(Category)
    existing = repository.add(Category(name="a"))
    unit_of_work.commit()

    repository.add(Category(name="b"))
    unit_of_work.register_new(Category(id=existing.id, name="重复"), Category)

    with pytest.raises(StorageException):
        unit_of_work.commit()

    assert unit_of_work.pending_changes == []
    assert repository.queryable().count() == 1
    assert repository.find(existing.id).name == "a"


def test_found_entities_are_detached(unit_of_work):
    repository = unit_of_work.repository(Category)
    category = repository.add(Category(name="a"))
    unit_of_work.commit()

    found = repository.find(category.id)
    found.name = "未提交的修改"

    assert repository.find(category.id).name == "a"


def test_update_of_missing_row_affects_nothing(unit_of_work):
    repository = unit_of_work.repository(Category)
    repository.update(Category(id=uuid.uuid4(), name="不存在"))

    assert unit_of_work.commit() == 0
    assert repository.queryable().count() == 0


def test_units_of_work_share_a_store(store):
    writer = InMemoryUnitOfWork(store=store)
    category = writer.repository(Category).add(Category(name="共享"))
    writer.commit()

    reader = InMemoryUnitOfWork(store=store)
    assert reader.repository(Category).find(category.id).name == "共享"
    assert reader.repository(Category).find(category.id).created_by_name is None


# ==================== 可组合查询 ====================

def test_filter_lookups(products):
    query = products.queryable()

    assert query.filter(name="苹果").count() == 1
    assert query.filter(price__gt=Decimal("3")).count() == 2
    assert query.filter(price__gte=Decimal("3")).count() == 3
    assert query.filter(price__lt=Decimal("5")).count() == 1
    assert query.filter(price__lte=Decimal("5")).count() == 2
    assert query.filter(name__in=["苹果", "橙子", "葡萄"]).count() == 2
    assert query.filter(name__icontains="香").count() == 1


def test_filters_compose_without_mutating(products):
    query = products.queryable()
    cheap = query.filter(price__lt=Decimal("6"))

    assert cheap.filter(name="橙子").count() == 1
    assert cheap.count() == 2
    assert query.count() == 4


def test_order_by_puts_none_first(products):
    names = [product.name for product in products.queryable().order_by('price')]

    assert names == ["榴莲", "香蕉", "橙子", "苹果"]


def test_order_by_descending_with_secondary_key(unit_of_work):
    repository = unit_of_work.repository(Product)
    for name, order in [("b", 1), ("a", 1), ("c", 2)]:
        repository.add(Product(name=name, display_order=order))
    unit_of_work.commit()

    names = [p.name for p in repository.queryable().order_by('-display_order', 'name')]

    assert names == ["c", "a", "b"]


def test_slice_and_first(products):
    query = products.queryable().order_by('name')

    assert len(query.slice(2, 10)) == 2
    assert query.slice(10, 5) == []
    assert query.slice(0, 0) == []
    assert query.filter(name="不存在").first() is None
    assert query.filter(name="香蕉").first().price == Decimal("3")


def test_unsupported_lookup_and_unknown_field_raise(products):
    with pytest.raises(ValueError):
        products.queryable().filter(name__startswith="苹")
    with pytest.raises(ValueError):
        products.queryable().filter(colour="红")
    with pytest.raises(ValueError):
        products.queryable().order_by('-colour')


# ==================== 分页 ====================

def test_paginated_list_metadata(products):
    page = PaginatedList.create(products.queryable().order_by('name'), 1, 3)

    assert page.total_count == 4
    assert len(page.items) == 1
    assert page.total_pages == 2
    assert page.has_previous_page
    assert not page.has_next_page


def test_paginated_list_beyond_last_page_is_empty(products):
    page = PaginatedList.create(products.queryable(), 5, 3)

    assert page.items == []
    assert page.total_count == 4


def test_paginated_list_map_keeps_metadata():
    page = PaginatedList(items=[1, 2], total_count=12, page_index=2, page_size=5)

    mapped = page.map(str)

    assert mapped.items == ["1", "2"]
    assert (mapped.total_count, mapped.page_index, mapped.page_size) == (12, 2, 5)
    assert mapped.total_pages == 3


def test_failed_commit_restores_stamped_fields(unit_of_work):
    repository = unit_of_work.repository(Category)
    existing = repository.add(Category(name="a"))
    unit_of_work.commit()

    removed = repository.find(existing.id)
    repository.remove(removed)
    added = repository.add(Category(name="b"))
    unit_of_work.register_new(Category(id=existing.id, name="重复"), Category)

    with pytest.raises(StorageException):
        unit_of_work.commit()

    assert not removed.is_deleted
    assert removed.is_active
    assert removed.delete_by_date is None
    assert added.create_by_date is None
    assert not repository.find(existing.id).is_deleted


def test_string_and_uuid_lookups(products):
    product = products.queryable().filter(name="苹果").first()

    assert products.find(str(product.id)).name == "苹果"
    assert products.find("not-a-uuid") is None
    assert products.queryable().filter(id=str(product.id)).count() == 1
    assert products.queryable().filter(id__in=[str(product.id), "not-a-uuid"]).count() == 0
    assert products.queryable().filter(category_id="not-a-uuid").count() == 0
