"""
内存仓储与Django仓储对同一组查询应返回一致的结果。
"""
from decimal import Decimal

import pytest

from products.domain.entities import Category, Product


@pytest.fixture(params=["memory", "django"])
def backend(request):
    if request.param == "django":
        return request.getfixturevalue("django_unit_of_work")
    return request.getfixturevalue("unit_of_work")


@pytest.fixture
def saved(backend):
    category = backend.repository(Category).add(Category(name="手机"))
    product = backend.repository(Product).add(Product(
        name="小米14", description="描述", category_id=category.id, price=Decimal("3999.00")
    ))
    backend.commit()
    return category, product


def test_find_accepts_string_ids(backend, saved):
    _, product = saved
    repository = backend.repository(Product)

    assert repository.find(str(product.id)) == product
    assert repository.find(product.id) == product


@pytest.mark.parametrize("bad_id", [None, "", "not-a-uuid"])
def test_find_with_malformed_id_returns_none(backend, saved, bad_id):
    assert backend.repository(Product).find(bad_id) is None


def test_filter_converts_string_ids(backend, saved):
    category, product = saved
    query = backend.repository(Product).queryable()

    assert query.filter(id=str(product.id)).count() == 1
    assert query.filter(category_id=str(category.id)).first() == product
    assert query.filter(category_id__in=[str(category.id)]).count() == 1


def test_filter_with_malformed_id_matches_nothing(backend, saved):
    query = backend.repository(Product).queryable()

    assert query.filter(id="not-a-uuid").count() == 0
    assert query.filter(category_id="not-a-uuid").to_list() == []
    assert query.filter(category_id__in=["not-a-uuid"]).count() == 0
