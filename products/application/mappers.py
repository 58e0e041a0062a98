"""
商品实体与DTO之间的映射函数。
每个DTO对都有显式的映射函数，新增字段时需要同步修改。
"""
from typing import Optional

from products.application.dtos import (
    CategoryDTO,
    CreateCategoryDTO,
    CreateProductDTO,
    ProductDTO,
    UpdateCategoryDTO,
    UpdateProductDTO,
)
from products.domain.entities import Category, Product


# ==================== 商品 ====================

def create_dto_to_product(dto: CreateProductDTO) -> Product:
    """
    创建DTO转换为商品实体，ID由仓储在新增时分配。

    Args:
        dto: 商品创建DTO

    Returns:
        新的商品实体
    """
    return Product(
        name=dto.name,
        description=dto.description,
        content_html=dto.content_html,
        image_url=dto.image_url,
        category_id=dto.category_id,
        price=dto.price,
        rating_score=dto.rating_score,
        sale_count=dto.sale_count,
        display_order=dto.display_order,
        is_active=dto.is_active,
        is_featured=dto.is_featured,
        has_display_home_page=dto.has_display_home_page,
    )


def update_dto_to_product(dto: UpdateProductDTO) -> Product:
    """更新DTO转换为临时商品实体"""
    return Product(
        id=dto.id,
        name=dto.name,
        description=dto.description,
        content_html=dto.content_html,
        image_url=dto.image_url,
        category_id=dto.category_id,
        price=dto.price,
        rating_score=dto.rating_score,
        sale_count=dto.sale_count or 0,
        display_order=dto.display_order,
        is_active=dto.is_active,
        is_featured=dto.is_featured,
        has_display_home_page=dto.has_display_home_page,
    )


def apply_update_dto(dto: UpdateProductDTO, product: Product) -> Product:
    """
    将更新DTO的字段写入已存在的商品实体，审计字段和软删除标志保持不变。
    sale_count为空时保留原销量。

    Args:
        dto: 商品更新DTO
        product: 已存在的商品实体

    Returns:
        修改后的商品实体
    """
    product.name = dto.name
    product.description = dto.description
    product.content_html = dto.content_html
    product.image_url = dto.image_url
    product.category_id = dto.category_id
    product.price = dto.price
    product.rating_score = dto.rating_score
    if dto.sale_count is not None:
        product.sale_count = dto.sale_count
    product.display_order = dto.display_order
    product.is_active = dto.is_active
    product.is_featured = dto.is_featured
    product.has_display_home_page = dto.has_display_home_page
    return product


def product_to_dto(product: Product, category_name: Optional[str] = None) -> ProductDTO:
    """
    商品实体转换为读取DTO。

    Args:
        product: 商品实体
        category_name: 分类名称

    Returns:
        商品DTO
    """
    return ProductDTO(
        id=product.id,
        name=product.name,
        description=product.description,
        content_html=product.content_html,
        image_url=product.image_url,
        category_id=product.category_id,
        category_name=category_name,
        price=product.price,
        rating_score=product.rating_score,
        sale_count=product.sale_count,
        display_order=product.display_order,
        is_active=product.is_active,
        is_deleted=product.is_deleted,
        is_featured=product.is_featured,
        has_display_home_page=product.has_display_home_page,
        created_by=product.created_by,
        created_by_name=product.created_by_name,
        create_by_date=product.create_by_date,
        updated_by=product.updated_by,
        updated_by_name=product.updated_by_name,
        update_by_date=product.update_by_date,
        deleted_by=product.deleted_by,
        deleted_by_name=product.deleted_by_name,
        delete_by_date=product.delete_by_date,
    )


def dto_to_product(dto: ProductDTO) -> Product:
    """读取DTO转换回商品实体，与product_to_dto对称(category_name除外)"""
    return Product(
        id=dto.id,
        name=dto.name,
        description=dto.description,
        content_html=dto.content_html,
        image_url=dto.image_url,
        category_id=dto.category_id,
        price=dto.price,
        rating_score=dto.rating_score,
        sale_count=dto.sale_count,
        display_order=dto.display_order,
        is_active=dto.is_active,
        is_deleted=dto.is_deleted,
        is_featured=dto.is_featured,
        has_display_home_page=dto.has_display_home_page,
        created_by=dto.created_by,
        created_by_name=dto.created_by_name,
        create_by_date=dto.create_by_date,
        updated_by=dto.updated_by,
        updated_by_name=dto.updated_by_name,
        update_by_date=dto.update_by_date,
        deleted_by=dto.deleted_by,
        deleted_by_name=dto.deleted_by_name,
        delete_by_date=dto.delete_by_date,
    )


# ==================== 分类 ====================

def create_dto_to_category(dto: CreateCategoryDTO) -> Category:
    return Category(
        name=dto.name,
        description=dto.description,
        image_url=dto.image_url,
        is_active=dto.is_active,
    )


def apply_update_category_dto(dto: UpdateCategoryDTO, category: Category) -> Category:
    category.name = dto.name
    category.description = dto.description
    category.image_url = dto.image_url
    category.is_active = dto.is_active
    return category


def category_to_dto(category: Category) -> CategoryDTO:
    return CategoryDTO(
        id=category.id,
        name=category.name,
        description=category.description,
        image_url=category.image_url,
        is_active=category.is_active,
        is_deleted=category.is_deleted,
        created_by=category.created_by,
        created_by_name=category.created_by_name,
        create_by_date=category.create_by_date,
        updated_by=category.updated_by,
        updated_by_name=category.updated_by_name,
        update_by_date=category.update_by_date,
        deleted_by=category.deleted_by,
        deleted_by_name=category.deleted_by_name,
        delete_by_date=category.delete_by_date,
    )
