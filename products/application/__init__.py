"""
商品应用服务层包。
提供商品和分类的应用服务、数据传输对象以及实体映射函数。
"""

# DTO
from products.application.dtos import (
    CreateProductDTO,
    UpdateProductDTO,
    DeleteProductDTO,
    ProductDTO,
    ProductSearchDTO,
    CreateCategoryDTO,
    UpdateCategoryDTO,
    DeleteCategoryDTO,
    CategoryDTO,
    CategorySearchDTO,
)

# 应用服务
from products.application.product_service import ProductService
from products.application.category_service import CategoryService

__all__ = [
    # DTO
    'CreateProductDTO',
    'UpdateProductDTO',
    'DeleteProductDTO',
    'ProductDTO',
    'ProductSearchDTO',
    'CreateCategoryDTO',
    'UpdateCategoryDTO',
    'DeleteCategoryDTO',
    'CategoryDTO',
    'CategorySearchDTO',

    # 应用服务
    'ProductService',
    'CategoryService',
]
