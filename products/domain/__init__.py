"""
商品领域模型包。
提供商品相关的实体和模块配置。
"""

# 实体
from products.domain.entities import Category, Product, Comment, CustomerWishList

__all__ = [
    # 实体
    'Category',
    'Product',
    'Comment',
    'CustomerWishList',
]
