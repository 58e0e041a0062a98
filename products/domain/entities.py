"""
商品领域模型中的实体。
包含商品、分类、评论和心愿单实体定义。
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional
import uuid

from core.domain import AuditEntity


@dataclass(eq=False)
class Category(AuditEntity):
    """商品分类"""
    name: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None


@dataclass(eq=False)
class Product(AuditEntity):
    """
    商品实体。
    category_id必须指向未删除的分类，由应用服务在写入时校验。
    """
    name: Optional[str] = None
    description: Optional[str] = None
    content_html: Optional[str] = None
    image_url: Optional[str] = None
    category_id: Optional[uuid.UUID] = None
    price: Decimal = Decimal("0")
    rating_score: Decimal = Decimal("0")
    sale_count: int = 0
    display_order: int = 0
    is_featured: bool = False
    has_display_home_page: bool = False


@dataclass(eq=False)
class Comment(AuditEntity):
    """评论，entity_type/entity_id指向被评论的对象(商品、博客等)"""
    content: Optional[str] = None
    full_name: Optional[str] = None
    rating: int = 0
    entity_id: Optional[uuid.UUID] = None
    entity_type: Optional[str] = None
    customer_id: Optional[uuid.UUID] = None


@dataclass(eq=False)
class CustomerWishList(AuditEntity):
    customer_id: Optional[uuid.UUID] = None
    product_id: Optional[uuid.UUID] = None
