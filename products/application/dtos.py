"""
商品应用服务层的数据传输对象(DTOs)。
定义应用服务与外部通信使用的数据结构。
创建和更新DTO不包含审计字段，读取DTO包含审计字段。
"""
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional
import uuid


@dataclass
class CreateProductDTO:
    """商品创建DTO"""
    name: Optional[str] = None
    description: Optional[str] = None
    content_html: Optional[str] = None
    image_url: Optional[str] = None
    category_id: Optional[uuid.UUID] = None
    price: Decimal = Decimal("0")
    rating_score: Decimal = Decimal("0")
    sale_count: int = 0
    display_order: int = 0
    is_active: bool = True
    is_featured: bool = False
    has_display_home_page: bool = False


@dataclass
class UpdateProductDTO:
    """商品更新DTO"""
    id: Optional[uuid.UUID] = None
    name: Optional[str] = None
    description: Optional[str] = None
    content_html: Optional[str] = None
    image_url: Optional[str] = None
    category_id: Optional[uuid.UUID] = None
    price: Decimal = Decimal("0")
    rating_score: Decimal = Decimal("0")
    sale_count: Optional[int] = None
    display_order: int = 0
    is_active: bool = True
    is_featured: bool = False
    has_display_home_page: bool = False


@dataclass
class DeleteProductDTO:
    """商品删除DTO"""
    id: Optional[uuid.UUID] = None


@dataclass
class ProductDTO:
    """商品数据传输对象，用于返回商品信息"""
    id: Optional[uuid.UUID] = None
    name: Optional[str] = None
    description: Optional[str] = None
    content_html: Optional[str] = None
    image_url: Optional[str] = None
    category_id: Optional[uuid.UUID] = None
    category_name: Optional[str] = None
    price: Decimal = Decimal("0")
    rating_score: Decimal = Decimal("0")
    sale_count: int = 0
    display_order: int = 0
    is_active: bool = True
    is_deleted: bool = False
    is_featured: bool = False
    has_display_home_page: bool = False
    created_by: Optional[uuid.UUID] = None
    created_by_name: Optional[str] = None
    create_by_date: Optional[datetime] = None
    updated_by: Optional[uuid.UUID] = None
    updated_by_name: Optional[str] = None
    update_by_date: Optional[datetime] = None
    deleted_by: Optional[uuid.UUID] = None
    deleted_by_name: Optional[str] = None
    delete_by_date: Optional[datetime] = None


@dataclass
class ProductSearchDTO:
    """
    商品搜索条件。
    只应用已填写的字段: name/description为不区分大小写的子串匹配，其余为相等匹配。
    """
    name: Optional[str] = None
    description: Optional[str] = None
    category_id: Optional[uuid.UUID] = None
    is_active: Optional[bool] = None
    is_featured: Optional[bool] = None


@dataclass
class CreateCategoryDTO:
    """分类创建DTO"""
    name: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    is_active: bool = True


@dataclass
class UpdateCategoryDTO:
    """分类更新DTO"""
    id: Optional[uuid.UUID] = None
    name: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    is_active: bool = True


@dataclass
class DeleteCategoryDTO:
    id: Optional[uuid.UUID] = None


@dataclass
class CategoryDTO:
    """分类数据传输对象"""
    id: Optional[uuid.UUID] = None
    name: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    is_active: bool = True
    is_deleted: bool = False
    created_by: Optional[uuid.UUID] = None
    created_by_name: Optional[str] = None
    create_by_date: Optional[datetime] = None
    updated_by: Optional[uuid.UUID] = None
    updated_by_name: Optional[str] = None
    update_by_date: Optional[datetime] = None
    deleted_by: Optional[uuid.UUID] = None
    deleted_by_name: Optional[str] = None
    delete_by_date: Optional[datetime] = None


@dataclass
class CategorySearchDTO:
    """分类搜索条件"""
    name: Optional[str] = None
    is_active: Optional[bool] = None
