"""
订单领域模型中的实体。
包含客户、优惠券、订单和订单明细实体定义。
"""
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional
import uuid

from core.domain import AuditEntity


@dataclass(eq=False)
class Customer(AuditEntity):
    """客户，first_name/last_name/email为必填"""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    user_id: Optional[uuid.UUID] = None


@dataclass(eq=False)
class Coupon(AuditEntity):
    """
    优惠券。
    has_percent为True时value表示折扣百分比，否则表示抵扣金额。
    """
    code: Optional[str] = None
    name: Optional[str] = None
    value: Decimal = Decimal("0")
    has_percent: bool = False
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None


@dataclass(eq=False)
class Order(AuditEntity):
    """订单，下单时复制客户和优惠券信息"""
    code: Optional[str] = None
    customer_id: Optional[uuid.UUID] = None
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    note: Optional[str] = None
    status: Optional[str] = None
    coupon_id: Optional[uuid.UUID] = None
    coupon_code: Optional[str] = None
    coupon_name: Optional[str] = None
    coupon_percent: Decimal = Decimal("0")
    coupon_value: Decimal = Decimal("0")
    total_amount: Decimal = Decimal("0")
    total_item: int = 0


@dataclass(eq=False)
class OrderDetail(AuditEntity):
    order_id: Optional[uuid.UUID] = None
    product_id: Optional[uuid.UUID] = None
    price: Decimal = Decimal("0")
    quantity: int = 0
    total_amount: Decimal = Decimal("0")
