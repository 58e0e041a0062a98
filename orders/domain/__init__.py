"""
订单领域模型包。
"""

from orders.domain.entities import Customer, Coupon, Order, OrderDetail

__all__ = [
    'Customer',
    'Coupon',
    'Order',
    'OrderDetail',
]
