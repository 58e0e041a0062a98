"""
订单基础设施层工厂。
"""
from core.infrastructure import register_entity_model

from orders.domain import entities
from orders.infrastructure.models import order_models


def register_entity_models() -> None:
    """注册订单模块的实体模型映射，在OrdersConfig.ready()中调用"""
    register_entity_model(entities.Customer, order_models.Customer)
    register_entity_model(entities.Coupon, order_models.Coupon)
    register_entity_model(entities.Order, order_models.Order)
    register_entity_model(entities.OrderDetail, order_models.OrderDetail)
