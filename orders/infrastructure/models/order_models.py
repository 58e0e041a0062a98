"""
订单基础设施层数据库模型。
定义与订单领域相关的Django ORM模型。
"""
from decimal import Decimal
from django.db import models

from core.infrastructure.models import AuditModel


class Customer(AuditModel):
    """客户数据库模型"""
    first_name = models.CharField(max_length=35, verbose_name="名")
    last_name = models.CharField(max_length=35, verbose_name="姓")
    email = models.CharField(max_length=90, verbose_name="邮箱")
    phone = models.CharField(max_length=11, null=True, blank=True, verbose_name="电话")
    address = models.CharField(max_length=90, null=True, blank=True, verbose_name="地址")
    user_id = models.UUIDField(null=True, blank=True, verbose_name="用户ID")

    class Meta:
        db_table = 'customers'
        verbose_name = "客户"
        verbose_name_plural = "客户"
        indexes = [
            models.Index(fields=['email'], name='idx_customer_email'),
        ]

    def __str__(self):
        return f"{self.last_name}{self.first_name}"


class Coupon(AuditModel):
    """优惠券数据库模型"""
    code = models.CharField(max_length=100, null=True, blank=True, verbose_name="优惠码")
    name = models.CharField(max_length=255, null=True, blank=True, verbose_name="名称")
    value = models.DecimalField(max_digits=18, decimal_places=2, default=Decimal("0"), verbose_name="面值")
    has_percent = models.BooleanField(default=False, verbose_name="是否百分比")
    start_date = models.DateTimeField(null=True, blank=True, verbose_name="开始时间")
    end_date = models.DateTimeField(null=True, blank=True, verbose_name="结束时间")

    class Meta:
        db_table = 'coupons'
        verbose_name = "优惠券"
        verbose_name_plural = "优惠券"
        indexes = [
            models.Index(fields=['code'], name='idx_coupon_code'),
        ]


class Order(AuditModel):
    """订单数据库模型"""
    code = models.CharField(max_length=100, null=True, blank=True, verbose_name="订单号")
    customer_id = models.UUIDField(null=True, blank=True, verbose_name="客户ID")
    full_name = models.CharField(max_length=255, null=True, blank=True, verbose_name="收货人")
    email = models.CharField(max_length=255, null=True, blank=True, verbose_name="邮箱")
    phone = models.CharField(max_length=50, null=True, blank=True, verbose_name="电话")
    address = models.CharField(max_length=500, null=True, blank=True, verbose_name="地址")
    note = models.TextField(null=True, blank=True, verbose_name="备注")
    status = models.CharField(max_length=50, null=True, blank=True, verbose_name="状态")
    coupon_id = models.UUIDField(null=True, blank=True, verbose_name="优惠券ID")
    coupon_code = models.CharField(max_length=100, null=True, blank=True, verbose_name="优惠码")
    coupon_name = models.CharField(max_length=255, null=True, blank=True, verbose_name="优惠券名称")
    coupon_percent = models.DecimalField(max_digits=18, decimal_places=2, default=Decimal("0"), verbose_name="折扣百分比")
    coupon_value = models.DecimalField(max_digits=18, decimal_places=2, default=Decimal("0"), verbose_name="抵扣金额")
    total_amount = models.DecimalField(max_digits=18, decimal_places=2, default=Decimal("0"), verbose_name="订单总额")
    total_item = models.IntegerField(default=0, verbose_name="商品件数")

    class Meta:
        db_table = 'orders'
        verbose_name = "订单"
        verbose_name_plural = "订单"
        indexes = [
            models.Index(fields=['code'], name='idx_order_code'),
            models.Index(fields=['customer_id'], name='idx_order_customer'),
        ]

    def __str__(self):
        return self.code or str(self.id)


class OrderDetail(AuditModel):
    """订单明细数据库模型"""
    order = models.ForeignKey(
        Order,
        on_delete=models.CASCADE,
        related_name='details',
        verbose_name="订单"
    )
    product = models.ForeignKey(
        'products.Product',
        on_delete=models.CASCADE,
        related_name='order_details',
        verbose_name="商品"
    )
    price = models.DecimalField(max_digits=18, decimal_places=2, default=Decimal("0"), verbose_name="单价")
    quantity = models.IntegerField(default=0, verbose_name="数量")
    total_amount = models.DecimalField(max_digits=18, decimal_places=2, default=Decimal("0"), verbose_name="小计")

    class Meta:
        db_table = 'order_details'
        verbose_name = "订单明细"
        verbose_name_plural = "订单明细"
