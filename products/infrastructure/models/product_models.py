"""
商品基础设施层数据库模型。
定义与商品领域相关的Django ORM模型。
"""
from decimal import Decimal
from django.db import models

from core.infrastructure.models import AuditModel


class Category(AuditModel):
    """商品分类数据库模型"""
    name = models.CharField(max_length=255, null=True, blank=True, verbose_name="分类名称")
    description = models.TextField(null=True, blank=True, verbose_name="分类描述")
    image_url = models.CharField(max_length=500, null=True, blank=True, verbose_name="图片地址")

    class Meta:
        db_table = 'categories'
        verbose_name = "商品分类"
        verbose_name_plural = "商品分类"
        indexes = [
            models.Index(fields=['name'], name='idx_category_name'),
            models.Index(fields=['is_deleted'], name='idx_category_deleted'),
        ]

    def __str__(self):
        return self.name or str(self.id)


class Product(AuditModel):
    """商品数据库模型"""
    name = models.CharField(max_length=255, null=True, blank=True, verbose_name="商品名称")
    description = models.TextField(null=True, blank=True, verbose_name="商品描述")
    content_html = models.TextField(null=True, blank=True, verbose_name="商品详情HTML")
    image_url = models.CharField(max_length=500, null=True, blank=True, verbose_name="图片地址")
    category = models.ForeignKey(
        Category,
        on_delete=models.CASCADE,
        related_name='products',
        verbose_name="商品分类"
    )
    price = models.DecimalField(
        max_digits=18,
        decimal_places=2,
        default=Decimal("0"),
        verbose_name="价格"
    )
    rating_score = models.DecimalField(
        max_digits=18,
        decimal_places=2,
        default=Decimal("0"),
        verbose_name="评分"
    )
    sale_count = models.IntegerField(default=0, verbose_name="销量")
    display_order = models.IntegerField(default=0, verbose_name="显示顺序")
    is_featured = models.BooleanField(default=False, verbose_name="是否推荐")
    has_display_home_page = models.BooleanField(default=False, verbose_name="是否首页显示")

    class Meta:
        db_table = 'products'
        verbose_name = "商品"
        verbose_name_plural = "商品"
        indexes = [
            models.Index(fields=['name'], name='idx_product_name'),
            models.Index(fields=['category'], name='idx_product_category'),
            # 常用查询: 按分类列出未删除商品
            models.Index(fields=['is_deleted', 'category'], name='idx_product_deleted_category'),
        ]

        # 添加数据库级别约束
        constraints = [
            # 确保价格不为负数
            models.CheckConstraint(condition=models.Q(price__gte=0), name='product_price_gte_0'),
        ]

    def __str__(self):
        return self.name or str(self.id)


class Comment(AuditModel):
    """评论数据库模型"""
    content = models.TextField(null=True, blank=True, verbose_name="评论内容")
    full_name = models.CharField(max_length=255, null=True, blank=True, verbose_name="评论人")
    rating = models.IntegerField(default=0, verbose_name="评分")
    entity_id = models.UUIDField(null=True, blank=True, verbose_name="评论对象ID")
    entity_type = models.CharField(max_length=100, null=True, blank=True, verbose_name="评论对象类型")
    customer_id = models.UUIDField(null=True, blank=True, verbose_name="客户ID")

    class Meta:
        db_table = 'comments'
        verbose_name = "评论"
        verbose_name_plural = "评论"
        indexes = [
            models.Index(fields=['entity_type', 'entity_id'], name='idx_comment_entity'),
        ]


class CustomerWishList(AuditModel):
    """客户心愿单数据库模型"""
    customer = models.ForeignKey(
        'orders.Customer',
        on_delete=models.CASCADE,
        related_name='wish_lists',
        verbose_name="客户"
    )
    product = models.ForeignKey(
        Product,
        on_delete=models.CASCADE,
        related_name='wish_lists',
        verbose_name="商品"
    )

    class Meta:
        db_table = 'customer_wish_lists'
        verbose_name = "心愿单"
        verbose_name_plural = "心愿单"
