"""
账户基础设施层数据库模型。
"""
from django.db import models

from core.infrastructure.models import AuditModel


class User(AuditModel):
    """用户数据库模型"""
    username = models.CharField(max_length=150, verbose_name="用户名")
    password = models.CharField(max_length=255, verbose_name="密码")
    email = models.CharField(max_length=255, null=True, blank=True, verbose_name="邮箱")
    first_name = models.CharField(max_length=255, null=True, blank=True, verbose_name="名")
    last_name = models.CharField(max_length=255, null=True, blank=True, verbose_name="姓")
    image_url = models.CharField(max_length=500, null=True, blank=True, verbose_name="头像")
    type = models.IntegerField(default=0, verbose_name="用户类型")
    customer = models.ForeignKey(
        'orders.Customer',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='users',
        verbose_name="客户"
    )

    class Meta:
        db_table = 'users'
        verbose_name = "用户"
        verbose_name_plural = "用户"
        indexes = [
            models.Index(fields=['username'], name='idx_user_username'),
        ]

    def __str__(self):
        return self.username
