"""
基础设施层公共数据库模型。
定义所有业务表共享的主键、状态标志和审计字段。
"""
import uuid
from django.db import models


class AuditModel(models.Model):
    """审计字段抽象模型"""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    is_active = models.BooleanField(default=True, verbose_name="是否启用")
    is_deleted = models.BooleanField(default=False, verbose_name="是否删除")

    created_by = models.UUIDField(null=True, blank=True, verbose_name="创建人")
    created_by_name = models.CharField(max_length=255, null=True, blank=True, verbose_name="创建人名称")
    create_by_date = models.DateTimeField(null=True, blank=True, verbose_name="创建时间")
    updated_by = models.UUIDField(null=True, blank=True, verbose_name="更新人")
    updated_by_name = models.CharField(max_length=255, null=True, blank=True, verbose_name="更新人名称")
    update_by_date = models.DateTimeField(null=True, blank=True, verbose_name="更新时间")
    deleted_by = models.UUIDField(null=True, blank=True, verbose_name="删除人")
    deleted_by_name = models.CharField(max_length=255, null=True, blank=True, verbose_name="删除人名称")
    delete_by_date = models.DateTimeField(null=True, blank=True, verbose_name="删除时间")

    class Meta:
        abstract = True
