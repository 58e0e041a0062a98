"""
内容基础设施层数据库模型。
定义横幅、博客、文件等内容相关的Django ORM模型。
"""
from decimal import Decimal
from django.db import models

from core.infrastructure.models import AuditModel


class Banner(AuditModel):
    """横幅数据库模型"""
    title = models.CharField(max_length=255, null=True, blank=True, verbose_name="标题")
    description = models.TextField(null=True, blank=True, verbose_name="描述")
    image_url = models.CharField(max_length=500, null=True, blank=True, verbose_name="图片地址")
    link = models.CharField(max_length=500, null=True, blank=True, verbose_name="链接")
    display_order = models.IntegerField(default=0, verbose_name="显示顺序")

    class Meta:
        db_table = 'banners'
        verbose_name = "横幅"
        verbose_name_plural = "横幅"


class Blog(AuditModel):
    """博客数据库模型"""
    title = models.CharField(max_length=255, null=True, blank=True, verbose_name="标题")
    short_des = models.TextField(null=True, blank=True, verbose_name="摘要")
    content_html = models.TextField(null=True, blank=True, verbose_name="正文HTML")
    image_url = models.CharField(max_length=500, null=True, blank=True, verbose_name="图片地址")
    rating_score = models.DecimalField(max_digits=18, decimal_places=2, default=Decimal("0"), verbose_name="评分")

    class Meta:
        db_table = 'blogs'
        verbose_name = "博客"
        verbose_name_plural = "博客"


class File(AuditModel):
    """文件数据库模型"""
    name = models.CharField(max_length=255, null=True, blank=True, verbose_name="文件名")
    url = models.CharField(max_length=500, null=True, blank=True, verbose_name="地址")
    file_ext = models.CharField(max_length=20, null=True, blank=True, verbose_name="扩展名")
    entity_id = models.CharField(max_length=100, null=True, blank=True, verbose_name="所属对象ID")
    entity_type = models.CharField(max_length=100, null=True, blank=True, verbose_name="所属对象类型")
    type_upload = models.IntegerField(default=0, verbose_name="上传类型")

    class Meta:
        db_table = 'files'
        verbose_name = "文件"
        verbose_name_plural = "文件"
        indexes = [
            models.Index(fields=['entity_type', 'entity_id'], name='idx_file_entity'),
        ]


class PageContent(AuditModel):
    """页面内容数据库模型"""
    title = models.CharField(max_length=255, null=True, blank=True, verbose_name="标题")
    short_des = models.TextField(null=True, blank=True, verbose_name="摘要")
    description = models.TextField(null=True, blank=True, verbose_name="内容")
    image_url = models.CharField(max_length=500, null=True, blank=True, verbose_name="图片地址")
    order = models.IntegerField(default=0, verbose_name="排序")

    class Meta:
        db_table = 'page_contents'
        verbose_name = "页面内容"
        verbose_name_plural = "页面内容"


class SocialMedia(AuditModel):
    """社交媒体数据库模型"""
    title = models.CharField(max_length=255, null=True, blank=True, verbose_name="名称")
    link = models.CharField(max_length=500, null=True, blank=True, verbose_name="链接")
    icon_url = models.CharField(max_length=500, null=True, blank=True, verbose_name="图标地址")
    display_order = models.IntegerField(default=0, verbose_name="显示顺序")

    class Meta:
        db_table = 'social_medias'
        verbose_name = "社交媒体"
        verbose_name_plural = "社交媒体"


class Contact(AuditModel):
    """联系留言数据库模型"""
    first_name = models.CharField(max_length=255, null=True, blank=True, verbose_name="名")
    last_name = models.CharField(max_length=255, null=True, blank=True, verbose_name="姓")
    email = models.CharField(max_length=255, null=True, blank=True, verbose_name="邮箱")
    phone_number = models.CharField(max_length=50, null=True, blank=True, verbose_name="电话")
    message = models.TextField(null=True, blank=True, verbose_name="留言")
    status = models.CharField(max_length=50, null=True, blank=True, verbose_name="处理状态")

    class Meta:
        db_table = 'contacts'
        verbose_name = "联系留言"
        verbose_name_plural = "联系留言"


class InformationWebsite(AuditModel):
    """网站信息数据库模型"""
    title = models.CharField(max_length=255, null=True, blank=True, verbose_name="网站名称")
    description = models.TextField(null=True, blank=True, verbose_name="描述")
    address = models.CharField(max_length=500, null=True, blank=True, verbose_name="地址")
    email = models.CharField(max_length=255, null=True, blank=True, verbose_name="邮箱")
    phone = models.CharField(max_length=50, null=True, blank=True, verbose_name="电话")
    fax = models.CharField(max_length=50, null=True, blank=True, verbose_name="传真")
    logo = models.CharField(max_length=500, null=True, blank=True, verbose_name="标志")

    class Meta:
        db_table = 'information_websites'
        verbose_name = "网站信息"
        verbose_name_plural = "网站信息"
