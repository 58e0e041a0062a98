"""
内容领域模型中的实体。
包含横幅、博客、文件、页面内容、社交媒体、联系留言和网站信息。
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from core.domain import AuditEntity


@dataclass(eq=False)
class Banner(AuditEntity):
    """首页横幅"""
    title: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    link: Optional[str] = None
    display_order: int = 0


@dataclass(eq=False)
class Blog(AuditEntity):
    title: Optional[str] = None
    short_des: Optional[str] = None
    content_html: Optional[str] = None
    image_url: Optional[str] = None
    rating_score: Decimal = Decimal("0")


class UploadType:
    """文件上传类型"""
    IMAGE = 0
    DOCUMENT = 1


@dataclass(eq=False)
class File(AuditEntity):
    """
    上传的文件。
    entity_id/entity_type指向文件所属的对象，entity_id以字符串保存。
    """
    name: Optional[str] = None
    url: Optional[str] = None
    file_ext: Optional[str] = None
    entity_id: Optional[str] = None
    entity_type: Optional[str] = None
    type_upload: int = UploadType.IMAGE


@dataclass(eq=False)
class PageContent(AuditEntity):
    """静态页面内容，按order排序显示"""
    title: Optional[str] = None
    short_des: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    order: int = 0


@dataclass(eq=False)
class SocialMedia(AuditEntity):
    title: Optional[str] = None
    link: Optional[str] = None
    icon_url: Optional[str] = None
    display_order: int = 0


@dataclass(eq=False)
class Contact(AuditEntity):
    """访客联系留言"""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    message: Optional[str] = None
    status: Optional[str] = None


@dataclass(eq=False)
class InformationWebsite(AuditEntity):
    """网站基本信息"""
    title: Optional[str] = None
    description: Optional[str] = None
    address: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    fax: Optional[str] = None
    logo: Optional[str] = None
