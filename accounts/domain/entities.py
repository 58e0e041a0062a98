"""
账户领域模型中的实体。
"""
from dataclasses import dataclass
from typing import Optional
import uuid

from core.domain import AuditEntity


class UserType:
    """用户类型"""
    CUSTOMER = 0
    ADMIN = 1


@dataclass(eq=False)
class User(AuditEntity):
    """
    系统用户。
    username和password为必填，password保存的是哈希后的值。
    客户用户通过customer_id关联到客户，客户被删除时该字段置空。
    """
    username: Optional[str] = None
    password: Optional[str] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    image_url: Optional[str] = None
    type: int = UserType.CUSTOMER
    customer_id: Optional[uuid.UUID] = None
