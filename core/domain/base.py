"""
核心领域模型基类模块。
包含Entity基类和带审计字段的AuditEntity基类，用于所有具有唯一标识的领域对象。
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional
import uuid


class Entity:
    """
    实体基类。
    实体是具有唯一标识的领域对象，其相等性通过标识而非属性值判断。
    标识由仓储在新增时分配，实体自身不生成标识。
    """

    id: Optional[uuid.UUID] = None

    def __eq__(self, other: Any) -> bool:
        """
        判断两个实体是否相等，通过比较它们的类型和标识。

        Args:
            other: 另一个实体

        Returns:
            如果两个实体标识相等且都已分配标识，则返回True；否则返回False
        """
        if not isinstance(other, Entity) or type(self) is not type(other):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        """
        计算实体的哈希值，基于其标识。

        Returns:
            实体标识的哈希值
        """
        if self.id is None:
            return id(self)
        return hash(self.id)


@dataclass(eq=False)
class AuditEntity(Entity):
    """
    带审计字段的实体基类。
    所有业务实体共享的状态标志和创建/更新/删除审计信息。
    """
    id: Optional[uuid.UUID] = None
    is_active: bool = True
    is_deleted: bool = False
    created_by: Optional[uuid.UUID] = None
    created_by_name: Optional[str] = None
    create_by_date: Optional[datetime] = None
    updated_by: Optional[uuid.UUID] = None
    updated_by_name: Optional[str] = None
    update_by_date: Optional[datetime] = None
    deleted_by: Optional[uuid.UUID] = None
    deleted_by_name: Optional[str] = None
    delete_by_date: Optional[datetime] = None


@dataclass(frozen=True)
class AuditContext:
    """当前操作者信息，由调用方提供给工作单元用于填充审计字段"""
    user_id: Optional[uuid.UUID] = None
    user_name: Optional[str] = None

    @classmethod
    def anonymous(cls) -> 'AuditContext':
        """匿名操作者"""
        return cls()
