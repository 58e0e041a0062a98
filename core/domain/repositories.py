"""
仓储接口模块。
定义通用仓储和工作单元接口，用于持久化和检索领域对象。
"""
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, NamedTuple, Optional, Tuple, Type, TypeVar

from core.domain.base import AuditContext, AuditEntity
from core.domain.queryable import Queryable

T = TypeVar('T', bound=AuditEntity)


class Repository(Generic[T], ABC):
    """
    通用仓储接口。
    仓储本身不持有状态，所有变更都登记到构造时传入的工作单元中，
    直到工作单元提交才会持久化。
    """

    def __init__(self, unit_of_work: 'UnitOfWork'):
        """
        初始化仓储。

        Args:
            unit_of_work: 当前请求的工作单元
        """
        self.unit_of_work = unit_of_work

    @abstractmethod
    def find(self, id: Any) -> Optional[T]:
        """
        根据ID获取实体，包括已软删除的实体。

        Args:
            id: 实体ID

        Returns:
            找到的实体，如果不存在则返回None
        """
        pass

    @abstractmethod
    def queryable(self) -> Queryable[T]:
        """
        获取全部实体的惰性查询，包括已软删除的实体，由调用方继续过滤。

        Returns:
            可组合查询
        """
        pass

    @property
    @abstractmethod
    def target(self) -> Any:
        """工作单元用于定位存储位置的标识"""
        pass

    def add(self, entity: T) -> T:
        """
        登记新增实体并分配新的标识。

        Args:
            entity: 要新增的实体

        Returns:
            已分配标识的实体
        """
        entity.id = self.unit_of_work.next_identity()
        self.unit_of_work.register_new(entity, self.target)
        return entity

    def update(self, entity: T) -> T:
        """
        登记更新实体。

        Args:
            entity: 要更新的实体

        Returns:
            传入的实体
        """
        self.unit_of_work.register_dirty(entity, self.target)
        return entity

    def remove(self, entity: T) -> T:
        """
        登记删除实体。删除为软删除，提交时只标记is_deleted。

        Args:
            entity: 要删除的实体

        Returns:
            传入的实体
        """
        self.unit_of_work.register_removed(entity, self.target)
        return entity


class ChangeType:
    """待提交变更类型"""
    NEW = "new"
    DIRTY = "dirty"
    REMOVED = "removed"


class PendingChange(NamedTuple):
    """一条待提交的变更"""
    change_type: str
    entity: AuditEntity
    target: Any


class UnitOfWork(ABC):
    """
    工作单元接口。
    一个工作单元对应一次逻辑请求和一个事务，独占该请求的待提交变更。
    """

    def __init__(self, actor: Optional[AuditContext] = None):
        """
        初始化工作单元。

        Args:
            actor: 当前操作者，用于填充审计字段
        """
        self.actor = actor or AuditContext.anonymous()
        self._pending: List[PendingChange] = []

    @property
    def pending_changes(self) -> List[PendingChange]:
        """当前待提交的变更"""
        return list(self._pending)

    @abstractmethod
    def repository(self, entity_class: Type[T]) -> Repository[T]:
        """
        获取绑定到当前工作单元的仓储。

        Args:
            entity_class: 实体类型

        Returns:
            仓储实例
        """
        pass

    @abstractmethod
    def next_identity(self) -> Any:
        """生成新的实体标识"""
        pass

    @abstractmethod
    def commit(self) -> int:
        """
        在一个事务中提交所有待提交的变更。

        Returns:
            受影响的行数

        Raises:
            StorageException: 事务无法提交时抛出，待提交变更被丢弃
        """
        pass

    def rollback(self) -> None:
        """丢弃所有待提交的变更"""
        self._pending.clear()

    def register_new(self, entity: AuditEntity, target: Any) -> None:
        self._pending.append(PendingChange(ChangeType.NEW, entity, target))

    def register_dirty(self, entity: AuditEntity, target: Any) -> None:
        self._pending.append(PendingChange(ChangeType.DIRTY, entity, target))

    def register_removed(self, entity: AuditEntity, target: Any) -> None:
        self._pending.append(PendingChange(ChangeType.REMOVED, entity, target))

    def stamp(self, change: PendingChange) -> Dict[str, Any]:
        """
        根据变更类型和当前操作者填充实体的审计字段。

        Args:
            change: 待提交的变更

        Returns:
            被修改字段在填充前的值，提交失败时交给restore恢复
        """
        entity = change.entity
        now = datetime.now(timezone.utc)
        if change.change_type == ChangeType.NEW:
            values = {
                'created_by': self.actor.user_id,
                'created_by_name': self.actor.user_name,
                'create_by_date': now,
            }
        elif change.change_type == ChangeType.DIRTY:
            values = {
                'updated_by': self.actor.user_id,
                'updated_by_name': self.actor.user_name,
                'update_by_date': now,
            }
        else:
            values = {
                'is_deleted': True,
                'is_active': False,
                'deleted_by': self.actor.user_id,
                'deleted_by_name': self.actor.user_name,
                'delete_by_date': now,
            }

        previous = {name: getattr(entity, name) for name in values}
        for name, value in values.items():
            setattr(entity, name, value)
        return previous

    def restore(self, stamped: List[Tuple[AuditEntity, Dict[str, Any]]]) -> None:
        """
        提交失败时把实体恢复到填充审计字段之前的状态。

        Args:
            stamped: (实体, stamp返回的原值) 列表
        """
        for entity, previous in reversed(stamped):
            for name, value in previous.items():
                setattr(entity, name, value)
