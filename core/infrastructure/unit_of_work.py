"""
工作单元模块。
提供基于Django事务和基于内存存储的工作单元实现。
"""
import copy
from typing import Optional, Type
import uuid

from django.db import DEFAULT_DB_ALIAS, DatabaseError, transaction as django_transaction
from loguru import logger

from core.domain.base import AuditContext
from core.domain.exceptions import StorageException
from core.domain.repositories import ChangeType, PendingChange, Repository, T, UnitOfWork
from core.infrastructure.django_repository import DjangoRepository, entity_to_fields, get_model_for
from core.infrastructure.memory_repository import InMemoryRepository, InMemoryStore


class DjangoUnitOfWork(UnitOfWork):
    """
    基于Django的工作单元实现。
    提交时在一个atomic事务中依次应用所有待提交变更。
    """

    def __init__(self, actor: Optional[AuditContext] = None, using: str = DEFAULT_DB_ALIAS):
        """
        初始化工作单元。

        Args:
            actor: 当前操作者
            using: 数据库别名
        """
        super().__init__(actor)
        self.using = using

    def repository(self, entity_class: Type[T]) -> Repository[T]:
        return DjangoRepository(self, get_model_for(entity_class), entity_class)

    def next_identity(self) -> uuid.UUID:
        return uuid.uuid4()

    def commit(self) -> int:
        """
        使用Django的事务机制提交所有待提交的变更。

        Returns:
            受影响的行数

        Raises:
            StorageException: 数据库错误时抛出，事务已回滚
        """
        if not self._pending:
            logger.debug("没有待提交的变更")
            return 0

        changes = list(self._pending)
        self._pending.clear()
        affected = 0
        stamped = []
        try:
            with django_transaction.atomic(using=self.using):
                logger.debug(f"事务已开启，待提交变更数: {len(changes)}")
                for change in changes:
                    stamped.append((change.entity, self.stamp(change)))
                    affected += self._apply(change)
        except DatabaseError as e:
            logger.error(f"事务回滚: {e}")
            self.restore(stamped)
            raise StorageException("commit", str(e)) from e

        logger.debug(f"事务已提交，影响行数: {affected}")
        return affected

    def _apply(self, change: PendingChange) -> int:
        model_class = change.target
        values = entity_to_fields(change.entity, model_class)
        manager = model_class._default_manager.using(self.using)

        if change.change_type == ChangeType.NEW:
            manager.create(**values)
            return 1

        # 更新和软删除都只更新已存在的行
        values.pop('id', None)
        return manager.filter(pk=change.entity.id).update(**values)


class InMemoryUnitOfWork(UnitOfWork):
    """
    基于内存存储的工作单元。
    用于单元测试或不需要数据库的场景，提交失败时存储保持不变。
    """

    def __init__(self, store: Optional[InMemoryStore] = None, actor: Optional[AuditContext] = None):
        """
        初始化工作单元。

        Args:
            store: 内存存储，未提供时创建新的存储
            actor: 当前操作者
        """
        super().__init__(actor)
        self.store = store if store is not None else InMemoryStore()

    def repository(self, entity_class: Type[T]) -> Repository[T]:
        return InMemoryRepository(self, entity_class)

    def next_identity(self) -> uuid.UUID:
        return uuid.uuid4()

    def commit(self) -> int:
        """
        在存储副本上应用所有待提交变更，全部成功后替换存储。

        Returns:
            受影响的行数

        Raises:
            StorageException: 新增实体的ID已存在时抛出
        """
        if not self._pending:
            logger.debug("没有待提交的变更")
            return 0

        changes = list(self._pending)
        self._pending.clear()
        tables = self.store.snapshot()
        affected = 0
        stamped = []
        for change in changes:
            stamped.append((change.entity, self.stamp(change)))
            table = tables.setdefault(change.target, {})
            entity_id = change.entity.id

            if change.change_type == ChangeType.NEW:
                if entity_id in table:
                    logger.error(f"内存事务回滚: 主键冲突 {entity_id}")
                    self.restore(stamped)
                    raise StorageException("commit", f"主键冲突: {entity_id}")
                table[entity_id] = copy.deepcopy(change.entity)
                affected += 1
            elif entity_id in table:
                table[entity_id] = copy.deepcopy(change.entity)
                affected += 1

        self.store.replace(tables)
        logger.debug(f"内存事务已提交，影响行数: {affected}")
        return affected
