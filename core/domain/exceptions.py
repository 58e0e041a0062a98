"""
领域异常模块。
包含领域模型和数据访问层中使用的各种异常类。
"""
from typing import Any, Optional


class DomainException(Exception):
    """
    领域异常基类。
    所有领域模型中的异常都应继承自此类。
    """

    def __init__(self, message: str):
        """
        初始化领域异常。

        Args:
            message: 异常消息
        """
        self.message = message
        super().__init__(self.message)


class EntityNotFoundException(DomainException):
    """
    实体未找到异常。
    当请求的实体不存在或已被软删除时抛出。
    """

    def __init__(self, entity_name: str, entity_id: Any):
        """
        初始化实体未找到异常。

        Args:
            entity_name: 实体名称
            entity_id: 实体ID
        """
        message = f"无法找到{entity_name}: ID={entity_id}"
        super().__init__(message)
        self.entity_name = entity_name
        self.entity_id = entity_id


class ValidationException(DomainException):
    """
    数据验证异常。
    当必填字段缺失或为空白时抛出，调用方可修正。
    """

    def __init__(self, field_name: Optional[str] = None, message: str = "数据验证失败"):
        """
        初始化数据验证异常。

        Args:
            field_name: 字段名称
            message: 异常消息
        """
        if field_name:
            full_message = f"字段'{field_name}'验证失败: {message}"
        else:
            full_message = message
        super().__init__(full_message)
        self.field_name = field_name


class StorageException(DomainException):
    """
    存储异常。
    当工作单元提交失败（约束冲突、连接丢失等）时抛出，本层不做重试。
    """

    def __init__(self, operation: str, reason: Optional[str] = None):
        """
        初始化存储异常。

        Args:
            operation: 失败的操作名称
            reason: 失败原因
        """
        if reason:
            message = f"存储操作'{operation}'失败: {reason}"
        else:
            message = f"存储操作'{operation}'失败"
        super().__init__(message)
        self.operation = operation
        self.reason = reason
