"""
统一服务结果模块。
提供应用服务返回值的标准化结构，包括是否出错、消息、数据和业务状态码。
预期内的业务错误（验证失败、实体不存在）以结果返回，不以异常穿过服务边界。
"""
import typing as t
from dataclasses import dataclass

T = t.TypeVar('T')


# 状态码枚举
class StatusCode:
    """业务状态码定义"""

    # 成功状态码 (1xxxx)
    SUCCESS = 10000                # 通用成功
    CREATED = 10001                # 创建成功
    UPDATED = 10002                # 更新成功
    DELETED = 10003                # 删除成功

    # 客户端错误 (4xxxx)
    BAD_REQUEST = 40000            # 错误的请求
    VALIDATION_ERROR = 40001       # 数据验证错误
    PARAM_ERROR = 40002            # 参数错误

    # 资源错误 (404xx)
    ENTITY_NOT_FOUND = 40401       # 实体不存在

    # 服务端错误 (5xxxx)
    SERVER_ERROR = 50000           # 服务器内部错误
    DATABASE_ERROR = 50002         # 数据库错误


class MessageConstants:
    """服务结果消息，取值固定"""
    ERROR = "操作失败"
    INVALID_STRING = "字符串无效"
    INVALID_PAGINATION = "分页参数无效"
    CREATE_SUCCESS = "创建成功"
    UPDATE_SUCCESS = "更新成功"
    DELETE_SUCCESS = "删除成功"
    LIST_SUCCESS = "查询成功"


# 业务状态码对应的HTTP状态码，供外部HTTP层使用
HTTP_STATUS_MAPPING = {
    StatusCode.SUCCESS: 200,
    StatusCode.CREATED: 201,
    StatusCode.UPDATED: 200,
    StatusCode.DELETED: 200,
    StatusCode.BAD_REQUEST: 400,
    StatusCode.VALIDATION_ERROR: 400,
    StatusCode.PARAM_ERROR: 400,
    StatusCode.ENTITY_NOT_FOUND: 404,
    StatusCode.SERVER_ERROR: 500,
    StatusCode.DATABASE_ERROR: 500,
}


@dataclass
class ServiceResult(t.Generic[T]):
    """应用服务结果"""
    has_error: bool = False
    message: str = MessageConstants.LIST_SUCCESS
    data: t.Optional[T] = None
    code: int = StatusCode.SUCCESS

    @classmethod
    def success(
        cls,
        data: t.Any = None,
        message: str = MessageConstants.LIST_SUCCESS,
        code: int = StatusCode.SUCCESS
    ) -> 'ServiceResult':
        """
        创建成功结果

        Args:
            data: 结果数据
            message: 结果消息
            code: 业务状态码

        Returns:
            ServiceResult: 成功结果
        """
        return cls(has_error=False, message=message, data=data, code=code)

    @classmethod
    def fail(
        cls,
        message: str = MessageConstants.ERROR,
        code: int = StatusCode.BAD_REQUEST,
        data: t.Any = None
    ) -> 'ServiceResult':
        """
        创建失败结果

        Args:
            message: 错误消息
            code: 业务状态码
            data: 错误详情数据

        Returns:
            ServiceResult: 失败结果
        """
        return cls(has_error=True, message=message, data=data, code=code)

    @property
    def http_status(self) -> int:
        """对应的HTTP状态码"""
        return get_http_status(self.code)


def get_http_status(code: int) -> int:
    """
    根据业务状态码获取对应的HTTP状态码

    Args:
        code: 业务状态码

    Returns:
        int: HTTP状态码
    """
    return HTTP_STATUS_MAPPING.get(code, 500)
