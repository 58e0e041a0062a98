"""
应用层公共组件包。
提供统一的服务结果结构和消息常量。
"""

from core.application.results import (
    HTTP_STATUS_MAPPING,
    MessageConstants,
    ServiceResult,
    StatusCode,
    get_http_status,
)

__all__ = [
    'HTTP_STATUS_MAPPING',
    'MessageConstants',
    'ServiceResult',
    'StatusCode',
    'get_http_status',
]
