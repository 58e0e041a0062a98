"""
账户领域模型包。
"""

from accounts.domain.entities import User, UserType

__all__ = [
    'User',
    'UserType',
]
