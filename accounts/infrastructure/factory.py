"""
账户基础设施层工厂。
"""
from core.infrastructure import register_entity_model

from accounts.domain import entities
from accounts.infrastructure.models import account_models


def register_entity_models() -> None:
    """注册账户模块的实体模型映射，在AccountsConfig.ready()中调用"""
    register_entity_model(entities.User, account_models.User)
