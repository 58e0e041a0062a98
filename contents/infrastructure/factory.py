"""
内容基础设施层工厂。
"""
from core.infrastructure import register_entity_model

from contents.domain import entities
from contents.infrastructure.models import content_models


def register_entity_models() -> None:
    """注册内容模块的实体模型映射，在ContentsConfig.ready()中调用"""
    register_entity_model(entities.Banner, content_models.Banner)
    register_entity_model(entities.Blog, content_models.Blog)
    register_entity_model(entities.File, content_models.File)
    register_entity_model(entities.PageContent, content_models.PageContent)
    register_entity_model(entities.SocialMedia, content_models.SocialMedia)
    register_entity_model(entities.Contact, content_models.Contact)
    register_entity_model(entities.InformationWebsite, content_models.InformationWebsite)
