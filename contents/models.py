# 引用基础设施层的模型
from contents.infrastructure.models.content_models import (
    Banner,
    Blog,
    File,
    PageContent,
    SocialMedia,
    Contact,
    InformationWebsite
)
