"""
内容领域模型包。
"""

from contents.domain.entities import (
    Banner,
    Blog,
    File,
    UploadType,
    PageContent,
    SocialMedia,
    Contact,
    InformationWebsite,
)

__all__ = [
    'Banner',
    'Blog',
    'File',
    'UploadType',
    'PageContent',
    'SocialMedia',
    'Contact',
    'InformationWebsite',
]
