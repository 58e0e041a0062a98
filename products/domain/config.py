"""
商品模块配置文件。
从Django设置中获取商品模块的配置。
"""
from django.conf import settings


def _product_settings() -> dict:
    # 获取商品模块配置，如果不存在则使用默认值
    return getattr(settings, 'PRODUCT_SETTINGS', {})


def default_page_size() -> int:
    """分页搜索的默认每页大小"""
    return _product_settings().get('DEFAULT_PAGE_SIZE', 10)


def max_page_size() -> int:
    """分页搜索允许的最大每页大小"""
    return _product_settings().get('MAX_PAGE_SIZE', 100)
