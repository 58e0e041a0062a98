"""
基础配置文件。
包含所有环境共享的Django配置，环境相关的数据库和日志配置在各环境文件中定义。
"""
from pathlib import Path

# 项目根目录
BASE_DIR = Path(__file__).resolve().parent.parent.parent

INSTALLED_APPS = [
    'django.contrib.contenttypes',

    # 业务模块
    'products.apps.ProductsConfig',
    'orders.apps.OrdersConfig',
    'accounts.apps.AccountsConfig',
    'contents.apps.ContentsConfig',
]

MIDDLEWARE = []

# 国际化
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# 商品模块默认配置，各环境可覆盖
PRODUCT_SETTINGS = {
    'DEFAULT_PAGE_SIZE': 10,
    'MAX_PAGE_SIZE': 100,
}
