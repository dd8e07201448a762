"""
Application-wide constants for the backend API.
"""

PROJECT_NAME = "sitecms"
VERSION = "0.1.0"

API_PREFIX = "/api"
UPLOADS_URL_PREFIX = "/uploads"

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
CATEGORY_PAGE_SIZE = 100
MAX_CATEGORY_PAGE_SIZE = 500
GALLERY_PAGE_SIZE = 12
FEATURED_LIMIT = 5

MIN_PASSWORD_LENGTH = 6

DEFAULT_SITE_INFO = {
    "phone": "139-3150-1373",
    "whatsapp": "1393150137",
    "email": "tsmainite@163.com",
    "address": "河北省唐山市",
    "company_name": "唐山迈尼特电气有限公司",
    "company_description": "专业磁电解决方案提供商，20年深耕工业电磁技术领域。",
    "icp": "ICP备案",
    "security_code": "公安备案号",
    "theme": "light",
    "language": "zh-CN",
}

DEFAULT_SITE_META = {
    "title": "唐山迈尼特电气有限公司",
    "description": "专业磁电解决方案提供商，20年深耕工业电磁技术领域。",
    "keywords": "磁电,电气,解决方案",
    "author": "TS Mainite",
}

DEFAULT_HOME_ABOUT = {
    "title": "About Us",
    "content": "",
}

DEFAULT_MAP_AK = "YOUR_BAIDU_MAP_AK_HERE"
DEFAULT_MAP_LOCATION = {
    "name": "公司办公室",
    "lng": 116.4074,
    "lat": 39.9042,
}
