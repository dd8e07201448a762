"""
Seed the database with demo content.

Creates the tables if needed, then fills each content table that is still
empty: site info and meta, four product categories with one product each,
four cases, four news articles, four documents and the bootstrap admin.
Tables that already hold rows are left alone, so the script can be re-run.

Usage::

    sitecms-seed
"""

import asyncio
from datetime import date, timedelta
from pathlib import Path
from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from sitecms.core.database import async_session_maker, init_db
from sitecms.core.database.entities import Case, Document, News, Product, ProductCategory, SiteInfo, SiteMeta
from sitecms.core.database.repositories import (
    CaseRepository,
    DocumentRepository,
    NewsRepository,
    ProductCategoryRepository,
    ProductRepository,
)
from sitecms.core.database.repositories.base import AsyncSqlRepository
from sitecms.core.database.repositories.singleton import SingletonRepository
from sitecms.core.logging_config import get_logger
from sitecms.server.core.constant import DEFAULT_SITE_INFO, DEFAULT_SITE_META, UPLOADS_URL_PREFIX
from sitecms.server.services.auth import AuthService
from sitecms.server.services.uploads import UploadCategory, UploadManager, upload_manager

logger = get_logger(__name__)

SEED_SITE_INFO: Dict[str, Any] = {
    **DEFAULT_SITE_INFO,
    "company_description": "专业磁电解决方案提供商，拥有20年工业电磁技术深耕经验，为全球客户提供高效、可靠、创新的电气解决方案。",
    "facebook": "https://facebook.com/tsmainite",
    "instagram": "https://instagram.com/tsmainite",
    "twitter": "https://twitter.com/tsmainite",
    "youtube": "https://youtube.com/@tsmainite",
    "tiktok": "https://tiktok.com/@tsmainite",
    "linkedin": "https://linkedin.com/company/tsmainite",
    "icp": "冀ICP证XXXXXX号",
    "security_code": "130202202400000001",
}

SEED_SITE_META: Dict[str, Any] = {
    **DEFAULT_SITE_META,
    "title": "唐山迈尼特电气有限公司-工业电气解决方案专家",
    "description": "专业提供工业电气、磁电设备及解决方案。拥有20年行业经验，为全球企业提供高效可靠的技术支持与服务。",
    "keywords": "工业电气,磁电,电气解决方案,工业设备,电磁设备,唐山",
    "author": "唐山迈尼特电气有限公司",
    "favicon": "/favicon.ico",
    "og_image": "/images/og-image.png",
}

CATEGORY_NAMES = ["机械设备", "电子产品", "化工用品", "建筑材料"]

# One product per category, in CATEGORY_NAMES order
PRODUCTS: List[Dict[str, Any]] = [
    {
        "name": "工业齿轮箱",
        "model": "GBX-500",
        "description": "高效率工业齿轮箱",
        "content": "# 工业齿轮箱\n\n## 产品特性\n- 高效率传动\n- 低噪音设计\n- 长寿命设计\n\n## 技术规格\n- 功率：50kW\n- 传动比：3:1\n- 效率：98%",
        "price": 5000,
        "featured": True,
        "display_order": 1,
    },
    {
        "name": "太阳能板",
        "model": "SPL-400W",
        "description": "高效率太阳能电池板",
        "content": "# 太阳能板\n\n## 产品描述\n高效率单晶硅太阳能电池板，适用于各种应用场景。\n\n## 主要优势\n- 转换效率：22%\n- 宽工作温度范围\n- 防水防尘设计",
        "price": 2000,
        "featured": True,
        "display_order": 2,
    },
    {
        "name": "工业涂料",
        "model": "COAT-500",
        "description": "防腐工业涂料",
        "content": "# 工业防腐涂料\n\n## 应用领域\n- 钢结构防护\n- 化工设备保护\n- 海洋环境防腐\n\n## 性能指标\n- 粘度：80-120\n- 固含量：60%\n- 干燥时间：4小时",
        "price": 150,
        "featured": True,
        "display_order": 3,
    },
    {
        "name": "水泥砖",
        "model": "BRICK-MU10",
        "description": "高强度水泥砖",
        "content": "# 高强度水泥砖\n\n## 产品信息\n采用优质水泥和骨料制造，具有高强度和耐久性。\n\n## 规格参数\n- 尺寸：240×115×53mm\n- 强度等级：MU10\n- 密度：1800kg/m³",
        "price": 5,
        "featured": False,
        "display_order": 0,
    },
]

CASES: List[Dict[str, Any]] = [
    {
        "title": "工业设备集成项目",
        "description": "为客户集成完整的生产线解决方案",
        "industry": "机械制造",
        "company": "A某机械制造有限公司",
        "location": "浙江杭州",
        "content": "# 工业设备集成项目\n\n## 项目概述\n该项目成功为客户设计并实施了完整的工业生产线。\n\n## 项目成果\n- 生产效率提升40%\n- 成本降低30%",
        "featured": True,
        "display_order": 1,
    },
    {
        "title": "能源转换系统改造",
        "description": "大型工业企业的能源系统优化项目",
        "industry": "能源化工",
        "company": "B某能源集团",
        "location": "山东青岛",
        "content": "# 能源转换系统改造\n\n## 解决方案\n- 更新核心设备\n- 优化系统架构\n\n## 实现效果\n- 转换效率从85%提升至94%\n- ROI周期12个月",
        "featured": True,
        "display_order": 2,
    },
    {
        "title": "环保涂料应用案例",
        "description": "化工行业采用环保涂料的成功案例",
        "industry": "化工",
        "company": "C某化工有限公司",
        "location": "江苏无锡",
        "content": "# 环保涂料应用\n\n## 实现效果\n- 环保认证通过\n- 生产效率提高40%\n- VOC排放降低70%",
        "featured": False,
        "display_order": 0,
    },
    {
        "title": "建筑材料质量升级",
        "description": "建筑企业的材料质量认证项目",
        "industry": "建筑材料",
        "company": "D某建筑材料公司",
        "location": "安徽合肥",
        "content": "# 建筑材料质量升级\n\n## 完成情况\n- 通过ISO 9001认证\n- 获得国家专利3项",
        "featured": False,
        "display_order": 0,
    },
]

# Dated relative to the day the seed runs, newest first
NEWS: List[Dict[str, Any]] = [
    {
        "title": "公司荣获行业最佳服务奖",
        "category": "公司新闻",
        "excerpt": "我们公司因在工业领域的杰出贡献，荣获本年度行业最佳服务奖。",
        "author": "编辑部",
        "content": "# 行业奖项\n\n我们公司因在工业领域的杰出贡献，荣获本年度行业最佳服务奖。",
        "featured": True,
        "display_order": 1,
    },
    {
        "title": "新产品线发布会召开",
        "category": "产品发布",
        "excerpt": "我们成功推出了三款革新性产品，代表行业最新技术水平。",
        "author": "产品部",
        "content": "# 新产品发布\n\n## 产品亮点\n- 高能效\n- 环保友好\n- 智能化控制",
        "featured": True,
        "display_order": 2,
    },
    {
        "title": "国际技术认证获批",
        "category": "认证资讯",
        "excerpt": "公司通过ISO 9001和ISO 14001国际认证，标志着我们的质量管理和环保承诺。",
        "author": "质量部",
        "content": "# 国际认证通过\n\n## 认证范围\n- 产品设计\n- 生产制造\n- 客户服务",
        "featured": False,
        "display_order": 0,
    },
    {
        "title": "可持续发展战略启动",
        "category": "策略动态",
        "excerpt": "启动了新的可持续发展战略，致力于降低碳排放和能源消耗。",
        "author": "战略部",
        "content": "# 绿色发展\n\n## 目标计划\n- 2025年减排30%\n- 100%可再生能源",
        "featured": False,
        "display_order": 0,
    },
]

DOCUMENTS: List[Dict[str, str]] = [
    {"title": "产品使用手册", "content": "# 产品使用手册\n\n## 安装步骤\n1. 检查配件完整性\n2. 按照安装指南安装\n3. 进行初始化测试"},
    {"title": "技术规格书", "content": "# 技术规格\n\n## 电气指标\n- 工作电压：220V/380V\n- 功率因数：0.95\n- 保护等级：IP65"},
    {"title": "维护保养指南", "content": "# 维护保养\n\n## 定期保养\n- 每月：油液检查\n- 每季：全面检修\n- 每年：主要部件更换"},
    {"title": "安全操作规程", "content": "# 安全操作\n\n## 紧急停止\n- 按下红色按钮立即停止\n- 切断电源\n- 进行故障排查"},
]


async def _is_empty(repository: AsyncSqlRepository) -> bool:
    if await repository.count() > 0:
        logger.info(f"{repository.model.__tablename__}: already has rows, skipped")
        return False
    return True


async def seed_site_settings(session: AsyncSession) -> None:
    await SingletonRepository(session, SiteInfo, SEED_SITE_INFO).get_or_create()
    await SingletonRepository(session, SiteMeta, SEED_SITE_META).get_or_create()
    logger.info("Site info and meta ready")


async def seed_catalog(session: AsyncSession) -> None:
    categories = ProductCategoryRepository(session)
    products = ProductRepository(session)
    if not await _is_empty(categories) or not await _is_empty(products):
        return
    for name, product in zip(CATEGORY_NAMES, PRODUCTS):
        category = await categories.create(ProductCategory(name=name))
        await products.create(Product(category_id=category.id, **product))
    logger.info(f"Created {len(CATEGORY_NAMES)} categories and {len(PRODUCTS)} products")


async def seed_cases(session: AsyncSession) -> None:
    repository = CaseRepository(session)
    if not await _is_empty(repository):
        return
    for case in CASES:
        await repository.create(Case(**case))
    logger.info(f"Created {len(CASES)} cases")


async def seed_news(session: AsyncSession, today: Optional[date] = None) -> None:
    repository = NewsRepository(session)
    if not await _is_empty(repository):
        return
    today = today or date.today()
    for days_ago, article in enumerate(NEWS):
        await repository.create(News(date=(today - timedelta(days=days_ago)).isoformat(), **article))
    logger.info(f"Created {len(NEWS)} news articles")


async def seed_documents(session: AsyncSession, uploads: UploadManager) -> None:
    """Documents need a downloadable file, so each one is written out as a text file."""
    repository = DocumentRepository(session)
    if not await _is_empty(repository):
        return
    directory: Path = uploads.directory_for(UploadCategory.DOCUMENTS)
    directory.mkdir(parents=True, exist_ok=True)
    for index, document in enumerate(DOCUMENTS, start=1):
        filename = f"documents-seed-{index}.txt"
        (directory / filename).write_text(document["content"], encoding="utf-8")
        await repository.create(
            Document(
                title=document["title"],
                file=f"{UPLOADS_URL_PREFIX}/{UploadCategory.DOCUMENTS.value}/{filename}",
            )
        )
    logger.info(f"Created {len(DOCUMENTS)} documents")


async def seed_all(session: AsyncSession, uploads: UploadManager) -> None:
    """Fill every empty table with demo content."""
    await seed_site_settings(session)
    await seed_catalog(session)
    await seed_cases(session)
    await seed_news(session)
    await seed_documents(session, uploads)
    await AuthService(session).ensure_admin()


async def seed() -> None:
    """Create the schema, then seed it."""
    await init_db()
    upload_manager.ensure_upload_dirs()
    async with async_session_maker() as session:
        await seed_all(session, upload_manager)
    logger.info("Database seeding complete")


def main() -> None:
    asyncio.run(seed())


if __name__ == "__main__":
    main()
