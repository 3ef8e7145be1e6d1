"""
Application Layer - 应用服务层

集中管理语言、日志和牌组配置，并负责把配置装配为核心对象。
"""

from .config_service import (
    ConfigService,
    ConfigType,
    DeckConfig,
    LocaleConfig,
    LoggingConfig,
    get_config_service,
)
from .types import QueryResult, ResultStatus

__all__ = [
    'ConfigService',
    'ConfigType',
    'DeckConfig',
    'LocaleConfig',
    'LoggingConfig',
    'get_config_service',
    'QueryResult',
    'ResultStatus',
]
