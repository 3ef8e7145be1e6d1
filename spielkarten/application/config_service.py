"""
ConfigService - 配置管理服务

负责集中化管理所有配置，包括：
- 语言配置(默认语言、翻译资源位置)
- 日志配置
- 牌组配置(随机种子)

并把配置装配为LocaleResolver和DeckFactory。
"""

import logging
import os
import random
from dataclasses import dataclass, fields
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..core.deck import DeckFactory
from ..core.locale import LocaleId, LocaleResolver, YamlTranslationStore
from ..core.locale.store import CORE_RESOURCE, DEFAULT_RESOURCE_DIR
from .types import QueryResult

LOCALE_ENV_VAR = "SPIELKARTEN_LOCALE"
LOG_LEVEL_ENV_VAR = "SPIELKARTEN_LOG_LEVEL"
ROOT_LOGGER_NAME = "spielkarten"


class ConfigType(Enum):
    """配置类型枚举"""
    LOCALE = "locale"
    LOGGING = "logging"
    DECK = "deck"


@dataclass
class LocaleConfig:
    """语言配置"""
    default_locale: str = "en-US"
    resource_dir: str = str(DEFAULT_RESOURCE_DIR)
    core_resource: Optional[str] = CORE_RESOURCE
    strict: bool = True  # 无法解析的翻译键是否抛出异常

    def __post_init__(self):
        """验证默认语言"""
        LocaleId.parse(self.default_locale)


@dataclass
class LoggingConfig:
    """日志配置"""
    log_level: str = 'INFO'
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    enable_console_logging: bool = True
    enable_file_logging: bool = False
    log_file_path: str = "logs/spielkarten.log"

    def __post_init__(self):
        """验证日志级别"""
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"无效的日志级别: {self.log_level}")


@dataclass
class DeckConfig:
    """牌组配置"""
    random_seed: Optional[int] = None   # 随机种子，用于可重现的洗牌


class ConfigService:
    """配置管理服务"""

    def __init__(self):
        """初始化配置服务"""
        self.logger = logging.getLogger(__name__)
        self._configs: Dict[ConfigType, Dict[str, Any]] = {}
        self._load_default_configs()

    def _load_default_configs(self):
        """加载默认配置，环境变量覆盖default配置"""
        self._configs[ConfigType.LOCALE] = {
            'default': LocaleConfig(),
            'german': LocaleConfig(default_locale="de"),
            'lenient': LocaleConfig(strict=False),
        }

        self._configs[ConfigType.LOGGING] = {
            'default': LoggingConfig(),
            'debug': LoggingConfig(
                log_level='DEBUG',
                enable_file_logging=True
            ),
            'quiet': LoggingConfig(
                log_level='WARNING'
            ),
        }

        self._configs[ConfigType.DECK] = {
            'default': DeckConfig(),
            'test': DeckConfig(random_seed=42),
        }

        self._apply_env_overrides()
        self.logger.debug("默认配置加载完成")

    def _apply_env_overrides(self):
        """用环境变量覆盖default配置，无效值记录警告并保留原配置"""
        env_locale = os.environ.get(LOCALE_ENV_VAR)
        if env_locale:
            try:
                self._configs[ConfigType.LOCALE]['default'] = LocaleConfig(default_locale=env_locale)
                self.logger.info(f"默认语言由环境变量设置为 {env_locale}")
            except ValueError as e:
                self.logger.warning(f"忽略无效的环境变量 {LOCALE_ENV_VAR}={env_locale!r}: {e}")

        env_level = os.environ.get(LOG_LEVEL_ENV_VAR)
        if env_level:
            try:
                self._configs[ConfigType.LOGGING]['default'] = LoggingConfig(log_level=env_level.upper())
            except ValueError as e:
                self.logger.warning(f"忽略无效的环境变量 {LOG_LEVEL_ENV_VAR}={env_level!r}: {e}")

    def _get_profile(self, config_type: ConfigType, profile: str) -> Any:
        config_profiles = self._configs[config_type]
        if profile not in config_profiles:
            self.logger.warning(f"未找到{config_type.value}配置 '{profile}'，使用默认配置")
            profile = "default"
        return config_profiles[profile]

    def get_locale_config(self, profile: str = "default") -> QueryResult[LocaleConfig]:
        """
        获取语言配置

        Args:
            profile: 配置文件名 (default, german, lenient)

        Returns:
            查询结果，包含语言配置
        """
        return QueryResult.success_result(self._get_profile(ConfigType.LOCALE, profile))

    def get_logging_config(self, profile: str = "default") -> QueryResult[LoggingConfig]:
        """
        获取日志配置

        Args:
            profile: 配置文件名 (default, debug, quiet)

        Returns:
            查询结果，包含日志配置
        """
        return QueryResult.success_result(self._get_profile(ConfigType.LOGGING, profile))

    def get_deck_config(self, profile: str = "default") -> QueryResult[DeckConfig]:
        """
        获取牌组配置

        Args:
            profile: 配置文件名 (default, test)

        Returns:
            查询结果，包含牌组配置
        """
        return QueryResult.success_result(self._get_profile(ConfigType.DECK, profile))

    def update_config(self, config_type: ConfigType, profile: str, updates: Dict[str, Any]) -> QueryResult[bool]:
        """
        更新配置

        Args:
            config_type: 配置类型
            profile: 配置文件名
            updates: 更新的配置项

        Returns:
            查询结果，包含更新是否成功
        """
        if config_type not in self._configs:
            return QueryResult.failure_result(
                f"配置类型 {config_type} 不存在",
                error_code="CONFIG_TYPE_NOT_FOUND"
            )

        config_profiles = self._configs[config_type]
        if profile not in config_profiles:
            return QueryResult.failure_result(
                f"配置文件 {profile} 不存在",
                error_code="CONFIG_PROFILE_NOT_FOUND"
            )

        current_config = config_profiles[profile]
        known = {f.name for f in fields(current_config)}
        unknown = [key for key in updates if key not in known]
        if unknown:
            return QueryResult.validation_error(
                f"配置项 {unknown} 不存在于 {config_type.value}.{profile} 中",
                error_code="UNKNOWN_CONFIG_KEY"
            )

        values = {f.name: getattr(current_config, f.name) for f in fields(current_config)}
        values.update(updates)
        try:
            # 重新构造以触发__post_init__校验
            config_profiles[profile] = type(current_config)(**values)
        except ValueError as e:
            return QueryResult.validation_error(
                f"更新配置失败: {e}",
                error_code="INVALID_CONFIG_VALUE"
            )

        self.logger.info(f"配置 {config_type.value}.{profile} 更新成功")
        return QueryResult.success_result(True)

    def list_available_profiles(self, config_type: ConfigType) -> QueryResult[List[str]]:
        """
        列出可用的配置文件

        Args:
            config_type: 配置类型

        Returns:
            查询结果，包含可用配置文件列表
        """
        if config_type not in self._configs:
            return QueryResult.failure_result(
                f"配置类型 {config_type} 不存在",
                error_code="CONFIG_TYPE_NOT_FOUND"
            )
        return QueryResult.success_result(list(self._configs[config_type].keys()))

    def setup_logging(self, profile: str = "default") -> logging.Logger:
        """
        按日志配置设置spielkarten根日志器

        重复调用只会替换本服务添加的处理器。

        Args:
            profile: 日志配置文件名

        Returns:
            logging.Logger: spielkarten根日志器
        """
        config = self._get_profile(ConfigType.LOGGING, profile)
        root = logging.getLogger(ROOT_LOGGER_NAME)
        root.setLevel(config.log_level.upper())

        for handler in list(root.handlers):
            if getattr(handler, '_spielkarten_managed', False):
                root.removeHandler(handler)
                handler.close()

        formatter = logging.Formatter(config.log_format)
        handlers: List[logging.Handler] = []
        if config.enable_console_logging:
            handlers.append(logging.StreamHandler())
        if config.enable_file_logging:
            log_path = Path(config.log_file_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

        for handler in handlers:
            handler.setFormatter(formatter)
            handler._spielkarten_managed = True
            root.addHandler(handler)

        return root

    def build_resolver(self, profile: str = "default") -> LocaleResolver:
        """
        按语言配置构建翻译解析器

        Args:
            profile: 语言配置文件名

        Returns:
            LocaleResolver: 基于YAML资源的解析器
        """
        config = self._get_profile(ConfigType.LOCALE, profile)
        store = YamlTranslationStore(config.resource_dir, config.core_resource)
        return LocaleResolver(store, config.default_locale, strict=config.strict)

    def build_deck_factory(self, locale_profile: str = "default",
                           deck_profile: str = "default") -> DeckFactory:
        """
        按语言配置和牌组配置构建牌组工厂

        设置了随机种子时，工厂所建牌组共享同一个可重现的随机数生成器。
        """
        deck_config = self._get_profile(ConfigType.DECK, deck_profile)
        rng = random.Random(deck_config.random_seed) if deck_config.random_seed is not None else None
        return DeckFactory(self.build_resolver(locale_profile), rng)


# 全局单例
_config_service_instance: Optional[ConfigService] = None


def get_config_service() -> ConfigService:
    """
    获取配置服务的全局单例

    Returns:
        ConfigService: 配置服务实例
    """
    global _config_service_instance
    if _config_service_instance is None:
        _config_service_instance = ConfigService()
    return _config_service_instance
