"""
配置管理单元测试

测试ConfigService的配置文件、更新校验、环境变量覆盖、日志设置以及
解析器和牌组工厂的装配。
"""

import logging

import pytest

from spielkarten.application import (
    ConfigService,
    ConfigType,
    DeckConfig,
    LocaleConfig,
    LoggingConfig,
    ResultStatus,
    get_config_service,
)
from spielkarten.application.config_service import LOCALE_ENV_VAR, LOG_LEVEL_ENV_VAR, ROOT_LOGGER_NAME
from spielkarten.core.exceptions import UnresolvedKeyError
from spielkarten.core.locale import GERMAN, US_ENGLISH, LocaleSuffix
from spielkarten.tests.anti_cheat import CoreUsageChecker


@pytest.fixture
def config_service(monkeypatch):
    monkeypatch.delenv(LOCALE_ENV_VAR, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    return ConfigService()


@pytest.fixture
def restore_root_logger():
    """测试结束后移除本服务添加的处理器"""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if getattr(handler, '_spielkarten_managed', False):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


class TestConfigProfiles:
    """配置文件测试"""

    def test_default_profiles(self, config_service):
        CoreUsageChecker.verify_real_objects(config_service, "ConfigService")

        locale_result = config_service.get_locale_config()
        assert locale_result.success
        assert locale_result.status == ResultStatus.SUCCESS
        assert locale_result.data.default_locale == "en-US"
        assert locale_result.data.strict

        assert config_service.get_logging_config().data.log_level == "INFO"
        assert config_service.get_deck_config().data.random_seed is None
        assert config_service.get_deck_config("test").data.random_seed == 42

    def test_unknown_profile_falls_back(self, config_service, caplog):
        with caplog.at_level(logging.WARNING):
            result = config_service.get_locale_config("klingon")

        assert result.success
        assert result.data.default_locale == "en-US"
        assert "klingon" in caplog.text

    def test_list_available_profiles(self, config_service):
        result = config_service.list_available_profiles(ConfigType.LOCALE)
        assert result.success
        assert result.data == ["default", "german", "lenient"]

    def test_invalid_config_values(self):
        with pytest.raises(ValueError):
            LoggingConfig(log_level="LOUD")
        with pytest.raises(ValueError):
            LocaleConfig(default_locale="")

    def test_get_config_service_singleton(self):
        assert get_config_service() is get_config_service()


class TestUpdateConfig:
    """配置更新测试"""

    def test_update_config(self, config_service):
        result = config_service.update_config(ConfigType.DECK, "default", {"random_seed": 7})

        assert result.success
        assert result.data is True
        assert config_service.get_deck_config().data == DeckConfig(random_seed=7)

    def test_update_unknown_profile(self, config_service):
        result = config_service.update_config(ConfigType.DECK, "missing", {"random_seed": 7})

        assert not result.success
        assert result.error_code == "CONFIG_PROFILE_NOT_FOUND"

    def test_update_unknown_key(self, config_service):
        result = config_service.update_config(ConfigType.LOGGING, "default", {"colour": True})

        assert not result.success
        assert result.status == ResultStatus.VALIDATION_ERROR
        assert result.error_code == "UNKNOWN_CONFIG_KEY"

    def test_update_invalid_value_keeps_old_config(self, config_service):
        result = config_service.update_config(ConfigType.LOGGING, "default", {"log_level": "LOUD"})

        assert not result.success
        assert result.error_code == "INVALID_CONFIG_VALUE"
        assert config_service.get_logging_config().data.log_level == "INFO"


class TestEnvironmentOverrides:
    """环境变量覆盖测试"""

    def test_locale_env_override(self, monkeypatch):
        monkeypatch.setenv(LOCALE_ENV_VAR, "de")
        monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)

        service = ConfigService()
        assert service.get_locale_config().data.default_locale == "de"
        assert service.build_resolver().default_locale == GERMAN

    def test_log_level_env_override(self, monkeypatch):
        monkeypatch.delenv(LOCALE_ENV_VAR, raising=False)
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "debug")

        service = ConfigService()
        assert service.get_logging_config().data.log_level == "DEBUG"

    @pytest.mark.parametrize("env_var,raw", [
        (LOG_LEVEL_ENV_VAR, "verbose"),
        (LOCALE_ENV_VAR, "   "),
    ])
    def test_invalid_env_override_keeps_default(self, monkeypatch, caplog, env_var, raw):
        """测试无效的环境变量值被忽略并记录警告"""
        monkeypatch.delenv(LOCALE_ENV_VAR, raising=False)
        monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
        monkeypatch.setenv(env_var, raw)

        with caplog.at_level(logging.WARNING):
            service = ConfigService()

        assert service.get_logging_config().data.log_level == "INFO"
        assert service.get_locale_config().data.default_locale == "en-US"
        assert env_var in caplog.text


class TestAssembly:
    """解析器和牌组工厂装配测试"""

    def test_build_resolver(self, config_service):
        resolver = config_service.build_resolver()

        CoreUsageChecker.verify_real_objects(resolver, "LocaleResolver")
        assert resolver.default_locale == US_ENGLISH
        assert resolver.resolve("queen", LocaleSuffix.SHORT, GERMAN) == "D"
        with pytest.raises(UnresolvedKeyError):
            resolver.resolve("bar", LocaleSuffix.SHORT)

    def test_build_german_resolver(self, config_service):
        resolver = config_service.build_resolver("german")
        assert resolver.resolve("queen", LocaleSuffix.NAME) == "Dame"

    def test_build_lenient_resolver(self, config_service):
        resolver = config_service.build_resolver("lenient")
        assert resolver.resolve("bar", LocaleSuffix.SHORT) == "bar-short"

    def test_build_resolver_custom_directory(self, config_service, tmp_path):
        (tmp_path / "en-US.yaml").write_text('ace-short: "1"\n', encoding="utf-8")
        config_service.update_config(ConfigType.LOCALE, "default", {"resource_dir": str(tmp_path)})

        assert config_service.build_resolver().resolve("ace", LocaleSuffix.SHORT) == "1"

    def test_build_deck_factory_reproducible(self, config_service):
        """测试设置随机种子后洗牌可重现"""
        first = config_service.build_deck_factory(deck_profile="test").standard_deck().shuffle()
        second = config_service.build_deck_factory(deck_profile="test").standard_deck().shuffle()

        assert first == second
        assert len(first) == 52


class TestSetupLogging:
    """日志设置测试"""

    def test_setup_logging_console(self, config_service, restore_root_logger):
        root = config_service.setup_logging()

        assert root is restore_root_logger
        assert root.level == logging.INFO
        managed = [h for h in root.handlers if getattr(h, '_spielkarten_managed', False)]
        assert len(managed) == 1

    def test_setup_logging_idempotent(self, config_service, restore_root_logger):
        config_service.setup_logging()
        config_service.setup_logging()

        managed = [h for h in restore_root_logger.handlers if getattr(h, '_spielkarten_managed', False)]
        assert len(managed) == 1

    def test_setup_logging_file(self, config_service, restore_root_logger, tmp_path):
        log_file = tmp_path / "logs" / "spielkarten.log"
        config_service.update_config(ConfigType.LOGGING, "debug", {
            "log_file_path": str(log_file),
            "enable_console_logging": False,
        })

        root = config_service.setup_logging("debug")
        logging.getLogger("spielkarten.core.deck.factory").debug("hello file")
        for handler in root.handlers:
            handler.flush()

        assert root.level == logging.DEBUG
        assert log_file.exists()
        assert "hello file" in log_file.read_text(encoding="utf-8")
