"""
Spielkarten Test Configuration - pytest配置文件

该文件提供测试的基础设施，包括：
- 基于内置YAML资源和内存字典的解析器fixture
- 可重现的随机数生成器
- 默认解析器的隔离
- 测试标记定义

所有测试都会自动加载这些配置。
"""

import random

import pytest

from spielkarten.core.deck import DeckFactory
from spielkarten.core.locale import (
    US_ENGLISH,
    DictTranslationStore,
    LocaleResolver,
    YamlTranslationStore,
    configure_default_resolver,
    reset_default_resolver,
)


@pytest.fixture(scope="session")
def yaml_store():
    """内置YAML翻译资源"""
    return YamlTranslationStore()


@pytest.fixture
def resolver(yaml_store):
    """基于内置资源、默认语言为美式英语的解析器"""
    return LocaleResolver(yaml_store, US_ENGLISH)


@pytest.fixture
def dict_store():
    """最小的内存翻译存储，德语只覆盖部分键"""
    return DictTranslationStore(
        {
            "en-US": {
                "ace-short": "A", "ace-name": "Ace", "ace-value": "14",
                "ten-short": "10", "ten-name": "Ten", "ten-value": "10",
                "joker-short": "*", "joker-value": "many",
                "spades-letter": "S", "spades-symbol": "♠", "spades-name": "Spades",
                "of-connector": "of",
            },
            "de": {
                "ace-name": "Ass",
                "spades-name": "Spaten",
                "of-connector": "von",
            },
        }
    )


@pytest.fixture
def dict_resolver(dict_store):
    """基于内存翻译存储的解析器"""
    return LocaleResolver(dict_store, US_ENGLISH)


@pytest.fixture
def seeded_rng():
    """固定种子的随机数生成器"""
    return random.Random(1234)


@pytest.fixture
def factory(resolver, seeded_rng):
    """使用内置资源和固定种子的牌组工厂"""
    return DeckFactory(resolver, seeded_rng)


@pytest.fixture(autouse=True)
def isolated_default_resolver(resolver):
    """每个测试使用全新的默认解析器，测试结束后清除"""
    configure_default_resolver(resolver)
    yield resolver
    reset_default_resolver()


# 测试标记定义
def pytest_configure(config):
    """pytest配置"""
    config.addinivalue_line(
        "markers", "property_test: 标记基于属性的测试"
    )
    config.addinivalue_line(
        "markers", "integration: 标记集成测试"
    )
