"""
语言环境模块.

提供语言环境标识、翻译存储契约和翻译键解析器.
"""

from .types import GERMAN, US_ENGLISH, LocaleId, LocaleSuffix, LocalizedRenderable
from .store import DictTranslationStore, TranslationStore, YamlTranslationStore
from .resolver import (
    LocaleResolver,
    configure_default_resolver,
    get_default_resolver,
    reset_default_resolver,
)

__all__ = [
    'LocaleId',
    'LocaleSuffix',
    'LocalizedRenderable',
    'US_ENGLISH',
    'GERMAN',
    'TranslationStore',
    'DictTranslationStore',
    'YamlTranslationStore',
    'LocaleResolver',
    'configure_default_resolver',
    'get_default_resolver',
    'reset_default_resolver',
]
