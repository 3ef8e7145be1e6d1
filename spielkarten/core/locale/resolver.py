"""
翻译键解析器.

将规范名称和后缀拼接为翻译键，先在目标语言中查询，
未找到时回退到默认语言，仍未找到则视为翻译资源不完整.
"""

import logging
from typing import Optional, Union

from ..exceptions import UnresolvedKeyError
from .store import TranslationStore, YamlTranslationStore
from .types import US_ENGLISH, LocaleId, LocaleLike, LocaleSuffix

logger = logging.getLogger(__name__)

DEFAULT_NUMERIC_VALUE = 0


class LocaleResolver:
    """
    翻译键解析器.

    纯查询层，不修改翻译存储.

    Attributes:
        store: 翻译存储
        default_locale: 回退用的默认语言
        strict: 为False时无法解析的键返回键本身而不是抛出异常

    Examples:
        >>> resolver = LocaleResolver(store)
        >>> resolver.resolve("queen", LocaleSuffix.SHORT, GERMAN)
        'D'
    """

    def __init__(self, store: TranslationStore, default_locale: LocaleLike = US_ENGLISH,
                 strict: bool = True) -> None:
        self.store = store
        self.default_locale = LocaleId.parse(default_locale)
        self.strict = strict

    @staticmethod
    def compose_key(canonical_name: str, suffix: Union[LocaleSuffix, str]) -> str:
        """
        拼接翻译键.

        规范名称来自封闭集合且不含分隔符，直接拼接即可.

        Args:
            canonical_name: 规范名称，如"spades"
            suffix: 后缀，如LocaleSuffix.LETTER

        Returns:
            str: 翻译键，如"spades-letter"
        """
        if isinstance(suffix, LocaleSuffix):
            suffix = suffix.value
        return f"{canonical_name}{suffix}"

    def lookup(self, key: str, locale: Optional[LocaleLike] = None) -> str:
        """
        按完整翻译键查询，带默认语言回退.

        Args:
            key: 翻译键
            locale: 目标语言，None表示默认语言

        Returns:
            str: 翻译结果

        Raises:
            UnresolvedKeyError: 目标语言和默认语言都没有该键(严格模式)
        """
        target = LocaleId.parse(locale) if locale is not None else self.default_locale

        value = self.store.lookup(target.tag, key)
        if value is not None:
            return value

        if target != self.default_locale:
            logger.debug(f"翻译键 '{key}' 在 {target} 中不存在，回退到 {self.default_locale}")
            value = self.store.lookup(self.default_locale.tag, key)
            if value is not None:
                return value

        if not self.strict:
            logger.warning(f"无法解析翻译键 '{key}' (语言: {target})，使用键本身")
            return key

        logger.error(f"无法解析翻译键 '{key}' (语言: {target}, 默认语言: {self.default_locale})")
        raise UnresolvedKeyError(key, target.tag, self.default_locale.tag)

    def resolve(self, canonical_name: str, suffix: Union[LocaleSuffix, str],
                locale: Optional[LocaleLike] = None) -> str:
        """
        解析规范名称在指定语言下的表示.

        Args:
            canonical_name: 规范名称
            suffix: 翻译键后缀
            locale: 目标语言，None表示默认语言

        Returns:
            str: 翻译结果
        """
        return self.lookup(self.compose_key(canonical_name, suffix), locale)

    def resolve_numeric(self, canonical_name: str, locale: Optional[LocaleLike] = None) -> int:
        """
        解析规范名称的数值("-value"后缀).

        数值只影响游戏变体，不影响卡牌身份，解析失败时返回0而不是抛出异常.

        Args:
            canonical_name: 规范名称
            locale: 目标语言，None表示默认语言

        Returns:
            int: 非负整数值，解析失败时为0
        """
        raw = self.resolve(canonical_name, LocaleSuffix.VALUE, locale).strip()
        if raw.isascii() and raw.isdigit():
            return int(raw)

        logger.warning(f"'{canonical_name}' 的数值无法解析: {raw!r}，使用默认值 {DEFAULT_NUMERIC_VALUE}")
        return DEFAULT_NUMERIC_VALUE


_default_resolver: Optional[LocaleResolver] = None


def configure_default_resolver(resolver: LocaleResolver) -> LocaleResolver:
    """
    设置进程级默认解析器.

    应在启动时调用一次；测试可以用它替换默认语言或翻译存储.

    Args:
        resolver: 新的默认解析器

    Returns:
        LocaleResolver: 传入的解析器
    """
    global _default_resolver
    _default_resolver = resolver
    logger.debug(f"默认解析器已设置，默认语言: {resolver.default_locale}")
    return resolver


def get_default_resolver() -> LocaleResolver:
    """
    获取进程级默认解析器.

    未显式设置时，使用内置YAML资源和美式英语构建一个.
    """
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = LocaleResolver(YamlTranslationStore(), US_ENGLISH)
    return _default_resolver


def reset_default_resolver() -> None:
    """清除默认解析器，下次获取时重新构建"""
    global _default_resolver
    _default_resolver = None
