"""
扑克牌领域异常定义
区分内容配置错误(向上抛)和可恢复的查询结果(返回None)
"""

from typing import Optional


class SpielkartenError(Exception):
    """扑克牌库基础异常类"""
    pass


class TranslationError(SpielkartenError):
    """翻译相关异常基类"""
    pass


class UnresolvedKeyError(TranslationError, KeyError):
    """
    翻译键无法解析异常

    请求的语言环境和默认语言环境都缺少该键，说明翻译资源不完整.
    """

    def __init__(self, key: str, locale: str, default_locale: Optional[str] = None):
        self.key = key
        self.locale = locale
        self.default_locale = default_locale
        message = f"无法解析翻译键 '{key}' (语言: {locale}"
        if default_locale and default_locale != locale:
            message += f", 默认语言: {default_locale}"
        message += ")"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError会给消息加引号
        return self.args[0]


class LocaleResourceError(TranslationError):
    """翻译资源文件缺失或格式错误异常"""
    pass


class UnknownVariantError(SpielkartenError, KeyError):
    """未注册的牌组变体异常"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"未知的牌组变体: {name}")

    def __str__(self) -> str:
        return self.args[0]


class DeckConfigError(SpielkartenError):
    """牌组变体配置错误异常"""
    pass


class RankSealedError(SpielkartenError):
    """牌点已进入卡牌后仍尝试修订数值异常"""
    pass
