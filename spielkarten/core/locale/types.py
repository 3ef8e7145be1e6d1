"""
语言环境相关类型定义.

定义语言环境标识、翻译键后缀以及可本地化渲染的接口.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Union, runtime_checkable


@dataclass(frozen=True)
class LocaleId:
    """
    语言环境标识.

    对BCP 47语言标签的轻量封装，例如"en-US"或"de".

    Attributes:
        tag: 语言标签

    Examples:
        >>> str(LocaleId("de"))
        'de'
    """

    tag: str

    def __post_init__(self) -> None:
        if not isinstance(self.tag, str) or not self.tag.strip():
            raise ValueError(f"语言标签必须是非空字符串，实际: {self.tag!r}")

    def __str__(self) -> str:
        return self.tag

    @classmethod
    def parse(cls, value: Union['LocaleId', str]) -> 'LocaleId':
        """
        将字符串或LocaleId统一转换为LocaleId.

        Args:
            value: 语言标签字符串或LocaleId

        Returns:
            LocaleId: 对应的语言环境标识
        """
        if isinstance(value, LocaleId):
            return value
        return cls(value.strip())


US_ENGLISH = LocaleId("en-US")
GERMAN = LocaleId("de")

LocaleLike = Union[LocaleId, str]


class LocaleSuffix(Enum):
    """
    翻译键后缀枚举.

    翻译键由规范名称和后缀直接拼接而成，例如"spades" + "-letter".
    """

    VALUE = "-value"
    SHORT = "-short"
    LETTER = "-letter"
    SYMBOL = "-symbol"
    NAME = "-name"


@runtime_checkable
class LocalizedRenderable(Protocol):
    """可按语言环境渲染为字符串的对象"""

    def render(self, locale: LocaleLike) -> str:
        ...
