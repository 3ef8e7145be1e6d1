"""
花色数据结构.

定义不可变的Suit类，字母、符号和全名都通过翻译解析器获得.
"""

from typing import Optional

from ..locale import LocaleResolver, LocaleSuffix, get_default_resolver
from ..locale.types import LocaleLike


class Suit:
    """
    表示一种花色.

    身份为规范名称，构造后不可变.

    Attributes:
        canonical_name: 规范名称，如"spades"

    Examples:
        >>> suit = Suit("clubs")
        >>> suit.symbol()
        '♣'
        >>> suit.letter(GERMAN)
        'K'
    """

    __slots__ = ('_canonical_name', '_resolver')

    def __init__(self, canonical_name: str, resolver: Optional[LocaleResolver] = None) -> None:
        if not isinstance(canonical_name, str):
            raise TypeError(f"花色名称必须是字符串，实际: {type(canonical_name)}")
        object.__setattr__(self, "_canonical_name", canonical_name)
        object.__setattr__(self, "_resolver", resolver or get_default_resolver())

    @property
    def canonical_name(self) -> str:
        return self._canonical_name

    @property
    def resolver(self) -> LocaleResolver:
        return self._resolver

    def letter(self, locale: Optional[LocaleLike] = None) -> str:
        """花色的单字母缩写，如德语中梅花为"K"(Klee)"""
        return self._resolver.resolve(self._canonical_name, LocaleSuffix.LETTER, locale)

    def symbol(self, locale: Optional[LocaleLike] = None) -> str:
        """花色符号，如"♠" """
        return self._resolver.resolve(self._canonical_name, LocaleSuffix.SYMBOL, locale)

    def name(self, locale: Optional[LocaleLike] = None) -> str:
        """花色全名，如"Spades"或"Spaten" """
        return self._resolver.resolve(self._canonical_name, LocaleSuffix.NAME, locale)

    def render(self, locale: Optional[LocaleLike] = None) -> str:
        return self.symbol(locale)

    def __setattr__(self, key, value):
        raise AttributeError("Suit对象不可修改")

    def __reduce__(self):
        # 复制和序列化通过构造函数重建，不经过__setattr__
        return (Suit, (self._canonical_name, self._resolver))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Suit):
            return NotImplemented
        return self._canonical_name == other._canonical_name

    def __hash__(self) -> int:
        return hash(('suit', self._canonical_name))

    def __str__(self) -> str:
        return self.symbol()

    def __repr__(self) -> str:
        return f"Suit({self._canonical_name!r})"
