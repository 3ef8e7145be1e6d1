"""
扑克牌数据结构.

定义不可变的Card类，由一个牌点和一个花色组成，渲染委托给牌点和花色.
"""

from dataclasses import InitVar, dataclass
from typing import Optional, Union

from ..locale import LocaleResolver, LocaleSuffix
from ..locale.types import LocaleLike
from .rank import Rank
from .suit import Suit

CONNECTOR_KEY = "of-connector"


@dataclass(frozen=True)
class Card:
    """
    表示一张扑克牌.

    不可变数据类，两张牌的牌点和花色都相同即相等.
    可以直接用规范名称构造，也可以用from_parts组合已构建的Rank和Suit.

    Attributes:
        rank: 牌点
        suit: 花色

    Examples:
        >>> card = Card("queen", "clubs")
        >>> card.render(US_ENGLISH)
        'Q♣'
        >>> card.render_text(GERMAN)
        'DK'
    """

    rank: Union[Rank, str]
    suit: Union[Suit, str]
    resolver: InitVar[Optional[LocaleResolver]] = None

    def __post_init__(self, resolver: Optional[LocaleResolver]) -> None:
        """
        将规范名称转换为Rank和Suit并封存牌点数值.

        Raises:
            TypeError: 当牌点或花色类型无效时
        """
        rank = self.rank
        suit = self.suit
        if isinstance(rank, str):
            rank = Rank(rank, resolver)
        if isinstance(suit, str):
            suit = Suit(suit, resolver)
        if not isinstance(rank, Rank):
            raise TypeError(f"牌点必须是Rank或字符串，实际: {type(rank)}")
        if not isinstance(suit, Suit):
            raise TypeError(f"花色必须是Suit或字符串，实际: {type(suit)}")

        object.__setattr__(self, 'rank', rank.seal())
        object.__setattr__(self, 'suit', suit)

    @classmethod
    def from_parts(cls, rank: Rank, suit: Suit) -> 'Card':
        """
        用已构建的牌点和花色创建卡牌.

        牌组工厂用它让同一牌组中相同牌点共享修订后的数值.

        Args:
            rank: 牌点
            suit: 花色

        Returns:
            Card: 新卡牌

        Raises:
            TypeError: 当参数不是Rank和Suit时
        """
        if not isinstance(rank, Rank):
            raise TypeError(f"牌点必须是Rank类型，实际: {type(rank)}")
        if not isinstance(suit, Suit):
            raise TypeError(f"花色必须是Suit类型，实际: {type(suit)}")
        return cls(rank, suit)

    @property
    def value(self) -> int:
        return self.rank.value

    def render(self, locale: Optional[LocaleLike] = None) -> str:
        """牌点简写加花色符号，如"Q♣" """
        return f"{self.rank.short(locale)}{self.suit.symbol(locale)}"

    def render_text(self, locale: Optional[LocaleLike] = None) -> str:
        """牌点简写加花色字母，用于无法显示花色符号的环境，如"QC" """
        return f"{self.rank.short(locale)}{self.suit.letter(locale)}"

    def long_name(self, locale: Optional[LocaleLike] = None) -> str:
        """
        卡牌全名.

        牌点名、连接词和花色名都通过牌点的解析器获得，
        即使牌点和花色来自不同的解析器，全名也只使用一套翻译.

        Returns:
            str: 如"Queen of Clubs"或"Dame von Klee"
        """
        resolver = self.rank.resolver
        rank_name = resolver.resolve(self.rank.canonical_name, LocaleSuffix.NAME, locale)
        suit_name = resolver.resolve(self.suit.canonical_name, LocaleSuffix.NAME, locale)
        connector = resolver.lookup(CONNECTOR_KEY, locale)
        return f"{rank_name} {connector} {suit_name}"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Card({self.rank.canonical_name!r}, {self.suit.canonical_name!r})"
