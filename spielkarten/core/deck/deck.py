"""
牌组管理.

定义Deck类，一个有序、可变的卡牌序列，提供抽牌、洗牌、查找和移除等操作.
越界、空牌组和未找到都返回None，不抛出异常.
"""

import logging
import random
from typing import Iterable, Iterator, List, Optional

from ..locale.types import LocaleLike
from .card import Card

logger = logging.getLogger(__name__)


class Deck:
    """
    表示一副牌.

    顺序即抽牌顺序；允许结构上相同的卡牌出现多次，只以位置区分.
    使用可选的随机数生成器以支持确定性测试.
    不做内部加锁，多个调用方修改同一牌组时需要在外部串行化.

    Attributes:
        _cards: 当前牌组中的牌列表，索引0为第一张
        _rng: 随机数生成器

    Examples:
        >>> deck = Deck([Card("queen", "clubs"), Card("queen", "hearts")])
        >>> deck.draw_first()
        Card('queen', 'clubs')
        >>> len(deck)
        1
    """

    def __init__(self, cards: Optional[Iterable[Card]] = None,
                 rng: Optional[random.Random] = None) -> None:
        """
        初始化牌组.

        Args:
            cards: 初始卡牌，按顺序加入
            rng: 随机数生成器，用于洗牌和随机取牌。如果为None，使用新的随机数生成器
        """
        self._rng = rng or random.Random()
        self._cards: List[Card] = []
        for card in cards or ():
            self.add(card)

    @classmethod
    def from_cards(cls, cards: Iterable[Card], rng: Optional[random.Random] = None) -> 'Deck':
        return cls(cards, rng)

    @property
    def rng(self) -> random.Random:
        return self._rng

    def add(self, card: Card) -> None:
        """
        在末尾加入一张牌.

        Raises:
            TypeError: 当参数不是Card时
        """
        if not isinstance(card, Card):
            raise TypeError(f"只能加入Card，实际: {type(card)}")
        self._cards.append(card)

    def all(self) -> List[Card]:
        """返回所有牌的副本列表"""
        return list(self._cards)

    def contains(self, card: Card) -> bool:
        return card in self._cards

    def draw(self, count: int) -> Optional['Deck']:
        """
        从顶部抽出多张牌.

        全部成功或全部不做：牌不够时牌组保持不变.

        Args:
            count: 要抽的牌数

        Returns:
            Optional[Deck]: 按原顺序排列的新牌组，牌不够时返回None

        Raises:
            ValueError: 当count为负数时
        """
        if count < 0:
            raise ValueError("Count must be non-negative")
        if count > len(self._cards):
            logger.debug(f"无法抽出 {count} 张牌，只剩 {len(self._cards)} 张")
            return None

        drawn = self._cards[:count]
        del self._cards[:count]
        return Deck(drawn, self._rng)

    def draw_first(self) -> Optional[Card]:
        """抽出第一张牌，空牌组返回None"""
        if not self._cards:
            return None
        return self._cards.pop(0)

    def draw_last(self) -> Optional[Card]:
        """抽出最后一张牌，空牌组返回None"""
        if not self._cards:
            return None
        return self._cards.pop()

    def first(self) -> Optional[Card]:
        return self._cards[0] if self._cards else None

    def last(self) -> Optional[Card]:
        return self._cards[-1] if self._cards else None

    def get(self, index: int) -> Optional[Card]:
        """
        按位置查看一张牌.

        Args:
            index: 从0开始的位置，负数视为越界

        Returns:
            Optional[Card]: 该位置的牌，越界时返回None
        """
        if not self._in_range(index):
            return None
        return self._cards[index]

    def random_card(self) -> Optional[Card]:
        """随机查看一张牌但不移除，空牌组返回None"""
        if not self._cards:
            return None
        return self._rng.choice(self._cards)

    def len(self) -> int:
        return len(self._cards)

    def is_empty(self) -> bool:
        return not self._cards

    def position(self, card: Card) -> Optional[int]:
        """
        查找第一张结构上相等的牌的位置.

        Returns:
            Optional[int]: 位置，未找到时返回None
        """
        for index, candidate in enumerate(self._cards):
            if candidate == card:
                return index
        return None

    def remove(self, index: int) -> Optional[Card]:
        """
        移除并返回指定位置的牌.

        Returns:
            Optional[Card]: 被移除的牌，越界时返回None
        """
        if not self._in_range(index):
            logger.debug(f"移除位置越界: {index} (共 {len(self._cards)} 张)")
            return None
        return self._cards.pop(index)

    def remove_card(self, card: Card) -> Optional[Card]:
        """
        移除第一张结构上相等的牌.

        有重复牌时只移除一张.

        Returns:
            Optional[Card]: 被移除的牌，未找到时返回None
        """
        index = self.position(card)
        if index is None:
            return None
        return self._cards.pop(index)

    def shuffle(self) -> 'Deck':
        """
        洗牌.

        使用Fisher-Yates洗牌算法，返回打乱后的新牌组，原牌组不变.

        Returns:
            Deck: 包含相同卡牌的新牌组
        """
        shuffled = list(self._cards)
        self._rng.shuffle(shuffled)
        return Deck(shuffled, self._rng)

    def render(self, locale: Optional[LocaleLike] = None) -> str:
        """所有牌的符号表示，以空格分隔"""
        return " ".join(card.render(locale) for card in self._cards)

    def render_text(self, locale: Optional[LocaleLike] = None) -> str:
        """所有牌的字母表示，以空格分隔"""
        return " ".join(card.render_text(locale) for card in self._cards)

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(list(self._cards))

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Deck):
            return NotImplemented
        return self._cards == other._cards

    __hash__ = None

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Deck(cards={len(self._cards)})"
