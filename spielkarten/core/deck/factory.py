"""
牌组工厂.

按变体配置由牌点×花色的笛卡尔积构建牌组.
内置法式52张牌组和皮纳克尔48张牌组，可以注册新的变体.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Tuple

from ..exceptions import DeckConfigError, UnknownVariantError
from ..locale import LocaleResolver, get_default_resolver
from .card import Card
from .deck import Deck
from .rank import Rank
from .suit import Suit
from .types import (
    FRENCH_RANKS, FRENCH_SUITS, JACK, KING, PINOCHLE_RANKS, QUEEN, TEN,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VariantSpec:
    """
    牌组变体配置.

    Attributes:
        name: 变体名称
        ranks: 牌点规范名称，按牌序排列
        suits: 花色规范名称，按牌序排列
        value_overrides: 牌点数值覆盖，在组成卡牌之前应用
        copies: 每张牌连续出现的次数
        aliases: 变体别名
        description: 说明
    """

    name: str
    ranks: Tuple[str, ...]
    suits: Tuple[str, ...] = FRENCH_SUITS
    value_overrides: Mapping[str, int] = field(default_factory=dict)
    copies: int = 1
    aliases: Tuple[str, ...] = ()
    description: str = ""

    def __post_init__(self) -> None:
        """
        验证变体配置.

        Raises:
            DeckConfigError: 当配置无效时
        """
        if not self.name:
            raise DeckConfigError("变体名称不能为空")
        if not self.ranks:
            raise DeckConfigError(f"变体 {self.name} 没有牌点")
        if not self.suits:
            raise DeckConfigError(f"变体 {self.name} 没有花色")
        if len(set(self.ranks)) != len(self.ranks):
            raise DeckConfigError(f"变体 {self.name} 存在重复的牌点")
        if len(set(self.suits)) != len(self.suits):
            raise DeckConfigError(f"变体 {self.name} 存在重复的花色")
        if self.copies < 1:
            raise DeckConfigError(f"变体 {self.name} 的副本数必须至少为1: {self.copies}")

        unknown = set(self.value_overrides) - set(self.ranks)
        if unknown:
            raise DeckConfigError(f"变体 {self.name} 覆盖了不存在的牌点: {sorted(unknown)}")

    @property
    def size(self) -> int:
        """牌组张数"""
        return len(self.ranks) * len(self.suits) * self.copies


FRENCH = VariantSpec(
    name="french",
    ranks=FRENCH_RANKS,
    aliases=("standard",),
    description="标准52张法式牌组",
)

# 皮纳克尔牌序为A、10、K、Q、J、9，数值按牌序修订
PINOCHLE = VariantSpec(
    name="pinochle",
    ranks=PINOCHLE_RANKS,
    value_overrides={TEN: 13, KING: 12, QUEEN: 11, JACK: 10},
    copies=2,
    description="皮纳克尔48张牌组，每张牌两份",
)

BUILTIN_VARIANTS: Tuple[VariantSpec, ...] = (FRENCH, PINOCHLE)


class DeckFactory:
    """
    牌组工厂.

    同一牌组中每个牌点只构建一次并在各花色间共享，保证修订后的数值在牌组内一致.

    Examples:
        >>> factory = DeckFactory()
        >>> len(factory.standard_deck())
        52
        >>> len(factory.pinochle_deck())
        48
    """

    def __init__(self, resolver: Optional[LocaleResolver] = None,
                 rng: Optional[random.Random] = None) -> None:
        """
        初始化牌组工厂.

        Args:
            resolver: 构建牌点和花色使用的解析器，None表示默认解析器
            rng: 传给所建牌组的随机数生成器，None表示每个牌组各自新建
        """
        self.resolver = resolver or get_default_resolver()
        self._rng = rng
        self._variants: Dict[str, VariantSpec] = {}
        self._aliases: Dict[str, str] = {}
        for spec in BUILTIN_VARIANTS:
            self.register_variant(spec)

    def register_variant(self, spec: VariantSpec, replace: bool = False) -> None:
        """
        注册牌组变体.

        Args:
            spec: 变体配置
            replace: 是否允许替换同名变体

        Raises:
            DeckConfigError: 当名称或别名已被占用且不允许替换时
        """
        names = (spec.name,) + tuple(spec.aliases)
        if not replace:
            for name in names:
                if name in self._variants or name in self._aliases:
                    raise DeckConfigError(f"变体名称已被占用: {name}")

        self._variants[spec.name] = spec
        for alias in spec.aliases:
            self._aliases[alias] = spec.name
        logger.debug(f"已注册牌组变体 {spec.name} ({spec.size} 张)")

    def available_variants(self) -> List[str]:
        """返回已注册的变体名称(不含别名)"""
        return sorted(self._variants)

    def get_variant(self, name: str) -> VariantSpec:
        """
        按名称或别名获取变体配置.

        Raises:
            UnknownVariantError: 当变体未注册时
        """
        canonical = self._aliases.get(name, name)
        if canonical not in self._variants:
            raise UnknownVariantError(name)
        return self._variants[canonical]

    def standard_deck(self) -> Deck:
        """标准52张牌组：4种花色×13种牌点，花色在外层"""
        return self.build(FRENCH)

    def pinochle_deck(self) -> Deck:
        """皮纳克尔48张牌组：4种花色×6种牌点×2份"""
        return self.build(PINOCHLE)

    def variant_deck(self, name: str) -> Deck:
        """
        按变体名称构建牌组.

        Args:
            name: 变体名称或别名，如"pinochle"

        Returns:
            Deck: 新牌组

        Raises:
            UnknownVariantError: 当变体未注册时
        """
        return self.build(self.get_variant(name))

    def build(self, spec: VariantSpec) -> Deck:
        """
        按变体配置构建牌组.

        牌序：花色在外层，牌点在内层；每张牌连续出现copies次.

        Args:
            spec: 变体配置

        Returns:
            Deck: 新牌组
        """
        ranks = []
        for rank_name in spec.ranks:
            rank = Rank(rank_name, self.resolver)
            if rank_name in spec.value_overrides:
                rank.revise_value(spec.value_overrides[rank_name])
            ranks.append(rank)
        suits = [Suit(suit_name, self.resolver) for suit_name in spec.suits]

        deck = Deck(rng=self._rng)
        for suit in suits:
            for rank in ranks:
                card = Card.from_parts(rank, suit)
                for _ in range(spec.copies):
                    deck.add(card)

        logger.info(f"已构建牌组 {spec.name}: {len(deck)} 张")
        return deck
