"""
牌点数据结构.

Rank的身份是规范名称，数值在构造时从默认语言解析一次.
数值可以由牌组工厂在组成卡牌之前修订；一旦进入卡牌就被封存.
"""

import logging
from typing import Optional

from ..exceptions import RankSealedError
from ..locale import LocaleResolver, LocaleSuffix, get_default_resolver
from ..locale.types import LocaleLike

logger = logging.getLogger(__name__)


class Rank:
    """
    表示一种牌点.

    相等性和哈希只取决于规范名称，数值不参与身份比较.

    Attributes:
        canonical_name: 规范名称，如"ace"
        value: 数值，默认来自翻译资源的"-value"键

    Examples:
        >>> rank = Rank("king")
        >>> rank.short()
        'K'
        >>> rank.value
        13
        >>> Rank("ten").short(GERMAN)
        '10'
    """

    def __init__(self, canonical_name: str, resolver: Optional[LocaleResolver] = None) -> None:
        if not isinstance(canonical_name, str):
            raise TypeError(f"牌点名称必须是字符串，实际: {type(canonical_name)}")
        self._canonical_name = canonical_name
        self._resolver = resolver or get_default_resolver()
        # 之后切换语言不会影响已保存的数值
        self._value = self._resolver.resolve_numeric(canonical_name, self._resolver.default_locale)
        self._sealed = False

    @property
    def canonical_name(self) -> str:
        return self._canonical_name

    @property
    def resolver(self) -> LocaleResolver:
        return self._resolver

    @property
    def value(self) -> int:
        return self._value

    @property
    def sealed(self) -> bool:
        return self._sealed

    def get_value(self) -> int:
        return self._value

    def revise_value(self, new_value: int) -> None:
        """
        修订数值.

        仅供牌组工厂在组成卡牌之前使用，例如皮纳克尔中10的数值.

        Args:
            new_value: 新的非负整数值

        Raises:
            RankSealedError: 当牌点已经进入卡牌时
            TypeError: 当数值不是整数时
            ValueError: 当数值为负数时
        """
        if self._sealed:
            raise RankSealedError(f"牌点 {self._canonical_name} 已进入卡牌，不能修订数值")
        if isinstance(new_value, bool) or not isinstance(new_value, int):
            raise TypeError(f"数值必须是整数，实际: {type(new_value)}")
        if new_value < 0:
            raise ValueError(f"数值不能为负数: {new_value}")

        logger.debug(f"牌点 {self._canonical_name} 数值修订: {self._value} -> {new_value}")
        self._value = new_value

    def seal(self) -> 'Rank':
        """封存数值，此后revise_value会失败"""
        self._sealed = True
        return self

    def short(self, locale: Optional[LocaleLike] = None) -> str:
        """
        牌点的简写.

        数字牌为数字本身，人头牌为目标语言中的首字母，如德语Dame为"D".
        """
        return self._resolver.resolve(self._canonical_name, LocaleSuffix.SHORT, locale)

    def letter(self, locale: Optional[LocaleLike] = None) -> str:
        return self.short(locale)

    def name(self, locale: Optional[LocaleLike] = None) -> str:
        """牌点全名，如"Queen"或"Dame" """
        return self._resolver.resolve(self._canonical_name, LocaleSuffix.NAME, locale)

    def render(self, locale: Optional[LocaleLike] = None) -> str:
        return self.short(locale)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self._canonical_name == other._canonical_name

    def __hash__(self) -> int:
        return hash(('rank', self._canonical_name))

    def __str__(self) -> str:
        return self.short()

    def __repr__(self) -> str:
        return f"Rank({self._canonical_name!r}, value={self._value})"
