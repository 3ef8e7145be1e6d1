"""
扑克牌规范名称定义.

规范名称是牌点和花色的身份，也是翻译键的前缀.
"""

from typing import List, Tuple

# 牌点
TWO = "two"
THREE = "three"
FOUR = "four"
FIVE = "five"
SIX = "six"
SEVEN = "seven"
EIGHT = "eight"
NINE = "nine"
TEN = "ten"
JACK = "jack"
QUEEN = "queen"
KING = "king"
ACE = "ace"

# 花色
SPADES = "spades"
HEARTS = "hearts"
DIAMONDS = "diamonds"
CLUBS = "clubs"

# 枚举顺序决定牌组中的牌序：花色在外层，牌点在内层变化最快
FRENCH_SUITS: Tuple[str, ...] = (SPADES, HEARTS, DIAMONDS, CLUBS)
FRENCH_RANKS: Tuple[str, ...] = (
    ACE, KING, QUEEN, JACK, TEN, NINE, EIGHT, SEVEN, SIX, FIVE, FOUR, THREE, TWO,
)
PINOCHLE_RANKS: Tuple[str, ...] = (ACE, TEN, KING, QUEEN, JACK, NINE)


def get_all_suits() -> List[str]:
    """
    获取所有花色的规范名称.

    Returns:
        List[str]: 按牌组顺序排列的四种花色
    """
    return list(FRENCH_SUITS)


def get_all_ranks() -> List[str]:
    """
    获取所有牌点的规范名称.

    Returns:
        List[str]: 按牌组顺序排列的13种牌点
    """
    return list(FRENCH_RANKS)
