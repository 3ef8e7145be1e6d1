"""
扑克牌组管理模块.

提供Rank、Suit、Card和Deck类，以及按变体构建牌组的DeckFactory.
"""

from .rank import Rank
from .suit import Suit
from .card import Card
from .deck import Deck
from .factory import DeckFactory, VariantSpec

__all__ = ['Rank', 'Suit', 'Card', 'Deck', 'DeckFactory', 'VariantSpec']
