"""
Spielkarten - 可本地化的扑克牌领域库

提供牌点、花色、卡牌与牌组的领域模型，以及按语言环境渲染卡牌的能力。

Modules:
    core.locale: 语言环境标识、翻译存储与键解析
    core.deck: 牌点、花色、卡牌、牌组与牌组工厂
    application: 配置管理与日志设置
    ui.cli: 控制台演示
"""

from .core.deck import Card, Deck, DeckFactory, Rank, Suit
from .core.locale import GERMAN, US_ENGLISH, LocaleResolver

__version__ = "0.2.0"

__all__ = [
    'Card',
    'Deck',
    'DeckFactory',
    'Rank',
    'Suit',
    'LocaleResolver',
    'US_ENGLISH',
    'GERMAN',
]
