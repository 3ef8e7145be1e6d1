"""扑克牌CLI渲染模块.

负责把牌组渲染为命令行演示文本，
所有渲染方法都是纯函数，仅依赖传入的牌组和语言.
"""

from typing import List, Sequence

from ...core.deck import Deck
from ...core.locale import GERMAN, US_ENGLISH, LocaleId


class DeckRenderer:
    """CLI牌组渲染器."""

    LABEL_WIDTH = 32

    @staticmethod
    def _label(text: str) -> str:
        return f"   {text + ':':<{DeckRenderer.LABEL_WIDTH}}"

    @staticmethod
    def render_symbols(deck: Deck, locale: LocaleId) -> str:
        """渲染带花色符号的简写行.

        Args:
            deck: 牌组
            locale: 语言

        Returns:
            形如"   Short With Symbols (de):      A♠ K♠ ..."的一行
        """
        return DeckRenderer._label(f"Short With Symbols ({locale})") + deck.render(locale)

    @staticmethod
    def render_letters(deck: Deck, locale: LocaleId) -> str:
        """渲染只用字母的简写行."""
        return DeckRenderer._label(f"Short With Letters ({locale})") + deck.render_text(locale)

    @staticmethod
    def render_long_names(deck: Deck, locales: Sequence[LocaleId]) -> List[str]:
        """渲染每张牌在各语言中的全名."""
        lines = ["   Long:"]
        for card in deck:
            for locale in locales:
                lines.append(f"      {card.long_name(locale)}")
        return lines

    @staticmethod
    def render_deck(title: str, deck: Deck, locales: Sequence[LocaleId] = (US_ENGLISH, GERMAN),
                    long_names: bool = True) -> str:
        """渲染一个牌组的完整演示.

        Args:
            title: 标题，如"French Deck"
            deck: 牌组
            locales: 要演示的语言
            long_names: 是否包含全名

        Returns:
            多行演示文本
        """
        lines = [f"{title} ({len(deck)} cards):"]
        for locale in locales:
            lines.append(DeckRenderer.render_symbols(deck, locale))
        for locale in locales:
            lines.append(DeckRenderer.render_letters(deck, locale))
        if long_names:
            lines.extend(DeckRenderer.render_long_names(deck, locales))
        lines.append("")
        return "\n".join(lines)
