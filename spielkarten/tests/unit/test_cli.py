"""
CLI演示单元测试

测试渲染器输出和演示入口的参数处理。
"""

import logging

import pytest

from spielkarten.application.config_service import LOG_LEVEL_ENV_VAR, ROOT_LOGGER_NAME
from spielkarten.core.deck import Card, Deck
from spielkarten.core.locale import GERMAN, US_ENGLISH
from spielkarten.ui.cli import DeckRenderer, main


class TestDeckRenderer:
    """DeckRenderer测试"""

    def setup_method(self):
        self.deck = Deck([Card("queen", "clubs"), Card("ten", "hearts")])

    def test_render_symbols(self):
        line = DeckRenderer.render_symbols(self.deck, GERMAN)
        assert line.startswith("   Short With Symbols (de):")
        assert line.endswith("D♣ 10♥")

    def test_render_letters(self):
        line = DeckRenderer.render_letters(self.deck, GERMAN)
        assert line.endswith("DK 10H")

    def test_render_long_names(self):
        lines = DeckRenderer.render_long_names(self.deck, [US_ENGLISH, GERMAN])
        assert lines == [
            "   Long:",
            "      Queen of Clubs",
            "      Dame von Klee",
            "      Ten of Hearts",
            "      Zehn von Herzen",
        ]

    def test_render_deck(self):
        text = DeckRenderer.render_deck("Tiny Deck", self.deck)
        lines = text.splitlines()

        assert lines[0] == "Tiny Deck (2 cards):"
        assert lines[1].endswith("Q♣ 10♥")
        assert lines[2].endswith("D♣ 10♥")
        assert lines[3].endswith("QC 10H")
        assert lines[4].endswith("DK 10H")
        assert "      Dame von Klee" in lines

    def test_render_deck_without_long_names(self):
        text = DeckRenderer.render_deck("Tiny Deck", self.deck, [US_ENGLISH], long_names=False)
        assert "Long:" not in text
        assert len(text.splitlines()) == 3


class TestDemoMain:
    """演示入口测试"""

    @pytest.fixture(autouse=True)
    def remove_demo_handlers(self):
        """演示入口会设置日志，测试结束后移除处理器"""
        yield
        root = logging.getLogger(ROOT_LOGGER_NAME)
        for handler in list(root.handlers):
            if getattr(handler, "_spielkarten_managed", False):
                root.removeHandler(handler)
                handler.close()
        root.setLevel(logging.NOTSET)

    def test_main_all_decks(self, capsys):
        assert main([]) == 0

        out = capsys.readouterr().out
        assert "French Deck (52 cards):" in out
        assert "Pinochle Deck (48 cards):" in out
        assert "A♠ A♠ 10♠ 10♠" in out
        assert "Ace of Spades" in out
        assert "Ass von Spaten" in out

    def test_main_single_deck_and_locale(self, capsys):
        assert main(["--deck", "pinochle", "--locale", "de", "--no-long"]) == 0

        out = capsys.readouterr().out
        assert "French Deck" not in out
        assert "AS AS 10S 10S" in out
        assert "Short With Letters (de)" in out
        assert "Short With Letters (en-US)" not in out

    def test_main_shuffle_with_seed(self, capsys):
        assert main(["--deck", "french", "--shuffle", "--seed", "3", "--no-long"]) == 0
        first = capsys.readouterr().out
        assert main(["--deck", "french", "--shuffle", "--seed", "3", "--no-long"]) == 0
        second = capsys.readouterr().out

        assert first == second

    def test_main_unknown_deck(self, capsys):
        assert main(["--deck", "skat"]) == 1
        assert "skat" in capsys.readouterr().err

    def test_main_bad_option(self):
        with pytest.raises(SystemExit):
            main(["--unknown-option"])

    def test_main_ignores_invalid_log_level_env(self, monkeypatch, capsys):
        """测试无效的日志级别环境变量不会中断演示"""
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "verbose")

        assert main(["--deck", "french", "--no-long"]) == 0
        assert "French Deck (52 cards):" in capsys.readouterr().out
