"""
Spielkarten CLI演示

构建内置牌组，按多种语言打印符号简写、字母简写和全名。
"""

import argparse
import logging
import sys
from typing import List, Optional

from ...application import ConfigService, ConfigType
from ...core.exceptions import SpielkartenError
from ...core.locale import GERMAN, US_ENGLISH, LocaleId, configure_default_resolver
from .render import DeckRenderer

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="spielkarten", description="扑克牌本地化演示")
    parser.add_argument("--deck", action="append", dest="decks",
                        help="要演示的牌组变体，可重复；默认演示所有内置变体")
    parser.add_argument("--locale", action="append", dest="locales",
                        help="要演示的语言标签，可重复；默认en-US和de")
    parser.add_argument("--shuffle", action="store_true", help="演示前洗牌")
    parser.add_argument("--seed", type=int, default=None, help="洗牌随机种子")
    parser.add_argument("--no-long", action="store_true", help="不打印全名")
    parser.add_argument("--log-profile", default="quiet", help="日志配置文件名")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    演示入口

    Returns:
        int: 进程退出码
    """
    args = build_parser().parse_args(argv)

    config_service = ConfigService()
    config_service.setup_logging(args.log_profile)
    if args.seed is not None:
        config_service.update_config(ConfigType.DECK, "default", {"random_seed": args.seed})

    factory = config_service.build_deck_factory()
    configure_default_resolver(factory.resolver)

    locales = [LocaleId.parse(tag) for tag in args.locales] if args.locales else [US_ENGLISH, GERMAN]
    variants = args.decks or factory.available_variants()

    print("spielkarten demo\n")
    try:
        for name in variants:
            deck = factory.variant_deck(name)
            if args.shuffle:
                deck = deck.shuffle()
            title = f"{name.capitalize()} Deck"
            print(DeckRenderer.render_deck(title, deck, locales, long_names=not args.no_long))
    except SpielkartenError as e:
        logger.error(f"演示失败: {e}")
        print(f"错误: {e}", file=sys.stderr)
        return 1
    return 0

