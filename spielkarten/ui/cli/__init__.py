"""Spielkarten CLI演示模块"""

from .render import DeckRenderer
from .demo import main

__all__ = ['DeckRenderer', 'main']
