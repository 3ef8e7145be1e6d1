"""
Anti-Cheat System - 反作弊系统

确保测试使用真实的核心模块对象，而不是mock数据。

Modules:
    core_usage_checker.py: 核心模块使用检查器
"""

from .core_usage_checker import CoreUsageChecker

__all__ = ['CoreUsageChecker']
