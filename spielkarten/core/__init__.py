"""
Spielkarten Core - 纯领域逻辑层

核心模块只依赖其他核心模块，不依赖应用层或UI层。

Modules:
    locale: 语言环境与翻译键解析
    deck: 卡牌身份、牌组操作和牌组工厂
    exceptions: 领域异常定义
"""
