"""用户界面层，只依赖核心模块的公共接口"""
