"""基于属性的测试(hypothesis)"""
