"""计算器模块 - 带缓存的求值器和输入会话"""
from .evaluator import ExpressionEvaluator
from .session import CalculatorSession

__all__ = ['ExpressionEvaluator', 'CalculatorSession']
