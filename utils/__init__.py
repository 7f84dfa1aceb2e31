"""工具模块"""
from .formatting import normalize_expression, format_result

__all__ = ['normalize_expression', 'format_result']
