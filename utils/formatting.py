"""utils/formatting.py"""
import numpy as np

from config.config import SESSION_CONFIG


def normalize_expression(raw, glyph_map=None):
    """把UI字形（× ÷ − π）替换为规范ASCII形式"""
    if glyph_map is None:
        glyph_map = SESSION_CONFIG["glyph_map"]
    return ''.join(glyph_map.get(ch, ch) for ch in raw)


def format_result(value):
    """
    结果转为可以继续输入的字符串：
    不使用科学计数法（tokenizer不认识 'e'），整数不带 '.0'
    """
    value = float(value)
    if value == 0:
        return "0"  # 避免 "-0"
    return np.format_float_positional(value, trim='-')
