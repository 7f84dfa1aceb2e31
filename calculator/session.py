"""计算器会话 - 输入缓冲区状态（追加、删除、清空、计算、键盘映射）"""
import logging
import string

from config.config import SESSION_CONFIG
from core import EvaluationError, FUNCTION_NAMES, OPERATOR_DEFINITIONS
from utils.formatting import normalize_expression, format_result
from .evaluator import ExpressionEvaluator

logger = logging.getLogger(__name__)

KEY_CALCULATE = ('Enter', '=')
KEY_DELETE = ('Backspace',)
KEY_CLEAR = ('c', 'C', 'Escape')
# 这些操作符之后允许输入负号（负数字面量）
NEGATABLE_AFTER = frozenset('*/%^')


def _is_operator(ch, glyph_map):
    return glyph_map.get(ch, ch) in OPERATOR_DEFINITIONS


class CalculatorSession:
    """计算器输入状态，UI层只负责把按键转发到这里并显示 display"""

    def __init__(self, evaluator=None, glyph_map=None):
        self.evaluator = evaluator or ExpressionEvaluator()
        self.glyph_map = glyph_map if glyph_map is not None else SESSION_CONFIG["glyph_map"]
        self.input = ""
        self.error = None  # 最近一次计算失败的错误

    @property
    def display(self):
        if self.error is not None and not self.input:
            return SESSION_CONFIG["error_display"]
        return self.input or SESSION_CONFIG["empty_display"]

    def press(self, value):
        """
        追加按键内容
        Returns:
            是否接受（缓冲区已以操作符结尾时拒绝再追加操作符）
        """
        if not value:
            return False
        if (_is_operator(value, self.glyph_map) and self.input
                and _is_operator(self.input[-1], self.glyph_map)):
            previous = self.glyph_map.get(self.input[-1], self.input[-1])
            if not (self.glyph_map.get(value, value) == '-' and previous in NEGATABLE_AFTER):
                return False
        self.error = None
        self.input += value
        return True

    def press_function(self, name):
        """追加 'name(' """
        if name not in FUNCTION_NAMES:
            raise ValueError(f"Unknown function: {name}")
        self.error = None
        self.input += f"{name}("

    def delete(self):
        self.input = self.input[:-1]

    def clear(self):
        self.input = ""
        self.error = None

    def calculate(self):
        """
        计算当前输入
        Returns:
            成功时返回float结果，失败时返回None并显示错误状态
        """
        expression = normalize_expression(self.input, self.glyph_map)
        try:
            result = self.evaluator.evaluate(expression)
        except EvaluationError as e:
            logger.debug(f"Calculation failed for {expression!r}: {e}")
            self.input = ""
            self.error = e
            return None

        self.input = format_result(result)
        self.error = None
        return result

    def handle_key(self, key):
        """键盘支持，返回按键是否被处理"""
        if key in KEY_CALCULATE:
            self.calculate()
            return True
        if key in KEY_DELETE:
            self.delete()
            return True
        if key in KEY_CLEAR:
            self.clear()
            return True
        if len(key) == 1 and (key in string.digits or key == '.' or _is_operator(key, self.glyph_map)):
            self.press(key)
            return True
        return False
