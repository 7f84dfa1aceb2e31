import pandas as pd
import numpy as np
import logging
from collections import OrderedDict
from typing import Iterable, Optional, Tuple

from config.config import EVALUATOR_CONFIG, CLI_CONFIG
from core import evaluate as evaluate_expression, EvaluationError, LexError

logger = logging.getLogger(__name__)


class ExpressionEvaluator:

    def __init__(self, cache_size=None, max_expression_length=None):
        if cache_size is None:
            cache_size = EVALUATOR_CONFIG["cache_size"]
        if max_expression_length is None:
            max_expression_length = EVALUATOR_CONFIG["max_expression_length"]
        # 使用有限大小的OrderedDict实现LRU缓存
        self.cache_size = cache_size
        self.max_expression_length = max_expression_length
        self._result_cache = OrderedDict()
        self._cache_hits = 0
        self._cache_misses = 0

    def _manage_cache(self):
        """管理缓存大小"""
        while len(self._result_cache) > self.cache_size:
            # 删除最旧的条目
            self._result_cache.popitem(last=False)

    def clear_cache(self):
        """清空缓存（供外部调用）"""
        self._result_cache.clear()
        logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
        self._cache_hits = 0
        self._cache_misses = 0

    @property
    def cache_info(self):
        return {
            "hits": self._cache_hits,
            "misses": self._cache_misses,
            "size": len(self._result_cache),
        }

    def evaluate(self, expression: str) -> float:
        """
        Args:
            expression: 规范形式的表达式字符串
        Returns:
            有限的float结果
        Raises:
            EvaluationError: 任一阶段失败（失败结果不缓存）
        """
        if not isinstance(expression, str):
            raise LexError("expression must be a string")

        if len(expression) > self.max_expression_length:
            logger.warning(f"Expression too long: {len(expression)} > {self.max_expression_length}")
            raise LexError("expression too long")

        if expression in self._result_cache:
            # 移到末尾（最近使用）
            self._result_cache.move_to_end(expression)
            self._cache_hits += 1
            logger.debug(f"Cache hit for expression: {expression[:50]}")
            return self._result_cache[expression]

        self._cache_misses += 1
        try:
            result = evaluate_expression(expression)
        except EvaluationError as e:
            logger.warning(f"Error evaluating expression '{expression[:50]}': {e}")
            raise

        self._result_cache[expression] = result
        self._manage_cache()
        return result

    def try_evaluate(self, expression: str) -> Tuple[Optional[float], Optional[EvaluationError]]:
        """不抛异常的版本，返回 (结果, 错误)"""
        try:
            return self.evaluate(expression), None
        except EvaluationError as e:
            return None, e

    def evaluate_many(self, expressions: Iterable[str]) -> pd.DataFrame:
        """
        批量求值
        Returns:
            DataFrame(expression, result, error)，失败行 result 为 NaN
        """
        if isinstance(expressions, pd.Series):
            index = expressions.index
            expressions = expressions.tolist()
        else:
            expressions = list(expressions)
            index = None

        results = []
        errors = []
        for expression in expressions:
            value, error = self.try_evaluate(expression)
            results.append(np.nan if error is not None else value)
            errors.append(str(error) if error is not None else None)

        frame = pd.DataFrame({
            CLI_CONFIG["expression_column"]: expressions,
            CLI_CONFIG["result_column"]: pd.Series(results, dtype=float, index=index),
            # object列：成功行为None
            CLI_CONFIG["error_column"]: pd.Series(errors, dtype=object, index=index),
        }, index=index)

        failed = frame[CLI_CONFIG["error_column"]].notna().sum()
        logger.info(f"Evaluated {len(frame)} expressions, {failed} failed")
        return frame
