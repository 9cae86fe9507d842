import logging
from collections import OrderedDict
from typing import Iterable, Optional

import numpy as np
import pandas as pd

from config.config import EVALUATOR_CONFIG
from core import EvaluationError, RPNEvaluator, parse, rpn_to_string, tokenize

logger = logging.getLogger(__name__)


def evaluate(expression: str) -> float:
    """
    计算表达式文本的值：tokenize -> parse(RPN) -> evaluate
    遇到第一个错误即抛出 EvaluationError 的子类
    """
    tokens = tokenize(expression)
    rpn = parse(tokens)
    return RPNEvaluator.evaluate(rpn)


def to_rpn_string(expression: str) -> str:
    """表达式 -> 空格分隔的RPN字符串"""
    return rpn_to_string(parse(tokenize(expression)))


class ExpressionEvaluator:

    def __init__(self, cache_size=None):
        if cache_size is None:
            cache_size = EVALUATOR_CONFIG['cache_size']
        if cache_size < 0:
            raise ValueError(f"cache_size must be non-negative, got {cache_size}")
        # 使用有限大小的OrderedDict实现LRU缓存
        self.cache_size = cache_size
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
            'hits': self._cache_hits,
            'misses': self._cache_misses,
            'size': len(self._result_cache),
            'max_size': self.cache_size,
        }

    def evaluate(self, expression: str) -> float:
        """
        带缓存的求值；错误不缓存，照常抛出
        Args:
            expression: 表达式字符串
        Returns:
            float 结果
        """
        if expression in self._result_cache:
            # 移到末尾（最近使用）
            self._result_cache.move_to_end(expression)
            self._cache_hits += 1
            logger.debug(f"Cache hit for expression: {expression[:50]}")
            return self._result_cache[expression]

        self._cache_misses += 1
        result = evaluate(expression)

        if self.cache_size > 0:
            self._result_cache[expression] = result
            self._manage_cache()
        return result

    def try_evaluate(self, expression: str) -> tuple[Optional[float], Optional[EvaluationError]]:
        """返回 (结果, None) 或 (None, 错误)，不抛出求值错误"""
        try:
            return self.evaluate(expression), None
        except EvaluationError as e:
            logger.warning(f"Error evaluating expression '{expression[:50]}': {e}")
            return None, e

    def evaluate_many(self, expressions: Iterable[str]) -> pd.DataFrame:
        """
        批量求值
        Args:
            expressions: 表达式字符串序列
        Returns:
            DataFrame，列为 expression / result / error；失败的行 result 为NaN
        """
        rows = []
        for expression in expressions:
            result, error = self.try_evaluate(expression)
            rows.append({
                'expression': expression,
                'result': EVALUATOR_CONFIG['error_value'] if error is not None else result,
                'error': str(error) if error is not None else None,
            })

        frame = pd.DataFrame(rows, columns=['expression', 'result', 'error'])
        frame['result'] = frame['result'].astype(np.float64)
        failed = frame['error'].notna().sum()
        if failed:
            logger.info(f"Evaluated {len(frame)} expressions, {failed} failed")
        return frame
