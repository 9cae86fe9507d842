"""Calculator模块 - 表达式求值入口"""
from .evaluator import evaluate, to_rpn_string, ExpressionEvaluator

__all__ = ['evaluate', 'to_rpn_string', 'ExpressionEvaluator']
