"""core/operators.py"""
import numpy as np
import logging

from core.errors import DivisionByZero

logger = logging.getLogger(__name__)


class Operators:
    """所有二元操作符的静态方法集合，运算统一在float64上进行"""

    @staticmethod
    def ensure_float64(operand):
        return np.float64(operand)

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return Operators.ensure_float64(operand1) + Operators.ensure_float64(operand2)

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return Operators.ensure_float64(operand1) - Operators.ensure_float64(operand2)

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符（溢出得到inf，不裁剪）"""
        with np.errstate(over='ignore', invalid='ignore'):
            return Operators.ensure_float64(operand1) * Operators.ensure_float64(operand2)

    @staticmethod
    def div(operand1, operand2):
        """除法操作符：除数恰好为0时报错"""
        operand2 = Operators.ensure_float64(operand2)
        if operand2 == 0:
            raise DivisionByZero()
        with np.errstate(over='ignore', invalid='ignore'):
            return Operators.ensure_float64(operand1) / operand2

    @staticmethod
    def apply(name, operand1, operand2):
        """按OPERATOR_DEFINITIONS中的名字调用对应操作符"""
        op_method = getattr(Operators, name, None)
        if op_method is None:
            raise AttributeError(f"Unknown binary operator: {name}")
        return op_method(operand1, operand2)
