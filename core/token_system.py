"""core/token_system.py"""
from enum import Enum
from typing import NamedTuple, Optional, Union


class TokenType(Enum):
    NUMBER = "number"            # 数字
    OPERATOR = "operator"        # + - * /
    LEFT_PAREN = "left_paren"    # (
    RIGHT_PAREN = "right_paren"  # )


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


class Token(NamedTuple):
    """不可变Token：type + 值 + 源文本 + 在输入中的位置"""
    type: TokenType
    value: Union[float, str, None]
    text: str
    position: int

    @property
    def is_operator(self):
        return self.type == TokenType.OPERATOR

    def __str__(self):
        return self.text


class OperatorInfo(NamedTuple):
    name: str
    precedence: int
    associativity: Associativity


# 操作符定义字典
OPERATOR_DEFINITIONS = {
    '+': OperatorInfo('add', 1, Associativity.LEFT),
    '-': OperatorInfo('sub', 1, Associativity.LEFT),
    '*': OperatorInfo('mul', 2, Associativity.LEFT),
    '/': OperatorInfo('div', 2, Associativity.LEFT),
}

PAREN_TYPES = {
    '(': TokenType.LEFT_PAREN,
    ')': TokenType.RIGHT_PAREN,
}


def number_token(value, text, position):
    return Token(TokenType.NUMBER, float(value), text, position)


def operator_token(symbol, position):
    if symbol not in OPERATOR_DEFINITIONS:
        raise KeyError(f"Unknown operator: {symbol}")
    return Token(TokenType.OPERATOR, symbol, symbol, position)


def paren_token(symbol, position):
    return Token(PAREN_TYPES[symbol], None, symbol, position)


def rpn_to_string(token_sequence):
    """RPN序列转为空格分隔的字符串"""
    return ' '.join(t.text for t in token_sequence)


class RPNValidator:

    @staticmethod
    def calculate_stack_size(token_sequence) -> Optional[int]:
        """
        模拟栈，只计算元素数量（不做运算）
        Returns:
            最终栈大小；出现操作数不足或括号时返回None
        """
        stack_size = 0
        for token in token_sequence:
            if token.type == TokenType.NUMBER:
                stack_size += 1
            elif token.type == TokenType.OPERATOR:
                # 二元操作符：出栈2个，入栈1个
                if stack_size < 2:
                    return None
                stack_size -= 1
            else:
                return None
        return stack_size

    @staticmethod
    def is_complete_expression(token_sequence) -> bool:
        """完整表达式应该正好留下1个结果"""
        return RPNValidator.calculate_stack_size(token_sequence) == 1
