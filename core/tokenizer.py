"""词法分析 - 把表达式文本切分为Token序列"""
import logging
import re

from core.errors import InvalidNumber, UnexpectedCharacter
from core.token_system import OPERATOR_DEFINITIONS, PAREN_TYPES, number_token, operator_token, paren_token

logger = logging.getLogger(__name__)

DIGITS = '0123456789'
NUMBER_PATTERN = re.compile(r'[0-9]+(?:\.[0-9]+)?')


def _scan_number(expression, start):
    """读取从start开始的最长 数字/小数点 片段，返回 (Token, 结束位置)"""
    end = start
    while end < len(expression) and (expression[end] in DIGITS or expression[end] == '.'):
        end += 1

    text = expression[start:end]
    if not NUMBER_PATTERN.fullmatch(text):
        raise InvalidNumber(text, start)
    return number_token(text, text, start), end


def iter_tokens(expression):
    """
    按从左到右的顺序逐个产出Token
    Args:
        expression: 表达式字符串
    Yields:
        Token
    """
    if not isinstance(expression, str):
        raise TypeError(f"Expression must be str, got {type(expression).__name__}")

    pos = 0
    length = len(expression)
    while pos < length:
        char = expression[pos]

        if char.isspace():
            pos += 1
            continue

        if char in OPERATOR_DEFINITIONS:
            yield operator_token(char, pos)
            pos += 1
        elif char in PAREN_TYPES:
            yield paren_token(char, pos)
            pos += 1
        elif char in DIGITS or char == '.':
            token, pos = _scan_number(expression, pos)
            yield token
        else:
            raise UnexpectedCharacter(char, pos)


def tokenize(expression):
    tokens = list(iter_tokens(expression))
    logger.debug(f"Tokenized {len(expression)} chars into {len(tokens)} tokens")
    return tokens
