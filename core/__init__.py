"""核心模块 - Token系统、词法/语法分析、RPN评估器和操作符"""
from .token_system import (
    TokenType, Token, Associativity, OperatorInfo, OPERATOR_DEFINITIONS,
    RPNValidator, rpn_to_string
)
from .errors import (
    EvaluationError, LexError, UnexpectedCharacter, InvalidNumber,
    ParseError, EmptyExpression, MismatchedParenthesis, UnexpectedToken,
    EvalError, DivisionByZero, StackUnderflow, MalformedExpression
)
from .tokenizer import tokenize, iter_tokens
from .parser import InfixValidator, ShuntingYard, parse
from .rpn_evaluator import RPNEvaluator
from .operators import Operators

__all__ = [
    'TokenType', 'Token', 'Associativity', 'OperatorInfo', 'OPERATOR_DEFINITIONS',
    'RPNValidator', 'rpn_to_string',
    'EvaluationError', 'LexError', 'UnexpectedCharacter', 'InvalidNumber',
    'ParseError', 'EmptyExpression', 'MismatchedParenthesis', 'UnexpectedToken',
    'EvalError', 'DivisionByZero', 'StackUnderflow', 'MalformedExpression',
    'tokenize', 'iter_tokens', 'InfixValidator', 'ShuntingYard', 'parse',
    'RPNEvaluator', 'Operators'
]
