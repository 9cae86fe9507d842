"""语法分析 - 中缀Token序列的结构校验与Shunting Yard转换为RPN"""
import logging

from core.errors import EmptyExpression, MismatchedParenthesis, UnexpectedToken
from core.token_system import OPERATOR_DEFINITIONS, Associativity, TokenType, rpn_to_string

logger = logging.getLogger(__name__)

# 每种Token允许出现在哪些Token之后（None 表示位于表达式开头）
_OPERAND_PREDECESSORS = (None, TokenType.OPERATOR, TokenType.LEFT_PAREN)
_OPERATOR_PREDECESSORS = (TokenType.NUMBER, TokenType.RIGHT_PAREN)


class InfixValidator:

    @staticmethod
    def validate(token_sequence):
        """
        从左到右检查Token之间的相邻关系和括号配对，遇到第一个错误即抛出
        Args:
            token_sequence: tokenizer输出的Token列表
        """
        if not token_sequence:
            raise EmptyExpression()

        open_parens = []  # 未闭合的 ( 的位置
        prev_type = None

        for token in token_sequence:
            if token.type in (TokenType.NUMBER, TokenType.LEFT_PAREN):
                if prev_type not in _OPERAND_PREDECESSORS:
                    raise UnexpectedToken(token, token.position)
                if token.type == TokenType.LEFT_PAREN:
                    open_parens.append(token.position)

            elif token.type == TokenType.RIGHT_PAREN:
                if not open_parens:
                    raise MismatchedParenthesis(token.position)
                if prev_type not in _OPERATOR_PREDECESSORS:
                    raise UnexpectedToken(token, token.position)
                open_parens.pop()

            elif token.type == TokenType.OPERATOR:
                if prev_type not in _OPERATOR_PREDECESSORS:
                    raise UnexpectedToken(token, token.position)

            prev_type = token.type

        last_token = token_sequence[-1]
        if last_token.type == TokenType.OPERATOR:
            raise UnexpectedToken(last_token, last_token.position)

        if open_parens:
            raise MismatchedParenthesis(open_parens[-1])


class ShuntingYard:

    @staticmethod
    def _should_pop(top, incoming):
        """栈顶操作符是否应先于incoming输出"""
        top_info = OPERATOR_DEFINITIONS[top.value]
        incoming_info = OPERATOR_DEFINITIONS[incoming.value]
        if top_info.precedence > incoming_info.precedence:
            return True
        return (top_info.precedence == incoming_info.precedence
                and incoming_info.associativity == Associativity.LEFT)

    @staticmethod
    def to_rpn(token_sequence):
        """
        中缀Token序列 -> RPN Token序列（不含括号）
        Args:
            token_sequence: Token列表
        Returns:
            RPN顺序的Token列表
        """
        if not token_sequence:
            raise EmptyExpression()

        output = []
        stack = []  # 操作符和左括号

        for token in token_sequence:
            if token.type == TokenType.NUMBER:
                output.append(token)

            elif token.type == TokenType.OPERATOR:
                while stack and stack[-1].is_operator and ShuntingYard._should_pop(stack[-1], token):
                    output.append(stack.pop())
                stack.append(token)

            elif token.type == TokenType.LEFT_PAREN:
                stack.append(token)

            elif token.type == TokenType.RIGHT_PAREN:
                while stack and stack[-1].type != TokenType.LEFT_PAREN:
                    output.append(stack.pop())
                if not stack:
                    raise MismatchedParenthesis(token.position)
                stack.pop()  # 丢弃 (

        while stack:
            top = stack.pop()
            if top.type == TokenType.LEFT_PAREN:
                raise MismatchedParenthesis(top.position)
            output.append(top)

        return output


def parse(token_sequence):
    """结构校验 + 转换为RPN"""
    InfixValidator.validate(token_sequence)
    rpn = ShuntingYard.to_rpn(token_sequence)
    logger.debug(f"RPN expression: {rpn_to_string(rpn)}")
    return rpn
