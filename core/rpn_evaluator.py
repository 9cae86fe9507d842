"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.errors import MalformedExpression, StackUnderflow
from core.operators import Operators
from core.token_system import OPERATOR_DEFINITIONS, RPNValidator, TokenType, rpn_to_string

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(token_sequence):
        """
        评估RPN表达式
        Args:
            token_sequence: RPN顺序的Token序列（只含数字和操作符）
        Returns:
            float 结果
        """
        if not RPNValidator.is_complete_expression(token_sequence):
            logger.debug(f"Incomplete RPN expression: {rpn_to_string(token_sequence)}, "
                         f"simulated stack size: {RPNValidator.calculate_stack_size(token_sequence)}")

        stack = []

        for token in token_sequence:
            if token.type == TokenType.NUMBER:
                stack.append(Operators.ensure_float64(token.value))

            elif token.type == TokenType.OPERATOR:
                if len(stack) < 2:
                    logger.debug(f"Insufficient operands for {token.value} at position {token.position}")
                    raise StackUnderflow(token.value)
                # 先出栈的是右操作数
                operand2 = stack.pop()
                operand1 = stack.pop()
                op_name = OPERATOR_DEFINITIONS[token.value].name
                stack.append(Operators.apply(op_name, operand1, operand2))

            else:
                raise MalformedExpression(f"unexpected '{token.text}' in RPN sequence")

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            logger.debug(f"RPN expression: {rpn_to_string(token_sequence)}")
            raise MalformedExpression(f"{len(stack)} values left on stack")

        return float(stack[0])
