"""core/errors.py - 表达式求值的错误体系"""


class EvaluationError(Exception):
    """所有求值错误的基类"""


# 词法错误 ====================

class LexError(EvaluationError):
    pass


class UnexpectedCharacter(LexError):
    def __init__(self, char, position):
        self.char = char
        self.position = position
        super().__init__(f"Found invalid character '{char}' at position {position}")


class InvalidNumber(LexError):
    def __init__(self, text, position):
        self.text = text
        self.position = position
        super().__init__(f"Invalid number '{text}' at position {position}")


# 语法错误 ====================

class ParseError(EvaluationError):
    pass


class EmptyExpression(ParseError):
    def __init__(self):
        super().__init__("Expression is empty")


class MismatchedParenthesis(ParseError):
    def __init__(self, position=None):
        self.position = position
        if position is None:
            super().__init__("Mismatched parenthesis")
        else:
            super().__init__(f"Mismatched parenthesis at position {position}")


class UnexpectedToken(ParseError):
    def __init__(self, token, position):
        self.token = token
        self.position = position
        super().__init__(f"Unexpected token '{token.text}' at position {position}")


# 求值错误 ====================

class EvalError(EvaluationError):
    pass


class DivisionByZero(EvalError):
    def __init__(self):
        super().__init__("Division by zero")


class StackUnderflow(EvalError):
    def __init__(self, operator=None):
        self.operator = operator
        if operator is None:
            super().__init__("Insufficient operands")
        else:
            super().__init__(f"Insufficient operands for '{operator}'")


class MalformedExpression(EvalError):
    def __init__(self, detail=None):
        self.detail = detail
        super().__init__(f"Malformed expression: {detail}" if detail else "Malformed expression")
