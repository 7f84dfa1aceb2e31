"""核心模块 - Token系统、词法分析、Shunting-yard解析和RPN求值"""
from .token_system import (
    TokenType, Token, Associativity, OperatorInfo, OPERATOR_DEFINITIONS,
    FUNCTION_NAMES, CONSTANT_DEFINITIONS, RPN_TOKEN_TYPES
)
from .errors import EvaluationError, LexError, ParseError, EvalError, NonFiniteResult
from .tokenizer import Tokenizer, tokenize
from .parser import ShuntingYardParser, to_rpn
from .rpn_evaluator import RPNEvaluator, eval_rpn
from .operators import Operators, BINARY_OPERATORS, UNARY_FUNCTIONS
from .pipeline import evaluate

__all__ = [
    'TokenType', 'Token', 'Associativity', 'OperatorInfo', 'OPERATOR_DEFINITIONS',
    'FUNCTION_NAMES', 'CONSTANT_DEFINITIONS', 'RPN_TOKEN_TYPES',
    'EvaluationError', 'LexError', 'ParseError', 'EvalError', 'NonFiniteResult',
    'Tokenizer', 'tokenize', 'ShuntingYardParser', 'to_rpn',
    'RPNEvaluator', 'eval_rpn', 'Operators', 'BINARY_OPERATORS', 'UNARY_FUNCTIONS',
    'evaluate'
]
