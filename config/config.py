"""配置文件"""
import logging

logger = logging.getLogger(__name__)

# 求值器参数
EVALUATOR_CONFIG = {
    "cache_size": 1000,  # LRU结果缓存条数
    "max_expression_length": 1000,  # 输入长度上限，超过直接拒绝
}

# 计算器会话参数
SESSION_CONFIG = {
    "error_display": "Error",
    "empty_display": "0",
    # UI字形 -> 规范ASCII
    "glyph_map": {
        "×": "*",
        "÷": "/",
        "−": "-",
        "π": "PI",
    },
}

# 命令行 / 批量求值参数
CLI_CONFIG = {
    "expression_column": "expression",
    "result_column": "result",
    "error_column": "error",
    "prompt": "> ",
}

LOGGING_CONFIG = {
    "level": "WARNING",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    from core import OPERATOR_DEFINITIONS, FUNCTION_NAMES, BINARY_OPERATORS, UNARY_FUNCTIONS

    assert set(OPERATOR_DEFINITIONS) == set(BINARY_OPERATORS), "操作符表与实现不一致"
    assert FUNCTION_NAMES == set(UNARY_FUNCTIONS), "函数表与实现不一致"
    assert EVALUATOR_CONFIG["cache_size"] > 0, "缓存大小必须为正"
    assert EVALUATOR_CONFIG["max_expression_length"] > 0, "长度上限必须为正"
    assert all(len(g) == 1 for g in SESSION_CONFIG["glyph_map"]), "字形必须是单个字符"
    logger.debug("Configuration validated successfully!")
