"""配置文件"""

# 表达式求值器参数
EVALUATOR_CONFIG = {
    "cache_size": 1000,  # ExpressionEvaluator 的LRU缓存条目上限，0表示不缓存
    "error_value": float("nan"),  # 批量求值时失败表达式的结果
}

# 日志配置
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}

# 命令行输出
CLI_CONFIG = {
    "result_format": "{expression} = {result}",
    "error_format": "{expression} -> error: {error}",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    from core.token_system import OPERATOR_DEFINITIONS

    assert EVALUATOR_CONFIG["cache_size"] >= 0, "cache_size 不能为负数"
    assert OPERATOR_DEFINITIONS['*'].precedence > OPERATOR_DEFINITIONS['+'].precedence, "乘除优先级必须高于加减"
    assert OPERATOR_DEFINITIONS['*'].precedence == OPERATOR_DEFINITIONS['/'].precedence
    assert OPERATOR_DEFINITIONS['+'].precedence == OPERATOR_DEFINITIONS['-'].precedence
    assert LOGGING_CONFIG["level"] in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
    return True
