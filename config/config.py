"""配置文件"""

# 表达式引擎参数
ENGINE_CONFIG = {
    "operator_chars": "+-*/",
    "precedence": {"*": 1, "/": 1, "+": 0, "-": 0},
    "unknown_precedence": -1,  # 括号等非操作符的哨兵值
    "substitution_decimals": 3,  # 变量代入时保留3位小数
    "postfix_cache_size": 256,  # 中缀->后缀转换结果缓存
}

# 交互式命令行
REPL_CONFIG = {
    "exit_command": "/exit",
    "help_command": "/help",
    "command_prefix": "/",
    "exit_message": "Bye!",
    "unknown_command_message": "Unknown command",
    "help_text": (
        "The program evaluates arithmetic expressions with + - * / and parentheses.\n"
        "Assign variables with 'name = expression' and use them by name.\n"
        "Type /exit to quit."
    ),
    "prompt": "",
}

# 日志
LOGGING_CONFIG = {
    "level": "WARNING",  # 默认不打扰REPL输出
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert set(ENGINE_CONFIG["precedence"]) == set(ENGINE_CONFIG["operator_chars"]), \
        "precedence must cover every operator character"
    assert ENGINE_CONFIG["unknown_precedence"] < min(ENGINE_CONFIG["precedence"].values()), \
        "sentinel must rank below every operator"
    assert ENGINE_CONFIG["substitution_decimals"] == 3, "variables are substituted with 3 decimals"
    assert ENGINE_CONFIG["postfix_cache_size"] > 0, "cache size must be positive"
    return True
