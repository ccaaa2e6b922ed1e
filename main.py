"""主程序入口 - 交互式计算器"""
import argparse
import logging
import sys

from config.config import REPL_CONFIG, LOGGING_CONFIG, validate_config
from core import CalculatorError
from interpreter import LineEvaluator
from utils.formatting import format_result

logger = logging.getLogger(__name__)


class ExitRequested(Exception):
    pass


def handle_line(line, evaluator):
    """
    处理一行输入
    Returns:
        需要打印的文本；无输出时返回 None
    Raises:
        ExitRequested: 输入了退出命令
    """
    line = line.strip()
    if not line:
        return None

    if line == REPL_CONFIG["exit_command"]:
        raise ExitRequested()
    if line == REPL_CONFIG["help_command"]:
        return REPL_CONFIG["help_text"]
    if line.startswith(REPL_CONFIG["command_prefix"]):
        return REPL_CONFIG["unknown_command_message"]

    try:
        result = evaluator.evaluate_line(line)
    except CalculatorError as e:
        logger.debug(f"Line rejected: {line!r} ({type(e).__name__})")
        return str(e)

    if result is None:
        # 赋值不回显
        return None
    return format_result(result)


def run(input_stream, output_stream, evaluator=None, prompt=""):
    """逐行读取直到 EOF 或退出命令"""
    evaluator = evaluator or LineEvaluator()

    while True:
        if prompt:
            output_stream.write(prompt)
            output_stream.flush()
        line = input_stream.readline()
        if not line:
            break
        try:
            text = handle_line(line, evaluator)
        except ExitRequested:
            print(REPL_CONFIG["exit_message"], file=output_stream)
            break
        if text is not None:
            print(text, file=output_stream)

    logger.info(f"Session finished. Cache: {evaluator.cache_stats}")
    return evaluator


def main(args):
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format=LOGGING_CONFIG["format"]
    )
    validate_config()
    logger.info("Starting calculator")
    run(sys.stdin, sys.stdout, prompt=args.prompt)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Smart Calculator")

    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        help="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )
    parser.add_argument(
        "--prompt",
        type=str,
        default=REPL_CONFIG["prompt"],
        help="Prompt printed before each input line (default: none)"
    )
    args = parser.parse_args()
    main(args)
