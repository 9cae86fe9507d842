"""主程序入口 - 命令行计算器"""
import argparse
import logging
import sys

import pandas as pd

from config.config import CLI_CONFIG, EVALUATOR_CONFIG, LOGGING_CONFIG, validate_config
from calculator import ExpressionEvaluator, to_rpn_string

logger = logging.getLogger(__name__)


def _read_expressions(args, stdin=None):
    """命令行参数优先；没有参数时从stdin逐行读取，跳过空行"""
    if args.expressions:
        return list(args.expressions)
    stdin = stdin or sys.stdin
    return [line.strip() for line in stdin if line.strip()]


def main(args, stdin=None, stdout=None):
    stdout = stdout or sys.stdout
    validate_config()

    evaluator = ExpressionEvaluator(cache_size=args.cache_size)
    expressions = _read_expressions(args, stdin)
    logger.info(f"Evaluating {len(expressions)} expressions")

    results = evaluator.evaluate_many(expressions)

    for row in results.itertuples(index=False):
        if pd.isna(row.error):
            line = CLI_CONFIG['result_format'].format(expression=row.expression, result=row.result)
            if args.show_rpn:
                line += f"    [RPN: {to_rpn_string(row.expression)}]"
        else:
            line = CLI_CONFIG['error_format'].format(expression=row.expression, error=row.error)
        print(line, file=stdout)

    logger.info(f"Cache stats: {evaluator.cache_info}")
    return 1 if results['error'].notna().any() else 0


def _non_negative_int(value):
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    return number


def build_parser():
    parser = argparse.ArgumentParser(description="Arithmetic expression calculator")

    parser.add_argument(
        "expressions",
        nargs="*",
        help="Expressions to evaluate; read one per line from stdin when omitted"
    )
    parser.add_argument(
        "--show_rpn",
        action="store_true",
        help="Also print the Reverse Polish Notation of each expression"
    )
    parser.add_argument(
        "--cache_size",
        type=_non_negative_int,
        default=EVALUATOR_CONFIG['cache_size'],
        help="Number of results kept in the evaluator cache (0 disables caching)"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG['level'],
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level"
    )
    return parser


def cli():
    args = build_parser().parse_args()

    # 设置日志
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOGGING_CONFIG['format']
    )
    sys.exit(main(args))


if __name__ == "__main__":
    cli()
