"""主程序入口 - 单次求值、CSV批量求值和交互模式"""
import argparse
import logging
import sys
import pandas as pd

from config.config import *
from calculator import ExpressionEvaluator, CalculatorSession
from utils.formatting import format_result, normalize_expression

logger = logging.getLogger(__name__)


def setup_logging(level=None):
    logging.basicConfig(
        level=getattr(logging, (level or LOGGING_CONFIG['level']).upper()),
        format=LOGGING_CONFIG['format']
    )


def run_expressions(expressions, evaluator, out=None):
    """逐个求值并打印，返回失败个数"""
    if out is None:
        out = sys.stdout
    failures = 0
    for expression in expressions:
        value, error = evaluator.try_evaluate(normalize_expression(expression))
        if error is not None:
            failures += 1
            print(f"{expression} = {SESSION_CONFIG['error_display']} ({error})", file=out)
        else:
            print(f"{expression} = {format_result(value)}", file=out)
    return failures


def run_batch(data_path, expression_column, evaluator, output_path=None):
    """
    从CSV读取表达式列批量求值
    Returns:
        结果DataFrame
    """
    logger.info(f"Loading expressions from {data_path}")
    frame = pd.read_csv(data_path, dtype=str, keep_default_na=False)

    # 确保表达式列存在
    if expression_column not in frame.columns:
        raise ValueError(f"Expression column '{expression_column}' not found in {data_path}.")

    expressions = frame[expression_column].map(normalize_expression)
    results = evaluator.evaluate_many(expressions)

    failed = results[CLI_CONFIG['error_column']].notna().sum()
    logger.info(f"Batch finished: {len(results)} expressions, {failed} failed")

    if output_path:
        logger.info(f"Saving results to {output_path}")
        results.to_csv(output_path, index=False)
    return results


def run_interactive(session, stdin=None, out=None):
    """每行输入视为一次完整的按键序列 + '='"""
    if stdin is None:
        stdin = sys.stdin
    if out is None:
        out = sys.stdout
    for line in stdin:
        line = line.strip()
        if line in ('quit', 'exit'):
            break
        if not line:
            continue
        session.clear()
        session.input = line
        session.calculate()
        print(session.display, file=out)


def main(args):
    setup_logging(args.log_level)
    validate_config()

    evaluator = ExpressionEvaluator(
        cache_size=EVALUATOR_CONFIG['cache_size'],
        max_expression_length=EVALUATOR_CONFIG['max_expression_length']
    )

    if args.data_path:
        results = run_batch(args.data_path, args.expression_column, evaluator, args.output_path)
        if not args.output_path:
            print(results.to_string(index=False))
        return int(results[CLI_CONFIG['error_column']].notna().any())

    if args.interactive:
        run_interactive(CalculatorSession(evaluator))
        return 0

    if not args.expressions:
        logger.error("No expressions given. Pass expressions, --data_path or --interactive.")
        return 2

    failures = run_expressions(args.expressions, evaluator)
    return int(failures > 0)


def build_parser():
    parser = argparse.ArgumentParser(description="Safe calculator expression evaluator")

    parser.add_argument(
        "expressions",
        nargs="*",
        help="Expressions to evaluate, e.g. '2+3*4' 'sqrt(16)'"
    )
    parser.add_argument(
        "--data_path",
        type=str,
        default=None,
        help="Path to a CSV file with an expression column"
    )
    parser.add_argument(
        "--expression_column",
        type=str,
        default=CLI_CONFIG['expression_column'],
        help="Name of the expression column in the CSV file"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=None,
        help="Path to save the batch results as CSV"
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Read expressions from stdin, one per line"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG['level'],
        help="Logging level (DEBUG, INFO, WARNING, ...)"
    )
    return parser


def cli():
    sys.exit(main(build_parser().parse_args()))


if __name__ == "__main__":
    cli()
