"""
Command line entry point

Usage:
    greenforge analyze <path>
    greenforge estimate <path> --output json
    greenforge suggest <path> --lang java
"""
import argparse
import json
import logging
import sys

from greenforge import __version__
from greenforge.analyzer.code_analyzer import CodeAnalyzer
from greenforge.carbon.carbon_estimator import CarbonEstimator
from greenforge.config import ForgeConfig
from greenforge.errors import ForgeError
from greenforge.suggestions.optimization_suggester import OptimizationSuggester
from greenforge.utils.language_detector import LanguageDetector
from greenforge.utils.report_printer import ReportPrinter


def build_parser():
    parser = argparse.ArgumentParser(
        prog='greenforge',
        description='Analyze codebases for inefficiencies and suggest greener alternatives'
    )
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('path', help='File or directory to analyze')
    common.add_argument('--lang', '-l', choices=LanguageDetector.supported_languages(),
                        help='Programming language (default: detect from file extension)')
    common.add_argument('--output', '-o', choices=['text', 'json'], default='text',
                        help='Output format (default: text)')
    common.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')
    subparsers.add_parser('analyze', parents=[common], help='Analyze code for inefficient patterns')
    subparsers.add_parser('estimate', parents=[common], help='Estimate carbon footprint of code execution')
    subparsers.add_parser('suggest', parents=[common], help='Get optimization suggestions for code')
    return parser


def main(argv=None):
    """
    Run the command line interface

    Args:
        argv: Command line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, 1 for errors)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = ForgeConfig.from_env()
    except ForgeError as e:
        print(f"❌ Configuration error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format='%(levelname)s %(name)s: %(message)s'
    )

    analyzer = CodeAnalyzer(config=config)

    try:
        if args.command == 'analyze':
            result = analyzer.analyze(args.path, args.lang)
            if args.output == 'json':
                print(json.dumps(result.to_dict(), indent=2))
            else:
                ReportPrinter.print_analysis(result, args.path, args.lang)

        elif args.command == 'estimate':
            estimate = CarbonEstimator(config=config, analyzer=analyzer).estimate(args.path, args.lang)
            if args.output == 'json':
                print(estimate.to_json(indent=2))
            else:
                ReportPrinter.print_estimate(estimate, args.path, args.lang)

        elif args.command == 'suggest':
            suggestions = OptimizationSuggester(analyzer=analyzer).suggest(args.path, args.lang)
            if args.output == 'json':
                print(suggestions.to_json(indent=2))
            else:
                ReportPrinter.print_suggestions(suggestions, args.path, args.lang)

    except ForgeError as e:
        print(f"❌ Error during {args.command}: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
