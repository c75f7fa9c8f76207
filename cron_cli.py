"""
Command-line interface for the cron expression parser.

Provides command-line tools for:
- Expanding a cron line into its explicit schedule
- Validating cron lines
- Walking through a catalogue of example expressions
"""

import argparse
import json
import sys
from typing import List, Optional

from colored_logger import LEVEL_NAMES, get_colored_logger, setup_colored_logging
from config import OUTPUT_FORMATS, load_config, validate_config
from cron_parser import (
    CronExpression,
    CronExpressionError,
    CronParser,
    InvalidRange,
    InvalidStep,
    MalformedExpression,
    ValueOutOfBounds,
    summarize,
)

logger = get_colored_logger(__name__)

EXAMPLES = [
    ("Every 15 minutes during weekdays", "*/15 0 1,2,3,15 */2 1-5 /usr/bin/find"),
    ("Daily backup at 2:30 AM", "30 2 * * * /usr/bin/backup --daily"),
    ("Every 5 minutes during business hours", "*/5 9-17 * * 1-5 /monitor/check-health"),
    ("Monthly report on the 1st at midnight", "0 0 1 * * /usr/bin/generate-report"),
    ("Every Sunday at noon", "0 12 * * 0 /scripts/weekly-cleanup.sh"),
    (
        "Complex schedule with mixed patterns",
        "0,30 9,12,15 1-7,15,20-25 3,6,9,12 * /usr/bin/quarterly-task",
    ),
    ("Every minute", '* * * * * /bin/echo "ping"'),
    ("Specific time: 5:15 PM on 15th of March", "15 17 15 3 * /usr/bin/special-event"),
    ("Step values from specific start", "10/5 * * * * /usr/bin/step-task"),
    (
        "Command with arguments and spaces",
        "0 3 * * * /bin/bash -c \"find /var/log -name '*.log' -mtime +7 -delete\"",
    ),
]

ERROR_EXAMPLES = [
    ("Too few fields", "* * * *", MalformedExpression),
    ("Invalid range", "60-70 * * * * /bin/cmd", InvalidRange),
    ("Invalid step value", "*/0 * * * * /bin/cmd", InvalidStep),
    ("Out of bounds value", "0 25 * * * /bin/cmd", ValueOutOfBounds),
    # Five fields and nothing after them
    ("Empty command", "* * * * *", MalformedExpression),
]

SEPARATOR = "=" * 50


class CronCLI:
    """Command-line interface for cron expression parsing."""

    def __init__(self):
        self.cron_parser = CronParser()
        self.config = None

    def create_parser(self) -> argparse.ArgumentParser:
        """Create the argument parser for cron-parser commands."""
        parser = argparse.ArgumentParser(
            prog="cron-parser",
            description="Expand cron expressions into explicit schedules",
        )
        parser.add_argument("--config", help="Path to a YAML configuration file")
        parser.add_argument(
            "--log-level",
            type=str.upper,
            choices=LEVEL_NAMES,
            help="Override the configured log level",
        )

        subparsers = parser.add_subparsers(dest="command", help="Available commands")

        parse_parser = subparsers.add_parser(
            "parse", help="Expand a cron expression"
        )
        parse_parser.add_argument(
            "expression",
            help="Cron line, e.g. '*/15 0 1,2,3,15 */2 1-5 /usr/bin/find'",
        )
        parse_parser.add_argument(
            "--format", choices=OUTPUT_FORMATS, help="Output format"
        )
        parse_parser.add_argument(
            "--no-summary",
            action="store_true",
            help="Skip the human-readable schedule summary",
        )

        validate_parser = subparsers.add_parser(
            "validate", help="Validate cron expression"
        )
        validate_parser.add_argument("expression", help="Cron line to validate")

        subparsers.add_parser("examples", help="Parse the built-in example catalogue")

        return parser

    def run(self, args: Optional[List[str]] = None) -> int:
        """Run the CLI with given arguments."""
        parser = self.create_parser()
        parsed_args = parser.parse_args(args)

        if not parsed_args.command:
            parser.print_help()
            return 0

        self.config = load_config(parsed_args.config)
        if parsed_args.log_level and isinstance(self.config.get("logging"), dict):
            self.config["logging"]["level"] = parsed_args.log_level

        problems = validate_config(self.config)
        if problems:
            for problem in problems:
                logger.error("Configuration error: %s", problem)
            return 2

        setup_colored_logging(
            self.config["logging"]["level"], self.config["logging"]["color"]
        )

        command_map = {
            "parse": self._cmd_parse,
            "validate": self._cmd_validate,
            "examples": self._cmd_examples,
        }
        return command_map[parsed_args.command](parsed_args)

    def _cmd_parse(self, args: argparse.Namespace) -> int:
        """Expand a cron expression and print it."""
        output = self.config["output"]
        output_format = args.format or output["format"]

        try:
            expression = self.cron_parser.parse(args.expression)
        except CronExpressionError as e:
            logger.error("Invalid cron expression %r: %s", args.expression, e)
            if output_format == "json":
                print(json.dumps(e.to_dict(), indent=output["indent"]))
            return 1

        if output_format == "json":
            print(json.dumps(expression.to_dict(), indent=output["indent"]))
            return 0

        self._print_expression(expression)
        if output["summary"] and not args.no_summary:
            self._print_summary(expression)
        return 0

    def _cmd_validate(self, args: argparse.Namespace) -> int:
        """Validate a cron expression."""
        if self.cron_parser.validate_expression(args.expression):
            logger.success("Valid cron expression: %s", args.expression)
            return 0

        logger.error("Invalid cron expression: %s", args.expression)
        return 1

    def _cmd_examples(self, args: argparse.Namespace) -> int:
        """Parse every catalogue example and report unexpected outcomes."""
        failures = 0

        print("Cron Expression Parser - Examples")
        print(SEPARATOR)
        for index, (name, text) in enumerate(EXAMPLES, 1):
            print(f"\nExample {index}: {name}")
            print("-" * 50)
            print(f"Expression: {text}")
            try:
                expression = self.cron_parser.parse(text)
            except CronExpressionError as e:
                failures += 1
                print(f"\nError: {e}")
            else:
                self._print_expression(expression)
                self._print_summary(expression)
            print(SEPARATOR)

        print("\nError Handling Examples")
        print(SEPARATOR)
        for index, (name, text, expected) in enumerate(ERROR_EXAMPLES, 1):
            print(f"\nError Example {index}: {name}")
            print("-" * 50)
            print(f"Expression: {text}")
            try:
                self.cron_parser.parse(text)
            except expected as e:
                print(f"Expected Error: {e}")
            except CronExpressionError as e:
                failures += 1
                print(f"Unexpected Error: {e}")
            else:
                failures += 1
                print("Unexpectedly succeeded!")
            print(SEPARATOR)

        if failures:
            logger.error("%d example(s) did not behave as expected", failures)
            return 1

        logger.success("All examples completed")
        return 0

    def _print_expression(self, expression: CronExpression) -> None:
        print("\nParsed Result:")
        for name, values in expression.to_dict().items():
            if isinstance(values, list):
                values = " ".join(str(value) for value in values)
            print(f"  {name:<14} {values}")

    def _print_summary(self, expression: CronExpression) -> None:
        print("\nSchedule Summary:")
        for line in summarize(expression):
            print(f"- {line}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the cron-parser CLI."""
    setup_colored_logging()
    cli = CronCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
