import argparse
import sys

from core.initialization import load_configuration
from core.report import build_report, render_report
from utils.config_manager import ConfigManager
from utils.config_validator import validate_config
from utils.logger import setup_logger


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Trading performance report")
    parser.add_argument("--env", default="config.env", help="Path to .env-style config file")
    parser.add_argument("--csv", help="Trade log CSV (overrides TRADES_CSV)")
    parser.add_argument("--sample-size", type=int, help="Number of sample trades when no CSV is given")
    parser.add_argument("--seed", type=int, help="Seed for the sample generator")
    parser.add_argument("--initial-balance", type=float, help="Account balance before the first trade")
    parser.add_argument("--validate", action="store_true", help="Reject unordered or inconsistent trades")
    return parser.parse_args(argv)


def apply_overrides(config: dict, args: argparse.Namespace) -> dict:
    if args.csv:
        config["TRADES_CSV"] = args.csv
    if args.sample_size is not None:
        config["SAMPLE_SIZE"] = args.sample_size
    if args.seed is not None:
        config["SAMPLE_SEED"] = args.seed
    if args.initial_balance is not None:
        config["INITIAL_BALANCE"] = args.initial_balance
    if args.validate:
        config["VALIDATE_TRADES"] = True
    return config


def run(argv=None) -> int:
    """
    Load configuration, apply command-line overrides and print the report.
    Returns the process exit code.
    """
    args = parse_args(argv)
    logger = setup_logger("TradeStats", to_console=True)

    try:
        config = load_configuration(args.env)
        apply_overrides(config, args)
        validate_config(config)
        report = build_report(config)
    except Exception as e:
        logger.error("❌ Report failed: %s", e)
        return 1

    print(render_report(report, ConfigManager(config).get_currency_symbol()))
    return 0


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
