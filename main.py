"""
FATURA Main Entry Point
=======================
Prints an amount in words, the way it appears on invoices and vouchers.

Usage:
  python main.py 1234.56
  python main.py 1234.56 --lang arabic --currency IQD
  python main.py "$2,500" --lang ku --format
"""
import argparse
import logging
import sys

from constants import AmountLanguage, CurrencyCode, ConfigKeys
from core.config import Config
from core.logging_config import LoggingConfig
from exceptions import FaturaError
from version import APP_NAME, VERSION

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="fatura",
        description=f"{APP_NAME} — spell a monetary amount in English, Arabic or Kurdish",
    )
    ap.add_argument("amount", help="amount, e.g. 1234.56 or \"$1,234.56\"")
    ap.add_argument("--lang", "-l", default=None,
                    help=f"one of {', '.join(AmountLanguage.CHOICES)} (or en/ar/ku)")
    ap.add_argument("--currency", "-c", default=None,
                    help=f"one of {', '.join(CurrencyCode.CHOICES)}")
    ap.add_argument("--format", action="store_true",
                    help="also print the formatted figure")
    ap.add_argument("--log-level", default=None,
                    help="logging level (default: LOG_LEVEL or WARNING)")
    ap.add_argument("--version", action="version", version=f"{APP_NAME} {VERSION}")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = Config()
        LoggingConfig.setup_logging(
            log_level=args.log_level or config.get(ConfigKeys.LOG_LEVEL, "WARNING"),
            log_dir=config.get(ConfigKeys.LOG_DIR),
            enable_file=config.get_bool(ConfigKeys.LOG_TO_FILE, False),
        )

        from services.currency_service import format_currency
        from services.tafqit_service import TafqitService

        service = TafqitService()
        words = service.amount_in_words(args.amount, args.lang, args.currency)
        if args.format:
            currency = CurrencyCode.normalize(args.currency, default=service.default_currency)
            print(format_currency(args.amount, currency))
        print(words)
    except FaturaError as exc:
        logger.debug(f"Rejected input: {exc}", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
