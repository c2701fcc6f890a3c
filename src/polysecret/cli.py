import argparse
import logging
import sys

from polysecret.config import RecoverConfig, DEFAULT_INPUT
from polysecret.errors import RecoveryError
from polysecret.recover import recover_from_document
from polysecret.samples import load_document

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(prog="polysecret", description="Recover the constant term of a polynomial from base-encoded sample points")
    parser.add_argument("input", type=str, nargs="?", default=None, help=f"path to the JSON input (default: {DEFAULT_INPUT})")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="log progress to stderr (-vv for debug output)")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = RecoverConfig.from_args(args)

    logging.basicConfig(level=config.log_level, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")

    try:
        doc = load_document(config.input_path)
        logger.info("Loaded %s: n=%d, k=%d, %d samples", config.input_path, doc.n, doc.k, len(doc.samples))
        secret = recover_from_document(doc)
    except RecoveryError as e:
        print(f"error: {e}", file=sys.stderr)
        return e.exit_code

    print(secret)
    return 0


def entry():
    sys.exit(main())
