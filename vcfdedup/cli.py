import logging
import sys
from typing import List, Optional

from .errors import VCardFormatError
from .vcards import dedupe_vcf_with_stats

logger = logging.getLogger(__name__)

USAGE = "usage: vcfdedup <vcf>"


def setup_logging() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")


def read_vcf(path: str) -> str:
    # newline="" keeps lone CRs inside lines; split_lines handles CRLF.
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def main(argv: Optional[List[str]] = None) -> int:
    """Deduplicate the vCard file named on the command line to stdout."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print(USAGE)
        return 2

    setup_logging()
    path = args[0]
    try:
        text = read_vcf(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading file {path}: {e}")
        return 1

    try:
        out, stats = dedupe_vcf_with_stats(text)
    except VCardFormatError as e:
        logger.error(f"Invalid VCF file {path}: {e}")
        return 1

    sys.stdout.write(out)
    logger.info(
        f"Read {stats['records_in']} card(s), wrote {stats['records_out']} "
        f"({stats['merged']} merged, {stats['dropped']} without N dropped)"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
