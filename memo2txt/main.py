# main.py
#   Command line entry point. Reads the exported HTML, runs it through the
#   pipeline (extract -> normalize -> timestamp -> sort/render) and writes
#   the text file.

import sys
import logging
import argparse
from pathlib import Path
from typing import List, Optional, Tuple

from memo2txt import config
from memo2txt.assembler import assemble, build_records
from memo2txt.errors import InputUnavailable, Memo2TxtError, NoMemosFound, OutputUnwritable
from memo2txt.extractor import extract_memos


def read_input(path: str, encoding: str = config.ENCODING) -> str:
    try:
        return Path(path).read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError, LookupError) as e:
        # LookupError: unknown encoding name
        raise InputUnavailable(path, e) from e


def write_output(path: str, text: str, encoding: str = config.ENCODING) -> None:
    try:
        with open(path, "w", encoding=encoding, newline="\n") as out:
            out.write(text)
    except (OSError, LookupError) as e:
        raise OutputUnwritable(path, e) from e


def convert(html: str, unparsed: str = config.UNPARSED_POLICY) -> Tuple[str, int]:
    """The whole pipeline on an in-memory document. Raises NoMemosFound."""
    raws = extract_memos(html)
    records = build_records(raws)
    return assemble(records, unparsed=unparsed)


def run(
    input_path: str = config.INPUT_FILE,
    output_path: str = config.OUTPUT_FILE,
    unparsed: str = config.UNPARSED_POLICY,
    encoding: str = config.ENCODING,
) -> int:
    """Converts input_path into output_path and returns the number of memos written."""
    html = read_input(input_path, encoding=encoding)
    text, count = convert(html, unparsed=unparsed)
    write_output(output_path, text, encoding=encoding)
    logging.info(f"Successfully processed {count} memos. Output written to {output_path}")
    return count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="memo2txt",
        description="Convert an exported HTML memo archive into a chronological text file.",
    )
    parser.add_argument("input", nargs="?", default=config.INPUT_FILE,
                        help=f"Exported HTML file (default: {config.INPUT_FILE})")
    parser.add_argument("output", nargs="?", default=config.OUTPUT_FILE,
                        help=f"Text file to write (default: {config.OUTPUT_FILE})")
    parser.add_argument("--unparsed", choices=config.UNPARSED_POLICIES, default=config.UNPARSED_POLICY,
                        help="Where memos with an unreadable timestamp go (default: %(default)s)")
    parser.add_argument("--encoding", default=config.ENCODING,
                        help="Encoding of both files (default: %(default)s)")
    parser.add_argument("--log-level", type=str.upper, choices=config.LOG_LEVELS, default=config.LOG_LEVEL,
                        help="Logging level (default: %(default)s)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format=config.LOG_FORMAT)
    for warning in config.CONFIG_WARNINGS:
        logging.warning(warning)

    try:
        run(args.input, args.output, unparsed=args.unparsed, encoding=args.encoding)
    except Memo2TxtError as e:
        if isinstance(e, NoMemosFound):
            logging.info(str(e))
        else:
            logging.error(str(e))
        return e.exit_code
    return 0


if __name__ == "__main__":
    sys.exit(main())
