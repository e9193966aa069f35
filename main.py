"""Main entry point for the passphrase generator."""

import argparse
import asyncio
import logging
import random
import sys
from typing import List, Optional, Tuple
from shared.config.config import config
from shared.domain.models import Dictionary, PasswordSpec
from shared.domain.errors import PasswordGenerationError
from shared.domain.consts import WordIndexName
from shared.factories.index_factory import create_index
from composer.services.password_composer import PasswordComposer
from composer.infrastructure.dictionary_loader import load_dictionary_file
from composer.infrastructure.dictionary_client import DictionaryClient

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s"
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser. Defaults come from config."""
    parser = argparse.ArgumentParser(
        description="Generate memorable passwords from a word dictionary."
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--dictionary", "-d",
        default=None,
        help=(
            "Dictionary file (.csv or .json) with Word and StringLength fields "
            "(default: DICTIONARY_URL if set, else DICTIONARY_FILE)"
        ),
    )
    source.add_argument(
        "--url", "-u",
        default=None,
        help="Remote dictionary URL",
    )
    parser.add_argument("--min", type=int, default=config.MIN_WORD_LENGTH, dest="min_word_length",
                        help="Minimum word length")
    parser.add_argument("--max", type=int, default=config.MAX_WORD_LENGTH, dest="max_word_length",
                        help="Maximum word length")
    parser.add_argument("--words", "-w", type=int, default=config.WORD_COUNT, dest="word_count",
                        help="Number of words per password")
    parser.add_argument("--count", "-c", type=int, default=1,
                        help="Number of passwords to generate")
    parser.add_argument("--index", default=config.WORD_INDEX,
                        choices=[name.value for name in WordIndexName],
                        help="Word index strategy")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed the random source (reproducible output)")
    return parser


def resolve_source(args: argparse.Namespace) -> Tuple[str, Optional[str]]:
    """
    Pick the dictionary source.
    
    An explicit --dictionary or --url wins; otherwise DICTIONARY_URL is used
    when set, then DICTIONARY_FILE.
    
    Returns:
        Tuple of (dictionary_file, url) where url is None for a local file.
    """
    if args.dictionary is not None:
        return args.dictionary, None
    if args.url is not None:
        return config.DICTIONARY_FILE, args.url
    return config.DICTIONARY_FILE, config.DICTIONARY_URL or None


async def load_dictionary(dictionary_file: str, url: Optional[str]) -> Dictionary:
    """Load the dictionary from `url` when given, otherwise from `dictionary_file`."""
    if not url:
        return load_dictionary_file(dictionary_file)
    
    client = DictionaryClient()
    try:
        return await client.fetch(url)
    finally:
        await client.close()


async def main(argv: Optional[List[str]] = None) -> int:
    """
    Main execution function.
    
    Returns:
        Process exit code: 0 on success, 1 on any generation error.
    """
    args = build_parser().parse_args(argv)
    
    if args.count < 1:
        logger.error(f"--count must be >= 1, got {args.count}")
        return 1
    
    spec = PasswordSpec(
        min_word_length=args.min_word_length,
        max_word_length=args.max_word_length,
        word_count=args.word_count,
    )
    rng = random.Random(args.seed) if args.seed is not None else None
    
    # argparse does not check defaults against choices, so WORD_INDEX may be unknown
    try:
        composer = PasswordComposer(index=create_index(args.index), rng=rng)
    except ValueError as e:
        logger.error(str(e))
        return 1
    
    dictionary_file, url = resolve_source(args)
    try:
        dictionary = await load_dictionary(dictionary_file, url)
        passwords = [composer.generate(dictionary, spec) for _ in range(args.count)]
    except PasswordGenerationError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1
    
    for password in passwords:
        print(password)
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
