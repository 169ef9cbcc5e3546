"""syllabreak CLI - hyphenate words from the command line.

Usage:
    python -m syllabreak.main -l nl_NL lettergrepen
    python -m syllabreak.main -l nl_NL --mode wrap --width 11 autobandventieldopje
    python -m syllabreak.main -l hu_HU --download --mode iterate kulissza
"""

import argparse
import logging
import sys
from pathlib import Path

from . import config as cfg
from .errors import DictionaryLoadError, UnknownLanguage
from .registry import LanguageRegistry
from .sources import DirectorySource, DownloadSource

MODES = ("inserted", "wrap", "iterate")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser, with defaults from config.json."""
    project_root = Path(__file__).parent.parent.parent

    parser = argparse.ArgumentParser(
        description="syllabreak - Pattern-based hyphenation"
    )
    parser.add_argument("words", nargs="*", help="Words to hyphenate")
    parser.add_argument(
        "--language",
        "-l",
        type=str,
        default=cfg.default_language(),
        help=f"Language tag, e.g. nl_NL or en-US (default: {cfg.default_language()})",
    )
    parser.add_argument(
        "--dictionaries",
        "-d",
        type=Path,
        default=project_root / cfg.default_dictionaries_dir(),
        help="Directory with hyph_*.dic / hyph-*.tex files",
    )
    parser.add_argument(
        "--download",
        action="store_true",
        help="Download LibreOffice dictionaries instead of reading --dictionaries",
    )
    parser.add_argument(
        "--cache-dir",
        "-c",
        type=Path,
        default=project_root / cfg.default_cache_dir(),
        help="Cache directory for downloaded dictionaries",
    )
    parser.add_argument(
        "--force",
        "-f",
        action="store_true",
        help="Force re-download of dictionaries",
    )
    parser.add_argument(
        "--left",
        type=int,
        default=cfg.default_left(),
        help=f"Minimum characters before a break (default: {cfg.default_left()})",
    )
    parser.add_argument(
        "--right",
        type=int,
        default=cfg.default_right(),
        help=f"Minimum characters after a break (default: {cfg.default_right()})",
    )
    parser.add_argument(
        "--hyphen",
        type=str,
        default=cfg.default_hyphen(),
        help="Hyphen string to insert",
    )
    parser.add_argument(
        "--mode",
        "-m",
        choices=MODES,
        default="inserted",
        help="inserted: all hyphens; wrap: best split for --width; iterate: every split",
    )
    parser.add_argument(
        "--width",
        "-w",
        type=int,
        help="Maximum length of the first part, hyphen included (wrap mode)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available languages and exit",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=cfg.get_default("verbose", False),
        help="Log dictionary loading",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.mode == "wrap" and args.width is None:
        parser.error("--width is required with --mode wrap")
    if args.left < 1 or args.right < 1:
        parser.error("--left and --right must be at least 1")

    if args.verbose:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    if args.download:
        source = DownloadSource(args.cache_dir, force=args.force)
    else:
        source = DirectorySource(args.dictionaries)
    registry = LanguageRegistry(source, left=args.left, right=args.right)

    if args.list:
        for language in sorted(registry.languages()):
            print(language)
        return 0

    try:
        dictionary = registry.get_or_build(args.language)
    except UnknownLanguage as e:
        print(f"ERROR - {e}", file=sys.stderr)
        return 2
    except DictionaryLoadError as e:
        print(f"ERROR - {e}", file=sys.stderr)
        return 1

    for word in args.words:
        if args.mode == "inserted":
            print(dictionary.inserted(word, hyphen=args.hyphen))
        elif args.mode == "wrap":
            parts = dictionary.wrap(word, args.width, hyphen=args.hyphen)
            print(" ".join(parts) if parts else word)
        else:
            for first, last in dictionary.iterate(word):
                print(f"{first} {last}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
