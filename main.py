#!/usr/bin/env python3
"""Word frequency CLI for word clouds.

Usage:
    python main.py analyze -i book.txt --top 30 --stop-words en
    python main.py analyze --url https://example.com --tokenizer wordfreq
    python main.py analyze --text "the cat sat on the mat" --json
    python main.py languages
"""

import argparse
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from analysis import FrequencyAnalyzer
from config import (
    DEFAULT_ENCODING, DEFAULT_URL_LOAD_TIMEOUT, DEFAULT_WORD_FREQUENCIES_TO_RETURN,
    DEFAULT_WORD_MAX_LENGTH, DEFAULT_WORD_MIN_LENGTH, TOKENIZERS, AnalyzerConfig,
)
from core.filters import UrlFilter
from core.languages import ALL_LANGUAGES, ENGLISH, is_supported
from core.normalizers import DiacriticStrippingNormalizer
from core.text_loader import read_file
from core.tokenizer import create_tokenizer


def language_code(value: str) -> str:
    """argparse type for language codes (aliases such as es-AR accepted)."""
    if not is_supported(value):
        supported = ", ".join(lang.code for lang in ALL_LANGUAGES)
        raise argparse.ArgumentTypeError(f"unsupported language '{value}' (supported: {supported})")
    return value


def build_analyzer(args) -> FrequencyAnalyzer:
    """Create analyzer from parsed CLI arguments."""
    config = AnalyzerConfig(
        word_frequencies_to_return=args.top,
        min_word_length=args.min_length,
        max_word_length=args.max_length,
        character_encoding=args.encoding,
        url_load_timeout=args.timeout,
    )
    analyzer = FrequencyAnalyzer(config)
    analyzer.set_word_tokenizer(create_tokenizer(args.tokenizer, args.language))

    if args.stop_words:
        analyzer.set_stop_words_for_language(args.stop_words, case_variants=True)
    if args.stop_words_file:
        extra = {w.strip() for w in Path(args.stop_words_file).read_text(encoding=args.encoding).splitlines()}
        analyzer.set_stop_words(analyzer.config.stop_words | {w for w in extra if w})
    if args.skip_urls:
        analyzer.add_filter(UrlFilter())
    if args.max_zipf is not None:
        from providers.filters.zipf_filter import ZipfFilter

        analyzer.add_filter(ZipfFilter(args.language, max_zipf=args.max_zipf))
    if args.strip_accents:
        analyzer.add_normalizer(DiacriticStrippingNormalizer())
    if args.lemmatize:
        from providers.normalizers.spacy_lemmatizer import SpacyLemmaNormalizer

        analyzer.add_normalizer(SpacyLemmaNormalizer(args.language))

    return analyzer


def cmd_analyze(args):
    """Count words and print the top N."""
    analyzer = build_analyzer(args)

    if args.url:
        result = analyzer.load_url(args.url)
    elif args.text:
        result = analyzer.load(args.text)
    elif args.input == ["-"]:
        result = analyzer.load_stream(sys.stdin.buffer)
    else:
        texts = []
        for path in args.input:
            texts.extend(read_file(path, analyzer.config.character_encoding))
        result = analyzer.load(texts)

    if args.json:
        print(json.dumps([{"word": wf.word, "count": wf.count} for wf in result], ensure_ascii=False, indent=2))
        return

    if not result:
        print("No words found")
        return

    width = max(len(wf.word) for wf in result)
    print(f"Top {len(result)} words:\n")
    for i, wf in enumerate(result, 1):
        print(f"  {i:>3}. {wf.word:<{width}}  {wf.count}")


def cmd_languages(args):
    """List supported languages."""
    print(f"Languages ({len(ALL_LANGUAGES)}):\n")
    for lang in ALL_LANGUAGES:
        print(f"  {lang.code:<9} {lang.name}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Word frequency analysis for word clouds - count, filter and rank words in text"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # === analyze command ===
    analyze_parser = subparsers.add_parser("analyze", help="Count words in files, a URL or inline text")
    source = analyze_parser.add_mutually_exclusive_group(required=True)
    source.add_argument("-i", "--input", nargs="+", help="Input text file(s), '-' for stdin")
    source.add_argument("--url", help="Web page to analyze (visible body text)")
    source.add_argument("--text", nargs="+", help="Inline text(s)")
    analyze_parser.add_argument("-n", "--top", type=int, default=DEFAULT_WORD_FREQUENCIES_TO_RETURN,
                                help=f"Number of words to return (default: {DEFAULT_WORD_FREQUENCIES_TO_RETURN})")
    analyze_parser.add_argument("--min-length", type=int, default=DEFAULT_WORD_MIN_LENGTH,
                                help=f"Minimum raw token length (default: {DEFAULT_WORD_MIN_LENGTH})")
    analyze_parser.add_argument("--max-length", type=int, default=DEFAULT_WORD_MAX_LENGTH,
                                help=f"Maximum raw token length (default: {DEFAULT_WORD_MAX_LENGTH})")
    analyze_parser.add_argument("--tokenizer", default="whitespace", choices=TOKENIZERS,
                                help="Word tokenizer (default: whitespace)")
    analyze_parser.add_argument("-l", "--language", default=ENGLISH.code, type=language_code,
                                help="Language for nltk/wordfreq tokenizers, zipf filter and lemmatizer (default: en)")
    analyze_parser.add_argument("--stop-words", metavar="LANG", default=None, type=language_code,
                                help="Use built-in stop words for language (e.g. en, ru, es)")
    analyze_parser.add_argument("--stop-words-file", default=None,
                                help="Extra stop words, one per line")
    analyze_parser.add_argument("--skip-urls", action="store_true", help="Drop tokens that look like links")
    analyze_parser.add_argument("--max-zipf", type=float, default=None,
                                help="Drop words more common than this Zipf score (1-7, e.g. 5.5)")
    analyze_parser.add_argument("--strip-accents", action="store_true", help="Remove diacritics (café -> cafe)")
    analyze_parser.add_argument("--lemmatize", action="store_true",
                                help="Count lemmas instead of word forms (needs spaCy model)")
    analyze_parser.add_argument("--encoding", default=DEFAULT_ENCODING,
                                help=f"Character encoding for files (default: {DEFAULT_ENCODING})")
    analyze_parser.add_argument("--timeout", type=int, default=DEFAULT_URL_LOAD_TIMEOUT,
                                help=f"URL load timeout in ms (default: {DEFAULT_URL_LOAD_TIMEOUT})")
    analyze_parser.add_argument("--json", action="store_true", help="Print JSON instead of a table")
    analyze_parser.set_defaults(func=cmd_analyze)

    # === languages command ===
    languages_parser = subparsers.add_parser("languages", help="List supported languages")
    languages_parser.set_defaults(func=cmd_languages)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        args.func(args)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
