#!/usr/bin/env python3
"""CLI for the Google Translate client"""
import argparse
import logging
import sys

import httpx
from dotenv import find_dotenv, load_dotenv

from google_translate.cache import ResponseCache
from google_translate.config import get_storage_path
from google_translate.exceptions import CacheError, TranslateError
from google_translate.translator import Translator

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Detect and translate text with the Google Translate API'
    )
    parser.add_argument(
        '--storage-path',
        help='Storage root for the response cache (default: $GOOGLE_TRANSLATE_STORAGE_PATH or storage)'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    detect = subparsers.add_parser('detect', help='Print the detected language code')
    detect.add_argument('text', help='Text to detect')

    translate = subparsers.add_parser('translate', help='Print the translation of TEXT')
    translate.add_argument('text', help='Text to translate')
    translate.add_argument('--target', required=True, help='Target language code')
    translate.add_argument('--source', help='Source language code (detected when omitted)')
    translate.add_argument(
        '--no-detect',
        action='store_true',
        help='Fail instead of detecting the source language'
    )
    translate.add_argument(
        '--style',
        choices=['get', 'post'],
        help='Request style (default: $GOOGLE_TRANSLATE_REQUEST_STYLE or get)'
    )
    translate.add_argument(
        '--no-cache',
        action='store_true',
        help='Bypass the response cache'
    )

    subparsers.add_parser('cache-stats', help='Print response cache statistics')
    subparsers.add_parser('cache-clear', help='Remove all cached responses')
    return parser


def _run_cache_command(command: str, storage_path: str) -> None:
    cache = ResponseCache.for_storage_root(storage_path)
    if command == 'cache-clear':
        cache.clear()
        cache.flush()
        return
    stats = cache.stats()
    print(f"entries: {stats['total_entries']}")
    print(f"language pairs: {stats['language_pairs']}")
    print(f"path: {stats['path']}")


def main(argv=None):
    """Main CLI entry point"""
    load_dotenv(find_dotenv(usecwd=True))
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    # Keep request URLs (which carry the API key) out of the logs
    logging.getLogger('httpx').setLevel(logging.ERROR)

    storage_path = args.storage_path or get_storage_path()

    try:
        if args.command in ('cache-stats', 'cache-clear'):
            _run_cache_command(args.command, storage_path)
            sys.exit(0)

        if args.command == 'detect':
            with Translator.from_env(cache_enabled=False) as translator:
                print(translator.detect(args.text))
            sys.exit(0)

        use_cache = False if args.no_cache else None
        with Translator.from_env(
            cache_enabled=use_cache,
            storage_path=storage_path,
            source_lang=args.source,
            target_lang=args.target,
            request_style=args.style,
        ) as translator:
            result = translator.translate(args.text, auto_detect=not args.no_detect)
            translator.flush_cache()

        if result is None:
            logger.warning("No translation returned")
        else:
            print(result)
        sys.exit(0)

    except CacheError as e:
        logger.error(f"Cache file unusable: {e}")
        sys.exit(1)
    except TranslateError as e:
        logger.error(f"Translate failed: {e}")
        sys.exit(1)
    except httpx.HTTPError as e:
        logger.error(f"Request failed: {e}")
        sys.exit(1)
    except ValueError as e:
        logger.error(f"Invalid response from API: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
