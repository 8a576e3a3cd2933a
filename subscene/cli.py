"""
Command line interface for the Subscene client.

Examples:
    subscene search "The Big Bang Theory s01e01" --language English,Spanish
    subscene find 136037 --url /subtitles/the-big-bang-theory-first-season/english/136037
"""

import argparse
import json
import sys

from subscene import settings
from subscene.client import create_client_from_config
from subscene.errors import SubsceneError
from subscene.utils.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(description='Search and inspect subtitles on Subscene')
    parser.add_argument('--language', metavar='NAMES',
                        help='Language filter by name, comma separated (e.g. English,Spanish)')
    parser.add_argument('--language-ids', metavar='IDS',
                        help='Language filter by site id, comma separated (e.g. 13,38)')
    parser.add_argument('--base-url', default=settings.BASE_URL,
                        help=f'Site endpoint (default: {settings.BASE_URL})')
    parser.add_argument('--log-level', default=None,
                        help='Logging level (default: from config)')
    parser.add_argument('--log-file', default=settings.LOG_FILE,
                        help='Also write logs to this file')

    subparsers = parser.add_subparsers(dest='command', required=True)

    search_parser = subparsers.add_parser('search', help='Search for a release')
    search_parser.add_argument('query', nargs='?', default=None,
                               help='Release to search for; omit for the unfiltered listing')

    find_parser = subparsers.add_parser('find', help='Show one subtitle')
    find_parser.add_argument('id', help='Subtitle id')
    find_parser.add_argument('--url', default=None,
                             help='Detail page URL from a search result (more reliable than the id)')

    return parser.parse_args(argv)


def main(argv=None):
    args = parse_arguments(argv)
    setup_logging(log_file=args.log_file, log_level=args.log_level)

    try:
        client = create_client_from_config(base_url=args.base_url)
        if args.language_ids:
            client.set_language_ids(args.language_ids)
        elif args.language:
            client.set_language_filter(args.language)

        if args.command == 'search':
            output = [r.to_dict() for r in client.search(args.query)]
        elif args.url:
            output = client.find_by_url(args.id, args.url).to_dict()
        else:
            output = client.find_by_id(args.id).to_dict()
    except (SubsceneError, ValueError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1

    print(json.dumps(output, ensure_ascii=False, indent=2))
    return 0


if __name__ == '__main__':
    sys.exit(main())
