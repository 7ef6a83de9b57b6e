import argparse
import logging
import sys
from typing import List, Optional, TextIO

from config.settings import DEFAULT_ACCOUNT_KEY, LOG_LEVEL, RESET_CORRUPT_BASELINE
from db.models import init_db, SessionLocal
from tracker.check_runner import run_check, format_report
from tracker.errors import DecodeError

def read_followers(stream: TextIO) -> List[str]:
    # One username per line, trimmed the same way the page scraper trims them
    return [line.strip() for line in stream if line.strip()]

def main(argv: Optional[List[str]] = None, session_factory=SessionLocal) -> int:
    logging.basicConfig(
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s', level=getattr(logging, LOG_LEVEL.upper())
    )

    p = argparse.ArgumentParser(description='Compare the current follower list with the stored baseline and report unfollowers.')
    p.add_argument('--account', default=DEFAULT_ACCOUNT_KEY, help='Storage key of the tracked account.')
    p.add_argument('--followers', type=argparse.FileType('r', encoding='utf-8'), default=sys.stdin,
                   help='File with one username per line (default: stdin).')
    p.add_argument('--reset-corrupt', action='store_true', help='Discard an unreadable baseline instead of failing.')
    args = p.parse_args(argv)

    init_db(bind=session_factory.kw.get('bind'))

    followers = read_followers(args.followers)
    if args.followers is not sys.stdin:
        args.followers.close()
    try:
        result = run_check(session_factory, args.account, followers,
                           reset_corrupt_baseline=args.reset_corrupt or RESET_CORRUPT_BASELINE)
    except DecodeError as e:
        print(f'Error: {e}')
        return 2

    for line in format_report(result):
        print(line)
    return 0 if result is not None else 1

if __name__ == '__main__':
    sys.exit(main())
