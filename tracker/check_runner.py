import logging
from typing import Callable, Dict, Iterable, List, Optional

from sqlalchemy.orm import Session

from config.settings import RESET_CORRUPT_BASELINE
from db.db_utils import load_baseline_blob, save_baseline_blob
from tracker.codec import decode_collection, encode_collection
from tracker.diff_checker import compare_followers
from tracker.errors import DecodeError

logger = logging.getLogger(__name__)

def run_check(db_session_factory: Callable[[], Session], account_key: str, current_followers: Iterable[str],
              reset_corrupt_baseline: bool = RESET_CORRUPT_BASELINE) -> Optional[Dict]:
    """
    Runs one comparison cycle for account_key: loads the stored baseline, finds the
    unfollowers against current_followers, then stores current_followers as the new baseline.
    Returns None without touching the baseline when current_followers is empty.
    """
    current_followers = list(current_followers or [])
    if not current_followers:
        logger.error(f'No current followers supplied for {account_key}. Keeping the stored baseline.')
        return None
    logger.info(f'Starting check for {account_key} with {len(current_followers)} current followers')

    with db_session_factory() as db:
        blob = load_baseline_blob(db, account_key)
        try:
            old_followers = decode_collection(blob)
        except DecodeError as e:
            if not reset_corrupt_baseline:
                logger.error(f'Stored baseline for {account_key} is corrupt: {e}')
                raise
            logger.warning(f'Discarding corrupt baseline for {account_key}: {e}')
            old_followers = []
            blob = b''

        # Encode before writing anything so a failure leaves the old baseline intact
        new_blob = encode_collection(current_followers)

        if not blob:
            save_baseline_blob(db, account_key, new_blob, len(current_followers))
            logger.info(f'First run for {account_key}. Saved {len(current_followers)} followers.')
            return {
                'first_run': True,
                'new_followers': [],
                'unfollowers': [],
                'followers_count': len(current_followers),
            }

        diff = compare_followers(old_followers, current_followers)
        save_baseline_blob(db, account_key, new_blob, len(current_followers))
        logger.info(f"Check finished for {account_key}. Found {len(diff['unfollowers'])} unfollower(s).")

    return {
        'first_run': False,
        'new_followers': diff['new_followers'],
        'unfollowers': diff['unfollowers'],
        'followers_count': len(current_followers),
        'followers_count_change': diff['followers_count_change'],
    }

def format_report(result: Optional[Dict]) -> List[str]:
    if result is None:
        return ['Error: Could not read current followers.']

    lines = [f"Found {result['followers_count']} current followers."]
    if result['first_run']:
        lines.append(f"Saved {result['followers_count']} followers. Run again later to compare.")
        return lines

    if result['unfollowers']:
        lines.extend(result['unfollowers'])
    else:
        lines.append('No new unfollowers found.')
    lines.append(f"Process finished. Found {len(result['unfollowers'])} unfollower(s).")
    return lines
