from typing import Dict, Iterable, Set
import logging

logger = logging.getLogger(__name__)

def diff(previous: Iterable[str], current: Iterable[str]) -> Set[str]:
    """
    Returns the usernames present in previous but missing from current.
    Both sides are collapsed into sets first, so duplicates never show up twice.
    The result is unordered.
    """
    return set(previous) - set(current)

def compare_followers(previous: Iterable[str], current: Iterable[str]) -> Dict:
    """
    Compares the baseline follower list with the current one and identifies changes.
    Returns a dictionary containing:
    - 'new_followers': sorted list of usernames that started following
    - 'unfollowers': sorted list of usernames that stopped following
    - 'followers_count_change': int, difference in unique follower counts
    """
    old_followers = set(previous)
    new_followers = set(current)

    result = {
        'new_followers': sorted(diff(new_followers, old_followers)),
        'unfollowers': sorted(diff(old_followers, new_followers)),
        'followers_count_change': len(new_followers) - len(old_followers),
    }

    logger.info(f"Follower comparison: New={len(result['new_followers'])}, Unfollowers={len(result['unfollowers'])}, Followers Change={result['followers_count_change']}")

    return result
