import logging
from typing import Iterable, List, Optional

import msgpack

from tracker.errors import DecodeError, EncodeError

logger = logging.getLogger(__name__)


def decode_collection(blob: Optional[bytes]) -> List[str]:
    """
    Turns a stored baseline blob back into the list of follower usernames.
    An empty blob (or None, nothing stored yet) decodes to an empty list.
    Anything else must be a MessagePack array of strings, otherwise DecodeError is raised.
    """
    if not blob:
        return []

    try:
        followers = msgpack.unpackb(bytes(blob), raw=False)
    except (ValueError, TypeError, msgpack.UnpackException) as e:
        raise DecodeError(f'Failed to deserialize old followers: {e}') from e

    if not isinstance(followers, list):
        raise DecodeError(f'Failed to deserialize old followers: expected an array, got {type(followers).__name__}')
    for username in followers:
        if not isinstance(username, str):
            raise DecodeError(f'Failed to deserialize old followers: expected a string, got {type(username).__name__}')

    logger.debug(f'Decoded {len(followers)} followers from {len(blob)} bytes')
    return followers


def encode_collection(collection: Iterable[str]) -> bytes:
    """
    Serializes follower usernames into a MessagePack array.
    Order and duplicates are kept as given.
    """
    followers = list(collection)
    for username in followers:
        if not isinstance(username, str):
            raise EncodeError(f'Failed to serialize to MessagePack: expected a string, got {type(username).__name__}')

    try:
        blob = msgpack.packb(followers, use_bin_type=True)
    except (ValueError, TypeError, OverflowError) as e:
        raise EncodeError(f'Failed to serialize to MessagePack: {e}') from e

    logger.debug(f'Encoded {len(followers)} followers into {len(blob)} bytes')
    return blob
