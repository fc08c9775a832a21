"""
Removal of the prefix and suffix shared by every sequence.

Aligned variant libraries often differ only in a short core region.
Trimming the common ends keeps the encoded tensors small; the prefix
offset maps trimmed positions back to original coordinates.
"""

import logging
from typing import List, Sequence, Tuple

from seq2exp.exceptions import EmptyInputError

logger = logging.getLogger(__name__)


def longest_common_prefix(sequences: Sequence[str]) -> str:
    """
    Find the longest prefix shared by all sequences.

    A single sequence is its own common prefix.

    Args:
        sequences: Non-empty list of strings

    Returns:
        The shared leading substring, "" if there is none

    Raises:
        EmptyInputError: If no sequences are given

    Example:
        >>> longest_common_prefix(["hello", "help", "helicopter"])
        'hel'
        >>> longest_common_prefix(["abc", "def"])
        ''
    """
    if len(sequences) == 0:
        raise EmptyInputError("Cannot find the common prefix of an empty collection")

    prefix = sequences[0]
    for seq in sequences[1:]:
        n = 0
        limit = min(len(prefix), len(seq))
        while n < limit and prefix[n] == seq[n]:
            n += 1
        prefix = prefix[:n]
        if not prefix:
            break

    return prefix


def longest_common_suffix(sequences: Sequence[str]) -> str:
    """
    Find the longest suffix shared by all sequences.

    Example:
        >>> longest_common_suffix(["testing", "running", "jumping"])
        'ing'
    """
    return longest_common_prefix([seq[::-1] for seq in sequences])[::-1]


def trim_common_ends(sequences: Sequence[str]) -> Tuple[int, List[str]]:
    """
    Strip the common prefix and suffix from every sequence.

    When prefix and suffix overlap (identical or very short sequences)
    the remaining core is clamped to the empty string. A single
    sequence is entirely its own prefix, so it trims to "" with an
    offset equal to its length.

    Args:
        sequences: Non-empty list of strings

    Returns:
        Tuple of (prefix_offset, trimmed_sequences) where prefix_offset
        is the length of the removed prefix

    Example:
        >>> trim_common_ends(["AAATCGGG", "AAAGGTGG", "AAACCCGG"])
        (3, ['TCG', 'GGT', 'CCC'])
        >>> trim_common_ends(["ACGT"])
        (4, [''])
    """
    plen = len(longest_common_prefix(sequences))
    slen = len(longest_common_suffix(sequences))

    trimmed = [seq[plen:max(plen, len(seq) - slen)] for seq in sequences]

    logger.debug("Trimmed common prefix of %d and suffix of %d characters", plen, slen)
    return plen, trimmed
