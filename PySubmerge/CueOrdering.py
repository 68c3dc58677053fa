"""
Chronological ordering of cues by start time.

Only the start time is considered. Sorting and merging are stable, so cues that
start together keep the order in which they were supplied.
"""
import heapq
from collections.abc import Iterable

from PySubmerge.Cue import Cue
from PySubmerge.TimeCode import TimeCode


def cue_sort_key(cue : Cue) -> TimeCode:
    return cue.time_range.start

def compare_cues(a : Cue, b : Cue) -> int:
    return a.compare_to(b)

def sort_cues(cues : Iterable[Cue]) -> list[Cue]:
    return sorted(cues, key=cue_sort_key)

def merge_cues(*sequences : Iterable[Cue]) -> list[Cue]:
    """
    Merge several cue sequences into one chronological list.
    Ties go to the earlier sequence, then to the earlier position within it.
    """
    return list(heapq.merge(*(sort_cues(sequence) for sequence in sequences), key=cue_sort_key))

def is_chronological(cues : Iterable[Cue]) -> bool:
    previous : TimeCode|None = None
    for cue in cues:
        if previous is not None and cue.start < previous:
            return False
        previous = cue.start
    return True
