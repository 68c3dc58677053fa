from enum import Enum


class SubtitleStandard(Enum):
    """Subtitle text-format variants that cues can be serialized to"""
    SSA = "ssa"
    SRT = "srt"

    def __str__(self) -> str:
        return self.name
