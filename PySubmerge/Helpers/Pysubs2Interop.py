import pysubs2

from PySubmerge.Cue import Cue
from PySubmerge.TimeRange import TimeRange

ESCAPED_NEWLINE = "\\N"


def Pysubs2EventToCue(event : pysubs2.SSAEvent) -> Cue:
    """
    Convert a pysubs2 SSAEvent to a Cue, keeping all dialogue metadata.
    Text is split on the \\N escape, override codes are left in place.
    """
    text = event.text or ""
    return Cue(
        event.style,
        TimeRange.from_milliseconds(int(event.start), int(event.end)),
        text.split(ESCAPED_NEWLINE) if text else [],
        layer=event.layer,
        name=event.name,
        margin_left=event.marginl,
        margin_right=event.marginr,
        margin_vertical=event.marginv,
        effect=event.effect,
    )

def CueToPysubs2Event(cue : Cue) -> pysubs2.SSAEvent:
    """Convert a Cue to a pysubs2 Dialogue event"""
    return pysubs2.SSAEvent(
        start=cue.start.total_milliseconds,
        end=cue.end.total_milliseconds,
        text=ESCAPED_NEWLINE.join(cue.text_lines),
        style=cue.style,
        layer=cue.layer,
        name=cue.name,
        marginl=int(cue.margin_left),
        marginr=int(cue.margin_right),
        marginv=int(cue.margin_vertical),
        effect=cue.effect,
        type="Dialogue",
    )
