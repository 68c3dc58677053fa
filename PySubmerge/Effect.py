from __future__ import annotations

from dataclasses import dataclass, field

SCROLL_UP = "Scroll up"
SCROLL_DOWN = "Scroll down"
BANNER = "Banner"

RECOGNISED_EFFECTS = (SCROLL_UP, SCROLL_DOWN, BANNER)


@dataclass(frozen=True)
class EffectDescriptor:
    """
    A parsed SSA transition effect, e.g. "Scroll up;y1;y2;delay[;fadeawayheight]" or "Banner;delay".

    Effect names are case sensitive. Parameters are kept as text.
    """
    name : str
    parameters : tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_scroll(self) -> bool:
        return self.name in (SCROLL_UP, SCROLL_DOWN)

    def __str__(self) -> str:
        return ";".join((self.name,) + self.parameters)


def ParseEffect(effect : str|None) -> EffectDescriptor|None:
    """
    Parse an effect string into a descriptor, or None if it is empty or not one of the recognised effects
    """
    if not effect:
        return None

    name, *parameters = effect.split(";")
    if name not in RECOGNISED_EFFECTS:
        return None

    # Scroll y1;y2;delay[;fadeawayheight], Banner delay[;lefttoright;fadeawaywidth]
    minimum, maximum = (3, 4) if name in (SCROLL_UP, SCROLL_DOWN) else (1, 3)
    if not minimum <= len(parameters) <= maximum:
        return None

    return EffectDescriptor(name, tuple(parameters))
