from blinker import Signal


class ConversionEvents:
    """Container for blinker signals emitted while converting cues between standards."""

    converted: Signal
    warning: Signal

    def __init__(self):
        self.converted = Signal("conversion-converted")
        self.warning = Signal("conversion-warning")
