"""
Display formatting utilities for CLI output.

Provides bar graphics and tick/beat formatting helpers.
"""


def value_bar(
    value: int,
    max_value: int = 127,
    width: int = 10,
    filled_char: str = "█",
    empty_char: str = "░",
    show_value: bool = True,
    show_percent: bool = True,
) -> str:
    """
    Create a text-based bar graphic with value and percentage.

    Args:
        value: Current value
        max_value: Maximum value (default 127 for MIDI)
        width: Bar width in characters
        filled_char: Character for filled portion
        empty_char: Character for empty portion
        show_value: Show numeric value
        show_percent: Show percentage

    Returns:
        Formatted string like "91 [████████░░] 71%"
    """
    if max_value <= 0:
        max_value = 1

    # Clamp value
    clamped = max(0, min(value, max_value))

    fill_count = int((clamped / max_value) * width)
    empty_count = width - fill_count

    bar = filled_char * fill_count + empty_char * empty_count
    percent = int((clamped / max_value) * 100)

    parts = []
    if show_value:
        parts.append(f"{value:3d}")
    parts.append(f"[{bar}]")
    if show_percent:
        parts.append(f"{percent:3d}%")

    return " ".join(parts)


def format_ticks(ticks: int, ticks_per_beat: int) -> str:
    """
    Format a tick count with its length in beats.

    Returns:
        "480 (1.00 beats)"
    """
    if ticks_per_beat <= 0:
        return str(ticks)
    return f"{ticks} ({ticks / ticks_per_beat:.2f} beats)"


def format_channel(channel: int) -> str:
    """
    Format a zero-based MIDI channel the way hardware labels it.

    Returns:
        "Ch 10" for channel 9
    """
    return f"Ch {channel + 1:2d}"
