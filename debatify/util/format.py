"""Display formatting helpers."""

_SUFFIXES = (
    (1_000_000_000, "B"),
    (1_000_000, "M"),
    (1_000, "K"),
)


def format_views(views: int) -> str:
    """Render a raw counter in abbreviated form for display.

    Values below 1000 are rendered as-is. Larger values get two decimals,
    with a trailing ".00" dropped, and a K/M/B suffix:

        999 -> "999", 1000 -> "1K", 1500 -> "1.50K", 2_340_000 -> "2.34M"

    The stored counter is never changed by this transform.
    """
    for threshold, suffix in _SUFFIXES:
        if views >= threshold:
            scaled = f"{views / threshold:.2f}"
            if scaled.endswith(".00"):
                scaled = scaled[:-3]
            return f"{scaled}{suffix}"
    return str(views)
