"""Human-readable rendering of durations."""

# (nanoseconds per unit, suffix), largest first
_UNITS = (
    (1_000_000_000, "s"),
    (1_000_000, "ms"),
    (1_000, "µs"),
    (1, "ns"),
)


def format_duration(ns: int) -> str:
    """
    Render a duration given in nanoseconds with a unit suffix.

    The largest unit the value reaches is used and the remainder is kept
    exactly, without trailing zeros: ``1500000000`` -> ``1.5s``,
    ``100123456`` -> ``100.123456ms``, ``250000`` -> ``250µs``.

    Args:
        ns: Duration in nanoseconds

    Returns:
        Unit-annotated text
    """
    if ns <= 0:
        return "0ns"

    for scale, suffix in _UNITS:
        if ns >= scale:
            break

    whole, rest = divmod(ns, scale)
    if rest == 0:
        return f"{whole}{suffix}"

    digits = len(str(scale)) - 1
    fraction = f"{rest:0{digits}d}".rstrip("0")
    return f"{whole}.{fraction}{suffix}"
