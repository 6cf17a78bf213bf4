"""Human-readable duration text with sub-second units."""

from __future__ import annotations

NANOS_PER_SEC = 1_000_000_000
_MAX_DIGITS = 9


def _fmt_decimal(
    integer: int, fraction: int, divisor: int, suffix: str, precision: int | None
) -> str:
    limit = _MAX_DIGITS if precision is None else min(precision, _MAX_DIGITS)
    digits: list[int] = []
    while fraction > 0 and len(digits) < limit:
        digits.append(fraction // divisor)
        fraction %= divisor
        divisor //= 10

    if fraction > 0 and fraction >= divisor * 5:
        carry = True
        for pos in reversed(range(len(digits))):
            if digits[pos] < 9:
                digits[pos] += 1
                carry = False
                break
            digits[pos] = 0
        if carry:
            integer += 1

    shown = len(digits) if precision is None else min(precision, _MAX_DIGITS)
    if shown == 0:
        return f"{integer}{suffix}"
    fraction_text = "".join(map(str, digits)).ljust(_MAX_DIGITS, "0")[:shown]
    total = len(digits) if precision is None else precision
    return f"{integer}.{fraction_text.ljust(total, '0')}{suffix}"


def format_duration_debug(nanos: int, precision: int | None = None, width: int = 0) -> str:
    """Format a duration of `nanos` nanoseconds in the largest fitting unit.

    Units are s, ms, µs and ns. With no precision every significant
    fractional digit is shown; otherwise the value is rounded to that many
    digits. The result is right-aligned to `width` characters.
    """
    if nanos < 0:
        raise ValueError("durations cannot be negative")
    secs, sub = divmod(nanos, NANOS_PER_SEC)
    if secs > 0:
        text = _fmt_decimal(secs, sub, NANOS_PER_SEC // 10, "s", precision)
    elif sub >= 1_000_000:
        text = _fmt_decimal(sub // 1_000_000, sub % 1_000_000, 100_000, "ms", precision)
    elif sub >= 1_000:
        text = _fmt_decimal(sub // 1_000, sub % 1_000, 100, "µs", precision)
    else:
        text = _fmt_decimal(sub, 0, 1, "ns", precision)
    return text.rjust(width)