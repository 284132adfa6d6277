from regex import fullmatch


__all__ = (
    'U64_MAX',
    'is_decimal',
    'is_u64',
)


U64_MAX = (1 << 64) - 1


def is_u64(value: object) -> bool:
    return (
        isinstance(value, int) and
        not isinstance(value, bool) and
        0 <= value <= U64_MAX
    )


def is_decimal(text: str) -> bool:
    # ? int() also takes signs, underscores, whitespace and non-ascii digits
    return fullmatch(r'[0-9]+', text) is not None
