def validate_bits_per_sample(type_: object, bits: int) -> None:
    """Validate that bits is a whole number of bytes."""
    if bits <= 0 or bits % 8 != 0:
        raise ValueError("Bits per sample must be a positive multiple of 8")


def validate_positive_integer(type_: object, value: int) -> None:
    if value <= 0:
        raise ValueError("Value must be greater than 0")


def validate_non_negative_float(type_: object, value: float) -> None:
    if value < 0.0:
        raise ValueError("Value must not be negative")
