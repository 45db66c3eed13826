MAX_FIELD_NUMBER = (1 << 29) - 1
WIRE_TYPE_LEN = 2


def varint_size(value: int) -> int:
    """Number of bytes needed to encode ``value`` as a base-128 varint."""
    if value < 0:
        raise ValueError(f'Varint value must be non-negative, got {value}')
    return max(1, (value.bit_length() + 6) // 7)


def check_field_number(field_number: int) -> None:
    if not 1 <= field_number <= MAX_FIELD_NUMBER:
        raise ValueError(
            f'Field number must be in 1..{MAX_FIELD_NUMBER}, got {field_number}'
        )


def check_item_size(item_size: int) -> None:
    if item_size < 0:
        raise ValueError(f'Item size must be non-negative, got {item_size}')


def tag_size(field_number: int) -> int:
    check_field_number(field_number)
    return varint_size(field_number << 3 | WIRE_TYPE_LEN)


def length_delimited_size(payload_size: int, field_number: int = 1) -> int:
    """Bytes added to a message when a length-delimited field is appended.

    A repeated sub-message is encoded as ``tag + varint(len) + payload``, so
    appending one item of ``payload_size`` bytes grows the parent by exactly
    that much. The tag width depends on ``field_number``: one byte for fields
    1..15, more above that.
    """
    check_item_size(payload_size)
    return tag_size(field_number) + varint_size(payload_size) + payload_size
