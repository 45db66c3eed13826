import pytest

from exporter.sizer.varint import (
    MAX_FIELD_NUMBER,
    length_delimited_size,
    tag_size,
    varint_size,
)


@pytest.mark.parametrize(
    ('value', 'expected'),
    [
        (0, 1),
        (1, 1),
        (127, 1),
        (128, 2),
        (16383, 2),
        (16384, 3),
        (2**21 - 1, 3),
        (2**21, 4),
        (2**63, 10),
        (2**64 - 1, 10),
    ],
)
def test_varint_size_boundaries(value: int, expected: int) -> None:
    assert varint_size(value) == expected


def test_varint_size_rejects_negative() -> None:
    with pytest.raises(ValueError, match='non-negative'):
        varint_size(-1)


@pytest.mark.parametrize(
    ('field_number', 'expected'),
    [
        (1, 1),
        (15, 1),
        (16, 2),
        (2047, 2),
        (2048, 3),
        (MAX_FIELD_NUMBER, 5),
    ],
)
def test_tag_size_grows_with_field_number(field_number: int, expected: int) -> None:
    assert tag_size(field_number) == expected


@pytest.mark.parametrize('field_number', [0, -3, MAX_FIELD_NUMBER + 1])
def test_tag_size_rejects_invalid_field_numbers(field_number: int) -> None:
    with pytest.raises(ValueError, match='Field number'):
        tag_size(field_number)


@pytest.mark.parametrize(
    ('payload_size', 'expected'),
    [
        (0, 2),
        (1, 3),
        (127, 129),
        (128, 131),
        (16383, 16386),
        (16384, 16388),
    ],
)
def test_length_delimited_size_single_byte_tag(
    payload_size: int, expected: int
) -> None:
    assert length_delimited_size(payload_size) == expected


def test_length_delimited_size_wide_tag() -> None:
    assert length_delimited_size(10, field_number=16) == 2 + 1 + 10
    assert length_delimited_size(200, field_number=2048) == 3 + 2 + 200


def test_length_delimited_size_rejects_negative_payload() -> None:
    with pytest.raises(ValueError, match='Item size'):
        length_delimited_size(-1)
