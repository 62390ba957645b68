from bakusave.core.byteio import read_u16, read_u24, write_u16, write_u24


def test_read_u16_big_and_little() -> None:
    data = bytearray([0x01, 0x02])

    assert read_u16(data, 0, "big") == 0x0102
    assert read_u16(data, 0, "little") == 0x0201


def test_read_u24_big_and_little() -> None:
    data = bytearray([0x01, 0x02, 0x03])

    assert read_u24(data, 0, "big") == 0x010203
    assert read_u24(data, 0, "little") == 0x030201


def test_write_u16_honours_endianness_and_offset() -> None:
    data = bytearray(4)

    write_u16(data, 1, 0xABCD, "big")
    assert data == bytearray([0x00, 0xAB, 0xCD, 0x00])

    write_u16(data, 1, 0xABCD, "little")
    assert data == bytearray([0x00, 0xCD, 0xAB, 0x00])


def test_write_u16_masks_to_sixteen_bits() -> None:
    data = bytearray(2)

    write_u16(data, 0, 0x12345, "big")

    assert data == bytearray([0x23, 0x45])


def test_write_u24_masks_to_twenty_four_bits() -> None:
    data = bytearray(3)

    write_u24(data, 0, 16_777_300, "big")

    assert read_u24(data, 0, "big") == 16_777_300 & 0xFFFFFF
    assert data == bytearray([0x00, 0x00, 0x54])


def test_write_u24_little_endian_layout() -> None:
    data = bytearray(5)

    write_u24(data, 1, 0x010203, "little")

    assert data == bytearray([0x00, 0x03, 0x02, 0x01, 0x00])
    assert read_u24(data, 1, "little") == 0x010203
