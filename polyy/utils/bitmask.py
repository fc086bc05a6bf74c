# polyy/utils/bitmask.py

def indices_from_bits(mask: int) -> list[int]:
    """Return the indices of all set bits, lowest first."""
    idxs = []
    mask = int(mask)
    while mask:
        lsb = mask & -mask
        idxs.append(lsb.bit_length() - 1)
        mask &= mask - 1
    return idxs


def set_bit(idx, mask=0):
    """Set bit idx in mask."""
    return mask | (1 << idx)


def pair_mask(a: int, b: int) -> int:
    """Mask with exactly the bits a and b set."""
    return (1 << a) | (1 << b)


def clear_lowest_bit(mask: int) -> int:
    """Clear the lowest set bit."""
    return mask & (mask - 1)


def has_three_bits(mask: int) -> bool:
    """
    Return True if at least three bits are set in mask.

    Clears the two lowest set bits and checks whether anything is left.
    """
    mask = int(mask)
    return clear_lowest_bit(clear_lowest_bit(mask)) != 0


def count_bits(mask: int) -> int:
    """Count the set bits of a mask."""
    return int(bin(int(mask)).count("1"))
