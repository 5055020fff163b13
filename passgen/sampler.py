# secure_random_index
# (unbiased random index from CSPRNG)
#

from . import backend

#: Width of a single random draw (32-bit unsigned integer)
DRAW_BYTES = 4


def random_uint(num_bytes: int = DRAW_BYTES, randbytes=None) -> int:
    """Draw unsigned integer of `num_bytes` width from CSPRNG."""
    randbytes = randbytes or backend.randombytes
    return int.from_bytes(randbytes(num_bytes), 'little')


def secure_random_index(pool_size: int,
                        draw_bytes: int = DRAW_BYTES,
                        randbytes=None) -> int:
    """Return random index uniformly distributed in [0, pool_size).

    Plain `draw % pool_size` would favour low indices whenever
    `pool_size` does not divide the draw range. Draws falling
    into the incomplete last block are rejected and drawn again.
    The rejected block is smaller than `pool_size`,
    so the retry probability is always below 1/2.

    :param pool_size: Number of items to choose from
    :param draw_bytes: Width of a random draw, in bytes
    :param randbytes: Random source, `randbytes(n) -> bytes`.
                      Default is the CSPRNG from backend.
    :raises ValueError: if `pool_size` is not positive
                        or it exceeds the draw range

    """
    if pool_size <= 0:
        raise ValueError(f"pool_size must be positive, got {pool_size}")
    draw_range = 1 << (8 * draw_bytes)
    if pool_size > draw_range:
        raise ValueError(f"pool_size {pool_size} exceeds draw range {draw_range}")
    limit = draw_range - draw_range % pool_size
    while True:
        value = random_uint(draw_bytes, randbytes)
        if value < limit:
            return value % pool_size
