from bitweave.interleave import interleave_integer, deinterleave_integer


def zorder_walk(size: int) -> list[tuple[int, int]]:
    cells = [(x, y) for y in range(size) for x in range(size)]
    return sorted(cells, key=lambda xy: interleave_integer(*xy))


if __name__ == "__main__":
    size = 8

    # Rank of each cell along the Z-order curve, printed as a grid (y grows downward)
    rank = {xy: i for i, xy in enumerate(zorder_walk(size))}
    for y in range(size):
        print(" ".join(f"{rank[(x, y)]:2d}" for x in range(size)))

    code = interleave_integer(0x12345678, 0x9ABCDEF0)
    x, y = deinterleave_integer(code)
    print(f"interleave(0x12345678, 0x9ABCDEF0) = {code:#018x}")
    print(f"deinterleave -> ({x:#010x}, {y:#010x})")
