def combinations(size: int) -> list[tuple[int, ...]]:
    """Enumerate every subset of range(size) with at least two members.

    Subsets are produced by walking the integers 1 .. 2**size - 1 and reading their
    set bits as membership, so the output follows that numeric order rather than
    being grouped by subset size. Each subset is an ascending tuple.

    Examples:
        >>> combinations(3)
        [(0, 1), (0, 2), (1, 2), (0, 1, 2)]
    """
    result = []
    for mask in range(1, 1 << size):
        subset = tuple(bit for bit in range(size) if mask & (1 << bit))
        if len(subset) > 1:
            result.append(subset)
    return result
