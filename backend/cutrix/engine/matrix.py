from typing import Dict, Iterator, Mapping, Tuple

# color -> size -> pieces
Matrix = Dict[str, Dict[str, int]]


def add_to_matrix(matrix: Matrix, color: str, per_size: Mapping[str, int]) -> None:
    row = matrix.setdefault(color, {})
    for size, qty in per_size.items():
        row[size] = row.get(size, 0) + qty


def matrix_total(matrix: Mapping[str, Mapping[str, int]]) -> int:
    return sum(qty for row in matrix.values() for qty in row.values())


def size_sort_key(size: str) -> Tuple[int, float, str]:
    """Numeric sizes (100, 110, ...) sort by value and come before lettered ones."""
    try:
        return (0, float(size), size)
    except (TypeError, ValueError):
        return (1, 0.0, str(size))


def iter_keys(*matrices: Mapping[str, Mapping[str, int]]) -> Iterator[Tuple[str, str]]:
    keys = {(color, size) for matrix in matrices for color, row in matrix.items() for size in row}
    for color, size in sorted(keys, key=lambda key: (key[0], size_sort_key(key[1]))):
        yield color, size
