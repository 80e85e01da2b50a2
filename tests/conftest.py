import pytest

from powerlotto.records import DrawRecord


@pytest.fixture
def two_draws():
    return [
        DrawRecord((1, 2, 3, 4, 5, 6), 1),
        DrawRecord((1, 2, 3, 4, 5, 7), 2),
    ]


@pytest.fixture
def sample_history():
    """40 draws cycling through the main range, specials on every other draw."""
    draws = []
    for i in range(40):
        main = tuple(((i * 6 + j) % 38) + 1 for j in range(6))
        special = (i % 8) + 1 if i % 2 == 0 else None
        draws.append(DrawRecord(main, special))
    return draws
