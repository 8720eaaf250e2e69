import pytest

from rosetree import settings

from .utils import t


@pytest.fixture
def deep_checks():
    previous = settings.configure(deep_checks=True)
    try:
        yield
    finally:
        settings.configure(**previous._asdict())


@pytest.fixture
def family():
    """
    Every level numbered left to right:

        0
        1             2                 3
        4       5     6     7       8   9
        10 11   12    13    14 15       16 17
    """
    return t(
        0,
        t(1, t(4, 10, 11), t(5, 12)),
        t(2, t(6, 13), t(7, 14, 15), 8),
        t(3, t(9, 16, 17)),
    )


@pytest.fixture
def left_heavy():
    return t(0, t(1, t(3, t(5, 7))), t(2, t(4, 6)))


@pytest.fixture
def right_heavy():
    return t(0, t(1), t(2, t(3, 5), t(4, t(6, 7))))
