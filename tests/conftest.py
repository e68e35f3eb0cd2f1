import matplotlib

matplotlib.use('Agg')

import pytest

from mazepath.grid import Grid


@pytest.fixture
def detour_grid():
    # single wall in the middle forces a detour between (1, 1) and (3, 3)
    return Grid.from_strings([
        'XXXXX',
        'XS__X',
        'X_X_X',
        'X__OX',
        'XXXXX',
    ])


@pytest.fixture
def split_grid():
    return Grid.from_strings([
        'XXXXXX',
        'XS_X_X',
        'X__XOX',
        'XXXXXX',
    ])


@pytest.fixture
def loop_grid():
    return Grid.from_strings([
        'XXXXXXX',
        'XS____X',
        'X_XX__X',
        'X_X___X',
        'X___XOX',
        'XXXXXXX',
    ])
