import pytest
import os
from unittest.mock import patch, MagicMock

os.environ.setdefault('TESTING', 'true')

from hashtables import HashMap, HashSet


@pytest.fixture(autouse=True)
def mock_logger():
    with patch('hashtables.logger.logger.logger') as mock_logger:
        mock_logger.info = MagicMock()
        mock_logger.debug = MagicMock()
        mock_logger.error = MagicMock()
        mock_logger.isEnabledFor.return_value = False
        yield mock_logger


@pytest.fixture
def empty_map():
    return HashMap(16, 0.75)


@pytest.fixture
def empty_set():
    return HashSet(16, 0.75)


@pytest.fixture
def color_pairs():
    return [
        ('apple', 'red'),
        ('banana', 'yellow'),
        ('carrot', 'orange'),
        ('dog', 'brown'),
        ('elephant', 'gray'),
        ('frog', 'green'),
        ('grape', 'purple'),
        ('hat', 'black'),
        ('ice cream', 'white'),
        ('jacket', 'blue'),
        ('kite', 'pink'),
        ('lion', 'golden'),
    ]


@pytest.fixture
def invalid_table_args():
    return [
        (0, 0.75),
        (-4, 0.75),
        (16.0, 0.75),
        (True, 0.75),
        ("16", 0.75),
        (16, 0),
        (16, -0.5),
        (16, 1.5),
        (16, float("nan")),
        (16, "0.75"),
        (16, False),
    ]
