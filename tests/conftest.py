import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path for imports like `xgbimportance.*` or `api.*`
PROJECT_ROOT = Path(__file__).resolve().parents[1]
str_path = str(PROJECT_ROOT)
if str_path not in sys.path:
    sys.path.insert(0, str_path)


@pytest.fixture
def two_tree_dump():
    # two stumps on "age": gain 10 / 30, cover 5 / 15
    return [
        "booster[0]:",
        "0:[age<30] yes=1,no=2,missing=1,gain=10,cover=5",
        "\t1:leaf=0.1,cover=2",
        "\t2:leaf=-0.1,cover=3",
        "booster[1]:",
        "0:[age<40] yes=1,no=2,missing=1,gain=30,cover=15",
        "\t1:leaf=0.2,cover=7",
        "\t2:leaf=-0.2,cover=8",
    ]


@pytest.fixture
def multi_feature_dump():
    return [
        "booster[0]:",
        "0:[f2<2.45] yes=1,no=2,missing=1,gain=60,cover=150",
        "\t1:leaf=0.43,cover=50",
        "\t2:[f3<1.75] yes=3,no=4,missing=3,gain=20,cover=100",
        "\t\t3:[f0<5.5] yes=5,no=6,missing=5,gain=4,cover=54",
        "\t\t\t5:leaf=0.3,cover=20",
        "\t\t\t6:leaf=0.1,cover=34",
        "\t\t4:leaf=-0.4,cover=46",
        "booster[1]:",
        "0:[f3<0.8] yes=1,no=2,missing=1,gain=16,cover=150",
        "\t1:leaf=0.2,cover=50",
        "\t2:leaf=-0.2,cover=100",
    ]


@pytest.fixture
def linear_dump():
    return ["booster[0]:", "bias:", "0.5", "weight:", "1.0", "2.0", "3.0"]
