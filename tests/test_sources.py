from pathlib import Path

import pytest

from xgbimportance.data.sources import (
    DumpProducer,
    FilePathSource,
    ImportanceRequest,
    InMemoryModelSource,
    build_request,
    validate_feature_names,
)
from xgbimportance.errors import InvalidArgumentError


class StubProducer:
    def dump_lines(self, with_stats=True):
        assert with_stats
        return ["booster[0]:\n", "bias:\n", "1\n", "weight:\n", "2\n"]


def test_file_path_request(tmp_path):
    request = build_request(filename_dump=str(tmp_path / "dump.txt"))
    assert isinstance(request, ImportanceRequest)
    assert request.source == FilePathSource(tmp_path / "dump.txt")
    assert request.feature_names is None


def test_model_request_reads_lines_with_stats():
    request = build_request(feature_names=["x"], model=StubProducer())
    assert isinstance(request.source, InMemoryModelSource)
    assert request.feature_names == ("x",)
    assert request.source.read_lines() == ["booster[0]:", "bias:", "1", "weight:", "2"]


def test_stub_satisfies_protocol():
    assert isinstance(StubProducer(), DumpProducer)
    assert not isinstance(object(), DumpProducer)


@pytest.mark.parametrize(
    "kwargs",
    [
        {},
        {"filename_dump": "dump.txt", "model": StubProducer()},
        {"filename_dump": 12},
        {"filename_dump": ["a.txt", "b.txt"]},
        {"model": object()},
        {"filename_dump": "dump.txt", "feature_names": "age"},
        {"filename_dump": "dump.txt", "feature_names": ["age", None]},
    ],
)
def test_invalid_combinations_rejected(kwargs):
    with pytest.raises(InvalidArgumentError):
        build_request(**kwargs)


def test_path_like_dump_is_accepted(tmp_path):
    request = build_request(filename_dump=tmp_path / "dump.txt")
    assert request.source.path == Path(tmp_path / "dump.txt")


def test_validate_feature_names_copies():
    names = ["a", "b"]
    validated = validate_feature_names(names)
    names.append("c")
    assert validated == ("a", "b")
    assert validate_feature_names(None) is None
