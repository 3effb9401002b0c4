import io

import numpy as np
import pytest

from numeric_input import SequenceSource, TokenSource, as_source


def test_tokens_across_lines_and_whitespace():
    source = TokenSource(io.StringIO("10.0 5.0   6.0\n\n\t3.0 7.0\n32.0"))
    assert list(source) == [10.0, 5.0, 6.0, 3.0, 7.0, 32.0]
    assert not source.has_more()


def test_float_literals():
    source = TokenSource(io.StringIO("1e3 -2.5 +7 NaN Infinity -inf"))
    values = list(source)
    assert values[:3] == [1000.0, -2.5, 7.0]
    assert np.isnan(values[3])
    assert values[4] == float("inf")
    assert values[5] == float("-inf")


def test_has_more_is_false_on_blank_input():
    assert not TokenSource(io.StringIO("  \n \n")).has_more()


def test_malformed_token_raises():
    source = TokenSource(io.StringIO("1.0 abc 2.0"))
    assert source.read_double() == 1.0
    with pytest.raises(ValueError, match="abc"):
        source.read_double()


def test_read_past_end_raises():
    source = TokenSource(io.StringIO("4.0"))
    assert source.read_double() == 4.0
    with pytest.raises(EOFError):
        source.read_double()


def test_reads_stdin_by_default(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 3"))
    assert list(TokenSource()) == [2.0, 3.0]


def test_sequence_source():
    source = SequenceSource(iter([1, 2.5, np.float64(3.0)]))
    assert source.has_more()
    assert source.read_double() == 1.0
    assert list(source) == [2.5, 3.0]
    assert not source.has_more()
    with pytest.raises(EOFError):
        source.read_double()


def test_as_source():
    source = SequenceSource([1.0])
    assert as_source(source) is source
    assert isinstance(as_source([1.0, 2.0]), SequenceSource)
    assert list(as_source(np.array([1.0, 2.0]))) == [1.0, 2.0]
