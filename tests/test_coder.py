import numpy as np
import pytest

from toyrc.arith import CoderOptions, Prob, RangeEncoder
from toyrc.decoder import decode
from toyrc.encoder import encode
from toyrc.errors import MalformedStreamError
from toyrc.settings import ADAPTIVE, PROB_MAX, PROB_MIN


def test_low_low_high_low_p8():
    data, p = encode(8, [0, 0, 1, 0])
    assert data == b"012480"
    assert p == 8
    out, _ = decode(8, data, 4)
    assert out == [0, 0, 1, 0]


def test_empty_sequence():
    data, p = encode(8, [])
    assert data == b"00000"
    assert decode(8, data, 0) == ([], 8)


def test_fixed_prob_deterministic():
    symbols = [0, 1, 1, 0, 0, 0, 1, 0] * 8
    assert encode(12, symbols) == encode(12, symbols)


def test_adaptive_shorter_than_mismatched_fixed():
    run = [0] * 64
    adaptive, _ = encode(ADAPTIVE, run)
    fixed, _ = encode(8, run)
    assert len(adaptive) < len(fixed)


def test_adaptive_high_heavy_64():
    symbols = [1] * 64
    symbols[10] = 0
    data, final_p = encode(ADAPTIVE, symbols)
    out, dec_p = decode(ADAPTIVE, data, 64)
    assert out == symbols
    assert final_p != 8
    assert dec_p == final_p


def test_prob_clamp():
    p = Prob(8, adaptive=True)
    for _ in range(100):
        p.nudge(+1)
        assert PROB_MIN <= p.value <= PROB_MAX
    assert p.value == PROB_MAX
    for _ in range(100):
        p.nudge(-1)
    assert p.value == PROB_MIN


def test_prob_fixed_does_not_move():
    p = Prob(5)
    p.nudge(+1)
    p.nudge(+1)
    assert p.value == 5


def test_adaptive_option_with_fixed_start():
    symbols = [0] * 20
    data, final_p = encode(4, symbols, CoderOptions(adaptive=True))
    assert final_p == PROB_MAX
    out, _ = decode(4, data, 20, CoderOptions(adaptive=True))
    assert out == symbols


@pytest.mark.parametrize("data", [b"112480", b"099990", b"0999", b"01a480", b""])
def test_malformed_rejected(data):
    with pytest.raises(MalformedStreamError):
        decode(8, data, 4)


def test_truncated_stream_rejected():
    data, _ = encode(8, [0, 1] * 50)
    with pytest.raises(MalformedStreamError):
        decode(8, data[:-1], 100)


def test_bad_arguments():
    with pytest.raises(ValueError):
        encode(0, [0])
    with pytest.raises(ValueError):
        encode(16, [0])
    with pytest.raises(ValueError):
        encode(8, [0, 2])
    with pytest.raises(ValueError):
        decode(8, b"012480", -1)


def test_numpy_symbols():
    rng = np.random.default_rng(7)
    arr = (rng.random(200) < 0.2).astype(np.int64)
    data, _ = encode(ADAPTIVE, arr)
    out, _ = decode(ADAPTIVE, data, len(arr))
    assert out == arr.tolist()


def test_trace_is_side_channel():
    lines = []
    plain, _ = encode(8, [0, 0, 1, 0])
    traced, _ = encode(8, [0, 0, 1, 0], CoderOptions(trace=lines.append))
    assert plain == traced
    assert lines[0].endswith("emit: 0")
    assert any("bym: g" in ln for ln in lines)

    lines.clear()
    out, _ = decode(8, traced, 4, CoderOptions(trace=lines.append))
    assert out == [0, 0, 1, 0]
    assert [ln.strip() for ln in lines[:5]] == ["load: 0", "load: 1", "load: 2", "load: 4", "load: 8"]


def test_shift_low_branches():
    enc = RangeEncoder()
    enc.low, enc.pending_head, enc.pending_extra = 1234, ord("0"), 2
    enc.shift_low()
    assert bytes(enc.dst) == b"099"
    assert (enc.pending_head, enc.pending_extra, enc.low) == (ord("1"), 0, 2340)

    enc = RangeEncoder()
    enc.low = 9500
    enc.shift_low()
    assert bytes(enc.dst) == b""
    assert (enc.pending_extra, enc.low) == (1, 5000)

    enc = RangeEncoder()
    enc.low, enc.pending_head, enc.pending_extra = 12345, ord("3"), 2
    enc.shift_low()
    assert bytes(enc.dst) == b"400"
    assert (enc.pending_head, enc.pending_extra, enc.low) == (ord("2"), 0, 3450)


def test_drain_trace_leaves_out_width():
    lines = []
    enc = RangeEncoder(CoderOptions(trace=lines.append))
    enc.low, enc.width = 12345, 5000
    data = enc.finish(5)
    assert enc.width == 0
    assert data.startswith(b"1")
    assert "emit: carry" in "\n".join(lines)
    assert not any("width: 5000" in ln for ln in lines)
