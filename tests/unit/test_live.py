"""Tests for parametric curves and real-time output."""

import sys
from unittest.mock import MagicMock, patch

import numpy as np
import pytest

from scopefig.config import CurveKind, LiveConfig
from scopefig.core.parametric import CURVES, Phase, get_curve
from scopefig.domain import Point
from scopefig.exceptions import EmptyGeometryError
from scopefig.io import CurveSource, LiveOutput, LoopSource


class TestPhase:
    """Tests for the stream time accumulator."""

    def test_times_advance(self) -> None:
        phase = Phase.for_sample_rate(4)
        ramp = np.arange(4)

        first = phase.times(ramp)
        second = phase.times(ramp)

        np.testing.assert_allclose(first, [0.0, 0.25, 0.5, 0.75])
        np.testing.assert_allclose(second, [1.0, 1.25, 1.5, 1.75])
        assert phase.t == pytest.approx(2.0)

    def test_independent_phases(self) -> None:
        a = Phase.for_sample_rate(100)
        b = Phase.for_sample_rate(100)

        a.times(np.arange(10))

        assert b.t == 0.0


class TestCurves:
    """Tests for the parametric curves."""

    @pytest.mark.parametrize(
        ("kind", "expected"),
        [
            (CurveKind.HEART, (0.0, 0.6 * 5.0 / 18.0)),
            (CurveKind.CARDIOID, (2.0 / 2.6, 0.0)),
            (CurveKind.ROSE, (1.0, 0.0)),
            (CurveKind.LISSAJOUS, (0.9, 0.0)),
        ],
    )
    def test_start_point(self, kind: CurveKind, expected: tuple[float, float]) -> None:
        x, y = get_curve(kind)(np.zeros(1), 100.0)
        assert x[0] == pytest.approx(expected[0], abs=1e-12)
        assert y[0] == pytest.approx(expected[1], abs=1e-12)

    @pytest.mark.parametrize("kind", list(CurveKind))
    def test_within_full_scale(self, kind: CurveKind) -> None:
        t = np.linspace(0.0, 2.0, 20000)
        x, y = CURVES[kind](t, 100.0)
        assert np.all(np.abs(x) <= 1.0)
        assert np.all(np.abs(y) <= 1.0)

    def test_lookup_by_name(self) -> None:
        assert get_curve("rose") is CURVES[CurveKind.ROSE]

    def test_unknown_name(self) -> None:
        with pytest.raises(ValueError):
            get_curve("spiral")


class TestSources:
    """Tests for CurveSource and LoopSource."""

    def test_curve_source_fills_block(self) -> None:
        source = CurveSource("lissajous", 100.0, 48000)
        out = np.zeros((8, 2), dtype=np.float32)

        source.fill(out, np.arange(8))

        assert out[0, 0] == pytest.approx(0.9)
        assert out[0, 1] == pytest.approx(0.0)
        assert source.phase.t == pytest.approx(8 / 48000)

    def test_loop_source_wraps(self) -> None:
        source = LoopSource([Point(0.0, 0.0), Point(1.0, 1.0), Point(-1.0, 0.5)])
        out = np.zeros((5, 2), dtype=np.float32)

        source.fill(out, np.arange(5))

        np.testing.assert_array_equal(
            out, [[0.0, 0.0], [1.0, 1.0], [-1.0, 0.5], [0.0, 0.0], [1.0, 1.0]]
        )
        assert source.index == 2

    def test_loop_source_empty(self) -> None:
        with pytest.raises(EmptyGeometryError):
            LoopSource([])


class TestLiveOutput:
    """Tests for LiveOutput."""

    @pytest.fixture
    def output(self) -> LiveOutput:
        source = LoopSource([Point(1.0, -1.0)])
        return LiveOutput(source, 48000, LiveConfig(amplitude=0.5, blocksize=64))

    def test_callback_applies_amplitude(self, output: LiveOutput) -> None:
        outdata = np.zeros((64, 2), dtype=np.float32)

        output._audio_callback(outdata, 64, None, None)

        np.testing.assert_allclose(outdata[:, 0], 0.5)
        np.testing.assert_allclose(outdata[:, 1], -0.5)
        assert output.overrun_count == 0

    def test_callback_larger_than_blocksize(self, output: LiveOutput) -> None:
        outdata = np.zeros((100, 2), dtype=np.float32)
        output._audio_callback(outdata, 100, None, None)
        np.testing.assert_allclose(outdata[:, 0], 0.5)

    def test_overrun_is_counted(self, output: LiveOutput) -> None:
        outdata = np.zeros((64, 2), dtype=np.float32)

        output._audio_callback(outdata, 64, None, "output underflow")

        assert output.overrun_count == 1
        np.testing.assert_allclose(outdata[:, 0], 0.5)

    def test_start_and_stop(self, output: LiveOutput) -> None:
        sounddevice = MagicMock()

        with patch.dict(sys.modules, {"sounddevice": sounddevice}):
            with output:
                assert output.running
                sounddevice.OutputStream.assert_called_once()
                kwargs = sounddevice.OutputStream.call_args.kwargs
                assert kwargs["channels"] == 2
                assert kwargs["samplerate"] == 48000
                assert kwargs["blocksize"] == 64

        stream = sounddevice.OutputStream.return_value
        stream.start.assert_called_once()
        stream.stop.assert_called_once()
        stream.close.assert_called_once()
        assert not output.running
