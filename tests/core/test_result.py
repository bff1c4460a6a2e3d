"""
Tests for the Result[P] envelope and the timing utilities.
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pylinalg.core.compute.timing import Timer
from pylinalg.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


class TestResult:

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=-2.0),
            info={"method": "cofactor"},
            timing={"total_seconds": 0.01},
            backend_name="cpu_cofactor",
        )
        assert result.params.value == -2.0
        assert result.info["method"] == "cofactor"
        assert result.backend_name == "cpu_cofactor"
        assert result.warnings == ()

    def test_frozen(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "other"


class TestTimer:

    def test_sections_accumulate(self):
        with Timer() as timer:
            with timer.section("pivot_search"):
                pass
            with timer.section("pivot_search"):
                pass
        result = timer.result()
        assert set(result) == {"total_seconds", "pivot_search"}
        assert result["total_seconds"] >= result["pivot_search"] >= 0.0

    def test_section_outside_block(self):
        timer = Timer()
        with pytest.raises(RuntimeError, match="outside"):
            with timer.section("eliminate"):
                pass

    def test_result_inside_block(self):
        with Timer() as timer:
            with pytest.raises(RuntimeError):
                timer.result()

    def test_total_recorded_when_block_raises(self):
        timer = Timer()
        with pytest.raises(ZeroDivisionError):
            with timer:
                1 / 0
        assert timer.result()["total_seconds"] >= 0.0

    def test_not_reentrant(self):
        timer = Timer()
        with timer:
            with pytest.raises(RuntimeError, match="reentrant"):
                with timer:
                    pass
