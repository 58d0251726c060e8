"""Model cache: memoization, coalescing of concurrent misses, error handling."""

import threading
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

from engine.contracts.errors import MalformedMatrixError, UnknownMatrixError
from engine.core.matrix import Matrix
from engine.io.readers import load_dqi_grid, load_matrix
from engine.runtime.caches import ModelCache

from io_helpers import m3x4, write_matrix


class CountingLoader:
    """Wraps a loader and records every call, so tests can count decodes."""

    def __init__(self, inner=load_matrix, delay: float = 0.0):
        self.inner = inner
        self.delay = delay
        self.calls = []
        self._lock = threading.Lock()

    def __call__(self, path: Path):
        with self._lock:
            self.calls.append(Path(path).name)
        if self.delay:
            time.sleep(self.delay)
        return self.inner(path)


def _forbidden(path):
    raise AssertionError(f"storage touched: {path}")


class TestMemoization:

    def test_first_call_decodes_then_cached(self, model_dir: Path) -> None:
        loader = CountingLoader()
        cache = ModelCache(model_dir, matrix_loader=loader)

        first = cache.get_matrix("A")
        second = cache.get_matrix("A")

        assert loader.calls == ["A.bin"]
        assert second is first

    def test_grid_cached(self, model_dir: Path) -> None:
        loader = CountingLoader(load_dqi_grid)
        cache = ModelCache(model_dir, grid_loader=loader)

        assert cache.get_dqi_grid("B_dqi") is cache.get_dqi_grid("B_dqi")
        assert loader.calls == ["B_dqi.csv"]

    def test_numeric_and_grid_tables_are_independent(self, model_dir: Path) -> None:
        write_matrix(model_dir, "B", m3x4())
        num = CountingLoader()
        dqi = CountingLoader(load_dqi_grid)
        cache = ModelCache(model_dir, matrix_loader=num, grid_loader=dqi)

        assert isinstance(cache.get_matrix("B"), Matrix)
        assert isinstance(cache.get_dqi_grid("B_dqi"), tuple)
        assert num.calls == ["B.bin"]
        assert dqi.calls == ["B_dqi.csv"]
        assert cache.cached_names() == {"numeric": ["B"], "dqi": ["B_dqi"]}

    def test_caches_are_per_model(self, model_dir: Path) -> None:
        loader = CountingLoader()
        ModelCache(model_dir, matrix_loader=loader).get_matrix("A")
        ModelCache(model_dir, matrix_loader=loader).get_matrix("A")
        assert loader.calls == ["A.bin", "A.bin"]

    def test_clear(self, model_dir: Path) -> None:
        loader = CountingLoader()
        cache = ModelCache(model_dir, matrix_loader=loader)
        cache.get_matrix("A")
        cache.clear()
        cache.get_matrix("A")
        assert len(loader.calls) == 2


class TestUnknownNames:

    @pytest.mark.parametrize("name", ["Z", "B_dqi", "a", "../A", ""])
    def test_unknown_matrix_without_storage_access(self, tmp_path: Path, name: str) -> None:
        cache = ModelCache(tmp_path, matrix_loader=_forbidden, grid_loader=_forbidden)
        with pytest.raises(UnknownMatrixError):
            cache.get_matrix(name)

    @pytest.mark.parametrize("name", ["A", "X_dqi", "b_dqi"])
    def test_unknown_grid_without_storage_access(self, tmp_path: Path, name: str) -> None:
        cache = ModelCache(tmp_path, matrix_loader=_forbidden, grid_loader=_forbidden)
        with pytest.raises(UnknownMatrixError):
            cache.get_dqi_grid(name)


class TestConcurrency:

    def test_concurrent_misses_on_one_key_decode_once(self, model_dir: Path) -> None:
        n = 16
        loader = CountingLoader(delay=0.05)
        cache = ModelCache(model_dir, matrix_loader=loader)
        barrier = threading.Barrier(n)

        def fetch(_):
            barrier.wait()
            return cache.get_matrix("A")

        with ThreadPoolExecutor(max_workers=n) as pool:
            results = list(pool.map(fetch, range(n)))

        assert loader.calls == ["A.bin"]
        assert len(results) == n
        assert all(r is results[0] for r in results)
        assert results[0].slice_2d().tolist() == m3x4().tolist()

    def test_misses_on_different_keys_run_in_parallel(self, model_dir: Path) -> None:
        write_matrix(model_dir, "B", m3x4())
        a_started = threading.Event()
        b_started = threading.Event()
        overlapped = {}

        def loader(path: Path):
            mine, other = (a_started, b_started) if path.name == "A.bin" else (b_started, a_started)
            mine.set()
            overlapped[path.name] = other.wait(timeout=5)
            return load_matrix(path)

        cache = ModelCache(model_dir, matrix_loader=loader)
        with ThreadPoolExecutor(max_workers=2) as pool:
            fa = pool.submit(cache.get_matrix, "A")
            fb = pool.submit(cache.get_matrix, "B")
            fa.result(timeout=10)
            fb.result(timeout=10)

        assert overlapped == {"A.bin": True, "B.bin": True}

    def test_failure_reaches_every_waiter_and_is_not_cached(self, tmp_path: Path) -> None:
        started = threading.Event()
        release = threading.Event()
        calls = []

        def loader(path: Path):
            calls.append(path.name)
            if len(calls) == 1:
                started.set()
                release.wait(timeout=5)
            raise MalformedMatrixError("bad header")

        cache = ModelCache(tmp_path, matrix_loader=loader)

        def fetch(_):
            try:
                cache.get_matrix("L")
            except MalformedMatrixError as e:
                return e
            return None

        with ThreadPoolExecutor(max_workers=8) as pool:
            first = pool.submit(fetch, 0)
            assert started.wait(timeout=5)
            rest = [pool.submit(fetch, i) for i in range(1, 8)]
            time.sleep(0.05)
            release.set()
            errors = [first.result(timeout=10)] + [f.result(timeout=10) for f in rest]

        assert all(isinstance(e, MalformedMatrixError) for e in errors)
        n_calls = len(calls)
        with pytest.raises(MalformedMatrixError):
            cache.get_matrix("L")
        assert len(calls) == n_calls + 1


class TestFailureRecovery:

    def test_malformed_file_self_heals(self, tmp_path: Path) -> None:
        (tmp_path / "D.bin").write_bytes(b"\x03\x00")
        cache = ModelCache(tmp_path)

        with pytest.raises(MalformedMatrixError):
            cache.get_matrix("D")

        write_matrix(tmp_path, "D", m3x4())
        m = cache.get_matrix("D")
        assert (m.rows, m.cols) == (3, 4)
        assert cache.get_matrix("D") is m
