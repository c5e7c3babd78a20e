import pytest

from multikeydea.benchmark import BenchmarkResult, key_cycling_demo, main, run_benchmark
from multikeydea.dea import DEA
from multikeydea.display import make_pattern

KEYS = [0xAA, 0xBB, 0xCC, 0xDD]


def test_run_benchmark_verifies():
    result = run_benchmark(3000, 2, KEYS)
    assert result.verified
    assert result.original == make_pattern(3000)
    assert result.decrypted == result.original
    assert result.total_bytes == 6000


def test_run_benchmark_encryption_matches_engine():
    result = run_benchmark(500, 1, KEYS)
    engine = DEA()
    engine.set_keys(KEYS)
    assert result.encrypted == engine.encrypt_block(make_pattern(500))


def test_average_is_total_over_iterations():
    result = BenchmarkResult(10, 4, 8.0, 1.0, b"", b"", b"")
    assert result.average_ms == pytest.approx(2.0)


def test_zero_time_throughput_is_infinite():
    result = BenchmarkResult(10, 1, 0.0, 0.0, b"", b"", b"")
    assert result.throughput == float("inf")
    assert result.decrypt_throughput == float("inf")


def test_run_benchmark_rejects_zero_iterations():
    with pytest.raises(ValueError):
        run_benchmark(10, 0, KEYS)


def test_key_cycling_demo():
    engine = DEA()
    engine.set_keys(KEYS)
    data = bytes([0x11, 0x22, 0x33, 0x44, 0x55])
    steps = key_cycling_demo(engine, data, KEYS)
    assert [s[0] for s in steps] == list(data)
    assert [s[1] for s in steps] == KEYS + [KEYS[0]]
    assert all(inp ^ key == out for inp, key, out in steps)


def test_main_reports_success(capsys):
    assert main(["--size", "1024", "--iterations", "2"]) == 0
    out = capsys.readouterr().out
    assert "Verification SUCCESSFUL" in out
    assert "Input: 0x11, Key: 0xAA" in out
    assert "Total data processed: 2048 bytes" in out


def test_main_rejects_bad_iterations(capsys):
    assert main(["--size", "10", "--iterations", "0"]) == 1