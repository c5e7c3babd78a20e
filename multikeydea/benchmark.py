"""Single-process encryption benchmark and key cycling demonstration."""

from __future__ import annotations

import argparse
import time
from collections.abc import Sequence
from dataclasses import dataclass

from .dea import DEA
from .display import format_data, make_pattern

DEFAULT_KEYS = (0xAA, 0xBB, 0xCC, 0xDD)
DEFAULT_SIZE = 10 * 1024 * 1024
DEFAULT_ITERATIONS = 10
WARMUP_SIZE = 1024
DEMO_DATA = bytes([0x11, 0x22, 0x33, 0x44, 0x55])
MIB = 1024 * 1024


def _rate(num_bytes: float, millis: float) -> float:
    seconds = millis / 1000.0
    return float("inf") if seconds == 0 else num_bytes / MIB / seconds


@dataclass
class BenchmarkResult:
    """Outcome of a benchmark run."""

    size: int
    iterations: int
    total_ms: float
    decrypt_ms: float
    original: bytes
    encrypted: bytes
    decrypted: bytes

    @property
    def verified(self) -> bool:
        return self.decrypted == self.original

    @property
    def average_ms(self) -> float:
        return self.total_ms / self.iterations

    @property
    def total_bytes(self) -> int:
        return self.size * self.iterations

    @property
    def throughput(self) -> float:
        """Encryption throughput in MiB per second."""
        return _rate(self.total_bytes, self.total_ms)

    @property
    def decrypt_throughput(self) -> float:
        """Decryption throughput in MiB per second."""
        return _rate(self.size, self.decrypt_ms)


def run_benchmark(size: int, iterations: int, keys: Sequence[int]) -> BenchmarkResult:
    """Encrypt a pattern of ``size`` bytes ``iterations`` times, then decrypt it."""
    if iterations < 1:
        raise ValueError("iterations must be at least 1")
    dea = DEA()
    dea.reset()
    dea.set_keys(keys)
    original = make_pattern(size)

    dea.reset()
    dea.encrypt_block(original[:WARMUP_SIZE])

    encrypted = b""
    start = time.process_time()
    for _ in range(iterations):
        dea.reset()
        encrypted = dea.encrypt_block(original)
    total_ms = (time.process_time() - start) * 1000.0

    dea.reset()
    start = time.process_time()
    decrypted = dea.decrypt_block(encrypted)
    decrypt_ms = (time.process_time() - start) * 1000.0

    return BenchmarkResult(size, iterations, total_ms, decrypt_ms, original, encrypted, decrypted)


def key_cycling_demo(dea: DEA, data: bytes, keys: Sequence[int]) -> list[tuple[int, int, int]]:
    """Encrypt ``data`` byte by byte from a rewound rotation.

    Returns ``(input, key, output)`` for each byte, where ``key`` is the
    expected key from ``keys`` in rotation.
    """
    dea.reset()
    return [
        (byte, keys[index % len(keys)], dea.encrypt_byte(byte))
        for index, byte in enumerate(data)
    ]


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Multi-key DEA encryption performance test")
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE, help="test size in bytes")
    parser.add_argument("--iterations", type=int, default=DEFAULT_ITERATIONS)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    size, iterations = args.size, args.iterations
    if size < 0 or iterations < 1:
        print("Size must not be negative and iterations must be at least 1")
        return 1

    print("=== Multi-Key DEA Encryption Performance Test ===\n")
    print(f"Test size: {size} bytes")
    print(f"Number of iterations: {iterations}")
    print("Setting up 4 encryption keys...")
    print(format_data("Original (sample)", make_pattern(size)))
    print(f"\nStarting benchmark ({size // MIB} MB × {iterations} iterations)...")

    result = run_benchmark(size, iterations, DEFAULT_KEYS)

    print(format_data("Encrypted (sample)", result.encrypted))
    print(format_data("Decrypted (sample)", result.decrypted))
    if result.verified:
        print("\nVerification SUCCESSFUL - The decrypted text matches the original!")
    else:
        print("\nVerification FAILED - The decrypted text does not match the original!")

    print(f"\n=== Performance Results ({size // MIB} MB Test, {iterations} iterations) ===")
    print(f"Total execution time: {result.total_ms:.3f} ms")
    print(f"Average time per iteration: {result.average_ms:.3f} ms")
    print(f"Total data processed: {result.total_bytes} bytes")
    print(f"Throughput: {result.throughput:.2f} MB/second")

    print("\nDecryption performance:")
    print(f"Single decryption time: {result.decrypt_ms:.3f} ms")
    print(f"Decryption throughput: {result.decrypt_throughput:.2f} MB/second")

    print("\n=== Key Cycling Demonstration ===")
    dea = DEA()
    dea.set_keys(DEFAULT_KEYS)
    for data_in, key, out in key_cycling_demo(dea, DEMO_DATA, DEFAULT_KEYS):
        print(f"Input: 0x{data_in:02X}, Key: 0x{key:02X}, Output: 0x{out:02X}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())