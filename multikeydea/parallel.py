"""Chunked encryption spread over several workers with aligned key rotation."""

from __future__ import annotations

import argparse
import os
import time
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from .benchmark import DEFAULT_ITERATIONS, DEFAULT_KEYS, DEFAULT_SIZE, MIB
from .dea import DEA
from .display import format_data, make_pattern


@dataclass(frozen=True)
class Chunk:
    """A contiguous slice of the input handled by one worker."""

    index: int
    start: int
    size: int

    @property
    def end(self) -> int:
        return self.start + self.size


def split_chunks(total: int, parts: int) -> list[Chunk]:
    """Split ``total`` bytes into ``parts`` chunks, the first ones one byte larger."""
    if parts < 1:
        raise ValueError("parts must be at least 1")
    if total < 0:
        raise ValueError("total must not be negative")
    base, remainder = divmod(total, parts)
    return [
        Chunk(i, i * base + min(i, remainder), base + (1 if i < remainder else 0))
        for i in range(parts)
    ]


def encrypt_chunk(data: bytes, keys: Sequence[int], preceding_bytes: int) -> bytes:
    """Encrypt ``data`` as if ``preceding_bytes`` had already been encrypted."""
    dea = DEA()
    dea.set_keys(keys)
    if dea.num_keys:
        dea.key_counter = preceding_bytes % dea.num_keys
    return dea.encrypt_block(data)


def encrypt_parallel(data: bytes, keys: Sequence[int], workers: int) -> bytes:
    """Encrypt ``data`` split across ``workers``; equals one sequential pass."""
    data = bytes(data)
    chunks = split_chunks(len(data), workers)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        parts = pool.map(
            lambda chunk: encrypt_chunk(data[chunk.start:chunk.end], keys, chunk.start),
            chunks,
        )
        return b"".join(parts)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Parallel multi-key DEA encryption test")
    parser.add_argument("--workers", type=int, default=os.cpu_count() or 1)
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE, help="test size in bytes")
    parser.add_argument("--iterations", type=int, default=DEFAULT_ITERATIONS)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    workers, size, iterations = args.workers, args.size, args.iterations
    if workers < 1 or size < 0 or iterations < 1:
        print("Workers and iterations must be at least 1 and size must not be negative")
        return 1

    print("=== MPI Multi-Key DEA Encryption Test ===")
    print(f"Number of processes: {workers}")
    print(f"Test size: {size} bytes")
    print(f"Number of iterations: {iterations}")

    message = make_pattern(size)
    print(format_data("Original (sample)", message))
    for chunk in split_chunks(size, workers)[1:]:
        print(
            f"Process {chunk.index} received {chunk.size} bytes, "
            f"will encrypt for {iterations} iterations"
        )

    start = time.process_time()
    for iteration in range(iterations):
        encrypted = encrypt_parallel(message, DEFAULT_KEYS, workers)
        if iteration == iterations - 1:
            dea = DEA()
            dea.set_keys(DEFAULT_KEYS)
            dea.reset()
            decrypted = dea.decrypt_block(encrypted)
            print(format_data("Encrypted (sample)", encrypted))
            print(format_data("Decrypted (sample)", decrypted))
            if decrypted == message:
                print("\nVerification SUCCESSFUL - The decrypted text matches the original!")
            else:
                print("\nVerification FAILED - The decrypted text does not match the original!")
    total_ms = (time.process_time() - start) * 1000.0

    total_bytes = size * iterations
    seconds = total_ms / 1000.0
    rate = float("inf") if seconds == 0 else total_bytes / MIB / seconds
    print(f"\n=== Performance Results ({size // MIB}MB Test, {iterations} iterations) ===")
    print(f"Total execution time: {total_ms:.3f} ms")
    print(f"Average time per iteration: {total_ms / iterations:.3f} ms")
    print(f"Total data processed: {total_bytes} bytes")
    print(f"Throughput: {rate:.2f} MB/second")

    print("\nScaling Analysis:")
    print(f"With {workers} processes: {rate:.2f} MB/second")
    print(f"Estimated single-process performance: {rate / workers:.2f} MB/second")
    print(f"Parallel efficiency: {100.0 / workers:.2f}%")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())