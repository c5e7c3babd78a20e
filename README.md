# multikeydea

A small data encryption algorithm (DEA). Each byte is XORed with one of up to
four 8-bit keys, and the key changes after every byte. XOR undoes itself, so
decrypting means running the same key sequence again from the first key.

The package also has two benchmark commands. One encrypts in a single pass.
The other splits the input into chunks and encrypts each chunk on a separate
thread.

> This cipher is for demonstration only and gives no real protection. Do not
> use it to secure data.

## Installation

```
pip install .
```

To also install the tools for the test suite, add the `test` extra:

```
pip install ".[test]"
pytest
```

## Using the cipher

```python
from multikeydea.dea import DEA

dea = DEA()
dea.set_keys([0xAA, 0xBB, 0xCC, 0xDD])   # or call set_key() once per key

ciphertext = dea.encrypt_block(b"HELLO")
plaintext = dea.decrypt_block(ciphertext)
assert plaintext == b"HELLO"
```

How `DEA` behaves:

- `set_key(key)` loads a key into the next free slot. There are four slots.
  When all four are full, the next key replaces the first slot and becomes
  the only active key.
- `keys` gives the active keys in rotation order. `num_keys` is how many there
  are, and `key_counter` is the position of the next key to use.
- `encrypt_byte(b)` encrypts one byte and moves on to the next key. If no keys
  are loaded, it returns the byte unchanged.
- `encrypt_block(data)` encrypts bytes and picks up the rotation where it left
  off. It returns `bytes`.
- `decrypt_block(data)` moves the rotation back to the first key, then
  decrypts. The rotation stays where the block ended.
- `reset()` moves the rotation back to the first key. The loaded keys are kept.
- Keys and data bytes must be integers from 0 to 255. Any other value raises
  `ValueError`.

## Helpers

`multikeydea.display` has two helpers:

- `make_pattern(size)` returns `size` bytes that repeat `ABC…Z`. A negative
  size raises `ValueError`.
- `format_data(label, data)` returns two lines. The first shows up to 20 bytes
  in hex. The second shows up to 40 bytes as text, with a `.` for each byte
  that cannot be printed.

## Benchmarks

```
multikeydea-bench [--size BYTES] [--iterations N]
```

This command does the following:

1. Encrypts a pattern of 10 MiB (by default) 10 times with the keys
   `0xAA 0xBB 0xCC 0xDD`.
2. Decrypts the result and checks that it matches the original.
3. Prints the CPU time and the throughput, along with a short demonstration of
   the keys cycling.

You can do the same from code:

- `multikeydea.benchmark.run_benchmark(size, iterations, keys)` returns a
  `BenchmarkResult`. Its fields are `total_ms`, `decrypt_ms`, `original`,
  `encrypted` and `decrypted`. Its computed properties are `verified`,
  `average_ms`, `throughput` and `decrypt_throughput`.
- `key_cycling_demo(dea, data, keys)` returns one `(input, key, output)` tuple
  per byte.

```
multikeydea-parallel [--workers N] [--size BYTES] [--iterations N]
```

This command does the following:

1. Splits the pattern into chunks with
   `multikeydea.parallel.split_chunks(total, parts)`. Each chunk is a `Chunk`
   with `index`, `start`, `size` and `end`, and the first chunks are one byte
   larger when the total does not divide evenly.
2. Encrypts each chunk with `encrypt_chunk(data, keys, preceding_bytes)`,
   starting at the key position that matches the chunk's offset. The combined
   output is the same, byte for byte, as a single sequential pass. To do this
   from code, use `encrypt_parallel(data, keys, workers)`.
3. Checks the last run by decrypting it.
4. Prints the timing and a scaling summary.

By default, `--workers` is the number of CPUs.

Both commands use CPU time and report rates in MiB per second, labelled
"MB". If the size is negative or the iteration or worker count is below 1,
they exit with status 1.

## Limitations

- The parallel benchmark uses a thread pool inside one Python process. It does
  not spread work across separate processes or machines.
- Both commands always use the keys `0xAA 0xBB 0xCC 0xDD`. You cannot choose
  other keys on the command line.