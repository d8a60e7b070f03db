#!/usr/bin/env python3
"""Quick TEA benchmark - direct timing only"""
import time
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

TEXT = "Hello World Testing Performance Benchmark" * 100
PASSWORD = "benchmark"
ITERATIONS = 200


def bench_content():
    """Benchmark the checksummed content round trip"""
    import tiddlercrypt

    start = time.perf_counter()
    for _ in range(ITERATIONS):
        block = tiddlercrypt.encrypt_content(TEXT, PASSWORD)
    enc_elapsed = time.perf_counter() - start

    start = time.perf_counter()
    for _ in range(ITERATIONS):
        result = tiddlercrypt.decrypt_content(block, PASSWORD)
    dec_elapsed = time.perf_counter() - start
    return enc_elapsed, dec_elapsed, block, result


def main():
    print(f"Benchmarking TEA content blocks ({ITERATIONS} iterations)...")
    print(f"Input size: {len(TEXT)} chars\n")

    enc_time, dec_time, block, result = bench_content()
    print(f"  Encrypt: {enc_time:.3f}s ({enc_time / ITERATIONS * 1000:.2f} ms/op)")
    print(f"  Decrypt: {dec_time:.3f}s ({dec_time / ITERATIONS * 1000:.2f} ms/op)")
    print(f"  Output sample: {block[:60]!r}...")

    if result != TEXT:
        print("\n❌ Round trip mismatch", file=sys.stderr)
        return 1
    print("\n✅ Benchmark complete")
    return 0


if __name__ == '__main__':
    sys.exit(main())
