#!/usr/bin/env python3
"""Quick key derivation and cipher benchmark - direct timing only"""
import time


PASSWORD = "correct horse"
PAYLOAD = b"Hello World Testing Performance Benchmark" * 1000


def bench_derive(rounds: int = 50):
    import pwcrypt

    start = time.perf_counter()
    for _ in range(rounds):
        key = pwcrypt.derive_key(PASSWORD)
    return time.perf_counter() - start, key


def bench_cipher(key: bytes, rounds: int = 1000):
    import pwcrypt

    start = time.perf_counter()
    for _ in range(rounds):
        blob = pwcrypt.encrypt_bytes(PAYLOAD, key)
        pwcrypt.decrypt_bytes(blob, key)
    return time.perf_counter() - start


def main():
    print("Benchmarking PBKDF2-HMAC-SHA1 (50 derivations)...")
    kdf_time, key = bench_derive()
    print(f"  Time: {kdf_time:.3f}s ({kdf_time / 50 * 1000:.2f} ms/op)")

    print(f"Benchmarking AES-256-CBC round trip (1000 x {len(PAYLOAD)} bytes)...")
    cipher_time = bench_cipher(key)
    print(f"  Time: {cipher_time:.3f}s ({cipher_time:.2f} ms/op)")


if __name__ == '__main__':
    main()
