# primegen/primes/service.py
from itertools import compress
from typing import Callable

PrimeGenerator = Callable[[int], list[int]]


def sieve_primes(limit: int) -> list[int]:
    """
    Crivo de Eratóstenes sobre um bytearray de flags indexado 0..N.
    Retorna a lista crescente de primos em [2, N], com N = |limit|.
    """
    n = abs(limit)
    if n < 2:
        return []

    sieve = bytearray(b"\x01") * (n + 1)
    sieve[0:2] = b"\x00\x00"
    s = int(n**0.5 + 0.5)
    for p in range(2, s + 1):
        if sieve[p]:
            start = p * p
            if start > n:
                continue
            sieve[start::p] = b"\x00" * ((n - start) // p + 1)
    return list(compress(range(n + 1), sieve))


compute_primes: PrimeGenerator = sieve_primes
