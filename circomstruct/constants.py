"""Field primes supported by the compiler."""

from __future__ import annotations

_PRIME_MODULI = {
    "bn128": "21888242871839275222246405745257275088548364400416034343698204186575808495617",
    "bls12381": "52435875175126190479447740508185965837690552500527637822603658699938581184513",
    "goldilocks": "18446744069414584321",
    "grumpkin": "21888242871839275222246405745257275088696311157297823662689037894645226208583",
    "pallas": "28948022309329048855892746252171976963363056481941560715954676764349967630337",
    "vesta": "28948022309329048855892746252171976963363056481941647379679742748393362948097",
}


class UsefulConstants:
    """Constants derived from the chosen prime field; ``p`` is the modulus."""

    __slots__ = ("p",)

    def __init__(self, possible_prime: str) -> None:
        try:
            digits = _PRIME_MODULI[possible_prime]
        except KeyError:
            raise ValueError(f"unknown prime: {possible_prime!r}") from None
        self.p = int(digits, 10)

    def __repr__(self) -> str:
        return f"UsefulConstants(p={self.p})"