"""Noisy Bell-state preparation with sampled gate errors.

A depolarizing error on the Hadamard and a bit-flip error on the
target of the CNOT are sampled shot by shot, and the frequency of each
measured basis state is printed.
"""

from __future__ import annotations

from collections import Counter

import torch

import gatenoise as gn


def main() -> None:
    """Sample noisy Bell-state trajectories and print outcome frequencies."""
    engine = gn.RngEngine(seed=0)
    measure = torch.Generator().manual_seed(1)

    h_error = gn.depolarizing_error(0.05)
    cx_error = gn.bit_flip_error(0.1, p_error=0.5)
    print(h_error)
    print(cx_error)

    circuit = [
        (gn.Operation("H", (0,)), h_error),
        (gn.Operation("CNOT", (0, 1)), cx_error),
    ]

    n_shots = 1000
    counts: Counter[str] = Counter()
    for _ in range(n_shots):
        state = gn.zero_state(2)
        for op, error in circuit:
            # noise acts on the target qubit only
            qubits = op.qubits[-1:]
            noise_ops = error.sample_noise(op, qubits, engine)
            state = gn.run_noisy_ops(state, noise_ops, engine)
        probs = (state.conj() * state).real
        outcome = int(torch.multinomial(probs, 1, generator=measure).item())
        counts[format(outcome, "02b")] += 1

    for bits in sorted(counts):
        print(f"|{bits}>: {counts[bits] / n_shots:.3f}")


if __name__ == "__main__":
    main()
