import os
import random

import pytest

# Run pygame headless
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from chip8vm.interpreter import Interpreter


def assemble(*words):
    return b"".join(w.to_bytes(2, "big") for w in words)


@pytest.fixture
def cpu():
    return Interpreter(rng=random.Random(1234))


@pytest.fixture
def load(cpu):
    """Load 16-bit words at 0x200 and return the interpreter"""
    def _load(*words):
        assert cpu.load_program(assemble(*words)) is None
        return cpu
    return _load


@pytest.fixture
def run(load):
    """Load words, step once per word, fail on any fault"""
    def _run(*words, steps=None):
        machine = load(*words)
        for _ in range(len(words) if steps is None else steps):
            error = machine.step()
            assert error is None, error
        return machine
    return _run
