"""Generates passphrases by sampling distinct words from a wordlist."""

import logging
import secrets
from typing import List, Protocol, Sequence

from .errors import RandomSourceError


LOGGER = logging.getLogger(__name__)

class IndexSource(Protocol):
    """Anything that can produce a random index in range(stop), e.g. random.Random."""
    def randrange(self, stop: int) -> int:
        ...

def system_rng() -> secrets.SystemRandom:
    """Returns a random generator backed by the operating system's random source.
    Raises RandomSourceError if that source is unavailable."""
    rng = secrets.SystemRandom()
    try:
        rng.getrandbits(8)
    except (NotImplementedError, OSError) as e:
        raise RandomSourceError(f'failed to initialize random generator: {e}') from e
    return rng

def sample_words(rng: IndexSource, words: Sequence[str], length: int) -> List[str]:
    """Samples `length` distinct words uniformly at random, in uniformly random order.
    Uses a Fisher-Yates shuffle that stops after the first `length` positions."""
    n = len(words)
    if (length < 0):
        raise ValueError(f'number of words must be non-negative, got {length}')
    if (length > n):
        raise IndexError(f'cannot sample {length} distinct words from a wordlist of {n}')
    indices = list(range(n))
    for i in range(length):
        j = i + rng.randrange(n - i)
        indices[i], indices[j] = indices[j], indices[i]
    return [words[idx] for idx in indices[:length]]

def generate_password(rng: IndexSource, words: Sequence[str], length: int, separator: str = ' ') -> str:
    """Makes a passphrase of `length` distinct words joined by `separator`."""
    return separator.join(sample_words(rng, words, length))

def generate_passwords(rng: IndexSource, words: Sequence[str], length: int, number: int, separator: str = ' ') -> List[str]:
    """Makes `number` passphrases, in order of generation."""
    passwords = [generate_password(rng, words, length, separator) for _ in range(number)]
    LOGGER.info(f'Generated {len(passwords)} passphrase(s) of {length} word(s)')
    return passwords
