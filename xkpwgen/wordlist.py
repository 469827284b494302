"""Builtin wordlist and its statistics.

The wordlist is the large diceware list published by the EFF in July 2016:
<https://www.eff.org/files/2016/07/18/eff_large_wordlist.txt>, with the dice rolls stripped.
See <https://www.eff.org/deeplinks/2016/07/new-wordlists-random-passphrases> for the blog post.
It is available under the CC BY 3.0 US license, see <https://www.eff.org/copyright>."""

from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
import math
from typing import Sequence, Tuple

import numpy as np


WORDLIST_RESOURCE = 'eff_large_wordlist.txt'
WORDLIST_NAME = 'EFF long wordlist July 2016'

def parse_words(text: str) -> Tuple[str, ...]:
    """Splits the contents of a wordlist resource into words, one per line."""
    return tuple(text.splitlines())

@lru_cache(maxsize = None)
def builtin_words() -> Tuple[str, ...]:
    """Returns the builtin wordlist, in file order."""
    text = resources.files(__package__).joinpath(WORDLIST_RESOURCE).read_text(encoding = 'utf-8')
    return parse_words(text)

def entropy_bits(n_words: int, length: int) -> float:
    """Bits of entropy in a passphrase of `length` distinct words drawn from `n_words` candidates.
    This is log2 of the number of ordered selections, n! / (n - length)!."""
    if (length > n_words):
        raise IndexError(f'cannot draw {length} distinct words from {n_words}')
    return sum(math.log2(n_words - i) for i in range(length))


@dataclass(frozen = True)
class WordlistStatistics:
    number_of_words: int
    min_word_length: int
    max_word_length: int
    avg_word_length: float
    med_word_length: int
    @classmethod
    def from_words(cls, words: Sequence[str]) -> 'WordlistStatistics':
        """Computes statistics over the character lengths of the words."""
        if (len(words) == 0):
            raise ValueError('cannot compute statistics of an empty wordlist')
        # len counts code points, not bytes
        lengths = np.array(sorted(len(word) for word in words))
        return cls(
            number_of_words = len(lengths),
            min_word_length = int(lengths[0]),
            max_word_length = int(lengths[-1]),
            avg_word_length = float(lengths.mean()),
            med_word_length = int(lengths[len(lengths) // 2])
        )
    def describe(self, name: str = WORDLIST_NAME) -> str:
        return f'{name}: {self.number_of_words} words (lengths: min {self.min_word_length}, max {self.max_word_length}, avg {self.avg_word_length:.2f}, median: {self.med_word_length})'
