"""Generates xkcd-style passphrases from the EFF long wordlist."""

__version__ = '0.1.0'

from .password import generate_password, generate_passwords, sample_words, system_rng
from .wordlist import WordlistStatistics, builtin_words, entropy_bits
