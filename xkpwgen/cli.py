"""Generates xkcd-style passphrases from the EFF long wordlist, using a cryptographically secure random source."""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import load_defaults
from .errors import ConfigError, RandomSourceError
from .password import generate_passwords, system_rng
from .style import ColourMode, colour_enabled, paint
from .wordlist import WordlistStatistics, builtin_words, entropy_bits


LOGGER = logging.getLogger(__name__)

LICENSE = """\
wordlist license CC BY 3.0 US: <http://creativecommons.org/licenses/by/3.0/us/>.

xkpwgen license either of
* Apache License, Version 2.0, <http://www.apache.org/licenses/LICENSE-2.0>
* MIT license, <http://opensource.org/licenses/MIT>
at your option.  There is NO WARRANTY, to the extent permitted by law."""

COPYRIGHT = """\
xkpwgen  copyright (C) 2017 Sebastian Wiesner <swiesner@lunaryorn.com>
wordlist copyright (C) 2016 EFF <https://www.eff.org/copyright>"""


def non_negative_int(s: str) -> int:
    try:
        val = int(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f'invalid integer: {s!r}') from None
    if (val < 0):
        raise argparse.ArgumentTypeError(f'must be non-negative: {val}')
    return val

def version_text(words) -> str:
    stats = WordlistStatistics.from_words(words)
    return f'%(prog)s {__version__}\n\n{stats.describe()}\n\n{LICENSE}'

def make_parser(words) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog = 'xkpwgen', description = __doc__, epilog = COPYRIGHT, formatter_class = argparse.RawDescriptionHelpFormatter)
    p.add_argument('-V', '--version', action = 'version', version = version_text(words), help = 'print version and license information')
    p.add_argument('--colour', '--color', type = ColourMode, choices = list(ColourMode), help = 'whether to enable or disable coloured output (default: auto)')
    p.add_argument('-s', '--separator', help = 'the separator between words in a password (default: a single space)')
    p.add_argument('-n', '--number', type = non_negative_int, help = 'the number of passwords to generate at once (default: 5)')
    p.add_argument('-l', '--length', type = non_negative_int, help = 'the number of words in each password (default: 4)')
    p.add_argument('--words', action = 'store_true', help = 'print the internal wordlist and exit')
    p.add_argument('-c', '--config', help = 'configuration file with option defaults (default: $XKPWGEN_CONFIG or ~/.config/xkpwgen/config.ini)')
    p.add_argument('-v', '--verbose', action = 'store_true', help = 'log entropy information to stderr')
    return p

def main(argv: Optional[List[str]] = None) -> int:
    words = builtin_words()
    parser = make_parser(words)
    args = parser.parse_args(argv)
    logging.basicConfig(level = logging.INFO if args.verbose else logging.WARNING, format = '%(message)s')

    if args.words:
        for word in words:
            print(word)
        return 0

    try:
        defaults = load_defaults(args.config)
    except ConfigError as e:
        parser.error(str(e))
    length = defaults.length if (args.length is None) else args.length
    number = defaults.number if (args.number is None) else args.number
    separator = defaults.separator if (args.separator is None) else args.separator
    colour = defaults.colour if (args.colour is None) else args.colour
    if (length > len(words)):
        parser.error(f'length {length} exceeds the number of words in the wordlist ({len(words)})')

    try:
        rng = system_rng()
    except RandomSourceError as e:
        LOGGER.critical(str(e))
        return 1
    LOGGER.info(f'Using random source {type(rng).__name__}')
    LOGGER.info(f'Each password has {entropy_bits(len(words), length):.3f} bits of entropy')

    passwords = generate_passwords(rng, words, length, number, separator)
    enabled = colour_enabled(colour, sys.stdout)
    for (lineno, password) in enumerate(passwords):
        print(paint(password, lineno, enabled))
    return 0
