"""Random EPID generation.

Each word is an independent uniform draw from the whole dictionary. These
identifiers are names only: they need not decode to an IPv4 address.
"""

import random

from epid.core.dictionary import WordDictionary, default_dictionary

DIVIDER = "."

_system_random = random.SystemRandom()


def generate_epid(num_words: int, dictionary: WordDictionary | None = None, rng=None) -> str:
    """Return `num_words` random dictionary words joined by '.'."""
    if num_words < 1:
        raise ValueError(f"EPID needs at least 1 word, got {num_words}")
    if dictionary is None:
        dictionary = default_dictionary()
    rng = rng or _system_random
    return DIVIDER.join(
        dictionary[rng.randrange(len(dictionary))] for _ in range(num_words)
    )


def generate_epid3(dictionary: WordDictionary | None = None, rng=None) -> str:
    return generate_epid(3, dictionary, rng)


def generate_epid4(dictionary: WordDictionary | None = None, rng=None) -> str:
    return generate_epid(4, dictionary, rng)


def generate_epid6(dictionary: WordDictionary | None = None, rng=None) -> str:
    return generate_epid(6, dictionary, rng)
