"""IPv4 <-> EPID3 conversion.

An IPv4 address has 256^4 (about 4.3 billion) values. An EPID3 is three
dictionary words, so it needs a word base of ceil((256^4)^(1/3)) = 1626:

    192.168.1.1 -> parse (4 x base 256) -> ordinal -> decompose (3 x base 1626)
                -> dictionary words joined by "."

Parsing is strict. Malformed text gives None, never an exception.
"""

import logging
import re

from epid.core.dictionary import DictionaryError, WordDictionary, default_dictionary
from epid.core.radix import CARDINALITY, compose, components_base, decompose

logger = logging.getLogger(__name__)

DIVIDER = "."

IPV4_LENGTH = 4
IPV4_BASE = 256
EPID3_LENGTH = 3
EPID3_BASE = components_base(EPID3_LENGTH)  # 1626

_DECIMAL = re.compile(r"[0-9]+")


def _resolve(dictionary: WordDictionary | None) -> WordDictionary:
    """Default the dictionary and check it can spell every EPID3 digit."""
    if dictionary is None:
        dictionary = default_dictionary()
    if len(dictionary) < EPID3_BASE:
        raise DictionaryError(
            f"Dictionary needs at least {EPID3_BASE} words, has {len(dictionary)}"
        )
    return dictionary


def parse_ipv4(ipv4: str) -> list[int] | None:
    """Parse dotted-quad text into four octets, or None."""
    tokens = ipv4.split(DIVIDER)
    if len(tokens) != IPV4_LENGTH:
        logger.debug("Rejected %r: expected %d components, got %d",
                     ipv4, IPV4_LENGTH, len(tokens))
        return None

    octets = []
    for token in tokens:
        digits = token.lstrip("0") or "0"
        if (not _DECIMAL.fullmatch(token) or len(digits) > 3
                or int(digits) >= IPV4_BASE):
            logger.debug("Rejected %r: bad octet %r", ipv4, token[:16])
            return None
        octets.append(int(digits))
    return octets


def parse_epid3(epid: str, dictionary: WordDictionary | None = None) -> list[int] | None:
    """Parse a three-word identifier into word indices, or None."""
    dictionary = _resolve(dictionary)
    tokens = epid.split(DIVIDER)
    if len(tokens) != EPID3_LENGTH:
        logger.debug("Rejected %r: expected %d words, got %d",
                     epid, EPID3_LENGTH, len(tokens))
        return None

    indices = []
    for token in tokens:
        index = dictionary.index(token)
        # Words past the base are never produced by format_epid3
        if index is None or index >= EPID3_BASE:
            logger.debug("Rejected %r: unknown word %r", epid, token)
            return None
        indices.append(index)
    return indices


def format_ipv4(octets) -> str:
    """Render octets as dotted decimal."""
    return DIVIDER.join(str(octet) for octet in octets)


def format_epid3(indices, dictionary: WordDictionary | None = None) -> str:
    """Render word indices as dictionary words joined by '.'."""
    dictionary = _resolve(dictionary)
    return DIVIDER.join(dictionary[i] for i in indices)


def ipv4_to_epid3(ipv4: str, dictionary: WordDictionary | None = None) -> str | None:
    """Convert '192.168.1.1' style text to an EPID3, or None if malformed."""
    dictionary = _resolve(dictionary)
    octets = parse_ipv4(ipv4)
    if octets is None:
        return None
    ordinal = compose(octets, IPV4_BASE)
    return format_epid3(decompose(ordinal, EPID3_LENGTH), dictionary)


def epid3_to_ipv4(epid: str, dictionary: WordDictionary | None = None) -> str | None:
    """Convert an EPID3 back to dotted-quad text, or None if malformed."""
    indices = parse_epid3(epid, dictionary)
    if indices is None:
        return None
    ordinal = compose(indices, EPID3_BASE)
    # 1626^3 overshoots 256^4; the top identifiers name no address
    if ordinal >= CARDINALITY:
        logger.debug("Rejected %r: ordinal %d is past the IPv4 range", epid, ordinal)
        return None
    return format_ipv4(decompose(ordinal, IPV4_LENGTH))
