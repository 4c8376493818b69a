import dataclasses
import re
from urllib.parse import urlparse

__all__ = ('capitalize', 'is_url', 'mark_last', 'normalize', 'sanitize')

_DELIMITERS = re.compile(r'[-. _]')

# Decorations some servers put around generic type arguments, e.g. Page«Pet».
_DECORATIONS = ('«', '»')


def capitalize(text):
    """Upper-case the first character only; empty input passes through."""
    if not text:
        return text
    return text[0].upper() + text[1:]


def normalize(text):
    """Turn a delimited name into a PascalCase identifier.

    The name is split on ``-``, ``.``, space and ``_``; every token gets its
    first character upper-cased and the tokens are joined. Names without any
    delimiter are returned untouched, so ``petId`` stays ``petId`` rather
    than becoming ``PetId``.

    Examples:
        >>> normalize('pet-store')
        'PetStore'
        >>> normalize('simple')
        'simple'
    """
    if not text:
        return text

    if not _DELIMITERS.search(text):
        return text

    return ''.join(capitalize(token) for token in _DELIMITERS.split(text))


def sanitize(name):
    """Strip the decorative brackets used to spell generic type names."""
    if not name:
        return name
    for decoration in _DECORATIONS:
        name = name.replace(decoration, '')
    return name


def is_url(text):
    try:
        result = urlparse(text)
        return result.scheme in ('http', 'https') and bool(result.netloc)
    except (TypeError, ValueError):
        return False


def mark_last(items):
    """Return copies of dataclass ``items`` with ``last`` set on the final one.

    Every other element gets ``last=False`` so a list that was reordered or
    truncated never carries a stale marker.
    """
    count = len(items)
    return [
        dataclasses.replace(item, last=index == count - 1)
        for index, item in enumerate(items)
    ]
