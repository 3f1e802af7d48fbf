"""
    negotiator
    ~~~~~~~~~~

    HTTP content negotiation for the `Accept-Charset` header.

    :copyright: (c) 2014 by Ben Mather.
    :license: BSD, see LICENSE for more details.
"""
from negotiator.accept.charset import preferred_charsets
from negotiator.request import Negotiator
from negotiator.exceptions import NotAcceptable, CharsetNotAcceptable


def charsets(accept_header=None, available=()):
    """Returns the charsets in `available` that the client will accept, most
    preferred first.  If `available` is empty, returns the charsets listed in
    `accept_header` instead.
    """
    return preferred_charsets(accept_header, available)


def charset(accept_header=None, available=()):
    """Returns the client's preferred charset, or `None` if nothing is
    acceptable.
    """
    result = charsets(accept_header, available)
    if result:
        return result[0]
    return None


__all__ = [
    'charset', 'charsets', 'preferred_charsets',
    'Negotiator', 'NotAcceptable', 'CharsetNotAcceptable',
]
