"""
    negotiator.accept
    ~~~~~~~~~~~~~~~~~

    Code for selecting charsets based on accept headers

    http://www.w3.org/Protocols/rfc2616/rfc2616-sec14.html

    :copyright: (c) 2015 by Ben Mather.
    :license: BSD, see LICENSE for more details.
"""
from negotiator.accept.charset import (
    Charset, CharsetAccept, CharsetAcceptability, CharsetRange,
    parse_charset_header, parse_accept_charset_header, preferred_charsets,
    DEFAULT_ACCEPT_CHARSET,
)

__all__ = [
    'Charset', 'CharsetAccept', 'CharsetAcceptability', 'CharsetRange',
    'parse_charset_header', 'parse_accept_charset_header',
    'preferred_charsets', 'DEFAULT_ACCEPT_CHARSET',
]
