"""
    negotiator.request
    ~~~~~~~~~~~~~~~~~~

    Per-request wrapper around charset negotiation.

    :copyright:
        (c) 2016 Ben Mather
    :license:
        BSD, see LICENSE for more details.
"""
from werkzeug.datastructures import Headers, EnvironHeaders

from negotiator.accept.charset import (
    parse_accept_charset_header, preferred_charsets,
)
from negotiator.exceptions import CharsetNotAcceptable


class Negotiator(object):
    """Negotiates on behalf of a single request.

    :param headers:
        The request headers.  Anything that isn't already a werkzeug
        `Headers` object is copied into one so that lookups are case
        insensitive.
    """
    def __init__(self, headers):
        if not isinstance(headers, Headers):
            headers = Headers(headers)
        self._headers = headers

    @classmethod
    def from_environ(cls, environ):
        return cls(EnvironHeaders(environ))

    @classmethod
    def from_request(cls, request):
        return cls(request.headers)

    @property
    def accept_charset(self):
        """The raw value of the `Accept-Charset` header, or `None` if the
        client did not send one.
        """
        return self._headers.get('Accept-Charset')

    def parse_accept_charset(self):
        return parse_accept_charset_header(self.accept_charset)

    def charsets(self, available=None):
        return preferred_charsets(self.accept_charset, available)

    def charset(self, available=None):
        charsets = self.charsets(available)
        if charsets:
            return charsets[0]
        return None

    def select_charset(self, available):
        """Like `charset` but raises `CharsetNotAcceptable` instead of
        returning `None` if nothing in `available` is acceptable.
        """
        charset = self.charset(available)
        if charset is None:
            raise CharsetNotAcceptable(
                accept_charset=self.accept_charset, available=available,
            )
        return charset

    def __repr__(self):
        return '<%s accept_charset=%r>' % (
            self.__class__.__name__, self.accept_charset,
        )
