"""
    negotiator.exceptions
    ~~~~~~~~~~~~~~~~~~~~~

    :copyright:
        (c) 2016 Ben Mather
    :license:
        BSD, see LICENSE for more details.
"""
from werkzeug.exceptions import NotAcceptable


class CharsetNotAcceptable(NotAcceptable):
    """Raised when none of the charsets offered by the server are acceptable
    to the client.  Renders as a `406 Not Acceptable` response.
    """
    description = (
        'The resource identified by the request is only capable of '
        'generating response entities in charsets not acceptable '
        'according to the Accept-Charset header sent in the request.'
    )

    def __init__(self, accept_charset=None, available=(), **kwargs):
        super(CharsetNotAcceptable, self).__init__(**kwargs)
        self.accept_charset = accept_charset
        self.available = list(available)


__all__ = ['NotAcceptable', 'CharsetNotAcceptable']
