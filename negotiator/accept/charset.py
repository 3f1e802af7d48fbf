"""
    negotiator.accept.charset
    ~~~~~~~~~~~~~~~~~~~~~~~~~

    :copyright:
        (c) 2016 Ben Mather
    :license:
        BSD, see LICENSE for more details.
"""
from negotiator.exceptions import NotAcceptable
from negotiator.accept import _base


# RFC 2616 sec 14.2: no header means any charset is acceptable.
DEFAULT_ACCEPT_CHARSET = '*'


class CharsetRange(_base.Range):
    pass


class CharsetAccept(_base.Accept):
    range_type = CharsetRange

    def _coerce_value(self, value):
        if isinstance(value, str):
            value = Charset(value)
        return value


class CharsetAcceptability(_base.Acceptability):
    @property
    def charset(self):
        return self._value


class Charset(_base.Value):
    match_type = CharsetAcceptability


def parse_accept_charset_header(string):
    """Creates a new `CharsetAccept` object from an `Accept-Charset` header.

    Passing `None` is the same as passing `*`.
    """
    if string is None:
        string = DEFAULT_ACCEPT_CHARSET
    return CharsetAccept(_base.split_accept_string(string))


def parse_charset_header(string):
    return Charset(string)


def preferred_charsets(accept, provided=None):
    """Ranks charsets by how strongly the client prefers them.

    :param accept:
        The value of the `Accept-Charset` header, `None` if the header was
        missing, or a `CharsetAccept` object.

    :param provided:
        The charsets the server is able to produce.  If empty, the client's
        own preferences are returned instead.

    :return:
        A list of charsets, most preferred first.  Charsets with a quality of
        zero are never included.  When `provided` is given, the casing of its
        entries is preserved.
    """
    if accept is None or isinstance(accept, str):
        accept = parse_accept_charset_header(accept)

    if not provided:
        ranges = [option for option in accept if option.q > 0]
        ranges.sort(key=lambda option: (-option.q, option.index))
        return [option.value for option in ranges]

    matches = []
    for index, value in enumerate(provided):
        try:
            match = Charset(value).acceptability(accept, index=index)
        except NotAcceptable:
            continue

        if match.quality > 0:
            matches.append(match)

    matches.sort(reverse=True)
    return [match.charset.value for match in matches]
