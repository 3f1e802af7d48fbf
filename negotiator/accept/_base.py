"""
    negotiator.accept._base
    ~~~~~~~~~~~~~~~~~~~~~~~

    :copyright:
        (c) 2016 Ben Mather
    :license:
        BSD, see LICENSE for more details.
"""
import re
import math
import logging
import functools

from negotiator.exceptions import NotAcceptable


_logger = logging.getLogger(__name__)


# A single comma separated segment of an accept header.  Anything that isn't
# a token optionally followed by a parameter list is discarded.
_range_re = re.compile(
    r'''
        ^
        \s*
        (?P<value> [^\s;]+ )
        \s*
        (?:
            ;
            (?P<params> .* )
        )?
        $
    ''', re.VERBOSE | re.DOTALL
)


def parse_quality(value, default=1.0):
    """Converts the value of a `q` parameter to a float in the range [0, 1].

    Values that can't be parsed fall back to `default` rather than
    invalidating the range they belong to.
    """
    try:
        q = float(value)
    except (TypeError, ValueError):
        _logger.debug("ignoring invalid quality value: %r", value)
        return default

    if math.isnan(q):
        _logger.debug("ignoring invalid quality value: %r", value)
        return default

    return max(min(q, 1.0), 0.0)


class Value(object):
    """Base class for a value that the server can propose during content
    negotiation.
    """
    match_type = None

    def __init__(self, value):
        self.value = value

    def _acceptability_for_option(self, option, index=None):
        if option.value.lower() == self.value.lower():
            exact_match = True
        elif option.value == '*':
            exact_match = False
        else:
            raise NotAcceptable()

        return self.match_type(
            self, exact_match=exact_match,
            q=option.q, position=option.index, index=index,
        )

    def acceptability(self, accept, *, index=None):
        """
        :param accept:
            An iterable of ranges, usually an `Accept` object.

        :param index:
            Position of this value in the list of values offered by the
            server.  Used as the final tie break when ranking.

        :return:
            The acceptability of the range that best matches this value.
            Exact matches always override wildcards, even when the wildcard
            has a higher quality, so that a client can explicitly refuse a
            value with `q=0`.

        :raises NotAcceptable: If no range matches this value.
        """
        best_match = None

        for option in accept:
            try:
                match = self._acceptability_for_option(option, index=index)
            except NotAcceptable:
                continue

            if best_match is None or match.overrides(best_match):
                best_match = match

        if best_match is None:
            raise NotAcceptable()

        return best_match

    def __eq__(self, other):
        if not isinstance(other, Value):
            return NotImplemented
        return self.value == other.value

    def __hash__(self):
        return hash(self.value)

    def __repr__(self):
        return '{name}({value!r})'.format(
            name=self.__class__.__name__, value=self.value,
        )

    def __str__(self):
        return self.to_header()

    def to_header(self):
        """Returns a string suitable for use in the corresponding header
        """
        return self.value


class Range(object):
    """A single preference parsed from an accept header.

    :param value:
        The token as written by the client, or `*`.
    :param q:
        Quality, clamped to the range [0, 1].  Raises `ValueError` if it
        isn't a number.
    :param index:
        Position of the range in the original header.
    """
    def __init__(self, value, q=1.0, index=0):
        self._value = value
        self._q = max(min(float(q), 1.0), 0.0)
        self._index = index

    @property
    def value(self):
        return self._value

    @property
    def q(self):
        return self._q

    @property
    def index(self):
        return self._index

    def __eq__(self, other):
        if not isinstance(other, Range):
            return NotImplemented
        return (
            self.value == other.value and
            self.q == other.q and
            self.index == other.index
        )

    def __hash__(self):
        return hash((self.value, self.q, self.index))

    def __repr__(self):
        return '{name}(value={value!r}, q={q!r}, index={index!r})'.format(
            name=self.__class__.__name__,
            value=self.value,
            q=self.q,
            index=self.index,
        )

    def __str__(self):
        return self.to_header()

    def to_header(self):
        header = self.value

        if self.q != 1:
            header += ';q=%s' % self.q

        return header


class Accept(object):
    range_type = None

    def __init__(self, options):
        self._options = []
        for position, option in enumerate(options):
            if isinstance(option, Range):
                self._options.append(option)
                continue

            if isinstance(option, str):
                option = (option,)

            value, *rest = option
            q = rest[0] if len(rest) > 0 else 1.0
            index = rest[1] if len(rest) > 1 else position

            self._options.append(self.range_type(value, q, index))

    def __iter__(self):
        return iter(self._options)

    def __len__(self):
        return len(self._options)

    def _coerce_value(self, value):
        raise NotImplementedError()

    def __contains__(self, value):
        value = self._coerce_value(value)
        try:
            acceptability = value.acceptability(self)
        except NotAcceptable:
            return False
        return acceptability.quality > 0

    def __getitem__(self, value):
        value = self._coerce_value(value)
        try:
            return value.acceptability(self)
        except NotAcceptable as e:
            raise KeyError(value) from e

    def __repr__(self):
        return '{name}({options!r})'.format(
            name=self.__class__.__name__, options=self._options,
        )

    def __str__(self):
        return self.to_header()

    def to_header(self):
        """Return an equivalent string suitable for use as an `Accept` header.
        """
        return ','.join(option.to_header() for option in self)


@functools.total_ordering
class Acceptability(object):
    """How well a server value matched the client's preferences.

    Instances are ordered so that the most preferable sorts highest:
    quality first, then specificity, then the earliest position in the
    header, then the earliest position in the server's list.
    """
    def __init__(self, value, *, exact_match, q, position, index=None):
        self._value = value
        self._exact_match = exact_match
        self._q = q
        self._position = position
        self._index = index

    @property
    def exact_match(self):
        return bool(self._exact_match)

    @property
    def specificity(self):
        return 1 if self._exact_match else 0

    @property
    def quality(self):
        return self._q

    @property
    def position(self):
        return self._position

    @property
    def index(self):
        return self._index

    def _index_key(self):
        return self._index if self._index is not None else 0

    def overrides(self, other):
        """Returns `True` if this match should replace `other` as the best
        match for a single value.
        """
        if self.specificity != other.specificity:
            return self.specificity > other.specificity

        if self.quality != other.quality:
            return self.quality > other.quality

        return self.position < other.position

    def __eq__(self, other):
        if other is None:
            return False

        if not isinstance(other, Acceptability):
            return NotImplemented

        return (
            self.quality == other.quality and
            self.specificity == other.specificity and
            self.position == other.position and
            self._index_key() == other._index_key()
        )

    def __gt__(self, other):
        if other is None:
            return True

        if self.quality != other.quality:
            return self.quality > other.quality

        if self.specificity != other.specificity:
            return self.specificity > other.specificity

        if self.position != other.position:
            return self.position < other.position

        return self._index_key() < other._index_key()

    __hash__ = None

    def __repr__(self):
        return (
            '<{name} value={value!r} quality={quality!r} '
            'specificity={specificity!r} position={position!r} '
            'index={index!r}>'
        ).format(
            name=self.__class__.__name__,
            value=self._value,
            quality=self.quality,
            specificity=self.specificity,
            position=self.position,
            index=self.index,
        )


def split_accept_string(string):
    """Splits an accept header into `(value, q, index)` triples.

    Every comma separated segment is assigned an index, including segments
    that turn out to be malformed and are skipped.
    """
    for index, accept_range in enumerate(string.split(',')):
        match = _range_re.match(accept_range)
        if match is None:
            if accept_range.strip():
                _logger.debug("dropping malformed range: %r", accept_range)
            continue

        q = 1.0
        str_params = match.group('params')
        if str_params is not None:
            for param in str_params.split(';'):
                parts = param.strip().split('=')
                if len(parts) != 2:
                    continue

                key, value = parts[0].strip(), parts[1].strip()
                if key == 'q':
                    q = parse_quality(value)

        yield match.group('value'), q, index
