"""The Surf address grammar

    surf      := scheme? host segment* query? fragment?
    scheme    := "grid!" | "grid://"
    host      := (alnum | '.')*
    segment   := '/' alnum*
    query     := '?' pair ('&' pair)*
    pair      := alnum* '=' alnum*
    fragment  := '#' alnum*

Every part of an address is tagged, so that it can be fetched from the parse tree.
"""

import string

from .exceptions import MalformedQuery, TrailingInput
from .pattern import P


SCHEMES = ('grid!', 'grid://')

DEFAULT_SCHEME = SCHEMES[0]

# ASCII only, anything else is never part of an address
ALNUM = string.ascii_letters + string.digits

HOST_CHARS = ALNUM + '.'


alnum_run = P.n(P.ic(ALNUM))

scheme = P.tag(P.any(*SCHEMES), tag='scheme')

host = P.tag(P.n(P.ic(HOST_CHARS)), tag='host')

segment = '/' + P.tag(alnum_run, tag='segment')

path = P.tag(P.n(segment), tag='path')

# after a '?' or '&', a missing '=' is an error rather than the end of the address
pair = P.tag(
    P.tag(alnum_run, tag='key') + P.commit('=', error=MalformedQuery) + P.tag(alnum_run, tag='value'),
    tag='pair')

query = P.tag('?' + pair + P.n('&' + pair), tag='query')

fragment = '#' + P.tag(alnum_run, tag='fragment')

surf = P.n01(scheme) + host + path + P.n01(query) + P.n01(fragment)

# the whole input has to be an address
strict_surf = surf + P.commit(P.ENDING, error=TrailingInput)

# compiled once, here, and shared by every caller
surf.finder
strict_surf.finder
