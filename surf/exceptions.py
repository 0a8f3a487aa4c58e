class SurfException(Exception):
    pass


class InvalidPattern(SurfException):
    pass


class ParseError(SurfException):
    """Input could not be parsed

    <position> is the offset in <text> where parsing broke.
    """

    code = 'error'

    def __init__(self, text: str, position: int, code: str = None):
        self.text: str = text
        self.position: int = position
        if code is not None:
            self.code = code
        super().__init__('{} at offset {} in {!r}'.format(self.code, position, text))

    @property
    def remaining(self) -> str:
        return self.text[self.position:]


class MalformedQuery(ParseError):
    """A query pair is missing its '=' separator"""

    code = 'query'


class TrailingInput(ParseError):
    """Input is left over after a full-consumption parse"""

    code = 'eof'
