from twkb.exceptions.convert_mixin import ConvertExceptionsMixin
from twkb.exceptions.header_mixin import HeaderExceptionsMixin
from twkb.exceptions.stream_mixin import StreamExceptionsMixin


class Exceptions(
    ConvertExceptionsMixin,
    HeaderExceptionsMixin,
    StreamExceptionsMixin,
): ...
