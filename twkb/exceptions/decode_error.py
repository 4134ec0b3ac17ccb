class TWKBDecodeError(ValueError):
    pass


class UnknownGeometryError(TWKBDecodeError):
    def __init__(self, code: int) -> None:
        super().__init__(f'Unknown geometry type {code}')
        self.code = code


class ReadError(TWKBDecodeError):
    def __init__(self, message: str, position: int) -> None:
        super().__init__(message)
        self.position = position


class UnexpectedEOFError(ReadError):
    pass


class StreamReadError(ReadError):
    pass


class MalformedVarintError(TWKBDecodeError):
    pass


class SizeMismatchError(TWKBDecodeError):
    def __init__(self, declared: int, actual: int) -> None:
        super().__init__(f'Declared size {declared} does not match payload size {actual}')
        self.declared = declared
        self.actual = actual


class NestingTooDeepError(TWKBDecodeError):
    pass


class ShapelyConversionError(TWKBDecodeError):
    pass
