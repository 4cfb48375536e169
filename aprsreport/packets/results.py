from typing import Any

from aprsreport.messages import get_message


class DecodingResult:
    """ outcome of decoding a single field of a packet """

    available: bool

    def value_or(self, default: Any) -> Any:
        """
        :param default: value to use if the field could not be decoded
        :return: decoded value, or the given default
        """

        return self.value if self.available else default

    def __bool__(self) -> bool:
        return self.available


class Decoded(DecodingResult):
    """ field was present in the packet and decoded successfully """

    available = True

    def __init__(self, value: Any):
        self.__value = value

    @property
    def value(self) -> Any:
        return self.__value

    def __eq__(self, other: DecodingResult) -> bool:
        return isinstance(other, Decoded) and self.value == other.value

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({repr(self.value)})'


class Unavailable(DecodingResult):
    """
    field could not be decoded; the reported value of the field is a default

    :param reason: error code from the error message catalog
    """

    available = False

    def __init__(self, reason: str):
        self.__reason = reason

    @property
    def reason(self) -> str:
        return self.__reason

    @property
    def description(self) -> str:
        return get_message(self.reason)

    def __eq__(self, other: DecodingResult) -> bool:
        return isinstance(other, Unavailable) and self.reason == other.reason

    def __str__(self) -> str:
        return f'{self.reason} - {self.description}'

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({repr(self.reason)})'
