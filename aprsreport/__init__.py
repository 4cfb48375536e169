from aprsreport.messages import ERROR_MESSAGES, get_message
from aprsreport.packets import (
    Decoded,
    Message,
    PacketType,
    Position,
    PositionReport,
    Unavailable,
)
from aprsreport.parser import PacketParser, parse

__all__ = [
    'Decoded',
    'ERROR_MESSAGES',
    'Message',
    'PacketParser',
    'PacketType',
    'Position',
    'PositionReport',
    'Unavailable',
    'get_message',
    'parse',
]
