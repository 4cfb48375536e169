from aprsreport.packets.base import Distance, PositionReport
from aprsreport.packets.fields import Message, PacketType, PartialTimestamp, Position
from aprsreport.packets.parsing import InvalidPacketError
from aprsreport.packets.results import Decoded, DecodingResult, Unavailable

__all__ = [
    'Decoded',
    'DecodingResult',
    'Distance',
    'InvalidPacketError',
    'Message',
    'PacketType',
    'PartialTimestamp',
    'Position',
    'PositionReport',
    'Unavailable',
]
