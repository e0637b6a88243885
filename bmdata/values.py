import datetime

from bmdata.reader import ByteReader
from bmdata.structs import ARRAY_OFFSET

Cocoa_to_Epoch = 978307200
MAX_FLAGS = 3


def string(data):
    return bytes(data).decode('utf-8')


def number_four(data):
    return ByteReader(data).i32le()


def number_eight(data):
    return ByteReader(data).i64le()


def cnid(data):
    return ByteReader(data).i64le()


def date(data):
    # Apple stores dates as big-endian doubles, everything else is little-endian
    return ByteReader(data).f64be()


def bool_true(_data):
    return True


def flags(data):
    """Decode a property flag triple.

    Flags are stored as three 8-byte values; anything past the third is ignored.
    """
    reader = ByteReader(data)
    values = []
    while True:
        values.append(reader.u64le())
        if reader.remaining() == 0 or len(values) == MAX_FLAGS:
            break
    return values


def offsets(data):
    """Decode an array payload into its list of record offsets."""
    if len(data) % ARRAY_OFFSET.sizeof():
        raise ValueError("array payload of {} bytes is not a list of 4-byte offsets".format(len(data)))
    reader = ByteReader(data)
    return [reader.read(ARRAY_OFFSET) for _ in range(len(data) // ARRAY_OFFSET.sizeof())]


def mac_time_to_datetime(seconds):
    return datetime.datetime.fromtimestamp(seconds + Cocoa_to_Epoch, tz=datetime.timezone.utc)
