import io

import construct


class ByteReader:
    """Forward-only cursor over an in-memory buffer.

    Every read advances the cursor. Reading past the end raises
    construct.StreamError, like any other construct parse does.
    """

    def __init__(self, data, offset=0):
        self.data = bytes(data)
        self.stream = io.BytesIO(self.data)
        self.stream.seek(offset)

    def tell(self):
        return self.stream.tell()

    def remaining(self):
        return len(self.data) - self.stream.tell()

    def rest(self):
        return self.data[self.stream.tell():]

    def read(self, con):
        return con.parse_stream(self.stream)

    def take(self, length):
        return self.read(construct.Bytes(length))

    def skip(self, length):
        self.read(construct.Padding(length))

    def u16le(self):
        return self.read(construct.Int16ul)

    def u32le(self):
        return self.read(construct.Int32ul)

    def u32be(self):
        return self.read(construct.Int32ub)

    def u64le(self):
        return self.read(construct.Int64ul)

    def i32le(self):
        return self.read(construct.Int32sl)

    def i64le(self):
        return self.read(construct.Int64sl)

    def f64be(self):
        return self.read(construct.Float64b)
