import construct
from construct import this

BOOKMARK_SIGNATURE = 0x6B6F6F62  # "book" read little-endian
TOC_OFFSET_SIZE = 4  # the TOC offset field that opens the data region
TOC_RECORD_SIZE = 12

BOOKMARK_HEADER = construct.Struct(
    "signature" / construct.Int32ul,
    "bookmark_data_length" / construct.Int32ul,
    "version" / construct.Int32ub,  # big-endian, unlike the rest of the header
    "bookmark_data_offset" / construct.Int32ul,  # always 0x30
    construct.Padding(32),
)
HEADER_SIZE = BOOKMARK_HEADER.sizeof()

TOC_OFFSET = construct.Int32ul

TOC_HEADER = construct.Struct(
    "data_length" / construct.Int32ul,
    "record_type" / construct.Int16ul,  # record_type and flags together read 0xfffffffe
    "flags" / construct.Int16ul,
)

TOC_DATA = construct.Struct(
    "level" / construct.Int32ul,
    "next_record_offset" / construct.Int32ul,  # 0 if none
    "number_of_records" / construct.Int32ul,
)

TOC_RECORD = construct.Struct(
    "record_type" / construct.Int32ul,
    "data_offset" / construct.Int32ul,
    "reserved" / construct.Int32ul,
)

STANDARD_RECORD = construct.Struct(
    "data_length" / construct.Int32ul,
    "data_type" / construct.Int32ul,
    "record_data" / construct.Bytes(this.data_length),
)

ARRAY_OFFSET = construct.Int32ul


class Record:
    fields = ()

    def __init__(self, **kwargs):
        for name in self.fields:
            setattr(self, name, kwargs.get(name, 0))

    @classmethod
    def from_container(cls, container, **extra):
        values = {name: container[name] for name in cls.fields if name in container}
        values.update(extra)
        return cls(**values)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name) for name in self.fields)

    def __repr__(self):
        return "{}({})".format(type(self).__name__,
                               ", ".join("{}={!r}".format(name, getattr(self, name)) for name in self.fields))


class BookmarkHeader(Record):
    fields = ("signature", "bookmark_data_length", "version", "bookmark_data_offset")


class TableOfContentsHeader(Record):
    fields = ("data_length", "record_type", "flags")


class TableOfContentsData(Record):
    fields = ("level", "next_record_offset", "number_of_records")


class TableOfContentsDataRecord(Record):
    fields = ("record_type", "data_offset", "reserved")


class StandardDataRecord(Record):
    fields = ("data_length", "data_type", "record_data", "record_type")


class BookmarkData:
    """Decoded bookmark. Dates are raw seconds since 2001-01-01 (Mac absolute time)."""

    fields = (
        "path",                   # target path components
        "cnid_path",              # target path as catalog node IDs
        "creation",               # target creation date
        "volume_path",
        "volume_url",
        "volume_name",
        "volume_uuid",
        "volume_size",
        "volume_creation",
        "volume_flag",            # volume property flags
        "volume_root",            # volume is the filesystem root
        "localized_name",
        "security_extension",     # read-write sandbox extension
        "security_extension_ro",  # read-only sandbox extension
        "target_flags",           # resource property flags
        "username",
        "uid",
        "folder_index",
        "creation_options",
        "file_ref_flag",
        "is_executable",
    )

    def __init__(self):
        self.path = []
        self.cnid_path = []
        self.creation = 0.0
        self.volume_path = ""
        self.volume_url = ""
        self.volume_name = ""
        self.volume_uuid = ""
        self.volume_size = 0
        self.volume_creation = 0.0
        self.volume_flag = []
        self.volume_root = False
        self.localized_name = ""
        self.security_extension = ""
        self.security_extension_ro = ""
        self.target_flags = []
        self.username = ""
        self.uid = 0
        self.folder_index = 0
        self.creation_options = 0
        self.file_ref_flag = False
        self.is_executable = False

        # not part of the decoded fields
        self.header = None
        self.toc = None

    def to_dict(self):
        return {name: getattr(self, name) for name in self.fields}

    def __eq__(self, other):
        if not isinstance(other, BookmarkData):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return "BookmarkData({!r})".format(self.to_dict())
