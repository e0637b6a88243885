import enum

__reference1__ = "https://mac-alias.readthedocs.io/en/latest/bookmark_fmt.html"
__reference2__ = "http://michaellynn.github.io/2015/10/24/apples-bookmarkdata-exposed/"


class DataType(enum.IntEnum):
    STRING = 0x0101
    DATA = 0x0201
    NUMBER_ONE_BYTE = 0x0301
    NUMBER_TWO_BYTE = 0x0302
    NUMBER_FOUR_BYTE = 0x0303
    NUMBER_EIGHT_BYTE = 0x0304
    NUMBER_FLOAT = 0x0305
    NUMBER_FLOAT64 = 0x0306
    DATE = 0x0400  # big-endian double
    BOOL_FALSE = 0x0500
    BOOL_TRUE = 0x0501
    ARRAY = 0x0601  # offsets to other records
    DICTIONARY = 0x0701
    UUID = 0x0801
    URL = 0x0901
    URL_RELATIVE = 0x0902


class RecordType(enum.IntEnum):
    UNKNOWN = 0x1003
    TARGET_PATH = 0x1004  # pathComponents
    TARGET_CNID_PATH = 0x1005  # fileIDs
    TARGET_FLAGS = 0x1010  # resourceProps
    TARGET_FILENAME = 0x1020
    TARGET_CREATION_DATE = 0x1040
    UNKNOWN2 = 0x1054
    UNKNOWN3 = 0x1055
    UNKNOWN4 = 0x1056
    UNKNOWN5 = 0x1057
    UNKNOWN6 = 0x1101
    UNKNOWN7 = 0x1102
    TOC_PATH = 0x2000  # volInfoDepths
    VOLUME_PATH = 0x2002
    VOLUME_URL = 0x2005
    VOLUME_NAME = 0x2010
    VOLUME_UUID = 0x2011
    VOLUME_SIZE = 0x2012
    VOLUME_CREATION = 0x2013
    VOLUME_FLAGS = 0x2020
    VOLUME_ROOT = 0x2030  # volWasBoot
    VOLUME_BOOKMARK = 0x2040
    VOLUME_MOUNT_POINT = 0x2050
    UNKNOWN8 = 0x2070
    CONTAIN_FOLDER_INDEX = 0xc001
    CREATOR_USERNAME = 0xc011
    CREATOR_UID = 0xc012
    FILE_REF_FLAG = 0xd001
    CREATION_OPTIONS = 0xd010
    URL_LENGTH_ARRAY = 0xe003
    LOCALIZED_NAME = 0xf017  # displayName
    UNKNOWN9 = 0xf022
    SECURITY_EXTENSION_RW = 0xf080
    SECURITY_EXTENSION_RO = 0xf081


def tag(enum_type, value):
    """Return the enum member for value, or the raw int if the tag is not recognised."""
    try:
        return enum_type(value)
    except ValueError:
        return value


def tag_name(enum_type, value):
    member = tag(enum_type, value)
    if isinstance(member, enum_type):
        return "{} ({:#06x})".format(member.name, value)
    return "unrecognised ({:#06x})".format(value)
