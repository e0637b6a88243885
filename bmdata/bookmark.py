import logging

import construct

from bmdata import values
from bmdata.errors import BadBookmarkData, BadHeader
from bmdata.reader import ByteReader
from bmdata.structs import (BOOKMARK_HEADER, BOOKMARK_SIGNATURE, HEADER_SIZE, STANDARD_RECORD,
                            TOC_DATA, TOC_HEADER, TOC_OFFSET, TOC_OFFSET_SIZE, TOC_RECORD, TOC_RECORD_SIZE,
                            BookmarkData, BookmarkHeader, StandardDataRecord, TableOfContentsData,
                            TableOfContentsDataRecord, TableOfContentsHeader)
from bmdata.types import DataType, RecordType, tag_name

__reference1__ = "https://mac-alias.readthedocs.io/en/latest/bookmark_fmt.html"
__reference2__ = "http://michaellynn.github.io/2015/10/24/apples-bookmarkdata-exposed/"

logger = logging.getLogger(__name__)

IS_APPLICATION = 0x200  # kCFURLResourceIsApplication, first target flag

# (record type, data type): (field, decoder, append to list)
FIELDS = {
    (RecordType.TARGET_PATH, DataType.STRING): ('path', values.string, True),
    (RecordType.TARGET_CNID_PATH, DataType.NUMBER_EIGHT_BYTE): ('cnid_path', values.cnid, True),
    (RecordType.TARGET_FLAGS, DataType.DATA): ('target_flags', values.flags, False),
    (RecordType.TARGET_CREATION_DATE, DataType.DATE): ('creation', values.date, False),
    (RecordType.VOLUME_PATH, DataType.STRING): ('volume_path', values.string, False),
    (RecordType.VOLUME_URL, DataType.URL): ('volume_url', values.string, False),
    (RecordType.VOLUME_NAME, DataType.STRING): ('volume_name', values.string, False),
    (RecordType.VOLUME_UUID, DataType.STRING): ('volume_uuid', values.string, False),
    (RecordType.VOLUME_SIZE, DataType.NUMBER_EIGHT_BYTE): ('volume_size', values.number_eight, False),
    (RecordType.VOLUME_CREATION, DataType.DATE): ('volume_creation', values.date, False),
    (RecordType.VOLUME_FLAGS, DataType.DATA): ('volume_flag', values.flags, False),
    (RecordType.VOLUME_ROOT, DataType.BOOL_TRUE): ('volume_root', values.bool_true, False),
    (RecordType.LOCALIZED_NAME, DataType.STRING): ('localized_name', values.string, False),
    (RecordType.SECURITY_EXTENSION_RW, DataType.DATA): ('security_extension', values.string, False),
    (RecordType.SECURITY_EXTENSION_RO, DataType.DATA): ('security_extension_ro', values.string, False),
    (RecordType.CREATOR_USERNAME, DataType.STRING): ('username', values.string, False),
    (RecordType.CREATOR_UID, DataType.NUMBER_FOUR_BYTE): ('uid', values.number_four, False),
    (RecordType.CONTAIN_FOLDER_INDEX, DataType.NUMBER_FOUR_BYTE): ('folder_index', values.number_four, False),
    (RecordType.CONTAIN_FOLDER_INDEX, DataType.NUMBER_EIGHT_BYTE): ('folder_index', values.number_eight, False),
    (RecordType.CREATION_OPTIONS, DataType.NUMBER_FOUR_BYTE): ('creation_options', values.number_four, False),
    (RecordType.FILE_REF_FLAG, DataType.BOOL_TRUE): ('file_ref_flag', values.bool_true, False),
}


def decode(raw_data):
    """Decode raw bookmark bytes (starting at the "book" header) into a BookmarkData.

    Raises BadHeader or BadBookmarkData when the structure cannot be read.
    Individual fields that fail to decode are logged and left at their default.
    """
    header, data = parse_header(raw_data)
    bookmark = decode_data(data)
    bookmark.header = header
    return bookmark


def parse_header(raw_data):
    raw_data = bytes(raw_data)
    if len(raw_data) < HEADER_SIZE:
        raise BadHeader("need {} bytes, got {}".format(HEADER_SIZE, len(raw_data)))

    reader = ByteReader(raw_data)
    try:
        header = BookmarkHeader.from_container(reader.read(BOOKMARK_HEADER))
    except construct.ConstructError as err:
        raise BadHeader(str(err)) from err

    if header.signature != BOOKMARK_SIGNATURE:
        raise BadHeader("unexpected signature {:#010x}".format(header.signature))
    return header, reader.rest()


def decode_data(data):
    """Decode the data region that follows the header."""
    try:
        core_data, _toc_header, toc_data, toc_records = parse_table_of_contents(data)
    except construct.ConstructError as err:
        raise BadBookmarkData(str(err)) from err

    bookmark = BookmarkData()
    bookmark.toc = toc_data

    for toc_record in toc_records:
        record = resolve_record(core_data, toc_record)

        # array records hold offsets to the records carrying the actual values
        if record.data_type == DataType.ARRAY:
            try:
                items = expand_array(core_data, record)
            except ValueError as err:
                logger.warning("Failed to get array data for record type %s: %s",
                               tag_name(RecordType, record.record_type), err)
                continue
            if not items:
                logger.debug("Empty array for record type %s", tag_name(RecordType, record.record_type))
        else:
            items = [record]

        for item in items:
            field = decode_field(item)
            if field is None:
                continue
            name, value, append = field
            if append:
                getattr(bookmark, name).append(value)
            else:
                setattr(bookmark, name, value)

    if bookmark.target_flags:
        bookmark.is_executable = bool(bookmark.target_flags[0] & IS_APPLICATION)
    return bookmark


def parse_table_of_contents(data, consumed=TOC_OFFSET_SIZE):
    """Split the data region into the record area and the decoded TOC.

    The first 4 bytes of the data region hold the offset of the TOC. Every
    offset in the bookmark counts those 4 bytes, so the returned record area
    starts right after them and callers seek with data_offset - consumed.
    """
    reader = ByteReader(data)
    toc_offset = reader.read(TOC_OFFSET)
    if toc_offset < consumed:
        raise BadBookmarkData("TOC offset {} is inside the TOC offset field".format(toc_offset))
    core_data = reader.take(toc_offset - consumed)

    toc_header = parse_toc_header(reader)
    toc_data = parse_toc_data(reader, toc_header.data_length)
    toc_records = parse_toc_records(reader, toc_data.number_of_records)
    return core_data, toc_header, toc_data, toc_records


def parse_toc_header(reader):
    return TableOfContentsHeader.from_container(reader.read(TOC_HEADER))


def parse_toc_data(reader, data_length):
    toc_data = TableOfContentsData.from_container(reader.read(TOC_DATA))
    logger.debug("TOC level %d, next TOC at %d, %d records", toc_data.level, toc_data.next_record_offset,
                 toc_data.number_of_records)

    # some TOC headers report a data length 8 bytes short, the record count wins
    records_size = TOC_RECORD_SIZE * toc_data.number_of_records
    if records_size > data_length:
        logger.debug("TOC data length %d is shorter than %d records (%d bytes)", data_length,
                     toc_data.number_of_records, records_size)
    return toc_data


def parse_toc_records(reader, number_of_records):
    records_size = TOC_RECORD_SIZE * number_of_records
    if records_size > reader.remaining():
        raise BadBookmarkData("{} TOC records need {} bytes, {} left".format(number_of_records, records_size,
                                                                             reader.remaining()))
    return [TableOfContentsDataRecord.from_container(record)
            for record in reader.read(construct.Array(number_of_records, TOC_RECORD))]


def resolve_record(core_data, toc_record, consumed=TOC_OFFSET_SIZE):
    """Read the standard data record a TOC entry points to."""
    seek = toc_record.data_offset - consumed
    if seek < 0 or seek > len(core_data):
        raise BadBookmarkData("record {} offset {} is outside the {} byte data region".format(
            tag_name(RecordType, toc_record.record_type), toc_record.data_offset, len(core_data) + consumed))

    try:
        record = STANDARD_RECORD.parse(core_data[seek:])
    except construct.ConstructError as err:
        raise BadBookmarkData("record {} at offset {}: {}".format(
            tag_name(RecordType, toc_record.record_type), toc_record.data_offset, err)) from err
    return StandardDataRecord.from_container(record, record_type=toc_record.record_type)


def expand_array(core_data, record, consumed=TOC_OFFSET_SIZE):
    """Resolve every offset of an array record, keeping the array's record type."""
    records = []
    for offset in values.offsets(record.record_data):
        toc_record = TableOfContentsDataRecord(record_type=record.record_type, data_offset=offset, reserved=0)
        records.append(resolve_record(core_data, toc_record, consumed))
    return records


def decode_field(record):
    """Decode one standard record into (field, value, append).

    Returns None when the record is skipped: unknown record/data type pair,
    or a value that fails to decode.
    """
    key = (record.record_type, record.data_type)
    if key not in FIELDS:
        logger.warning("Unknown record type %s and data type %s", tag_name(RecordType, record.record_type),
                       tag_name(DataType, record.data_type))
        logger.debug("Record data: %r", record.record_data)
        return None

    name, decoder, append = FIELDS[key]
    try:
        value = decoder(record.record_data)
    except (ValueError, construct.ConstructError) as err:
        logger.warning("Failed to parse %s: %s", name, err)
        return None
    return name, value, append
