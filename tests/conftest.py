import struct

import pytest

from bmdata.types import DataType


def _blob(hex_lines):
    return bytes.fromhex(''.join(hex_lines))


# login item pointing at /Applications/Syncthing.app
LOGIN_ITEM = _blob([
    '626f6f6bf402000000000410300000000000000000000000000000000000000000000000000000000000000000000000',
    '080200000c000000010100004170706c69636174696f6e730d0000000101000053796e637468696e672e617070000000',
    '080000000106000004000000180000000800000004030000670000000000000008000000040300002ac60a0000000000',
    '08000000010600004000000050000000080000000004000041c3d529e280000018000000010200000200000000000000',
    '0f000000000000000000000000000000080000000109000066696c653a2f2f2f0c000000010100004d6163696e746f73',
    '68204844080000000403000000607f7325000000080000000004000041acbed768000000240000000101000030413831',
    '463342312d353144392d333333352d423345332d31363943333634303336304418000000010200008100000001000000',
    'ef13000001000000000000000000000001000000010100002f0000000000000001050000090000000101000053796e63',
    '7468696e67000000a6000000010200003634636237656161396131626263636334653133393763396632613431316562',
    '65353339636432393b30303030303030303b30303030303030303b303030303030303030303030303032303b636f6d2e',
    '6170706c652e6170702d73616e64626f782e726561642d77726974653b30313b30313030303030343b30303030303030',
    '3030303061633632613b2f6170706c69636174696f6e732f73796e637468696e672e617070000000b4000000feffffff',
    '01000000000000000e000000041000003000000000000000051000006000000000000000101000008000000000000000',
    '40100000700000000000000002200000300100000000000005200000a00000000000000010200000b000000000000000',
    '11200000e40000000000000012200000c40000000000000013200000d400000000000000202000001001000000000000',
    '302000003c0100000000000017f00000440100000000000080f000005801000000000000',
])

# Safari download of /Users/puffycid/Downloads/powershell-7.2.4-osx-x64.pkg
SAFARI_DOWNLOAD = _blob([
    '626f6f6bcc0200000000041030000000d90a6e9b8f2b06008bc8a8e62ad6166667e4709f8da3141b2453e9b239d05969',
    'c80100000400000003030000001800280500000001010000557365727300000008000000010100007075666679636964',
    '0900000001010000446f776e6c6f6164730000001c00000001010000706f7765727368656c6c2d372e322e342d6f7378',
    '2d7836342e706b6710000000010600001000000020000000300000004400000008000000040300004f53000000000000',
    '08000000040300000b8005000000000008000000040300003e800500000000000800000004030000d8c23d0200000000',
    '10000000010600008000000090000000a0000000b0000000080000000004000041c4300fa209913a1800000001020000',
    '01000000000000000f000000000000000000000000000000080000000403000002000000000000000400000003030000',
    'f5010000080000000109000066696c653a2f2f2f0c000000010100004d6163696e746f73682048440800000004030000',
    '0070c4d0d1010000080000000004000041c3e50451800000240000000101000039364642343143302d364345392d3444',
    '41322d383433352d33354243313943373335413318000000010200008100000001000000ef1300000100000000000000',
    '0000000001000000010100002f0000000000000001050000cc000000feffffff01000000000000001000000004100000',
    '680000000000000005100000c00000000000000010100000e80000000000000040100000d80000000000000002200000',
    'b40100000000000005200000240100000000000010200000340100000000000011200000680100000000000012200000',
    '480100000000000013200000580100000000000020200000940100000000000030200000c00100000000000001c00000',
    '080100000000000011c00000200000000000000012c00000180100000000000010d000000400000000000000',])

# absolute positions inside LOGIN_ITEM
LOGIN_TOC = 48 + 520
LOGIN_TOC_RECORDS = LOGIN_TOC + 20


def patch(data, position, value, fmt='<I'):
    return data[:position] + struct.pack(fmt, value) + data[position + struct.calcsize(fmt):]


def build_bookmark(entries, toc_length=None):
    """Lay out a bookmark from (record type, data type, payload) entries.

    An ARRAY entry may carry a list of (data type, payload) items instead of raw
    offsets; the items are written first and the array points at them.
    """
    body = bytearray()

    def add(data_type, payload):
        offset = 4 + len(body)
        body.extend(struct.pack('<II', len(payload), data_type) + payload)
        body.extend(b'\x00' * (-len(payload) % 4))
        return offset

    toc = []
    for record_type, data_type, payload in entries:
        if data_type == DataType.ARRAY and isinstance(payload, list):
            offsets = [add(item_type, item) for item_type, item in payload]
            payload = struct.pack('<{}I'.format(len(offsets)), *offsets)
        toc.append((record_type, add(data_type, payload)))

    records = b''.join(struct.pack('<III', record_type, offset, 0) for record_type, offset in toc)
    if toc_length is None:
        toc_length = 12 + len(records)
    data = (struct.pack('<I', 4 + len(body)) + bytes(body) +
            struct.pack('<IHH', toc_length, 0xfffe, 0xffff) + struct.pack('<III', 1, 0, len(toc)) + records)
    header = b'book' + struct.pack('<I', 48 + len(data)) + struct.pack('>I', 0x410) + struct.pack('<I', 48)
    return header + bytes(32) + data


@pytest.fixture
def login_item():
    return LOGIN_ITEM


@pytest.fixture
def safari_download():
    return SAFARI_DOWNLOAD
