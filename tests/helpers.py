import os
import struct


def make_pak(rows):
    """Builds PAK data with one run sequence per row, laid out after the
    offset table in row order."""
    offsets = []
    body = b""
    pos = 4 * len(rows)
    for runs in rows:
        offsets.append(pos + len(body))
        for count, value in runs:
            body += struct.pack("<HB", count, value)
    return struct.pack("<%dI" % len(rows), *offsets) + body


def write_pak(dirname, data, name="CLIMATE.PAK"):
    path = os.path.join(dirname, name)
    with open(path, "wb") as fp:
        fp.write(data)
    return path
