"""
Text/binary sniffing for the project scanner.

Only a bounded prefix of each file is inspected. The heuristic follows the usual
content-type detectors: a NUL byte means binary; otherwise the sample is text when
it decodes as UTF-8 or when it is mostly printable ASCII.
"""

import codecs

# C0 control bytes that legitimately appear in text files: TAB, LF, FF, CR, ESC
_TEXT_CONTROLS = frozenset(b"\t\n\x0c\r\x1b")


def _is_control(byte: int) -> bool:
    return (byte < 0x20 and byte not in _TEXT_CONTROLS) or byte == 0x7F


def _looks_like_utf8(sample: bytes) -> bool:
    # incremental decoder: a multi-byte sequence cut at the end of the sample is not an error
    decoder = codecs.getincrementaldecoder("utf-8")()
    try:
        decoder.decode(sample, final=False)
    except UnicodeDecodeError:
        return False
    return True


def _is_mostly_ascii(sample: bytes) -> bool:
    control = sum(1 for b in sample if _is_control(b))
    safe = sum(1 for b in sample if 0x20 <= b < 0x7F or b in _TEXT_CONTROLS)
    return control * 100 < len(sample) * 2 and safe * 100 >= len(sample) * 90


def is_text(sample: bytes) -> bool:
    """
    Tells whether a byte sample looks like text.

    Args:
        sample (bytes): The first bytes of a file (or the whole file).

    Returns:
        bool: True for text (empty samples included), False for binary content.
    """
    if not sample:
        return True

    if b"\x00" in sample:
        return False

    if _looks_like_utf8(sample):
        control = sum(1 for b in sample if _is_control(b))
        return control * 100 < len(sample) * 2

    return _is_mostly_ascii(sample)
