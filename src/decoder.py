import io
import logging
from typing import BinaryIO, TextIO

from url_escape.percent_code import (
    decode_iterable, decode_utf8_lossy_iterable, percent_decode, utf8_bytes,
)

logger: logging.Logger = logging.getLogger(__name__)

def decode(text: str) -> str:
    '''
    Decode percent-encoded bytes in the given text.
    Invalid UTF-8 in the decoded bytes is replaced by U+FFFD.
    Lone surrogates in the text count as invalid UTF-8 too.
    If decoding changes nothing, the text itself is returned.
    '''
    s = percent_decode(utf8_bytes(text)).decode('utf8', errors = 'replace')
    return text if s == text else s

def decode_utf8(text: str) -> str:
    '''Like decode, but raise UnicodeDecodeError on invalid UTF-8.'''
    return percent_decode(utf8_bytes(text)).decode('utf8')

def decode_to_string(text: str, output: TextIO) -> str:
    '''
    Append decoded text to a text buffer such as io.StringIO.
    Writing always happens at the end of the buffer.
    Returns the appended text.
    '''
    s = ''.join(decode_utf8_lossy_iterable(decode_iterable(utf8_bytes(text))))
    output.seek(0, io.SEEK_END)
    output.write(s)
    return s

def decode_to_bytearray(text: str, output: bytearray) -> bytes:
    '''
    Append the decoded bytes to a bytearray and return them.
    The bytes are not checked to be valid UTF-8.
    '''
    start = len(output)
    output.extend(decode_iterable(utf8_bytes(text)))
    return bytes(output[start:])

def decode_to_writer(text: str, output: BinaryIO) -> None:
    '''
    Write the decoded bytes to a binary stream, one byte at a time.
    Errors raised by the stream propagate, and nothing more is written after one.
    '''
    written = 0
    try:
        for x in decode_iterable(utf8_bytes(text)):
            output.write(bytes((x,)))
            written += 1
    except OSError:
        logger.debug(f'Write failed after {written} bytes.')
        raise
