from collections.abc import Iterable, Iterator
import codecs

from url_escape.ascii_set import AsciiSet

PERCENT: int = ord('%')

# One escaped triplet per byte value, uppercase hex.
ESCAPED: tuple[str, ...] = tuple(f'%{x:02X}' for x in range(0x100))

HEX_VALUES: dict[int, int] = {ord(c): int(c, 16) for c in '0123456789abcdefABCDEF'}

def utf8_bytes(text: str) -> bytes:
    '''
    The UTF-8 encoding of text, which may hold lone surrogates.
    Surrogates made by the surrogateescape error handler give back the bytes they stand for.
    Any other lone surrogate is encoded with surrogatepass.
    '''
    try:
        return text.encode('utf8', errors = 'surrogateescape')
    except UnicodeEncodeError:
        return text.encode('utf8', errors = 'surrogatepass')

def encode_iterable(data: bytes, ascii_set: AsciiSet) -> Iterator[str]:
    '''
    Percent-encode data, one output unit per input byte.
    A unit is either the byte itself as a character or its escaped triplet.
    '''
    for x in data:
        if ascii_set.should_percent_encode(x):
            yield ESCAPED[x]
        else:
            yield chr(x)

def decode_iterable(data: bytes) -> Iterator[int]:
    '''
    Percent-decode data into raw byte values.
    A '%' not followed by two hex digits is passed through as is.
    '''
    i = 0
    n = len(data)
    while i < n:
        b = data[i]
        if b == PERCENT and i + 2 < n:
            c1 = HEX_VALUES.get(data[i + 1])
            c0 = HEX_VALUES.get(data[i + 2])
            if not (c1 is None or c0 is None):
                yield 0x10 * c1 + c0
                i += 3
                continue
        yield b
        i += 1

def decode_utf8_lossy_iterable(it: Iterable[int]) -> Iterator[str]:
    '''
    Decode a stream of byte values as UTF-8, producing text chunks.
    Each maximal invalid subsequence is replaced by U+FFFD.
    '''
    decoder = codecs.getincrementaldecoder('utf-8')(errors = 'replace')
    for x in it:
        s = decoder.decode(bytes((x,)))
        if s:
            yield s
    s = decoder.decode(b'', final = True)
    if s:
        yield s

def percent_encode(data: bytes, ascii_set: AsciiSet) -> str:
    '''Percent-encode raw bytes, which need not be valid UTF-8.'''
    return ''.join(encode_iterable(data, ascii_set))

def percent_decode(data: bytes) -> bytes:
    return bytes(decode_iterable(data))
