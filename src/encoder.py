'''
Percent-encoding of text for the parts of a URL.
Ref: https://url.spec.whatwg.org/#percent-encoded-bytes
'''
import io
import logging
from typing import BinaryIO, Callable, TextIO, Tuple

from url_escape.ascii_set import AsciiSet, CONTROLS, NON_ALPHANUMERIC
from url_escape.percent_code import encode_iterable, utf8_bytes

logger: logging.Logger = logging.getLogger(__name__)

# Encode sets.
# Each one is built from an earlier one by adding the listed bytes.

FRAGMENT = CONTROLS.extend(b' "<>`')
QUERY = FRAGMENT.add(ord('#'))
SPECIAL_QUERY = QUERY.add(ord("'"))
PATH = QUERY.extend(b'?`{}')
USERINFO = PATH.extend(b'/:;=@[\\]^|')

# Gives the same results as encodeURIComponent() in JavaScript.
COMPONENT = USERINFO.extend(b'$%&+,')

X_WWW_FORM_URLENCODED = COMPONENT.extend(b"!'()~")

ENCODE_SETS: dict[str, AsciiSet] = {
    'controls': CONTROLS,
    'non-alphanumeric': NON_ALPHANUMERIC,
    'fragment': FRAGMENT,
    'query': QUERY,
    'special-query': SPECIAL_QUERY,
    'path': PATH,
    'userinfo': USERINFO,
    'component': COMPONENT,
    'www-form-urlencoded': X_WWW_FORM_URLENCODED,
}

def get_encode_set(name: str) -> AsciiSet:
    try:
        return ENCODE_SETS[name]
    except KeyError:
        raise ValueError(f'unknown encode set: {name}') from None

# Generic functions.

def encode(text: str, ascii_set: AsciiSet) -> str:
    '''
    Encode text.
    If nothing needs escaping, the text itself is returned.
    '''
    data = utf8_bytes(text)
    if not any(map(ascii_set.should_percent_encode, data)):
        return text
    return ''.join(encode_iterable(data, ascii_set))

def encode_to_string(text: str, ascii_set: AsciiSet, output: TextIO) -> str:
    '''
    Append encoded text to a text buffer such as io.StringIO.
    Writing always happens at the end of the buffer.
    Returns the appended text.
    '''
    s = ''.join(encode_iterable(utf8_bytes(text), ascii_set))
    output.seek(0, io.SEEK_END)
    output.write(s)
    return s

def encode_to_bytearray(text: str, ascii_set: AsciiSet, output: bytearray) -> bytes:
    '''Append encoded text to a bytearray and return the appended data.'''
    start = len(output)
    for unit in encode_iterable(utf8_bytes(text), ascii_set):
        output += unit.encode('ascii')
    return bytes(output[start:])

def encode_to_writer(text: str, ascii_set: AsciiSet, output: BinaryIO) -> None:
    '''
    Write encoded text to a binary stream, one unit at a time.
    Errors raised by the stream propagate, and nothing more is written after one.
    '''
    written = 0
    try:
        for unit in encode_iterable(utf8_bytes(text), ascii_set):
            output.write(unit.encode('ascii'))
            written += len(unit)
    except OSError:
        logger.debug(f'Write failed after {written} bytes.')
        raise

# Functions bound to an encode set.

EncodeFunctions = Tuple[
    Callable[[str], str],
    Callable[[str, TextIO], str],
    Callable[[str, bytearray], bytes],
    Callable[[str, BinaryIO], None],
]

def bind(name: str, ascii_set: AsciiSet, part: str) -> EncodeFunctions:
    def f(text: str) -> str:
        return encode(text, ascii_set)

    def f_to_string(text: str, output: TextIO) -> str:
        return encode_to_string(text, ascii_set, output)

    def f_to_bytearray(text: str, output: bytearray) -> bytes:
        return encode_to_bytearray(text, ascii_set, output)

    def f_to_writer(text: str, output: BinaryIO) -> None:
        encode_to_writer(text, ascii_set, output)

    f.__doc__ = f'Encode text used in {part}.'
    f_to_string.__doc__ = f'Append text used in {part} to a text buffer and return the appended text.'
    f_to_bytearray.__doc__ = f'Append text used in {part} to a bytearray and return the appended data.'
    f_to_writer.__doc__ = f'Write text used in {part} to a binary stream.'

    fs = (f, f_to_string, f_to_bytearray, f_to_writer)
    for (g, suffix) in zip(fs, ['', '_to_string', '_to_bytearray', '_to_writer']):
        g.__name__ = g.__qualname__ = f'encode_{name}{suffix}'
    return fs

(
    encode_fragment,
    encode_fragment_to_string,
    encode_fragment_to_bytearray,
    encode_fragment_to_writer,
) = bind('fragment', FRAGMENT, 'a fragment')

(
    encode_query,
    encode_query_to_string,
    encode_query_to_bytearray,
    encode_query_to_writer,
) = bind('query', QUERY, 'the query')

(
    encode_special_query,
    encode_special_query_to_string,
    encode_special_query_to_bytearray,
    encode_special_query_to_writer,
) = bind('special_query', SPECIAL_QUERY, 'the query of a special URL (ftp, file, http, https, ws, wss)')

(
    encode_path,
    encode_path_to_string,
    encode_path_to_bytearray,
    encode_path_to_writer,
) = bind('path', PATH, 'the path')

(
    encode_userinfo,
    encode_userinfo_to_string,
    encode_userinfo_to_bytearray,
    encode_userinfo_to_writer,
) = bind('userinfo', USERINFO, 'the userinfo')

(
    encode_component,
    encode_component_to_string,
    encode_component_to_bytearray,
    encode_component_to_writer,
) = bind('component', COMPONENT, 'a component')

(
    encode_www_form_urlencoded,
    encode_www_form_urlencoded_to_string,
    encode_www_form_urlencoded_to_bytearray,
    encode_www_form_urlencoded_to_writer,
) = bind('www_form_urlencoded', X_WWW_FORM_URLENCODED, 'an application/x-www-form-urlencoded body')
