'''Percent-encoding and percent-decoding of text for the parts of a URL.'''
from url_escape.ascii_set import AsciiSet, CONTROLS, NON_ALPHANUMERIC
from url_escape.percent_code import percent_decode, percent_encode
from url_escape.encoder import (
    FRAGMENT,
    QUERY,
    SPECIAL_QUERY,
    PATH,
    USERINFO,
    COMPONENT,
    X_WWW_FORM_URLENCODED,
    ENCODE_SETS,
    get_encode_set,
    encode,
    encode_to_string,
    encode_to_bytearray,
    encode_to_writer,
    encode_fragment,
    encode_fragment_to_string,
    encode_fragment_to_bytearray,
    encode_fragment_to_writer,
    encode_query,
    encode_query_to_string,
    encode_query_to_bytearray,
    encode_query_to_writer,
    encode_special_query,
    encode_special_query_to_string,
    encode_special_query_to_bytearray,
    encode_special_query_to_writer,
    encode_path,
    encode_path_to_string,
    encode_path_to_bytearray,
    encode_path_to_writer,
    encode_userinfo,
    encode_userinfo_to_string,
    encode_userinfo_to_bytearray,
    encode_userinfo_to_writer,
    encode_component,
    encode_component_to_string,
    encode_component_to_bytearray,
    encode_component_to_writer,
    encode_www_form_urlencoded,
    encode_www_form_urlencoded_to_string,
    encode_www_form_urlencoded_to_bytearray,
    encode_www_form_urlencoded_to_writer,
)
from url_escape.decoder import (
    decode,
    decode_utf8,
    decode_to_string,
    decode_to_bytearray,
    decode_to_writer,
)
