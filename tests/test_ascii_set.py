import pytest

from url_escape.ascii_set import AsciiSet, CONTROLS, NON_ALPHANUMERIC
from url_escape.encoder import (
    FRAGMENT, QUERY, SPECIAL_QUERY, PATH, USERINFO, COMPONENT, X_WWW_FORM_URLENCODED,
)

CONTROL_BYTES = frozenset(range(0x20)) | {0x7f}

def members(extra: bytes) -> frozenset:
    return CONTROL_BYTES | frozenset(extra)

EXPECTED = [
    (CONTROLS, members(b'')),
    (FRAGMENT, members(b' "<>`')),
    (QUERY, members(b' "<>`#')),
    (SPECIAL_QUERY, members(b' "<>`#\'')),
    (PATH, members(b' "<>`#?{}')),
    (USERINFO, members(b' "<>`#?{}/:;=@[\\]^|')),
    (COMPONENT, members(b' "<>`#?{}/:;=@[\\]^|$%&+,')),
    (X_WWW_FORM_URLENCODED, members(b' "<>`#?{}/:;=@[\\]^|$%&+,!\'()~')),
]

@pytest.mark.parametrize('ascii_set, expected', EXPECTED)
def test_encode_set_membership(ascii_set, expected):
    for b in range(0x100):
        assert ascii_set.contains(b) == (b in expected), b

@pytest.mark.parametrize('ascii_set, expected', EXPECTED)
def test_non_ascii_always_encoded(ascii_set, expected):
    for b in range(0x80, 0x100):
        assert not ascii_set.contains(b)
        assert ascii_set.should_percent_encode(b)

def test_superset_chain():
    chain = [CONTROLS, FRAGMENT, QUERY, PATH, USERINFO, COMPONENT, X_WWW_FORM_URLENCODED]
    for (smaller, larger) in zip(chain, chain[1:]):
        assert set(smaller) < set(larger)
    assert set(QUERY) < set(SPECIAL_QUERY)

def test_non_alphanumeric():
    alphanumeric = b'0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz'
    for b in range(0x80):
        assert NON_ALPHANUMERIC.contains(b) == (b not in alphanumeric)
    assert set(COMPONENT) < set(NON_ALPHANUMERIC)

def test_add_is_functional():
    s = AsciiSet()
    t = s.add(ord('a'))
    assert not s.contains(ord('a'))
    assert t.contains(ord('a'))
    assert t.add(ord('a')) == t

def test_remove():
    s = CONTROLS.remove(0x7f)
    assert not s.contains(0x7f)
    assert CONTROLS.contains(0x7f)
    assert s.remove(ord('a')) == s

def test_union_and_complement():
    a = AsciiSet().extend(b'ab')
    b = AsciiSet().extend(b'bc')
    assert bytes(a | b) == b'abc'
    assert a.union(b) == a | b
    assert (~a).complement() == a
    assert len(set(~a)) == 0x80 - 2
    assert ord('a') not in ~a

def test_add_rejects_non_ascii():
    with pytest.raises(ValueError):
        CONTROLS.add(0x80)
    with pytest.raises(ValueError):
        CONTROLS.remove(-1)
    with pytest.raises(ValueError):
        AsciiSet(1 << 0x80)

def test_hashable_and_repr():
    assert {FRAGMENT: 1}[CONTROLS.extend(b' "<>`')] == 1
    assert repr(AsciiSet().extend(b'%')) == "AsciiSet(b'%')"
