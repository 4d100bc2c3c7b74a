from dataclasses import dataclass
import functools
from typing import Iterable, Iterator

ASCII_MASK: int = (1 << 0x80) - 1

@dataclass(frozen = True)
class AsciiSet:
    '''
    An immutable set of ASCII bytes, stored as a 128-bit mask.
    Bytes outside 0x00 to 0x7F are never members.
    '''
    mask: int = 0

    def __post_init__(self):
        if not 0 <= self.mask <= ASCII_MASK:
            raise ValueError(f'mask out of ASCII range: {self.mask:#x}')

    @staticmethod
    def _check(byte: int) -> int:
        if not 0 <= byte < 0x80:
            raise ValueError(f'not an ASCII byte: {byte}')
        return byte

    def contains(self, byte: int) -> bool:
        return 0 <= byte < 0x80 and bool(self.mask >> byte & 1)

    def should_percent_encode(self, byte: int) -> bool:
        '''Non-ASCII bytes are always escaped, whatever the set says.'''
        return byte >= 0x80 or self.contains(byte)

    def add(self, byte: int) -> 'AsciiSet':
        return AsciiSet(self.mask | 1 << self._check(byte))

    def remove(self, byte: int) -> 'AsciiSet':
        return AsciiSet(self.mask & ~(1 << self._check(byte)))

    def extend(self, bs: Iterable[int]) -> 'AsciiSet':
        return functools.reduce(AsciiSet.add, bs, self)

    def union(self, other: 'AsciiSet') -> 'AsciiSet':
        return AsciiSet(self.mask | other.mask)

    def complement(self) -> 'AsciiSet':
        return AsciiSet(~self.mask & ASCII_MASK)

    __or__ = union
    __invert__ = complement

    def __contains__(self, byte: int) -> bool:
        return self.contains(byte)

    def __iter__(self) -> Iterator[int]:
        return (b for b in range(0x80) if self.contains(b))

    def __repr__(self) -> str:
        return f'AsciiSet({bytes(self)!r})'

    def __bytes__(self) -> bytes:
        return bytes(iter(self))

# C0 controls and DEL.
CONTROLS = AsciiSet((1 << 0x20) - 1 | 1 << 0x7f)

NON_ALPHANUMERIC = AsciiSet().extend(
    b'0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz'
).complement()
