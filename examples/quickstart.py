"""Quickstart example for utf8engine.

This example demonstrates validation, sanitizing, conversion and
iteration over UTF-8 buffers.
"""

from utf8engine import (
    InvalidCodePointError,
    Utf8Iterator,
    append,
    decode_next,
    find_first_invalid,
    is_decode_error,
    is_valid,
    replace_invalid,
    starts_with_bom,
    utf8_to_utf16,
    utf16_to_utf8,
)
from utf8engine.unchecked import UncheckedIterator

# Example 1: Validation
print("=" * 50)
print("Example 1: Validation")
print("=" * 50)

broken = b"He\xffllo"
print(is_valid(b"Hello"))
# Output: True
print(is_valid(broken), find_first_invalid(broken))
# Output: False 2
print(starts_with_bom(b"\xef\xbb\xbfdata"))
# Output: True

# Example 2: Sanitizing
print("\n" + "=" * 50)
print("Example 2: Replace Invalid Sequences")
print("=" * 50)

print(replace_invalid(broken).decode())
# Output: He�llo
print(replace_invalid(broken, ord("?")))
# Output: b'He?llo'

# Example 3: Primitive decode (no exceptions)
print("\n" + "=" * 50)
print("Example 3: Primitive Decode")
print("=" * 50)

result = decode_next(b"\xc0\x80", 0)
if is_decode_error(result):
    print(result.kind.name, "at", result.position)
    print(result.diagnostic.format_error())
# Output: OVERLONG_SEQUENCE at 0
#         error[OVERLONG_SEQUENCE]: Overlong 2-byte encoding of U+0000 at offset 0
#         ...

# Example 4: Encoding
print("\n" + "=" * 50)
print("Example 4: Encoding")
print("=" * 50)

out = bytearray()
for cp in (0x48, 0x20AC, 0x1F600):
    append(cp, out)
print(bytes(out))
# Output: b'H\xe2\x82\xac\xf0\x9f\x98\x80'

try:
    append(0xD800, out)
except InvalidCodePointError as e:
    print(f"Rejected: {e}")
# Output: Rejected: Invalid code point U+D800

# Example 5: UTF-16 conversion
print("\n" + "=" * 50)
print("Example 5: UTF-16")
print("=" * 50)

units = utf8_to_utf16(bytes(out))
print([hex(u) for u in units])
# Output: ['0x48', '0x20ac', '0xd83d', '0xde00']
print(utf16_to_utf8(units) == bytes(out))
# Output: True

# Example 6: Iteration
print("\n" + "=" * 50)
print("Example 6: Iterators")
print("=" * 50)

data = "añ€".encode()
it = Utf8Iterator(data, 0)
print(list(it), list(reversed(Utf8Iterator(data, len(data)))))
# Output: [97, 241, 8364] [8364, 241, 97]
print(list(UncheckedIterator(data)))
# Output: [97, 241, 8364]
