# stdplus

Small, dependency-free helpers for hashing, string handling, printing,
signal masks and network addresses. Requires Python 3.10 or later; the
signal helper needs a POSIX system.

## Modules

### `stdplus.hashing`

- `hash_multi(*args)` folds the hashes of its arguments, in order, into one
  64-bit value with the mixing step
  `seed ^ (v + 0x9e3779b9 + (seed << 6) + (seed >> 2))`. With no arguments it
  returns `0`; with one it returns that argument's hash.
- `hash_value(value)` hashes a single value deterministically: integers hash
  to themselves (wrapped to 64 bits), `None` to `0`, strings, bytes and floats
  through FNV-1a, tuples and lists through `hash_multi` over their elements.
- `update_seed(seed, value)` is the single mixing step.

### `stdplus.variant`

- `variant_eq_fuzzy(lhs, rhs)` is true when the values compare equal with
  `==` (so `1` equals `1.0`); values that cannot be compared are unequal.
- `variant_eq_strict(lhs, rhs)` also requires both values to have exactly the
  same type.

### `stdplus.printing`

- `prints(stream, data)` writes `data` in full. Binary streams receive its
  UTF-8 encoding; a non-blocking stream that would block raises
  `BlockingIOError`.
- `fprint(fmt, *args, file=None, **kwargs)` formats with `str.format` and
  writes the result to `file`, or to standard output when `file` is `None`.
- `fprintln(...)` does the same and appends a newline.

### `stdplus.signals`

- `block(signum)` adds a signal to the calling thread's blocked set. Blocking
  an already blocked signal does nothing.

### `stdplus.strbuf`

`StrBuf(data="", inline_size=127)` is an append-only character buffer with
`append`, `push` (one character), `shrink`, `clear`, `len()`, `str()` and
equality with strings and other buffers. Content up to `inline_size`
characters counts as inline; past that `is_dynamic()` becomes true and
`capacity()` grows to one and a half times the required length whenever it
runs out.

### `stdplus.zstring_view`

`ZStringView(text)` is an immutable, hashable view of text that contains no
NUL character (a `ValueError` is raised otherwise). It compares and orders
with `str` and other views and offers `c_str()`, `at`, `substr`, `suffix`,
`compare`, `starts_with`, `ends_with`, `find`, `rfind`, `find_first_of`,
`find_last_of`, `find_first_not_of` and `find_last_not_of`. The search
methods return `NPOS` (`-1`) when nothing is found.

### `stdplus.ether`

`EtherAddr` holds a six-octet Ethernet address. `EtherAddr.from_str` accepts
both `aa:bb:cc:dd:ee:ff` and `aabbccddeeff`; `is_multicast()` and
`is_unicast()` classify it, `str()` gives the lower-case colon form and
`bytes()` the six octets.

### `stdplus.sockaddr`

`Sock4Addr`, `Sock6Addr` and `SockUAddr` are socket address values. Each has
`from_str`, `from_buf`, `sockaddr()` (the raw `sockaddr` bytes),
`sockaddr_len()`, `buf()` (a `SockAddrBuf`) and a text form: `1.2.3.4:80`,
`[::1]:80` and `unix:/path`. UNIX abstract names start with `@`.
`sock_in_addr_from_buf`, `sock_any_addr_from_buf`, `parse_sock_in_addr` and
`parse_sock_any_addr` pick the right type from the address family or the
text.

## Example

```python
from stdplus.hashing import hash_multi
from stdplus.ether import EtherAddr
from stdplus.sockaddr import parse_sock_any_addr

assert hash_multi(1, 2) == 2654435834

mac = EtherAddr.from_str("02:00:00:00:00:01")
print(mac, mac.is_unicast())          # 02:00:00:00:00:01 True

addr = parse_sock_any_addr("[::1]:8080")
print(addr, addr.sockaddr_len())      # [::1]:8080 28
```

## What it does not do

The address types are plain values: the package does not open, bind or
connect sockets, and has no file-descriptor wrappers, no IP subnet types and
no command-line tool.

## Tests

```
pip install -e .[test]
pytest
```