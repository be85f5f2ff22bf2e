# exkit

A small toolbox of helpers for everyday Python work. It has no
dependencies outside the standard library.

## Modules

- **exkit.exutf8**: character-aware indexing and slicing.
  `rune_index(p, n)` returns the byte offset after the first `n` characters
  of UTF-8 data together with a flag that is False when there are fewer
  than `n` characters; malformed bytes count as one character each.
  `rune_index_in_string(s, n)` does the same for text. `rune_sub(p, start, length)`
  and `rune_sub_string(s, start, length)` take a substring counted in
  characters: a negative `start` counts from the end, a positive `length`
  takes at most that many characters, a negative one drops that many from
  the end, and `0` takes everything to the end.
- **exkit.exbytes**: `replace(s, old, new, n)` replaces the first `n`
  occurrences (all of them when `n` is negative) and rewrites a `bytearray`
  in place when `new` is no longer than `old`; `reverse(s)` reverses a
  mutable sequence in place; `sub(p, start, length)` slices by characters;
  `to_string(s)` decodes UTF-8 losslessly, keeping invalid bytes as
  surrogate escapes.
- **exkit.exstrings**: `replace`, `repeat`, `join`, `reverse`,
  `reverse_ascii`, `copy` and `sub_string`, plus byte-returning variants
  `replace_to_bytes` (mutable `bytearray`), `unsafe_replace_to_bytes`,
  `repeat_to_bytes`, `join_to_bytes`, `to_bytes` and `unsafe_to_bytes`.
  `repeat` raises `ValueError` for a negative count and `OverflowError` when
  the result would be too large. The `unsafe_*` names are kept as aliases.
- **exkit.pad**: `pad(s, fill, c, flag)` fills `s` with repetitions of `fill`
  up to `c` characters on the side chosen by `PadDirection.LEFT`, `RIGHT` or
  `BOTH` (an odd remainder goes to the right). `left_pad`, `right_pad` and
  `both_pad` are shortcuts; the `unsafe_*` names are aliases.
- **exkit.joinints**: `join_ints`, `join_int8s` ... `join_int64s`,
  `join_uints`, `join_uint8s` ... `join_uint64s` join integers with a
  separator and raise `OverflowError` for a value outside the named width.
- **exkit.pool**: `BufferPool` hands out empty `io.BytesIO` buffers with
  `get()` and takes them back with `put(buf)`. `get_buff64()` ...
  `get_buff8192()` return pools shared by the whole process.
- **exkit.datalog**: `Record` is a list of string fields forming one log
  line. `to_bytes(sep, newline)` replaces separators found inside fields
  with a space and returns the joined line as bytes; `join`, `clean`,
  `array_join`, `array_field_join` and their `unsafe_*` variants build lines
  and nested array fields. `new_record(length)` and `new_record_pool(length)`
  create records and a `RecordPool`. The separators are `FIELD_SEP`,
  `NEW_LINE`, `ARRAY_SEP` and `ARRAY_FIELD_SEP`.
- **exkit.helper**: `must(value, err)` returns `value` or raises `err`;
  `panic_recover(r)` turns a caught value into an exception (or None),
  writing a report with a stack trace to standard error.
- **exkit.exnet**: `has_local_ip` and `has_local_ip_addr` detect loopback,
  link-local and private addresses; `client_ip`, `client_public_ip` and
  `remote_ip` read a `Request` (headers and `remote_addr`) to find the
  client address behind proxies via `X-Forwarded-For` and `X-Real-Ip`;
  `ip_to_long`, `ip_string_to_long`, `long_to_ip` and `long_to_ip_string`
  convert between IPv4 addresses and integers, raising `ValueError` on bad
  input.
- **exkit.exatomic**: `AtomicFloat32` and `AtomicFloat64` are thread-safe
  float cells with `load`, `store`, `swap`, `compare_and_swap` (compares bit
  patterns) and `add`.

## Examples

```python
from exkit import exutf8, pad, datalog, exnet

exutf8.rune_sub_string("Go 语言编程", -2, 0)      # '编程'
pad.both_pad("hello world", "AB", 15)              # 'ABhello worldAB'

pool = datalog.new_record_pool(3)
record = pool.get()
record[0] = "v1.0.0"
record[1] = "uid"
line = record.to_bytes(datalog.FIELD_SEP, datalog.NEW_LINE)
record.clean()
pool.put(record)

exnet.has_local_ip_addr("192.168.9.18")            # True
exnet.ip_string_to_long("127.0.0.1")               # 2130706433
```

## What it does not do

exkit is a library only. It has no command-line tool and no HTTP server
or profiling endpoints; `exkit.exnet` works on a `Request` you fill in
from whatever web framework you use.

## Running the tests

```
pip install -e ".[test]"
pytest
```