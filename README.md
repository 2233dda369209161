# mfcommons

A handful of small utilities with no dependencies outside the standard library.

## Modules

### `mfcommons.errors`

- `SystemCallError` is a `RuntimeError` subclass. It carries `error_code`,
  `message` and `paradigm`, where `paradigm` is a `Paradigm` (`ERRNO`,
  `WIN32` or `WSA`). The default paradigm is `ERRNO`.
- Each thread records one "current error code". `set_current_error_code`
  stores a value for the calling thread and `get_current_error_code` reads
  it. The initial value is `0`. This code is kept by the module itself. It is
  not the C library's `errno`.
- `system_error_for_code(code)` builds a `SystemCallError` whose message is
  `os.strerror(code)`.
- `current_system_error()` builds the error for the current code.
- `raise_current_system_error_if(condition)` raises that error when
  `condition` is true.

### `mfcommons.fileattributes`

- `FileAttributes(value)` wraps a 32-bit file attribute word. Values outside
  `0..0xFFFFFFFF` raise `ValueError`.
- It provides `is_valid`, `is_invalid`, `is_directory` and `is_file`.
  `is_file` means "not a directory".
- `INVALID_FILE_ATTRIBUTES` (`0xFFFFFFFF`) is the invalid marker.
- `FILE_ATTRIBUTE_DIRECTORY` (`0x10`) is the directory bit.
- `make_file_attributes(value)` works like the constructor, but it raises
  `ValueError` for the invalid marker.

### `mfcommons.option`

`Option` is an immutable container that either holds one value or is empty.

- Create one with `empty()`, `of(value)` or `of_nullable(value)`.
  - `of(None)` holds `None`.
  - `of_nullable(None)` is empty.
- Its methods are `get`, `is_present`, `is_empty`, `filter`, `map`,
  `flat_map`, `use_this_or_run`, `get_or_default`, `get_or_run`,
  `get_or_throw` and `contains`.
- It supports truth testing, equality and hashing.
- `get` raises `EmptyOptionalError` on an empty option. So does
  `get_or_throw()` when called without a supplier. With a supplier,
  `get_or_throw` raises the exception that the supplier returns.
- `flat_map` raises `TypeError` if the mapper returns something that is not
  an `Option`.

### `mfcommons.strings`

- **Character tests:** `is_blank_char` (tab or a space separator) and
  `is_space_char` (any whitespace).
- **String helpers:** `contains`, `is_blank`, `split`, `starts_with`,
  `ends_with`, `strip`, `to_lower_case`, `to_upper_case` and `join`.
  - `split(text, separator="\n")` drops trailing empty parts. It rejects an
    empty separator.
  - The case functions change one character at a time and keep the length
    of the text.
- **UTF-8:** `utf8_to_text` decodes UTF-8 bytes and `text_to_utf8` encodes
  text as UTF-8.

### `mfcommons.timezones`

- `get_timezone_offset()` returns the offset east of UTC as a `timedelta`,
  taken from `time.timezone`.
- `get_timezone_name(path="/etc/timezone")` returns the first line of that
  file. If the file cannot be read it raises `SystemCallError`.
- `get_dst_offset()` works as follows:
  - It returns zero for zones whose name contains `UTC`, `UCT` or
    `Universal`.
  - Otherwise it runs `zdump` with `run_zdump(name, year=None)` and reads the
    result with `parse_zdump_output(output)`.
  - `parse_zdump_output` returns zero when the interval lines do not match
    the expected format.
- `get_system_tz()` reads the `TZ` environment variable and raises
  `RuntimeError` if it is unset.
- `set_system_tz(value, run_tzset=True)` sets `TZ`.
- `tz_set()` calls `time.tzset` where the platform has it.

## Limitations

- `get_timezone_name` and `get_dst_offset` expect a Unix-like system with an
  `/etc/timezone` file and the `zdump` program on the `PATH`.
- The package cannot load shared libraries.
- It does not call Windows error, handle or message-box functions.
- It does not convert between Windows code pages.

## Installation

```
pip install .
```

## Examples

```python
from mfcommons.option import of, empty
from mfcommons.strings import split, strip

assert of(3).map(lambda v: v * 2).contains(6)
assert empty().get_or_default(2) == 2

assert split("boo:and:foo", ":") == ["boo", "and", "foo"]
assert strip(" \t abc \n") == "abc"
```

```python
import errno

from mfcommons.errors import Paradigm, set_current_error_code, current_system_error

set_current_error_code(errno.ERANGE)
error = current_system_error()
assert error.error_code == errno.ERANGE
assert error.paradigm is Paradigm.ERRNO
```

## Running the tests

```
pip install .[test]
pytest
```