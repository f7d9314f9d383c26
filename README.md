# structsalad

A small library of data structures and low-level helpers in the style of the
C standard library:

- `structsalad.hashmap`: `HashMap`, an open-addressing hash map with Robin
  Hood probing, tombstone deletion and automatic growth, together with
  `HashEntry`, `HashStatus` and the `murmur3_hash` string hash.
- `structsalad.linkedlist`: `LinkedList` and `ListNode`, a singly linked list.
- `structsalad.cstring`: `strlen`, `strchr`, `strchri`, `strrchr`, `strcmp`,
  `strncmp`, `strnstr`, `strend`, `strcpy`, `strcat`, `strlcpy`, `strlcat`
  and `strdup`. Text stops at its first NUL; the copy functions write into a
  `bytearray` and raise `ValueError` rather than overflow it.
- `structsalad.textops`: `split`, `count_words`, `strjoin`, `strtrim`,
  `substr`, `strmapi` and `striteri`.
- `structsalad.chars`: `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`,
  `tolower`, `toupper` and `is_big_endian`.
- `structsalad.conversions`: `atoi` (with 32-bit wrap-around), `itoa`,
  `int_len` and `itoab`.
- `structsalad.memory`: `memset`, `bzero`, `calloc`, `memchr`, `memcmp`,
  `memcpy` and `memmove` on byte buffers.
- `structsalad.output`: `putchar_fd`, `putstr_fd`, `putendl_fd`,
  `putnbr_fd`, `putnbr_base_fd` and `putptr_fd`, writing to a file
  descriptor or any object with a `write` method (standard output by
  default).
- `structsalad.formatting`: `printf`, handling `%c %s %p %d %i %u %x %X %%`
  and returning the number of characters written.
- `structsalad.lines`: `LineReader`, which reads a file descriptor or binary
  stream one line at a time, and the `LineResult` it returns.

## Installation

```
pip install .
```

## Hash map

```python
from structsalad.hashmap import HashMap, murmur3_hash

freed = []
animals = HashMap(8, 0.8, freed.append, murmur3_hash)

animals.add("chat", "miaou")
animals.add("chien", "ouaf")
animals.add("chat", "ronron")        # replaces "miaou" and passes it to val_free

print(animals.get("chat").value)     # ronron
animals.remove("chien")
print(animals.get("chien"))          # None
print(len(animals))                  # 1

for key_hash, value in animals:
    print(key_hash, value)

animals.release(True)                # passes every stored value to val_free
```

The table has `2 ** power` slots. When an insertion would bring the load to
`charge_factor` or above, the table doubles. Keys go through the `hash`
callable and only the resulting integer is kept, so two keys with the same
hash share one slot. A value of `None` is not stored. `insert` takes an
already hashed key and returns `False` when nothing was stored.

## Linked list

```python
from structsalad.linkedlist import LinkedList

items = LinkedList([1, 2, 3])
items.add_front(0)
items.add_back(4)
print(list(items), len(items))       # [0, 1, 2, 3, 4] 5
doubled = items.map(lambda x: x * 2, None)
print(items.pop_front())             # 0
```

`map` raises `ValueError` if the function returns `None`, after handing the
values mapped so far to the `delete` callback.

## Output and formatting

```python
import io
from structsalad.formatting import printf

out = io.StringIO()
count = printf("%s has %d legs (%x)\n", "spider", 8, 255, stream=out)
print(out.getvalue(), count)         # "spider has 8 legs (ff)\n" 24
```

## Reading lines

```python
import io
from structsalad.lines import LineReader

reader = LineReader(io.BytesIO(b"one\ntwo\nthree"))
print(list(reader))                  # [b'one\n', b'two\n', b'three']
```

## What it does not do

This is a library only: it installs no command-line program.

## Running the tests

```
pip install .[test]
pytest
```