# libmyprintf

A printf-style string formatter that behaves like C. Signed integers wrap
to 32 bits. Unsigned conversions of negative values give their 32-bit
two's-complement form. Length modifiers narrow values the way C types
would. The package also has a few small string and integer helpers.

## Installation

```
pip install .
```

To install with the test dependencies as well:

```
pip install .[test]
```

## Formatting

`libmyprintf.printf.sprintf(fmt, *args)` returns the formatted string.
`libmyprintf.printf.printf(fmt, *args, file=None)` formats the same way,
writes the text to `file` (standard output when `file` is not given) and
returns the text.

```python
from libmyprintf.printf import sprintf, printf

sprintf("le nombre est %+10.5d\n", 49)   # 'le nombre est     +00049\n'
sprintf("le nombre est %x\n", -55)       # 'le nombre est ffffffc9\n'
sprintf("le nombre est %-20.15b\n", 55)  # 'le nombre est 000000000110111     \n'
sprintf("la phrase est %m\n")            # 'la phrase est Success\n'
printf("%d %s\n", 10, "cerise")
```

`sprintf` raises `TypeError` when a conversion has no argument left to use.

### Conversions

| Conversion | Meaning |
|------------|---------|
| `%d`, `%i` | signed 32-bit integer |
| `%u`       | unsigned 32-bit integer |
| `%o`       | octal |
| `%x`, `%X` | hexadecimal, lower or upper case |
| `%b`       | binary |
| `%c`       | a single character; an int is taken as a byte value |
| `%s`       | string |
| `%S`       | string with characters below 32 or above 127 written as `\NNN` octal escapes |
| `%p`       | hexadecimal with a `0x` prefix |
| `%m`       | the text `Success` |
| `%%`       | a literal percent sign |

A conversion can take the following options, in this order:

1. A flag: `#`, `0`, `-`, space or `+`. If several flags are given, only the first one counts.
2. A field width.
3. A `.precision`.
4. A length modifier: `hh`, `h`, `l`, `ll` or `q`.

## Building blocks

You can also use the formatting stages one at a time.

- `libmyprintf.spec` reads a conversion's options.
  - `parse_spec(s, i)` returns a `ConversionSpec` (`flag`, `width`, `precision`, `modifier`) and the format with the options removed.
  - The single steps are `flag_finder`, `width_finder`, `precision`, `length_modifier` and `strip_flags`, `strip_width`, `strip_precision`, `strip_length`.
  - `get_number` reads an integer at the start of a string.
- `libmyprintf.converters` turns numbers into text. It has `base_converter`, `binary_converter`, `hexa_converter`, `int_to_str`, `uint_to_str`, `octal_escape_digits`, `length_converter_int` and `length_converter_unsigned`.
- `libmyprintf.numeric`, `libmyprintf.hexadecimal` and `libmyprintf.text` each replace the two characters `%` and a conversion letter at index `i` of a string with the formatted field.
  - `libmyprintf.numeric` has `format_int`, `format_unsigned`, `format_decimal`, `format_octal`, `format_binary` and `format_digits`.
  - `libmyprintf.hexadecimal` has `format_hex` and `format_pointer`.
  - `libmyprintf.text` has `format_char`, `format_string` and `format_string_octal`.
- `libmyprintf.strutils` has these string helpers:
  - `revstr` reverses a string.
  - `str_isalpha`, `str_islower`, `str_isnum`, `str_isupper` and `str_isprintable` check the characters of a string.
  - `strlowcase`, `strupcase` and `strcapitalize` change case.
  - `strcmp` and `strncmp` compare strings.
- `libmyprintf.mathutils` has these integer helpers:
  - `compute_power` computes a power. It returns 0 for a negative exponent and for a result outside the 32-bit range.
  - `compute_square_root` returns the root of a perfect square, or 0 otherwise.
  - `is_prime` tests for a prime.
  - `find_prime_sup` returns the smallest prime not below a number.

## Limits

- This is a library only. It has no command-line program.
- It does not support `*` widths or floating-point conversions.
- The octal and hexadecimal digit routines behave differently from C's `printf` for some values that are exact powers of their base.

## Running the tests

```
pytest
```