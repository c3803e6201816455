# starpatterns

A collection of 22 classic console patterns: squares, triangles, pyramids,
diamonds, butterflies and number grids built from stars, digits and letters.
These are the exercises people usually work through when they learn nested loops.

## Installing

```
pip install .
```

## Command line

```
starpatterns 7
```

The single argument is the pattern number, 1 to 22; any other number is
rejected with a usage error. The command then asks how many test cases to run.
For each case it asks for a value of `n` and prints that pattern at size `n`:

```
Enter Number of Test Cases: 1
Enter 'n' Value: 4
   *   
  ***  
 ***** 
*******
```

The answers are read as whitespace-separated whole numbers, so they may also be
piped in, for example `printf '2\n3\n5\n' | starpatterns 21`. If the input ends
early or holds something that is not a whole number, the command prints an
error to standard error and exits with status 1.

## Library use

Every pattern is a function in `starpatterns.patterns` that takes a size `n`
and returns the whole drawing as one string, each row ending in a newline.
A size of zero or less gives an empty string.

```python
from starpatterns.patterns import pattern21, get_pattern

print(pattern21(4), end="")
# ****
# *  *
# *  *
# ****

square = get_pattern(22)
print(square(3), end="")
# 33333
# 32223
# 32123
# 32223
# 33333
```

`get_pattern(number)` returns the function for patterns 1 to 22 and raises
`ValueError` for any other number.

The patterns are `pattern1` to `pattern22`:

| Number | Drawing |
| --- | --- |
| 1 | solid square of spaced stars |
| 2 | growing triangle of spaced stars |
| 3 | rows counting 1 up to the row number |
| 4 | each row repeats its own number |
| 5 | shrinking triangle of spaced stars |
| 6 | row `i` repeats the digit `i`, `n - i + 1` times |
| 7 | centred pyramid |
| 8 | upside-down centred pyramid |
| 9 | diamond (pattern 7 followed by pattern 8) |
| 10 | sideways triangle, starting with an empty row |
| 11 | alternating 1s and 0s, starting with an empty row |
| 12 | counting up and back down with a shrinking gap |
| 13 | Floyd's triangle |
| 14 | letters from A, one more per row |
| 15 | letters from A, one fewer per row |
| 16 | row `i` repeats the `i`-th letter |
| 17 | centred letter pyramid |
| 18 | letters ending at E, starting one earlier per row |
| 19 | two star triangles opening up, then closing |
| 20 | butterfly of stars |
| 21 | hollow square |
| 22 | concentric number squares |

To run a prompting session against your own streams, call
`starpatterns.cli.run_session(number, stdin, stdout)`. It writes the same
prompts and drawings as the command and raises `ValueError` for an unknown
pattern or bad input.

## Running the tests

```
pip install .[test]
pytest
```