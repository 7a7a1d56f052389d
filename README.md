# eulerkit

Solvers for classic number-theory, combinatorics and puzzle problems
(numbered 51 to 99), together with small reusable helpers: a primality test
and sieve, a poker hand evaluator, Roman numeral conversion, truncated
square root expansion and more.

The package uses only the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

Each solver has a command, named `euler-NNN` after the problem number, that
prints its answer:

`euler-051`, `euler-052`, `euler-053`, `euler-054`, `euler-055`,
`euler-056`, `euler-057`, `euler-058`, `euler-059`, `euler-060`,
`euler-061`, `euler-067`, `euler-068`, `euler-069`, `euler-071`,
`euler-073`, `euler-074`, `euler-076`, `euler-080`, `euler-089`,
`euler-090`, `euler-097` and `euler-099`.

Many of them take their limits as options, for example:

```
euler-053 --n 100 --threshold 1000000
euler-076 --n 100
euler-097 --coefficient 28433 --exponent 7830457 --digits 10
```

Commands that work on a data file take its path as an argument; when it is
left out they look for a default path relative to the working directory and
report `Cannot open <path>` if it is missing:

```
euler-054 poker.txt
euler-059 cipher.txt
euler-067 triangle.txt
euler-089 roman.txt
euler-099 base_exp.txt
```

`euler-054-report poker.txt` prints every poker game in detail: both
players' sorted cards, the hand each one holds and who wins, followed by a
tally of wins and draws.

`euler-059` sums the character codes of the decrypted text. Give the key with
`--password`; without it, the lowercase key of `--length` letters (3 by
default) whose text holds "the " most often is chosen. With `--search` it
lists every key whose text contains "the " or "The ".

## Library use

```python
from eulerkit.primes import is_prime, prime_sieve
from eulerkit.poker import parse_game, compare_hands
from eulerkit.problem089 import roman_to_int, int_to_roman
from eulerkit.problem080 import sqrt_digits

is_prime(13)                            # True
int_to_roman(roman_to_int("XIIIIII"))   # "XIX"

first, second = parse_game("5H 5C 6S 7S KD 2C 3S 8S 8D TD")
compare_hands(first, second)            # -1: the second player wins

sqrt_digits(2, 5)                       # (1, [4, 1, 4, 2, 1])
```

Most solvers take their limits as parameters, so smaller cases can be worked
out quickly, for example `count_summations(5)` from `eulerkit.problem076` or
`count_large_combinations(23, 1_000_000)` from `eulerkit.problem053`.

## What is not included

The package has no solvers, and no commands, for problem 62 (cubic
permutations) or problem 63 (powerful digit counts); problems 64 to 66 and
the other gaps in the numbering are not covered either.