# microprints

`microprints` builds small "fingerprints" of a body of text. Each line is cut
at its vowels, and every vowel is linked to the run of characters that follows
it up to the next vowel, space or line break. The counts of those links form a
graph with one row per vowel (`e`, `u`, `i`, `o`, `a`) and one column per
consonant cluster. Two such profiles can be compared, used to generate made-up
words, or written out as an HTML report.

The package also holds the small building blocks the profiles rest on:

- `microprints.charstar` – plain string helpers such as `prefix`, `postfix`,
  `substr_naive`, `get_between`, `chomp`, `super_chomp`, `column` and
  `binsearch`.
- `microprints.csvline` – `parse_csv` splits a single CSV record into its
  fields, honouring double quotes; `count_fields` counts them. An unterminated
  quote raises `CsvError` (a `ValueError`).
- `microprints.tree` – `BinarySearchTree` keyed by strings, and `PathTree`, a
  directory-like tree addressed by UNIX-style paths.

## Requirements

Python 3.10 or later. There are no third-party dependencies.

## Profiles

A profile file is a list of `key=value` lines. The keys `name`, `data` and
`freq` are read; others are ignored. Reading stops at a line that reads `end`:

```
name=sample
data=sample.txt
freq=1
end
```

The data file is plain text. Reading it stops at the first blank line or at a
line beginning with `end`.

```python
from microprints.microprints import Profile

profile = Profile.load("sample.profile")
profile.process(".")          # writes tmp_edge.sample, vert_tbl.sample, graph.sample
profile.report("sample.html") # HTML table of counts, density and average
profile.clear(".")            # removes those three files
```

`Profile.process` returns the `GraphStringTable` it built and keeps it on
`profile.gst`. `Profile.post_process` rebuilds it from the edge and vertex
files written by an earlier `process` call.

A `GraphStringTable` holds an `AdjacencyGraph` (`graph`) and the sorted list
of clusters (`table`). `lookup` finds a cluster's column, `maximum_edge_y`
gives the vowel row with the heaviest edge to a cluster, and `maximum_edge_x`
gives the cluster column with the heaviest edge from a vowel.
`AdjacencyGraph.density` is the ratio of non-zero to zero cells and `average`
the mean of the non-zero cells.

Two processed profiles can be compared:

```python
from microprints.microprints import similarity

result = similarity(first, second)
result.edges                # [(cluster, vowel, ratio), ...]
result.average              # mean ratio over shared edges
result.non_similar_average  # mean of the ratios outside 0.5..1.5
```

`dual(a, b, words)` walks the two graphs from each starting cluster in `words`
(stopping at an `end` entry) and returns one invented word per start.
`random_select(profile, rng)` returns twenty random vowel-and-cluster pairs
joined together; pass a `random.Random` for repeatable output.

## String helpers

```python
from microprints.charstar import prefix, postfix, get_between, column

prefix("microprints", "micro")        # True
postfix("microprints", "prints")      # True
column("alpha beta gamma", 1)         # "beta"
get_between("a[bc]d", "[", "]")       # "bc"
```

## CSV records

```python
from microprints.csvline import parse_csv

parse_csv('a,"b,c",""""')             # ['a', 'b,c', '"']
```

## Trees

```python
from microprints.tree import BinarySearchTree, PathTree

bst = BinarySearchTree()
bst.insert("pear", 1)
bst.insert("apple", 2)
list(bst.keys())                      # ['apple', 'pear']

paths = PathTree()
paths.insert("/usr/share/words", "data")
paths.find("/usr/share/words").is_file()   # True
```

## What it does not do

- There is no command-line program; everything is called from Python. `dual`
  takes its starting clusters as any iterable of strings rather than reading
  them from the terminal.
- `parse_csv` works on one record held in a string. Reading records from a
  file, or splitting text into records, is not provided.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.