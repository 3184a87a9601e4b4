# algonotes

Classic algorithms and data structures written as plain Python functions
and classes. The package uses only the standard library.

## Modules

- `algonotes.primes`: `is_prime` (deterministic Miller–Rabin for n < 2**64),
  `pollard_rho`, `factorize`, `prime_factorization`, `primes_up_to`,
  `sieve` (a generator using a segmented odd-only sieve), `prime_pi`, and the
  trial-division helpers `num_prime_factors`, `num_divisors`, `sum_divisors`
  and `euler_phi`. The trial-division helpers take a list of primes.
- `algonotes.numtheory`: `phi_table`, `extgcd`, `factmod`, `is_square`,
  `is_fibonacci`, `mul_mod`, `pow_mod`, `primitive_root` and `sqrt_mod`.
  `primitive_root` and `sqrt_mod` return `None` when no answer exists.
- `algonotes.modint`: the `ModInt(value, mod)` residue type, `binomial` and
  `find_primitive_root`.
- `algonotes.matrix`: `Matrix`, with `zeros`, `identity`, `transpose`,
  products, `pow`, `gauss`, `det`, `inverse`, `sum_all` and
  `submatrix_sum`. `gauss` reduces a matrix to upper-triangular form without
  changing its determinant. `det` multiplies the diagonal, so apply it to the
  result of `gauss`. `inverse` raises `ValueError` for a singular matrix.
- `algonotes.misc`: `parse_int128`, `format_int128`, `ctz128`,
  `knight_distance`, `sliding_min` and `rubik_order`.
- `algonotes.dsu`: `UnionFind` with `find`, `same_set`, `union`,
  `num_sets` and `set_size`.
- `algonotes.graph`: `bfs`, `dfs`, `count_components`,
  `articulation_points`, `strongly_connected_components`,
  `biconnected_components`, `max_bipartite_matching`, `dijkstra`,
  `euler_path`, `euler_circuit_undirected` and `kruskal`. Graphs are
  adjacency lists. Undirected graphs list each edge under both endpoints.
- `algonotes.cliques`: `MaxClique` (branch and bound) and `find_triangles`.
- `algonotes.problems`: `count_present` and `best_zero_split`, which solve
  two small contest problems.
- `algonotes.strings`: `kmp_prefix`, `kmp_count`, `z_function`,
  `tandem_repeats` (Main–Lorentz, giving half-open `(start, stop)` pairs),
  `manacher` and `min_rotation`.
- `algonotes.hashing`: `Hash` and `HashGenerator`. `HashGenerator` builds
  polynomial prefix hashes and supports the substring queries `get_hash`,
  `equals`, `max_common_prefix` and `compare`.
- `algonotes.palindromes`: `PalindromicTree`. Its `palindromes()` method
  returns `(left, right, frequency)` for each distinct palindrome.
- `algonotes.suffixes`: `SuffixArray` (with `sa`, `lcp`, `string_matching`,
  `longest_repeated`, `longest_common`), `SuffixAutomaton` and `Trie`.

## Installation

```
pip install .
```

## Examples

```python
import random

from algonotes.primes import is_prime, prime_factorization, prime_pi
from algonotes.numtheory import extgcd
from algonotes.modint import ModInt, binomial
from algonotes.matrix import Matrix
from algonotes.dsu import UnionFind
from algonotes.graph import dijkstra
from algonotes.strings import kmp_count
from algonotes.suffixes import SuffixArray

is_prime(1_000_000_007)                          # True
prime_factorization(360, random.Random(0))       # [(2, 3), (3, 2), (5, 1)]
prime_pi(10**6)                                  # 78498
g, x, y = extgcd(3, 8)                           # 3*x + 8*y == g == 1

ModInt(3, 7) / 2                                 # ModInt(5, 7)
binomial(10, 3, 1_000_000_007)                   # ModInt(120, 1000000007)

Matrix([[1, 1], [1, 0]]).pow(10).tolist()        # [[89, 55], [55, 34]]

uf = UnionFind(5)
uf.union(0, 1)                                   # True
uf.num_sets()                                    # 4

dijkstra([[(1, 4), (2, 1)], [], [(1, 2)]], 0)    # [0, 3, 1]

kmp_count("abababa", "aba")                      # 3

sa = SuffixArray("GATAGACA$")
sa.string_matching("A")                          # (1, 4)
sa.longest_repeated()                            # (2, 7): "GA"
```

`pollard_rho`, `factorize`, `prime_factorization` and `sqrt_mod` use
randomness. Each takes an optional `random.Random` instance. Pass a seeded
instance when you need the same results on every run.

## What it does not do

The package is a library only. It has no command-line programs and does not
read problem input from standard input. Call the functions from Python and
format their results yourself.

## Running the tests

```
pip install .[test]
pytest
```