# code_challenges

Solutions to programming challenges, plus a small generic tree model that
renders itself as box-drawn text.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

`code-challenges` prints a greeting:

```
$ code-challenges
Hello, world!
```

`scalar-products` solves the "Scalar Products" mathematics challenge. It reads
one line from standard input holding the integers `C M n`, separated by
whitespace, and prints how many distinct residues the scalar products of the
generated vectors take modulo `M`:

```
$ echo "4 5 3" | scalar-products
2
```

Tokens after the first three are ignored. Fewer than three integers, a token
that is not an integer, or a negative `n` end the command with a `ValueError`.

`scalar-products-naive` reads the same input and gives the same answer. It
walks the sequence directly, so it is much slower for large `n`.

## Library use

### Scalar products

The sequence is `a_0 = 0`, `a_1 = C`, `a_{k+1} = (a_{k-1} + a_k) mod M`, and
the vectors are `v_i = (a_{2i}, a_{2i+1})` for `1 <= i <= n`. `run(c, m, n)`
returns the number of distinct values of `<v_i, v_j> mod M` over `i < j`.

```python
from code_challenges.scalar_products import approach1, approach2

approach1.run(4, 5, 3)        # 2
approach2.run(1, 100, 1000)   # 50
```

Both raise `ValueError` for a negative `n`. Each module also has
`main(argv=None)`: given a list of strings it joins them into the input line,
otherwise it reads one line from standard input; it prints the count and
returns `0`.

`approach1` is built on `SeqPair`, a pair of consecutive terms modulo a
modulus. `next_entity()` advances it in place, and iterating over it yields
copies of the pair and of all its successors without end.

`approach2` writes the sequence as powers of the symmetric Fibonacci matrix
`G = F^2`. Every scalar product reduces to `<G^k v0, v0>` for `3 <= k < 2n`,
and the powers are assembled from repeated squarings. Its helper types are:

- `Modulo(value, modulus)`: an integer whose `+` and `*` reduce by the modulus.
- `Vector2(first, second)`: a two-entry vector with `Vector2.inner_product(u, v)`.
- `SymmMatrix2x2(a, b, d)`: the matrix `[[a, b], [b, d]]`, with `+`, `pow2()`
  (its square) and `mul_vector(u)`.

### Trees

`GenericTree(root, children=[])` holds a root value and a list of child trees.
`add()` appends either a whole tree or a bare value, which becomes a leaf.
`num_children()` and `has_children()` describe the direct children,
`repr_tree()` returns the rendering as a list of lines and `str()` joins them:

```python
from code_challenges.tree import GenericTree

tree = GenericTree("root")
alice = GenericTree("alice: 23")
alice.add("bird: 2")
alice.add("_: 3")
tree.add(alice)
tree.add("bob: 24")
print(tree)
```

```
root
├──╮ alice: 23
│  ├─── bird: 2
│  ╰─── _: 3
╰─── bob: 24
```

Node values are rendered with `str()`. `repr_tree()` and the static
`repr_node()` accept `indent` and `sep` strings (both default to two spaces)
to change the layout.

### Helpers

- `code_challenges.strings.greet(name)` prints `Hello, <name>!`.
- `code_challenges.errors.err_to_string(err)` returns `repr(err)`.