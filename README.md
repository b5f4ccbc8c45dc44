# algokit

Three independent pieces in one package:

- **Graphs** (`algokit.graph`, `algokit.algorithms`, `algokit.structures`):
  a weighted adjacency-list `Graph` and the algorithms `bfs`, `dfs`,
  `dijkstra`, `prim` and `kruskal`. Each algorithm returns a new `Graph`
  holding a search tree, a shortest-path tree or a minimum spanning tree.
  The helper structures `BoundedQueue` and `UnionFind` are also available.
- **Square matrices** (`algokit.squaremat`): `SquareMat`, an n×n matrix of
  floats with arithmetic operators.
- **Coup** (`algokit.coup.game`, `algokit.coup.player`, `algokit.coup.roles`):
  a rules engine for the Coup card game. It provides `Game`, the abstract
  `Player` and the roles `Governor`, `Spy`, `Baron`, `General`, `Judge` and
  `Merchant`.

There are no runtime dependencies.

## Installation

```
pip install .
```

To run the tests, install the `test` extra (`pip install .[test]`) and run
`pytest`.

## Graphs

```python
from algokit.graph import Graph
from algokit.algorithms import dijkstra, kruskal

g = Graph(4)
g.add_edge(0, 1, 1)
g.add_edge(1, 2, 2)
g.add_edge(0, 2, 10)
g.add_edge(2, 3, 1)

tree = dijkstra(g, 0)
print(tree.has_edge(1, 2))   # True
print(kruskal(g))
```

- `Graph(n)` has vertices `0 … n-1`. `add_edge` adds an undirected edge and
  `add_directed_edge` adds a one-way edge. The weight defaults to 1. Both
  return `False` and change nothing if the edge already exists. They raise
  `IndexError` for a vertex out of range.
- `remove_edge` removes an undirected edge. It raises `ValueError` if the edge
  is not present in both directions.
- `neighbors(v)` returns a tuple of `Neighbor(id, weight)` and raises
  `ValueError` for an invalid vertex.
- `num_vertices`, `has_edge`, `str(graph)` and `print_graph()` are also
  provided.
- `bfs` and `dfs` return directed trees. `dfs` continues into components that
  cannot be reached from the start vertex. `dijkstra` returns directed
  shortest-path edges weighted by the step in distance.
- `prim` grows an undirected tree from vertex 0. `kruskal` builds an undirected
  minimum spanning forest.

## Matrices

```python
from algokit.squaremat import SquareMat

a = SquareMat(2)
a[0][0], a[0][1], a[1][0], a[1][1] = 1, 2, 3, 4
print(a ** 2)
print(a.determinant())       # -2.0
```

The operators are as follows:

- `+` and `-` work between matrices of the same size.
- `*` multiplies by a matrix (matrix product) or by a real scalar, and
  `scalar * m` also works.
- `%` with a matrix gives the element-wise product. With an integer it applies
  `math.fmod` to each element.
- `/` divides by a scalar.
- `**` takes a non-negative integer power.
- `-m` negates, and `~m` transposes.

The in-place forms `+=`, `-=`, `*=`, `%=` and `/=` are supported as well.
`increment()` and `decrement()` add or subtract 1 from every element in place
and return a copy of the matrix as it was before.

The comparison operators `==`, `!=`, `<`, `<=`, `>` and `>=` compare the
**sums** of the elements, which `sum()` returns. For this reason matrices are
not hashable.

`minor(row, col)` and `determinant()` use cofactor expansion. `copy()` returns
an independent copy, and `str(m)` prints rows as `[ 1, 2 ]`.

The following errors are raised:

- Mismatched sizes raise `ValueError`.
- Dividing by zero or taking `% 0` raises `ZeroDivisionError`.
- A negative power raises `ValueError`.
- An index out of range raises `IndexError`.

## Coup

```python
from algokit.coup.game import Game
from algokit.coup.roles import Governor, Spy

game = Game()
gov = Governor(game, "Alice")
spy = Spy(game, "Bob")

gov.tax()                    # Governor collects 3 coins
print(game.turn())           # Bob
```

A player joins the game as soon as it is created, and a game takes at most six
players.

`Game` has these members:

- `turn()` returns the name of the player whose turn it is.
- `advance_turn()` skips players who are eliminated.
- `players()` returns the names of the players still alive.
- `all_players()` returns every player, including those eliminated.
- `remove_player()` eliminates a player.
- `winner()` returns the winner once exactly one player is left.

Every player has `gather`, `tax`, `bribe`, `arrest`, `sanction`, `coup` and
`undo`, along with coin helpers (`add_coins`, `remove_coins`).

The roles add or change the following:

- `Governor` takes 3 coins on tax, and its `undo` removes 2 coins from a player
  whose last action was tax.
- `Spy` has `peek(target)`, which prints and returns the target's coins, and
  `block_arrest(target)`.
- `Baron` has `invest()`, which pays 3 coins and receives 6. It gains a coin
  when sanctioned.
- `General` has `undo(target)`, which pays 5 coins to defend against a coup.
  It gets back the coin an arrest takes.
- `Judge` has `undo(target)`, which blocks a bribe. Sanctioning a Judge costs
  one extra coin.
- `Merchant` has `start_turn_bonus()`, which gives +1 coin when it holds 3 or
  more. When arrested, it pays 2 coins to the bank.

An illegal action raises `GameError`, a subclass of `RuntimeError`, with a
message that explains why.

## Demos

```
algokit-graph-demo
algokit-matrix-demo
```

The first command runs every graph algorithm on a sample six-vertex graph and
prints each result. The second applies the matrix operators to two sample 2×2
matrices and prints the results.

## What the package does not do

There is no interactive front end for Coup: no screens, no name entry and no
random role assignment. A game is played by calling the methods above from
your own code. That code must also call `Merchant.start_turn_bonus()` at the
start of a Merchant's turn, and it decides when a `Judge` or `General` uses
`undo`.