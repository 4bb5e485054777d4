# cc232

A small library of classic data structures and algorithms, written for
studying how they work. Everything is plain Python (3.10 or later) with no
runtime dependencies.

## What is inside

Linear structures and their applications:

- `cc232.linear` – `Stack` (`push`, `pop`, `top`, `to_list`) and `Queue`
  (`enqueue`, `dequeue`, `front`). Removing from or peeking at an empty
  structure raises `IndexError`.
- `cc232.base_conversion` – `to_base_recursive` and `to_base_iterative`
  convert a non-negative integer to any base from 2 to 16; other bases and
  negative numbers raise `ValueError`.
- `cc232.parentheses` – `paren_recursive` checks round parentheses by divide
  and conquer; `paren_iterative` checks `()`, `[]` and `{}` with a stack.
- `cc232.operator_priority` – the `Operator` ranks and `order_between`, the
  precedence relation used by the evaluator.
- `cc232.expression` – `evaluate_expression` evaluates arithmetic with
  `+ - * / ^ !`, parentheses and negative literals, and returns an
  `EvaluationResult` holding both the value and the expression in reverse
  Polish notation. `to_rpn` and `evaluate_only` return one or the other.
  Malformed input, division by zero and bad factorials raise
  `ExpressionError` (a `ValueError`).
- `cc232.nqueens` – `place_queens` solves the N-Queens puzzle by
  backtracking, counting solutions and conflict checks, and optionally
  collecting every placement.
- `cc232.maze` – `Maze` is built from text rows where `#` is a wall;
  `find_path` searches it depth first with an explicit stack and returns the
  route as `(row, column)` pairs, or `[]` when there is none.
- `cc232.bank` – `simulate` runs a seeded bank-window queue simulation in
  which each arriving customer joins the shortest queue (`best_window`). The
  same seed always gives the same timeline.

Trees and heaps:

- `cc232.binnode` – `BinNode` with parent links, successor/predecessor, and
  recursive and iterative pre-, in-, post- and level-order traversals. The
  in-order algorithm is chosen with `InorderStrategy`.
- `cc232.bintree` – `BinTree`, a binary tree that keeps its size and node
  heights, and supports attaching, detaching (`secede`) and removing
  subtrees.
- `cc232.binary_tree` – `BinaryTree`, adding depth, height, in-order
  iteration (`for x in tree`, `nodes()`) and an ASCII drawing (`ascii_art`,
  also used by `str(tree)`).
- `cc232.bst` – `BinarySearchTree` with `find_eq`, `lower_bound`,
  `upper_bound`, `remove`, rotations, `is_bst` and
  `build_balanced_from_sorted`. Duplicate keys are rejected. An optional
  `less` predicate changes the ordering.
- `cc232.binary_heap` – `BinaryHeap`, an array-backed min-heap (or any order
  given by a `less` predicate), with `is_heap_array` to check a plain list.

Warm-up utilities:

- `cc232.line_stats` – `summarize_lines` returns a `LineSummary`;
  `count_lines_longer_than` counts long lines.
- `cc232.warmup_vector` – small list helpers: `sum_readonly`,
  `append_in_place`, `appended_copy`, `count_greater_than` and
  `is_strictly_increasing`.
- `cc232.mini_bench` – `measure_us` and `average_us` timing helpers and three
  list benchmarks.
- `cc232.stl_demo` – timed comparisons of common algorithmic patterns
  (selection vs sorting, top-K, binary search, deduplication, partitioning,
  prefix sums, merging).

## Examples

```python
from cc232.expression import evaluate_expression

result = evaluate_expression("(0!+1)*2^(3!+4)-(5!-67-(8+9))")
print(result.rpn)    # 0 ! 1 + 2 3 ! 4 + ^ * 5 ! 67 - 8 9 + - -
print(result.value)  # 2012.0
```

```python
from cc232.base_conversion import to_base_iterative

print(to_base_iterative(12345, 8))  # 30071
```

```python
from cc232.bst import BinarySearchTree

bst = BinarySearchTree()
for x in (7, 3, 10, 1, 5, 8, 12, 4, 6):
    bst.add(x)
print(list(bst))                   # [1, 3, 4, 5, 6, 7, 8, 10, 12]
print(bst.lower_bound(9).data)     # 10
bst.remove(3)
print(bst.ascii_art())
```

```python
from cc232.binary_heap import BinaryHeap

heap = BinaryHeap([7, 3, 10, 1, 5, 8, 2])
print([heap.remove() for _ in range(len(heap))])  # [1, 2, 3, 5, 7, 8, 10]
```

## Commands

Installing the package provides these commands:

```
cc232-demo4        # stacks, queues, expressions, N-Queens, maze, bank
cc232-demo5        # binary trees, search trees and heaps
cc232-line-stats   # line statistics for text read from standard input
cc232-const-refs   # list helpers that read, modify in place, or copy
cc232-bench        # small timing benchmarks
cc232-stl-demo     # timed comparisons of algorithmic patterns
```

`cc232-demo4` and `cc232-demo5` run every demo, or only those named on the
command line (for example `cc232-demo4 maze bank`, `cc232-demo5 heap`).

`cc232-bench` runs the `growth`, `ops` and `cache` benchmarks, or the ones
named; `--n` sets the problem size and `--trials` the number of runs.

`cc232-stl-demo` accepts `--light`, `--medium`, `--full` or `--scale=N`
(N is clamped to 10–100) to set the data size as a percentage.

For example:

```
cc232-line-stats < notes.txt
cc232-bench growth --n 100000 --trials 3
cc232-stl-demo --light
```

Timings are illustrative and depend on the machine and interpreter.

## Running the tests

```
pip install -e ".[test]"
pytest
```