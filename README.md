# gpgomea

Building blocks for tree-based genetic programming and symbolic regression,
written on top of NumPy.

## What is in the package

- `gpgomea.operators`: the abstract `Operator` base class (`arity`, `type`,
  `name`, `is_arithmetic`, `clone()`, `compute_output(x)`, `invert(desired,
  siblings, idx)`, `human_expression(args)`), the `OperatorType` enum, the
  `Variable` terminal that reads one column of the input matrix, and
  `NonInvertibleError`, raised by operators that cannot be inverted.
- `gpgomea.regression`: `Plus`, `Minus`, `Times`, `AnalyticQuotient`,
  `AnalyticQuotient01`, `ProtectedDivision`, `Exp`, `Log` (protected
  `log|x|`), `AnalyticLog01`, `Sin`, `Cos`, `Tanh`, `Square`, `SquareRoot` and
  the `RegressionConstant` terminal. `compute_output` takes a matrix whose
  columns are the outputs of a node's children. `invert` returns the values a
  child should take to produce a desired output given its sibling's output;
  where no value works it returns a single `inf`, and `Times` returns `nan`
  when any value works. `ProtectedDivision` and `AnalyticLog01` raise
  `NonInvertibleError`.
- `gpgomea.boolean`: the gates `And`, `Or`, `Nand`, `Nor`, `Xor` and `Not`,
  treating any nonzero value as true and returning 0/1 floats.
- `gpgomea.utils`: `compute_linear_scaling_terms`, `compute_distance`
  (squared Euclidean, optionally after linear scaling),
  `compute_distance_with_dont_cares`, `compute_mean_std`, `normalize`,
  `hash_vector`, `is_number`, `split_string_by_char`,
  `replace_char_in_string`, `to_lower_case`, `to_numpy_array` and
  `to_matrix` (which raises `TypeError` unless given a 2-D float64 array).
- `gpgomea.kdtree.KDTree`: nearest-neighbour (`nn_search`), k-nearest
  (`knn_search`) and radius (`radius_search`) searches by squared distance,
  plus `nn_search_dont_cares`, where each coordinate lists acceptable values
  and a NaN among them means any value. Points added with `add_point` or
  removed with `delete_point` take part in searches after the next `build()`.
- `gpgomea.selection`: `tournament_winner` (lowest `cached_fitness`),
  `mo_tournament_winner` (lowest `rank`, then largest `crowding_distance`) and
  `population_wise_tournament_selection`. Each takes an optional
  `numpy.random.Generator`.
- `gpgomea.config`: the `ConfigurationOptions` dataclass with the default run
  settings and a `clone()` that copies every operator, the enums
  `TreeInitType`, `TreeInitShape`, `SemanticLibraryType`, `FOSType` and
  `GOMCoeffMutStrat`, and `default_operators()`, which returns fresh
  instances of the built-in regression and Boolean function operators
  (`Tanh` is not among them).
- `gpgomea.logger`: `Logger`, which appends lines to one open file at a time
  and can be used as a context manager, and `get_logger()`, which returns the
  shared instance.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
import numpy as np

from gpgomea.operators import Variable
from gpgomea.regression import Plus, Times
from gpgomea.utils import compute_linear_scaling_terms

X = np.array([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])

x0, x1 = Variable(0), Variable(1)
a, b = x0.compute_output(X), x1.compute_output(X)

product = Times().compute_output(np.column_stack([a, b]))
total = Plus().compute_output(np.column_stack([product, a]))

print(Plus().human_expression([x0.human_expression([]), x1.human_expression([])]))
# (x0+x1)

intercept, slope = compute_linear_scaling_terms(total, np.array([2.0, 5.0, 9.0]))
```

Inverting an operator:

```python
import numpy as np
from gpgomea.regression import Minus

Minus().invert(np.array([3.0]), np.array([2.0]), 0)  # array([5.])
Minus().invert(np.array([3.0]), np.array([2.0]), 1)  # array([-1.])
```

Nearest-neighbour search:

```python
import numpy as np
from gpgomea.kdtree import KDTree

tree = KDTree([np.array([0.0, 0.0]), np.array([1.0, 1.0]), np.array([5.0, 5.0])])
index, distance = tree.nn_search(np.array([0.9, 1.2]))  # index 1
```

Constants drawn on first use:

```python
import numpy as np
from gpgomea.regression import RegressionConstant

const = RegressionConstant(lower=-1.0, upper=1.0, rng=np.random.default_rng(0))
const.compute_output(np.zeros((3, 1)))  # three copies of a value rounded to 3 decimals
```

## What the package does not do

The package holds the pieces listed above and nothing that puts them
together. There is no expression-tree node type, no tree initialization or
subtree variation, no fitness functions, no semantic library, no GOMEA
linkage learning or evolutionary run loop, no estimator for fitting data, and
no command-line program. The selection functions work on any objects with the
attributes they read.