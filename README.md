# spectralpde

This package provides real-to-real sine and cosine transforms computed through
numpy's FFT. It also provides the grid helpers that spectral Poisson and
Helmholtz solvers use.

Each transform diagonalises the standard second-order finite-difference
Laplacian under one kind of boundary condition:

| Plan | Module | Boundary condition |
|------|--------|--------------------|
| `DSTPlan` (DST-I) | `spectralpde.dst` | Dirichlet (`u = 0`) |
| `DCTPlan` (DCT-I) | `spectralpde.dct` | Neumann (zero normal derivative) |
| `DST2Plan`, `DCT2Plan` (type II) | `spectralpde.dst`, `spectralpde.dct` | Staggered-grid variants |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Transform plans

A plan is built once for a given length. Its `forward` and `inverse` methods
take a sequence of that length and return a new float64 numpy array.

```python
import numpy as np
from spectralpde.dst import DSTPlan, dst1_coefficient
from spectralpde.options import Normalization

plan = DSTPlan(7)
mode = np.array([dst1_coefficient(i, 2, 7) for i in range(7)])
coeffs = plan.forward(mode)      # spike of height (7 + 1) / 2 at index 2
restored = plan.inverse(coeffs)  # back to `mode`

ortho = DSTPlan(9, Normalization.ORTHO)
assert ortho.normalization_factor() == 1.0
```

Every plan has the following members:

- `len(plan)`: the transform length.
- `normalization_factor()`: the scale that the unnormalised forward transform leaves behind. For DST-I it is `(N + 1) / 2`. For DCT-I it is `2 * (N - 1)`. With `Normalization.ORTHO`, and for both type-II plans, it is `1.0`.
- `nbytes()`: the size of the plan's working buffers, as they are counted in bytes.

The normalisation is chosen with `spectralpde.options.Normalization`. `NONE` is
the default. `ORTHO` applies orthonormal scaling.

### One-shot helpers

The one-shot helpers build a plan for you on every call:

- `spectralpde.dst`: `dst1`, `dst1_inverse`, `dst2_forward`, `dst2_inverse`
- `spectralpde.dct`: `dct1`, `dct1_inverse`, `dct2_forward`, `dct2_inverse`

```python
import numpy as np
from spectralpde.dct import dct1, dct1_inverse

x = [1.0, 2.0, 3.0, 4.0]
assert np.allclose(dct1_inverse(dct1(x)), x)
```

The basis functions are available on their own:

- `dst1_coefficient`, `dst2_coefficient` and `dst3_coefficient`
- `dct1_coefficient` and `dct2_coefficient`

## Transforming along one axis of a grid

Grid data lives in a flat, row-major array, where the last axis varies fastest.
`spectralpde.shape.Shape` is a tuple of dimensions with these methods:

- `dim()`: the number of dimensions.
- `size()`: the total element count. It is `0` for an empty shape.
- `n(axis)`: the extent along `axis`. It is `0` for an axis that does not exist.

`spectralpde.lines.forward_lines` and `inverse_lines` apply a plan to every line
parallel to one axis. A float64 array is transformed in place. The transformed
array is returned in every case.

```python
import numpy as np
from spectralpde.dst import DSTPlan
from spectralpde.shape import Shape
from spectralpde.lines import forward_lines, inverse_lines

shape = Shape((8, 6))
data = np.arange(1.0, 49.0)
forward_lines(DSTPlan(8), data, shape, 0)
forward_lines(DSTPlan(6), data, shape, 1)
inverse_lines(DSTPlan(6), data, shape, 1)
inverse_lines(DSTPlan(8), data, shape, 0)
assert np.allclose(data, np.arange(1.0, 49.0))
```

## Solver building blocks

`spectralpde.workspace` provides two pieces for solver code:

- `AxisTransform` is a protocol for transforms that work along one axis of a grid. It requires `forward`, `inverse`, `length` and `normalization_factor`.
- `Workspace` holds a real and a complex numpy buffer. `Workspace.allocate(real_size, complex_size)` creates both buffers filled with zeros. `nbytes()` reports their size, counting 8 bytes per real value and 16 per complex value.

## Errors

Errors are raised as exceptions from `spectralpde.errors`. Both derive from
`TransformError`, which is a `ValueError`.

- `InvalidSizeError` is raised when the plan length is not allowed. DCT-I needs a length of at least 2. The other plans need at least 1.
- `SizeMismatchError` is raised in three cases:
  - an input line does not match the plan's length;
  - the plan does not match the chosen grid axis;
  - the data does not hold `shape.size()` values.

## What this package does not do

This package does not contain a Poisson or Helmholtz solver. It has no way to
build an operator plan, apply eigenvalues, or impose inhomogeneous boundary
data. It also has no periodic (FFT) axis transform that implements
`AxisTransform`. What it provides is the transforms, grid shapes and buffers
that such a solver would be built from.