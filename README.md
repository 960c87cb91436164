# dola

`dola` is a small neural network toolkit. It builds fully connected networks
out of individual neurons, and the scalar type they compute in can be 32-bit,
16-bit or 8-bit (E4M3) floating point, so the effect of reduced precision on a
network's output can be looked at directly.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Scalars

`dola.primitives` provides `F32`, `F16` and `F8`, all subclasses of
`FloatScalar`. Every value is rounded to its format when it is created, and
arithmetic (`+`, `-`, `*`, `/`, unary `-`) rounds the result again. Plain
`int` and `float` operands are converted to the scalar's kind; mixing two
different scalar kinds is not allowed. `F8` has no infinities: values out of
range saturate to ±448.

```python
from dola.primitives import F16, F8, round_f8e4m3

x = F16(0.1)
y = x.to(F8)            # convert between formats
print(float(x * x), float(y))
print(round_f8e4m3(3.3))
```

The rounding functions `round_f32`, `round_f16` and `round_f8e4m3` are also
available on their own. `FloatScalar.zero()` and `FloatScalar.random(rng)`
give a zero value and a uniform random value in [0, 1) for a given class;
`max(other)` returns the larger value, or `other` on a tie.

## Building blocks

- `dola.layers.Neuron`: a weighted sum of its inputs plus a bias.
  `Neuron.random(inputs, kind, rng)` draws weights and bias uniformly from
  [0, 1). `sum` raises `ValueError` if the input length does not match.
- `dola.layers.DenseLayer(layer_name, neurons, input_dim, kind, rng)`: a list
  of neurons that each see the whole flattened input. `forward` raises
  `ValueError` when the input length is not the product of `input_dim`;
  `params()` counts weights and biases.
- `dola.activations.Relu`: replaces values that are not positive with zero.
- `dola.activations.SoftMax`: divides each value by the sum of all values.
  No exponential is applied, so the inputs are expected to be non-negative.
- `dola.loss.MeanSquaredError`: `forward(prediction, target)` returns, as a
  float, the single-precision sum of `prediction - target` over paired
  elements. Despite its name it neither squares nor averages.

`dola.calc.Calculator` puts these together: a 784 → 256 → 30 → 30 → 10
network with `Relu` between layers and `SoftMax` at the end, sized for 28×28
grayscale images.

```python
import random
from dola.calc import Calculator
from dola.primitives import F32

net = Calculator(F32, random.Random(0))
print(net.parameter_count())
output = net.forward([F32(0.0)] * 784)
```

## Loading images

`dola.dataloader.ClassificationFolderLoader` reads a folder that holds one
subfolder per class, with `.jpg` images in it (searched recursively). The
name of each image's parent folder is its label; labels are numbered in the
order they are met when the image paths are taken in sorted order.

Each sample is a pair: the image's grayscale pixel values, each divided by
255 twice (so they lie in [0, 1/255]), and a one-hot target with one entry
per label.

```python
from dola.dataloader import ClassificationFolderLoader
from dola.primitives import F32

loader = ClassificationFolderLoader(F32)
loader.load("datasets/train")
print(len(loader), loader.label_count)
loader.shuffle()
for pixels, target in loader:
    ...
```

`get(index)` returns the sample at a position in the current order, or
`None` when the index is out of range. `load` can be called more than once
to add further folders.

## Command line

The `dola` command loads a folder as above and runs every sample through a
freshly initialised `Calculator`, epoch by epoch, printing the dataset size,
the parameter count, and each prediction, target and loss:

```
dola path/to/train
dola path/to/train --epochs 3
```

`--epochs` defaults to 100 and must not be negative. Run `dola --help` to
see all options. The same run is available from Python as
`dola.cli.train(dataset_path, epochs, out)`, which returns the list of loss
values.

## What it does not do

There is no backpropagation or optimiser: weights are set randomly when a
layer is built and never change, so the `dola` command only evaluates the
network, it does not train it. There is no validation pass, and networks
cannot be saved or loaded.