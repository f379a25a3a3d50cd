"""Data generation and hypothesis testing modules."""

from . import data_generation as data_generation
from . import hypothesis as hypothesis
