from typing import Union, Tuple
from torch import Tensor

IntOrTensor = Union[int, Tensor]
Sub = Tuple[int, int]
