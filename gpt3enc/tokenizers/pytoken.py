"""Python data types for handling tokens."""

import numpy as np
from numpy.typing import NDArray


# The GPT-2/3 vocabulary has 50,257 entries
TokenDtype = np.uint32
NumpyTokenSequence = NDArray[TokenDtype]
