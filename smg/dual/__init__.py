from .dual_algebra import DualAlgebra, TwistedDualAlgebra, ZeroDivisorError
from .float_util import DELTA
from .quaternion import Quaternion
from .split_complex import SplitComplex

from .real import Real
from .complex import Complex
from .hyper import Hyper
from .super import Super
from .perplex import Perplex
from .hamilton import DualQuaternion, Hamilton
from .ultra import Ultra
