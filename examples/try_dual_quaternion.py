import math
import numpy as np

from smg.dual import DualQuaternion


def main():
    np.set_printoptions(suppress=True)

    r: DualQuaternion = DualQuaternion.from_axis_angle([0, 0, 1], math.pi / 2)
    t: DualQuaternion = DualQuaternion.from_translation([1, 2, 3])
    q: DualQuaternion = t * r
    print(f"q = {q}")
    print(f"q.apply([1, 0, 0]) = {q.apply([1, 0, 0])}")
    print(f"q.get_translation() = {q.get_translation()}")
    print(q.to_rigid_matrix())

    p: np.ndarray = q.apply([0.5, -1.0, 2.0])
    print(f"Round trip: {q.inverse().apply(p)}")


if __name__ == "__main__":
    main()
