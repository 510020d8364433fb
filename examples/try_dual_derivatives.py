import math

from smg.dual import Hyper, Real


def main():
    # First derivatives via dual reals: f(x) = sin(x) * exp(x), f'(x) = (sin(x) + cos(x)) * exp(x).
    for x in [0.0, 0.5, 1.0, 2.0]:
        z: Real = Real(x, 1)
        f: Real = z.sin() * z.exp()
        print(f"x = {x}: f = {f}, expected f' = {(math.sin(x) + math.cos(x)) * math.exp(x)}")

    # Mixed second derivatives via hyper dual numbers: g(x, y) = x^2 y.
    x, y = 1.5, -2.0
    g: Hyper = Hyper(x, 1, 0, 0) * Hyper(x, 1, 0, 0) * Hyper(y, 0, 1, 0)
    print(f"g = {g} (g, dg/dx, dg/dy, d2g/dxdy)")


if __name__ == "__main__":
    main()
