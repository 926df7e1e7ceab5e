"""Small example interpolating on integer coordinates."""

# absolute import: also run directly as a file
from pyinterp1d.interpolator import LinearInterpolator


def run_example() -> list[float]:
    interpolator = LinearInterpolator.from_sorted_int([1, 3, 5], [5.0, 3.0, 4.0])
    return [interpolator.interpolate_checked(x) for x in (2, 4)]


def main() -> None:
    print(f"y_interp = {run_example()}")


if __name__ == "__main__":
    main()
