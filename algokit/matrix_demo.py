"""Command that demonstrates the square matrix operations."""

from __future__ import annotations

from collections.abc import Sequence

from .squaremat import SquareMat


def _matrix(values: Sequence[Sequence[float]]) -> SquareMat:
    m = SquareMat(len(values))
    for i, row in enumerate(values):
        for j, value in enumerate(row):
            m[i][j] = value
    return m


def main(argv: Sequence[str] | None = None) -> int:
    """Print the results of every matrix operation on two sample matrices."""
    a = _matrix([[1, 2], [3, 4]])
    b = _matrix([[5, 6], [7, 8]])

    print(f"Matrix A:\n{a}")
    print(f"Matrix B:\n{b}")

    results = [
        ("A + B:", a + b),
        ("A - B:", a - b),
        ("A * B:", a * b),
        ("A * 2.0:", a * 2.0),
        ("2.0 * A:", 2.0 * a),
        ("-A:", -a),
        ("~A (Transpose):", ~a),
        ("A % B (Element-wise multiplication):", a % b),
        ("A % 3 (Modulo scalar):", a % 3),
        ("A / 2.0:", a / 2.0),
        ("A ^ 2:", a ** 2),
    ]
    for title, matrix in results:
        print(f"{title}\n{matrix}")

    print(f"Determinant of A (!A): {a.determinant():g}\n")

    print("Comparisons:")
    comparisons = [
        ("A == B", a == b),
        ("A != B", a != b),
        ("A < B", a < b),
        ("A <= B", a <= b),
        ("A > B", a > b),
        ("A >= B", a >= b),
    ]
    for label, outcome in comparisons:
        print(f"{label}: {int(outcome)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())