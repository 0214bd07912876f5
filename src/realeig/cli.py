# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for eigenvalue decompositions.

Usage:
    # Decompose a matrix (pipeline picked by exact symmetry)
    realeig -i matrix.json
    realeig -i matrix.csv --general --format .4f

    # Save the full decomposition as JSON
    realeig -i matrix.json -o evd.json

    # Roots of x^3 - 6x^2 + 11x - 6 (highest degree first)
    realeig --roots 1 -6 11 -6
"""
import argparse
import logging
import sys

from realeig.adapters.csv_io import CsvMatrixReader
from realeig.adapters.json_io import JsonDecompositionWriter, JsonMatrixReader
from realeig.domain.eigen import EigenDecomposition, EigenSolverConfig, eigen_decompose
from realeig.domain.errors import ConvergenceError
from realeig.domain.polynomials import polynomial_roots
from realeig.ports import MatrixReader


def reader_for(path: str) -> MatrixReader:
    """Pick a matrix reader from the file extension (.csv, else JSON)."""
    if path.lower().endswith('.csv'):
        return CsvMatrixReader()
    return JsonMatrixReader()


def run(
    input_path: str,
    output_path: str | None = None,
    is_symmetric: bool | None = None,
    config: EigenSolverConfig | None = None,
) -> EigenDecomposition:
    """Read a matrix, decompose it and optionally write the result."""
    matrix = reader_for(input_path).read_matrix(input_path)
    evd = eigen_decompose(matrix, is_symmetric=is_symmetric, config=config)
    if output_path:
        JsonDecompositionWriter().write_decomposition(evd, output_path)
    return evd


def _format_complex(value: complex, fmt: str) -> str:
    if value.imag == 0.0:
        return format(value.real, fmt)
    sign = '+' if value.imag > 0 else '-'
    return f"{format(value.real, fmt)} {sign} {format(abs(value.imag), fmt)}i"


def main():
    parser = argparse.ArgumentParser(
        description="Eigenvalue decomposition of real square matrices"
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        '--input', '-i',
        help="Path to matrix file (.json nested list, or .csv)"
    )
    source.add_argument(
        '--roots', nargs='+', type=float, metavar='COEF',
        help="Print the roots of a polynomial, coefficients highest degree first"
    )
    parser.add_argument(
        '--output', '-o',
        help="Write the decomposition as JSON to this path"
    )
    pipeline = parser.add_mutually_exclusive_group()
    pipeline.add_argument(
        '--symmetric', dest='is_symmetric', action='store_const', const=True,
        help="Force the symmetric (tridiagonal QL) pipeline"
    )
    pipeline.add_argument(
        '--general', dest='is_symmetric', action='store_const', const=False,
        help="Force the general (Hessenberg/Schur) pipeline"
    )
    parser.add_argument(
        '--format', default='.6g',
        help="Float format spec for printed values (default: .6g)"
    )
    parser.add_argument(
        '--max-ql-iterations', type=int, default=1000,
        help="QL sweeps allowed per eigenvalue (default: 1000)"
    )
    parser.add_argument(
        '--schur-iterations', type=int, default=30,
        help="QR sweeps allowed per matrix order (default: 30)"
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Enable debug logging"
    )

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    try:
        format(1.0, args.format)
    except ValueError:
        parser.error(f"invalid --format spec: {args.format!r}")

    try:
        if args.roots is not None:
            for root in polynomial_roots(args.roots):
                print(_format_complex(root, args.format))
            return

        config = EigenSolverConfig(
            max_ql_iterations=args.max_ql_iterations,
            schur_iterations_per_order=args.schur_iterations,
        )
        evd = run(
            input_path=args.input,
            output_path=args.output,
            is_symmetric=args.is_symmetric,
            config=config,
        )
    except FileNotFoundError as e:
        print(f"Error: input file not found: {e.filename}", file=sys.stderr)
        sys.exit(1)
    except ConvergenceError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(format(evd, args.format))
    print(f"Determinant: {format(evd.determinant(), args.format)}")
    print(f"Rank: {evd.rank()}")
    if args.output:
        print(f"Wrote decomposition to {args.output}")


if __name__ == '__main__':
    main()
