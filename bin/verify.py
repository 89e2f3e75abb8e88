"""
CLI entry point for normal codec verification.

Usage:
    python -m bin.verify --num-random 1000 --seed 42
"""

import argparse
import sys
from typing import List, Optional, Sequence

try:
    from tqdm import tqdm
    from normpack.config import VerifyConfig, load_config
    from normpack.core import pack, unpack
    from normpack.io import known_normals, random_normals, random_packed_words
    from normpack.utils.metrics import count_nan_decodes, vector_eq
except ImportError as e:
    print(f"Error: Required packages not installed: {e}")
    print("Install with: pip install -r requirements.txt")
    sys.exit(1)


def format_vector(v: Sequence[float]) -> str:
    return f"[ {v[0]:g} {v[1]:g} {v[2]:g} ]"


def check_normal(n: Sequence[float], epsilon: float, verbose: bool = True) -> int:
    """
    Round-trips one normal through pack/unpack.

    Returns:
        0 on success, 1 on mismatch
    """
    word = pack(n)
    u = unpack(word)
    ok = vector_eq(n, u, epsilon)

    if verbose:
        prefix = "SUCCESS:" if ok else ">>> FAIL:"
        print(f"{prefix} {format_vector(n)} --> {word} --> {format_vector(u)}")

    return 0 if ok else 1


def run_verification(config: VerifyConfig) -> dict:
    """
    Runs the known-normal, random-normal and optional NaN sweep checks.

    Returns:
        Dictionary with known_errors, random_errors, nan_decodes, swept and errors
    """
    print("=" * 70)
    print("Known normals")
    print("=" * 70)
    known_errors = sum(
        check_normal(n, config.epsilon, config.verbose) for n in known_normals()
    )

    print()
    print("=" * 70)
    seed_label = config.seed if config.seed is not None else "random"
    print(f"Random normals (n={config.num_random}, seed={seed_label})")
    print("=" * 70)
    random_errors = sum(
        check_normal(n, config.epsilon, config.verbose)
        for n in random_normals(config.num_random, seed=config.seed)
    )

    nan_decodes = 0
    swept = 0
    if config.sweep_samples > 0:
        print()
        print("=" * 70)
        print("Packed word sweep")
        print("=" * 70)
        words = random_packed_words(config.sweep_samples, seed=config.seed)
        swept = len(words)
        nan_decodes = count_nan_decodes(tqdm(words, desc="Unpacking"))

    return {
        'known_errors': known_errors,
        'random_errors': random_errors,
        'nan_decodes': nan_decodes,
        'swept': swept,
        'errors': known_errors + random_errors + nan_decodes
    }


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Verify 32-bit normal packing round trips",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Known normals plus 100 random normals
  python -m bin.verify

  # Reproducible run with a NaN sweep over one million packed words
  python -m bin.verify --seed 42 --sweep 1000000

  # Settings from a config file, summary only
  python -m bin.verify --config configs/default.yaml --quiet
"""
    )

    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file (default: built-in settings)"
    )
    parser.add_argument(
        "--num-random",
        type=int,
        default=None,
        help="Number of random normals to test (default: 100)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible runs"
    )
    parser.add_argument(
        "--epsilon",
        type=float,
        default=None,
        help="Per-component tolerance (default: 0.005)"
    )
    parser.add_argument(
        "--sweep",
        type=int,
        default=None,
        help="Number of random packed words to scan for NaN decodes"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only print the summary"
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config).override(
            num_random=args.num_random,
            seed=args.seed,
            epsilon=args.epsilon,
            sweep_samples=args.sweep,
            verbose=False if args.quiet else None
        )
    except (FileNotFoundError, ValueError, TypeError) as e:
        print(f"Error: {e}")
        return 1

    results = run_verification(config)

    print()
    print("=" * 70)
    print("Verification Summary")
    print("=" * 70)
    print(f"Known normals:   {results['known_errors']} failed")
    print(f"Random normals:  {results['random_errors']} failed of {config.num_random}")
    if results['swept']:
        print(f"NaN decodes:     {results['nan_decodes']} of {results['swept']:,} words")
    print()
    print(f"Errors: {results['errors']}")

    return 0 if results['errors'] == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
