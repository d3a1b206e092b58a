"""gbtile: Generate Game Boy 2bpp tile data from images.

Usage: gbtile -i <image> -o <output> [-t header|asm] [options]

The image is cut into 8x8 tiles, reduced to four shades and packed into the
two-bytes-per-row bit-plane layout the Game Boy reads from VRAM. Output is
source text for GBDK (a C array, the default) or RGBDS (a db block).

Quantizers are auto-discovered from gbtile/quantizers/.
Each quantizer module's docstring is its documentation.
Run `gbtile --list-strategies` for a summary.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, gbtile looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import sys

from gbtile import registry
from gbtile.core.env import load_env, settings_from_env
from gbtile.core.errors import GbTileError
from gbtile.core.types import OutputFormat, silent
from gbtile.pipeline import ConvertOptions, encode_file, write_output


def _stderr(message: str) -> None:
    print(f'gbtile: {message}', file=sys.stderr)


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        '  gbtile -i hero.png -o hero.h\n'
        '  gbtile -i hero.png -o hero.s -t asm\n'
        '  gbtile -i font.png -o font.h -s enumeration\n'
        '  gbtile -i map.png -o map.h --strict -v\n'
        '  gbtile -i odd.png -o odd.h --truncate --preview\n'
        '\n'
        'Env vars (set in .env or environment), overridden by flags:\n'
        '  GBTILE_OUTPUT_TYPE, GBTILE_STRATEGY, GBTILE_STRICT, GBTILE_TRUNCATE\n'
    )
    parser = argparse.ArgumentParser(
        prog='gbtile',
        description='Generate GBDK / RGBDS Game Boy tiles from images.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument('-i', '--input', metavar='IMAGE', help='The image to generate tiles from')
    parser.add_argument('-o', '--output', metavar='PATH', help='The output file to generate')
    parser.add_argument(
        '-t',
        '--output-type',
        default=None,
        help="The output type: 'header' (alias gbdk) or 'asm' (alias rgbds). Defaults to 'header'",
    )
    parser.add_argument(
        '-s',
        '--strategy',
        default=None,
        help=f'Quantizer used to pick palette indices (default: {registry.DEFAULT})',
    )
    parser.add_argument(
        '--strict',
        action='store_true',
        help='Fail if the image has more than four distinct colours after rounding',
    )
    parser.add_argument(
        '--truncate',
        action='store_true',
        help='Drop partial tiles at the right/bottom edge instead of failing',
    )
    parser.add_argument('--preview', action='store_true', help='Print an ASCII preview of the quantized tiles')
    parser.add_argument('-v', '--verbose', action='store_true', help='Report progress on stderr')
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('-l', '--list-strategies', action='store_true', help='List available quantizers and exit')
    return parser


def _print_strategies() -> None:
    print('Available quantizers:\n')
    for name, quant in sorted(registry.discover().items()):
        mod = registry.load_module(name)
        doc = (mod.__doc__ or '').strip()
        short = doc.splitlines()[0] if doc else quant.help
        marker = ' (default)' if name == registry.DEFAULT else ''
        print(f'  {name:<14} {short}{marker}')


def _options(args: argparse.Namespace) -> ConvertOptions:
    """Merge flags over environment settings."""
    settings = settings_from_env()
    output_format = OutputFormat.parse(args.output_type) if args.output_type else settings.output_format
    return ConvertOptions(
        output_format=output_format,
        strategy=args.strategy or settings.strategy,
        strict=args.strict or settings.strict,
        truncate=args.truncate or settings.truncate,
    )


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.list_strategies:
        _print_strategies()
        return

    if not args.input or not args.output:
        parser.error('the following arguments are required: -i/--input, -o/--output')

    diagnostics = _stderr if args.verbose else silent

    # Load .env before reading settings; OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        diagnostics(f'loaded {env_path}')

    options = _options(args)
    if options.strategy not in registry.discover():
        print(f'gbtile: error: unknown quantizer: {options.strategy}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(registry.discover()))}', file=sys.stderr)
        sys.exit(1)
    diagnostics(f'{args.input} -> {args.output} ({options.output_format.value}, {options.strategy})')

    try:
        result = encode_file(args.input, options, diagnostics)
        write_output(args.output, result.text)
    except GbTileError as exc:
        print(f'gbtile: error: {exc}', file=sys.stderr)
        sys.exit(1)

    diagnostics(f'wrote {args.output}')
    if args.preview:
        print(result.preview())


if __name__ == '__main__':
    main()
