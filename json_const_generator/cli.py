import argparse
import os
import sys

from .config import DEFAULT_STYLE, ProjectConfig, available_style_sheets
from .errors import GeneratorError
from .generator import generate, write_generated
from .naming import IdentifierPolicy


def build_parser():
    parser = argparse.ArgumentParser(
        prog='json-const-generator',
        description='Generate constant declarations from a JSON localization file')
    parser.add_argument('dir_path', type=str, help='Directory containing the language files')
    parser.add_argument('lang', type=str, help='Language identifier, the file name without extension (i.e. en_US)')
    parser.add_argument('-o', '--output-dir', type=str, default='.', help='Destination directory of the generated file')
    parser.add_argument('-s', '--style', type=str, default=DEFAULT_STYLE, choices=available_style_sheets(),
                        help='Target language style sheet')
    parser.add_argument('--style-sheet', type=str, default=None, help='Custom style sheet (YAML), overrides --style')
    parser.add_argument('--namespace', type=str, default=None, help='Name of the root namespace (default: lang)')
    parser.add_argument('--substitute-invalid', action='store_true',
                        help='Replace characters that are illegal in identifiers with "_" instead of failing')
    parser.add_argument('--stdout', action='store_true', help='Print the generated code instead of writing a file')
    parser.add_argument('-q', '--quiet', action='store_true', help='Do not print the generated file path')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    config = ProjectConfig(
        style=args.style,
        style_sheet_path=args.style_sheet,
        root_namespace=args.namespace,
        identifier_policy=IdentifierPolicy.SUBSTITUTE if args.substitute_invalid else IdentifierPolicy.REJECT,
    )
    dir_path = os.path.abspath(args.dir_path)

    try:
        if args.stdout:
            sys.stdout.write(generate(dir_path, args.lang, config))
            return 0

        output_path = write_generated(dir_path, args.lang, os.path.abspath(args.output_dir), config)
    except GeneratorError as e:
        print(e, file=sys.stderr)
        return 1
    except OSError as e:
        print(f'[json_const_generator:ERROR] Cannot write output cause {e}', file=sys.stderr)
        return 1

    if not args.quiet:
        print(f'Constants generated: {output_path}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
