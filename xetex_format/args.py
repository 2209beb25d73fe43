import argparse

from .common import XF_CONFIG_FILENAME


def parse(argv=None) -> dict:
    parser = argparse.ArgumentParser(
        prog="xetex-format",
        description="""\
Generates the glue parameter section of the XeTeX engine's C header from the \
versioned parameter registry, and lists the parameters known to a format version.""",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parsers = parser.add_subparsers(dest="command")
    parsers.required = True

    generate = parsers.add_parser(name="generate", help="Generate the C header.",              formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    list_    = parsers.add_parser(name="list",     help="List the glue parameters of a format.", formatter_class=argparse.ArgumentDefaultsHelpFormatter)

    def add_common_arguments(p):
        p.add_argument("-v", "--version", metavar="VERSION", type=int, default=None,
                       help="Format version to target. Defaults to the latest format.")
        p.add_argument("-c", "--config",  metavar="CONFIG",  type=str, default=None,
                       help=f"YAML configuration file. Defaults to ./{XF_CONFIG_FILENAME} when present.")

    # === GENERATE ===
    add_common_arguments(generate)
    generate.add_argument("-o", "--output", metavar="OUTPUT", type=str, default=None,
                          help="Header file to write. Defaults to standard output.")
    generate.add_argument(      "--check",  action="store_true", default=False,
                          help="Do not write; fail if OUTPUT is missing or out of date.")

    # === LIST ===
    add_common_arguments(list_)

    return vars(parser.parse_args(argv))
