#!/usr/bin/env python3

import sys

from . import args, config, state
from .state    import ARG
from .generate import generate
from .params_cmd import list_params
from .common   import XFException
from .printer  import cons


def __run():
    {"generate": generate, "list": list_params}[ARG("command")]()


def main(argv=None):
    try:
        state.gARG = args.parse(argv)
        config.resolve(state.gARG)

        __run()

    except XFException as exc:
        cons.print(f"[bold red]Error[/bold red]: {str(exc)}")
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(1)
    except Exception as exc:
        cons.print_exception()
        cons.print(f"[bold red]ERROR[/bold red]: An unexpected exception occurred: {str(exc)}")
        sys.exit(1)


if __name__ == "__main__":
    main()
