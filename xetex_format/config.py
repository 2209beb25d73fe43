import os, dataclasses

from .         import state, common
from .state    import XFConfig


def load(filepath: str = None) -> XFConfig:
    """ Load a XFConfig from a YAML file. Without an explicit path, the default
        file in the working directory is used if it exists. """
    if filepath is None:
        filepath = common.XF_CONFIG_FILENAME
        if not os.path.isfile(filepath):
            return XFConfig()
    elif not os.path.isfile(filepath):
        raise common.XFException(f'Configuration file "{filepath}" does not exist.')

    d = common.file_load_yaml(filepath)

    if d is None:
        d = {}

    if not isinstance(d, dict):
        raise common.XFException(f'Configuration file "{filepath}" must contain a mapping.')

    known   = [ field.name for field in dataclasses.fields(XFConfig) ]
    unknown = sorted(str(k) for k in d if k not in known)
    if len(unknown) != 0:
        raise common.XFException(
            f'Unknown key(s) {common.format_list_to_string(unknown)} in "{filepath}". '
            f'Allowed keys are {common.format_list_to_string(known)}.'
        )

    version = d.get("version")
    if version is not None and (isinstance(version, bool) or not isinstance(version, int)):
        raise common.XFException(f'"version" in "{filepath}" must be an integer, got {version!r}.')

    output = d.get("output")
    if output is not None and not isinstance(output, str):
        raise common.XFException(f'"output" in "{filepath}" must be a path, got {output!r}.')

    return XFConfig.from_dict(d)


def resolve(args: dict) -> XFConfig:
    """ Merge the configuration file with command-line arguments, which take
        precedence, and install the result as the global configuration. """
    config = load(args.get("config"))

    for field in dataclasses.fields(XFConfig):
        if args.get(field.name) is not None:
            setattr(config, field.name, args[field.name])

    state.gCFG = config

    return config
