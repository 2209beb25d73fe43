import typing, dataclasses


@dataclasses.dataclass
class XFConfig:
    version: typing.Optional[int] = None
    output:  typing.Optional[str] = None

    @staticmethod
    def from_dict(d: dict):
        """ Create a XFConfig object from a dictionary whose keys are a subset
            of the fields of XFConfig. Missing keys keep their defaults. """
        r = XFConfig()

        for field in dataclasses.fields(XFConfig):
            if field.name in d:
                setattr(r, field.name, d[field.name])

        return r



gCFG: XFConfig = XFConfig()
gARG: dict     = {}

def ARG(arg: str, dflt = None) -> typing.Any:
    # pylint: disable=global-variable-not-assigned
    global gARG
    if arg in gARG:
        return gARG[arg]
    if dflt is not None:
        return dflt

    raise KeyError(f"{arg} is not an argument.")


def CFG() -> XFConfig:
    # pylint: disable=global-variable-not-assigned
    global gCFG
    return gCFG
