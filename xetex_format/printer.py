import typing

import rich, rich.console, rich.table


class XFPrinter:
    def __init__(self):
        self.raw = rich.console.Console()

    def print(self, msg: typing.Any = None, **kwargs):
        if msg is None:
            msg = ""

        self.raw.print(str(msg), soft_wrap=True, **kwargs)

    def write(self, text: str):
        """ Write text verbatim: no markup, highlighting or wrapping. """
        self.raw.file.write(text)
        self.raw.file.flush()

    def print_table(self, title: str, columns: typing.List[typing.Tuple[str, str]], rows: typing.Iterable[typing.List[str]]):
        table = rich.table.Table(title=title, show_header=True, box=rich.table.box.SIMPLE)
        for header, justify in columns:
            table.add_column(header, justify=justify)

        for row in rows:
            table.add_row(*row)

        self.raw.print(table)

    def print_exception(self):
        self.raw.print_exception()


cons = XFPrinter()
