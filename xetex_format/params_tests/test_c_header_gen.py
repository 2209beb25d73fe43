"""
Unit tests for params/generators/c_header_gen.py.
"""

import io
import unittest

from ..params import REGISTRY
from ..params.schema import GluePar, GlueParKind
from ..params.generators import (
    emit_c_header_stanza, emit_c_header_primitives, emit_c_header, generate_c_header,
)
from ..params.generators.c_header_gen import KIND_COMMANDS, _check_kind_commands


def _render(emit, pars):
    buf = io.StringIO()
    emit(pars, buf)
    return buf.getvalue()


class _FailingStream:
    """Accepts `budget` writes, then raises OSError."""

    def __init__(self, budget):
        self.budget = budget
        self.written = []

    def write(self, s):
        if self.budget == 0:
            raise OSError(28, "No space left on device")
        self.budget -= 1
        self.written.append(s)
        return len(s)


class TestStanza(unittest.TestCase):
    """Tests for emit_c_header_stanza."""

    def test_exact_output_small(self):
        """Identifiers are positional and followed by the count."""
        pars = [
            GluePar("line_skip", GlueParKind.REGULAR),
            GluePar("XeTeX_linebreak_skip", GlueParKind.REGULAR),
            GluePar("thin_mu_skip", GlueParKind.MATH),
        ]
        self.assertEqual(_render(emit_c_header_stanza, pars), (
            "/* Glue (\"skip\") parameters */\n"
            "\n"
            "#define GLUE_PAR__line_skip 0\n"
            "#define GLUE_PAR__xetex_linebreak_skip 1\n"
            "#define GLUE_PAR__thin_mu_skip 2\n"
            "#define GLUE_PARS 3\n"
            "\n"
        ))

    def test_identifiers_follow_input_order(self):
        """Identifiers come from position, not from the registry."""
        pars = list(reversed(REGISTRY.get_latest()))
        lines = [l for l in _render(emit_c_header_stanza, pars).splitlines() if l.startswith("#define GLUE_PAR__")]

        for index, (line, par) in enumerate(zip(lines, pars)):
            self.assertEqual(line, f"#define GLUE_PAR__{par.name.lower()} {index}")

    def test_count_full_registry(self):
        """The count line equals the number of parameters."""
        out = _render(emit_c_header_stanza, REGISTRY.get_latest())
        self.assertIn("#define GLUE_PARS 19\n", out)
        self.assertIn("#define GLUE_PAR__thick_mu_skip 18\n", out)

    def test_empty_input(self):
        """An empty parameter list still emits the count."""
        self.assertEqual(
            _render(emit_c_header_stanza, ()),
            "/* Glue (\"skip\") parameters */\n\n#define GLUE_PARS 0\n\n",
        )


class TestPrimitives(unittest.TestCase):
    """Tests for emit_c_header_primitives."""

    def test_exact_output(self):
        """Rows strip underscores in the name and lowercase the identifier."""
        pars = [
            GluePar("XeTeX_linebreak_skip", GlueParKind.REGULAR),
            GluePar("med_mu_skip", GlueParKind.MATH),
        ]
        self.assertEqual(_render(emit_c_header_primitives, pars), (
            "    { \"XeTeXlinebreakskip\", ASSIGN_GLUE, GLUE_BASE + GLUE_PAR__xetex_linebreak_skip, xf_prim_init_none }, \\\n"
            "    { \"medmuskip\", ASSIGN_MU_GLUE, GLUE_BASE + GLUE_PAR__med_mu_skip, xf_prim_init_none }, \\\n"
        ))

    def test_kind_tags_full_registry(self):
        """Exactly the last three rows use the math glue command."""
        rows = _render(emit_c_header_primitives, REGISTRY.get_latest()).splitlines()

        self.assertEqual(len(rows), 19)
        self.assertTrue(all(", ASSIGN_GLUE," in row for row in rows[:16]))
        self.assertTrue(all(", ASSIGN_MU_GLUE," in row for row in rows[16:]))

    def test_rows_reference_stanza_identifiers(self):
        """Each row refers to the identifier defined for the same parameter."""
        pars = REGISTRY.get_latest()
        stanza = _render(emit_c_header_stanza, pars)
        rows = _render(emit_c_header_primitives, pars).splitlines()

        for row, par in zip(rows, pars):
            ident = f"GLUE_PAR__{par.c_identifier}"
            self.assertIn(f"GLUE_BASE + {ident},", row)
            self.assertIn(f"#define {ident} ", stanza)


class TestKindCommands(unittest.TestCase):
    """Tests for the kind-to-command mapping."""

    def test_mapping_is_total(self):
        """Every GlueParKind has a command."""
        self.assertEqual(set(KIND_COMMANDS), set(GlueParKind))
        _check_kind_commands(KIND_COMMANDS)

    def test_missing_kind_detected(self):
        """A mapping without a kind is rejected."""
        with self.assertRaises(ValueError) as ctx:
            _check_kind_commands({GlueParKind.REGULAR: "ASSIGN_GLUE"})

        self.assertIn("MATH", str(ctx.exception))


class TestDeterminism(unittest.TestCase):
    """Emission is byte-for-byte repeatable."""

    def test_idempotent(self):
        pars = REGISTRY.get_latest()
        for emit in (emit_c_header_stanza, emit_c_header_primitives):
            self.assertEqual(_render(emit, pars), _render(emit, pars))
        self.assertEqual(generate_c_header(pars), generate_c_header(pars))


class TestWriteFailures(unittest.TestCase):
    """Stream errors propagate unchanged."""

    def test_stanza_propagates_oserror(self):
        stream = _FailingStream(budget=3)
        with self.assertRaises(OSError) as ctx:
            emit_c_header_stanza(REGISTRY.get_latest(), stream)

        self.assertEqual(ctx.exception.errno, 28)
        # Partial output is left in place
        self.assertEqual(len(stream.written), 3)

    def test_primitives_propagates_oserror(self):
        stream = _FailingStream(budget=0)
        with self.assertRaises(OSError):
            emit_c_header_primitives(REGISTRY.get_latest(), stream)
        self.assertEqual(stream.written, [])

    def test_closed_stream(self):
        buf = io.StringIO()
        buf.close()
        with self.assertRaises(ValueError):
            emit_c_header_stanza(REGISTRY.get_latest(), buf)


class TestFullHeader(unittest.TestCase):
    """Tests for emit_c_header / generate_c_header."""

    def test_structure(self):
        pars = REGISTRY.get_latest()
        header = generate_c_header(pars, 0)
        lines = header.splitlines()

        self.assertEqual(lines[0], "/* AUTO-GENERATED by xetex_format - Do not edit manually. */")
        self.assertEqual(lines[1], "/* Format version: 0 */")
        self.assertIn("#ifndef TECTONIC_XETEX_FORMAT_H", lines)
        self.assertTrue(header.endswith("\n#endif /* not TECTONIC_XETEX_FORMAT_H */\n"))

        start = lines.index("#define PRIMITIVE_INITIALIZERS \\")
        rows = lines[start + 1:start + 1 + len(pars)]
        self.assertTrue(all(row.endswith(", \\") for row in rows))
        # Blank line ends the macro continuation
        self.assertEqual(lines[start + 1 + len(pars)], "")

    def test_contains_both_blocks(self):
        pars = REGISTRY.get_latest()
        header = generate_c_header(pars)

        self.assertIn("/* Format version: latest */", header)
        self.assertIn(_render(emit_c_header_stanza, pars), header)
        self.assertIn(_render(emit_c_header_primitives, pars), header)

    def test_emit_matches_generate(self):
        pars = REGISTRY.get_for_version(0)
        buf = io.StringIO()
        emit_c_header(pars, buf, 0)
        self.assertEqual(buf.getvalue(), generate_c_header(pars, 0))


if __name__ == "__main__":
    unittest.main()
