"""Tests for the pitch section parser."""

from core.domain.models import HeadingSection, PlainLineSection
from core.services.pitch_parser import parse_pitch, parse_pitch_line


class TestParsePitch:
    def test_headings(self):
        raw = "**Problema:** Pessoas perdem tempo.\n**Solução:** App automatiza."
        assert parse_pitch(raw) == [
            HeadingSection(title="Problema", body="Pessoas perdem tempo."),
            HeadingSection(title="Solução", body="App automatiza."),
        ]

    def test_plain_line(self):
        assert parse_pitch("Apenas uma linha comum.") == [PlainLineSection(text="Apenas uma linha comum.")]

    def test_blank_lines_dropped(self):
        sections = parse_pitch("**A:** x\n\n   \n**B:** y")
        assert sections == [
            HeadingSection(title="A", body="x"),
            HeadingSection(title="B", body="y"),
        ]

    def test_order_preserved_with_mixed_lines(self):
        raw = "Intro\n**Problema:** P\nmeio\n**Solução:** S"
        sections = parse_pitch(raw)
        assert [type(s).__name__ for s in sections] == [
            "PlainLineSection",
            "HeadingSection",
            "PlainLineSection",
            "HeadingSection",
        ]
        assert sections[2] == PlainLineSection(text="meio")

    def test_idempotent(self):
        raw = "**Problema:** a\nlinha\n\n**Chamada para Ação:** b"
        assert parse_pitch(raw) == parse_pitch(raw)

    def test_total_on_degenerate_inputs(self):
        assert parse_pitch("") == []
        assert parse_pitch("   \n\t\n") == []
        assert parse_pitch("no headings\nat all") == [
            PlainLineSection(text="no headings"),
            PlainLineSection(text="at all"),
        ]


class TestParsePitchLine:
    def test_plain_line_kept_verbatim(self):
        assert parse_pitch_line("   indented text  ") == PlainLineSection(text="   indented text  ")

    def test_heading_body_trimmed(self):
        assert parse_pitch_line("**Problema:**    muito espaço   ") == HeadingSection(
            title="Problema", body="muito espaço"
        )

    def test_missing_closing_marker(self):
        assert parse_pitch_line("**Problema: sem fechamento") == PlainLineSection(text="**Problema: sem fechamento")

    def test_unbalanced_marker(self):
        assert parse_pitch_line("**Problema:* texto") == PlainLineSection(text="**Problema:* texto")

    def test_colons_in_content(self):
        assert parse_pitch_line("**Modelo:** SaaS: R$ 10: mensal") == HeadingSection(
            title="Modelo", body="SaaS: R$ 10: mensal"
        )

    def test_first_delimiter_wins(self):
        assert parse_pitch_line("**A:** b:** c") == HeadingSection(title="A", body="b:** c")

    def test_empty_body(self):
        assert parse_pitch_line("**Problema:**") == HeadingSection(title="Problema", body="")

    def test_leading_whitespace_is_not_a_heading(self):
        line = "  **Problema:** x"
        assert parse_pitch_line(line) == PlainLineSection(text=line)
