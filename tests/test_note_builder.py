"""End-to-end tests for .brev -> Note conversion."""

import logging

import pytest

from brevity import NoteBuilder, brev_to_html
from brevity.errors import BrevError, InvalidElementError, MalformedMetadataError
from brevity.schemas.settings import ConverterSettings

EXAMPLE_NOTE = (
    "My Note\n"
    'h1 {"color":"#ff0000"} "Hello"\n'
    'text "World"\n'
    'img {"width":10} "https://x/y.png"\n'
)


class TestNoteBuilder:
    def test_example_note(self):
        note = NoteBuilder().convert_text(EXAMPLE_NOTE)
        assert note.title == "My Note"
        assert note.html == (
            '<div><h1 style="font-size:2rem;font-weight:700;color:#ff0000">Hello</h1></div>'
            '<div><span style="font-size:1rem;font-weight:400;color:#ffffff">World</span></div>'
            '<div><img style="width:10rem;" src="https://x/y.png"></div>'
        )

    def test_title_only(self):
        note = NoteBuilder().convert_text("Empty body\n\n")
        assert note.title == "Empty body"
        assert note.html == ""

    def test_whole_number_floats(self):
        note = NoteBuilder().convert_text('T\nh2 {"font-size":3.0,"weight":500} "x"')
        assert 'style="font-size:3rem;font-weight:500;color:#ffffff"' in note.html

    def test_escaped_quotes_in_content(self):
        note = NoteBuilder().convert_text('T\ntext "say \\"cheese\\""')
        assert '>say "cheese"</span>' in note.html

    def test_invalid_color_aborts(self):
        with pytest.raises(InvalidElementError, match="Error, element invalid"):
            NoteBuilder().convert_text('T\nh1 {"color":"javascript:alert(1)"} "Hello"')

    def test_invalid_element_is_fatal_for_whole_note(self):
        text = 'T\ntext "fine"\nquote "nope"\ntext "also fine"'
        with pytest.raises(InvalidElementError) as exc_info:
            NoteBuilder().convert_text(text)
        assert exc_info.value.line_number == 3
        assert exc_info.value.identifier == "quote"

    def test_mistyped_attribute_aborts(self):
        with pytest.raises(BrevError):
            NoteBuilder().convert_text('T\nimg {"width":"10"} "a.png"')

    def test_malformed_metadata_aborts(self):
        with pytest.raises(MalformedMetadataError):
            NoteBuilder().convert_text('T\ntext "a"\nh1 {"color":"red",} "b"')

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            NoteBuilder().convert_text('T\nh9 "x"')

    def test_syntax_error_skipped(self, caplog):
        text = 'T\nh1 "A"\nthis line is wrong\ntext "B"'
        with caplog.at_level(logging.ERROR):
            note = NoteBuilder().convert_text(text)

        assert "this line is wrong" not in note.html
        assert ">A</h1>" in note.html
        assert ">B</span>" in note.html
        assert "Syntax error at line 3" in caplog.text

    def test_content_not_escaped_by_default(self):
        note = NoteBuilder().convert_text('T\ntext "<i>x</i> & y"')
        assert "<i>x</i> & y" in note.html

    def test_escape_content_setting(self):
        builder = NoteBuilder(ConverterSettings(escape_content=True))
        note = builder.convert_text('T\ntext "<i>x</i>"')
        assert "&lt;i&gt;x&lt;/i&gt;" in note.html

    def test_logs_summary(self, caplog):
        with caplog.at_level(logging.INFO, logger="brevity.html_engine.note_builder"):
            NoteBuilder().convert_text('T\ntext "a"\nbad')
        assert "Converted note 'T': 1 elements, 1 skipped" in caplog.text


class TestBrevToHtml:
    def test_convert_file(self, tmp_path):
        f = tmp_path / "note.brev"
        f.write_text(EXAMPLE_NOTE, encoding="utf-8")
        note = brev_to_html(f)
        assert note.title == "My Note"
        assert note.html.count("<div>") == 3

    def test_path_without_suffix(self, tmp_path):
        f = tmp_path / "note"
        f.write_text(EXAMPLE_NOTE, encoding="utf-8")
        assert brev_to_html(f).title == "My Note"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            brev_to_html(tmp_path / "missing.brev")

    def test_with_settings(self, tmp_path):
        f = tmp_path / "note.brev"
        f.write_text('T\ntext "a<b"', encoding="utf-8")
        note = brev_to_html(f, ConverterSettings(escape_content=True))
        assert "a&lt;b" in note.html


def _parse_style(style: str) -> dict[str, str]:
    """Split an inline style attribute into property -> value."""
    props = {}
    for decl in style.split(";"):
        if ":" in decl:
            key, value = decl.split(":", 1)
            props[key.strip()] = value.strip()
    return props


class TestRenderedStructure:
    def test_example_note_structure(self):
        from bs4 import BeautifulSoup

        note = NoteBuilder().convert_text(EXAMPLE_NOTE)
        soup = BeautifulSoup(note.html, "html.parser")

        blocks = soup.find_all("div", recursive=False)
        assert len(blocks) == 3
        h1, span, img = (block.find() for block in blocks)

        assert h1.name == "h1"
        assert h1.get_text() == "Hello"
        assert _parse_style(h1["style"]) == {
            "font-size": "2rem", "font-weight": "700", "color": "#ff0000",
        }

        assert span.name == "span"
        assert span.get_text() == "World"
        assert _parse_style(span["style"]) == {
            "font-size": "1rem", "font-weight": "400", "color": "#ffffff",
        }

        assert img.name == "img"
        assert img["src"] == "https://x/y.png"
        assert _parse_style(img["style"]) == {"width": "10rem"}

    def test_source_order_kept(self):
        from bs4 import BeautifulSoup

        text = 'T\nh3 "c"\nh1 "a"\ntext "d"\nh2 "b"'
        soup = BeautifulSoup(NoteBuilder().convert_text(text).html, "html.parser")
        assert [div.find().name for div in soup.find_all("div")] == ["h3", "h1", "span", "h2"]
