from deckviewer.models import Note
from deckviewer.templates import apply_template, build_context, render_sides


def test_unknown_placeholder_preserved():
    assert apply_template("Q: {{Front}} / {{Missing}}", {"Front": "2+2"}) == "Q: 2+2 / {{Missing}}"


def test_key_whitespace_trimmed():
    assert apply_template("{{  Front  }}", {"Front": "x"}) == "x"


def test_values_inserted_verbatim():
    context = {"Front": "<b>&amp; \\1 $1</b>"}
    assert apply_template("[{{Front}}]", context) == "[<b>&amp; \\1 $1</b>]"


def test_empty_template():
    assert apply_template("", {"Front": "x"}) == ""
    assert apply_template(None, {"Front": "x"}) == ""


def test_section_syntax_left_alone():
    assert apply_template("{{#Front}}on{{/Front}}", {"Front": "x"}) == "{{#Front}}on{{/Front}}"


def test_front_side_inlines_rendered_front():
    sides = render_sides("X", "before {{FrontSide}} after", {})
    assert sides.back == "before X after"


def test_front_side_uses_rendered_not_raw_front():
    sides = render_sides("<p>{{Front}}</p>", "{{FrontSide}}<hr>{{Back}}", {"Front": "Q", "Back": "A"})
    assert sides.front == "<p>Q</p>"
    assert sides.back == "<p>Q</p><hr>A"


def test_front_side_inlined_everywhere():
    sides = render_sides("F", "{{FrontSide}}|{{FrontSide}}", {})
    assert sides.back == "F|F"


def test_build_context_zips_by_position(basic_model):
    note = Note(fields=["q", "a", "dropped"], tags=["t1", "t2"])
    assert build_context(note, basic_model) == {"Front": "q", "Back": "a", "Tags": "t1 t2"}


def test_build_context_short_note(basic_model):
    context = build_context(Note(fields=["only"]), basic_model)
    assert context == {"Front": "only", "Tags": ""}
    assert apply_template("{{Back}}", context) == "{{Back}}"
