from deckviewer.models import Note, NoteModel, parse_model_list
from deckviewer.registry import ModelRegistry
from tests.conftest import BASIC_MODEL


def test_registered_under_both_identifiers(basic_model):
    registry = ModelRegistry()
    registry.merge([basic_model])
    assert registry.lookup("uuid-basic") is basic_model
    assert registry.lookup("1342697561") is basic_model
    assert len(registry) == 2
    assert registry.models() == [basic_model]


def test_later_merge_overrides_same_key(basic_model):
    registry = ModelRegistry()
    registry.merge([basic_model])
    override = NoteModel.from_dict({**BASIC_MODEL, "id": None, "name": "Deck Basic"})
    registry.merge([override])
    assert registry.lookup("uuid-basic") is override
    assert registry.lookup("1342697561") is basic_model


def test_merge_is_idempotent(basic_model):
    registry = ModelRegistry()
    registry.merge([basic_model])
    registry.merge([basic_model])
    assert len(registry) == 2


def test_exact_match_only(basic_model):
    registry = ModelRegistry()
    registry.merge([basic_model])
    assert registry.lookup("uuid") is None
    assert registry.lookup("UUID-BASIC") is None
    assert registry.lookup(None) is None


def test_model_without_identifiers_not_registered():
    registry = ModelRegistry()
    registry.merge([NoteModel.from_dict({"name": "Anonymous"})])
    assert len(registry) == 0


def test_resolve_primary_then_secondary(basic_model):
    registry = ModelRegistry()
    registry.merge([basic_model])
    assert registry.resolve(Note(attributes={"note_model_uuid": "uuid-basic"})) is basic_model
    assert registry.resolve(Note(attributes={"note_model_uuid": "nope"}, extra={"note_model_id": 1342697561})) is basic_model
    assert registry.resolve(Note(attributes={"note_model_uuid": "nope"})) is None
    assert registry.resolve(Note()) is None


def test_parse_model_list_skips_bad_entries():
    models = parse_model_list({"note_models": [BASIC_MODEL, "junk", 3]})
    assert [m.name for m in models] == ["Basic"]
    assert parse_model_list([]) == []
    assert parse_model_list({"note_models": None}) == []


def test_model_from_dict_normalizes(basic_model):
    assert basic_model.id == "1342697561"
    assert basic_model.field_names == ["Front", "Back"]
    assert basic_model.first_template.qfmt == '<div class="q">{{Front}}</div>'
    assert NoteModel.from_dict({"name": "Empty"}).first_template is None


def test_non_list_fields_and_templates_read_as_empty():
    models = parse_model_list({"note_models": [{"id": 1, "flds": 5, "tmpls": {"qfmt": "x"}}]})
    assert len(models) == 1
    assert models[0].id == "1"
    assert models[0].field_names == []
    assert models[0].first_template is None
