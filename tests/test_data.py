from __future__ import annotations

import json

import pytest

from conftest import make_state, make_subject
from progress_tracker.data import JsonFileStore, SnapshotError, SnapshotParser, serialize_state
from progress_tracker.editing import new_state


def _document(**overrides) -> dict:
    doc = {
        "targetPct": 75,
        "template": [{"name": "Quiz", "max": 10}, {"name": "Exam", "max": 90}],
        "subjects": [
            {"name": "Maths", "assessments": [
                {"name": "Quiz", "max": 10, "score": 8},
                {"name": "Exam", "max": 90, "score": None},
            ]},
        ],
    }
    doc.update(overrides)
    return doc


def test_parse_document() -> None:
    state = SnapshotParser().parse(_document())
    assert state.target_pct == 75
    assert [(t.name, t.max) for t in state.template] == [("Quiz", 10), ("Exam", 90)]
    maths = state.subjects[0]
    assert maths.name == "Maths"
    assert [a.score for a in maths.assessments] == [8, None]


def test_serialized_state_parses_back_to_equal_state() -> None:
    state = make_state(
        make_subject("A", scores=(10, None, 7.5, None, None)),
        make_subject("B"),
        target_pct=85,
    )
    document = json.loads(json.dumps(serialize_state(state)))
    assert SnapshotParser().parse(document) == state


def test_legacy_document_gets_default_template() -> None:
    legacy = {
        "subjects": [
            {"name": "Old", "assessments": [{"score": 12}, {"score": None}, {"score": 9}]},
            {"name": "Empty"},
            {"assessments": [{"score": 5}]},
        ],
    }
    state = SnapshotParser().parse(legacy)
    assert state.target_pct == 70
    assert [t.name for t in state.template] == ["CIA 1", "CIA 2", "CIA 3", "CIA 4", "CP"]
    assert [a.score for a in state.subjects[0].assessments] == [12, None, 9, None, None]
    assert [a.name for a in state.subjects[0].assessments] == ["CIA 1", "CIA 2", "CIA 3", "CIA 4", "CP"]
    assert all(a.is_pending for a in state.subjects[1].assessments)
    assert state.subjects[2].name == "Subject"
    assert state.subjects[2].assessments[0].score == 5

    with pytest.raises(SnapshotError, match=r"subjects\[0\]\.name"):
        SnapshotParser().parse({"subjects": [{"name": 7}]})


def test_target_is_snapped() -> None:
    assert SnapshotParser().parse(_document(targetPct=72)).target_pct == 70
    assert SnapshotParser().parse(_document(targetPct=30)).target_pct == 60


@pytest.mark.parametrize("document, fragment", [
    ([], "JSON object"),
    (_document(targetPct="high"), "targetPct"),
    (_document(subjects={}), "subjects"),
    (_document(template=[{"name": "Quiz", "max": 0}]), "template[0].max"),
    (_document(template=[{"name": "Quiz", "max": "10"}]), "template[0].max"),
    (_document(template=[{"name": 3, "max": 10}]), "template[0].name"),
])
def test_malformed_shapes_are_rejected(document, fragment) -> None:
    with pytest.raises(SnapshotError) as exc:
        SnapshotParser().parse(document)
    assert fragment in str(exc.value)


def test_bad_scores_are_rejected() -> None:
    doc = _document()
    doc["subjects"][0]["assessments"][0]["score"] = True
    with pytest.raises(SnapshotError, match=r"subjects\[0\]\.assessments\[0\]\.score"):
        SnapshotParser().parse(doc)

    doc["subjects"][0]["assessments"][0]["score"] = -1
    with pytest.raises(SnapshotError, match="negative"):
        SnapshotParser().parse(doc)


def test_subjects_out_of_sync_with_template_are_rejected() -> None:
    doc = _document()
    doc["subjects"][0]["assessments"].pop()
    with pytest.raises(SnapshotError, match="template has 2"):
        SnapshotParser().parse(doc)

    doc = _document()
    doc["subjects"][0]["assessments"][1]["name"] = "Final"
    with pytest.raises(SnapshotError, match="does not match"):
        SnapshotParser().parse(doc)


def test_over_max_scores_follow_policy() -> None:
    doc = _document()
    doc["subjects"][0]["assessments"][0]["score"] = 12
    assert SnapshotParser().parse(doc).subjects[0].assessments[0].score == 12
    with pytest.raises(SnapshotError, match="exceeds max"):
        SnapshotParser(allow_over_max=False).parse(doc)


def test_store_load_missing_file_starts_fresh(tmp_path) -> None:
    store = JsonFileStore(tmp_path / "missing.json")
    assert store.load() == new_state()


def test_store_save_then_load(tmp_path) -> None:
    store = JsonFileStore(tmp_path / "nested" / "marks.json")
    state = make_state(make_subject("A", scores=(10, 20, None, None, None)))
    store.save(state)
    assert store.path.exists()
    assert store.load() == state


def test_store_rejects_invalid_json(tmp_path) -> None:
    path = tmp_path / "marks.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(SnapshotError, match="invalid JSON"):
        JsonFileStore(path).load()


def test_store_refuses_to_write_non_finite_scores(tmp_path) -> None:
    store = JsonFileStore(tmp_path / "marks.json")
    good = make_state(make_subject("A", scores=(10, None, None, None, None)))
    store.save(good)

    bad = make_state(make_subject("A", scores=(10, float("inf"), None, None, None)))

    with pytest.raises(ValueError):
        store.save(bad)
    assert store.load() == good
