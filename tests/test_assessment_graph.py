import uuid

from health_companion.agent.graph import assessment_graph


def _run(**inputs):
    aid = "asm_" + uuid.uuid4().hex
    state = {"assessment_id": aid, "audit": [], **inputs}
    return assessment_graph.invoke(state, config={"configurable": {"thread_id": aid}})


def test_symptom_path_runs_every_node():
    result = _run(input_symptoms=["Fever", "cough"], allergies=["paracetamol"], current_medications=[])
    events = [a["event"] for a in result["audit"]]
    assert events == ["extract.skip", "match.done", "safety.done", "report.done"]

    report = result["report"]
    assert report["source"] == "SYMPTOMS"
    assert report["top_condition"]["name"] == "Common Cold"
    assert [v["medicine"] for v in report["safety"]] == report["top_condition"]["medicines"]
    assert report["stats"] == {"safe": 3, "unsafe": 1, "total": 4}
    assert all(v["is_safe"] for v in report["recommended_medicines"])
    assert report["condition_info"]["name"] == "Common Cold"
    assert len(report["alternatives"]) <= 3


def test_no_match_skips_safety():
    result = _run(input_symptoms=["purple toenails"])
    events = [a["event"] for a in result["audit"]]
    assert "safety.done" not in events
    assert result["report"]["top_condition"] is None
    assert result["report"]["stats"]["total"] == 0


def test_document_path_extracts_symptoms():
    result = _run(input_symptoms=[], document_text="Seen for wheezing and shortness of breath. SpO2 94")
    report = result["report"]
    assert report["source"] == "DOCUMENT"
    assert report["symptoms"] == ["shortness of breath", "wheezing"]
    assert report["top_condition"]["name"] == "Asthma"
    assert report["extraction"]["symptoms"] == report["symptoms"]


def test_share_date_and_audit_use_utc():
    result = _run(input_symptoms=["headache"])
    assert result["audit"][0]["at"].endswith("+00:00")
    date_line = result["report"]["share_text"].splitlines()[1]
    assert date_line.startswith("Date: ") and date_line.endswith(" UTC")
