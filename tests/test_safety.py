from health_companion.services.safety import evaluate_safety, safety_stats


def test_allergy_flags_medicine():
    [v] = evaluate_safety(["Aspirin"], ["aspirin"], [])
    assert v.is_safe is False
    assert "allergy" in v.reason.lower()


def test_interaction_with_current_medication():
    [v] = evaluate_safety(["Aspirin"], [], ["Warfarin"])
    assert v.is_safe is False
    assert "Warfarin" in v.reason


def test_no_conflict_is_presumed_safe():
    [v] = evaluate_safety(["Paracetamol"], [], [])
    assert v.is_safe is True
    assert v.price == 2.50
    assert v.category == "Pain Relief"


def test_allergy_substring_both_directions():
    [v] = evaluate_safety(["Amoxicillin"], ["amox"], [])
    assert not v.is_safe
    [v] = evaluate_safety(["Paracetamol"], ["paracetamol 500mg tablets"], [])
    assert not v.is_safe


def test_blank_allergies_never_match():
    [v] = evaluate_safety(["Paracetamol"], ["", "  "], [])
    assert v.is_safe


def test_allergy_checked_before_interaction():
    [v] = evaluate_safety(["Aspirin"], ["Aspirin"], ["Warfarin"])
    assert v.reason == "Allergy detected"


def test_first_partner_in_table_order_is_reported():
    [v] = evaluate_safety(["Warfarin"], [], ["naproxen 250mg", "low dose aspirin"])
    assert v.reason == "Interacts with Aspirin"


def test_interaction_lookup_is_directional():
    # Warfarin lists Ibuprofen, Ibuprofen has no partner list
    [v] = evaluate_safety(["Ibuprofen"], [], ["Warfarin"])
    assert v.is_safe
    [v] = evaluate_safety(["Warfarin"], [], ["Ibuprofen"])
    assert not v.is_safe


def test_unknown_medicine_gets_defaults():
    [v] = evaluate_safety(["Mysteryzine"], [], ["Warfarin"])
    assert v.is_safe
    assert v.price == 10.00
    assert v.category == "Medication"


def test_one_verdict_per_medicine_in_order():
    meds = ["Sertraline", "Paracetamol", "Alprazolam"]
    verdicts = evaluate_safety(meds, [], ["alcohol"])
    assert [v.medicine for v in verdicts] == meds
    assert [v.is_safe for v in verdicts] == [True, True, False]
    assert verdicts[2].reason == "Interacts with Alcohol"


def test_stats():
    verdicts = evaluate_safety(["Aspirin", "Paracetamol", "Insulin"], ["aspirin"], [])
    stats = safety_stats(verdicts)
    assert (stats.safe, stats.unsafe, stats.total) == (2, 1, 3)


def test_safety_is_idempotent():
    args = (["Aspirin", "Metformin"], ["penicillin"], ["Warfarin", "alcohol"])
    assert evaluate_safety(*args) == evaluate_safety(*args)
