from passcheck.variations import VariationOptions, capitalize_first, expand, leet


def test_default_forms():
    assert expand("tiger") == ["tiger", "Tiger", "TIGER"]


def test_mixed_case_input_is_normalized():
    assert expand("mCdOnald") == ["mcdonald", "Mcdonald", "MCDONALD"]


def test_leet_form_added():
    out = expand("test", VariationOptions(leet=True))
    assert "7357" in out
    assert out[-1] == "7357"


def test_capitalize_can_be_disabled():
    out = expand("jane", VariationOptions(capitalize=False))
    assert out == ["jane", "JANE"]


def test_empty_inputs():
    assert expand("") == []
    assert expand([]) == []
    assert expand(["", None]) == []
    assert expand(None) == []
    assert expand(None, VariationOptions(leet=True)) == []


def test_sequence_input_dedupes_in_first_seen_order():
    out = expand(["Doe", "doe", "Ann"])
    assert out == ["doe", "Doe", "DOE", "ann", "Ann", "ANN"]


def test_single_letter_collapses_capitalize_and_upper():
    assert expand("x") == ["x", "X"]


def test_leet_table():
    assert leet("Tiger") == "71g3r"
    assert leet("SASSAFRAS") == "54554fr45"
    assert leet("xyz") == "xyz"


def test_capitalize_first():
    assert capitalize_first("jANE") == "Jane"
    assert capitalize_first("") == ""
