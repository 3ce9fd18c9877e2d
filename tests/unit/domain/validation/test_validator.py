from helperkit.domain.validation import Country, Email, FirstName, Violation, validate, validate_values


def test_validate_single_constraint():
    assert validate("jane@company.fr", Email()) == []
    assert validate("nope", Email()) == [Violation("email.invalid", {"value": "nope"}, "nope")]


def test_validate_collects_every_violation():
    violations = validate("1", [Email(), FirstName()])
    assert [v.message for v in violations] == ["email.invalid", "first_name.invalid"]


def test_validate_values_sets_property_paths():
    violations = validate_values(
        {"firstName": "J", "email": "jane@company.fr"},
        {"firstName": FirstName(), "email": [Email()], "country": Country()},
    )

    assert [(v.property_path, v.message) for v in violations] == [
        ("firstName", "first_name.invalid"),
        ("country", "country.invalid"),
    ]
    assert violations[1].value is None


def test_validate_values_without_violations():
    assert validate_values({"email": "jane@company.fr"}, {"email": Email()}) == []
