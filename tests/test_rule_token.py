from fast_validator.core.rule_token import RuleToken, parse_rules


def test_parse_name_and_parameters():
    assert RuleToken.parse("between:1, 5") == RuleToken("between", ("1", "5"))


def test_parse_without_parameters():
    assert RuleToken.parse("required") == RuleToken("required", ())


def test_parse_splits_on_first_colon_only():
    assert RuleToken.parse("regex:^a:b$") == RuleToken("regex", ("^a:b$",))


def test_parse_rules_from_string():
    assert parse_rules("required|in:a,b") == [
        RuleToken("required"),
        RuleToken("in", ("a", "b")),
    ]


def test_parse_rules_from_sequence():
    tokens = parse_rules(["required", RuleToken("min", ("3",))])
    assert tokens == [RuleToken("required"), RuleToken("min", ("3",))]


def test_malformed_declarations_give_empty_names():
    assert [t.name for t in parse_rules("required|")] == ["required", ""]
    assert [t.name for t in parse_rules("")] == [""]


def test_str_roundtrips_declaration():
    assert str(RuleToken.parse("between:1,5")) == "between:1,5"
    assert str(RuleToken("required")) == "required"
