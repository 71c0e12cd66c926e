import pytest

from yamlglow.lines import YamlLine


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("serviceAccount: hashicorp-consul-server", True),
        ("https://github.com", False),
        ("f:deployment.kubernetes.io/revision: {}", True),
        ('k{"type""Progressing"}:', True),
        ("serviceAccount:hashicorp-consul-server", False),
    ],
)
def test_is_key_value(raw, expected):
    assert YamlLine(raw=raw).is_key_value() is expected


def test_get_key_value():
    line = YamlLine(raw="foo: bar")
    line.is_key_value()
    assert line.key == "foo"
    assert line.value == "bar"


def test_multi_colon_key_uses_last_separator():
    line = YamlLine(raw="f:deployment.kubernetes.io/revision: {}")
    assert line.is_key_value() is True
    assert line.key == "f:deployment.kubernetes.io/revision"
    assert line.value == "{}"


def test_key_without_value():
    line = YamlLine(raw="  metadata:")
    assert line.is_key_value() is True
    assert line.key == "  metadata"
    assert line.value == ""


def test_value_keeps_inner_colons():
    line = YamlLine(raw="image: registry:5000/app")
    assert line.is_key_value() is True
    assert line.key == "image"
    assert line.value == "registry:5000/app"


def test_url_value_is_key_value():
    line = YamlLine(raw="homepage: https://example.com")
    assert line.is_key_value() is True
    assert line.key == "homepage"
    assert line.value == "https://example.com"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("\t#this is a comment", True),
        ("#this is another comment", True),
        ("- this is not a comment", False),
    ],
)
def test_is_comment(raw, expected):
    assert YamlLine(raw=raw).is_comment() is expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("true", True),
        ("false", True),
        ("False", True),
        ("not boolean", False),
    ],
)
def test_value_is_boolean(value, expected):
    assert YamlLine(value=value).value_is_boolean() is expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("657890", True),
        ("123123.12312", True),
        ("127.0.0.1", True),
        ("test not a number", False),
    ],
)
def test_value_is_number_or_ip(value, expected):
    assert YamlLine(value=value).value_is_number_or_ip() is expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2021-03-04T10:20:30+00:00", True),
        ("'8080'", True),
        ("", False),
        ("99999999999999999999", False),
        ("1_000", False),
        ("12 34", False),
    ],
)
def test_value_is_number_edge_cases(value, expected):
    assert YamlLine(value=value).value_is_number_or_ip() is expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        (" ", True),
        ("\n", True),
        ("\t \n", True),
        ("asdasd", False),
    ],
)
def test_is_empty_line(raw, expected):
    assert YamlLine(raw=raw).is_empty_line() is expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("- apple", True),
        ("- -apple", True),
        ("apple", False),
        ("apple-", False),
    ],
)
def test_is_element_of_list(raw, expected):
    assert YamlLine(raw=raw).is_element_of_list() is expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("  foo: bar", 2),
        ("    foo: bar", 4),
        ("foo: bar", 0),
    ],
)
def test_indentation_spaces(raw, expected):
    assert YamlLine(raw=raw).indentation_spaces() == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("something >", True),
        ("|-", True),
        ("something |", True),
        ("something --", False),
    ],
)
def test_value_contains_chomping_indicator(value, expected):
    assert YamlLine(value=value).value_contains_chomping_indicator() is expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("https://github.com", True),
        ("https//github.com", False),
        ("randomValuesNotURL: //6574738:123", False),
    ],
)
def test_is_url(raw, expected):
    assert YamlLine(raw=raw).is_url() is expected