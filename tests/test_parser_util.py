"""Unit tests for parsing raw input into domain values."""

import pytest

from addressbook.application import (
    MESSAGE_INVALID_INDEX,
    parse_address,
    parse_email,
    parse_index,
    parse_insurances,
    parse_name,
    parse_name_keywords,
    parse_phone,
    parse_priority,
    parse_remark,
    parse_tag,
    parse_tags,
)
from addressbook.domain import (
    EMPTY_ADDRESS,
    Email,
    Index,
    Insurance,
    Name,
    NameContainsKeywordsPredicate,
    NonEmptyAddress,
    NullInputError,
    Phone,
    Priority,
    Remark,
    Tag,
    ValidationError,
)

WHITESPACE = " \t\r\n"


def test_parse_index_zero_is_invalid() -> None:
    with pytest.raises(ValidationError) as exc:
        parse_index("0")
    assert exc.value.message == MESSAGE_INVALID_INDEX


@pytest.mark.parametrize("raw", ["", "  ", "10 a", "-1", "+1", "1.5", "2147483648"])
def test_parse_index_invalid(raw: str) -> None:
    with pytest.raises(ValidationError, match="non-zero unsigned integer"):
        parse_index(raw)


def test_parse_index_trims_and_converts_to_zero_based() -> None:
    index = parse_index(" 3 ")
    assert index.one_based == 3
    assert index.zero_based == 2
    assert parse_index("1") == Index.from_zero_based(0)


def test_parse_index_none_raises() -> None:
    with pytest.raises(NullInputError):
        parse_index(None)


def test_parse_phone_valid() -> None:
    phone = parse_phone("93121534")
    assert phone == Phone("93121534")
    assert str(phone) == "93121534"


def test_parse_phone_trims_whitespace() -> None:
    assert parse_phone(WHITESPACE + "93121534" + WHITESPACE) == Phone("93121534")


@pytest.mark.parametrize("raw", ["9312 1534", "+6589562314"])
def test_parse_phone_invalid_uses_phone_message(raw: str) -> None:
    with pytest.raises(ValidationError) as exc:
        parse_phone(raw)
    assert exc.value.message == Phone.MESSAGE_CONSTRAINTS


@pytest.mark.parametrize(
    "parse",
    [parse_name, parse_phone, parse_email, parse_remark, parse_tag, parse_priority, parse_tags, parse_insurances],
)
def test_parse_none_raises_null_input(parse) -> None:
    with pytest.raises(NullInputError):
        parse(None)


def test_parse_name() -> None:
    assert parse_name(WHITESPACE + "Rachel Walker" + WHITESPACE) == Name("Rachel Walker")
    with pytest.raises(ValidationError) as exc:
        parse_name("R@chel")
    assert exc.value.message == Name.MESSAGE_CONSTRAINTS


def test_parse_email() -> None:
    assert parse_email(" rachel@example.com ") == Email("rachel@example.com")
    with pytest.raises(ValidationError) as exc:
        parse_email("example.com")
    assert exc.value.message == Email.MESSAGE_CONSTRAINTS


def test_parse_address_none_gives_empty_address() -> None:
    assert parse_address(None) is EMPTY_ADDRESS


def test_parse_address_empty_string_is_invalid() -> None:
    with pytest.raises(ValidationError) as exc:
        parse_address("")
    assert exc.value.message == NonEmptyAddress.MESSAGE_CONSTRAINTS


def test_parse_address_trims() -> None:
    assert parse_address("  123 Main Street #0505  ") == NonEmptyAddress("123 Main Street #0505")


def test_parse_remark_allows_empty() -> None:
    assert parse_remark("   ") == Remark("")
    assert parse_remark(" Met at conference ") == Remark("Met at conference")


def test_parse_priority() -> None:
    assert parse_priority(" high ") == Priority("high")
    with pytest.raises(ValidationError) as exc:
        parse_priority("urgent")
    assert exc.value.message == Priority.MESSAGE_CONSTRAINTS


def test_parse_tag() -> None:
    assert parse_tag(" friend ") == Tag("friend")
    with pytest.raises(ValidationError, match="Tags names should be alphanumeric"):
        parse_tag("#friend")


def test_parse_tags_collapses_duplicates() -> None:
    assert parse_tags(["friend", " friend ", "neighbour"]) == {Tag("friend"), Tag("neighbour")}


def test_parse_tags_empty_collection() -> None:
    assert parse_tags([]) == set()


def test_parse_tags_first_invalid_aborts() -> None:
    consumed = []

    def raw_tags():
        for raw in ["friend", "#bad", "neighbour"]:
            consumed.append(raw)
            yield raw

    with pytest.raises(ValidationError) as exc:
        parse_tags(raw_tags())
    assert exc.value.message == Tag.MESSAGE_CONSTRAINTS
    assert consumed == ["friend", "#bad"]


def test_parse_insurances() -> None:
    assert parse_insurances(["Shield", "Shield ", "Life Plus"]) == {Insurance("Shield"), Insurance("Life Plus")}
    with pytest.raises(ValidationError) as exc:
        parse_insurances(["Shield", ""])
    assert exc.value.message == Insurance.MESSAGE_CONSTRAINTS


def test_parse_name_keywords_splits_on_whitespace() -> None:
    predicate = parse_name_keywords("  alice \t bob  ")
    assert predicate == NameContainsKeywordsPredicate(("alice", "bob"))


def test_parse_name_keywords_never_validates() -> None:
    assert parse_name_keywords("#$%").keywords == ("#$%",)
    assert parse_name_keywords("").keywords == ()
