"""Behavioral tests for the CardRecord contract.

Scope
-----
- Construction fallback for unsupported card types.
- Silent, chainable setters (valid input stored, invalid input ignored).
- Required-field policy and the ordered `to_array` mapping.
- HTML / XML rendering and the strict `check()` variant.
"""

from __future__ import annotations

import pytest

from multividas_card import CardIncomplete, CardRecord, CardType
from multividas_card.core.contracts.card import REQUIRED_FIELDS

IMAGE = "https://x/i.png"


@pytest.fixture
def complete_card() -> CardRecord:
    """A summary card with every field set."""
    return (
        CardRecord("summary")
        .set_url("https://example.com/post")
        .set_site("@multividas")
        .set_title("  Hello  ")
        .set_description("A short description")
        .set_image(IMAGE)
    )


# ----- Construction ----------------------------------------------------------


@pytest.mark.parametrize("card_type", ["summary", "large", "", None, 5])
def test_card_type_falls_back_to_summary(card_type: object) -> None:
    assert CardRecord(card_type).card is CardType.SUMMARY


def test_default_construction() -> None:
    card = CardRecord()
    assert card.card is CardType.SUMMARY
    assert card.url is None and card.site is None and card.image is None


def test_model_validate_applies_same_fallback() -> None:
    assert CardRecord.model_validate({"card": "player"}).card is CardType.SUMMARY


# ----- Setters ---------------------------------------------------------------


@pytest.mark.parametrize("url", ["http://example.com", "https://example.com/a?b=c"])
def test_valid_urls_are_stored(url: str) -> None:
    card = CardRecord().set_url(url).set_image(url)
    assert card.url == url
    assert card.image == url


@pytest.mark.parametrize("url", ["ftp://x", "not a url", "", "javascript:alert(1)"])
def test_invalid_urls_are_ignored(url: str) -> None:
    card = CardRecord().set_url(url).set_image(url)
    assert card.url is None
    assert card.image is None


def test_invalid_url_keeps_previous_value() -> None:
    card = CardRecord().set_image(IMAGE).set_image("ftp://x")
    assert card.image == IMAGE


def test_title_is_trimmed_and_blank_ignored() -> None:
    assert CardRecord().set_title("  ").title is None
    assert CardRecord().set_title("  Hello  ").title == "Hello"
    assert CardRecord().set_title(123).title is None
    assert CardRecord().set_title("Keep").set_title("   ").title == "Keep"


def test_description_follows_title_rule() -> None:
    assert CardRecord().set_description("\n\t").description is None
    assert CardRecord().set_description(" d ").description == "d"


@pytest.mark.parametrize("username", ["@alice", "alice", "  @alice "])
def test_site_is_normalized(username: str) -> None:
    assert CardRecord().set_site(username).site == "alice"


@pytest.mark.parametrize("username", ["", "@", "   "])
def test_empty_site_is_ignored(username: str) -> None:
    assert CardRecord().set_site(username).site is None


def test_setters_return_same_instance() -> None:
    card = CardRecord()
    assert card.set_url("nope") is card
    assert card.set_title("") is card
    assert card.set_site("") is card


# ----- Required fields & serialization ---------------------------------------


def test_summary_requires_description_and_image() -> None:
    assert REQUIRED_FIELDS[CardType.SUMMARY] == ("description", "image")


def test_missing_image_yields_empty_output() -> None:
    card = CardRecord().set_site("alice").set_title("t").set_description("d")
    assert card.to_array() == {}
    assert card.as_html() == ""
    assert card.as_xml() == ""
    assert card.missing_fields() == ("image",)
    assert not card.is_complete()


def test_missing_description_yields_empty_output() -> None:
    card = CardRecord().set_image(IMAGE)
    assert card.to_array() == {}
    assert card.missing_fields() == ("description",)


def test_to_array_without_site_or_title() -> None:
    card = CardRecord().set_description("d").set_image(IMAGE)
    out = card.to_array()
    assert out == {"card": "summary", "site": "", "description": "d", "image": IMAGE}
    assert list(out) == ["card", "site", "description", "image"]


def test_to_array_full_order(complete_card: CardRecord) -> None:
    out = complete_card.to_array()
    assert list(out) == ["card", "site", "title", "description", "image"]
    assert out["site"] == "multividas"
    assert out["title"] == "Hello"
    assert "url" not in out


def test_to_array_is_deterministic(complete_card: CardRecord) -> None:
    first = complete_card.to_array()
    assert complete_card.to_array() == first
    assert list(complete_card.to_array()) == list(first)


# ----- Rendering ------------------------------------------------------------


def test_as_html(complete_card: CardRecord) -> None:
    assert complete_card.as_html() == (
        '<meta name="multividas:card" description="summary">'
        '<meta name="multividas:site" description="multividas">'
        '<meta name="multividas:title" description="Hello">'
        '<meta name="multividas:description" description="A short description">'
        '<meta name="multividas:image" description="https://x/i.png">'
    )


def test_as_xml_self_closes(complete_card: CardRecord) -> None:
    xml = complete_card.as_xml()
    assert xml.count(" />") == 5
    assert xml.startswith('<meta name="multividas:card" description="summary" />')


def test_unset_site_is_not_rendered() -> None:
    html = CardRecord().set_description("d").set_image(IMAGE).as_html()
    assert "multividas:site" not in html
    assert html.startswith('<meta name="multividas:card" description="summary">')


def test_values_are_escaped_in_markup() -> None:
    card = CardRecord().set_title('Say "hi" & <go>').set_description("d").set_image(IMAGE)
    assert 'description="Say &quot;hi&quot; &amp; &lt;go&gt;"' in card.as_html()


# ----- Strict variant ---------------------------------------------------------


def test_check_ok(complete_card: CardRecord) -> None:
    result = complete_card.check()
    assert result.is_ok()
    assert result.unwrap() == complete_card.to_array()


def test_check_err_names_missing_fields() -> None:
    result = CardRecord().set_title("t").check()
    assert result.is_err()
    problem = result.unwrap_err()
    assert isinstance(problem, CardIncomplete)
    assert problem.missing == ("description", "image")
    assert str(problem) == "summary card is missing: description, image"


# ----- Validation outside the setters ------------------------------------------


def test_keyword_construction_runs_field_rules() -> None:
    card = CardRecord(image="ftp://evil", description="   ", site="@@bob", title="")
    assert card.image is None
    assert card.description is None
    assert card.title is None
    assert card.site == "bob"
    assert card.as_html() == ""


def test_model_validate_runs_field_rules() -> None:
    card = CardRecord.model_validate({"image": "javascript:alert(1)", "description": "d"})
    assert card.image is None
    assert card.to_array() == {}
    assert card.as_html() == ""


def test_model_validate_keeps_valid_values() -> None:
    card = CardRecord.model_validate(
        {"card": "summary", "site": " @alice ", "description": " d ", "image": IMAGE}
    )
    assert card.to_array() == {
        "card": "summary",
        "site": "alice",
        "description": "d",
        "image": IMAGE,
    }


def test_attribute_assignment_is_validated() -> None:
    card = CardRecord().set_image(IMAGE)
    card.image = "ftp://x"
    assert card.image is None
    card.title = "  T  "
    assert card.title == "T"


def test_trimming_keeps_unicode_spaces() -> None:
    """Only ASCII whitespace and NUL are trimmed; NBSP is content."""
    assert CardRecord().set_title("\u00a0Hi\u00a0").title == "\u00a0Hi\u00a0"
    assert CardRecord().set_description("\u2003").description == "\u2003"
    assert CardRecord().set_title("\x00 Hi \x0b").title == "Hi"


def test_url_with_leading_space_is_ignored() -> None:
    card = CardRecord().set_url(" https://x").set_image("https://x/\ni.png")
    assert card.url is None
    assert card.image is None
