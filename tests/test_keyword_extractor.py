from app.models.schemas import UserJourney
from app.services.keyword_extractor import extract_keywords, journey_text


def test_empty_text_has_no_keywords():
    assert extract_keywords("") == set()


def test_punctuation_short_words_and_stop_words_are_dropped():
    keywords = extract_keywords("The user can Add-to-cart, then pay with a CARD!")

    assert keywords == {"add", "cart", "then", "pay", "card"}


def test_keywords_are_deduplicated():
    assert extract_keywords("login Login LOGIN login.") == {"login"}


def test_each_keyword_extracts_to_itself():
    keywords = extract_keywords("Checkout flow: review order #42, enter payment details & confirm (v2)")

    assert keywords
    for keyword in keywords:
        assert extract_keywords(keyword) == {keyword}


def test_journey_text_joins_name_description_and_steps():
    journey = UserJourney(name="Checkout", description="Buy things", steps=["Add to cart", "Pay"])

    assert journey_text(journey) == "Checkout Buy things Add to cart Pay"
